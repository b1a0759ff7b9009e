"""Dictionary port — outbound interface for the dictionary data source."""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class DictionaryResponse:
    """HTTP-level answer from the dictionary source.

    payload is the parsed JSON body, or None when the body was not JSON.
    """
    status_code: int
    payload: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class DictionaryTransportError(Exception):
    """No response was received (connection refused, DNS failure, timeout...)."""


class DictionaryPort(Protocol):
    """Port for fetching raw dictionary entries.

    fetch() makes a single attempt and never retries. Non-2xx statuses are
    returned, not raised; only transport-level failures raise
    DictionaryTransportError.
    """

    async def fetch(self, word: str) -> DictionaryResponse: ...
