"""In-memory implementation of DictionaryPort for testing."""

import asyncio
from typing import Any

from port.dictionary import DictionaryResponse, DictionaryTransportError


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns preconfigured responses.

    `payload`/`status_code` answer every word unless `responses` has a
    per-word DictionaryResponse. `error` is raised instead of answering.
    `delays` holds per-word sleeps used to reorder concurrent lookups.
    """

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        responses: dict[str, DictionaryResponse] | None = None,
        error: Exception | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.payload = payload
        self.status_code = status_code
        self.responses = responses or {}
        self.error = error
        self.delays = delays or {}
        self.last_word: str | None = None
        self.calls: list[str] = []

    async def fetch(self, word: str) -> DictionaryResponse:
        self.last_word = word
        self.calls.append(word)
        delay = self.delays.get(word)
        if delay:
            await asyncio.sleep(delay)
        if self.error is not None:
            if isinstance(self.error, DictionaryTransportError):
                raise self.error
            raise DictionaryTransportError(str(self.error)) from self.error
        if word in self.responses:
            return self.responses[word]
        return DictionaryResponse(status_code=self.status_code, payload=self.payload)
