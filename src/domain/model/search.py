"""Search lifecycle value objects: state, error record, and outcome."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from domain.model.entry import CanonicalEntry


class SearchState(str, Enum):
    """Per-search state.

    IDLE -> FETCHING -> one terminal state -> IDLE on the next search.
    """
    IDLE = "idle"
    FETCHING = "fetching"
    SUCCESS = "success"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    BLANK_QUERY = "blank_query"

    @property
    def is_terminal(self) -> bool:
        return self not in (SearchState.IDLE, SearchState.FETCHING)


Severity = Literal["warning", "error"]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured failure handed to the presentation layer."""
    title: str
    message: str
    severity: Severity = "error"


@dataclass(frozen=True)
class SearchOutcome:
    """Terminal result of one search: either entries or an error, never both."""
    state: SearchState
    word: str
    entries: tuple[CanonicalEntry, ...] | None = None
    error: ErrorRecord | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.state is SearchState.SUCCESS

    @property
    def entry(self) -> CanonicalEntry | None:
        return self.entries[0] if self.entries else None

    @classmethod
    def success(cls, word: str, entry: CanonicalEntry) -> "SearchOutcome":
        return cls(state=SearchState.SUCCESS, word=word, entries=(entry,))
