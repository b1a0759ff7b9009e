"""Domain-level exceptions.

The lookup service raises these errors to express why a search produced
no canonical entry. They are converted to ErrorRecord values before they
reach the presentation layer; route handlers map them to HTTP status codes.
"""

from abc import ABC, abstractmethod

from domain.model import messages
from domain.model.search import ErrorRecord, SearchState


class DomainError(Exception):
    """Base class for all domain errors."""


class LookupFailure(DomainError, ABC):
    """A classified search failure that is surfaced verbatim to the caller."""

    state: SearchState = SearchState.NOT_FOUND
    severity: str = "error"

    @abstractmethod
    def title(self, word: str) -> str: ...

    @abstractmethod
    def message(self, word: str) -> str: ...

    def to_record(self, word: str) -> ErrorRecord:
        return ErrorRecord(
            title=self.title(word),
            message=self.message(word),
            severity=self.severity,
        )


class BlankQueryError(LookupFailure):
    """Search term is empty or whitespace-only."""

    state = SearchState.BLANK_QUERY
    severity = "warning"

    def title(self, word: str) -> str:
        return messages.ENTER_WORD_TITLE

    def message(self, word: str) -> str:
        return messages.ENTER_WORD


class WordNotFoundError(LookupFailure):
    """HTTP 404, or the explicit "No Definitions Found" payload."""

    state = SearchState.NOT_FOUND

    def title(self, word: str) -> str:
        return messages.WORD_NOT_FOUND_TITLE

    def message(self, word: str) -> str:
        return messages.word_not_found(word)


class NoDefinitionFoundError(LookupFailure):
    """Empty entry list, or an error payload that is not recognized."""

    def __init__(self, state: SearchState = SearchState.EMPTY):
        self.state = state
        super().__init__("No definition found")

    def title(self, word: str) -> str:
        return messages.NO_DEFINITION_FOUND_TITLE

    def message(self, word: str) -> str:
        return messages.no_definition_found(word)


class ApiError(LookupFailure):
    """Dictionary service answered with a non-2xx status other than 404."""

    state = SearchState.HTTP_ERROR

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Dictionary API returned status {status_code}")

    def title(self, word: str) -> str:
        return messages.api_error_title(self.status_code)

    def message(self, word: str) -> str:
        return messages.api_error(self.status_code)


class NetworkError(LookupFailure):
    """No response was received from the dictionary service."""

    state = SearchState.NETWORK_ERROR

    def title(self, word: str) -> str:
        return messages.NETWORK_ERROR_TITLE

    def message(self, word: str) -> str:
        return messages.NETWORK_ERROR
