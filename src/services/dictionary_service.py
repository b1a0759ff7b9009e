"""Dictionary lookup service — orchestrates one search.

Pipeline: blank check → Dictionary API (single attempt) → HTTP status
classification → payload classification → entry merge.

Every failure is classified into a LookupFailure and returned as a
SearchOutcome carrying an ErrorRecord; nothing is retried or raised to
the caller.
"""

import logging

from domain.model.entry import CanonicalEntry
from domain.model.errors import (
    ApiError,
    BlankQueryError,
    LookupFailure,
    NetworkError,
    NoDefinitionFoundError,
    WordNotFoundError,
)
from domain.model.search import SearchOutcome, SearchState
from port.dictionary import DictionaryPort, DictionaryResponse, DictionaryTransportError
from services.entry_merge import PayloadKind, build_canonical_entry, classify_payload

logger = logging.getLogger(__name__)


def failure_outcome(failure: LookupFailure, word: str) -> SearchOutcome:
    """Terminal outcome carrying the failure's ErrorRecord."""
    return SearchOutcome(
        state=failure.state,
        word=word,
        error=failure.to_record(word),
        status_code=getattr(failure, "status_code", None),
    )


class DictionaryService:
    """Looks a word up through a DictionaryPort and merges the result."""

    def __init__(self, dictionary: DictionaryPort):
        self.dictionary = dictionary

    async def lookup(self, word: str) -> SearchOutcome:
        """Search for a word. Always returns a terminal SearchOutcome."""
        trimmed = word.strip()
        try:
            entry = await self._resolve(trimmed)
        except LookupFailure as e:
            logger.info("Dictionary lookup failed", extra={
                "word": trimmed, "state": e.state.value, "error_type": type(e).__name__,
            })
            return failure_outcome(e, trimmed)

        logger.info("Dictionary lookup successful", extra={
            "word": trimmed,
            "meaning_count": len(entry.meanings),
            "phonetic_count": len(entry.phonetics),
        })
        return SearchOutcome.success(trimmed, entry)

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    async def _resolve(self, word: str) -> CanonicalEntry:
        if not word:
            raise BlankQueryError("Blank search term")

        try:
            response = await self.dictionary.fetch(word)
        except DictionaryTransportError as e:
            raise NetworkError(str(e)) from e
        except Exception as e:
            logger.error("Unexpected error from dictionary port",
                         extra={"word": word, "error": str(e)}, exc_info=True)
            raise NetworkError(str(e)) from e

        self._check_status(response)
        return self._merge_payload(response.payload)

    @staticmethod
    def _check_status(response: DictionaryResponse) -> None:
        if response.is_success:
            return
        if response.status_code == 404:
            raise WordNotFoundError("Dictionary API returned 404")
        raise ApiError(response.status_code)

    @staticmethod
    def _merge_payload(payload) -> CanonicalEntry:
        classified = classify_payload(payload)

        if classified.kind is PayloadKind.EXPLICIT_NOT_FOUND:
            raise WordNotFoundError("Dictionary API reported no definitions")
        if classified.kind is PayloadKind.MALFORMED_SHAPE:
            logger.warning("Unexpected response shape from Free Dictionary API",
                           extra={"type": type(payload).__name__})
            raise NoDefinitionFoundError(SearchState.MALFORMED)
        if classified.kind is PayloadKind.EMPTY_LIST:
            raise NoDefinitionFoundError(SearchState.EMPTY)

        try:
            return build_canonical_entry(classified.entries)
        except ValueError as e:
            logger.warning("Entry list had no mergeable entries", extra={"error": str(e)})
            raise NoDefinitionFoundError(SearchState.MALFORMED) from e
