"""Dictionary API routes for word definitions.

Each request performs one lookup against the Free Dictionary API and
returns either a one-element list holding the merged canonical entry, or
a structured error record.

Endpoints:
- GET /dictionary/search: Look up a word
- GET /dictionary/random: Look up a random word from the built-in list
"""

import logging
import random

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api.dependencies import get_dictionary_service
from api.models import EntryResponse, ErrorResponse
from domain.model.messages import RANDOM_ENGLISH_WORDS
from domain.model.search import SearchOutcome, SearchState
from services.dictionary_service import DictionaryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])

# HTTP status for each failed search state
_ERROR_STATUS = {
    SearchState.BLANK_QUERY: 400,
    SearchState.NOT_FOUND: 404,
    SearchState.EMPTY: 404,
    SearchState.MALFORMED: 404,
    SearchState.HTTP_ERROR: 502,
    SearchState.NETWORK_ERROR: 503,
}

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Blank search term"},
    404: {"model": ErrorResponse, "description": "Word or definition not found"},
    502: {"model": ErrorResponse, "description": "Dictionary API error"},
    503: {"model": ErrorResponse, "description": "Dictionary API unreachable"},
}


def _to_response(outcome: SearchOutcome):
    """Map a terminal SearchOutcome to an HTTP response."""
    if outcome.ok:
        return [EntryResponse.from_domain(outcome.entry)]

    status_code = _ERROR_STATUS.get(outcome.state, 500)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.from_domain(outcome.error).model_dump(),
    )


@router.get("/search", response_model=list[EntryResponse], responses=_ERROR_RESPONSES)
async def search_word(
    word: str = Query("", description="Word to look up"),
    service: DictionaryService = Depends(get_dictionary_service),
):
    """Look up a word and return its merged canonical entry.

    Args:
        word: Word to search. Leading/trailing whitespace is ignored.
        service: Dictionary lookup service.

    Returns:
        One-element list with the canonical entry, or an ErrorResponse.
    """
    outcome = await service.lookup(word)
    return _to_response(outcome)


@router.get("/random", response_model=list[EntryResponse], responses=_ERROR_RESPONSES)
async def search_random_word(
    service: DictionaryService = Depends(get_dictionary_service),
):
    """Look up a random word ("I'm feeling lucky")."""
    word = random.choice(RANDOM_ENGLISH_WORDS)
    logger.info("Random word selected", extra={"word": word})
    outcome = await service.lookup(word)
    return _to_response(outcome)
