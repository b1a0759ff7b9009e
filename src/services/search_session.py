"""Search session — the presentation state for one user's searches.

Each search gets a monotonically increasing request id. When lookups
overlap and resolve out of order, only the latest request's outcome is
applied; older results are dropped instead of overwriting newer ones.
"""

import itertools
import logging
import random

from domain.model.errors import NetworkError
from domain.model.messages import RANDOM_ENGLISH_WORDS
from domain.model.search import SearchOutcome, SearchState
from services.dictionary_service import DictionaryService, failure_outcome

logger = logging.getLogger(__name__)


class SearchSession:
    """Holds the latest resolved search state for a single presentation surface.

    Exactly one of {loading, error, result, initial placeholder} is shown at
    any time: `state` is FETCHING while the latest request is in flight,
    a terminal state once it resolves, and IDLE before the first search.
    """

    def __init__(self, service: DictionaryService):
        self.service = service
        self._ids = itertools.count(1)
        self._latest_id = 0
        self.state: SearchState = SearchState.IDLE
        self.outcome: SearchOutcome | None = None
        self.current_word: str = ""

    @property
    def is_loading(self) -> bool:
        return self.state is SearchState.FETCHING

    async def search(self, word: str) -> SearchOutcome | None:
        """Run a search and apply its outcome if it is still the latest.

        Returns:
            The applied outcome, or None when a newer search superseded it.
        """
        request_id = next(self._ids)
        self._latest_id = request_id
        self.current_word = word.strip()
        self.state = SearchState.FETCHING
        self.outcome = None

        try:
            outcome = await self.service.lookup(word)
        except Exception as e:
            logger.error("Search failed unexpectedly", extra={
                "word": self.current_word, "request_id": request_id, "error": str(e),
            }, exc_info=True)
            outcome = failure_outcome(NetworkError(str(e)), word.strip())

        if request_id != self._latest_id:
            logger.info("Dropping stale search result", extra={
                "word": outcome.word, "request_id": request_id, "latest_id": self._latest_id,
            })
            return None

        self.state = outcome.state
        self.outcome = outcome
        return outcome

    async def search_random(self, rng: random.Random | None = None) -> SearchOutcome | None:
        """Search a randomly chosen word from the built-in list."""
        word = (rng or random).choice(RANDOM_ENGLISH_WORDS)
        return await self.search(word)
