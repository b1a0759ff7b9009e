"""Free Dictionary API adapter.

Implements DictionaryPort by fetching entries from the Free Dictionary API
(dictionaryapi.dev). One request per lookup; no retry and no caching.

API Documentation: https://dictionaryapi.dev
"""

import logging
import os
from urllib.parse import quote

import httpx

from port.dictionary import DictionaryResponse, DictionaryTransportError

logger = logging.getLogger(__name__)

FREE_DICTIONARY_API_BASE_URL = os.getenv(
    "DICTIONARY_API_BASE_URL", "https://api.dictionaryapi.dev/api/v2/entries/en",
)


def _timeout_from_env() -> float | None:
    """Read the optional fetch timeout. Unset means wait for the transport."""
    raw = os.getenv("DICTIONARY_API_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid DICTIONARY_API_TIMEOUT_SECONDS", extra={"value": raw})
        return None


API_TIMEOUT_SECONDS = _timeout_from_env()


class FreeDictionaryAdapter:
    """Adapter that fetches dictionary entries from the Free Dictionary API."""

    def __init__(
        self,
        base_url: str = FREE_DICTIONARY_API_BASE_URL,
        timeout: float | None = API_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def build_url(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"

    async def fetch(self, word: str) -> DictionaryResponse:
        """Fetch raw entries for a word.

        Args:
            word: The already-trimmed word to look up.

        Returns:
            DictionaryResponse with the status code and parsed JSON body.

        Raises:
            DictionaryTransportError: If no response was received, the
                request could not be built, or a 2xx body is not JSON.
        """
        try:
            url = self.build_url(word)
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            logger.warning(
                "Free Dictionary API request error",
                extra={"word": word, "error_type": type(e).__name__},
            )
            raise DictionaryTransportError(str(e)) from e
        except Exception as e:
            logger.error(
                "Unexpected error calling Free Dictionary API",
                extra={"word": word, "error": str(e)},
                exc_info=True,
            )
            raise DictionaryTransportError(str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(
                "Free Dictionary API returned a non-JSON body",
                extra={"word": word, "status_code": response.status_code},
            )
            # A 2xx that cannot be read is a transport failure; error statuses keep their code
            if response.is_success:
                raise DictionaryTransportError("Response body is not valid JSON") from e
            payload = None

        logger.debug(
            "Free Dictionary API responded",
            extra={"word": word, "status_code": response.status_code},
        )
        return DictionaryResponse(status_code=response.status_code, payload=payload)
