"""Health check endpoint."""

from datetime import datetime, timezone
from fastapi import APIRouter

from adapter.external.free_dictionary import FREE_DICTIONARY_API_BASE_URL

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    """Liveness check.

    The upstream dictionary API is not called here: each search already makes
    exactly one request and surfaces failures itself.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {
            "dictionary_api": {"base_url": FREE_DICTIONARY_API_BASE_URL},
        },
    }
