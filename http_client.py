# -----------------------------------------------------------
# http_client.py
# -----------------------------------------------------------
# Outbound HTTP client management for the user-fetch service
# Uses httpx.AsyncClient, one per request
# -----------------------------------------------------------

from typing import AsyncGenerator
import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Client Dependency for FastAPI
# ---------------------------------------------------------------------

async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    FastAPI dependency that provides an outbound HTTP client.

    Usage in routes:
        @router.get("/users/{user_id}")
        async def get_user(user_id: int, client: httpx.AsyncClient = Depends(get_http_client)):
            return await UserFetcher(client).fetch_user(user_id)
    """
    async with httpx.AsyncClient(timeout=settings.sample.timeout) as client:
        logger.debug(f"HTTP client opened (timeout={settings.sample.timeout}s)")
        yield client
