# -----------------------------------------------------------
# app/routes/users.py
# -----------------------------------------------------------
# JSON passthrough of external user records
# -----------------------------------------------------------

from fastapi import APIRouter, Depends, HTTPException
import httpx
import json
import logging

from http_client import get_http_client
from app.services.api_client import UserFetcher, UserFetchError

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.get("/{user_id}")
async def get_user(user_id: int, client: httpx.AsyncClient = Depends(get_http_client)):
    """
    Return the external user record as-is.
    Upstream 4xx/5xx keep their status code, anything else is a 502.
    """
    try:
        return await UserFetcher(client).fetch_user(user_id)
    except UserFetchError as e:
        logger.warning(f"User API failed for user {user_id}: {e}")
        status_code = e.status_code if 400 <= e.status_code < 600 else 502
        raise HTTPException(status_code=status_code, detail=str(e))
    except httpx.RequestError as e:
        logger.error(f"User API unreachable for user {user_id}: {e!r}")
        raise HTTPException(status_code=503, detail="User service unavailable")
    except json.JSONDecodeError as e:
        logger.warning(f"User API sent invalid JSON for user {user_id}: {e}")
        raise HTTPException(status_code=502, detail="User service returned invalid JSON")
