# -----------------------------------------------------------------
# admin.py
# -----------------------------------------------------------------
# Router structure for "Admin" functions
# -----------------------------------------------------------------

from pathlib import Path
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
import httpx

from http_client import get_http_client
from app.services.api_client import UserFetcher, UserFetchError

# We need to tell the router where the templates are
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

# Create router instance
router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger(__name__)


@router.get("/test-fetch", response_class=HTMLResponse)
async def test_fetch(
    request: Request,
    user_id: int = 1,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    FastAPI sees 'user_id' in the URL query string and converts it to integer
    """
    try:
        user_data = await UserFetcher(client).fetch_user(user_id)
    except UserFetchError as e:
        logger.warning(f"Admin test fetch failed for user {user_id}: {e}")
        return f"<p style='color:red;'>User not found or API error ({e}).</p>"
    except httpx.RequestError as e:
        logger.error(f"Admin test fetch could not reach user API: {e!r}")
        return "<p style='color:red;'>User API unreachable.</p>"
    except json.JSONDecodeError as e:
        logger.warning(f"Admin test fetch got an unreadable body for user {user_id}: {e}")
        return "<p style='color:red;'>User API returned invalid JSON.</p>"

    # Pass the 'user' dictionary directly into the template
    return templates.TemplateResponse(
        request,
        "partials/user_card.html",
        {"user": user_data}
    )
