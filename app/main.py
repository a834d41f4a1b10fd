# -----------------------------------------------------------------
# main.py
# -----------------------------------------------------------------
# Starting point for the user-fetch application
#
# Dependencies:
# pip install -e .
#
# Run from root: uvicorn app.main:app --reload --port 8005
#    Access via: localhost:8005
#   Stop server: CTRL + C
# -----------------------------------------------------------------

# Main imports
import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

# Routes
from app.routes import admin, users

# Import 'settings' object from root-level config file
from config import settings

logging.basicConfig(
    level=settings.log.level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

logger.info(f"Application Name: {settings.app.name}")
logger.info(f"Application Version: {settings.app.version}")
logger.info(f"Sample API URL: {settings.sample.api_url}")
logger.info(f"Sample API Timeout: {settings.sample.timeout}s")

# Initialize the FastAPI app
app = FastAPI(title=settings.app.name, version=settings.app.version, debug=settings.app.debug)

# Register all routers
app.include_router(users.router, tags=["users"])
app.include_router(admin.router, tags=["admin"])


# Create root route handler
@app.get("/")
async def root():
    """Redirect to the API docs."""
    return RedirectResponse(url="/docs")

@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.app.name}
