# ---------------------------------------------------------------------
# app/services/api_client.py
# ---------------------------------------------------------------------
# External user API client
# Fetches a single user record from the sample REST endpoint
# (JSONPlaceholder by default) using httpx.
# ---------------------------------------------------------------------

from typing import Any, Optional, Union

import httpx

from config import settings

UserId = Union[int, str]


class UserFetchError(Exception):
    """Raised when the user API answers with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Error: {status_code}")


class UserFetcher:
    """
    Fetches user records through an injected httpx.AsyncClient.

    The client is owned by the caller, so one client can serve many
    concurrent fetches and tests can hand in a client built on
    httpx.MockTransport.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (base_url or settings.sample.api_url).rstrip("/")

    def user_url(self, user_id: UserId) -> str:
        return f"{self.base_url}/users/{user_id}"

    async def fetch_user(self, user_id: UserId) -> Any:
        """
        Fetch one user by identifier.

        Returns:
            The decoded JSON body, unchanged.

        Raises:
            UserFetchError: the response status is not a success.
            httpx.TransportError: the request itself failed (not wrapped).
            json.JSONDecodeError: a success response carried invalid JSON.
        """
        async with self.client.stream("GET", self.user_url(user_id)) as response:
            if not response.is_success:
                # Body is left unread on failure
                raise UserFetchError(response.status_code)
            await response.aread()
            return response.json()


async def fetch_user_data(user_id: UserId, client: Optional[httpx.AsyncClient] = None) -> Any:
    """
    Fetches a specific user from the external API.
    Uses the given client, or opens a short-lived one for this call.
    """
    if client is not None:
        return await UserFetcher(client).fetch_user(user_id)

    async with httpx.AsyncClient(timeout=settings.sample.timeout) as owned_client:
        return await UserFetcher(owned_client).fetch_user(user_id)
