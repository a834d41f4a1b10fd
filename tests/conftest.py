import httpx
import pytest_asyncio


class CallLog:
    """Records every request handed to a MockTransport handler."""

    def __init__(self, handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest_asyncio.fixture
async def make_client():
    """Build an httpx.AsyncClient whose transport is the given handler."""
    clients: list[httpx.AsyncClient] = []

    def _make(handler) -> tuple[httpx.AsyncClient, CallLog]:
        calls = CallLog(handler)
        client = httpx.AsyncClient(transport=httpx.MockTransport(calls))
        clients.append(client)
        return client, calls

    yield _make

    for client in clients:
        await client.aclose()
