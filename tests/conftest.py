"""
Shared fixtures: a FreepikClient wired to an in-process stub of the
Freepik API (httpx.MockTransport), recording every request it receives.
"""

from typing import AsyncIterator, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from freepik_mcp.client import FreepikClient
from freepik_mcp.dispatcher import ToolDispatcher
from freepik_mcp.registry import ToolRegistry

API_KEY = "test-key"
BASE_URL = "https://api.freepik.test"


@pytest.fixture
def sample_resource() -> Dict:
    return {
        "id": 42,
        "title": "X",
        "url": "https://www.freepik.com/free-photo/x_42.htm",
        "filename": "x.jpg",
        "licenses": [{"type": "freemium", "url": "https://www.freepik.com/license"}],
        "image": {
            "type": "photo",
            "orientation": "horizontal",
            "source": {"url": "https://img.freepik.com/x.jpg", "key": "large", "size": "626x417"}
        },
        "author": {"id": 7, "name": "jcomp", "avatar": "", "assets": 1200, "slug": "jcomp"},
        "stats": {"downloads": 10, "likes": 3}
    }


class StubAPI:
    """Routes requests to canned responses and records them."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[tuple, Callable[[httpx.Request], httpx.Response]] = {}

    def add(self, method: str, path: str, status: int = 200, json=None, text: str = None):
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=json)

        self.routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        return route(request)


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def stub_api() -> StubAPI:
    return StubAPI()


@pytest_asyncio.fixture
async def client(stub_api) -> AsyncIterator[FreepikClient]:
    transport = httpx.MockTransport(stub_api.handler)
    async with FreepikClient(API_KEY, base_url=BASE_URL, transport=transport) as client:
        yield client


@pytest.fixture
def registry(client) -> ToolRegistry:
    return ToolRegistry(client)


@pytest.fixture
def dispatcher(registry) -> ToolDispatcher:
    return ToolDispatcher(registry)
