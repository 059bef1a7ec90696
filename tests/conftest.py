import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest


# Ensure tests can import project packages regardless of how pytest is invoked.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


API_URL = "https://api.test"


class FakeResponse:
    """Minimal stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int = 200, json_data: Any = None, text: str = "", reason: str = "OK"):
        self.status = status
        self.reason = reason
        self._json = json_data
        self._text = text

    async def json(self, content_type: Optional[str] = None) -> Any:
        return self._json

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class FakeSession:
    """Routes GET requests by exact URL to canned responses (or errors to raise) and records them."""

    def __init__(self, routes: Dict[str, Union[FakeResponse, Exception]]):
        self.routes = routes
        self.requested: List[str] = []
        self.closed = False

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requested.append(url)
        if url not in self.routes:
            return FakeResponse(status=404, reason="Not Found", text=f"no route for {url}")
        route = self.routes[url]
        if isinstance(route, Exception):
            raise route
        return route

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture
def make_session():
    def _make(routes: Dict[str, Union[FakeResponse, Exception]]) -> FakeSession:
        return FakeSession(routes)

    return _make


@pytest.fixture
def make_plugin(make_session):
    from anistream.plugins.zoro import ZoroPlugin

    def _make(routes: Dict[str, Union[FakeResponse, Exception]], **config: Any):
        session = make_session(routes)
        plugin = ZoroPlugin({"api_url": API_URL, **config}, session=session)
        return plugin, session

    return _make
