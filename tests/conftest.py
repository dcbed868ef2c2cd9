"""
Shared fixtures: a call-counting stub of the upstream API served through
httpx.MockTransport, and recorded responses under tests/mock/.
"""

import json
from pathlib import Path
from typing import Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from pokemontcg_client.config import Settings, POKEMON_TCG_URL
from pokemontcg_client.services.client import Client

MOCK_DIR = Path(__file__).parent / "mock"

Responder = Callable[[httpx.Request], httpx.Response]


def respond(status: int = 200, json_body=None, content: bytes = None) -> Responder:
    """Responder returning a fresh response on every call"""
    def responder(request: httpx.Request) -> httpx.Response:
        if json_body is not None:
            return httpx.Response(status, json=json_body)
        return httpx.Response(status, content=content or b"")
    return responder


def respond_with_file(name: str, status: int = 200) -> Responder:
    return respond(status, content=(MOCK_DIR / name).read_bytes())


def fail_with(exc_type=httpx.ConnectError, message: str = "connection refused") -> Responder:
    def responder(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)
    return responder


def mock_json(name: str):
    return json.loads((MOCK_DIR / name).read_text(encoding="utf-8"))


class StubApi:
    """
    Stand-in for api.pokemontcg.io.

    Routes are keyed by the path below /v2/ ("cards", "cards/xy1-1").
    A route holding several responders serves them in order and keeps
    repeating the last one. Unrouted paths answer 404.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, List[Responder]] = {}

    def route(self, path: str, *responders: Responder) -> "StubApi":
        self.routes[path] = list(responders)
        return self

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(self.requests[index].url.params)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v2/")
        responders = self.routes.get(path)
        if not responders:
            return httpx.Response(404, json={"error": {"message": "Not Found", "code": 404}})
        responder = responders.pop(0) if len(responders) > 1 else responders[0]
        return responder(request)


@pytest.fixture
def stub():
    return StubApi()


@pytest.fixture
def test_settings():
    """Settings pinned to defaults, ignoring the environment and any .env file"""
    return Settings(
        api_key=None,
        base_url=POKEMON_TCG_URL,
        user_agent="Mozilla/5.0",
        page_size=250,
        max_pages=None,
        fetch_all_pages=True,
        _env_file=None,
    )


@pytest_asyncio.fixture
async def client(stub, test_settings):
    async with Client("test-key", settings=test_settings, transport=stub.transport) as client:
        yield client
