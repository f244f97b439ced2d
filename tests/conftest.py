import httpx
import pytest
from fastapi.testclient import TestClient

from indodax_proxy.config import Settings
from indodax_proxy.main import create_app
from indodax_proxy.market import MarketConfig
from indodax_proxy.upstream import IndodaxClient

BASE_URL = "https://indodax.test/api"


class FakeIndodax:
    """Canned upstream answers keyed by URL path, with a record of every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.path)
        answer = self.routes.get(request.url.path)
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, httpx.Response):
            return answer
        if answer is None:
            return httpx.Response(404, json={"error": "not found"})
        return httpx.Response(200, json=answer)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ALLOWED_ORIGINS="http://localhost:3000",
        UPSTREAM_BASE_URL=BASE_URL,
        UPSTREAM_CHARTS_URL=f"{BASE_URL}/charts",
    )


@pytest.fixture
def market():
    return MarketConfig()


@pytest.fixture
def fake_upstream():
    return FakeIndodax()


@pytest.fixture
def client(settings, market, fake_upstream):
    upstream = IndodaxClient(
        base_url=settings.UPSTREAM_BASE_URL,
        charts_url=settings.UPSTREAM_CHARTS_URL,
        timeout=1,
        transport=httpx.MockTransport(fake_upstream.handler),
    )
    app = create_app(settings=settings, market=market, upstream=upstream)
    with TestClient(app) as c:
        yield c
