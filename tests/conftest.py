import json
import logging

import httpx
import pytest

from adapters.call2fa_client import Client
from core.config import AppSettings

BASE_URI = "https://api.test"
JWT = "jwt-token-123"


class FakeService:
    """Records every request and answers from a `(method, path) -> response` map."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"detail": "not found"})
        answer = self.routes[key]
        if isinstance(answer, Exception):
            raise answer
        return answer

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("BASE_URI", "API_VERSION", "LOGIN", "PASSWORD", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(f"CALL2FA_{name}", raising=False)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, base_uri=BASE_URI)


@pytest.fixture
def service():
    return FakeService({("POST", "/v1/auth/"): httpx.Response(200, json={"jwt": JWT})})


@pytest.fixture
def http_client(service):
    return httpx.Client(transport=httpx.MockTransport(service))


@pytest.fixture
def client(settings, http_client):
    with Client.create("login", "secret", settings=settings, http_client=http_client) as c:
        yield c


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("call2fa")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    if hasattr(logger, "_configured"):
        del logger._configured
