import httpx

from adapters.http_client import build_client
from core.config import AppSettings


def test_build_client_defaults():
    settings = AppSettings(_env_file=None, http_timeout_seconds=5, user_agent="tests/1.0")
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200)

    with build_client(settings, extra_headers={"X-Trace": "abc"}, transport=httpx.MockTransport(handler)) as client:
        client.get("https://api.test/ping")
        assert client.timeout.read == 5

    assert seen[0].headers["user-agent"] == "tests/1.0"
    assert seen[0].headers["accept"] == "application/json"
    assert seen[0].headers["x-trace"] == "abc"
