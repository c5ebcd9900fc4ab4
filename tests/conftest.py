import inspect

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.http_client import get_http_client
from app.main import app

EMAIL_HOST = "email.test"
AUTH_HOST = "auth.test"
DNSBL_HOST = "dnsbl.test"

EMAIL_PAYLOAD = {
    "request_id": "9f1c2a7e-3b44-4d2e-a1c0-5e6f7a8b9c0d",
    "email": "user@example.com",
    "is_reachable": "Safe",
    "is_valid_syntax": True,
    "mx_exists": True,
    "is_disposable": False,
    "is_role_account": False,
    "is_deliverable": True,
    "classification": "personal",
    "processing_time_ms": 412,
}


def make_settings(**overrides):
    base = dict(
        EMAIL_VALIDATION_BASE_URL=f"http://{EMAIL_HOST}",
        DOMAIN_AUTHENTICITY_BASE_URL=f"http://{AUTH_HOST}",
        DOMAIN_REPUTATION_BASE_URL=f"http://{DNSBL_HOST}",
    )
    base.update(overrides)
    return Settings(**base)


def reply(payload=None, status=200):
    def _handler(request):
        if payload is None:
            return httpx.Response(status)
        return httpx.Response(status, json=payload)

    return _handler


def reputation_payload(listed=0, total=50):
    return {
        "summary": {
            "listedCount": listed,
            "totalChecked": total,
            "cleanCount": total - listed,
            "errorCount": 0,
        }
    }


class Upstreams:
    """Routes outbound requests by host and records every call."""

    def __init__(self, email=None, authenticity=None, reputation=None):
        self.handlers = {EMAIL_HOST: email, AUTH_HOST: authenticity, DNSBL_HOST: reputation}
        self.calls = []

    async def __call__(self, request):
        self.calls.append(request)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError("no route to host", request=request)
        response = handler(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    def hosts(self):
        return [r.url.host for r in self.calls]

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def all_ok(score=5, listed=0):
    return Upstreams(
        email=reply(EMAIL_PAYLOAD),
        authenticity=reply({"whois": {"registrar": "Example Registrar"}, "score": score, "dimensions": {"age": 3}}),
        reputation=reply(reputation_payload(listed=listed)),
    )


@pytest.fixture
def api():
    def _build(upstreams, settings=None):
        settings = settings or make_settings()

        async def _client():
            async with upstreams.client() as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_http_client] = _client
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()
