import json

import httpx
import pytest

from app.client.http import create_client
from app.client.notify import Navigator, Notifier
from app.client.session import SessionContext


class FakeBackend:
    """Answers requests from a queue of canned responses and records what it saw."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def reply(self, status_code, body=None, headers=None):
        self.responses.append((status_code, body, headers))

    def drop_connection(self):
        self.responses.append(None)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        canned = self.responses.pop(0) if self.responses else (200, {}, None)
        if canned is None:
            raise httpx.ConnectError("Connection refused", request=request)
        status_code, body, headers = canned
        if body is None:
            return httpx.Response(status_code, headers=headers)
        return httpx.Response(status_code, content=json.dumps(body), headers={"content-type": "application/json", **(headers or {})})

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def session():
    return SessionContext()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
async def api(backend, session, notifier, navigator):
    client = create_client(
        session,
        notifier=notifier,
        navigator=navigator,
        base_url="http://backend.test/",
        transport=httpx.MockTransport(backend),
    )
    yield client
    await client.aclose()
