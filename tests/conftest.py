"""
Pytest configuration and shared fixtures for the CMS adapter tests.

No test talks to a real CMS: `backend` builds an httpx.MockTransport that
records every request it receives, so tests can assert both on what was
sent and on how many requests were made.
"""
import httpx
import pytest

BASE_URL = "https://host.example"
API = f"{BASE_URL}/api/episerver/v3.0"


class RecordingBackend:
    """A fake CMS: answers with `handler` and counts incoming requests."""

    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={}))
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def backend():
    """Factory fixture: backend(handler) -> RecordingBackend."""
    def make(handler=None):
        return RecordingBackend(handler)
    return make


@pytest.fixture
def json_backend(backend):
    """A backend that always answers 200 with a small JSON document."""
    return backend(lambda request: httpx.Response(200, json={"name": "Start"}))
