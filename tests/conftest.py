"""Pytest configuration and fixtures."""

import json
import pytest
import httpx
from httpx import AsyncClient, ASGITransport

from main import app
from config import Settings, get_settings
from relay.gemini import GeminiClient, get_gemini_client


class FakeGemini:
    """Stands in for the Gemini endpoint and records every call."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: bytes = json.dumps({"candidates": []}).encode()
        self.error: Exception | None = None

    def respond(self, status_code: int, body):
        self.status_code = status_code
        self.body = body if isinstance(body, bytes) else json.dumps(body).encode()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def test_settings():
    """Settings with a Gemini key and no .env lookup."""
    return Settings(_env_file=None, gemini_api_key="test-key")


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def gemini_client(test_settings, fake_gemini):
    """GeminiClient wired to the fake endpoint."""
    return GeminiClient(test_settings, transport=httpx.MockTransport(fake_gemini.handler))


@pytest.fixture
async def async_client(test_settings, fake_gemini):
    """Async HTTP client for the relay with settings and upstream overridden."""

    async def override_gemini_client():
        client = GeminiClient(test_settings, transport=httpx.MockTransport(fake_gemini.handler))
        try:
            yield client
        finally:
            await client.close()

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_gemini_client] = override_gemini_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
