"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - clean_env: Strips chat-related environment variables (autouse)
    - tutor_config / persona_config: Valid configs for each variant
    - mock_gemini: Factory for httpx.MockTransport stubs of generateContent
    - async_client: HTTPX client for the host app

The Generative Language API is never contacted outside tests marked
requires_api_key.
"""

import json
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from geminichat.agent.config import ChatConfig
from geminichat.api.app import create_app

CHAT_ENV_VARS = (
    "GEMINI_API_KEY",
    "NEXT_PUBLIC_GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_BASE_URL",
    "GEMINI_TIMEOUT",
    "CHAT_VARIANT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env or shell from leaking into config defaults."""
    for name in CHAT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tutor_config() -> ChatConfig:
    """Return a tutor-variant config with a dummy key."""
    return ChatConfig(api_key="test-key", variant="tutor")


@pytest.fixture
def persona_config() -> ChatConfig:
    """Return a persona-variant config with a dummy key."""
    return ChatConfig(api_key="test-key", variant="persona")


class MockGemini:
    """Builds MockTransports that answer like generateContent and records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def reply(self, text: str) -> httpx.MockTransport:
        return self.respond(
            200, {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}
        )

    def respond(
        self,
        status_code: int,
        body: dict | list | None = None,
        content: bytes | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body if body is not None else {})

        return httpx.MockTransport(handler)

    def fail(self, exc_factory: Callable[[httpx.Request], Exception]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            raise exc_factory(request)

        return httpx.MockTransport(handler)

    def payload(self, index: int = -1) -> dict:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


@pytest.fixture
def mock_gemini() -> MockGemini:
    return MockGemini()


@pytest.fixture
async def async_client(tutor_config: ChatConfig) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for the host app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app(tutor_config))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
