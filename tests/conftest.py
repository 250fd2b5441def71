"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - png_bytes: Small PNG image content
    - form_with_file: FormState with a prompt and a selected PNG
    - fake_service: Stand-in for the analysis agent service
    - async_client: HTTPX client for API testing with the fake service
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.analysis_agent import AgentError, get_agent_service
from src.api import app
from src.ui.state import FormState, SelectedFile

# Minimal PNG content (signature, IHDR, IDAT, IEND)
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d49484452000000010000000108060000001f15c489"
    "0000000d4944415478da63f8ffff3f0005fe02fea7d6a4a40000000049454e44ae426082"
)


class FakeAnalysisService:
    """Records calls and returns a canned answer or raises AgentError."""

    def __init__(self, answer: str = "**Looks fine.**", error: str | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[tuple[str, bytes, str]] = []

    async def analyze(self, prompt: str, content: bytes, media_type: str) -> str:
        self.calls.append((prompt, content, media_type))
        if self.error is not None:
            raise AgentError(self.error)
        return self.answer


@pytest.fixture
def png_bytes() -> bytes:
    """Return small PNG image bytes."""
    return PNG_BYTES


@pytest.fixture
def form_with_file(png_bytes: bytes) -> FormState:
    """Return a form ready for submission."""
    return FormState(
        selected_file=SelectedFile(
            name="ingredients.png", media_type="image/png", content=png_bytes
        ),
        prompt="Is this good for me?",
    )


@pytest.fixture
def fake_service() -> FakeAnalysisService:
    """Return a fake analysis service with a markdown answer."""
    return FakeAnalysisService()


@pytest.fixture
async def async_client(
    fake_service: FakeAnalysisService,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    The agent dependency is replaced by fake_service for the duration
    of the test.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_agent_service] = lambda: fake_service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
