"""Shared pytest fixtures for Journal Guru tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from journalguru.core.config import JournalGuruConfig
from journalguru.core.models import PromptRequest
from journalguru.ui.models import FormState


class FakeGenerator:
    """Stand-in for TextGenerator that records every instruction it receives."""

    def __init__(self, reply: str = "1. What did today teach you?", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[str] = []

    async def generate(self, instruction: str) -> str:
        self.calls.append(instruction)
        if self.error is not None:
            raise self.error
        return self.reply


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def mock_config() -> JournalGuruConfig:
    """Configuration with no credential (mock mode) and no mock delay.

    Returns:
        JournalGuruConfig instance for testing
    """
    return JournalGuruConfig(
        anthropic_api_key=None,
        mock_delay_seconds=0.0,
        _env_file=None,
    )


@pytest.fixture
def live_config() -> JournalGuruConfig:
    """Configuration with a fake credential (live mode).

    Returns:
        JournalGuruConfig instance for testing
    """
    return JournalGuruConfig(
        anthropic_api_key="test-api-key",
        model_id="claude-test-model",
        _env_file=None,
    )


@pytest.fixture
def fake_generator() -> FakeGenerator:
    """Generator returning a fixed reply."""
    return FakeGenerator()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep replacement for the mock-mode delay."""
    return RecordingSleep()


@pytest.fixture
def valid_payload() -> dict[str, str]:
    """Complete request body using the canonical field names.

    Returns:
        Dictionary suitable for ``POST /api/generate-prompts``
    """
    return {
        "age": "26-35",
        "issue": "new job",
        "lens": "stoic",
        "style": "reflective",
        "numPrompts": "3-5",
    }


@pytest.fixture
def valid_request() -> PromptRequest:
    """Complete PromptRequest matching ``valid_payload``."""
    return PromptRequest(
        age_range="26-35",
        situation="new job",
        lens="stoic",
        style="reflective",
        prompt_count="3-5",
    )


@pytest.fixture
def filled_form() -> FormState:
    """Form state with every field selected."""
    return FormState(
        age_range="26-35",
        situation="new job",
        lens="stoic",
        style="reflective",
        prompt_count="3-5",
    )


@pytest.fixture
def test_client(live_config, fake_generator) -> Generator[TestClient, None, None]:
    """TestClient for a live-mode app backed by ``fake_generator``.

    The Gradio form is not mounted; UI tests build it separately.
    """
    from journalguru.api.main import create_app

    app = create_app(live_config, generator=fake_generator, mount_ui=False)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_client(mock_config) -> Generator[TestClient, None, None]:
    """TestClient for a mock-mode app."""
    from journalguru.api.main import create_app

    app = create_app(mock_config, mount_ui=False)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failing_generator() -> FakeGenerator:
    """Generator whose call raises, as an unreachable service would."""
    return FakeGenerator(error=RuntimeError("upstream exploded"))
