"""Unit tests for the hosted text-generation client."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from journalguru.core.generator import GenerationError, TextGenerator, get_response_text


class _FakeMessages:
    def __init__(self, response):
        self.response = response
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.response


class _FakeClient:
    def __init__(self, response):
        self.messages = _FakeMessages(response)


def _message(*texts):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=t) for t in texts])


class TestGetResponseText:
    """Tests for get_response_text."""

    def test_first_block_text(self):
        assert get_response_text(_message("first", "second")) == "first"

    def test_empty_content(self):
        assert get_response_text(SimpleNamespace(content=[])) is None

    def test_missing_content(self):
        assert get_response_text(SimpleNamespace()) is None

    def test_non_text_first_block(self):
        message = SimpleNamespace(content=[SimpleNamespace(type="tool_use", id="x")])
        assert get_response_text(message) is None


class TestTextGenerator:
    """Tests for TextGenerator.generate."""

    def test_request_shape(self, live_config):
        """One user message, the configured model and the token budget go out."""
        client = _FakeClient(_message("1. Prompt"))
        generator = TextGenerator(live_config, client=client)

        result = asyncio.run(generator.generate("instruction text"))

        assert result == "1. Prompt"
        assert client.messages.calls == [
            {
                "model": "claude-test-model",
                "max_tokens": 2048,
                "messages": [{"role": "user", "content": "instruction text"}],
            }
        ]

    def test_no_text_raises(self, live_config):
        generator = TextGenerator(live_config, client=_FakeClient(SimpleNamespace(content=[])))

        with pytest.raises(GenerationError, match="text block"):
            asyncio.run(generator.generate("instruction"))

    def test_sdk_errors_propagate(self, live_config):
        client = SimpleNamespace(
            messages=SimpleNamespace(create=AsyncMock(side_effect=RuntimeError("boom")))
        )
        generator = TextGenerator(live_config, client=client)

        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(generator.generate("instruction"))

    def test_client_created_lazily_with_key(self, live_config):
        with patch("journalguru.core.generator.anthropic.AsyncAnthropic") as MockClient:
            generator = TextGenerator(live_config)
            MockClient.assert_not_called()

            first = generator.client
            second = generator.client

            MockClient.assert_called_once_with(api_key="test-api-key")
            assert first is second

    def test_close_releases_client(self, live_config):
        client = SimpleNamespace(close=AsyncMock())
        generator = TextGenerator(live_config, client=client)

        asyncio.run(generator.close())

        client.close.assert_awaited_once()
        assert generator._client is None

    def test_close_without_client_is_noop(self, live_config):
        asyncio.run(TextGenerator(live_config).close())
