"""Client for the hosted text-generation service.

Wraps :class:`anthropic.AsyncAnthropic` behind a single ``generate`` call.
The integration contract is narrow: one user message carrying
the instruction string, a model identifier and an output-token budget go
out; the text of the first content block comes back.
"""

from __future__ import annotations

import logging
from typing import Any

import anthropic

from .config import JournalGuruConfig

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when the service answers without any usable text."""


def get_response_text(message: Any) -> str | None:
    """Extract the text of the first content block of a Messages response.

    Args:
        message: Response object returned by ``messages.create``.

    Returns:
        The first block's text, or ``None`` when the response has no content
        or the first block is not a text block.
    """
    content = getattr(message, "content", None) or []
    if not content:
        return None
    text_value = getattr(content[0], "text", None)
    return text_value if isinstance(text_value, str) else None


class TextGenerator:
    """Send instruction strings to the hosted model.

    The underlying SDK client is created on first use and reused for the
    lifetime of the generator.

    Args:
        config: Settings supplying the credential, model id and token budget.
        client: Optional pre-built client (anything exposing
            ``messages.create`` as a coroutine).  Used by tests.
    """

    def __init__(self, config: JournalGuruConfig, client: Any | None = None):
        self.config = config
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            logger.info(f"Creating Anthropic client for model {self.config.model_id}")
            self._client = anthropic.AsyncAnthropic(api_key=self.config.anthropic_api_key)
        return self._client

    async def generate(self, instruction: str) -> str:
        """Generate text for a single instruction string.

        Args:
            instruction: The complete user message.

        Returns:
            The generated text.

        Raises:
            GenerationError: If the response carries no text block.
            anthropic.APIError: Propagated unchanged from the SDK.
        """
        message = await self.client.messages.create(
            model=self.config.model_id,
            max_tokens=self.config.max_tokens,
            messages=[{"role": "user", "content": instruction}],
        )
        text = get_response_text(message)
        if text is None:
            raise GenerationError("Response did not contain a text block")
        return text

    async def close(self) -> None:
        """Release the SDK client's connection pool, if one was created."""
        if self._client is not None and hasattr(self._client, "close"):
            await self._client.close()
            self._client = None
