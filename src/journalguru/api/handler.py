"""Prompt generation request handling.

:class:`PromptGenerationHandler` implements the endpoint independently of
FastAPI so the same logic serves the HTTP route and the Gradio UI.  Each
call walks the same short path::

    Received -> Validating -> Rejected (400)
                           -> Dispatching -> Mocking  -> Responded (200)
                                          -> Calling  -> Responded (200)
                                                      -> Responded (500)

Any exception raised after the request is received is caught once, at the
top of :meth:`PromptGenerationHandler.handle`, and mapped to a 500 body with
a generic message plus the exception's text.  Nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from journalguru.core.config import JournalGuruConfig
from journalguru.core.generator import TextGenerator
from journalguru.core.models import PromptRequest
from journalguru.core.prompt_builder import build_mock_prompts, build_prompt
from journalguru.core.validation import ENDPOINT_REQUIRED_FIELDS, validate_request

from .models import ErrorResponse, PromptsResponse

logger = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "Missing required fields"
GENERATION_FAILED_ERROR = "Failed to generate prompts"
METHOD_NOT_ALLOWED_ERROR = "Method not allowed"


@dataclass
class HandlerResult:
    """Status code and JSON body produced for one request."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class PromptGenerationHandler:
    """Validate a payload, build the instruction string and generate prompts.

    The handler is stateless across requests; configuration is fixed at
    construction time.

    Args:
        config: Settings selecting mock or live mode, the field-name mapping
            and the generation parameters.
        generator: Object with an async ``generate(instruction) -> str``
            method.  Defaults to a :class:`TextGenerator` built from *config*.
            Never used in mock mode.
        sleep: Awaitable used for the mock-mode delay.
    """

    def __init__(
        self,
        config: JournalGuruConfig,
        generator: Any | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.config = config
        self.generator = generator if generator is not None else TextGenerator(config)
        self._sleep = sleep

    @property
    def mock_mode(self) -> bool:
        return self.config.mock_mode

    async def handle(self, payload: Any) -> HandlerResult:
        """Process one decoded request body.

        Args:
            payload: Decoded JSON body.  Anything other than an object is
                treated as a request with every field missing.

        Returns:
            HandlerResult with status 200 ``{"prompts": ...}``, 400
            ``{"error": ...}`` or 500 ``{"error": ..., "details": ...}``.
        """
        try:
            if not isinstance(payload, dict):
                logger.warning(f"Rejected non-object payload: {type(payload).__name__}")
                return _error(400, MISSING_FIELDS_ERROR)

            request = PromptRequest.from_payload(payload, self.config.field_names)
            result = validate_request(request, ENDPOINT_REQUIRED_FIELDS)
            if not result.ok:
                logger.info(f"Rejected request, missing fields: {', '.join(result.missing)}")
                return _error(400, MISSING_FIELDS_ERROR)

            if self.mock_mode:
                prompts = await self._mock(request)
            else:
                prompts = await self._call(request)

            return HandlerResult(200, PromptsResponse(prompts=prompts).model_dump())

        except Exception as e:
            return generation_failed(e)

    async def _mock(self, request: PromptRequest) -> str:
        logger.info(
            f"No API key configured, returning mock prompts after "
            f"{self.config.mock_delay_seconds}s"
        )
        await self._sleep(self.config.mock_delay_seconds)
        return build_mock_prompts(request)

    async def _call(self, request: PromptRequest) -> str:
        instruction = build_prompt(
            request,
            include_output_directive=self.config.include_output_directive,
        )
        logger.info(f"Calling text generation API (model={self.config.model_id})...")
        prompts = await self.generator.generate(instruction)
        logger.info(f"Successfully generated prompts ({len(prompts)} characters)")
        return prompts


def generation_failed(exc: BaseException) -> HandlerResult:
    """Map an unexpected exception to the generic 500 result."""
    logger.error(f"Error generating prompts: {exc}", exc_info=exc)
    return _error(500, GENERATION_FAILED_ERROR, details=str(exc))


def method_not_allowed() -> HandlerResult:
    """Result for any request kind other than POST."""
    return _error(405, METHOD_NOT_ALLOWED_ERROR)


def _error(status_code: int, message: str, details: str | None = None) -> HandlerResult:
    body = ErrorResponse(error=message, details=details).model_dump(exclude_none=True)
    return HandlerResult(status_code, body)
