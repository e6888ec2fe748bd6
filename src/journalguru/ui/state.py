"""State management for the Journal Guru form.

These functions implement the form's actions on a :class:`FormState`.  They
are independent of Gradio so they can be exercised directly in tests; the
Gradio event handlers in :mod:`journalguru.ui.handlers` are thin wrappers.

Actions
-------
set_field
    Overwrite one field, no validation.
submit
    Validate the copy-mode field set and render the instruction string.
generate
    Validate the endpoint field set and send the request to the handler.
copy
    Hand the current text to a clipboard writer and start the indicator.
reset
    Clear every field and the text.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from journalguru.api.handler import HandlerResult, PromptGenerationHandler
from journalguru.core.prompt_builder import build_prompt
from journalguru.core.validation import (
    ENDPOINT_REQUIRED_FIELDS,
    FORM_REQUIRED_FIELDS,
    ValidationResult,
    validate_request,
)

from .models import FORM_FIELDS, FormState

logger = logging.getLogger(__name__)

DEFAULT_COPY_INDICATOR_SECONDS = 2.0


def set_field(state: FormState, name: str, value: str | None) -> FormState:
    """Overwrite a single form field.

    Args:
        state: Form state to update
        name: Role name (``age_range``, ``situation``, ``lens``, ``style``
            or ``prompt_count``)
        value: New value; ``None`` clears the field

    Returns:
        The updated state

    Raises:
        KeyError: If *name* is not a form field
    """
    if name not in FORM_FIELDS:
        raise KeyError(f"Unknown form field: {name}")
    setattr(state, name, value or "")
    return state


def submit(state: FormState) -> ValidationResult:
    """Render the copy-mode instruction string from the current fields.

    On failure the state is left untouched so the user can correct the form.

    Args:
        state: Form state

    Returns:
        The validation result; when ok, ``state.generated_text`` holds the
        rendered prompt
    """
    request = state.to_request()
    result = validate_request(request, FORM_REQUIRED_FIELDS)
    if not result.ok:
        return result

    state.generated_text = build_prompt(request)
    logger.info(f"Built LLM prompt ({len(state.generated_text)} characters)")
    return result


async def generate(
    state: FormState, handler: PromptGenerationHandler
) -> tuple[ValidationResult, HandlerResult | None]:
    """Send the current fields to the generation handler.

    Args:
        state: Form state
        handler: Generation handler shared with the HTTP endpoint

    Returns:
        Tuple of (validation_result, handler_result).  The handler result is
        ``None`` when validation failed and no request was sent.  On success
        ``state.generated_text`` holds the generated prompts; on failure the
        previous text is kept.
    """
    request = state.to_request()
    result = validate_request(request, ENDPOINT_REQUIRED_FIELDS)
    if not result.ok:
        return result, None

    response = await handler.handle(request.to_payload(handler.config.field_names))
    if response.ok:
        state.generated_text = response.body["prompts"]
    else:
        logger.warning(f"Generation failed with status {response.status_code}: {response.body}")
    return result, response


def copy(
    state: FormState,
    clipboard: Callable[[str], Any] | None = None,
    *,
    duration: float = DEFAULT_COPY_INDICATOR_SECONDS,
    now: float | None = None,
) -> FormState:
    """Copy the current text and start the "Copied!" indicator.

    Copying again while the indicator is showing restarts the timer.

    Args:
        state: Form state
        clipboard: Writer receiving the text.  ``None`` when the write happens
            elsewhere (the Gradio UI writes from the browser).
        duration: Seconds the indicator stays on
        now: Current monotonic time (defaults to ``time.monotonic()``)

    Returns:
        The updated state
    """
    if clipboard is not None:
        clipboard(state.generated_text)
    current = time.monotonic() if now is None else now
    state.copied_until = current + duration
    return state


def is_copied(state: FormState, now: float | None = None) -> bool:
    """Return whether the "Copied!" indicator is currently on."""
    current = time.monotonic() if now is None else now
    return current < state.copied_until


def reset(state: FormState) -> FormState:
    """Clear every field, the text and the indicator."""
    for name in FORM_FIELDS:
        setattr(state, name, "")
    state.generated_text = ""
    state.copied_until = 0.0
    logger.debug("Form reset")
    return state
