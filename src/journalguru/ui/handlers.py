"""Gradio event handlers for the Journal Guru form.

Each handler takes component values plus the session :class:`FormState`
and returns Gradio updates followed by the (possibly modified) state.
Handlers that need the configuration or the generation handler are built by
small factories so the Blocks layout can bind them at construction time.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import gradio as gr

from journalguru.api.handler import PromptGenerationHandler

from . import state as form
from .models import (
    COPIED_LABEL,
    COPY_HINT,
    COPY_LABEL,
    FORM_FIELDS,
    GENERATED_HEADING,
    PROMPT_HEADING,
    FormState,
)

logger = logging.getLogger(__name__)


def make_field_updater(name: str) -> Callable[[str | None, FormState], FormState]:
    """Build a ``change`` handler that stores one dropdown value."""

    def update_field(value: str | None, state: FormState) -> FormState:
        return form.set_field(state, name, value)

    update_field.__name__ = f"update_{name}"
    return update_field


def build_llm_prompt(state: FormState) -> tuple[Any, Any, Any, Any, FormState]:
    """Handle the "Generate LLM Prompt" button (copy mode).

    Args:
        state: Form state

    Returns:
        Tuple of (heading, output_text, hint, results_group, updated_state)
    """
    result = form.submit(state)
    if not result.ok:
        gr.Warning(result.message)
        return gr.update(), gr.update(), gr.update(), gr.update(), state

    return (
        gr.update(value=PROMPT_HEADING),
        gr.update(value=state.generated_text),
        gr.update(value=COPY_HINT, visible=True),
        gr.update(visible=True),
        state,
    )


def make_generate_handler(
    handler: PromptGenerationHandler,
) -> Callable[[FormState], Awaitable[tuple[Any, Any, Any, Any, FormState]]]:
    """Build the "Generate Prompts" handler (generate mode)."""

    async def generate_prompts(state: FormState) -> tuple[Any, Any, Any, Any, FormState]:
        """Send the form to the generation handler and show the result.

        Args:
            state: Form state

        Returns:
            Tuple of (heading, output_text, hint, results_group, updated_state)
        """
        result, response = await form.generate(state, handler)
        if not result.ok:
            gr.Warning(result.message)
            return gr.update(), gr.update(), gr.update(), gr.update(), state

        if not response.ok:
            error = response.body.get("error", "Request failed")
            details = response.body.get("details")
            gr.Warning(f"{error}: {details}" if details else error)
            return gr.update(), gr.update(), gr.update(), gr.update(), state

        hint = "*Mock mode: no API key configured.*" if handler.mock_mode else ""
        return (
            gr.update(value=GENERATED_HEADING),
            gr.update(value=state.generated_text),
            gr.update(value=hint, visible=bool(hint)),
            gr.update(visible=True),
            state,
        )

    return generate_prompts


def make_copy_handler(duration: float) -> Callable[[FormState], tuple[Any, FormState]]:
    """Build the "Copy" handler.

    The clipboard write itself runs in the browser; this records the copy
    and switches the button label.
    """

    def copy_prompt(state: FormState) -> tuple[Any, FormState]:
        form.copy(state, duration=duration)
        return gr.update(value=COPIED_LABEL), state

    return copy_prompt


def make_copy_reverter(duration: float) -> Callable[[FormState], Awaitable[Any]]:
    """Build the follow-up that restores the Copy label once the indicator expires."""

    async def revert_copy_label(state: FormState) -> Any:
        await asyncio.sleep(duration)
        return copy_button_label(state)

    return revert_copy_label


def copy_button_label(state: FormState) -> Any:
    """Return the Copy button update matching the indicator."""
    return gr.update(value=COPIED_LABEL if form.is_copied(state) else COPY_LABEL)


def reset_form(state: FormState) -> tuple[Any, ...]:
    """Handle the "Create Another Prompt" button.

    Returns:
        One cleared update per form dropdown, then (output_text,
        results_group, copy_button, updated_state)
    """
    state = form.reset(state)
    dropdowns = tuple(gr.update(value=None) for _ in FORM_FIELDS)
    return (
        *dropdowns,
        gr.update(value=""),
        gr.update(visible=False),
        gr.update(value=COPY_LABEL),
        state,
    )
