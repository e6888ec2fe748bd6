"""Data models for the Journal Guru form."""

from dataclasses import dataclass

from journalguru.core.models import PromptRequest


@dataclass
class FormState:
    """Session state for the Gradio form.

    One instance per browser session (held in ``gr.State``).  Field names
    match the :class:`~journalguru.core.models.PromptRequest` roles so the
    form converts to a request without a mapping.

    Attributes
    ----------
    age_range, situation, lens, style, prompt_count : str
        Current dropdown values (empty string when nothing is selected)
    generated_text : str
        Last rendered instruction string or generated prompts
    copied_until : float
        Monotonic time at which the "Copied!" indicator expires (0 = never
        copied)
    """

    age_range: str = ""
    situation: str = ""
    lens: str = ""
    style: str = ""
    prompt_count: str = ""
    generated_text: str = ""
    copied_until: float = 0.0

    def to_request(self) -> PromptRequest:
        """Snapshot the current field values as a PromptRequest."""
        return PromptRequest(
            age_range=self.age_range,
            situation=self.situation,
            lens=self.lens,
            style=self.style,
            prompt_count=self.prompt_count,
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in FORM_FIELDS)
        return f"FormState({values}, has_text={bool(self.generated_text)})"


FORM_FIELDS: tuple[str, ...] = PromptRequest.roles()

# UI constants
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
PROMPT_HEADING = "### Your Custom LLM Prompt"
GENERATED_HEADING = "### Your Journal Prompts"
COPY_HINT = (
    "*Copy this prompt and paste it into your favorite LLM (ChatGPT, Claude, etc.) "
    "to receive your personalized journal prompts.*"
)
