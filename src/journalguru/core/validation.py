"""Completeness validation for prompt requests.

Validation happens once, at the boundary (form submit or endpoint entry).
The result is a plain value object so the caller decides how to present a
failure: the Gradio UI shows a warning, the endpoint answers 400.
"""

import logging
from dataclasses import dataclass

from .models import AGE_RANGE, LENS, PROMPT_COUNT, SITUATION, STYLE, PromptRequest

logger = logging.getLogger(__name__)

# The endpoint needs the tone to brief the generator; the copy-mode form
# does not ask for it.
ENDPOINT_REQUIRED_FIELDS: tuple[str, ...] = (AGE_RANGE, SITUATION, LENS, STYLE, PROMPT_COUNT)
FORM_REQUIRED_FIELDS: tuple[str, ...] = (AGE_RANGE, SITUATION, LENS, PROMPT_COUNT)

FIELD_LABELS: dict[str, str] = {
    AGE_RANGE: "Age range",
    SITUATION: "Issue to explore",
    LENS: "Philosophical lens",
    STYLE: "Style",
    PROMPT_COUNT: "Number of prompts",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a completeness check.

    Attributes:
        missing: Roles that were required but empty, in declaration order.
    """

    missing: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing

    @property
    def message(self) -> str:
        """User-facing description of the failure (empty when ok)."""
        if self.ok:
            return ""
        labels = ", ".join(FIELD_LABELS.get(role, role) for role in self.missing)
        return f"Please fill out all fields before generating your prompt. Missing: {labels}"


def validate_request(
    request: PromptRequest,
    required: tuple[str, ...] = ENDPOINT_REQUIRED_FIELDS,
) -> ValidationResult:
    """Check that every required field of *request* is non-empty.

    Args:
        request: Request to check.
        required: Roles that must be present.

    Returns:
        ValidationResult listing any missing roles.
    """
    missing = request.missing_fields(required)
    if missing:
        logger.debug(f"Request incomplete, missing: {missing}")
    return ValidationResult(missing=missing)
