"""Core components for Journal Guru.

This package holds everything that does not depend on a web framework:

Modules
-------
config
    Pydantic Settings configuration and the global ``config`` instance.
models
    The :class:`PromptRequest` value object and the field-name mapping.
options
    Choice catalogues shown by the form.
validation
    Completeness checks returning :class:`ValidationResult`.
prompt_builder
    Instruction-string and mock-response templates.
generator
    Client for the hosted text-generation service.
"""

from .config import JournalGuruConfig, config
from .models import PromptRequest
from .prompt_builder import build_mock_prompts, build_prompt
from .validation import ValidationResult, validate_request

__all__ = [
    "JournalGuruConfig",
    "config",
    "PromptRequest",
    "build_prompt",
    "build_mock_prompts",
    "ValidationResult",
    "validate_request",
]
