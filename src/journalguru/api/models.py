"""Pydantic request and response models for the Journal Guru API.

The generation endpoint reads its body as raw JSON so that the configurable
field-name mapping applies and incomplete bodies answer 400 rather than
FastAPI's 422.  :class:`GeneratePromptsRequest` therefore only documents the
canonical body shape in the OpenAPI schema; the response models are used to
build every JSON body the endpoint returns.

Models
------
GeneratePromptsRequest
    Canonical payload for ``POST /api/generate-prompts``.
PromptsResponse
    Success body: ``{"prompts": "..."}``.
ErrorResponse
    Failure body: ``{"error": "...", "details": "..."}`` (``details`` only
    for unexpected failures).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeneratePromptsRequest(BaseModel):
    """Request body for the ``POST /api/generate-prompts`` endpoint.

    Attributes:
        age: Age range, e.g. ``"26-35"``.
        issue: Life situation to explore, e.g. ``"new job"``.
        lens: Philosophical or spiritual lens, e.g. ``"stoic"``.
        style: Tone of the prompts, e.g. ``"reflective"``.
        numPrompts: How many prompts to write: ``"1"``, ``"3-5"``, ``"10"``
            or ``"15"``.
    """

    model_config = ConfigDict(populate_by_name=True)

    age: str = Field(..., description="Age range (e.g. '26-35').")
    issue: str = Field(..., description="Life situation to explore (e.g. 'new job').")
    lens: str = Field(..., description="Philosophical lens (e.g. 'stoic').")
    style: str = Field(..., description="Style or tone (e.g. 'reflective').")
    numPrompts: str = Field(..., description="Number of prompts: '1', '3-5', '10' or '15'.")


class PromptsResponse(BaseModel):
    """Successful generation result."""

    prompts: str = Field(..., description="Generated prompts as a single text blob.")


class ErrorResponse(BaseModel):
    """Error body returned with 400, 405 and 500 responses."""

    error: str = Field(..., description="Human-readable error message.")
    details: str | None = Field(
        default=None,
        description="Underlying error description (500 responses only).",
    )
