"""Value objects shared by the prompt builder, the endpoint and the UI."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

# Role names in declaration order.  Every other module refers to a field by
# its role; only the wire mapping below knows the JSON names.
AGE_RANGE = "age_range"
SITUATION = "situation"
LENS = "lens"
STYLE = "style"
PROMPT_COUNT = "prompt_count"

DEFAULT_FIELD_NAMES: dict[str, str] = {
    AGE_RANGE: "age",
    SITUATION: "issue",
    LENS: "lens",
    STYLE: "style",
    PROMPT_COUNT: "numPrompts",
}


@dataclass(frozen=True)
class PromptRequest:
    """User-selected preferences that drive prompt construction.

    A request is built fresh from the form or the JSON payload at submission
    time and discarded after use.  Construction never fails: missing values
    are stored as empty strings and reported by :meth:`missing_fields`.

    Attributes:
        age_range: Age bracket such as ``"26-35"`` or ``"over 55"``.
        situation: Life situation to explore (e.g. ``"new job"``).
        lens: Philosophical or spiritual lens (e.g. ``"stoic"``).
        style: Tone of the prompts.  Optional in copy mode.
        prompt_count: One of ``"1"``, ``"3-5"``, ``"10"``, ``"15"``.
    """

    age_range: str = ""
    situation: str = ""
    lens: str = ""
    style: str = ""
    prompt_count: str = ""

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        field_names: Mapping[str, str] | None = None,
    ) -> PromptRequest:
        """Read a request from a JSON-like mapping.

        Args:
            payload: Decoded request body.
            field_names: Role -> wire name mapping.  Defaults to
                :data:`DEFAULT_FIELD_NAMES`.  Roles absent from the mapping
                fall back to their default wire name.

        Returns:
            A new PromptRequest.  String values are kept verbatim; any other
            value (null, numbers, booleans, objects) is stored as ``""``.

        Raises:
            TypeError: If *payload* is not a mapping.
        """
        if not isinstance(payload, Mapping):
            raise TypeError(f"Request body must be a JSON object, got {type(payload).__name__}")

        names = {**DEFAULT_FIELD_NAMES, **(field_names or {})}
        values = {role: _as_text(payload.get(names[role])) for role in cls.roles()}
        return cls(**values)

    @classmethod
    def roles(cls) -> tuple[str, ...]:
        """Return all role names in declaration order."""
        return tuple(f.name for f in fields(cls))

    def missing_fields(self, required: tuple[str, ...]) -> tuple[str, ...]:
        """Return the roles from *required* whose value is empty or only whitespace."""
        return tuple(
            role for role in self.roles() if role in required and not getattr(self, role).strip()
        )

    def to_payload(self, field_names: Mapping[str, str] | None = None) -> dict[str, str]:
        """Serialise to a JSON body using the given wire names."""
        names = {**DEFAULT_FIELD_NAMES, **(field_names or {})}
        return {names[role]: getattr(self, role) for role in self.roles()}


def _as_text(value: Any) -> str:
    # Only strings are field values; anything else reads as missing.
    return value if isinstance(value, str) else ""
