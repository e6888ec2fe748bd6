"""Choice catalogues offered by the form.

The endpoint accepts any non-empty string for each field; these lists only
drive the dropdowns and the ``GET /api/options`` listing.  Each entry is a
``(label, value)`` pair in the order the form shows them.
"""

AGE_RANGES: list[tuple[str, str]] = [
    ("15-25", "15-25"),
    ("26-35", "26-35"),
    ("36-45", "36-45"),
    ("46-55", "46-55"),
    ("Over 55", "over 55"),
]

SITUATIONS: list[tuple[str, str]] = [
    ("Being More Present", "Being More Present"),
    ("Recent Health Diagnosis", "recent health diagnosis"),
    ("New Job", "new job"),
]

LENSES: list[tuple[str, str]] = [
    ("Christian", "christian"),
    ("Stoic", "stoic"),
    ("Buddhism", "buddhism"),
    ("Rastafarianism", "rastafarianism"),
]

STYLES: list[tuple[str, str]] = [
    ("Reflective", "reflective"),
    ("Gentle", "gentle"),
    ("Practical", "practical"),
    ("Challenging", "challenging"),
    ("Poetic", "poetic"),
]

PROMPT_COUNTS: list[tuple[str, str]] = [
    ("1", "1"),
    ("3-5", "3-5"),
    ("10", "10"),
    ("15", "15"),
]


def as_options(choices: list[tuple[str, str]]) -> list[dict[str, str]]:
    """Convert ``(label, value)`` pairs to ``{"label", "value"}`` dicts."""
    return [{"label": label, "value": value} for label, value in choices]
