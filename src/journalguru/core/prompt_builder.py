"""Instruction-string compilation for Journal Guru.

The instruction string briefs a language model to write personalised journal
prompts.  It is assembled from the user's preferences plus fixed coaching
requirements, and is either shown to the user for copy-paste (copy mode) or
sent to the hosted generator by the endpoint (generate mode).

Template Structure::

    [Fixed: coaching role + "Please create N journal prompt(s)..."]

    Age Range / Life Situation / Philosophical/Spiritual Lens
    [Style/Focus - only when a style was chosen]

    Requirements:
    [Fixed requirement clauses, with the style clause only when a style
    was chosen]

    [Fixed: closing request]

    [Fixed: output directive - generator-facing prompts only]

Count Rendering
---------------
``"3-5"`` is rendered as ``"3 to 5"``; every other count is used verbatim.
A count of ``"1"`` takes the singular noun ("journal prompt"), everything
else the plural.

Mock Responses
--------------
:func:`build_mock_prompts` produces the text the endpoint returns in mock
mode.  It interpolates the same fields into a different, ready-to-read
template so that the offline experience resembles a real generation.

Usage
-----
::

    request = PromptRequest(
        age_range="26-35",
        situation="new job",
        lens="stoic",
        style="reflective",
        prompt_count="3-5",
    )
    instruction = build_prompt(request, include_output_directive=True)
"""

from __future__ import annotations

from .models import PromptRequest

# ---------------------------------------------------------------------------
# Fixed sections.
# ---------------------------------------------------------------------------

_ROLE_PREAMBLE = (
    "You are a thoughtful journaling coach helping someone develop meaningful "
    "self-reflection practices."
)

_CLOSING = (
    "Please provide thoughtful, compassionate prompts that will genuinely help this "
    "person gain insight and clarity."
)

OUTPUT_DIRECTIVE = (
    "Output only the journal prompts and any accompanying guidance. Do not include an "
    "introduction, preamble, summary, or closing remarks, and do not offer follow-up "
    "questions or further help. Stop immediately after the final prompt."
)

_MOCK_NOTE = (
    "(Mock mode: these prompts were generated locally. Configure ANTHROPIC_API_KEY "
    "to receive AI-written prompts.)"
)


def format_prompt_count(prompt_count: str) -> str:
    """Render a prompt-count token for use in a sentence."""
    return "3 to 5" if prompt_count == "3-5" else prompt_count


def prompt_noun(prompt_count: str) -> str:
    """Return ``"prompt"`` for a count of one, ``"prompts"`` otherwise."""
    return "prompt" if prompt_count == "1" else "prompts"


def build_prompt(request: PromptRequest, *, include_output_directive: bool = False) -> str:
    """Compile the instruction string for a complete request.

    The caller is responsible for validation; every field is embedded
    verbatim.  The style line and the style requirement are omitted when the
    request carries no style.

    Args:
        request: A validated :class:`PromptRequest`.
        include_output_directive: Append :data:`OUTPUT_DIRECTIVE` so that a
            downstream generator returns the prompts and nothing else.

    Returns:
        The instruction string.  Identical input gives identical output.
    """
    count = format_prompt_count(request.prompt_count)
    noun = prompt_noun(request.prompt_count)

    profile = [
        f"Age Range: {request.age_range}",
        f"Life Situation: {request.situation}",
        f"Philosophical/Spiritual Lens: {request.lens}",
    ]
    if request.style.strip():
        profile.append(f"Style/Focus: {request.style}")

    requirements = [
        "Requirements:",
        "- Tailor the language and complexity to be age-appropriate for someone in the "
        f"{request.age_range} age range",
        f'- Focus specifically on helping them explore "{request.situation}"',
        f"- Frame the prompts through a {request.lens} perspective, incorporating relevant "
        "principles and wisdom from this tradition",
    ]
    if request.style.strip():
        requirements.append(f"- Use a {request.style} style/tone in crafting these prompts")
    requirements += [
        "- Make each prompt open-ended to encourage deep reflection",
        "- Ensure prompts are specific enough to be actionable but broad enough to allow "
        "personal interpretation",
        "- Include gentle guidance on how to approach the prompt if helpful",
    ]

    sections = [
        f"{_ROLE_PREAMBLE} Please create {count} journal {noun} for the following person:",
        "\n".join(profile),
        "\n".join(requirements),
        _CLOSING,
    ]
    if include_output_directive:
        sections.append(OUTPUT_DIRECTIVE)

    return "\n\n".join(sections)


def requested_prompt_total(prompt_count: str) -> int | None:
    """Return the smallest number of prompts a count token asks for.

    ``"3-5"`` gives 3, ``"10"`` gives 10.  Tokens that are not a number or a
    numeric range give ``None``.
    """
    try:
        return int(prompt_count.split("-", 1)[0])
    except ValueError:
        return None


def build_mock_prompts(request: PromptRequest) -> str:
    """Fabricate a response locally for mock mode.

    At most three sample prompts are written.  When the request asks for
    more, a footer states how many are shown out of how many were requested.

    Args:
        request: A validated :class:`PromptRequest`.

    Returns:
        A numbered list of sample prompts mentioning each field.
    """
    style = request.style if request.style.strip() else "reflective"
    heading = (
        f"Journal prompts for {request.situation} "
        f"(ages {request.age_range}, {request.lens} lens, {style} tone)"
    )
    samples = [
        (
            f'When you think about "{request.situation}", what feeling arrives first, and '
            "where do you notice it in your body?",
            f"Write without editing for five minutes. Let the {request.lens} tradition "
            "remind you that noticing is already a practice.",
        ),
        (
            f"What would someone at your stage of life ({request.age_range}) most need to "
            f'hear about "{request.situation}"? Write it to yourself as a letter.',
            "Keep the tone kind and specific.",
        ),
        (
            f"Which teaching from the {request.lens} tradition speaks to this moment, and "
            "what would it look like to live it for one day?",
            "End by naming one small action you can take tomorrow.",
        ),
    ]

    requested = requested_prompt_total(request.prompt_count)
    shown = len(samples) if requested is None else max(1, min(requested, len(samples)))

    lines = [heading, ""]
    for number, (prompt, guidance) in enumerate(samples[:shown], start=1):
        lines.append(f"{number}. {prompt}")
        lines.append(f"   Guidance: {guidance}")
    lines.append("")
    if requested is not None and shown < requested:
        lines.append(
            f"Showing {shown} of {format_prompt_count(request.prompt_count)} requested "
            f"{prompt_noun(request.prompt_count)}."
        )
    lines.append(_MOCK_NOTE)
    return "\n".join(lines)
