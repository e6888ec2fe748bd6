"""Tests for journalguru.core.prompt_builder: instruction-string compilation.

Tests cover:
- Determinism of ``build_prompt``.
- Count rendering ("3-5" -> "3 to 5") and singular/plural wording.
- Optional style line and style requirement.
- The generator-facing output directive.
- The mock-mode response template.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from journalguru.core.models import PromptRequest
from journalguru.core.prompt_builder import (
    OUTPUT_DIRECTIVE,
    build_mock_prompts,
    build_prompt,
    format_prompt_count,
    prompt_noun,
    requested_prompt_total,
)


class TestFormatPromptCount:
    """Test the count token rendering."""

    def test_range_is_spelled_out(self):
        assert format_prompt_count("3-5") == "3 to 5"

    @pytest.mark.parametrize("count", ["1", "10", "15"])
    def test_other_counts_unchanged(self, count):
        assert format_prompt_count(count) == count


class TestPromptNoun:
    """Test singular/plural selection."""

    def test_one_is_singular(self):
        assert prompt_noun("1") == "prompt"

    @pytest.mark.parametrize("count", ["3-5", "10", "15"])
    def test_other_counts_are_plural(self, count):
        assert prompt_noun(count) == "prompts"


class TestBuildPrompt:
    """Test build_prompt output."""

    def test_deterministic(self, valid_request):
        """The same request should always produce the same string."""
        assert build_prompt(valid_request) == build_prompt(valid_request)
        assert build_prompt(valid_request, include_output_directive=True) == build_prompt(
            valid_request, include_output_directive=True
        )

    def test_end_to_end_substrings(self, valid_request):
        """Every field should appear verbatim in its clause."""
        result = build_prompt(valid_request)

        assert "26-35" in result
        assert "new job" in result
        assert "stoic perspective" in result
        assert "reflective style/tone" in result
        assert "3 to 5 journal prompts" in result

    def test_single_prompt_uses_singular(self, valid_request):
        result = build_prompt(replace(valid_request, prompt_count="1"))

        assert "1 journal prompt for" in result
        assert "1 journal prompts" not in result

    @pytest.mark.parametrize("count", ["10", "15"])
    def test_larger_counts_use_plural(self, valid_request, count):
        result = build_prompt(replace(valid_request, prompt_count=count))

        assert f"{count} journal prompts for" in result

    def test_starts_with_coaching_role(self, valid_request):
        result = build_prompt(valid_request)

        assert result.startswith(
            "You are a thoughtful journaling coach helping someone develop meaningful "
            "self-reflection practices. Please create 3 to 5 journal prompts for the "
            "following person:"
        )

    def test_profile_block(self, valid_request):
        result = build_prompt(valid_request)

        assert (
            "Age Range: 26-35\n"
            "Life Situation: new job\n"
            "Philosophical/Spiritual Lens: stoic\n"
            "Style/Focus: reflective"
        ) in result

    def test_requirement_clauses(self, valid_request):
        result = build_prompt(valid_request)

        assert "age-appropriate for someone in the 26-35 age range" in result
        assert 'Focus specifically on helping them explore "new job"' in result
        assert "Make each prompt open-ended to encourage deep reflection" in result
        assert "specific enough to be actionable but broad enough" in result
        assert "Include gentle guidance on how to approach the prompt if helpful" in result

    def test_without_style_omits_style_lines(self, valid_request):
        result = build_prompt(replace(valid_request, style=""))

        assert "Style/Focus" not in result
        assert "style/tone" not in result
        assert "Philosophical/Spiritual Lens: stoic\n\nRequirements:" in result

    def test_whitespace_style_omits_style_lines(self, valid_request):
        result = build_prompt(replace(valid_request, style="  "))

        assert "Style/Focus" not in result
        assert "style/tone" not in result

    def test_ends_with_closing_by_default(self, valid_request):
        result = build_prompt(valid_request)

        assert result.endswith("genuinely help this person gain insight and clarity.")
        assert OUTPUT_DIRECTIVE not in result

    def test_output_directive_appended_verbatim(self, valid_request):
        result = build_prompt(valid_request, include_output_directive=True)

        assert result.endswith("\n\n" + OUTPUT_DIRECTIVE)
        assert "Stop immediately after the final prompt." in OUTPUT_DIRECTIVE

    def test_sections_separated_by_blank_lines(self, valid_request):
        sections = build_prompt(valid_request).split("\n\n")

        assert len(sections) == 4
        assert sections[2].startswith("Requirements:")


class TestBuildMockPrompts:
    """Test the mock-mode response template."""

    def test_mentions_every_field(self, valid_request):
        result = build_mock_prompts(valid_request)

        assert "new job" in result
        assert "stoic" in result
        assert "26-35" in result
        assert "reflective" in result

    def test_differs_from_instruction_string(self, valid_request):
        assert build_mock_prompts(valid_request) != build_prompt(valid_request)
        assert "journaling coach" not in build_mock_prompts(valid_request)

    def test_is_multiline_numbered_list(self, valid_request):
        lines = build_mock_prompts(valid_request).splitlines()

        assert any(line.startswith("1. ") for line in lines)
        assert any(line.startswith("3. ") for line in lines)

    def test_deterministic(self, valid_request):
        assert build_mock_prompts(valid_request) == build_mock_prompts(valid_request)

    def test_notes_mock_mode(self, valid_request):
        assert "Mock mode" in build_mock_prompts(valid_request)

    def test_single_prompt(self, valid_request):
        result = build_mock_prompts(replace(valid_request, prompt_count="1"))
        lines = result.splitlines()

        assert any(line.startswith("1. ") for line in lines)
        assert not any(line.startswith("2. ") for line in lines)
        assert "Showing" not in result

    def test_range_shows_lower_bound(self, valid_request):
        lines = build_mock_prompts(valid_request).splitlines()

        assert not any(line.startswith("4. ") for line in lines)
        assert not any(line.startswith("Showing") for line in lines)

    @pytest.mark.parametrize("count", ["10", "15"])
    def test_large_count_states_shown_total(self, valid_request, count):
        result = build_mock_prompts(replace(valid_request, prompt_count=count))
        lines = result.splitlines()

        assert not any(line.startswith("4. ") for line in lines)
        assert f"Showing 3 of {count} requested prompts." in lines

    def test_unparsed_count_has_no_footer(self, valid_request):
        result = build_mock_prompts(replace(valid_request, prompt_count="a few"))

        assert "3. " in result
        assert "Showing" not in result


class TestRequestedPromptTotal:
    """Test count-token parsing for mock responses."""

    @pytest.mark.parametrize(
        "token, expected",
        [("1", 1), ("3-5", 3), ("10", 10), ("15", 15), ("many", None), ("", None)],
    )
    def test_tokens(self, token, expected):
        assert requested_prompt_total(token) == expected


def test_build_prompt_accepts_payload_request():
    """A request read from a payload should build the same string."""
    request = PromptRequest.from_payload(
        {"age": "over 55", "issue": "Being More Present", "lens": "buddhism", "numPrompts": "10"}
    )
    result = build_prompt(request)

    assert "over 55 age range" in result
    assert "buddhism perspective" in result
    assert "10 journal prompts" in result
