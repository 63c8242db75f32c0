"""Unit tests for the local companion strategy and chapter prompts."""

import pytest

from capstone.companion import (
    APPLY_INSTRUCTION,
    LocalCompanion,
    build_system_prompt,
    create_companion,
    quick_suggestions,
    welcome_message,
)
from capstone.companion.local import CANNED_RULES, fallback_reply, match_rule
from capstone.companion.remote import RemoteCompanion
from capstone.errors import ConfigurationError


class TestMatchRule:
    """Test keyword matching against the canned table."""

    def test_full_key_match(self):
        assert match_rule("Help me write a problem statement", 1).key == "problem statement"

    def test_case_insensitive(self):
        assert match_rule("THEORETICAL FRAMEWORK please", 2).key == "theoretical framework"

    def test_full_key_beats_first_word(self):
        """'research questions' is not taken by the earlier 'research objectives' rule."""
        assert match_rule("Help with research questions", 1).key == "research questions"

    def test_first_word_match(self):
        assert match_rule("Suggest research objectives", 1).key == "research objectives"
        assert match_rule("What data should I gather?", 3).key == "data collection"

    def test_rules_scoped_to_chapter(self):
        assert match_rule("problem statement", 4) is None

    def test_unknown_chapter(self):
        assert match_rule("anything", 9) is None


class TestLocalCompanion:
    """Test LocalCompanion.reply."""

    def test_canned_reply_format(self):
        reply = LocalCompanion().reply("Help me write a problem statement", 1, "Introduction")
        assert reply.startswith('Generated Problem Statement for "Introduction":\n\n')
        assert reply.endswith(f"\n\n{APPLY_INSTRUCTION}")

    def test_fallback_reply_has_no_instruction(self):
        reply = LocalCompanion().reply("how long should it be?", 4, "Results")
        assert reply.startswith('I understand you need help with "how long should it be?"')
        assert APPLY_INSTRUCTION not in reply
        assert "You can also ask me to generate: findings, interpretations." in reply

    def test_fallback_without_rules(self):
        reply = fallback_reply("hello", 7)
        assert "You can also ask me to generate" not in reply

    def test_every_chapter_has_rules(self):
        assert sorted(CANNED_RULES) == [1, 2, 3, 4, 5]


class TestPrompts:
    """Test welcome messages, suggestions and the system prompt."""

    @pytest.mark.parametrize("number,label", [
        (1, "Chapter 1: Introduction"),
        (3, "Chapter 3: Methodology"),
        (5, "Chapter 5: Conclusion & Recommendations"),
    ])
    def test_welcome_names_chapter(self, number, label):
        assert label in welcome_message(number)

    def test_default_welcome(self):
        assert welcome_message(8) == "Welcome! I'm here to help with your capstone project."

    def test_four_suggestions_per_chapter(self):
        for number in range(1, 6):
            assert len(quick_suggestions(number)) == 4
        assert quick_suggestions(6) == []

    def test_system_prompt_mentions_chapter_and_instruction(self):
        prompt = build_system_prompt(2, "Literature Review")
        assert "Chapter 2 (Literature Review)" in prompt
        assert '"Literature Review"' in prompt
        assert APPLY_INSTRUCTION in prompt

    def test_system_prompt_examples_only_for_chapter_one(self):
        assert "problem statement, objectives, background" in build_system_prompt(1, "Intro")
        assert "problem statement, objectives, background" not in build_system_prompt(3, "Method")

    def test_fallback_system_prompt(self):
        prompt = build_system_prompt(0, "Odd")
        assert prompt.startswith('You are an academic advisor helping with capstone project "Odd"')


class TestCreateCompanion:
    """Test strategy selection."""

    def test_local(self):
        assert isinstance(create_companion("local"), LocalCompanion)

    def test_remote(self):
        assert isinstance(create_companion("remote"), RemoteCompanion)

    def test_unknown_strategy(self):
        with pytest.raises(ConfigurationError) as exc:
            create_companion("telepathy")
        assert exc.value.details["setting"] == "COMPANION_STRATEGY"
