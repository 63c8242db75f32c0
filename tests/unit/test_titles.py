"""Unit tests for the title option generator."""

import logging

import pytest

from capstone.generation import (
    FirstChoiceSelector,
    Selector,
    generate_main_title,
    generate_title_options,
)
from capstone.state.models import FormInput


TOPIC = "Machine Learning in Healthcare"


class TestGenerateTitleOptions:
    """Test generate_title_options."""

    def test_known_field_returns_five_distinct(self, sample_form, seeded_selector):
        """A known field yields exactly five distinct titles containing the topic."""
        titles = generate_title_options(sample_form, selector=seeded_selector)
        assert len(titles) == 5
        assert len(set(titles)) == 5
        assert all(TOPIC in title for title in titles)

    def test_prefix_context_pairing_and_clause(self, sample_form, seeded_selector):
        """Prefix i pairs with context i; even positions carry the clause."""
        titles = generate_title_options(sample_form, selector=seeded_selector)
        assert titles[0] == f"Development of an Intelligent {TOPIC} System: A Quantitative Analysis"
        assert titles[1] == f"Implementation of Advanced {TOPIC} Framework"
        assert titles[2] == f"Design and Analysis of Scalable {TOPIC} Algorithm: A Quantitative Analysis"
        assert titles[3] == f"Machine Learning Approach to {TOPIC} Platform"
        assert titles[4] == f"AI-Powered Solution for {TOPIC} Architecture: A Quantitative Analysis"

    def test_no_research_type_no_clause(self):
        form = FormInput(field="business", topic="Supply Risk")
        titles = generate_title_options(form, selector=Selector.seeded(1))
        assert titles[0] == "Strategic Digital Transformation of Supply Risk Organizations"
        assert not any(":" in title for title in titles)

    def test_unknown_research_type_appends_nothing(self):
        form = FormInput(field="business", topic="Supply Risk", research_type="ethnographic")
        titles = generate_title_options(form, selector=Selector.seeded(1))
        assert not any(":" in title for title in titles)

    def test_generic_field_titles(self):
        """Unknown fields use the generic prefixes with no context."""
        form = FormInput(field="arts", topic="Street Murals")
        titles = generate_title_options(form, selector=Selector.seeded(1))
        assert titles == [
            "Comprehensive Analysis of Street Murals",
            "Investigation into Street Murals",
            "Advanced Study on Street Murals",
            "Strategic Approach to Street Murals",
            "Innovative Solutions for Street Murals",
        ]

    def test_never_more_than_limit(self, sample_form, seeded_selector):
        assert len(generate_title_options(sample_form, selector=seeded_selector, limit=3)) == 3

    def test_fill_loop_adds_unique_titles(self):
        """Random fill extends the list with new prefix/context pairs."""
        form = FormInput(field="engineering", topic="Bridges")
        titles = generate_title_options(form, selector=Selector.seeded(3), limit=8)
        assert len(titles) == 8
        assert len(set(titles)) == 8

    def test_fill_loop_is_bounded(self):
        """When no more unique titles exist the loop stops after max_attempts."""
        form = FormInput(field="other", topic="Street Murals")
        titles = generate_title_options(
            form, selector=Selector.seeded(3), max_attempts=10, limit=7
        )
        assert len(titles) == 5

    def test_empty_topic_keeps_double_space(self, caplog):
        """An empty topic is not silently corrected, but it is logged."""
        form = FormInput(field="computer-science", topic="")
        with caplog.at_level(logging.WARNING):
            titles = generate_title_options(form, selector=Selector.seeded(1))
        assert titles[1] == "Implementation of Advanced  Framework"
        assert "empty topic" in caplog.text

    def test_seeded_runs_are_reproducible(self):
        form = FormInput(field="other", topic="X", research_type="mixed")
        first = generate_title_options(form, selector=Selector.seeded(9), limit=8)
        second = generate_title_options(form, selector=Selector.seeded(9), limit=8)
        assert first == second


class TestGenerateMainTitle:
    """Test generate_main_title."""

    def test_first_choice(self, sample_form):
        title = generate_main_title(sample_form, selector=FirstChoiceSelector())
        assert title == f"Development of an Intelligent {TOPIC} System: A Quantitative Analysis"

    def test_title_is_one_of_the_options(self, sample_form):
        options = generate_title_options(sample_form, selector=Selector.seeded(5))
        title = generate_main_title(sample_form, selector=Selector.seeded(5))
        assert title in options


class TestSelector:
    """Test the selection source."""

    def test_seeded_selector_is_deterministic(self):
        a = Selector.seeded(11)
        b = Selector.seeded(11)
        assert [a.index(10) for _ in range(5)] == [b.index(10) for _ in range(5)]

    def test_first_choice_selector(self):
        assert FirstChoiceSelector().choice(["a", "b", "c"]) == "a"

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValueError):
            Selector.seeded(1).choice([])
