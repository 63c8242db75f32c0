"""Unit tests for the field knowledge base and chapter template bank."""

import pytest

from capstone.state.enums import CHAPTER_NUMBERS, ChapterKind, FieldKey
from capstone.templates import (
    CHAPTER_TEMPLATES,
    FIELD_TEMPLATES,
    GENERIC_FIELD_TEMPLATE,
    get_chapter_template,
    is_known_field,
    iter_chapter_templates,
    lookup_field,
    research_type_clause,
)


class TestLookupField:
    """Test lookup_field and is_known_field."""

    @pytest.mark.parametrize("key", [
        "computer-science", "business", "education",
        "psychology", "engineering", "healthcare",
    ])
    def test_known_fields_have_own_template(self, key):
        """Known keys resolve to their own phrase bank."""
        template = lookup_field(key)
        assert template is FIELD_TEMPLATES[key]
        assert template is not GENERIC_FIELD_TEMPLATE
        assert is_known_field(key)

    @pytest.mark.parametrize("key", ["other", "arts", "social-sciences", "", None, "astrology"])
    def test_unknown_fields_fall_back_to_generic(self, key):
        """Other, empty and unknown keys use the generic template."""
        assert lookup_field(key) is GENERIC_FIELD_TEMPLATE
        assert not is_known_field(key)

    def test_every_known_template_has_five_prefixes(self):
        """Each phrase bank offers five prefixes, contexts and focuses."""
        for template in FIELD_TEMPLATES.values():
            assert len(template.prefixes) == 5
            assert len(template.contexts) == 5
            assert len(template.methodology_focus) == 5

    def test_generic_template_has_neutral_context(self):
        """The generic template adds no context suffix."""
        assert GENERIC_FIELD_TEMPLATE.contexts == ("",)
        assert GENERIC_FIELD_TEMPLATE.prefixes[0] == "Comprehensive Analysis of"

    def test_tables_are_read_only(self):
        """Template tables cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            FIELD_TEMPLATES["new-field"] = GENERIC_FIELD_TEMPLATE  # type: ignore[index]
        with pytest.raises(TypeError):
            CHAPTER_TEMPLATES[6] = CHAPTER_TEMPLATES[1]  # type: ignore[index]

    def test_field_template_is_frozen(self):
        """FieldTemplate instances reject attribute assignment."""
        with pytest.raises(Exception):
            GENERIC_FIELD_TEMPLATE.prefixes = ("x",)

    def test_field_enum_covers_template_keys(self):
        """Every template key is a FieldKey value."""
        values = {k.value for k in FieldKey}
        assert set(FIELD_TEMPLATES) <= values


class TestResearchTypeClause:
    """Test research_type_clause."""

    def test_known_clauses(self):
        assert research_type_clause("quantitative") == ": A Quantitative Analysis"
        assert research_type_clause("case-study") == ": A Case Study Analysis"
        assert research_type_clause("mixed") == ": A Mixed-Methods Approach"

    def test_unknown_type_appends_nothing(self):
        assert research_type_clause("ethnographic") == ""
        assert research_type_clause("") == ""
        assert research_type_clause(None) == ""


class TestChapterTemplates:
    """Test the chapter template bank."""

    def test_five_templates_in_order(self):
        """Templates are numbered 1..5 with the fixed chapter kinds."""
        templates = list(iter_chapter_templates())
        assert tuple(t.number for t in templates) == CHAPTER_NUMBERS
        assert [t.kind for t in templates] == [
            ChapterKind.INTRODUCTION,
            ChapterKind.LITERATURE_REVIEW,
            ChapterKind.METHODOLOGY,
            ChapterKind.RESULTS,
            ChapterKind.CONCLUSION,
        ]

    def test_section_counts(self):
        counts = [len(get_chapter_template(n).sections) for n in CHAPTER_NUMBERS]
        assert counts == [6, 5, 6, 5, 6]

    def test_every_template_has_three_titles(self):
        for template in iter_chapter_templates():
            assert len(template.titles) == 3
            assert len(template.objectives) == 4
            assert template.expected_pages.endswith("pages")

    def test_chapter_one_sections(self):
        titles = [s.title for s in get_chapter_template(1).sections]
        assert "Statement of the Problem" in titles
        assert "Scope and Limitations" in titles
        assert titles[0] == "Background of the Study"

    @pytest.mark.parametrize("number", [0, 6, -1])
    def test_invalid_number_raises(self, number):
        """Out-of-range chapter numbers are a programming error."""
        with pytest.raises(ValueError):
            get_chapter_template(number)
