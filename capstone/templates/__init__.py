"""Static template data: field phrase banks and chapter templates."""

from capstone.templates.chapters import (
    CHAPTER_TEMPLATES,
    get_chapter_template,
    iter_chapter_templates,
)
from capstone.templates.fields import (
    FIELD_TEMPLATES,
    GENERIC_FIELD_TEMPLATE,
    RESEARCH_TYPE_CLAUSES,
    is_known_field,
    lookup_field,
    research_type_clause,
)

__all__ = [
    "CHAPTER_TEMPLATES",
    "get_chapter_template",
    "iter_chapter_templates",
    "FIELD_TEMPLATES",
    "GENERIC_FIELD_TEMPLATE",
    "RESEARCH_TYPE_CLAUSES",
    "is_known_field",
    "lookup_field",
    "research_type_clause",
]
