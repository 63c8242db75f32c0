"""Template-driven generation engine: titles, section content, projects."""

from capstone.generation.assembler import assemble_project, build_chapter, describe_chapter
from capstone.generation.sections import (
    SECTION_RULES,
    classify_section,
    generate_section_content,
    parse_keywords,
)
from capstone.generation.selection import FirstChoiceSelector, Selector, default_selector
from capstone.generation.titles import generate_main_title, generate_title_options

__all__ = [
    "assemble_project",
    "build_chapter",
    "describe_chapter",
    "SECTION_RULES",
    "classify_section",
    "generate_section_content",
    "parse_keywords",
    "FirstChoiceSelector",
    "Selector",
    "default_selector",
    "generate_main_title",
    "generate_title_options",
]
