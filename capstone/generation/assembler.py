"""Project assembler.

Resolves the main title and builds the five chapters in order.
"""

import logging

from capstone.generation.sections import generate_section_content
from capstone.generation.selection import Selector, default_selector
from capstone.generation.titles import generate_main_title
from capstone.state.models import (
    ChapterTemplate,
    FormInput,
    GeneratedChapter,
    GeneratedProject,
    GeneratedSection,
)
from capstone.templates.chapters import iter_chapter_templates
from capstone.templates.fields import is_known_field, lookup_field

logger = logging.getLogger(__name__)

METHODOLOGY_CHAPTER = 3


def describe_chapter(template: ChapterTemplate, field: str, selector: Selector) -> str:
    """One-line chapter description.

    The methodology chapter of a known field names one of the field's
    methodology phrases; every other chapter gets the generic line.
    """
    if template.number == METHODOLOGY_CHAPTER and is_known_field(field):
        focus = selector.choice(lookup_field(field).methodology_focus)
        return (
            f"This chapter details the research methodology with emphasis on "
            f"{focus.lower()} and systematic data collection procedures."
        )
    first_section = template.sections[0].title.lower()
    return f"This chapter focuses on {first_section} and related components."


def build_chapter(template: ChapterTemplate, form: FormInput, selector: Selector) -> GeneratedChapter:
    """Build one chapter with fresh section content."""
    title = selector.choice(template.titles)
    description = describe_chapter(template, form.field, selector)
    sections = [
        GeneratedSection(
            title=section.title,
            content=generate_section_content(
                section.title,
                form.field,
                form.topic,
                form.keyword_list,
                form.research_type,
                template.number,
                description=section.description,
                selector=selector,
            ),
        )
        for section in template.sections
    ]
    return GeneratedChapter(
        number=template.number,
        title=title,
        description=description,
        objectives=list(template.objectives),
        sections=sections,
        expected_pages=template.expected_pages,
        key_components=list(template.key_components),
    )


def assemble_project(
    form: FormInput,
    chosen_title: str | None = None,
    selector: Selector | None = None,
) -> GeneratedProject:
    """Assemble a complete five-chapter project.

    Args:
        form: Parsed project form
        chosen_title: Title picked from the options; synthesized when omitted
        selector: Selection source shared by every pick in this run

    Returns:
        GeneratedProject with chapters 1..5 in order
    """
    selector = selector or default_selector()
    main_title = chosen_title or generate_main_title(form, selector)

    chapters = [build_chapter(template, form, selector) for template in iter_chapter_templates()]
    logger.info(
        f"Assembled project '{main_title}' with {len(chapters)} chapters "
        f"and {sum(len(c.sections) for c in chapters)} sections"
    )
    return GeneratedProject(main_title=main_title, chapters=chapters)
