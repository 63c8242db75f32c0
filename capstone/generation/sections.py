"""Section content generator.

Builds the multi-paragraph body of one section from the chapter's narrative
frame, an optional special-case appendix, a field-specific perspective
sentence and a keyword paragraph. Paragraphs are separated by a blank line.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from capstone.generation.selection import Selector, default_selector
from capstone.state.enums import SectionTag
from capstone.templates.fields import lookup_field

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"
MAX_KEYWORDS_MENTIONED = 3


# =============================================================================
# Narrative Frames
# =============================================================================

# Paragraphs following the intro line, per chapter number. Placeholders:
# {topic} and {section} (the lower-cased section title).
CHAPTER_FRAMES: dict[int, tuple[str, ...]] = {
    1: (
        "This opening chapter establishes the research context and rationale for studying "
        "{topic}. It clarifies the foundational concepts, situates the study within its "
        "real-world setting, and frames why the inquiry matters.",
        "In the {section}, key elements are articulated: the context of the issue, the core "
        "gap to be addressed, and the expected contributions. The discussion aligns the "
        "research objectives and questions with the significance of the study and defines "
        "the scope and limitations to maintain a realistic and achievable investigation.",
    ),
    2: (
        "This chapter synthesizes theories and prior studies relevant to {topic}. It maps "
        "seminal works, competing viewpoints, and methodological patterns to build a clear "
        "theoretical and conceptual foundation.",
        "For the {section}, emphasis is placed on tracing key constructs, comparing findings "
        "across sources, and identifying where knowledge converges or diverges. The section "
        "culminates in a precise research gap that justifies the present study.",
    ),
    3: (
        "This chapter details the research design, population/sampling, instruments, "
        "procedures, and analysis techniques that ensure rigor and replicability. Choices "
        "are aligned with the research objectives and constraints.",
        "Within the {section}, protocols are specified for data collection, operational "
        "definitions, instrument validation, and ethical safeguards. Analysis plans describe "
        "how data will be processed to answer each research question with appropriate "
        "statistics or qualitative techniques.",
    ),
    4: (
        "Here the study presents results derived from the collected data and interprets them "
        "in relation to the research questions, theory, and prior literature. Visualizations "
        "and tables support transparent reporting.",
        "In the {section}, findings are explained for practical and theoretical significance, "
        "including effect sizes or thematic strength, limitations in inference, and "
        "comparisons with earlier studies. Implications highlight how stakeholders can use "
        "the results.",
    ),
    5: (
        "The final chapter consolidates insights, states evidence-backed conclusions, and "
        "proposes actionable recommendations. It also clarifies the study's contributions "
        "and outlines promising directions for future work.",
        "For the {section}, the narrative links conclusions to the data, prioritizes "
        "recommendations by feasibility and impact, and reflects on limitations encountered. "
        "Future research suggestions indicate how subsequent studies can extend or refine "
        "the present work.",
    ),
}

DEFAULT_FRAME: tuple[str, ...] = (
    "This section provides targeted analysis tailored to the chapter's objectives, ensuring "
    "clear alignment between {section} and the overarching investigation of {topic}.",
)


# =============================================================================
# Special-Case Routing
# =============================================================================

PROBLEM_STATEMENT_APPENDIX = (
    "Standard Operating Procedures (SOPs) applied to address the problem: "
    "(1) Problem Analysis SOP: identify, categorize, and prioritize root causes; "
    "(2) Solution Development SOP: design candidate interventions, evaluate feasibility, "
    "and plan pilots; "
    "(3) Implementation Monitoring SOP: track KPIs, gather feedback, and iterate improvements."
)

SCOPE_AND_LIMITATIONS_APPENDIX = (
    "To manage constraints, the study enforces: "
    "(1) Scope Definition SOP: explicit inclusion/exclusion criteria and resource allocation; "
    "(2) Risk Mitigation SOP: early identification of risks with response plans; "
    "(3) Quality Assurance SOP: periodic checks for validity, reliability, and adherence "
    "to protocol."
)


@dataclass(frozen=True)
class SectionRule:
    """A first-match-wins routing rule for section special cases."""

    tag: SectionTag
    matches: Callable[[str, int], bool]
    appendix: str


SECTION_RULES: tuple[SectionRule, ...] = (
    SectionRule(
        tag=SectionTag.PROBLEM_STATEMENT,
        matches=lambda title, chapter: chapter == 1 and "statement of the problem" in title,
        appendix=PROBLEM_STATEMENT_APPENDIX,
    ),
    SectionRule(
        tag=SectionTag.SCOPE_AND_LIMITATIONS,
        matches=lambda title, chapter: chapter == 1 and "scope and limitations" in title,
        appendix=SCOPE_AND_LIMITATIONS_APPENDIX,
    ),
)


def _match_rule(section_title: str, chapter_number: int) -> SectionRule | None:
    normalized = section_title.lower()
    for rule in SECTION_RULES:
        if rule.matches(normalized, chapter_number):
            return rule
    return None


def classify_section(section_title: str, chapter_number: int) -> SectionTag:
    """Tag a section for special-case content."""
    rule = _match_rule(section_title, chapter_number)
    return rule.tag if rule else SectionTag.GENERAL


# =============================================================================
# Generator
# =============================================================================


def parse_keywords(keywords: str | Iterable[str] | None) -> list[str]:
    """Trimmed, empty-filtered keyword list from a comma string or a list."""
    if not keywords:
        return []
    items = keywords.split(",") if isinstance(keywords, str) else keywords
    return [k.strip() for k in items if k and k.strip()]


def keyword_paragraph(keywords: list[str], topic: str) -> str:
    mentioned = ", ".join(keywords[:MAX_KEYWORDS_MENTIONED])
    return (
        f"Key aspects of this research include {mentioned}, which are essential components "
        f"of {topic}. These elements provide critical context for understanding the broader "
        f"implications of the study and its potential applications."
    )


def generate_section_content(
    section_title: str,
    field: str,
    topic: str,
    keywords: str | Iterable[str] | None,
    research_type: str,
    chapter_number: int,
    description: str = "",
    selector: Selector | None = None,
) -> str:
    """Generate the body text of one section.

    Args:
        section_title: Section heading, e.g. "Statement of the Problem"
        field: Field of study key; unknown keys use the generic phrase bank
        topic: Research topic interpolated into the text
        keywords: Comma-separated string or list of keywords
        research_type: Research type key, may be empty
        chapter_number: Chapter the section belongs to (1..5)
        description: Template description used as the lead paragraph
        selector: Selection source for the methodology phrase

    Returns:
        Paragraphs joined by a blank line. The keyword paragraph, when
        present, is always last.
    """
    selector = selector or default_selector()
    section = section_title.lower()
    approach = f" using a {research_type} approach" if research_type else ""

    paragraphs: list[str] = []
    if description:
        paragraphs.append(description)
    paragraphs.append(f"This {section} focuses on {topic}{approach}.")

    frame = CHAPTER_FRAMES.get(chapter_number, DEFAULT_FRAME)
    paragraphs.extend(p.format(topic=topic, section=section) for p in frame)

    rule = _match_rule(section_title, chapter_number)
    if rule:
        paragraphs.append(rule.appendix)

    methodology = selector.choice(lookup_field(field).methodology_focus)
    paragraphs.append(
        f"Field-specific perspective: Emphasizes {methodology.lower()} for {topic} "
        f"within the {section} context."
    )

    keyword_list = parse_keywords(keywords)
    if keyword_list:
        paragraphs.append(keyword_paragraph(keyword_list, topic))

    return PARAGRAPH_SEPARATOR.join(paragraphs)
