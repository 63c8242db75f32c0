"""Chapter template bank.

Static description of the five chapters every capstone document has.
"""

from types import MappingProxyType
from typing import Iterator, Mapping

from capstone.state.enums import CHAPTER_NUMBERS, ChapterKind
from capstone.state.models import ChapterTemplate, SectionTemplate


def _sections(*pairs: tuple[str, str]) -> tuple[SectionTemplate, ...]:
    return tuple(SectionTemplate(title=title, description=description) for title, description in pairs)


CHAPTER_TEMPLATES: Mapping[int, ChapterTemplate] = MappingProxyType({
    1: ChapterTemplate(
        number=1,
        kind=ChapterKind.INTRODUCTION,
        titles=(
            "Introduction and Background",
            "Problem Statement and Research Context",
            "Introduction to the Study",
        ),
        objectives=(
            "Establish the research problem and its significance",
            "Define research objectives and questions",
            "Present the scope and limitations of the study",
            "Outline the structure and organization of the research",
        ),
        sections=_sections(
            (
                "Background of the Study",
                "Provides contextual information about the research area and establishes "
                "the foundation for the investigation.",
            ),
            (
                "Statement of the Problem",
                "Clearly articulates the specific problem or gap that the research addresses. "
                "Includes three Standard Operating Procedures (SOPs) to systematically solve the "
                "identified issues: 1) Problem Analysis SOP: systematic identification and "
                "documentation of root causes; 2) Solution Development SOP: structured approach "
                "to developing evidence-based solutions; 3) Implementation Monitoring SOP: "
                "continuous assessment and adjustment protocols.",
            ),
            (
                "Research Objectives",
                "Lists the primary and secondary objectives that guide the research investigation.",
            ),
            (
                "Research Questions",
                "Formulates specific questions that the study aims to answer through "
                "systematic investigation.",
            ),
            (
                "Significance of the Study",
                "Explains the importance and potential impact of the research findings.",
            ),
            (
                "Scope and Limitations",
                "Defines the boundaries of the study and acknowledges inherent constraints. "
                "Includes three Standard Operating Procedures (SOPs) to address limitations: "
                "1) Scope Definition SOP: systematic boundary setting and resource allocation "
                "protocols; 2) Risk Mitigation SOP: proactive identification and management of "
                "potential study constraints; 3) Quality Assurance SOP: continuous monitoring "
                "and validation procedures to maintain research integrity within defined "
                "limitations.",
            ),
        ),
        expected_pages="15-25 pages",
        key_components=(
            "Problem identification",
            "Research rationale",
            "Conceptual framework",
            "Thesis statement",
        ),
    ),
    2: ChapterTemplate(
        number=2,
        kind=ChapterKind.LITERATURE_REVIEW,
        titles=(
            "Literature Review and Theoretical Framework",
            "Review of Related Literature",
            "Theoretical Foundation and Related Studies",
        ),
        objectives=(
            "Synthesize existing knowledge in the research area",
            "Identify gaps in current literature",
            "Establish theoretical foundation for the study",
            "Develop conceptual framework for research",
        ),
        sections=_sections(
            (
                "Theoretical Framework",
                "Presents the underlying theories that guide the research approach and methodology.",
            ),
            (
                "Related Literature Review",
                "Comprehensive analysis of previous studies, publications, and research findings.",
            ),
            (
                "Conceptual Framework",
                "Visual and textual representation of the relationships between key variables "
                "and concepts.",
            ),
            (
                "Research Gap Analysis",
                "Identification and analysis of gaps in existing knowledge that justify the "
                "current study.",
            ),
            (
                "Literature Synthesis",
                "Integration of findings from multiple sources to build a cohesive understanding.",
            ),
        ),
        expected_pages="25-40 pages",
        key_components=(
            "Theory application",
            "Critical analysis",
            "Knowledge synthesis",
            "Research positioning",
        ),
    ),
    3: ChapterTemplate(
        number=3,
        kind=ChapterKind.METHODOLOGY,
        titles=(
            "Research Methodology and Design",
            "Methods and Procedures",
            "Research Approach and Methodology",
        ),
        objectives=(
            "Describe the research design and approach",
            "Explain data collection procedures and instruments",
            "Detail sampling methodology and population",
            "Outline data analysis techniques and validation methods",
        ),
        sections=_sections(
            (
                "Research Design",
                "Describes the overall strategy and framework chosen to integrate different "
                "components of the study.",
            ),
            (
                "Population and Sampling",
                "Defines the target population and explains the sampling methodology and size "
                "determination.",
            ),
            (
                "Data Collection Instruments",
                "Details the tools, surveys, interviews, or tests used to gather research data.",
            ),
            (
                "Data Collection Procedures",
                "Step-by-step explanation of how data will be collected, including timeline "
                "and protocols.",
            ),
            (
                "Data Analysis Methods",
                "Describes statistical or qualitative analysis techniques to be employed.",
            ),
            (
                "Validity and Reliability",
                "Measures taken to ensure the accuracy, consistency, and credibility of research "
                "findings.",
            ),
        ),
        expected_pages="20-30 pages",
        key_components=(
            "Research design",
            "Data collection",
            "Analysis framework",
            "Quality assurance",
        ),
    ),
    4: ChapterTemplate(
        number=4,
        kind=ChapterKind.RESULTS,
        titles=(
            "Results and Discussion",
            "Data Analysis and Findings",
            "Research Findings and Analysis",
        ),
        objectives=(
            "Present comprehensive analysis of collected data",
            "Interpret findings in relation to research objectives",
            "Discuss implications of results for theory and practice",
            "Compare findings with existing literature and frameworks",
        ),
        sections=_sections(
            (
                "Descriptive Analysis",
                "Presentation of basic statistical information and demographic characteristics "
                "of the data.",
            ),
            (
                "Inferential Analysis",
                "Advanced statistical analysis including hypothesis testing and relationship "
                "examination.",
            ),
            (
                "Findings Interpretation",
                "Detailed explanation of what the results mean in the context of the research "
                "questions.",
            ),
            (
                "Discussion of Results",
                "Critical analysis of findings in relation to existing literature and "
                "theoretical framework.",
            ),
            (
                "Implications for Practice",
                "Practical applications and recommendations based on the research findings.",
            ),
        ),
        expected_pages="30-50 pages",
        key_components=(
            "Data presentation",
            "Statistical analysis",
            "Result interpretation",
            "Discussion synthesis",
        ),
    ),
    5: ChapterTemplate(
        number=5,
        kind=ChapterKind.CONCLUSION,
        titles=(
            "Conclusions and Recommendations",
            "Summary, Conclusions and Future Directions",
            "Final Conclusions and Implications",
        ),
        objectives=(
            "Summarize key findings and their significance",
            "Draw conclusions based on research evidence",
            "Provide actionable recommendations for stakeholders",
            "Suggest directions for future research and development",
        ),
        sections=_sections(
            (
                "Summary of Findings",
                "Concise overview of the main results and discoveries from the research "
                "investigation.",
            ),
            (
                "Conclusions",
                "Definitive statements about what the research has demonstrated or proven.",
            ),
            (
                "Practical Recommendations",
                "Specific, actionable suggestions for practitioners, organizations, or "
                "policymakers.",
            ),
            (
                "Theoretical Contributions",
                "Explanation of how the research advances knowledge in the field.",
            ),
            (
                "Limitations and Future Research",
                "Acknowledgment of study constraints and suggestions for future investigations.",
            ),
            (
                "Final Reflections",
                "Personal insights and broader implications of the research journey and outcomes.",
            ),
        ),
        expected_pages="15-25 pages",
        key_components=(
            "Research synthesis",
            "Evidence-based conclusions",
            "Strategic recommendations",
            "Future directions",
        ),
    ),
})


def get_chapter_template(number: int) -> ChapterTemplate:
    """Return the template for chapter ``number`` (1..5).

    Raises:
        ValueError: If ``number`` is outside 1..5. Callers only ever ask for
            the fixed chapter numbers, so this indicates a programming error.
    """
    try:
        return CHAPTER_TEMPLATES[number]
    except KeyError:
        raise ValueError(f"Chapter number must be in 1..5, got {number!r}") from None


def iter_chapter_templates() -> Iterator[ChapterTemplate]:
    """Yield the chapter templates in chapter order."""
    for number in CHAPTER_NUMBERS:
        yield CHAPTER_TEMPLATES[number]
