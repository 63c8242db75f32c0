"""Field knowledge base.

Phrase banks used to compose titles and the field-specific perspective of
generated sections, keyed by field of study. The tables are built once at
import and exposed read-only.
"""

from types import MappingProxyType
from typing import Mapping

from capstone.state.enums import FieldKey, ResearchType
from capstone.state.models import FieldTemplate


# =============================================================================
# Field Templates
# =============================================================================

FIELD_TEMPLATES: Mapping[str, FieldTemplate] = MappingProxyType({
    FieldKey.COMPUTER_SCIENCE.value: FieldTemplate(
        prefixes=(
            "Development of an Intelligent",
            "Implementation of Advanced",
            "Design and Analysis of Scalable",
            "Machine Learning Approach to",
            "AI-Powered Solution for",
        ),
        contexts=(" System", " Framework", " Algorithm", " Platform", " Architecture"),
        methodology_focus=(
            "Agile Development",
            "Machine Learning Models",
            "System Architecture Design",
            "Performance Testing",
            "User Interface Design",
        ),
    ),
    FieldKey.BUSINESS.value: FieldTemplate(
        prefixes=(
            "Strategic Digital Transformation of",
            "Comprehensive Market Analysis of",
            "Performance Optimization in",
            "Sustainable Business Model for",
            "Data-Driven Decision Making in",
        ),
        contexts=(" Organizations", " Industries", " Markets", " Enterprises", " Supply Chains"),
        methodology_focus=(
            "Statistical Analysis",
            "Survey Research",
            "Financial Modeling",
            "Market Research",
            "Case Study Analysis",
        ),
    ),
    FieldKey.EDUCATION.value: FieldTemplate(
        prefixes=(
            "Innovative Pedagogical Approach to",
            "Assessment and Evaluation of",
            "Technology Integration in",
            "Personalized Learning Solutions for",
            "Evidence-Based Teaching Methods in",
        ),
        contexts=(
            " Learning Environments",
            " Educational Systems",
            " Curriculum Development",
            " Student Achievement",
            " Online Education",
        ),
        methodology_focus=(
            "Educational Research Design",
            "Learning Assessment",
            "Curriculum Analysis",
            "Student Performance Metrics",
            "Qualitative Interviews",
        ),
    ),
    FieldKey.PSYCHOLOGY.value: FieldTemplate(
        prefixes=(
            "Cognitive Behavioral Analysis of",
            "Neuropsychological Investigation of",
            "Social Psychology Study on",
            "Developmental Assessment of",
            "Therapeutic Intervention for",
        ),
        contexts=(
            " Human Behavior",
            " Mental Health",
            " Social Interactions",
            " Cognitive Processes",
            " Emotional Regulation",
        ),
        methodology_focus=(
            "Experimental Design",
            "Psychological Testing",
            "Statistical Analysis",
            "Clinical Interviews",
            "Behavioral Observation",
        ),
    ),
    FieldKey.ENGINEERING.value: FieldTemplate(
        prefixes=(
            "Innovative Engineering Solution for",
            "Sustainable Design and Development of",
            "Performance Optimization of",
            "Smart Technology Integration in",
            "Advanced Materials Application in",
        ),
        contexts=(
            " Systems",
            " Infrastructure",
            " Manufacturing Processes",
            " Renewable Energy",
            " Automation",
        ),
        methodology_focus=(
            "CAD Modeling",
            "Simulation Analysis",
            "Prototype Testing",
            "Material Analysis",
            "Performance Benchmarking",
        ),
    ),
    FieldKey.HEALTHCARE.value: FieldTemplate(
        prefixes=(
            "Clinical Effectiveness Study of",
            "Evidence-Based Healthcare Intervention for",
            "Population Health Analysis of",
            "Medical Technology Assessment of",
            "Patient-Centered Care Model for",
        ),
        contexts=(
            " Treatment Protocols",
            " Healthcare Systems",
            " Patient Outcomes",
            " Medical Devices",
            " Public Health",
        ),
        methodology_focus=(
            "Clinical Trials",
            "Statistical Analysis",
            "Patient Surveys",
            "Medical Records Analysis",
            "Health Outcome Measurement",
        ),
    ),
})

# Used for "other", the fields without a phrase bank, and unknown keys
GENERIC_FIELD_TEMPLATE = FieldTemplate(
    prefixes=(
        "Comprehensive Analysis of",
        "Investigation into",
        "Advanced Study on",
        "Strategic Approach to",
        "Innovative Solutions for",
    ),
    contexts=("",),
    methodology_focus=(
        "Systematic Literature Analysis",
        "Structured Data Collection",
        "Comparative Analysis",
        "Stakeholder Interviews",
        "Evidence Synthesis",
    ),
)


def lookup_field(field_key: str | None) -> FieldTemplate:
    """Return the phrase bank for a field, or the generic one."""
    return FIELD_TEMPLATES.get(field_key or "", GENERIC_FIELD_TEMPLATE)


def is_known_field(field_key: str | None) -> bool:
    """Whether the field has its own phrase bank."""
    return (field_key or "") in FIELD_TEMPLATES


# =============================================================================
# Research Type Clauses
# =============================================================================

RESEARCH_TYPE_CLAUSES: Mapping[str, str] = MappingProxyType({
    ResearchType.QUANTITATIVE.value: ": A Quantitative Analysis",
    ResearchType.QUALITATIVE.value: ": A Qualitative Investigation",
    ResearchType.MIXED.value: ": A Mixed-Methods Approach",
    ResearchType.EXPERIMENTAL.value: ": An Experimental Study",
    ResearchType.CASE_STUDY.value: ": A Case Study Analysis",
    ResearchType.THEORETICAL.value: ": A Theoretical Framework",
})


def research_type_clause(research_type: str | None) -> str:
    """Descriptor clause for a research type; empty for unknown types."""
    return RESEARCH_TYPE_CLAUSES.get(research_type or "", "")
