"""Enums and constants for the capstone companion."""

from enum import Enum


class FieldKey(str, Enum):
    """Fields of study offered on the project form."""

    COMPUTER_SCIENCE = "computer-science"
    BUSINESS = "business"
    EDUCATION = "education"
    PSYCHOLOGY = "psychology"
    ENGINEERING = "engineering"
    HEALTHCARE = "healthcare"
    SOCIAL_SCIENCES = "social-sciences"
    NATURAL_SCIENCES = "natural-sciences"
    ARTS = "arts"              # Arts & Humanities
    OTHER = "other"


class ResearchType(str, Enum):
    """Methodological stance selected on the project form."""

    QUANTITATIVE = "quantitative"
    QUALITATIVE = "qualitative"
    MIXED = "mixed"                # Mixed methods
    EXPERIMENTAL = "experimental"
    CASE_STUDY = "case-study"
    THEORETICAL = "theoretical"


class ChapterKind(str, Enum):
    """The five fixed chapter types of a capstone document."""

    INTRODUCTION = "introduction"
    LITERATURE_REVIEW = "literature_review"
    METHODOLOGY = "methodology"
    RESULTS = "results"
    CONCLUSION = "conclusion"


class SectionTag(str, Enum):
    """Special-case routing tags for generated section content."""

    PROBLEM_STATEMENT = "problem_statement"
    SCOPE_AND_LIMITATIONS = "scope_and_limitations"
    GENERAL = "general"


class GenerationStatus(str, Enum):
    """Status of a project generation run."""

    INITIALIZED = "initialized"
    INTAKE_COMPLETE = "intake_complete"
    TITLES_READY = "titles_ready"
    PROJECT_READY = "project_ready"
    FAILED = "failed"


class CompanionStrategy(str, Enum):
    """How the chat companion produces replies."""

    LOCAL = "local"      # Canned blocks matched by keyword
    REMOTE = "remote"    # Hosted completion endpoint


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    AI = "ai"


class NoticeVariant(str, Enum):
    """Visual weight of a user notice."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class ExportFormat(str, Enum):
    """Supported document export formats."""

    DOCX = "docx"
    TXT = "txt"


# Number of chapters in every generated project
CHAPTER_COUNT = 5
CHAPTER_NUMBERS = tuple(range(1, CHAPTER_COUNT + 1))
