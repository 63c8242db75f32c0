"""State management for the capstone companion."""

from capstone.state.enums import (
    CHAPTER_COUNT,
    CHAPTER_NUMBERS,
    ChapterKind,
    CompanionStrategy,
    ExportFormat,
    FieldKey,
    GenerationStatus,
    MessageRole,
    NoticeVariant,
    ResearchType,
    SectionTag,
)
from capstone.state.models import (
    ChapterTemplate,
    ChatMessage,
    ChatRequest,
    DocumentChapter,
    DocumentChapterContent,
    DocumentSection,
    FieldTemplate,
    FormInput,
    GeneratedChapter,
    GeneratedProject,
    GeneratedSection,
    Notice,
    SectionTemplate,
    WorkflowError,
)
from capstone.state.schema import GenerationState, create_initial_state

__all__ = [
    # Enums
    "CHAPTER_COUNT",
    "CHAPTER_NUMBERS",
    "ChapterKind",
    "CompanionStrategy",
    "ExportFormat",
    "FieldKey",
    "GenerationStatus",
    "MessageRole",
    "NoticeVariant",
    "ResearchType",
    "SectionTag",
    # Models
    "ChapterTemplate",
    "ChatMessage",
    "ChatRequest",
    "DocumentChapter",
    "DocumentChapterContent",
    "DocumentSection",
    "FieldTemplate",
    "FormInput",
    "GeneratedChapter",
    "GeneratedProject",
    "GeneratedSection",
    "Notice",
    "SectionTemplate",
    "WorkflowError",
    # Schema
    "GenerationState",
    "create_initial_state",
]
