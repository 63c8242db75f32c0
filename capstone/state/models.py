"""Pydantic models for the capstone companion.

These models define the data structures used from the project form through
generation, editing, the chat companion and export.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from capstone.state.enums import (
    CHAPTER_NUMBERS,
    ChapterKind,
    MessageRole,
    NoticeVariant,
)


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


# =============================================================================
# Form Input
# =============================================================================


class FormInput(BaseModel):
    """Project form submission.

    Every field is optional at the model level; the intake step decides
    whether field and topic are present before generation runs.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    field: str = Field(default="", description="Field of study key, e.g. 'computer-science'")
    topic: str = Field(default="", description="Research topic")
    keywords: str = Field(default="", description="Comma-separated keywords")
    research_type: str = Field(
        default="",
        alias="researchType",
        description="Research type key, e.g. 'quantitative'",
    )

    @field_validator("field", "topic", "keywords", "research_type", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """Treat missing form values as empty strings."""
        return "" if v is None else v

    @property
    def keyword_list(self) -> list[str]:
        """Keywords split on commas, trimmed, empty entries dropped."""
        return [k.strip() for k in self.keywords.split(",") if k.strip()]

    @property
    def missing_required(self) -> list[str]:
        """Names of required-for-generation fields that are empty."""
        missing = []
        if not self.field:
            missing.append("field")
        if not self.topic:
            missing.append("topic")
        return missing


# =============================================================================
# Static Template Models
# =============================================================================


class FieldTemplate(BaseModel):
    """Phrase banks for one field of study."""

    model_config = ConfigDict(frozen=True)

    prefixes: tuple[str, ...]
    contexts: tuple[str, ...]
    methodology_focus: tuple[str, ...]


class SectionTemplate(BaseModel):
    """A section of a chapter template."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class ChapterTemplate(BaseModel):
    """Static description of one of the five chapter types."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, le=5)
    kind: ChapterKind
    titles: tuple[str, ...]
    objectives: tuple[str, ...]
    sections: tuple[SectionTemplate, ...]
    expected_pages: str
    key_components: tuple[str, ...]


# =============================================================================
# Generated Project Models
# =============================================================================


class GeneratedSection(BaseModel):
    """A section with freshly generated body text."""

    title: str
    content: str


class GeneratedChapter(BaseModel):
    """One chapter of a generated project."""

    number: int = Field(..., ge=1, le=5)
    title: str
    description: str
    objectives: list[str] = Field(default_factory=list)
    sections: list[GeneratedSection] = Field(default_factory=list)
    expected_pages: str = ""
    key_components: list[str] = Field(default_factory=list)


class GeneratedProject(BaseModel):
    """A main title plus exactly five chapters in order."""

    main_title: str
    chapters: list[GeneratedChapter]

    @model_validator(mode="after")
    def check_chapter_numbers(self) -> "GeneratedProject":
        """Chapters must be numbered 1..5 in order."""
        numbers = tuple(chapter.number for chapter in self.chapters)
        if numbers != CHAPTER_NUMBERS:
            raise ValueError(f"Project chapters must be numbered 1..5 in order, got {numbers}")
        return self


# =============================================================================
# Editor Models
# =============================================================================


class DocumentSection(BaseModel):
    """An editable section."""

    title: str = ""
    content: str = ""


class DocumentChapterContent(BaseModel):
    """Editable body of a chapter."""

    introduction: str = ""
    sections: list[DocumentSection] = Field(default_factory=list)
    conclusion: str = ""


class DocumentChapter(BaseModel):
    """A chapter as held by the document editor."""

    number: int = Field(..., ge=1, le=5)
    title: str
    content: DocumentChapterContent
    word_count: int = Field(default=0, ge=0)
    last_edited: datetime = Field(default_factory=_utc_now)


# =============================================================================
# Companion Models
# =============================================================================


class ChatMessage(BaseModel):
    """One message in a companion conversation."""

    id: str = Field(default_factory=lambda: uuid4().hex[:12])
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=_utc_now)
    insertable: bool = Field(
        default=False,
        description="Whether the reply carries content offered for insertion",
    )


class ChatRequest(BaseModel):
    """Request body accepted by the remote chat endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1, max_length=2000)
    chapter_number: int = Field(..., ge=1, le=5, strict=True, alias="chapterNumber")
    chapter_title: str = Field(..., min_length=1, max_length=200, alias="chapterTitle")

    @field_validator("message", "chapter_title", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        """Trim before length checks so whitespace-only input is rejected."""
        return v.strip() if isinstance(v, str) else v


# =============================================================================
# Notices and Workflow Errors
# =============================================================================


class Notice(BaseModel):
    """A transient user-facing notification."""

    title: str
    description: str
    variant: NoticeVariant = NoticeVariant.DEFAULT


class WorkflowError(BaseModel):
    """An error that occurred during a generation run."""

    error_id: str = Field(
        default_factory=lambda: str(uuid4())[:8],
        description="Unique error identifier"
    )
    occurred_at: datetime = Field(
        default_factory=_utc_now,
        description="When the error occurred"
    )
    node: str = Field(..., description="Node where error occurred")
    category: str = Field(..., description="Error category")
    message: str = Field(..., description="Error message")
    recoverable: bool = Field(
        default=True,
        description="Whether error is recoverable"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error details"
    )
