"""In-memory document editor.

Holds the editable copy of a generated project: one DocumentChapter per
chapter, with word counts recomputed on every edit.
"""

import logging
import re
from datetime import datetime, timezone

from capstone.config import settings
from capstone.state.enums import CHAPTER_NUMBERS
from capstone.state.models import (
    DocumentChapter,
    DocumentChapterContent,
    DocumentSection,
    GeneratedChapter,
    GeneratedProject,
    Notice,
)

logger = logging.getLogger(__name__)

INTRODUCTION_TEMPLATES: dict[int, str] = {
    1: (
        'This chapter provides an introduction to the research study on "{short_title}". '
        "The following sections will establish the foundation for this investigation by "
        "presenting the background context, defining the research problem, and outlining "
        "the objectives that guide this study."
    ),
    2: (
        "This chapter presents a comprehensive review of existing literature relevant to this "
        "research. The review synthesizes current knowledge, identifies gaps in the field, and "
        "establishes the theoretical framework that supports this investigation."
    ),
    3: (
        "This chapter details the research methodology employed in this study. The systematic "
        "approach described here ensures the reliability and validity of the research findings "
        "through carefully designed procedures and appropriate analytical techniques."
    ),
    4: (
        "This chapter presents the findings from the data analysis and provides a comprehensive "
        "discussion of the results. The analysis addresses each research objective and "
        "interprets the findings within the context of the established theoretical framework."
    ),
    5: (
        "This chapter concludes the research study by summarizing the key findings, drawing "
        "evidence-based conclusions, and providing recommendations for practice and future "
        "research. The implications of this work for the field are discussed in detail."
    ),
}

CONCLUSION_PLACEHOLDER = (
    "This chapter concludes with [add your key takeaways and transition to next chapter]..."
)
DETAIL_PLACEHOLDER = "[Add your detailed content here...]"

CHAPTER_FIELDS = ("title", "introduction", "conclusion")
SECTION_FIELDS = ("title", "content")

_WHITESPACE = re.compile(r"\s+")


def count_words(content: DocumentChapterContent | str) -> int:
    """Whitespace-delimited token count.

    For chapter content, counts the introduction, every section title and
    body, and the conclusion.
    """
    if isinstance(content, DocumentChapterContent):
        parts = [content.introduction]
        parts.extend(f"{s.title} {s.content}" for s in content.sections)
        parts.append(content.conclusion)
        text = " ".join(parts)
    else:
        text = content
    return len([word for word in _WHITESPACE.split(text.strip()) if word])


def introduction_for(chapter: GeneratedChapter, main_title: str) -> str:
    template = INTRODUCTION_TEMPLATES.get(chapter.number)
    if template is None:
        return f"This chapter focuses on {chapter.title.lower()}."
    return template.format(short_title=main_title.split(":")[0])


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentEditor:
    """Mutable editing session over a generated project.

    Chapters and sections are edited in place and never added or removed.
    Every edit recomputes the chapter's word count and stamps last_edited.

    Example:
        editor = DocumentEditor(project)
        editor.update_section(1, 0, "content", "New background text")
        editor.chapters[0].word_count
    """

    def __init__(self, project: GeneratedProject, add_detail_placeholder: bool | None = None):
        if add_detail_placeholder is None:
            add_detail_placeholder = settings.editor_detail_placeholder

        self._title = project.main_title
        self.chapters: list[DocumentChapter] = []
        for chapter in project.chapters:
            sections = [
                DocumentSection(
                    title=section.title,
                    content=(
                        f"{section.content}\n\n{DETAIL_PLACEHOLDER}"
                        if add_detail_placeholder
                        else section.content
                    ),
                )
                for section in chapter.sections
            ]
            content = DocumentChapterContent(
                introduction=introduction_for(chapter, project.main_title),
                sections=sections,
                conclusion=CONCLUSION_PLACEHOLDER,
            )
            self.chapters.append(
                DocumentChapter(
                    number=chapter.number,
                    title=chapter.title,
                    content=content,
                    word_count=count_words(content),
                )
            )

        self.last_saved: datetime | None = None
        self.active_chapter = CHAPTER_NUMBERS[0]
        logger.info(f"Editor opened for '{self._title}' ({self.total_words} words)")

    # -------------------------------------------------------------------------
    # Document
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    @property
    def total_words(self) -> int:
        return sum(chapter.word_count for chapter in self.chapters)

    def get_chapter(self, number: int) -> DocumentChapter:
        """Return chapter ``number``.

        Raises:
            KeyError: If no chapter has that number
        """
        for chapter in self.chapters:
            if chapter.number == number:
                return chapter
        raise KeyError(f"No chapter {number}")

    def save(self) -> Notice:
        """Stamp the save time. Documents are held in memory only."""
        self.last_saved = _utc_now()
        logger.info(f"Document saved at {self.last_saved.isoformat()}")
        return Notice(
            title="Document Saved",
            description="Your capstone document has been saved successfully.",
        )

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def _touch(self, chapter: DocumentChapter) -> None:
        chapter.word_count = count_words(chapter.content)
        chapter.last_edited = _utc_now()

    def update_chapter(self, number: int, field: str, value: str) -> DocumentChapter:
        """Replace a chapter's title, introduction or conclusion."""
        if field not in CHAPTER_FIELDS:
            raise ValueError(f"Unknown chapter field '{field}', expected one of {CHAPTER_FIELDS}")
        chapter = self.get_chapter(number)
        if field == "title":
            chapter.title = value
        else:
            setattr(chapter.content, field, value)
        self._touch(chapter)
        return chapter

    def update_section(self, number: int, index: int, field: str, value: str) -> DocumentChapter:
        """Replace a section's title or content.

        Raises:
            IndexError: If the chapter has no section at ``index``
        """
        if field not in SECTION_FIELDS:
            raise ValueError(f"Unknown section field '{field}', expected one of {SECTION_FIELDS}")
        chapter = self.get_chapter(number)
        if not 0 <= index < len(chapter.content.sections):
            raise IndexError(f"Chapter {number} has no section {index}")
        setattr(chapter.content.sections[index], field, value)
        self._touch(chapter)
        return chapter

    def apply_suggestion(self, number: int, target: str, content: str) -> DocumentChapter:
        """Append companion content to the introduction, conclusion or a section.

        ``target`` is ``"introduction"``, ``"conclusion"`` or a section title
        (case-insensitive). Content goes after the existing text, separated
        by a blank line.
        """
        chapter = self.get_chapter(number)
        key = target.strip().lower()

        if key in ("introduction", "conclusion"):
            current = getattr(chapter.content, key)
            return self.update_chapter(number, key, _append(current, content))

        for index, section in enumerate(chapter.content.sections):
            if section.title.lower() == key:
                return self.update_section(number, index, "content", _append(section.content, content))

        raise KeyError(f"Chapter {number} has no section titled '{target}'")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def select_chapter(self, number: int) -> DocumentChapter:
        chapter = self.get_chapter(number)
        self.active_chapter = number
        return chapter

    def next_chapter(self) -> int:
        self.active_chapter = min(self.active_chapter + 1, CHAPTER_NUMBERS[-1])
        return self.active_chapter

    def previous_chapter(self) -> int:
        self.active_chapter = max(self.active_chapter - 1, CHAPTER_NUMBERS[0])
        return self.active_chapter


def _append(existing: str, addition: str) -> str:
    return f"{existing}\n\n{addition}" if existing.strip() else addition
