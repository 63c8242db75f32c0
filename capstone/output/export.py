"""Document export: word-processor (.docx) and plain text."""

import io
import logging
import os
import re
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from capstone.config import settings
from capstone.errors import ExportError
from capstone.state.enums import ExportFormat
from capstone.state.models import DocumentChapter, GeneratedProject

logger = logging.getLogger(__name__)

RULE_WIDTH = 50
DEFAULT_FILENAME = "capstone_document"

MEDIA_TYPES = {
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ExportFormat.TXT: "text/plain; charset=utf-8",
}


@dataclass(frozen=True)
class ExportResult:
    path: str
    filename: str
    export_format: str
    size_bytes: int


def _utc_stamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")


def safe_filename(title: str) -> str:
    """Every non-alphanumeric character becomes an underscore."""
    cleaned = re.sub(r"[^A-Za-z0-9]", "_", (title or "").strip())
    return cleaned or DEFAULT_FILENAME


def _split_blocks(text: str) -> list[str]:
    if not text:
        return []
    norm = text.replace("\r\n", "\n").replace("\r", "\n")
    return [b.strip() for b in re.split(r"\n\s*\n", norm) if b.strip()]


# =============================================================================
# Renderers
# =============================================================================


def build_docx(title: str, chapters: Sequence[DocumentChapter]) -> bytes:
    """Render the document as .docx bytes.

    Title at heading level 0, one level-1 heading per chapter, and level-2
    headings for the introduction, each section and the conclusion. Body
    paragraphs are justified; each chapter starts on a new page.
    """
    document = Document()
    document.styles["Normal"].font.size = Pt(11)
    document.add_heading(title, level=0)

    def add_body(text: str) -> None:
        for block in _split_blocks(text):
            paragraph = document.add_paragraph(block)
            paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY

    for i, chapter in enumerate(chapters):
        if i:
            document.add_page_break()
        document.add_heading(f"Chapter {chapter.number}: {chapter.title}", level=1)
        document.add_heading("Introduction", level=2)
        add_body(chapter.content.introduction)
        for section in chapter.content.sections:
            document.add_heading(section.title, level=2)
            add_body(section.content)
        document.add_heading("Conclusion", level=2)
        add_body(chapter.content.conclusion)

    out = io.BytesIO()
    document.save(out)
    out.seek(0)
    return out.read()


def build_text(title: str, chapters: Sequence[DocumentChapter]) -> str:
    """Render the document as plain text with underlined headings."""
    parts = [f"{title}\n{'=' * len(title)}\n\n"]
    for chapter in chapters:
        parts.append(f"CHAPTER {chapter.number}: {chapter.title.upper()}\n")
        parts.append(f"{'=' * RULE_WIDTH}\n\n")
        parts.append(f"{chapter.content.introduction}\n\n")
        for section in chapter.content.sections:
            parts.append(f"{section.title}\n")
            parts.append(f"{'-' * len(section.title)}\n")
            parts.append(f"{section.content}\n\n")
        parts.append(f"{chapter.content.conclusion}\n\n")
        parts.append(f"\n{'=' * RULE_WIDTH}\n\n")
    return "".join(parts)


def build_outline_text(project: GeneratedProject) -> str:
    """Copyable outline: main title, then title and description per chapter."""
    blocks = [f"Chapter {c.number}: {c.title}\n{c.description}" for c in project.chapters]
    return f"{project.main_title}\n\n" + "\n\n".join(blocks)


def render_document(
    title: str,
    chapters: Sequence[DocumentChapter],
    export_format: str | ExportFormat = ExportFormat.DOCX,
) -> bytes:
    """Render to bytes in the requested format.

    Raises:
        ExportError: If the format is unknown or rendering fails
    """
    try:
        fmt = ExportFormat(export_format)
    except ValueError:
        raise ExportError(f"Unsupported export format '{export_format}'", export_format=str(export_format)) from None

    try:
        if fmt is ExportFormat.DOCX:
            return build_docx(title, chapters)
        return build_text(title, chapters).encode("utf-8")
    except Exception as e:
        raise ExportError(f"Failed to render document: {e}", export_format=fmt.value) from e


# =============================================================================
# File Export
# =============================================================================


def export_document(
    title: str,
    chapters: Sequence[DocumentChapter],
    *,
    output_dir: str | Path | None = None,
    export_format: str | ExportFormat = ExportFormat.DOCX,
) -> ExportResult:
    """Write the document to ``output_dir``.

    The file is written under a temporary name and renamed into place, so a
    failure never leaves a partial file behind.

    Raises:
        ExportError: If rendering or writing fails
    """
    data = render_document(title, chapters, export_format)
    fmt = ExportFormat(export_format)

    base_dir = Path(output_dir or settings.output_dir)
    filename = f"{safe_filename(title)}.{fmt.value}"
    final_path = base_dir / f"{safe_filename(title)}-{_utc_stamp()}.{fmt.value}"

    tmp_path: str | None = None
    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=base_dir, suffix=".part", delete=False) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
        os.replace(tmp_path, final_path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise ExportError(
            f"Failed to write export: {e}",
            export_format=fmt.value,
            path=str(final_path),
        ) from e

    logger.info(f"Exported '{title}' to {final_path} ({len(data)} bytes)")
    return ExportResult(
        path=str(final_path),
        filename=filename,
        export_format=fmt.value,
        size_bytes=len(data),
    )
