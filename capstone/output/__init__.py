"""Document exporters."""

from capstone.output.export import (
    MEDIA_TYPES,
    ExportResult,
    build_docx,
    build_outline_text,
    build_text,
    export_document,
    render_document,
    safe_filename,
)

__all__ = [
    "MEDIA_TYPES",
    "ExportResult",
    "build_docx",
    "build_outline_text",
    "build_text",
    "export_document",
    "render_document",
    "safe_filename",
]
