"""Document editor for generated projects."""

from capstone.editor.document import (
    CONCLUSION_PLACEHOLDER,
    DETAIL_PLACEHOLDER,
    DocumentEditor,
    count_words,
)

__all__ = [
    "CONCLUSION_PLACEHOLDER",
    "DETAIL_PLACEHOLDER",
    "DocumentEditor",
    "count_words",
]
