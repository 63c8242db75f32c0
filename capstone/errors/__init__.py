"""Error handling for the capstone companion.

This module provides:
- Custom exception types for generation, companion and export errors
- Error handlers that log with context and map errors to user notices
"""

from capstone.errors.exceptions import (
    CapstoneError,
    CompanionError,
    ConfigurationError,
    ExportError,
    GenerationError,
    InputValidationError,
    QuotaExceededError,
    RateLimitError,
)
from capstone.errors.handlers import (
    create_workflow_error_model,
    detect_error_category,
    handle_node_error,
    log_error_with_context,
    notice_for_error,
    with_error_handling,
)

__all__ = [
    # Exceptions
    "CapstoneError",
    "CompanionError",
    "ConfigurationError",
    "ExportError",
    "GenerationError",
    "InputValidationError",
    "QuotaExceededError",
    "RateLimitError",
    # Handlers
    "create_workflow_error_model",
    "detect_error_category",
    "handle_node_error",
    "log_error_with_context",
    "notice_for_error",
    "with_error_handling",
]
