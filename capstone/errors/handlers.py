"""Error handlers for graceful error management.

This module turns exceptions into workflow error records and user notices,
and logs them with context.
"""

import logging
import traceback
from functools import wraps
from typing import Any, Callable

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
from capstone.state.enums import NoticeVariant
from capstone.state.models import Notice
from capstone.state.models import WorkflowError as WorkflowErrorModel

logger = logging.getLogger(__name__)


# =============================================================================
# Workflow Error Creation
# =============================================================================


def create_workflow_error_model(
    error: Exception,
    node: str,
    category: str | None = None,
) -> WorkflowErrorModel:
    """Create a WorkflowError model from an exception.

    Args:
        error: The exception that occurred
        node: Node where the error occurred
        category: Error category (auto-detected if not provided)

    Returns:
        WorkflowErrorModel for state tracking
    """
    if category is None:
        category = detect_error_category(error)

    if isinstance(error, CapstoneError):
        message = error.message
        recoverable = error.recoverable
        details = error.details
    else:
        message = str(error)
        recoverable = True
        details = {"original_type": error.__class__.__name__}

    return WorkflowErrorModel(
        node=node,
        category=category,
        message=message,
        recoverable=recoverable,
        details=details,
    )


def detect_error_category(error: Exception) -> str:
    """Detect error category from exception type."""
    if isinstance(error, InputValidationError):
        return "validation_error"
    elif isinstance(error, RateLimitError):
        return "rate_limit"
    elif isinstance(error, QuotaExceededError):
        return "quota_exceeded"
    elif isinstance(error, CompanionError):
        return "companion_error"
    elif isinstance(error, ExportError):
        return "export_error"
    elif isinstance(error, ConfigurationError):
        return "configuration_error"
    elif isinstance(error, GenerationError):
        return "generation_error"
    elif isinstance(error, CapstoneError):
        return "capstone_error"
    elif isinstance(error, (TimeoutError, ConnectionError)):
        return "connection_error"
    else:
        return "unknown_error"


# =============================================================================
# User Notices
# =============================================================================

NOTICE_TEXT: dict[str, tuple[str, str]] = {
    "validation_error": (
        "Missing Information",
        "Please fill in at least the field of study and research topic.",
    ),
    "rate_limit": (
        "Rate Limit Reached",
        "Rate limit exceeded. Please try again in a moment.",
    ),
    "quota_exceeded": (
        "AI Credits Depleted",
        "AI credits depleted. Please add credits to continue.",
    ),
    "companion_error": (
        "AI Companion Error",
        "Sorry, I'm having trouble responding right now. Please try again.",
    ),
    "export_error": (
        "Export Failed",
        "Your document could not be exported. Please try again.",
    ),
}

DEFAULT_NOTICE_TEXT = ("Error", "Failed to generate project. Please try again.")


def notice_for_error(error: Exception) -> Notice:
    """Map an error to the notice shown to the user."""
    title, description = NOTICE_TEXT.get(detect_error_category(error), DEFAULT_NOTICE_TEXT)
    return Notice(title=title, description=description, variant=NoticeVariant.DESTRUCTIVE)


# =============================================================================
# Error Logging
# =============================================================================


def log_error_with_context(
    error: Exception,
    node: str | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with full context.

    Args:
        error: The exception that occurred
        node: Node or operation where the error occurred
        context: Additional context to log
        level: Logging level (default: ERROR)
    """
    parts = [f"Error: {error.__class__.__name__}: {error}"]

    if node:
        parts.append(f"Node: {node}")

    if isinstance(error, CapstoneError):
        if error.details:
            parts.append(f"Details: {error.details}")
        parts.append(f"Recoverable: {error.recoverable}")

    if context:
        parts.append(f"Context: {context}")

    logger.log(level, " | ".join(parts))

    # Traceback at debug level
    logger.debug(f"Traceback:\n{traceback.format_exc()}")


# =============================================================================
# Node Error Handling
# =============================================================================


def handle_node_error(
    error: Exception,
    node: str,
    state: dict[str, Any],
) -> dict[str, Any]:
    """Handle a node error and return state updates.

    Args:
        error: The exception that occurred
        node: Node where the error occurred
        state: Current workflow state

    Returns:
        Dictionary of state updates recording the error and its notice
    """
    level = logging.WARNING if isinstance(error, InputValidationError) else logging.ERROR
    log_error_with_context(error, node=node, level=level)

    return {
        "errors": state.get("errors", []) + [create_workflow_error_model(error, node)],
        "notice": notice_for_error(error),
    }


def with_error_handling(node: str):
    """Decorator that records node exceptions in state instead of raising.

    Example:
        @with_error_handling("assemble")
        def assemble_node(state):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(state: dict[str, Any], *args, **kwargs):
            try:
                return func(state, *args, **kwargs)
            except Exception as e:
                return handle_node_error(e, node, state)

        return wrapper
    return decorator
