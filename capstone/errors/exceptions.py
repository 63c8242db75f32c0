"""Custom exception types for the capstone companion.

This module defines a hierarchy of exceptions for categorizing errors
across generation, the chat companion and export, so each kind can be
surfaced to the user with its own notice.
"""

from typing import Any


class CapstoneError(Exception):
    """Base exception for all capstone companion errors.

    Attributes:
        message: Human-readable error description
        details: Additional error context
        recoverable: Whether the session can carry on after this error
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = True,
    ):
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Generation Errors
# =============================================================================


class InputValidationError(CapstoneError):
    """Required form input is missing or malformed.

    Raised before generation starts; no state is changed.
    """

    def __init__(
        self,
        message: str,
        missing_fields: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if missing_fields:
            details["missing_fields"] = missing_fields
        super().__init__(message, details, recoverable=True)
        self.missing_fields = missing_fields or []


class GenerationError(CapstoneError):
    """Unexpected failure while generating titles or a project."""

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if stage:
            details["stage"] = stage
        super().__init__(message, details, recoverable=True)
        self.stage = stage


class ConfigurationError(CapstoneError):
    """A required setting is missing or invalid."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message, {"setting": setting} if setting else {}, recoverable=False)
        self.setting = setting


# =============================================================================
# Companion Errors
# =============================================================================


class CompanionError(CapstoneError):
    """The chat companion could not produce a reply.

    Network failures, non-2xx statuses and malformed response bodies are
    all normalized to this error.
    """

    def __init__(
        self,
        message: str,
        service: str = "companion",
        status_code: int | None = None,
        response_body: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        details["service"] = service
        if status_code is not None:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body[:500]
        super().__init__(message, details, recoverable=True)
        self.service = service
        self.status_code = status_code
        self.response_body = response_body


class RateLimitError(CompanionError):
    """Upstream rate limit reached (HTTP 429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again in a moment.",
        service: str = "companion",
        response_body: str | None = None,
    ):
        super().__init__(message, service, 429, response_body)


class QuotaExceededError(CompanionError):
    """Upstream credits exhausted (HTTP 402)."""

    def __init__(
        self,
        message: str = "AI credits depleted. Please add credits to continue.",
        service: str = "companion",
        response_body: str | None = None,
    ):
        super().__init__(message, service, 402, response_body)


# =============================================================================
# Export Errors
# =============================================================================


class ExportError(CapstoneError):
    """Serializing or writing the exported document failed."""

    def __init__(
        self,
        message: str,
        export_format: str | None = None,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if export_format:
            details["format"] = export_format
        if path:
            details["path"] = path
        super().__init__(message, details, recoverable=True)
        self.export_format = export_format
        self.path = path
