"""Chat companion: canned and remote strategies, reply cleanup, sessions."""

from capstone.companion.local import LocalCompanion
from capstone.companion.prompts import (
    APPLY_INSTRUCTION,
    build_system_prompt,
    quick_suggestions,
    welcome_message,
)
from capstone.companion.remote import RemoteCompanion
from capstone.companion.sanitize import (
    extract_insertable_content,
    has_apply_instruction,
    strip_instruction,
    to_plain_content,
)
from capstone.companion.session import Companion, CompanionSession, CompanionTurn
from capstone.config import settings
from capstone.errors import ConfigurationError
from capstone.state.enums import CompanionStrategy


def create_companion(strategy: str | None = None) -> Companion:
    """Build the companion for ``strategy`` (default: ``COMPANION_STRATEGY``)."""
    strategy = strategy or settings.companion_strategy
    try:
        selected = CompanionStrategy(strategy)
    except ValueError:
        raise ConfigurationError(
            f"Unknown companion strategy '{strategy}'",
            setting="COMPANION_STRATEGY",
        ) from None
    if selected is CompanionStrategy.REMOTE:
        return RemoteCompanion()
    return LocalCompanion()


__all__ = [
    "APPLY_INSTRUCTION",
    "Companion",
    "CompanionSession",
    "CompanionTurn",
    "LocalCompanion",
    "RemoteCompanion",
    "build_system_prompt",
    "create_companion",
    "extract_insertable_content",
    "has_apply_instruction",
    "quick_suggestions",
    "strip_instruction",
    "to_plain_content",
    "welcome_message",
]
