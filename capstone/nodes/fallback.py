"""Fallback node for failed generation runs.

Marks the run failed and makes sure a notice is attached, leaving every
other piece of state untouched.
"""

import logging
from typing import Any

from capstone.errors import GenerationError, notice_for_error
from capstone.state.enums import GenerationStatus
from capstone.state.schema import GenerationState

logger = logging.getLogger(__name__)


def fallback_node(state: GenerationState) -> dict[str, Any]:
    """Fallback node: end the run with a user notice.

    Args:
        state: Current workflow state

    Returns:
        State updates with FAILED status and the notice
    """
    errors = state.get("errors", [])
    summary = "; ".join(f"{e.node}: {e.message}" for e in errors) or "no error recorded"
    logger.warning(f"Generation failed ({summary})")

    notice = state.get("notice") or notice_for_error(GenerationError("Generation failed"))
    return {
        "status": GenerationStatus.FAILED,
        "notice": notice,
    }
