"""Routing functions for the generation workflow graph.

This module contains the routing logic for conditional edges, extracted
from the graph definition for testability.
"""

import logging
from typing import Literal

from capstone.state.enums import GenerationStatus
from capstone.state.schema import GenerationState

logger = logging.getLogger(__name__)


def _should_fallback(state: GenerationState) -> bool:
    """Any recorded error or a failed status sends the run to fallback."""
    return bool(state.get("errors")) or state.get("status") == GenerationStatus.FAILED


def route_after_intake(state: GenerationState) -> Literal["titles", "fallback"]:
    """Route after intake: titles when the form was accepted."""
    if _should_fallback(state):
        logger.warning("Routing to fallback from intake due to errors")
        return "fallback"
    return "titles"


def route_after_titles(state: GenerationState) -> Literal["assemble", "fallback"]:
    """Route after titles: assemble once a main title is resolved."""
    if _should_fallback(state):
        logger.warning("Routing to fallback from titles due to errors")
        return "fallback"
    return "assemble"


def route_after_assemble(state: GenerationState) -> Literal["fallback", "__end__"]:
    """Route after assemble: done unless assembly failed."""
    if _should_fallback(state) or state.get("status") != GenerationStatus.PROJECT_READY:
        logger.warning("Routing to fallback from assemble due to errors")
        return "fallback"
    return "__end__"
