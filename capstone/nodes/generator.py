"""Title and assembly nodes for the generation workflow."""

import logging
from typing import Any

from langchain_core.messages import AIMessage

from capstone.errors import GenerationError, with_error_handling
from capstone.generation import (
    Selector,
    assemble_project,
    generate_main_title,
    generate_title_options,
)
from capstone.state.enums import GenerationStatus
from capstone.state.schema import GenerationState

logger = logging.getLogger(__name__)


@with_error_handling("titles")
def titles_node(state: GenerationState, selector: Selector | None = None) -> dict[str, Any]:
    """
    TITLES node: generate title options and resolve the main title.

    A title chosen by the user wins; otherwise one is synthesized.
    """
    form = state["form_input"]
    options = generate_title_options(form, selector=selector)
    main_title = state.get("selected_title") or generate_main_title(form, selector=selector)
    if not main_title:
        raise GenerationError("Could not resolve a main title", stage="titles")

    return {
        "title_options": options,
        "main_title": main_title,
        "status": GenerationStatus.TITLES_READY,
        "messages": [AIMessage(content=f"Main title: {main_title}")],
    }


@with_error_handling("assemble")
def assemble_node(state: GenerationState, selector: Selector | None = None) -> dict[str, Any]:
    """
    ASSEMBLE node: build the five-chapter project for the main title.
    """
    project = assemble_project(
        state["form_input"],
        chosen_title=state["main_title"],
        selector=selector,
    )
    return {
        "project": project,
        "status": GenerationStatus.PROJECT_READY,
        "messages": [AIMessage(content=f"Project ready with {len(project.chapters)} chapters")],
    }
