"""Generation workflow graph.

INTAKE -> TITLES -> ASSEMBLE -> END, with every step routing to FALLBACK
when it records an error.
"""

import logging
from typing import Any

from langgraph.graph import END, START, StateGraph

from capstone.generation import Selector, default_selector
from capstone.graphs.routers import (
    route_after_assemble,
    route_after_intake,
    route_after_titles,
)
from capstone.nodes import assemble_node, fallback_node, intake_node, titles_node
from capstone.state.schema import GenerationState, create_initial_state

logger = logging.getLogger(__name__)


def create_generation_workflow(selector: Selector | None = None):
    """
    Create the compiled project generation workflow.

    Args:
        selector: Selection source shared by the titles and assemble nodes;
            a default selector is created per workflow when omitted

    Returns:
        Compiled StateGraph ready for ``invoke``

    Example:
        workflow = create_generation_workflow(Selector.seeded(7))
        result = workflow.invoke(create_initial_state(form_data))
    """
    selector = selector or default_selector()

    workflow = StateGraph(GenerationState)

    workflow.add_node("intake", intake_node)
    workflow.add_node("titles", lambda state: titles_node(state, selector))
    workflow.add_node("assemble", lambda state: assemble_node(state, selector))
    workflow.add_node("fallback", fallback_node)

    workflow.add_edge(START, "intake")
    workflow.add_conditional_edges("intake", route_after_intake, ["titles", "fallback"])
    workflow.add_conditional_edges("titles", route_after_titles, ["assemble", "fallback"])
    workflow.add_conditional_edges("assemble", route_after_assemble, ["fallback", END])
    workflow.add_edge("fallback", END)

    return workflow.compile()


def run_generation(
    form_data: dict[str, Any],
    selected_title: str | None = None,
    selector: Selector | None = None,
) -> GenerationState:
    """Run one generation and return the final state.

    Check ``status`` on the result: FAILED runs carry ``errors`` and a
    ``notice`` instead of a ``project``.
    """
    workflow = create_generation_workflow(selector)
    logger.info("Starting generation workflow")
    return workflow.invoke(create_initial_state(form_data, selected_title))
