"""GenerationState schema for the project generation workflow.

This module defines the state object that flows through the nodes of the
LangGraph generation workflow.
"""

from typing import Annotated, Any

from langchain_core.messages import AnyMessage
from langgraph.graph.message import add_messages
from typing_extensions import TypedDict

from capstone.state.enums import GenerationStatus
from capstone.state.models import FormInput, GeneratedProject, Notice, WorkflowError


class GenerationState(TypedDict, total=False):
    """
    State schema for one generation run.

    Usage with LangGraph:
        ```python
        from langgraph.graph import StateGraph
        from capstone.state import GenerationState

        graph = StateGraph(GenerationState)
        graph.add_node("intake", intake_node)
        ```
    """

    # Raw form submission (before parsing)
    form_data: dict[str, Any]

    # Parsed form
    form_input: FormInput

    # Title chosen by the user in the two-step flow, if any
    selected_title: str | None

    # Title options and the resolved main title
    title_options: list[str]
    main_title: str

    # Assembled project
    project: GeneratedProject

    # Workflow metadata
    status: GenerationStatus
    errors: list[WorkflowError]
    notice: Notice | None
    messages: Annotated[list[AnyMessage], add_messages]


def create_initial_state(
    form_data: dict[str, Any],
    selected_title: str | None = None,
) -> GenerationState:
    """Create the initial state for a generation run."""
    return GenerationState(
        form_data=form_data,
        selected_title=selected_title,
        status=GenerationStatus.INITIALIZED,
        errors=[],
        notice=None,
        messages=[],
    )
