"""Intake node for the generation workflow.

Parses the raw project form and checks that field and topic are present
before any generation happens.
"""

import logging
from typing import Any

from langchain_core.messages import AIMessage
from pydantic import ValidationError

from capstone.errors import InputValidationError, with_error_handling
from capstone.state.enums import GenerationStatus
from capstone.state.models import FormInput
from capstone.state.schema import GenerationState

logger = logging.getLogger(__name__)


def parse_form(form_data: dict[str, Any]) -> FormInput:
    """Parse raw form data into a FormInput.

    Raises:
        InputValidationError: If the data cannot be parsed
    """
    try:
        return FormInput.model_validate(form_data)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise InputValidationError(
            f"Invalid form input: {', '.join(fields)}",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def validate_form(form: FormInput) -> FormInput:
    """Require field and topic for generation.

    Raises:
        InputValidationError: If field or topic is empty
    """
    missing = form.missing_required
    if missing:
        raise InputValidationError(
            f"Missing required form fields: {', '.join(missing)}",
            missing_fields=missing,
        )
    return form


@with_error_handling("intake")
def intake_node(state: GenerationState) -> dict[str, Any]:
    """
    INTAKE node: parse and validate the project form.

    Args:
        state: Current workflow state (must contain form_data)

    Returns:
        State updates with the parsed form
    """
    form = validate_form(parse_form(state.get("form_data") or {}))
    logger.info(f"Intake complete: field='{form.field}', topic='{form.topic}'")
    return {
        "form_input": form,
        "status": GenerationStatus.INTAKE_COMPLETE,
        "messages": [AIMessage(content=f"Form accepted for topic: {form.topic}")],
    }
