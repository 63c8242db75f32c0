"""LangGraph nodes for the generation workflow."""

from capstone.nodes.fallback import fallback_node
from capstone.nodes.generator import assemble_node, titles_node
from capstone.nodes.intake import intake_node, parse_form, validate_form

__all__ = [
    "assemble_node",
    "fallback_node",
    "intake_node",
    "parse_form",
    "titles_node",
    "validate_form",
]
