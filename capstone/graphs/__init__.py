"""Graph definitions and workflow assembly for project generation."""

from capstone.graphs.generation_workflow import create_generation_workflow, run_generation
from capstone.graphs.routers import (
    route_after_assemble,
    route_after_intake,
    route_after_titles,
)

__all__ = [
    "create_generation_workflow",
    "run_generation",
    "route_after_assemble",
    "route_after_intake",
    "route_after_titles",
]
