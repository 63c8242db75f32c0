"""Test configuration and fixtures."""

import pytest

from capstone.generation import FirstChoiceSelector, Selector, assemble_project
from capstone.state.models import FormInput


SAMPLE_FORM_DATA = {
    "field": "computer-science",
    "topic": "Machine Learning in Healthcare",
    "keywords": "AI, medical diagnosis",
    "researchType": "quantitative",
}


@pytest.fixture
def form_data() -> dict:
    """Raw project form as submitted by the client."""
    return dict(SAMPLE_FORM_DATA)


@pytest.fixture
def sample_form() -> FormInput:
    return FormInput.model_validate(SAMPLE_FORM_DATA)


@pytest.fixture
def seeded_selector() -> Selector:
    return Selector.seeded(42)


@pytest.fixture
def first_selector() -> Selector:
    return FirstChoiceSelector()


@pytest.fixture
def sample_project(sample_form, first_selector):
    """Project assembled for the first title option with first-choice picks."""
    return assemble_project(
        sample_form,
        chosen_title="Development of an Intelligent Machine Learning in Healthcare System: A Quantitative Analysis",
        selector=first_selector,
    )
