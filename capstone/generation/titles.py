"""Title option generator.

Composes candidate main titles as ``prefix + " " + topic + context`` from the
field's phrase bank, with a research-type clause on every other option.
"""

import logging

from capstone.config import settings
from capstone.generation.selection import Selector, default_selector
from capstone.state.models import FieldTemplate, FormInput
from capstone.templates.fields import lookup_field, research_type_clause

logger = logging.getLogger(__name__)

TITLE_OPTION_COUNT = 5


def compose_title(prefix: str, topic: str, context: str) -> str:
    return f"{prefix} {topic}{context}"


def _title_at(template: FieldTemplate, index: int, topic: str, research_type: str) -> str:
    """Title for prefix ``index``, paired with context ``index % len(contexts)``."""
    prefix = template.prefixes[index]
    context = template.contexts[index % len(template.contexts)]
    title = compose_title(prefix, topic, context)
    if research_type and index % 2 == 0:
        title += research_type_clause(research_type)
    return title


def _warn_if_no_topic(form: FormInput) -> None:
    if not form.topic:
        logger.warning("Composing titles with an empty topic; titles will contain a double space")


def generate_title_options(
    form: FormInput,
    selector: Selector | None = None,
    max_attempts: int | None = None,
    limit: int = TITLE_OPTION_COUNT,
) -> list[str]:
    """Generate up to ``limit`` distinct title options in generation order.

    Known fields produce five options from their five prefixes. If the bank
    yields fewer unique titles, random prefix/context pairs fill the gap
    until the list is full or ``max_attempts`` samples were drawn.
    """
    selector = selector or default_selector()
    max_attempts = settings.title_max_attempts if max_attempts is None else max_attempts
    template = lookup_field(form.field)
    _warn_if_no_topic(form)

    titles: list[str] = []
    for index in range(min(limit, len(template.prefixes))):
        title = _title_at(template, index, form.topic, form.research_type)
        if title not in titles:
            titles.append(title)

    attempts = 0
    while len(titles) < limit and attempts < max_attempts:
        attempts += 1
        title = compose_title(
            selector.choice(template.prefixes),
            form.topic,
            selector.choice(template.contexts),
        )
        if title not in titles:
            titles.append(title)

    if len(titles) < limit:
        logger.warning(
            f"Only {len(titles)} unique titles after {attempts} attempts for field '{form.field}'"
        )

    logger.info(f"Generated {len(titles)} title options for field '{form.field or 'generic'}'")
    return titles


def generate_main_title(form: FormInput, selector: Selector | None = None) -> str:
    """Synthesize a single main title with the same composition rules."""
    selector = selector or default_selector()
    template = lookup_field(form.field)
    _warn_if_no_topic(form)
    index = selector.index(len(template.prefixes))
    return _title_at(template, index, form.topic, form.research_type)
