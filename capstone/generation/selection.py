"""Selection source for the generation engine.

Every "pick one of N" in generation goes through a Selector so callers can
inject a seeded or fixed source.
"""

import random
from typing import Sequence, TypeVar

from capstone.config import settings

T = TypeVar("T")


class Selector:
    """Picks options using an injectable ``random.Random``."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: int) -> "Selector":
        return cls(random.Random(seed))

    def index(self, count: int) -> int:
        """Return an index in ``range(count)``."""
        if count < 1:
            raise ValueError("Cannot select from an empty sequence")
        return self.rng.randrange(count)

    def choice(self, options: Sequence[T]) -> T:
        return options[self.index(len(options))]


class FirstChoiceSelector(Selector):
    """Always picks the first option."""

    def index(self, count: int) -> int:
        if count < 1:
            raise ValueError("Cannot select from an empty sequence")
        return 0


def default_selector() -> Selector:
    """Selector for one generation run.

    Seeded from ``GENERATION_SEED`` when set, so every run is reproducible;
    otherwise system-seeded, so regenerating varies the output.
    """
    if settings.generation_seed is not None:
        return Selector.seeded(settings.generation_seed)
    return Selector()
