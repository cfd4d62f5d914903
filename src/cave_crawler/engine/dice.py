"""Seeded random source for cave generation and combat.

A single DiceRoller is created per run and passed explicitly to every
stochastic operation. Nothing in the engine touches the module-level
``random`` functions, so a seed plus the same sequence of player choices
always replays the same run.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, TypeVar

from cave_crawler.core.exceptions import GenerationError
from cave_crawler.core.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

logger = get_logger(__name__)

T = TypeVar("T")


class DiceRoller:
    """Sequential pseudo-random source.

    Example:
        >>> dice = DiceRoller(seed=42)
        >>> 1 <= dice.roll_range(1, 5) < 5
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the roller.

        Args:
            seed: Optional seed for reproducible runs.
        """
        self._seed = seed
        self._random = random.Random(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def roll_range(self, low: int, high: int) -> int:
        """Roll an integer from the half-open range ``[low, high)``.

        Raises:
            GenerationError: If the range is empty.
        """
        if high <= low:
            raise GenerationError("Cannot roll from an empty range", low=low, high=high)
        return self._random.randrange(low, high)

    def roll_float(self, low: float, high: float) -> float:
        """Roll a float from ``[low, high)``.

        Raises:
            GenerationError: If the range is empty.
        """
        if high <= low:
            raise GenerationError("Cannot roll from an empty range", low=low, high=high)
        return low + (high - low) * self._random.random()

    def roll_chance(self, probability: float) -> bool:
        """Return True with the given probability, clamped to [0, 1]."""
        probability = min(max(probability, 0.0), 1.0)
        return self._random.random() < probability

    def coin_flip(self) -> bool:
        return self.roll_chance(0.5)

    def choose(self, options: Sequence[T]) -> T:
        """Pick one element uniformly.

        Raises:
            GenerationError: If there is nothing to choose from.
        """
        if not options:
            raise GenerationError("Cannot choose from an empty sequence")
        return options[self._random.randrange(len(options))]

    def sample(self, options: Sequence[T], k: int) -> list[T]:
        """Pick ``k`` distinct positions without replacement.

        ``k`` larger than the population is capped at the population size.
        """
        return self._random.sample(list(options), min(k, len(options)))

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place."""
        self._random.shuffle(items)


__all__ = [
    "DiceRoller",
]
