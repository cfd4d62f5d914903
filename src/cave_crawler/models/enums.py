"""Enumeration types for Cave Crawler.

Rarity is ordered (a Legendary monster outranks a Rare one) so it is an
IntEnum; the remaining enums are plain string tags as they appear in the
content files.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from cave_crawler.core.constants import RARITY_LEVEL_RANGES


if TYPE_CHECKING:
    from cave_crawler.engine.dice import DiceRoller


class Rarity(IntEnum):
    """Rarity tier of items and monsters.

    Each tier maps to a half-open range of monster levels; the ranges
    partition the positive integers with no gaps.
    """

    PETTY = 0
    COMMON = 1
    UNCOMMON = 2
    RARE = 3
    LEGENDARY = 4

    @property
    def label(self) -> str:
        """Display label (e.g., 'Uncommon')."""
        return self.name.capitalize()

    def level_range(self) -> range:
        """Half-open range of levels a monster of this tier may have."""
        low, high = RARITY_LEVEL_RANGES[self.name.lower()]
        return range(low, high)

    @classmethod
    def from_level(cls, level: int) -> Rarity:
        """Map a level back to its tier, clamped at the top to Legendary."""
        for rarity in cls:
            if level < rarity.level_range().stop:
                return rarity
        return cls.LEGENDARY

    @classmethod
    def random(cls, dice: DiceRoller) -> Rarity:
        """Draw any tier uniformly."""
        return cls(dice.roll_range(0, len(cls)))

    @classmethod
    def capped_random(cls, ceiling: Rarity, dice: DiceRoller) -> Rarity:
        """Draw uniformly from Petty up to and including ``ceiling``."""
        return cls(dice.roll_range(cls.PETTY, ceiling + 1))

    @classmethod
    def parse(cls, value: Any) -> Any:
        """Accept lowercase names from content files alongside enum members.

        Unknown strings raise ValueError so pydantic reports them as a
        validation failure.
        """
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown rarity: {value!r}") from None
        return value


RarityField = Annotated[
    Rarity,
    BeforeValidator(Rarity.parse),
    PlainSerializer(lambda rarity: rarity.name.lower(), return_type=str),
]
"""Rarity as written in data files: ``"petty"`` .. ``"legendary"``."""


class Limb(StrEnum):
    """Body slot an armor piece covers."""

    HEAD = "head"
    BODY = "body"
    HANDS = "hands"
    FEET = "feet"
    SHIELD = "shield"


class CaveDifficulty(StrEnum):
    """Difficulty a cave is generated at."""

    EASY = "easy"
    HARD = "hard"

    @classmethod
    def random(cls, dice: DiceRoller) -> CaveDifficulty:
        """Fair coin flip between easy and hard."""
        return cls.HARD if dice.coin_flip() else cls.EASY


__all__ = [
    "Rarity",
    "RarityField",
    "Limb",
    "CaveDifficulty",
]
