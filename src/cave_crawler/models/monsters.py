"""Monster templates and spawned monsters.

A MonsterTemplate is a catalog entry describing a family of monsters. Each
cave spawns standalone Monster values from templates; a spawned monster keeps
no reference back to the template it came from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from cave_crawler.models.enums import Rarity, RarityField


if TYPE_CHECKING:
    from cave_crawler.engine.dice import DiceRoller


class MonsterTemplate(BaseModel):
    """A spawnable monster family.

    Attributes:
        id: Unique catalog key.
        name: Base name ("Goblin", "Grendel").
        generic: Generic monsters are named after their rarity ("Rare Goblin").
        proper_noun: Proper nouns are never prefixed with "The".
        rarity: Fixed rarity; drawn per spawn when unset.
        max_level: Highest level this family may spawn at.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str
    generic: bool
    proper_noun: bool = False
    rarity: RarityField | None = None
    max_level: int | None = Field(default=None, ge=0)

    @property
    def natural_rarity(self) -> Rarity:
        """Fixed rarity, or Petty when the family has none."""
        return self.rarity if self.rarity is not None else Rarity.PETTY

    def spawn(self, max_rarity: Rarity, dice: DiceRoller) -> Monster:
        """Spawn a monster no rarer than ``max_rarity``.

        The ceiling is further lowered to the tier implied by ``max_level``.
        A fixed rarity is used as-is; otherwise one is drawn uniformly from
        Petty up to the ceiling. The level is drawn from the tier's range.
        """
        if self.max_level is not None:
            max_rarity = min(Rarity.from_level(self.max_level), max_rarity)
        rarity = self.rarity if self.rarity is not None else Rarity.capped_random(max_rarity, dice)
        levels = rarity.level_range()
        return Monster(
            name=self.name,
            generic=self.generic,
            proper_noun=self.proper_noun,
            rarity=rarity,
            level=dice.roll_range(levels.start, levels.stop),
        )


class Monster(BaseModel):
    """A spawned monster."""

    model_config = ConfigDict(frozen=True)

    name: str
    generic: bool
    proper_noun: bool = False
    rarity: RarityField
    level: int = Field(ge=1)

    @property
    def display_name(self) -> str:
        """Name as shown in combat, e.g. 'Uncommon Goblin'."""
        if self.generic:
            return f"{self.rarity.label} {self.name}"
        return self.name

    @property
    def article_name(self) -> str:
        """Name with an indefinite article for generic monsters."""
        if self.generic:
            article = "an" if self.rarity is Rarity.UNCOMMON else "a"
            return f"{article} {self.display_name}"
        return self.proper_name

    @property
    def proper_name(self) -> str:
        """Name with a definite article unless it is a proper noun."""
        if self.proper_noun:
            return self.name
        return f"The {self.name}"

    def is_difficult(self, player_level: int, *, ratio: int = 3, gap: int = 10) -> bool:
        """Whether this monster drastically outclasses a player of ``player_level``.

        Both the integer level ratio must exceed ``ratio`` and the level gap
        (never negative) must exceed ``gap``.
        """
        level_ratio = self.level // max(player_level, 1)
        level_gap = max(self.level - player_level, 0)
        return level_ratio > ratio and level_gap > gap

    def roll_damage(self, dice: DiceRoller, *, divisor: int = 10, minimum: int = 2) -> int:
        """Roll raw damage from ``[max(level // divisor, minimum), max(level, low + 1))``."""
        low = max(self.level // divisor, minimum)
        high = max(self.level, low + 1)
        return dice.roll_range(low, high)


__all__ = [
    "MonsterTemplate",
    "Monster",
]
