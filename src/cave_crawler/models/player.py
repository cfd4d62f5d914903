"""Player run-state.

Only experience, accumulated damage, gold and inventory are stored. Level,
maximum HP and death are derived from them on every access so the derived
values can never drift from the stored ones.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, computed_field

from cave_crawler.core.constants import (
    BASE_HP,
    DEFAULT_PLAYER_NAME,
    HP_PER_LEVEL,
    XP_LEVEL_DIVISOR,
)
from cave_crawler.models.enums import Rarity
from cave_crawler.models.inventory import HasInventory, RawInventory


if TYPE_CHECKING:
    from cave_crawler.content.catalog import Catalog


def round_half_up(value: float) -> int:
    """Round a non-negative float, halves away from zero."""
    return int(math.floor(value + 0.5))


class Player(BaseModel, HasInventory):
    """The adventurer.

    Attributes:
        name: Player name.
        xp: Accumulated experience.
        damage: Accumulated damage taken (not current HP).
        gold: Gold carried.
        inventory: Item id to count.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = DEFAULT_PLAYER_NAME
    xp: int = Field(default=0, ge=0)
    damage: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)
    inventory: RawInventory = Field(default_factory=dict)

    def inventory_store(self) -> RawInventory:
        return self.inventory

    @computed_field(description="Level derived from experience")
    @property
    def level(self) -> int:
        return round_half_up(math.sqrt(self.xp) / XP_LEVEL_DIVISOR)

    @computed_field(description="Maximum hit points")
    @property
    def hp(self) -> int:
        return BASE_HP + self.level * HP_PER_LEVEL

    @property
    def hp_remaining(self) -> int:
        return max(self.hp - self.damage, 0)

    @property
    def dead(self) -> bool:
        """Dead once accumulated damage strictly exceeds maximum HP."""
        return self.damage > self.hp

    @property
    def rarity(self) -> Rarity:
        """Rarity tier matching the player's level."""
        return Rarity.from_level(self.level)

    def add_xp(self, amount: int) -> None:
        self.xp += amount

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def damage_reduction(self, catalog: Catalog, *, per_100_defense: float = 0.12) -> float:
        """Fraction of incoming damage removed by armor, capped at 1."""
        return min(per_100_defense * self.defense(catalog) / 100, 1.0)

    def add_damage(
        self,
        amount: int,
        catalog: Catalog,
        *,
        per_100_defense: float = 0.12,
    ) -> int:
        """Apply ``amount`` raw damage after armor and return what was taken."""
        multiplier = 1.0 - self.damage_reduction(catalog, per_100_defense=per_100_defense)
        reduced = round_half_up(amount * multiplier)
        self.damage += reduced
        return reduced

    def heal(self, amount: int) -> None:
        self.damage = max(self.damage - amount, 0)

    def auto_heal(self, catalog: Catalog) -> list[str]:
        """Drink potions, strongest first, until alive or out of potions.

        Returns:
            Ids of the potions consumed, in order.
        """
        used: list[str] = []
        if not self.dead:
            return used

        potions = [item for item in self.inventory_items(catalog) if item.is_potion]
        potions.sort(key=lambda item: item.kind.hp, reverse=True)

        for potion in potions:
            if not self.dead:
                break
            self.heal(potion.kind.hp)
            self.remove_item(potion.id)
            used.append(potion.id)
        return used

    def net_worth(self, catalog: Catalog) -> int:
        """Gold plus the value of every item held."""
        return self.gold + sum(item.value for item in self.inventory_items(catalog))


__all__ = [
    "Player",
    "round_half_up",
]
