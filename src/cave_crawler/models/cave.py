"""Caves and world statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cave_crawler.core.constants import CAVES_PER_SESSION
from cave_crawler.models.enums import CaveDifficulty
from cave_crawler.models.inventory import HasInventory, RawInventory
from cave_crawler.models.monsters import Monster


class Cave(BaseModel, HasInventory):
    """A generated cave, consumed by a single resolution pass.

    Attributes:
        difficulty: Difficulty it was generated at.
        loot: Item id to count awarded on survival.
        gold: Gold awarded on survival.
        monsters: Monsters in combat order.
    """

    model_config = ConfigDict(validate_assignment=True)

    difficulty: CaveDifficulty = CaveDifficulty.EASY
    loot: RawInventory = Field(default_factory=dict)
    gold: int = Field(default=0, ge=0)
    monsters: list[Monster] = Field(default_factory=list)

    def inventory_store(self) -> RawInventory:
        return self.loot


class WorldStats(BaseModel):
    """Running counters for one run.

    ``caves`` counts every generated cave, two per session, so the number of
    caves actually entered is ``caves_entered``.
    """

    caves: int = Field(default=0, ge=0)
    monsters: int = Field(default=0, ge=0)

    @property
    def caves_entered(self) -> int:
        return self.caves // CAVES_PER_SESSION


__all__ = [
    "Cave",
    "WorldStats",
]
