"""Entity models: rarity, items, monsters, players and caves.

All models are Pydantic V2 schemas. Catalog entries (Item, MonsterTemplate)
are frozen; run-state (Player, Cave, WorldStats) is mutated by the engine.
"""

from __future__ import annotations

from cave_crawler.models.cave import Cave, WorldStats
from cave_crawler.models.enums import CaveDifficulty, Limb, Rarity, RarityField
from cave_crawler.models.inventory import HasInventory, RawInventory
from cave_crawler.models.items import (
    Armor,
    Collectible,
    Item,
    ItemKind,
    ItemPayload,
    Potion,
    Weapon,
)
from cave_crawler.models.monsters import Monster, MonsterTemplate
from cave_crawler.models.player import Player, round_half_up


__all__ = [
    # Enums
    "Rarity",
    "RarityField",
    "Limb",
    "CaveDifficulty",
    # Items
    "Item",
    "ItemKind",
    "ItemPayload",
    "Weapon",
    "Armor",
    "Potion",
    "Collectible",
    # Monsters
    "MonsterTemplate",
    "Monster",
    # Inventory
    "HasInventory",
    "RawInventory",
    # Run state
    "Player",
    "Cave",
    "WorldStats",
    "round_half_up",
]
