"""Cave Crawler - a terminal cave-diving role-playing game.

The player approaches pairs of procedurally generated caves, picks one,
fights whatever lives inside and keeps the loot, until a monster finally
wins.

ARCHITECTURE:
- content: static catalog (items, monster templates) and string tables
- models: Pydantic V2 entities with derived stats (level, hp, defense)
- engine: cave generation, combat resolution and run control, all driven
  by one explicitly threaded DiceRoller
- ui: rich terminal display, the only module that renders anything

Example:
    >>> from cave_crawler import Catalog, CaveDifficulty, CaveGenerator, DiceRoller, EncounterResolver, Player
    >>>
    >>> catalog = Catalog.from_directory("data")
    >>> dice = DiceRoller(seed=42)
    >>> player = Player(name="Ada")
    >>> cave = CaveGenerator(catalog).new_cave(player, CaveDifficulty.HARD, dice)
    >>> outcome = EncounterResolver(catalog).resolve(cave, player, dice)

Modules:
    core: Configuration, logging, and base exceptions.
    content: Catalog and localized strings.
    models: Rarity, items, monsters, player, caves.
    engine: Dice, generator, resolver, session controller.
    ui: Rich console display and palette.
"""

from __future__ import annotations

# Core
from cave_crawler.core.config import Settings, get_settings
from cave_crawler.core.exceptions import CaveCrawlerError
from cave_crawler.core.logging import configure_logging, get_logger

# Content
from cave_crawler.content import Catalog, Strings

# Models
from cave_crawler.models import (
    Cave,
    CaveDifficulty,
    Item,
    Limb,
    Monster,
    MonsterTemplate,
    Player,
    Rarity,
    WorldStats,
)

# Engine
from cave_crawler.engine import (
    CaveGenerator,
    CaveReward,
    DiceRoller,
    EncounterOutcome,
    EncounterResolver,
    GameSession,
    OutcomeStatus,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "CaveCrawlerError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Content
    "Catalog",
    "Strings",
    # Models
    "Cave",
    "CaveDifficulty",
    "Item",
    "Limb",
    "Monster",
    "MonsterTemplate",
    "Player",
    "Rarity",
    "WorldStats",
    # Engine
    "CaveGenerator",
    "CaveReward",
    "DiceRoller",
    "EncounterOutcome",
    "EncounterResolver",
    "GameSession",
    "OutcomeStatus",
]
