"""Game engine: random source, cave generation, combat and run control.

Submodules:
    dice: Seeded random source threaded through every stochastic call
    generator: Cave and cave-pair generation from the catalog
    resolver: Turn-by-turn combat for one cave
    session: Run orchestration over a Display collaborator

Example:
    >>> from cave_crawler.engine import CaveGenerator, DiceRoller, EncounterResolver
    >>>
    >>> dice = DiceRoller(seed=7)
    >>> cave = CaveGenerator(catalog).new_cave(player, CaveDifficulty.EASY, dice)
    >>> outcome = EncounterResolver(catalog).resolve(cave, player, dice)
    >>> outcome.survived
    True
"""

from __future__ import annotations

from cave_crawler.engine.dice import DiceRoller
from cave_crawler.engine.generator import CaveGenerator, CaveSession
from cave_crawler.engine.resolver import (
    CaveReward,
    CombatEvent,
    CombatEventType,
    EncounterOutcome,
    EncounterResolver,
    OutcomeStatus,
    apply_reward,
)
from cave_crawler.engine.session import (
    DeathSummary,
    Display,
    GameSession,
    InventoryReport,
    StatusReport,
)


__all__ = [
    # Random source
    "DiceRoller",
    # Generation
    "CaveGenerator",
    "CaveSession",
    # Resolution
    "CaveReward",
    "CombatEvent",
    "CombatEventType",
    "EncounterOutcome",
    "EncounterResolver",
    "OutcomeStatus",
    "apply_reward",
    # Session
    "DeathSummary",
    "Display",
    "GameSession",
    "InventoryReport",
    "StatusReport",
]
