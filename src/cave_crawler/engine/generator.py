"""Procedural cave generation.

A cave is loot, gold and an ordered list of monsters drawn from the catalog.
Monster counts follow ``floor(sqrt(U(0, roll)) / 10)``: mostly zero to two
monsters, occasionally three on hard caves, so a hard cave is not simply
twice an easy one.

Caves are offered in pairs. One is always easy; the other is easy or hard on
a coin flip. The pair is shuffled so position gives nothing away, and the
player keeps exactly one of them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cave_crawler.core.config import GenerationSettings
from cave_crawler.core.constants import DEFAULT_CAVE_NAMES
from cave_crawler.core.exceptions import GenerationError, InvalidGameStateError
from cave_crawler.core.logging import get_logger
from cave_crawler.models.cave import Cave
from cave_crawler.models.enums import CaveDifficulty, Rarity


if TYPE_CHECKING:
    from collections.abc import Sequence

    from cave_crawler.content.catalog import Catalog
    from cave_crawler.engine.dice import DiceRoller
    from cave_crawler.models.monsters import MonsterTemplate
    from cave_crawler.models.player import Player

logger = get_logger(__name__)


@dataclass
class CaveSession:
    """Two caves offered side by side.

    Attributes:
        caves: The caves in presentation order.
        names: Display name for each cave, same order.
    """

    caves: list[Cave]
    names: list[str]
    _taken: bool = field(default=False, repr=False)

    @property
    def options(self) -> list[str]:
        return list(self.names)

    def take(self, index: int) -> Cave:
        """Hand over the chosen cave and discard the others.

        Raises:
            InvalidGameStateError: If a cave was already taken.
            IndexError: If ``index`` is not a valid position.
        """
        if self._taken:
            raise InvalidGameStateError(
                "A cave was already taken from this session",
                current_state="taken",
                expected_states=["offered"],
            )
        cave = self.caves[index]
        self._taken = True
        self.caves = []
        return cave


class CaveGenerator:
    """Builds caves from a catalog.

    Attributes:
        catalog: Read-only content catalog.
        settings: Generation bounds.
    """

    def __init__(self, catalog: Catalog, settings: GenerationSettings | None = None) -> None:
        self.catalog = catalog
        self.settings = settings or GenerationSettings()

    def roll_monster_count(self, difficulty: CaveDifficulty, dice: DiceRoller) -> int:
        upper = (
            self.settings.hard_monster_roll
            if difficulty is CaveDifficulty.HARD
            else self.settings.easy_monster_roll
        )
        return int(math.sqrt(dice.roll_float(0.0, upper)) / 10)

    def eligible_templates(self, player: Player, difficulty: CaveDifficulty) -> list[MonsterTemplate]:
        """Templates a cave of ``difficulty`` may spawn for ``player``.

        Easy caves only use families whose natural rarity is within the
        player's tier; hard caves use every family.
        """
        templates = self.catalog.monster_templates()
        if difficulty is CaveDifficulty.HARD:
            return templates
        ceiling = player.rarity
        return [template for template in templates if template.natural_rarity <= ceiling]

    def new_cave(self, player: Player, difficulty: CaveDifficulty, dice: DiceRoller) -> Cave:
        """Generate one cave.

        Raises:
            GenerationError: If monsters are required but no template is eligible.
        """
        loot_count = dice.roll_range(1, self.settings.max_loot_items + 1)
        cave = Cave(difficulty=difficulty)
        for item_id in dice.sample(self.catalog.item_ids(), loot_count):
            cave.add_item(item_id)

        cave.gold = dice.roll_range(0, self.settings.max_cave_gold)

        monster_count = self.roll_monster_count(difficulty, dice)
        if monster_count:
            templates = self.eligible_templates(player, difficulty)
            if not templates:
                raise GenerationError(
                    "No monster template is eligible for this cave",
                    details={"difficulty": difficulty.value, "player_level": player.level},
                )
            ceiling = Rarity.LEGENDARY if difficulty is CaveDifficulty.HARD else player.rarity
            cave.monsters = [dice.choose(templates).spawn(ceiling, dice) for _ in range(monster_count)]

        logger.debug(
            "Cave generated",
            difficulty=difficulty.value,
            loot=cave.item_count(),
            gold=cave.gold,
            monsters=len(cave.monsters),
        )
        return cave

    def new_cave_session(
        self,
        player: Player,
        dice: DiceRoller,
        names: Sequence[str] | None = None,
    ) -> CaveSession:
        """Generate an easy cave and a coin-flip cave, shuffled.

        Args:
            player: Player the caves are generated for.
            dice: Run random source.
            names: Pool of cave names; two distinct ones are drawn. Without
                a pool the caves are labelled left and right.
        """
        harder = CaveDifficulty.random(dice)
        caves = [
            self.new_cave(player, CaveDifficulty.EASY, dice),
            self.new_cave(player, harder, dice),
        ]
        dice.shuffle(caves)

        if names is None:
            chosen_names = list(DEFAULT_CAVE_NAMES)
        elif len(names) < len(caves):
            raise GenerationError(
                "Not enough cave names to label every cave",
                details={"names": len(names), "caves": len(caves)},
            )
        else:
            chosen_names = dice.sample(names, len(caves))

        logger.info("Cave session generated", harder=harder.value)
        return CaveSession(caves=caves, names=chosen_names)


__all__ = [
    "CaveSession",
    "CaveGenerator",
]
