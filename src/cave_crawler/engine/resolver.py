"""Encounter resolution: the combat loop for one cave.

Monsters are fought in cave order, each in exactly one pass:

1. Initiative. The player strikes first with probability
   ``max(player_level, 1) / (monster_level * K)``, clamped to [0, 1], and the
   monster falls without a blow exchanged.
2. Retreat. A monster that drastically outclasses the player can be escaped
   with a small chance, skipping it entirely.
3. Damage. Otherwise the monster hits, armor reduces the blow, and potions
   are drunk automatically if the hit was lethal. Still dead afterwards ends
   the cave immediately; otherwise the fight is worth experience.

The resolver never renders anything. It mutates the player in place and
returns the outcome together with an ordered event log for the display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from cave_crawler.core.config import CombatSettings
from cave_crawler.core.logging import get_logger
from cave_crawler.models.inventory import RawInventory


if TYPE_CHECKING:
    from cave_crawler.content.catalog import Catalog
    from cave_crawler.engine.dice import DiceRoller
    from cave_crawler.models.cave import Cave
    from cave_crawler.models.monsters import Monster
    from cave_crawler.models.player import Player

logger = get_logger(__name__)


class OutcomeStatus(StrEnum):
    """State of a cave resolution."""

    IN_PROGRESS = "in_progress"
    SURVIVED = "survived"
    DIED = "died"


class CombatEventType(StrEnum):
    """Things that happen during a cave, in the order they happen."""

    NO_ENEMIES = "no_enemies"
    ENCOUNTER = "encounter"
    INITIATIVE = "initiative"
    RETREAT = "retreat"
    ATTACKED = "attacked"
    POTION_USED = "potion_used"
    SURVIVED = "survived"
    DIED = "died"


@dataclass(frozen=True)
class CombatEvent:
    """One entry of the combat log.

    Attributes:
        event_type: What happened.
        monster: Monster involved, if any.
        damage: Damage taken after armor (ATTACKED only).
        item_id: Potion consumed (POTION_USED only).
        difficult: Whether the monster outclasses the player (ENCOUNTER only).
    """

    event_type: CombatEventType
    monster: Monster | None = None
    damage: int = 0
    item_id: str | None = None
    difficult: bool = False


class CaveReward(BaseModel):
    """Spoils of a survived cave."""

    xp: int = Field(ge=0)
    gold: int = Field(ge=0)
    loot: RawInventory = Field(default_factory=dict)


@dataclass
class EncounterOutcome:
    """Terminal result of resolving a cave.

    Attributes:
        status: SURVIVED or DIED.
        reward: Present only when the cave was survived.
        events: Ordered combat log.
    """

    status: OutcomeStatus
    reward: CaveReward | None = None
    events: list[CombatEvent] = field(default_factory=list)

    @property
    def survived(self) -> bool:
        return self.status is OutcomeStatus.SURVIVED

    @property
    def died(self) -> bool:
        return self.status is OutcomeStatus.DIED


class EncounterResolver:
    """Resolves caves against a player.

    Attributes:
        catalog: Read-only content catalog, used for armor and potions.
        settings: Combat constants.
    """

    def __init__(self, catalog: Catalog, settings: CombatSettings | None = None) -> None:
        self.catalog = catalog
        self.settings = settings or CombatSettings()

    def initiative_chance(self, player: Player, monster: Monster) -> float:
        chance = max(player.level, 1) / (monster.level * self.settings.initiative_divisor)
        return min(max(chance, 0.0), 1.0)

    def is_difficult(self, player: Player, monster: Monster) -> bool:
        return monster.is_difficult(
            player.level,
            ratio=self.settings.difficult_level_ratio,
            gap=self.settings.difficult_level_gap,
        )

    def resolve(self, cave: Cave, player: Player, dice: DiceRoller) -> EncounterOutcome:
        """Fight every monster in ``cave``.

        Args:
            cave: The cave being entered; it is not reused afterwards.
            player: Mutated in place (damage, potions).
            dice: Run random source.

        Returns:
            SURVIVED with a reward, or DIED. Monsters after a lethal one are
            never fought and never rewarded.
        """
        outcome = EncounterOutcome(status=OutcomeStatus.IN_PROGRESS)
        events = outcome.events
        xp = self.settings.base_cave_xp

        if not cave.monsters:
            events.append(CombatEvent(CombatEventType.NO_ENEMIES))

        for monster in cave.monsters:
            difficult = self.is_difficult(player, monster)
            events.append(CombatEvent(CombatEventType.ENCOUNTER, monster, difficult=difficult))

            if dice.roll_chance(self.initiative_chance(player, monster)):
                events.append(CombatEvent(CombatEventType.INITIATIVE, monster))
                continue

            if difficult and dice.roll_chance(self.settings.retreat_chance):
                events.append(CombatEvent(CombatEventType.RETREAT, monster))
                continue

            raw = monster.roll_damage(
                dice,
                divisor=self.settings.monster_damage_divisor,
                minimum=self.settings.min_monster_damage,
            )
            taken = player.add_damage(
                raw,
                self.catalog,
                per_100_defense=self.settings.defense_reduction_per_100,
            )
            events.append(CombatEvent(CombatEventType.ATTACKED, monster, damage=taken))
            logger.debug("Player hit", monster=monster.display_name, raw=raw, taken=taken)

            for potion_id in player.auto_heal(self.catalog):
                events.append(CombatEvent(CombatEventType.POTION_USED, monster, item_id=potion_id))

            if player.dead:
                events.append(CombatEvent(CombatEventType.DIED, monster))
                outcome.status = OutcomeStatus.DIED
                logger.info(
                    "Player died",
                    monster=monster.display_name,
                    monster_level=monster.level,
                    player_level=player.level,
                )
                return outcome

            xp += monster.level * self.settings.xp_per_monster_level
            events.append(CombatEvent(CombatEventType.SURVIVED, monster))

        outcome.status = OutcomeStatus.SURVIVED
        outcome.reward = CaveReward(xp=xp, gold=cave.gold, loot=dict(cave.loot))
        logger.info("Cave survived", xp=xp, gold=cave.gold, loot=len(cave.loot))
        return outcome


def apply_reward(player: Player, reward: CaveReward) -> None:
    """Credit a survived cave's experience, gold and loot to ``player``."""
    player.add_xp(reward.xp)
    player.add_gold(reward.gold)
    for item_id, count in reward.loot.items():
        player.add_item(item_id, count)


__all__ = [
    "OutcomeStatus",
    "CombatEventType",
    "CombatEvent",
    "CaveReward",
    "EncounterOutcome",
    "EncounterResolver",
    "apply_reward",
]
