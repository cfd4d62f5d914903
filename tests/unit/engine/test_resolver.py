"""Tests for the encounter resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cave_crawler.core.config import CombatSettings
from cave_crawler.engine.resolver import (
    CaveReward,
    CombatEventType,
    EncounterResolver,
    OutcomeStatus,
    apply_reward,
)
from cave_crawler.models.cave import Cave
from cave_crawler.models.enums import Rarity
from cave_crawler.models.monsters import Monster
from cave_crawler.models.player import Player


if TYPE_CHECKING:
    from collections.abc import Callable

    from cave_crawler.content.catalog import Catalog
    from cave_crawler.engine.dice import DiceRoller


def make_monster(level: int, name: str = "Rat") -> Monster:
    return Monster(name=name, generic=True, rarity=Rarity.from_level(level), level=level)


def event_types(outcome) -> list[CombatEventType]:
    return [event.event_type for event in outcome.events]


@pytest.fixture
def resolver(catalog: Catalog) -> EncounterResolver:
    return EncounterResolver(catalog)


class TestInitiative:
    """Tests for the first-strike probability."""

    def test_new_player_against_level_one(self, resolver: EncounterResolver, player: Player) -> None:
        assert resolver.initiative_chance(player, make_monster(1)) == pytest.approx(0.5)

    def test_clamped_to_one(self, resolver: EncounterResolver) -> None:
        assert resolver.initiative_chance(Player(xp=6400), make_monster(1)) == 1.0

    def test_divisor_setting(self, catalog: Catalog, player: Player) -> None:
        resolver = EncounterResolver(catalog, CombatSettings(initiative_divisor=1))
        assert resolver.initiative_chance(player, make_monster(4)) == pytest.approx(0.25)

    def test_initiative_kills_without_xp(
        self, resolver: EncounterResolver, player: Player, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        cave = Cave(monsters=[make_monster(5)])

        outcome = resolver.resolve(cave, player, rigged_dice(True))

        assert outcome.survived
        assert event_types(outcome) == [CombatEventType.ENCOUNTER, CombatEventType.INITIATIVE]
        assert outcome.reward.xp == 500
        assert player.damage == 0


class TestResolve:
    """Tests for full cave resolution."""

    def test_empty_cave(self, resolver: EncounterResolver, player: Player, dice_roller: DiceRoller) -> None:
        cave = Cave(gold=42, loot={"gem": 1})

        outcome = resolver.resolve(cave, player, dice_roller)

        assert outcome.status is OutcomeStatus.SURVIVED
        assert event_types(outcome) == [CombatEventType.NO_ENEMIES]
        assert outcome.reward == CaveReward(xp=500, gold=42, loot={"gem": 1})

    def test_fight_and_survive(
        self, resolver: EncounterResolver, player: Player, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        cave = Cave(monsters=[make_monster(1)])

        outcome = resolver.resolve(cave, player, rigged_dice(False))

        assert event_types(outcome) == [
            CombatEventType.ENCOUNTER,
            CombatEventType.ATTACKED,
            CombatEventType.SURVIVED,
        ]
        assert outcome.events[1].damage == 2
        assert player.damage == 2
        assert outcome.reward.xp == 520

    def test_death_stops_the_cave(
        self, resolver: EncounterResolver, player: Player, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        """Test that monsters after a lethal one are never fought or rewarded."""
        cave = Cave(gold=100, monsters=[make_monster(500, "Wyrm"), make_monster(1)])

        outcome = resolver.resolve(cave, player, rigged_dice(False))

        assert outcome.died
        assert outcome.reward is None
        assert event_types(outcome) == [
            CombatEventType.ENCOUNTER,
            CombatEventType.ATTACKED,
            CombatEventType.DIED,
        ]
        assert outcome.events[-1].monster.name == "Wyrm"
        assert player.xp == 0
        assert player.gold == 0

    def test_potion_saves_player(
        self, resolver: EncounterResolver, catalog: Catalog, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        player = Player(damage=19)
        player.add_item("big_potion")
        cave = Cave(monsters=[make_monster(5)])

        outcome = resolver.resolve(cave, player, rigged_dice(False))

        assert outcome.survived
        assert event_types(outcome) == [
            CombatEventType.ENCOUNTER,
            CombatEventType.ATTACKED,
            CombatEventType.POTION_USED,
            CombatEventType.SURVIVED,
        ]
        assert outcome.events[2].item_id == "big_potion"
        assert player.has_item("big_potion") is None
        assert player.damage == 0
        assert outcome.reward.xp == 600

    def test_retreat_from_difficult_monster(
        self, resolver: EncounterResolver, player: Player, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        cave = Cave(monsters=[make_monster(50)])

        outcome = resolver.resolve(cave, player, rigged_dice(False, True))

        assert outcome.survived
        assert event_types(outcome) == [CombatEventType.ENCOUNTER, CombatEventType.RETREAT]
        assert outcome.events[0].difficult is True
        assert outcome.reward.xp == 500
        assert player.damage == 0

    def test_no_retreat_from_easy_monster(
        self, resolver: EncounterResolver, player: Player, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        """Test that the retreat roll is never offered against a fair fight."""
        cave = Cave(monsters=[make_monster(1)])

        outcome = resolver.resolve(cave, player, rigged_dice(False, True))

        assert CombatEventType.RETREAT not in event_types(outcome)
        assert outcome.events[0].difficult is False

    def test_armor_reduces_damage(
        self, resolver: EncounterResolver, player: Player, rigged_dice: Callable[..., DiceRoller]
    ) -> None:
        player.add_item("chainmail")
        cave = Cave(monsters=[make_monster(1)])

        outcome = resolver.resolve(cave, player, rigged_dice(False))

        # 2 * (1 - 0.018) rounds back up to 2
        assert outcome.events[1].damage == 2

    def test_reward_loot_is_a_copy(self, resolver: EncounterResolver, player: Player, dice_roller: DiceRoller) -> None:
        cave = Cave(loot={"gem": 1})
        outcome = resolver.resolve(cave, player, dice_roller)

        cave.loot["sword"] = 1

        assert outcome.reward.loot == {"gem": 1}


class TestApplyReward:
    """Tests for crediting rewards."""

    def test_apply(self, player: Player) -> None:
        player.add_item("gem")

        apply_reward(player, CaveReward(xp=520, gold=30, loot={"gem": 1, "sword": 2}))

        assert player.xp == 520
        assert player.level == 3
        assert player.gold == 30
        assert player.inventory == {"gem": 2, "sword": 2}
