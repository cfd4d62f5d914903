"""Run orchestration.

The session controller repeatedly offers a pair of caves, resolves the one
the player picks, credits the reward and asks what to do next. On death it
hands a summary to the display and offers a retry.

All rendering and input goes through a :class:`Display`. The controller only
ever asks it to pick one of N options and trusts the returned index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from cave_crawler.core.config import Settings
from cave_crawler.core.constants import DEFAULT_PLAYER_NAME
from cave_crawler.core.logging import bind_context, clear_context, get_logger
from cave_crawler.engine.generator import CaveGenerator
from cave_crawler.engine.resolver import EncounterResolver, apply_reward
from cave_crawler.models.cave import WorldStats
from cave_crawler.models.player import Player


if TYPE_CHECKING:
    from collections.abc import Sequence

    from cave_crawler.content.catalog import Catalog
    from cave_crawler.content.strings import Strings
    from cave_crawler.engine.dice import DiceRoller
    from cave_crawler.engine.resolver import CaveReward, CombatEvent, EncounterOutcome

logger = get_logger(__name__)


@dataclass(frozen=True)
class StatusReport:
    """Snapshot shown from the after-cave menu."""

    level: int
    xp: int
    hp_remaining: int
    hp: int
    gold: int
    items: int
    defense: int


@dataclass(frozen=True)
class InventoryReport:
    """Gold plus (item name, count) pairs, most numerous first."""

    gold: int
    entries: list[tuple[str, int]]


@dataclass(frozen=True)
class DeathSummary:
    """End-of-run statistics."""

    caves: int
    monsters: int
    gold: int
    items: int
    level: int
    xp: int
    net_worth: int


class Display(Protocol):
    """Presentation collaborator driven by the session controller."""

    def spacer(self) -> None: ...

    def choose(self, prompt: str, options: Sequence[str]) -> int:
        """Return the index of the selected option."""
        ...

    def show_cave_entered(self, name: str) -> None: ...

    def show_events(self, events: Sequence[CombatEvent]) -> None: ...

    def show_reward(self, reward: CaveReward) -> None: ...

    def show_status(self, report: StatusReport) -> None: ...

    def show_inventory(self, report: InventoryReport) -> None: ...

    def show_death(self, summary: DeathSummary) -> None: ...


class GameSession:
    """Drives runs of the game until the player quits.

    Attributes:
        catalog: Read-only content catalog.
        strings: String table for prompts and menu labels.
        display: Presentation collaborator.
        dice: The run's single random source.
    """

    def __init__(
        self,
        catalog: Catalog,
        strings: Strings,
        display: Display,
        dice: DiceRoller,
        *,
        settings: Settings | None = None,
        player_name: str = DEFAULT_PLAYER_NAME,
    ) -> None:
        settings = settings or Settings()
        self.catalog = catalog
        self.strings = strings
        self.display = display
        self.dice = dice
        self.player_name = player_name
        self.generator = CaveGenerator(catalog, settings.generation)
        self.resolver = EncounterResolver(catalog, settings.combat)

    def enter_cave(self, player: Player, stats: WorldStats) -> EncounterOutcome:
        """Offer a pair of caves, resolve the chosen one and render it."""
        self.display.spacer()
        session = self.generator.new_cave_session(
            player,
            self.dice,
            names=self.strings.lines("caves.names"),
        )
        stats.caves += len(session.caves)

        choice = self.display.choose(self.strings.line("caves.approach"), session.options)
        name = session.names[choice]
        cave = session.take(choice)

        stats.monsters += len(cave.monsters)
        self.display.spacer()
        self.display.show_cave_entered(name)

        outcome = self.resolver.resolve(cave, player, self.dice)
        self.display.show_events(outcome.events)
        return outcome

    def status_report(self, player: Player) -> StatusReport:
        return StatusReport(
            level=player.level,
            xp=player.xp,
            hp_remaining=player.hp_remaining,
            hp=player.hp,
            gold=player.gold,
            items=player.item_count(),
            defense=player.defense(self.catalog),
        )

    def inventory_report(self, player: Player) -> InventoryReport:
        entries = [
            (self.catalog.require_item(item_id).name, count)
            for item_id, count in player.inventory.items()
        ]
        entries.sort(key=lambda entry: entry[1], reverse=True)
        return InventoryReport(gold=player.gold, entries=entries)

    def death_summary(self, player: Player, stats: WorldStats) -> DeathSummary:
        return DeathSummary(
            caves=stats.caves_entered,
            monsters=stats.monsters,
            gold=player.gold,
            items=player.item_count(),
            level=player.level,
            xp=player.xp,
            net_worth=player.net_worth(self.catalog),
        )

    def after_cave(self, player: Player) -> None:
        """Menu between caves; returns when the player moves on."""
        prompt = self.strings.line("interface.generic-menu")
        options = [
            self.strings.line("interface.next-cave"),
            self.strings.line("interface.show-status"),
        ]
        while True:
            self.display.spacer()
            if self.display.choose(prompt, options) == 0:
                return
            self.display.show_status(self.status_report(player))

    def play_run(self) -> tuple[Player, DeathSummary]:
        """Play caves with a fresh player until they die."""
        player = Player(name=self.player_name)
        stats = WorldStats()
        while True:
            outcome = self.enter_cave(player, stats)
            if outcome.died:
                break
            reward = outcome.reward
            apply_reward(player, reward)
            self.display.show_reward(reward)
            logger.debug("Reward applied", xp=player.xp, level=player.level, gold=player.gold)
            self.after_cave(player)

        summary = self.death_summary(player, stats)
        logger.info("Run ended", caves=summary.caves, level=summary.level, net_worth=summary.net_worth)
        return player, summary

    def game_over(self, player: Player, summary: DeathSummary) -> bool:
        """Show the death screen. Returns True to retry, False to quit."""
        self.display.spacer()
        self.display.show_death(summary)
        prompt = self.strings.line("interface.generic-menu")
        options = [
            self.strings.line("interface.retry"),
            self.strings.line("interface.view-inventory"),
            self.strings.line("interface.quit"),
        ]
        while True:
            self.display.spacer()
            choice = self.display.choose(prompt, options)
            if choice == 0:
                return True
            if choice == 1:
                self.display.show_inventory(self.inventory_report(player))
                continue
            return False

    def run(self) -> list[DeathSummary]:
        """Play runs until the player quits.

        Returns:
            The summary of every run played, in order.
        """
        summaries: list[DeathSummary] = []
        try:
            while True:
                bind_context(run=len(summaries) + 1)
                player, summary = self.play_run()
                summaries.append(summary)
                if not self.game_over(player, summary):
                    return summaries
        finally:
            clear_context()


__all__ = [
    "StatusReport",
    "InventoryReport",
    "DeathSummary",
    "Display",
    "GameSession",
]
