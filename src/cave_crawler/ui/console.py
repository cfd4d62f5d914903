"""Rich console implementation of the session Display."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from cave_crawler.engine.resolver import CombatEventType
from cave_crawler.ui.theme import Colors, commas, styled


if TYPE_CHECKING:
    from collections.abc import Sequence

    from cave_crawler.content.catalog import Catalog
    from cave_crawler.content.strings import Strings
    from cave_crawler.engine.dice import DiceRoller
    from cave_crawler.engine.resolver import CaveReward, CombatEvent
    from cave_crawler.engine.session import DeathSummary, InventoryReport, StatusReport
    from cave_crawler.models.monsters import Monster


_EVENT_KEYS: dict[CombatEventType, str] = {
    CombatEventType.NO_ENEMIES: "combat.no-enemies",
    CombatEventType.INITIATIVE: "combat.initiative",
    CombatEventType.RETREAT: "combat.retreat",
    CombatEventType.ATTACKED: "combat.attacked",
    CombatEventType.SURVIVED: "combat.survived",
}


class ConsoleDisplay:
    """Renders the game to a terminal and reads menu choices.

    Args:
        strings: String table for every message shown.
        catalog: Catalog used to name items.
        console: Rich console; a fresh stdout console when omitted.
        dice: Picks message variants. Pass a roller separate from the run's
            so flavor text never changes the game's random sequence.
    """

    def __init__(
        self,
        strings: Strings,
        catalog: Catalog,
        *,
        console: Console | None = None,
        dice: DiceRoller | None = None,
    ) -> None:
        self.strings = strings
        self.catalog = catalog
        self.console = console or Console(highlight=False)
        self.dice = dice

    def _line(self, key: str, **fields: object) -> str:
        return self.strings.line(key, self.dice, **fields)

    def _monster_fields(self, monster: Monster) -> dict[str, str]:
        def name(text: str) -> str:
            return styled(escape(text), Colors.MONSTER)

        return {
            "enemy": name(monster.display_name),
            "enemy_article": name(monster.article_name),
            "enemy_proper": name(monster.proper_name),
        }

    def _item_name(self, item_id: str) -> str:
        return escape(self.catalog.require_item(item_id).name)

    def _count_table(self, rows: Sequence[tuple[int, str]]) -> Table:
        table = Table.grid(padding=(0, 1))
        table.add_column(justify="left", style=Colors.LOW_PRIORITY)
        table.add_column()
        for count, label in rows:
            table.add_row(f"x{commas(count)} -", label)
        return table

    # -------------------------------------------------------------------------
    # Display protocol
    # -------------------------------------------------------------------------

    def spacer(self) -> None:
        self.console.print()

    def choose(self, prompt: str, options: Sequence[str]) -> int:
        self.console.print(prompt)
        for number, option in enumerate(options, start=1):
            self.console.print(styled(f"{number}. {escape(option)}", Colors.INPUT))
        answer = Prompt.ask(
            "?",
            console=self.console,
            choices=[str(number) for number in range(1, len(options) + 1)],
            show_choices=False,
        )
        return int(answer) - 1

    def wait_any_key(self) -> None:
        self.console.input(styled(self._line("interface.continue"), Colors.INPUT))

    def show_cave_entered(self, name: str) -> None:
        self.console.print(self._line("caves.enter", cave=escape(name)))

    def show_events(self, events: Sequence[CombatEvent]) -> None:
        for event in events:
            monster = event.monster
            fields = self._monster_fields(monster) if monster is not None else {}

            if event.event_type is CombatEventType.ENCOUNTER:
                self.spacer()
                key = "combat.encounter-hard" if event.difficult else "combat.encounter-easy"
                self.console.print(self._line(key, **fields))
            elif event.event_type is CombatEventType.ATTACKED:
                damage = styled(f"{commas(event.damage)} damage", Colors.DAMAGE)
                self.console.print(self._line("combat.attacked", damage=damage, **fields))
            elif event.event_type is CombatEventType.POTION_USED:
                potion = styled(self._item_name(event.item_id), Colors.POTION)
                self.console.print(self._line("potion.use", potion=potion))
            elif event.event_type is CombatEventType.SURVIVED:
                self.console.print(self._line("combat.player-turn", **fields))
                self.console.print(self._line("combat.survived", **fields))
            elif event.event_type is CombatEventType.DIED:
                continue
            else:
                self.console.print(self._line(_EVENT_KEYS[event.event_type], **fields))

    def show_reward(self, reward: CaveReward) -> None:
        self.spacer()
        self.console.print(self._line("combat.reward"))
        rows = [
            (reward.xp, styled("xp", Colors.XP)),
            (reward.gold, styled("gold", Colors.GOLD)),
        ]
        rows.extend((count, self._item_name(item_id)) for item_id, count in reward.loot.items())
        self.console.print(self._count_table(rows))

    def show_status(self, report: StatusReport) -> None:
        self.spacer()
        self.console.print(
            self._line(
                "status.report",
                level=commas(report.level),
                xp=commas(report.xp),
                hp_remaining=commas(report.hp_remaining),
                hp=commas(report.hp),
                gold=commas(report.gold),
                items=commas(report.items),
                defense=commas(report.defense),
            )
        )
        self.wait_any_key()

    def show_inventory(self, report: InventoryReport) -> None:
        self.spacer()
        rows = [(report.gold, styled("gold", Colors.GOLD))]
        rows.extend((count, escape(name)) for name, count in report.entries)
        self.console.print(self._count_table(rows))

    def show_death(self, summary: DeathSummary) -> None:
        self.console.print(styled(self._line("combat.died"), Colors.DEATH))
        self.console.print(self._line("combat.game-over"))
        self.console.print(
            self._line(
                "summary.totals",
                caves=commas(summary.caves),
                monsters=commas(summary.monsters),
                gold=commas(summary.gold),
                items=commas(summary.items),
            )
        )
        self.console.print(
            self._line(
                "summary.final",
                level=commas(summary.level),
                xp=commas(summary.xp),
                net_worth=commas(summary.net_worth),
            )
        )


__all__ = [
    "ConsoleDisplay",
]
