"""Command-line entry point.

Example:
    $ cave-crawler --seed 42 --name Ada
    $ python -m cave_crawler --log-level DEBUG --log-file run.log
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from cave_crawler.content.catalog import Catalog
from cave_crawler.content.strings import Strings
from cave_crawler.core.config import get_settings
from cave_crawler.core.constants import DEFAULT_PLAYER_NAME
from cave_crawler.core.exceptions import CaveCrawlerError
from cave_crawler.core.logging import configure_logging, get_logger
from cave_crawler.engine.dice import DiceRoller
from cave_crawler.engine.session import GameSession
from cave_crawler.ui.console import ConsoleDisplay


if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cave-crawler",
        description="Explore caves, fight monsters, collect loot, die.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument("--name", default=DEFAULT_PLAYER_NAME, help="Player name")
    parser.add_argument("--data-dir", type=Path, default=None, help="Content directory")
    parser.add_argument("--locale", default=None, help="String table locale")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (logs go to stderr)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Render logs as JSON")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    console = Console(highlight=False)

    try:
        settings = get_settings()
        configure_logging(
            level=args.log_level or settings.log_level,
            json_format=args.json_logs or settings.json_logs,
            log_file=args.log_file or settings.log_file,
        )
        data_path = args.data_dir or settings.content.data_path
        locale = args.locale or settings.content.locale

        catalog = Catalog.from_directory(data_path)
        strings = Strings.load(data_path, locale)
    except CaveCrawlerError as exc:
        console.print(f"[bold red]Cannot start:[/] {exc}")
        return 1

    dice = DiceRoller(seed=args.seed)
    flavor = DiceRoller(seed=None if args.seed is None else args.seed + 1)
    display = ConsoleDisplay(strings, catalog, console=console, dice=flavor)
    session = GameSession(
        catalog,
        strings,
        display,
        dice,
        settings=settings,
        player_name=args.name,
    )

    logger.info("Starting game", seed=args.seed, data_path=str(data_path), locale=locale)
    try:
        session.run()
    except KeyboardInterrupt:
        console.print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
