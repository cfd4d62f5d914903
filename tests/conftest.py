"""Pytest configuration and shared fixtures.

This module provides common fixtures for the Cave Crawler test suite: an
in-memory catalog small enough to reason about, seeded dice, and a rigged
roller for forcing combat branches.
"""

from __future__ import annotations

import itertools
import json
import logging
from typing import TYPE_CHECKING, Any

import pytest
import structlog

from cave_crawler.content.catalog import Catalog
from cave_crawler.engine.dice import DiceRoller
from cave_crawler.models import (
    Armor,
    Collectible,
    Item,
    Limb,
    MonsterTemplate,
    Player,
    Potion,
    Rarity,
    Weapon,
)


if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Sequence
    from pathlib import Path


class RiggedDice(DiceRoller):
    """DiceRoller whose probability rolls follow a fixed script.

    Range rolls stay seeded-random; ``roll_chance`` cycles through
    ``chances`` regardless of the probability asked for.
    """

    def __init__(self, chances: Sequence[bool], *, seed: int = 0) -> None:
        super().__init__(seed=seed)
        self._chances = itertools.cycle(chances)

    def roll_chance(self, probability: float) -> bool:
        return next(self._chances)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from cave_crawler.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Put the root logger and structlog back the way each test found them."""
    from cave_crawler.core.logging import clear_context

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    clear_context()
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
    structlog.reset_defaults()


# =============================================================================
# Content Fixtures
# =============================================================================


@pytest.fixture
def sample_items() -> list[Item]:
    """Items covering every kind, with two head armors."""
    return [
        Item(id="small_potion", name="Small Potion", value=5, kind=Potion(hp=10)),
        Item(id="big_potion", name="Big Potion", value=20, kind=Potion(hp=30)),
        Item(id="leather_cap", name="Leather Cap", value=10, kind=Armor(defense=5, limb=Limb.HEAD)),
        Item(id="iron_helm", name="Iron Helm", value=30, kind=Armor(defense=8, limb=Limb.HEAD)),
        Item(id="chainmail", name="Chainmail", value=50, kind=Armor(defense=15, limb=Limb.BODY)),
        Item(id="gem", name="Gem", value=100, kind=Collectible(), rarity=Rarity.RARE),
        Item(id="sword", name="Sword", value=25, kind=Weapon(damage=5)),
    ]


@pytest.fixture
def sample_monsters() -> list[MonsterTemplate]:
    """Templates spanning free, capped and fixed rarities."""
    return [
        MonsterTemplate(id="rat", name="Rat", generic=True),
        MonsterTemplate(id="goblin", name="Goblin", generic=True, max_level=29),
        MonsterTemplate(id="hermit", name="Hermit", generic=False, rarity=Rarity.PETTY),
        MonsterTemplate(id="grendel", name="Grendel", generic=False, proper_noun=True, rarity=Rarity.RARE),
        MonsterTemplate(id="wyrm", name="Wyrm", generic=False, rarity=Rarity.LEGENDARY),
    ]


@pytest.fixture
def catalog(sample_items: list[Item], sample_monsters: list[MonsterTemplate]) -> Catalog:
    """In-memory catalog built from the sample content."""
    catalog = Catalog()
    catalog.add_items(sample_items)
    catalog.add_monsters(sample_monsters)
    return catalog


@pytest.fixture
def bundled_catalog() -> Catalog:
    """Catalog loaded from the content shipped with the package."""
    from cave_crawler.core.config import DEFAULT_DATA_PATH

    return Catalog.from_directory(DEFAULT_DATA_PATH)


@pytest.fixture
def bundled_strings() -> Any:
    """English string table shipped with the package."""
    from cave_crawler.content.strings import Strings
    from cave_crawler.core.config import DEFAULT_DATA_PATH

    return Strings.load(DEFAULT_DATA_PATH, "en")


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document under ``tmp_path`` and return its path."""

    def _write(relative: str, payload: Any) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def rigged_dice() -> Callable[..., RiggedDice]:
    """Factory for dice with scripted probability rolls."""

    def _make(*chances: bool, seed: int = 0) -> RiggedDice:
        return RiggedDice(chances or (False,), seed=seed)

    return _make


@pytest.fixture
def player() -> Player:
    """A fresh level 0 player."""
    return Player(name="Tester")
