"""Content catalog of items and monster templates.

The catalog is built once at startup from JSON files and then lent, read
only, to the cave generator and the encounter resolver. Loading is
idempotent per id: an id that is already present is skipped, never
overwritten, and only newly inserted entries are counted.

Example:
    >>> catalog = Catalog.from_directory(Path("data"))
    >>> catalog.require_item("minor_potion").name
    'Minor Healing Potion'
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cave_crawler.core.exceptions import CatalogLoadError, MissingCatalogEntryError
from cave_crawler.core.logging import get_logger
from cave_crawler.models.items import Item
from cave_crawler.models.monsters import MonsterTemplate


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = get_logger(__name__)

T = TypeVar("T", Item, MonsterTemplate)

_ITEM_LIST = TypeAdapter(list[Item])
_MONSTER_LIST = TypeAdapter(list[MonsterTemplate])


def _read_records(source: str | Path, adapter: TypeAdapter[list[Any]]) -> list[Any]:
    """Read and validate one JSON array of records.

    Raises:
        CatalogLoadError: If the file cannot be read or fails validation.
    """
    path = Path(source)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(
            f"Cannot read catalog source: {exc.strerror or exc}",
            source=str(path),
        ) from exc

    try:
        return adapter.validate_json(raw)
    except PydanticValidationError as exc:
        raise CatalogLoadError(
            "Malformed catalog source",
            source=str(path),
            details={"errors": exc.error_count(), "first_error": exc.errors()[0]["msg"]},
        ) from exc


def _insert_new(target: dict[str, T], entries: Iterable[T]) -> int:
    added = 0
    for entry in entries:
        if entry.id in target:
            continue
        target[entry.id] = entry
        added += 1
    return added


class Catalog:
    """Items and monster templates keyed by id."""

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}
        self._monsters: dict[str, MonsterTemplate] = {}

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_items(self, source: str | Path) -> int:
        """Load items from a JSON file.

        Args:
            source: Path to a JSON array of item records.

        Returns:
            Number of items that were not already in the catalog.

        Raises:
            CatalogLoadError: If the source is missing, unreadable or malformed.
        """
        added = self.add_items(_read_records(source, _ITEM_LIST))
        logger.info("Items loaded", source=str(source), added=added, total=len(self._items))
        return added

    def load_monsters(self, source: str | Path) -> int:
        """Load monster templates from a JSON file.

        Args:
            source: Path to a JSON array of monster template records.

        Returns:
            Number of templates that were not already in the catalog.

        Raises:
            CatalogLoadError: If the source is missing, unreadable or malformed.
        """
        added = self.add_monsters(_read_records(source, _MONSTER_LIST))
        logger.info("Monsters loaded", source=str(source), added=added, total=len(self._monsters))
        return added

    def add_items(self, items: Iterable[Item]) -> int:
        return _insert_new(self._items, items)

    def add_monsters(self, monsters: Iterable[MonsterTemplate]) -> int:
        return _insert_new(self._monsters, monsters)

    @classmethod
    def from_directory(cls, data_path: str | Path) -> Catalog:
        """Build a catalog from ``monsters/*.json`` and ``items/*.json``.

        Files are loaded in sorted order so the catalog, and with it every
        seeded run, is the same on every platform.

        Raises:
            CatalogLoadError: If either directory is missing or any file fails.
        """
        root = Path(data_path)
        catalog = cls()
        for subdir, loader in (("monsters", catalog.load_monsters), ("items", catalog.load_items)):
            directory = root / subdir
            if not directory.is_dir():
                raise CatalogLoadError("Catalog directory is missing", source=str(directory))
            for source in sorted(directory.glob("*.json")):
                loader(source)
        logger.info(
            "Catalog ready",
            data_path=str(root),
            items=len(catalog._items),
            monsters=len(catalog._monsters),
        )
        return catalog

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def items(self) -> Mapping[str, Item]:
        return MappingProxyType(self._items)

    @property
    def monsters(self) -> Mapping[str, MonsterTemplate]:
        return MappingProxyType(self._monsters)

    def item_ids(self) -> list[str]:
        return list(self._items)

    def monster_templates(self) -> list[MonsterTemplate]:
        return list(self._monsters.values())

    def get_item(self, item_id: str) -> Item | None:
        return self._items.get(item_id)

    def require_item(self, item_id: str) -> Item:
        """Look up an item that gameplay expects to exist.

        Raises:
            MissingCatalogEntryError: If the id was never loaded.
        """
        item = self.get_item(item_id)
        if item is None:
            logger.error("Unknown item referenced", item_id=item_id)
            raise MissingCatalogEntryError("Item is not in the catalog", entry_id=item_id)
        return item

    def __len__(self) -> int:
        return len(self._items) + len(self._monsters)

    def __repr__(self) -> str:
        return f"Catalog(items={len(self._items)}, monsters={len(self._monsters)})"


__all__ = [
    "Catalog",
]
