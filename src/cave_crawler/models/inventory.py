"""Inventory capability shared by players and caves.

Inventories map item ids to counts. Item data itself stays in the catalog;
anything that needs the full item (defense, potions, net worth) resolves ids
through it and treats a missing id as fatal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cave_crawler.core.exceptions import ItemNotFoundError


if TYPE_CHECKING:
    from cave_crawler.content.catalog import Catalog
    from cave_crawler.models.enums import Limb
    from cave_crawler.models.items import Item


RawInventory = dict[str, int]


class HasInventory(ABC):
    """Get/add/remove/count behavior over an item-id to count mapping."""

    @abstractmethod
    def inventory_store(self) -> RawInventory:
        """Return the mapping this entity keeps its items in."""

    def has_item(self, item_id: str) -> int | None:
        """Count held of ``item_id``, or None when not held."""
        return self.inventory_store().get(item_id)

    def add_item(self, item_id: str, count: int = 1) -> None:
        store = self.inventory_store()
        store[item_id] = store.get(item_id, 0) + count

    def remove_item(self, item_id: str) -> None:
        """Remove one unit of ``item_id``.

        Raises:
            ItemNotFoundError: If the item is not held.
        """
        store = self.inventory_store()
        amount = store.get(item_id)
        if amount is None:
            raise ItemNotFoundError("Item is not in inventory", item_id=item_id)
        if amount > 1:
            store[item_id] = amount - 1
        else:
            del store[item_id]

    def item_count(self) -> int:
        """Total number of units held."""
        return sum(self.inventory_store().values())

    def inventory_items(self, catalog: Catalog) -> list[Item]:
        """Resolve the inventory to items, one entry per unit held."""
        items: list[Item] = []
        for item_id, amount in self.inventory_store().items():
            item = catalog.require_item(item_id)
            items.extend([item] * amount)
        return items

    def defense(self, catalog: Catalog) -> int:
        """Sum of the best armor defense per limb.

        Armor pieces on the same limb do not stack.
        """
        best: dict[Limb, int] = {}
        for item in self.inventory_items(catalog):
            if item.is_armor:
                limb = item.kind.limb
                best[limb] = max(best.get(limb, 0), item.kind.defense)
        return sum(best.values())


__all__ = [
    "RawInventory",
    "HasInventory",
]
