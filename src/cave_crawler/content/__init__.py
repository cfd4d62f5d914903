"""Static content: the item/monster catalog and localized strings."""

from __future__ import annotations

from cave_crawler.content.catalog import Catalog
from cave_crawler.content.strings import Strings


__all__ = [
    "Catalog",
    "Strings",
]
