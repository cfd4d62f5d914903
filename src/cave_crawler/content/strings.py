"""Localized message lookup.

String tables are flat JSON objects keyed by dotted names. A value is either
one template or a list of variants; templates use ``str.format`` fields::

    {"combat.attacked": ["{enemy_proper} attacks! You take {damage}."]}
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cave_crawler.core.exceptions import CatalogLoadError, StringsError
from cave_crawler.core.logging import get_logger


if TYPE_CHECKING:
    from cave_crawler.engine.dice import DiceRoller

logger = get_logger(__name__)

_TABLE = TypeAdapter(dict[str, str | list[str]])


class Strings:
    """A loaded string table for one locale."""

    def __init__(self, table: dict[str, str | list[str]], *, locale: str = "en") -> None:
        self._table = {key: [value] if isinstance(value, str) else list(value) for key, value in table.items()}
        self.locale = locale

    @classmethod
    def load(cls, data_path: str | Path, locale: str = "en") -> Strings:
        """Load ``strings/<locale>.json`` under ``data_path``.

        Raises:
            CatalogLoadError: If the table is missing or malformed.
        """
        source = Path(data_path) / "strings" / f"{locale}.json"
        try:
            raw = source.read_bytes()
        except OSError as exc:
            raise CatalogLoadError("Cannot read string table", source=str(source)) from exc
        try:
            table = _TABLE.validate_json(raw)
        except PydanticValidationError as exc:
            raise CatalogLoadError("Malformed string table", source=str(source)) from exc
        logger.info("Strings loaded", locale=locale, keys=len(table))
        return cls(table, locale=locale)

    def lines(self, key: str) -> list[str]:
        """All variants of ``key``.

        Raises:
            StringsError: If the key is unknown or has no variants.
        """
        variants = self._table.get(key)
        if not variants:
            raise StringsError("Unknown string key", key=key, details={"locale": self.locale})
        return list(variants)

    def line(self, key: str, dice: DiceRoller | None = None, **fields: Any) -> str:
        """Format one variant of ``key``.

        A variant is picked at random when ``dice`` is given, otherwise the
        first one is used.
        """
        variants = self.lines(key)
        template = dice.choose(variants) if dice is not None else variants[0]
        try:
            return template.format(**fields)
        except (KeyError, IndexError) as exc:
            raise StringsError(
                "String template expects a missing field",
                key=key,
                details={"field": str(exc)},
            ) from exc

    def __contains__(self, key: object) -> bool:
        return key in self._table


__all__ = [
    "Strings",
]
