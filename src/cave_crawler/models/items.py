"""Item catalog entries.

Items are immutable once loaded. Content files store them flat, with the
``kind`` tag next to the kind-specific fields::

    {"id": "iron_helm", "kind": "armor", "defense": 5, "limb": "head",
     "name": "Iron Helm", "value": 40, "rarity": "common"}

The flat record is folded into a tagged payload before validation so that
each kind only accepts its own fields.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cave_crawler.models.enums import Limb, Rarity, RarityField


class ItemPayload(BaseModel):
    """Base class for kind-specific item data."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Weapon(ItemPayload):
    kind: Literal["weapon"] = "weapon"
    damage: int = Field(ge=0)


class Armor(ItemPayload):
    kind: Literal["armor"] = "armor"
    defense: int = Field(ge=0)
    limb: Limb


class Potion(ItemPayload):
    kind: Literal["potion"] = "potion"
    hp: int = Field(ge=0, description="Damage healed when consumed")


class Collectible(ItemPayload):
    kind: Literal["collectible"] = "collectible"


ItemKind = Annotated[
    Weapon | Armor | Potion | Collectible,
    Field(discriminator="kind"),
]

_ITEM_FIELDS = frozenset({"id", "name", "value", "rarity", "kind"})


class Item(BaseModel):
    """An immutable catalog item.

    Attributes:
        id: Unique catalog key.
        name: Display name.
        value: Worth in gold, counted towards net worth.
        rarity: Rarity tier, Common when the data omits it.
        kind: Kind-specific payload.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str
    value: int = Field(ge=0)
    rarity: RarityField = Rarity.COMMON
    kind: ItemKind

    @model_validator(mode="before")
    @classmethod
    def fold_kind_fields(cls, data: Any) -> Any:
        """Move flat kind-specific fields into the tagged payload."""
        if isinstance(data, dict) and isinstance(data.get("kind"), str):
            data = dict(data)
            payload = {key: data.pop(key) for key in list(data) if key not in _ITEM_FIELDS}
            data["kind"] = {"kind": data["kind"], **payload}
        return data

    @property
    def is_potion(self) -> bool:
        return isinstance(self.kind, Potion)

    @property
    def is_armor(self) -> bool:
        return isinstance(self.kind, Armor)


__all__ = [
    "ItemPayload",
    "Weapon",
    "Armor",
    "Potion",
    "Collectible",
    "ItemKind",
    "Item",
]
