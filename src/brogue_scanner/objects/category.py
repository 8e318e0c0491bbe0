from __future__ import annotations

from enum import Enum, Flag
from typing import Optional


class Category(Flag):
    """Object categories under the "category" catalog header.

    `ITEM` and `EQUIPMENT` never appear in a catalog; they are search-only
    groupings. An item is anything that can be found in a vault, equipment
    is anything that can be worn or wielded.
    """

    ALLY = 1
    ALTAR = 2
    ARMOR = 4
    CHARM = 8
    FOOD = 16
    GOLD = 32
    KEY = 64
    POTION = 128
    RING = 256
    SCROLL = 512
    STAFF = 1024
    WAND = 2048
    WEAPON = 4096
    ITEM = ARMOR | CHARM | POTION | RING | SCROLL | STAFF | WAND | WEAPON
    EQUIPMENT = ARMOR | RING | WEAPON

    @classmethod
    def parse(cls, value: str) -> Optional["Category"]:
        return CATEGORY_NAMES.get(value.strip().lower())

    def intersects(self, other: "Category") -> bool:
        return bool(self & other)

    @property
    def label(self) -> str:
        return (self.name or "").lower()

    def __str__(self) -> str:
        return self.label


CATEGORY_NAMES = {
    "ally": Category.ALLY,
    "altar": Category.ALTAR,
    "armor": Category.ARMOR,
    "charm": Category.CHARM,
    "food": Category.FOOD,
    "gold": Category.GOLD,
    "key": Category.KEY,
    "potion": Category.POTION,
    "ring": Category.RING,
    "scroll": Category.SCROLL,
    "staff": Category.STAFF,
    "wand": Category.WAND,
    "weapon": Category.WEAPON,
    "item": Category.ITEM,
    "equipment": Category.EQUIPMENT,
}


class MagicType(Enum):
    BENEVOLENT = "benevolent"
    MALEVOLENT = "malevolent"

    def __str__(self) -> str:
        return self.value


__all__ = ["Category", "CATEGORY_NAMES", "MagicType"]
