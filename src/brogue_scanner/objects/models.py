from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..data.catalog import CatalogFormatError, CatalogRecord
from .category import Category
from .kinds import ALLY_STATUS_LABELS

_GOLD_PILES = re.compile(r"\((\d+)\s+piles?\)")


def _signed(value: int, strict: bool = False) -> str:
    positive = value > 0 if strict else value >= 0
    return f"+{value}" if positive else str(value)


def gold_piles(kind: str) -> int:
    """Number of gold piles in a catalog gold kind ("gold pieces (3 piles)")."""
    found = _GOLD_PILES.search(kind)
    return int(found.group(1)) if found else 1


@dataclass(frozen=True)
class CatalogObject:
    """An in-game object or ally, as listed on a catalog line."""

    category: Category
    kind: str
    enchantment: Optional[int] = None
    runic: Optional[str] = None
    quantity: int = 1
    ally_status: Optional[str] = None
    mutation: Optional[str] = None
    opens_vault: Optional[int] = None

    @classmethod
    def from_record(cls, record: CatalogRecord) -> "CatalogObject":
        category = Category.parse(record.category)
        if category is None:
            raise CatalogFormatError(f"Unknown object category '{record.category}'")
        return cls(
            category=category,
            kind=record.kind,
            enchantment=record.enchantment,
            runic=record.runic or None,
            quantity=record.quantity,
            ally_status=record.ally_status_name or None,
            mutation=record.mutation_name or None,
            opens_vault=record.opens_vault,
        )

    def __str__(self) -> str:
        ench = self.enchantment or 0
        cat = self.category

        if cat in (Category.WEAPON, Category.ARMOR):
            text = f"A {_signed(ench)} {self.kind}"
            return f"{text} of {self.runic}" if self.runic else text
        if cat is Category.POTION:
            return f"A potion of {self.kind}"
        if cat is Category.SCROLL:
            return f"A scroll of {self.kind}"
        if cat is Category.CHARM:
            return f"A {_signed(ench)} {self.kind} charm"
        if cat is Category.RING:
            return f"A {_signed(ench, strict=True)} ring of {self.kind}"
        if cat is Category.STAFF:
            return f"A staff of {self.kind} [{ench}/{ench}]"
        if cat is Category.WAND:
            return f"A wand of {self.kind} [{ench}]"
        if cat is Category.ALLY:
            status = ALLY_STATUS_LABELS.get(self.ally_status or "", self.ally_status or "")
            text = f"A {status} {self.kind}" if status else f"A {self.kind}"
            return f"{text} <{self.mutation}>" if self.mutation else text
        if cat is Category.GOLD:
            piles = gold_piles(self.kind)
            text = f"{self.quantity} gold pieces"
            return f"{text} ({piles} piles)" if piles > 1 else text
        return f"A {self.kind}"


__all__ = ["CatalogObject", "gold_piles"]
