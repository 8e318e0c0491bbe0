"""Turns category option terms (`-a 2 scale +3 d5`) into object parameters."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..objects import Category, MagicType, find_exact, find_partial
from ..objects.kinds import (
    ALLY_STATUSES,
    KINDS_BY_CATEGORY,
    MUTATIONS,
    RUNICS_BY_CATEGORY,
)
from .params import OBJECT_DEPTH_DEFAULT, CountType, ObjectParameter

COUNT_LIMIT = 4294967295
DEPTH_TERM_LIMIT = 255
ENCHANTMENT_LIMIT = 127

_COUNT = re.compile(r"([<=]?)(\d+)")
_DEPTH = re.compile(r"d(\d+)")
_PLUS = re.compile(r"\+(\d+)")
_MINUS = re.compile(r"(\d+)-")

_COUNT_TYPES = {"": CountType.AT_LEAST, "<": CountType.LESS_THAN, "=": CountType.EQUAL_TO}

# Command-line option (namespace attribute) per category, in search order.
PARAM_ORDER: Tuple[Tuple[str, Category], ...] = (
    ("ally", Category.ALLY),
    ("altar", Category.ALTAR),
    ("armor", Category.ARMOR),
    ("charm", Category.CHARM),
    ("food", Category.FOOD),
    ("gold", Category.GOLD),
    ("potion", Category.POTION),
    ("ring", Category.RING),
    ("scroll", Category.SCROLL),
    ("staff", Category.STAFF),
    ("wand", Category.WAND),
    ("weapon", Category.WEAPON),
    ("equipment", Category.EQUIPMENT),
    ("item", Category.ITEM),
)

# Terms that set one of these attributes overwrite each other.
_SLOTS: Dict[str, Tuple[str, ...]] = {
    "count": ("count",),
    "depth": ("depth",),
    "enchantment": ("enchantment",),
    "kind": ("kind",),
    "runic": ("runic", "any_runic"),
    "status": ("ally_status", "any_legendary"),
    "mutation": ("mutation", "any_mutation"),
    "vault": ("in_vault",),
    "magic": ("magic_type",),
}

Term = Tuple[str, Dict[str, Any]]
TermParser = Callable[[Category, str], Optional[Term]]


class SearchTermError(ValueError):
    """A category option got a term it cannot use."""


@dataclass
class PrepParams:
    """Terms collected so far for the object parameter being built."""

    count: Optional[int] = None
    count_type: CountType = CountType.AT_LEAST
    depth: Optional[int] = None
    enchantment: Optional[int] = None
    kind: Optional[str] = None
    runic: Optional[str] = None
    any_runic: bool = False
    ally_status: Optional[str] = None
    any_legendary: bool = False
    mutation: Optional[str] = None
    any_mutation: bool = False
    in_vault: Optional[bool] = None
    magic_type: Optional[MagicType] = None

    def is_set(self, slot: str) -> bool:
        for name in _SLOTS[slot]:
            value = getattr(self, name)
            if name.startswith("any_"):
                if value:
                    return True
            elif value is not None:
                return True
        return False

    def is_empty(self) -> bool:
        return not any(self.is_set(slot) for slot in _SLOTS)

    def update(self, values: Dict[str, Any]) -> None:
        for name, value in values.items():
            setattr(self, name, value)

    def to_parameter(self, category: Category) -> ObjectParameter:
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        count = values.pop("count")
        depth = values.pop("depth")
        return ObjectParameter(
            category=category,
            count_target=1 if count is None else count,
            depth=OBJECT_DEPTH_DEFAULT if depth is None else depth,
            **values,
        )


def add_parameter(category: Category, prep: PrepParams, params: List[ObjectParameter]) -> None:
    if category in (Category.FOOD, Category.GOLD):
        if prep.count is None:
            raise SearchTermError(f"COUNT is required for the '{category}' category")
    elif prep.is_empty():
        raise SearchTermError(f"Insufficient/invalid parameters for '{category}' category")
    params.append(prep.to_parameter(category))


# -- single-term parsers -----------------------------------------------------

def _count(category: Category, value: str) -> Optional[Term]:
    found = _COUNT.fullmatch(value)
    if found is None or int(found.group(2)) > COUNT_LIMIT:
        return None
    return "count", {"count": int(found.group(2)), "count_type": _COUNT_TYPES[found.group(1)]}


def _depth(category: Category, value: str) -> Optional[Term]:
    found = _DEPTH.fullmatch(value)
    if found is None or int(found.group(1)) > DEPTH_TERM_LIMIT:
        return None
    return "depth", {"depth": int(found.group(1))}


def _positive_enchantment(category: Category, value: str) -> Optional[Term]:
    found = _PLUS.fullmatch(value)
    if found is None or int(found.group(1)) > ENCHANTMENT_LIMIT:
        return None
    return "enchantment", {"enchantment": int(found.group(1))}


def _enchantment(category: Category, value: str) -> Optional[Term]:
    term = _positive_enchantment(category, value)
    if term is not None:
        return term
    found = _MINUS.fullmatch(value)
    if found is None or int(found.group(1)) > ENCHANTMENT_LIMIT:
        return None
    return "enchantment", {"enchantment": -int(found.group(1))}


def _vault(category: Category, value: str) -> Optional[Term]:
    if value == "vault":
        return "vault", {"in_vault": True}
    if value == "novault":
        return "vault", {"in_vault": False}
    return None


def _magic(category: Category, value: str) -> Optional[Term]:
    if value == "good":
        return "magic", {"magic_type": MagicType.BENEVOLENT}
    if value == "bad":
        return "magic", {"magic_type": MagicType.MALEVOLENT}
    return None


def _any_runic(category: Category, value: str) -> Optional[Term]:
    return ("runic", {"any_runic": True}) if value == "runic" else None


def _legendary(category: Category, value: str) -> Optional[Term]:
    return ("status", {"any_legendary": True}) if value == "legendary" else None


def _any_mutation(category: Category, value: str) -> Optional[Term]:
    return ("mutation", {"any_mutation": True}) if value == "mutation" else None


def _status(category: Category, value: str) -> Optional[Term]:
    if find_exact(ALLY_STATUSES, value) is None:
        return None
    return "status", {"ally_status": value}


def _kind(category: Category, value: str) -> Optional[Term]:
    if not value or find_partial(KINDS_BY_CATEGORY[category], value) is None:
        return None
    return "kind", {"kind": value}


def _runic(category: Category, value: str) -> Optional[Term]:
    if not value or find_partial(RUNICS_BY_CATEGORY[category], value) is None:
        return None
    return "runic", {"runic": value}


def _mutation(category: Category, value: str) -> Optional[Term]:
    if not value or find_partial(MUTATIONS, value) is None:
        return None
    return "mutation", {"mutation": value}


_EQUIPMENT_TERMS = (_enchantment, _count, _depth, _any_runic, _kind, _runic, _vault, _magic)
_ITEM_TERMS = (_enchantment, _count, _depth, _any_runic, _vault, _magic)
_CONSUMABLE_TERMS = (_count, _depth, _kind, _vault, _magic)
_CHARGED_TERMS = (_positive_enchantment, _count, _depth, _kind, _vault, _magic)

TERMS: Dict[Category, Tuple[TermParser, ...]] = {
    Category.ALLY: (_count, _depth, _legendary, _status, _any_mutation, _kind, _mutation),
    Category.ALTAR: (_count, _depth, _kind),
    Category.ARMOR: _EQUIPMENT_TERMS,
    Category.CHARM: (_positive_enchantment, _count, _depth, _kind, _vault),
    Category.EQUIPMENT: _ITEM_TERMS,
    Category.FOOD: (_count, _depth, _kind),
    Category.GOLD: (_count, _depth),
    Category.ITEM: _ITEM_TERMS,
    Category.POTION: _CONSUMABLE_TERMS,
    Category.RING: (_enchantment, _count, _depth, _kind, _vault, _magic),
    Category.SCROLL: _CONSUMABLE_TERMS,
    Category.STAFF: _CHARGED_TERMS,
    Category.WAND: _CHARGED_TERMS,
    Category.WEAPON: _EQUIPMENT_TERMS,
}


def parse_term(category: Category, value: str) -> Term:
    """Classify one term; the first parser in the category's table wins."""
    for parser in TERMS[category]:
        term = parser(category, value)
        if term is not None:
            return term
    raise SearchTermError(f"'{value}' is not a valid {category} search term!")


def parse_terms(category: Category, values: Iterable[str]) -> List[ObjectParameter]:
    """Group the terms of one category option into object parameters.

    A term that would overwrite something already collected closes the
    current parameter and starts a new one, so `2 scale chain` yields
    `{count 2, kind scale}` and `{kind chain}`.
    """
    if category not in TERMS:
        raise SearchTermError(f"'{category}' objects cannot be searched for")

    params: List[ObjectParameter] = []
    prep = PrepParams()
    for value in values:
        slot, updates = parse_term(category, value)
        if prep.is_set(slot):
            add_parameter(category, prep, params)
            prep = PrepParams()
        prep.update(updates)
    add_parameter(category, prep, params)
    return params


def parse_object_args(args: argparse.Namespace) -> List[ObjectParameter]:
    params: List[ObjectParameter] = []
    for option, category in PARAM_ORDER:
        values = getattr(args, option, None)
        if values:
            params.extend(parse_terms(category, values))
    return params


__all__ = [
    "PARAM_ORDER",
    "TERMS",
    "PrepParams",
    "SearchTermError",
    "add_parameter",
    "parse_object_args",
    "parse_term",
    "parse_terms",
]
