"""Brogue object categories, kind tables and catalog objects."""

from .category import CATEGORY_NAMES, Category, MagicType
from .kinds import find_exact, find_partial, is_malevolent
from .models import CatalogObject, gold_piles

__all__ = [
    "CATEGORY_NAMES",
    "Category",
    "MagicType",
    "CatalogObject",
    "find_exact",
    "find_partial",
    "gold_piles",
    "is_malevolent",
]
