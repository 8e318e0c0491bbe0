from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, NamedTuple, Optional

from ..data.catalog import CatalogFormatError, CatalogRecord, iter_records
from ..objects import CatalogObject, Category, MagicType, is_malevolent
from ..objects.kinds import LEGENDARY_STATUS
from .params import MatchResponse, ObjectParameter, SearchParameters, SearchStatus

# Categories whose magic polarity follows the sign of the enchantment.
ENCHANTED_MAGIC = Category.ARMOR | Category.CHARM | Category.RING | Category.WEAPON
# Categories whose magic polarity is fixed by their kind.
KIND_MAGIC = Category.POTION | Category.SCROLL | Category.STAFF | Category.WAND


@dataclass
class SearchMatch:
    """A catalog object credited to one of the search's object parameters."""

    seed: int
    depth: int
    object: CatalogObject
    vault: Optional[int] = None
    carried_by: Optional[str] = None
    response: MatchResponse = MatchResponse.INCREMENT

    @classmethod
    def from_record(cls, record: CatalogRecord, response: MatchResponse) -> "SearchMatch":
        return cls(
            seed=record.seed,
            depth=record.depth,
            object=CatalogObject.from_record(record),
            vault=record.vault,
            carried_by=record.carried_by,
            response=response,
        )

    def __str__(self) -> str:
        if self.carried_by:
            return f"{self.object} ({self.carried_by})"
        if self.vault is not None:
            return f"{self.object} (vault {self.vault})"
        return str(self.object)


class SeedResult(NamedTuple):
    seed: int
    matches: List[SearchMatch]


def search_files(params: SearchParameters) -> List[SeedResult]:
    """Search every catalog in `params.file_paths`, in order.

    Stops early once `params.matches_max` seeds have qualified. Files that are
    not valid catalogs are reported and skipped.
    """
    print(params)

    if not params.file_paths:
        raise FileNotFoundError("No files found!")

    results: List[SeedResult] = []
    for path in params.file_paths:
        if params.debug:
            print(f"searching file: {path}")
        try:
            status = search_file(path, params, results)
        except CatalogFormatError as exc:
            print(f"⚠ Skipping {path}: {exc}")
            continue
        if status is SearchStatus.END_OF_SEARCH:
            break

    return results


def search_file(
    path: str | Path,
    params: SearchParameters,
    results: List[SeedResult],
) -> SearchStatus:
    """Search one catalog, appending each qualifying seed to `results`."""
    params.clear()

    current: Optional[int] = None
    matches: List[SearchMatch] = []
    disqualified = False

    for record in iter_records(path, params.format):
        seed = record.seed
        # catalogs are written in ascending seed order
        if seed > params.seed_max:
            break
        if seed < params.seed_min:
            continue

        if seed != current:
            if current is not None:
                _close_seed(current, matches, disqualified, params, results)
                if params.is_complete():
                    return SearchStatus.END_OF_SEARCH
            current = seed
            matches = []
            disqualified = False
            params.clear()

        if disqualified or not params.depth_min <= record.depth <= params.depth_max:
            continue

        found = search_record(record, params)
        if found is None:
            continue
        matches.append(found)
        status = params.search_status(found.response)
        if status is SearchStatus.EARLY_SEED_EXIT:
            disqualified = True
        elif status is SearchStatus.ALL_OBJECTS_FOUND and params.debug:
            print(f"seed {seed}: all objects found by depth {record.depth}")

    if current is not None:
        _close_seed(current, matches, disqualified, params, results)

    return SearchStatus.END_OF_SEARCH if params.is_complete() else SearchStatus.END_OF_FILE


def _close_seed(
    seed: int,
    matches: List[SearchMatch],
    disqualified: bool,
    params: SearchParameters,
    results: List[SeedResult],
) -> None:
    if not disqualified and params.is_valid():
        results.append(SeedResult(seed, matches))
        params.search_matches += 1


def search_record(record: CatalogRecord, params: SearchParameters) -> Optional[SearchMatch]:
    """Credit `record` to the first object parameter it satisfies, if any."""
    category = Category.parse(record.category)
    if category is None:
        raise CatalogFormatError(f"Unknown object category '{record.category}'")

    for param in params.object_params:
        if not category.intersects(param.category) or record.depth > param.depth:
            continue
        if search_category(record, category, param):
            param.count += record.quantity
            return SearchMatch.from_record(record, param.respond())
    return None


def search_category(record: CatalogRecord, category: Category, param: ObjectParameter) -> bool:
    if param.kind is not None and param.kind not in record.kind:
        return False

    if param.enchantment is not None:
        enchantment = record.enchantment
        if enchantment is None:
            return False
        if param.enchantment >= 0 and enchantment < param.enchantment:
            return False
        if param.enchantment < 0 and enchantment > param.enchantment:
            return False

    if param.any_runic:
        if not record.runic:
            return False
    elif param.runic is not None and param.runic not in record.runic:
        return False

    if param.in_vault is not None and param.in_vault != record.in_vault:
        return False

    if param.magic_type is not None and not magic_check(category, param.magic_type, record):
        return False

    if param.any_legendary:
        if record.ally_status_name != LEGENDARY_STATUS:
            return False
    elif param.ally_status is not None and param.ally_status != record.ally_status_name:
        return False

    if param.any_mutation:
        if not record.mutation_name:
            return False
    elif param.mutation is not None and param.mutation not in record.mutation_name:
        return False

    return True


def magic_check(category: Category, magic_type: MagicType, record: CatalogRecord) -> bool:
    """True when the record's object is benevolent/malevolent as requested."""
    if category.intersects(ENCHANTED_MAGIC):
        enchantment = record.enchantment
        if enchantment is None:
            return True
        if magic_type is MagicType.BENEVOLENT:
            return enchantment > 0
        return enchantment < 0
    if category.intersects(KIND_MAGIC):
        return is_malevolent(category, record.kind) == (magic_type is MagicType.MALEVOLENT)
    # allies, altars, food, gold and keys carry no magic
    return False


def display_matches(results: List[SeedResult], params: SearchParameters) -> None:
    """Print search results.

    Verbosity 1 lists seeds, 2 adds the depth of each match and 3 adds the
    matching objects themselves.
    """
    if results:
        print("Matches:\n")

    for result in results:
        print(f"Seed {result.seed}")
        depth = 0
        for match in result.matches:
            if match.depth != depth and params.verbosity > 1:
                depth = match.depth
                print(f"    Depth {depth}")
            if params.verbosity > 2:
                print(f"        {match}")

    print(f"\n...{len(results)} matches found.\n")


__all__ = [
    "SearchMatch",
    "SeedResult",
    "display_matches",
    "magic_check",
    "search_category",
    "search_file",
    "search_files",
    "search_record",
]
