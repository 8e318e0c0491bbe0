from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from ..data.files import FileFormat, get_catalog_paths
from ..objects import Category, MagicType

DEPTH_LIMIT = 26
# Per-object depth when none is given; deeper than any catalog goes.
OBJECT_DEPTH_DEFAULT = 40
SEED_LIMIT = 4294967295
MATCHES_LIMIT = 255


class CountType(Enum):
    """How an object's matched count compares with its target."""

    AT_LEAST = ">="
    LESS_THAN = "<"
    EQUAL_TO = "="


class MatchResponse(Enum):
    """What a matching record does to the running search."""

    INCREMENT = "increment"
    DO_NOTHING = "do_nothing"
    # LESS_THAN / EQUAL_TO target exceeded: the seed can no longer qualify
    EARLY_EXIT = "early_exit"


class SearchStatus(Enum):
    IN_PROGRESS = "in_progress"
    ALL_OBJECTS_FOUND = "all_objects_found"
    EARLY_SEED_EXIT = "early_seed_exit"
    END_OF_FILE = "end_of_file"
    END_OF_SEARCH = "end_of_search"


@dataclass
class ObjectParameter:
    """Search criteria for one object category, checked against every record."""

    category: Category
    count_target: int = 1
    count_type: CountType = CountType.AT_LEAST
    kind: Optional[str] = None
    depth: int = OBJECT_DEPTH_DEFAULT
    enchantment: Optional[int] = None
    runic: Optional[str] = None
    any_runic: bool = False
    ally_status: Optional[str] = None
    any_legendary: bool = False
    mutation: Optional[str] = None
    any_mutation: bool = False
    in_vault: Optional[bool] = None
    magic_type: Optional[MagicType] = None
    # running total for the current seed
    count: int = field(default=0, compare=False)

    def clear(self) -> None:
        self.count = 0

    def is_valid(self) -> bool:
        if self.count_type is CountType.LESS_THAN:
            return self.count < self.count_target
        if self.count_type is CountType.EQUAL_TO:
            return self.count == self.count_target
        return self.count >= self.count_target

    def respond(self) -> MatchResponse:
        """Response to a match that has just been added to `count`."""
        if self.count_type is CountType.AT_LEAST:
            if self.count > self.count_target:
                return MatchResponse.DO_NOTHING
            return MatchResponse.INCREMENT
        if self.count_type is CountType.LESS_THAN:
            if self.count < self.count_target:
                return MatchResponse.INCREMENT
            return MatchResponse.EARLY_EXIT
        if self.count > self.count_target:
            return MatchResponse.EARLY_EXIT
        return MatchResponse.INCREMENT

    def __str__(self) -> str:
        lines = [f"  category: {self.category}"]
        if self.count_type is CountType.LESS_THAN:
            lines.append(f"     count: less than {self.count_target}")
        elif self.count_type is CountType.EQUAL_TO:
            lines.append(f"     count: exactly {self.count_target}")
        else:
            lines.append(f"     count: {self.count_target} or more")
        if self.depth not in (DEPTH_LIMIT, OBJECT_DEPTH_DEFAULT):
            lines.append(f"     depth: {self.depth} or less")
        if self.kind is not None:
            lines.append(f"      kind: {self.kind}")
        if self.enchantment is not None:
            if self.enchantment >= 0:
                lines.append(f"      ench: +{self.enchantment} or more")
            else:
                lines.append(f"      ench: {self.enchantment} or less")
        if self.runic is not None:
            lines.append(f"     runic: {self.runic}")
        if self.any_runic:
            lines.append("     runic: any")
        if self.ally_status is not None:
            lines.append(f"    status: {self.ally_status}")
        if self.any_legendary:
            lines.append("    status: legendary")
        if self.mutation is not None:
            lines.append(f"  mutation: {self.mutation}")
        if self.any_mutation:
            lines.append("  mutation: any")
        if self.in_vault is not None:
            lines.append(f"     vault: {'yes' if self.in_vault else 'no'}")
        if self.magic_type is not None:
            lines.append(f"     magic: {self.magic_type}")
        return "\n".join(lines) + "\n"


@dataclass
class SearchParameters:
    """Everything a seed search needs: general bounds plus per-object criteria."""

    object_params: List[ObjectParameter]
    file_paths: List[Path] = field(default_factory=list)
    format: FileFormat = FileFormat.UTF16
    depth_min: int = 1
    depth_max: int = DEPTH_LIMIT
    seed_min: int = 1
    seed_max: int = SEED_LIMIT
    matches_max: int = 10
    verbosity: int = 3
    debug: bool = False
    # seeds that satisfied every parameter so far
    search_matches: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not 1 <= self.depth_min <= DEPTH_LIMIT:
            raise ValueError(f"--mindepth must be from 1 to {DEPTH_LIMIT}")
        if not 1 <= self.depth_max <= DEPTH_LIMIT:
            raise ValueError(f"--maxdepth must be from 1 to {DEPTH_LIMIT}")
        if self.depth_min > self.depth_max:
            raise ValueError("--mindepth cannot be greater than --maxdepth")
        if not 1 <= self.matches_max <= MATCHES_LIMIT:
            raise ValueError(f"--matches must be from 1 to {MATCHES_LIMIT}")
        if not 1 <= self.seed_min <= SEED_LIMIT:
            raise ValueError(f"--minseed must be from 1 to {SEED_LIMIT}")
        if not 1 <= self.seed_max <= SEED_LIMIT:
            raise ValueError(f"--maxseed must be from 1 to {SEED_LIMIT}")
        if self.seed_min > self.seed_max:
            raise ValueError("--minseed cannot be greater than --maxseed")
        if not self.object_params:
            raise ValueError("No object search terms given (e.g. '--armor scale')")
        params = self.object_params
        if any(params[i] in params[i + 1:] for i in range(len(params))):
            raise ValueError("Duplicate parameters detected (e.g. '-a scale scale')")

    @classmethod
    def from_args(
        cls,
        args: argparse.Namespace,
        settings: Dict[str, Any],
    ) -> "SearchParameters":
        """Build search parameters from parsed command-line options.

        Options left unset on the command line fall back to `settings`
        (the config file's search block merged over built-in defaults).
        """
        from .parse import parse_object_args

        def pick(name: str, key: str) -> Any:
            value = getattr(args, name, None)
            return settings[key] if value is None else value

        object_params = parse_object_args(args)

        if getattr(args, "utf8", False):
            requested = FileFormat.UTF8
        elif getattr(args, "utf16", False):
            requested = FileFormat.UTF16
        else:
            requested = FileFormat.parse(str(settings["format"]))

        folder = getattr(args, "filepath", None) or settings.get("catalogs", ".")
        file_paths, fmt = get_catalog_paths(folder, int(settings["nesting_max"]), requested)

        if getattr(args, "random", False):
            np.random.default_rng().shuffle(file_paths)

        verbose = getattr(args, "verbose", 0) or 0
        verbosity = verbose if verbose in (1, 2) else 3

        return cls(
            object_params=object_params,
            file_paths=file_paths,
            format=fmt,
            depth_min=int(pick("depth_min", "depth_min")),
            depth_max=int(pick("depth_max", "depth_max")),
            seed_min=int(pick("seed_min", "seed_min")),
            seed_max=int(pick("seed_max", "seed_max")),
            matches_max=int(pick("matches_max", "matches_max")),
            verbosity=verbosity,
            debug=bool(getattr(args, "debug", False)),
        )

    def clear(self) -> None:
        for param in self.object_params:
            param.clear()

    def is_complete(self) -> bool:
        return self.search_matches >= self.matches_max

    def is_valid(self) -> bool:
        return all(p.is_valid() for p in self.object_params)

    def search_status(self, response: MatchResponse) -> SearchStatus:
        if response is MatchResponse.EARLY_EXIT:
            return SearchStatus.EARLY_SEED_EXIT
        if response is MatchResponse.INCREMENT and self.is_valid():
            return SearchStatus.ALL_OBJECTS_FOUND
        return SearchStatus.IN_PROGRESS

    def __str__(self) -> str:
        lines = [
            "Search:",
            f" verbosity: {self.verbosity}",
            f"    format: {self.format.label}",
            f"     depth: {self.depth_min} to {self.depth_max}",
            f"      seed: {self.seed_min} to {self.seed_max}",
            f"   matches: {self.matches_max}",
            "Objects:",
        ]
        text = "\n".join(lines) + "\n"
        return text + "".join(str(p) for p in self.object_params)


__all__ = [
    "CountType",
    "MatchResponse",
    "ObjectParameter",
    "SearchParameters",
    "SearchStatus",
    "DEPTH_LIMIT",
    "OBJECT_DEPTH_DEFAULT",
    "SEED_LIMIT",
]
