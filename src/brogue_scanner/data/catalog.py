from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence

import pandas as pd

from .files import FileFormat

CATALOG_COLUMNS: List[str] = [
    "dungeon_version",
    "seed",
    "depth",
    "quantity",
    "category",
    "kind",
    "enchantment",
    "runic",
    "vault_number",
    "opens_vault_number",
    "carried_by_monster_name",
    "ally_status_name",
    "mutation_name",
]

NUMERIC_COLUMNS: List[str] = [
    "seed",
    "depth",
    "quantity",
    "enchantment",
    "vault_number",
    "opens_vault_number",
]

CHUNK_SIZE = 50_000


class CatalogFormatError(ValueError):
    """Raised when a file is not a usable Brogue seed catalog."""


def _optional_int(value: str) -> Optional[int]:
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class CatalogRecord(NamedTuple):
    """One catalog line. Every field is kept as the raw text of the cell."""

    dungeon_version: str
    seed_text: str
    depth_text: str
    quantity_text: str
    category: str
    kind: str
    enchantment_text: str
    runic: str
    vault_text: str
    opens_vault_text: str
    carried_by_monster_name: str
    ally_status_name: str
    mutation_name: str

    @property
    def seed(self) -> int:
        return int(self.seed_text)

    @property
    def depth(self) -> int:
        return int(self.depth_text)

    @property
    def quantity(self) -> int:
        return int(self.quantity_text)

    @property
    def enchantment(self) -> Optional[int]:
        return _optional_int(self.enchantment_text)

    @property
    def vault(self) -> Optional[int]:
        return _optional_int(self.vault_text)

    @property
    def opens_vault(self) -> Optional[int]:
        return _optional_int(self.opens_vault_text)

    @property
    def in_vault(self) -> bool:
        return bool(self.vault_text.strip())

    @property
    def carried_by(self) -> Optional[str]:
        return self.carried_by_monster_name or None


def validate_header(columns: Sequence[str], source: str | os.PathLike = "<catalog>") -> None:
    names = [str(c).strip() for c in columns]
    if len(names) != len(CATALOG_COLUMNS) or names[:3] != CATALOG_COLUMNS[:3]:
        raise CatalogFormatError(f"Invalid Brogue csv header in {source}")


def read_header(path: str | os.PathLike, fmt: FileFormat) -> List[str]:
    try:
        head = pd.read_csv(path, encoding=fmt.encoding, nrows=0)
    except pd.errors.EmptyDataError as exc:
        raise CatalogFormatError(f"Empty catalog file {path}") from exc
    except UnicodeError as exc:
        raise CatalogFormatError(f"Could not decode {path} as {fmt.label}") from exc
    validate_header(head.columns, path)
    return [str(c).strip() for c in head.columns]


def iter_records(
    path: str | os.PathLike,
    fmt: FileFormat,
    chunksize: int = CHUNK_SIZE,
) -> Iterator[CatalogRecord]:
    """Stream records from a catalog without loading it whole.

    The header is validated first. Seed, depth and quantity are checked per
    line so a malformed row fails with its line number rather than deep
    inside the search.
    """
    read_header(path, fmt)
    line = 1
    try:
        with pd.read_csv(
            path,
            encoding=fmt.encoding,
            dtype=str,
            keep_default_na=False,
            chunksize=chunksize,
        ) as reader:
            for chunk in reader:
                for row in chunk.itertuples(index=False, name=None):
                    line += 1
                    record = CatalogRecord._make(str(v) for v in row)
                    for text in (record.seed_text, record.depth_text, record.quantity_text):
                        if not text.strip().isdigit():
                            raise CatalogFormatError(
                                f"{path}, line {line}: expected an unsigned integer, got '{text}'"
                            )
                    yield record
    except pd.errors.ParserError as exc:
        raise CatalogFormatError(f"{path}: {exc}") from exc


def read_catalog_frame(paths: Iterable[str | os.PathLike], fmt: FileFormat) -> pd.DataFrame:
    frames = []
    for path in paths:
        read_header(path, fmt)
        try:
            df = pd.read_csv(path, encoding=fmt.encoding, dtype=str, keep_default_na=False)
        except pd.errors.ParserError as exc:
            raise CatalogFormatError(f"{path}: {exc}") from exc
        # columns are positional; only the leading names are checked
        df.columns = list(CATALOG_COLUMNS)
        df["source_file"] = Path(path).name
        frames.append(df)
    if not frames:
        raise FileNotFoundError("No catalog files to read")
    df = pd.concat(frames, ignore_index=True)
    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


__all__ = [
    "CATALOG_COLUMNS",
    "CatalogFormatError",
    "CatalogRecord",
    "iter_records",
    "read_catalog_frame",
    "read_header",
    "validate_header",
]
