from __future__ import annotations

import codecs
import os
from enum import Enum
from pathlib import Path
from typing import List, Tuple

CSV_EXTENSIONS = (".csv",)

# UTF-32LE starts with the UTF-16LE mark, so it is checked first.
_FOREIGN_BOMS = (
    codecs.BOM_UTF32_LE,
    codecs.BOM_UTF32_BE,
    codecs.BOM_UTF16_LE,
    codecs.BOM_UTF16_BE,
)


class FileFormat(Enum):
    """Text encodings a seed catalog can be stored in.

    `brogue-cmd` writes UTF-16LE (with a byte order mark); catalogs that were
    re-encoded to save space are UTF-8.
    """

    UTF8 = "utf8"
    UTF16 = "utf16"

    @classmethod
    def parse(cls, value: str) -> "FileFormat":
        key = value.strip().lower().replace("-", "").replace("_", "")
        if key.endswith("le"):
            key = key[:-2]
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise ValueError(f"Unknown catalog format '{value}' (expected utf8 or utf16)")

    def toggled(self) -> "FileFormat":
        return FileFormat.UTF16 if self is FileFormat.UTF8 else FileFormat.UTF8

    @property
    def encoding(self) -> str:
        return "utf-16" if self is FileFormat.UTF16 else "utf-8-sig"

    @property
    def label(self) -> str:
        return "UTF-16LE" if self is FileFormat.UTF16 else "UTF-8"


def is_valid_csv_format(path: str | os.PathLike, fmt: FileFormat) -> bool:
    """Perfunctory check of a file's byte order mark against `fmt`.

    Headers are validated later, when the file is actually read.
    """
    try:
        with open(path, "rb") as f:
            head = f.read(4)
    except OSError:
        return False

    if fmt is FileFormat.UTF16:
        return head.startswith(codecs.BOM_UTF16_LE) and not head.startswith(codecs.BOM_UTF32_LE)
    return not any(head.startswith(bom) for bom in _FOREIGN_BOMS)


def get_csv_paths(path: str | os.PathLike, nesting_max: int, fmt: FileFormat) -> List[Path]:
    root = Path(path)
    if not root.is_dir():
        raise FileNotFoundError(f"couldn't find files in path {str(root)!r}")
    return sorted(_collect(root, 0, nesting_max, fmt))


def _collect(folder: Path, level: int, nesting_max: int, fmt: FileFormat) -> List[Path]:
    found: List[Path] = []
    try:
        entries = sorted(folder.iterdir())
    except OSError as exc:
        raise FileNotFoundError(f"couldn't find files in path {str(folder)!r}") from exc

    for entry in entries:
        if entry.is_dir():
            if level < nesting_max:
                found.extend(_collect(entry, level + 1, nesting_max, fmt))
        elif entry.suffix.lower() in CSV_EXTENSIONS and is_valid_csv_format(entry, fmt):
            found.append(entry)
    return found


def get_catalog_paths(
    path: str | os.PathLike,
    nesting_max: int,
    fmt: FileFormat,
) -> Tuple[List[Path], FileFormat]:
    """Find catalog files of format `fmt`, falling back to the other format.

    Returns the paths together with the format that was actually used.
    """
    paths = get_csv_paths(path, nesting_max, fmt)
    if paths:
        return paths, fmt
    other = fmt.toggled()
    return get_csv_paths(path, nesting_max, other), other


__all__ = [
    "FileFormat",
    "get_catalog_paths",
    "get_csv_paths",
    "is_valid_csv_format",
]
