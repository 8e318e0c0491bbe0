from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from ..utils.io import ensure_dirs
from .catalog import CHUNK_SIZE, CatalogFormatError, read_header
from .files import FileFormat


def convert_catalog(
    path: str | os.PathLike,
    out_path: str | os.PathLike,
    chunksize: int = CHUNK_SIZE,
) -> Path:
    """Re-encode one UTF-16LE catalog as UTF-8 (no byte order mark).

    Cells are copied as text, so blank cells stay blank and numbers keep
    their original spelling.
    """
    columns = read_header(path, FileFormat.UTF16)
    out_path = Path(out_path)
    ensure_dirs(out_path.parent)

    wrote = False
    try:
        with pd.read_csv(
            path,
            encoding=FileFormat.UTF16.encoding,
            dtype=str,
            keep_default_na=False,
            chunksize=chunksize,
        ) as reader:
            for i, chunk in enumerate(reader):
                wrote = True
                chunk.to_csv(
                    out_path,
                    mode="w" if i == 0 else "a",
                    header=i == 0,
                    index=False,
                    encoding="utf-8",
                    lineterminator="\n",
                )
    except pd.errors.ParserError as exc:
        out_path.unlink(missing_ok=True)
        raise CatalogFormatError(f"{path}: {exc}") from exc
    if not wrote:
        # header-only catalog
        pd.DataFrame(columns=columns).to_csv(out_path, index=False, encoding="utf-8", lineterminator="\n")
    return out_path


def convert_catalogs(paths: Iterable[str | os.PathLike], out_dir: str | os.PathLike) -> List[Path]:
    out_dir = Path(out_dir)
    written: List[Path] = []
    for path in paths:
        target = out_dir / Path(path).name
        try:
            convert_catalog(path, target)
        except CatalogFormatError as exc:
            print(f"⚠ Skipping {path}: {exc}")
            continue
        print(f"{path} → {target}")
        written.append(target)
    print(f"✓ Converted {len(written)} catalog(s) → {out_dir}")
    return written


__all__ = ["convert_catalog", "convert_catalogs"]
