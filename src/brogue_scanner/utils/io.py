from __future__ import annotations

from pathlib import Path
from typing import Tuple


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def report_dirs(out_dir: str | Path) -> Tuple[Path, Path]:
    """`tables/` and `figs/` under `out_dir`, created if missing."""
    out_tabs = Path(out_dir) / "tables"
    out_figs = Path(out_dir) / "figs"
    ensure_dirs(out_tabs, out_figs)
    return out_tabs, out_figs


__all__ = ["ensure_dirs", "report_dirs"]
