from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from ..utils.io import report_dirs
from .catalog import read_catalog_frame
from .files import FileFormat

ENCHANTED_CATEGORIES = ["armor", "charm", "ring", "staff", "wand", "weapon"]
RUNIC_CATEGORIES = ["armor", "weapon"]


def _savefig(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(path, bbox_inches="tight")
    plt.close()


def seed_summary(df: pd.DataFrame) -> pd.DataFrame:
    """One row per seed: object lines, gold, vault objects and allies."""
    gold = df["quantity"].where(df["category"] == "gold", 0)
    summary = pd.DataFrame(
        {
            "seed": df["seed"],
            "objects": 1,
            "gold": gold,
            "vault_objects": df["vault_number"].notna().astype(int),
            "allies": (df["category"] == "ally").astype(int),
        }
    )
    return summary.groupby("seed", as_index=False).sum()


def scan_catalog(
    paths: Iterable[str | os.PathLike],
    fmt: FileFormat,
    out_dir: str | os.PathLike,
) -> Dict[str, Path]:
    """Summarise catalogs into CSV tables and PNG figures under `out_dir`."""
    df = read_catalog_frame(paths, fmt)
    df["category"] = df["category"].str.strip().str.lower()

    out_tabs, out_figs = report_dirs(out_dir)
    artefacts: Dict[str, Path] = {}

    print("Shape:", df.shape)
    with open(out_tabs / "info.txt", "w") as f:
        df.info(buf=f)
    artefacts["info"] = out_tabs / "info.txt"

    df.head(10).to_csv(out_tabs / "preview.csv", index=False)
    artefacts["preview"] = out_tabs / "preview.csv"

    counts = df.groupby("category")["quantity"].sum().sort_values(ascending=False)
    counts.to_csv(out_tabs / "category_counts.csv")
    artefacts["category_counts"] = out_tabs / "category_counts.csv"

    by_depth = df.pivot_table(
        index="depth", columns="category", values="quantity", aggfunc="sum", fill_value=0
    )
    by_depth.to_csv(out_tabs / "category_by_depth.csv")
    artefacts["category_by_depth"] = out_tabs / "category_by_depth.csv"

    runics = df[df["category"].isin(RUNIC_CATEGORIES) & (df["runic"] != "")]
    runic_counts = runics.groupby(["category", "runic"]).size().rename("count")
    runic_counts.sort_values(ascending=False).to_csv(out_tabs / "runic_counts.csv")
    artefacts["runic_counts"] = out_tabs / "runic_counts.csv"

    vault = df[df["vault_number"].notna()]
    vault.groupby("category")["quantity"].sum().rename("vault_objects").to_csv(
        out_tabs / "vault_items.csv"
    )
    artefacts["vault_items"] = out_tabs / "vault_items.csv"

    allies = df[df["category"] == "ally"]
    allies.groupby(["ally_status_name", "kind"]).size().rename("count").to_csv(
        out_tabs / "ally_counts.csv"
    )
    artefacts["ally_counts"] = out_tabs / "ally_counts.csv"

    per_seed = seed_summary(df)
    per_seed.to_csv(out_tabs / "seed_summary.csv", index=False)
    artefacts["seed_summary"] = out_tabs / "seed_summary.csv"

    if not by_depth.empty:
        plt.figure(figsize=(10, 8))
        sns.heatmap(by_depth, cmap="viridis")
        plt.title("Object quantity by depth")
        _savefig(out_figs / "category_by_depth.png")
        artefacts["category_by_depth_fig"] = out_figs / "category_by_depth.png"

    ench = df.loc[df["category"].isin(ENCHANTED_CATEGORIES), "enchantment"].dropna()
    if not ench.empty:
        # one bin per enchantment level
        bins = np.arange(ench.min(), ench.max() + 2) - 0.5
        plt.figure()
        sns.histplot(ench, bins=bins)
        plt.title("Enchantment distribution")
        _savefig(out_figs / "enchantment_hist.png")
        artefacts["enchantment_hist"] = out_figs / "enchantment_hist.png"
    else:
        print("No enchanted objects found; skipping enchantment histogram.")

    plt.figure()
    sns.histplot(per_seed["gold"], bins=30)
    plt.title("Gold per seed")
    _savefig(out_figs / "gold_per_seed.png")
    artefacts["gold_per_seed"] = out_figs / "gold_per_seed.png"

    print(f"✓ Scan complete.\nTables → {out_tabs}\nFigs → {out_figs}")
    return artefacts


__all__ = ["scan_catalog", "seed_summary"]
