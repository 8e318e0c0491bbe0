"""
scan_catalog.py
~~~~~~~~~~~~~~~
Summarises a folder of seed catalogs into tables and figures:

* object quantities per category and per depth;
* runic, vault and ally frequencies;
* a per-seed summary with gold totals, plus enchantment and gold plots.

Artefacts land in `<outputs>/tables` and `<outputs>/figs`.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from brogue_scanner.config import DEFAULT_CONFIG_PATH, load_config_or_defaults, search_settings
from brogue_scanner.data import FileFormat, get_catalog_paths, scan_catalog


def main():
    ap = argparse.ArgumentParser(
        description="Scan seed catalogs and write summary tables/figures."
    )
    ap.add_argument(
        "--config",
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH}, if present)",
    )
    ap.add_argument("-F", "--filepath", help="folder holding the catalog files")
    ap.add_argument("-o", "--out", help="output folder (default: paths.outputs)")
    ap.add_argument("-U", "--utf8", action="store_true", help="catalogs are UTF-8")
    args = ap.parse_args()

    cfg = load_config_or_defaults(args.config)
    settings = search_settings(cfg)
    folder = args.filepath or settings["catalogs"]
    fmt = FileFormat.UTF8 if args.utf8 else FileFormat.parse(str(settings["format"]))
    paths, fmt = get_catalog_paths(folder, int(settings["nesting_max"]), fmt)
    if not paths:
        print(f"No catalog files found in {folder}")
        sys.exit(1)

    out_dir = args.out or (cfg.get("paths") or {}).get("outputs", "outputs")
    print(f"Scanning {len(paths)} {fmt.label} catalog(s)")
    scan_catalog(paths, fmt, Path(out_dir))


if __name__ == "__main__":
    main()
