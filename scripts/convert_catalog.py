"""
convert_catalog.py
~~~~~~~~~~~~~~~~~~
Re-encodes the UTF-16LE catalogs written by `brogue-cmd` as UTF-8, which
halves their size. Searches then run with `--utf8`.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from brogue_scanner.config import DEFAULT_CONFIG_PATH, load_config_or_defaults, search_settings
from brogue_scanner.data import FileFormat, convert_catalogs, get_csv_paths


def main():
    ap = argparse.ArgumentParser(description="Convert UTF-16LE seed catalogs to UTF-8.")
    ap.add_argument(
        "--config",
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH}, if present)",
    )
    ap.add_argument("-F", "--filepath", help="folder holding the UTF-16LE catalogs")
    ap.add_argument("-o", "--out", help="output folder (default: paths.converted)")
    args = ap.parse_args()

    cfg = load_config_or_defaults(args.config)
    settings = search_settings(cfg)
    folder = args.filepath or settings["catalogs"]
    paths = get_csv_paths(folder, int(settings["nesting_max"]), FileFormat.UTF16)
    if not paths:
        print(f"No UTF-16LE catalog files found in {folder}")
        sys.exit(1)

    out_dir = args.out or (cfg.get("paths") or {}).get("converted", "data/utf8")
    convert_catalogs(paths, Path(out_dir))


if __name__ == "__main__":
    main()
