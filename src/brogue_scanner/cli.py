"""Command-line entry point for the seed search (`brogue-scanner`)."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG_PATH, load_config_or_defaults, search_settings
from .search import SearchParameters, display_matches, search_files

EXAMPLES = """\
examples:
  brogue-scanner -w +3 paralysis -S 5 enchanting --depth 6
  brogue-scanner -a runic vault -F catalogs/ --utf8
  brogue-scanner -A legendary mutation -p '<1' descent -v
"""

# (flags, namespace attribute, help)
CATEGORY_OPTIONS = (
    (("-A", "--ally"), "ally", "allies: COUNT DEPTH KIND STATUS legendary MUTATION mutation"),
    (("--altar",), "altar", "altars: COUNT DEPTH KIND"),
    (("-a", "--armor"), "armor", "armor: ±ENCH COUNT DEPTH KIND RUNIC runic vault|novault good|bad"),
    (("-c", "--charm"), "charm", "charms: +ENCH COUNT DEPTH KIND vault|novault"),
    (("-e", "--equipment"), "equipment", "armor, rings and weapons: ±ENCH COUNT DEPTH runic vault|novault good|bad"),
    (("-f", "--food"), "food", "food: COUNT (required) DEPTH KIND"),
    (("-g", "--gold"), "gold", "gold pieces: COUNT (required) DEPTH"),
    (("-i", "--item"), "item", "any item: ±ENCH COUNT DEPTH runic vault|novault good|bad"),
    (("-p", "--potion"), "potion", "potions: COUNT DEPTH KIND vault|novault good|bad"),
    (("-r", "--ring"), "ring", "rings: ±ENCH COUNT DEPTH KIND vault|novault good|bad"),
    (("-S", "--scroll"), "scroll", "scrolls: COUNT DEPTH KIND vault|novault good|bad"),
    (("-s", "--staff"), "staff", "staves: +ENCH COUNT DEPTH KIND vault|novault good|bad"),
    (("-W", "--wand"), "wand", "wands: +ENCH COUNT DEPTH KIND vault|novault good|bad"),
    (("-w", "--weapon"), "weapon", "weapons: ±ENCH COUNT DEPTH KIND RUNIC runic vault|novault good|bad"),
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="brogue-scanner",
        description=(
            "Search Brogue CE seed catalogs (brogue-cmd --csv --print-seed-catalog) "
            "for seeds holding the objects you want."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "--config",
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH}, if present)",
    )

    general = ap.add_argument_group("search")
    general.add_argument("-D", "--debug", action="store_true", help="print each file as it is searched")
    general.add_argument("--mindepth", dest="depth_min", type=int, help="shallowest depth searched (1-26)")
    general.add_argument(
        "-d", "--depth", "--maxdepth", dest="depth_max", type=int, help="deepest depth searched (1-26)"
    )
    general.add_argument("-F", "--filepath", help="folder holding the catalog files")
    general.add_argument("-m", "--matches", dest="matches_max", type=int, help="stop after this many seeds (1-255)")
    general.add_argument("-R", "--random", action="store_true", help="search catalog files in random order")
    general.add_argument("--minseed", "--start", dest="seed_min", type=int, help="first seed searched")
    general.add_argument("--maxseed", "--stop", dest="seed_max", type=int, help="last seed searched")
    encoding = general.add_mutually_exclusive_group()
    encoding.add_argument("-U", "--utf8", action="store_true", help="catalogs are UTF-8")
    encoding.add_argument("--utf16", action="store_true", help="catalogs are UTF-16LE (brogue-cmd default)")
    general.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v seeds only, -vv seeds and depths (default: seeds, depths and objects)",
    )

    objects = ap.add_argument_group("objects")
    for flags, dest, text in CATEGORY_OPTIONS:
        objects.add_argument(*flags, dest=dest, action="extend", nargs="+", metavar="TERM", help=text)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        settings = search_settings(load_config_or_defaults(args.config))
        params = SearchParameters.from_args(args, settings)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        ap.error(str(exc))

    try:
        results = search_files(params)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    display_matches(results, params)
    return 0


__all__ = ["build_parser", "main"]
