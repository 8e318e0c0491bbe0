import codecs
import os
import sys
from pathlib import Path
from typing import List

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("MPLBACKEND", "Agg")

from brogue_scanner.config import SEARCH_DEFAULTS
from brogue_scanner.data.catalog import CATALOG_COLUMNS

HEADER = ",".join(CATALOG_COLUMNS)

# dungeon_version,seed,depth,quantity,category,kind,enchantment,runic,
# vault_number,opens_vault_number,carried_by_monster_name,ally_status_name,mutation_name
SEED_ROWS = {
    1: [
        "CE 1.12,1,1,1,food,ration of food,,,,,,,",
        "CE 1.12,1,1,3,potion,detect magic,,,,,,,",
        "CE 1.12,1,2,1,armor,scale mail,2,mutuality,,,,,",
        "CE 1.12,1,2,1,weapon,sword,3,paralysis,1,,,,",
        "CE 1.12,1,2,1,key,door key,,,,1,,,",
        "CE 1.12,1,3,55,gold,gold pieces,,,,,,,",
        "CE 1.12,1,3,1,scroll,enchanting,,,,,,,",
        "CE 1.12,1,4,1,ally,goblin mystic,,,,,,shackled,",
    ],
    2: [
        "CE 1.12,2,1,2,scroll,enchanting,,,,,,,",
        "CE 1.12,2,1,1,armor,chain mail,-1,burden,,,,,",
        "CE 1.12,2,2,2,potion,descent,,,,,,,",
        "CE 1.12,2,3,1,ring,clairvoyance,2,,2,,,,",
        "CE 1.12,2,3,1,staff,firebolt,2,,2,,,,",
        "CE 1.12,2,5,1,ally,ogre,,,,,,allied,juggernaut",
        "CE 1.12,2,5,120,gold,gold pieces (3 piles),,,,,,,",
    ],
    3: [
        "CE 1.12,3,1,1,weapon,dagger,1,,,,goblin conjurer,,",
        "CE 1.12,3,2,1,armor,scale mail,0,,,,,,",
        "CE 1.12,3,2,1,wand,plenty,2,,,,,,",
        "CE 1.12,3,4,1,charm,health,3,,3,,,,",
        "CE 1.12,3,6,1,altar,commutation altar,,,,,,,",
        "CE 1.12,3,7,1,armor,scale mail,3,reflection,,,,,",
    ],
    4: [
        "CE 1.12,4,1,1,potion,incineration,,,,,,,",
        "CE 1.12,4,2,1,scroll,aggravate monsters,,,,,,,",
        "CE 1.12,4,3,1,ally,monkey,,,,,,caged,explosive",
        "CE 1.12,4,3,1,food,mango,,,,,,,",
    ],
}


def catalog_text(seeds=None) -> str:
    seeds = sorted(SEED_ROWS) if seeds is None else seeds
    lines: List[str] = [HEADER]
    for seed in seeds:
        lines.extend(SEED_ROWS[seed])
    return "\n".join(lines) + "\n"


def write_utf8(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


def write_utf16(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(codecs.BOM_UTF16_LE + text.encode("utf-16-le"))
    return path


@pytest.fixture
def settings():
    return dict(SEARCH_DEFAULTS)


@pytest.fixture
def utf8_catalog(tmp_path) -> Path:
    return write_utf8(tmp_path / "utf8" / "catalog_1_4.csv", catalog_text())


@pytest.fixture
def utf16_catalog(tmp_path) -> Path:
    return write_utf16(tmp_path / "utf16" / "catalog_1_4.csv", catalog_text())


@pytest.fixture
def split_catalogs(tmp_path) -> Path:
    """Seeds 1-2 and 3-4 in two UTF-16 files of one folder."""
    folder = tmp_path / "split"
    write_utf16(folder / "a_seeds_1_2.csv", catalog_text([1, 2]))
    write_utf16(folder / "b_seeds_3_4.csv", catalog_text([3, 4]))
    return folder
