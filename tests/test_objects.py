from __future__ import annotations

import pytest

from brogue_scanner.data.catalog import CatalogFormatError, CatalogRecord
from brogue_scanner.objects import CatalogObject, Category, MagicType, gold_piles, is_malevolent
from brogue_scanner.objects.kinds import KINDS_BY_CATEGORY, WEAPON_RUNICS, find_partial


def _record(line: str) -> CatalogRecord:
    return CatalogRecord._make(line.split(","))


def test_category_flags():
    assert Category.parse("Armor") is Category.ARMOR
    assert Category.parse("item") is None
    assert Category.ARMOR.intersects(Category.EQUIPMENT)
    assert Category.STAFF.intersects(Category.ITEM)
    assert not Category.STAFF.intersects(Category.EQUIPMENT)
    assert not Category.GOLD.intersects(Category.ITEM)
    assert str(Category.EQUIPMENT) == "equipment"
    assert str(MagicType.MALEVOLENT) == "malevolent"


@pytest.mark.parametrize(
    "category, kind, malevolent",
    [
        (Category.POTION, "descent", True),
        (Category.POTION, "life", False),
        (Category.SCROLL, "summon monsters", True),
        (Category.SCROLL, "enchanting", False),
        (Category.STAFF, "haste other", True),
        (Category.STAFF, "lightning", False),
        (Category.WAND, "plenty", True),
        (Category.WAND, "domination", False),
        (Category.ARMOR, "scale mail", False),
    ],
)
def test_malevolence(category, kind, malevolent):
    assert is_malevolent(category, kind) is malevolent


def test_slaying_runics_cover_monster_classes():
    assert find_partial(WEAPON_RUNICS, "dragon") == "dragon slaying"


@pytest.mark.parametrize(
    "line, text",
    [
        ("CE,1,2,1,armor,scale mail,2,mutuality,,,,,", "A +2 scale mail of mutuality"),
        ("CE,1,2,1,weapon,dagger,0,,,,,,", "A +0 dagger"),
        ("CE,1,2,1,weapon,war axe,-2,mercy,,,,,", "A -2 war axe of mercy"),
        ("CE,1,2,1,potion,descent,,,,,,,", "A potion of descent"),
        ("CE,1,2,1,scroll,enchanting,,,,,,,", "A scroll of enchanting"),
        ("CE,1,2,1,charm,health,3,,,,,,", "A +3 health charm"),
        ("CE,1,2,1,ring,clairvoyance,2,,,,,,", "A +2 ring of clairvoyance"),
        ("CE,1,2,1,ring,awareness,-1,,,,,,", "A -1 ring of awareness"),
        ("CE,1,2,1,staff,firebolt,2,,,,,,", "A staff of firebolt [2/2]"),
        ("CE,1,2,1,wand,plenty,1,,,,,,", "A wand of plenty [1]"),
        ("CE,1,2,1,ally,ogre,,,,,,allied,juggernaut", "A legendary ogre <juggernaut>"),
        ("CE,1,2,1,ally,goblin mystic,,,,,,shackled,", "A shackled goblin mystic"),
        ("CE,1,2,55,gold,gold pieces,,,,,,,", "55 gold pieces"),
        ("CE,1,2,120,gold,gold pieces (3 piles),,,,,,,", "120 gold pieces (3 piles)"),
        ("CE,1,2,1,altar,commutation altar,,,,,,,", "A commutation altar"),
        ("CE,1,2,1,key,door key,,,,1,,,", "A door key"),
    ],
)
def test_object_display(line, text):
    assert str(CatalogObject.from_record(_record(line))) == text


def test_object_fields_from_record():
    obj = CatalogObject.from_record(_record("CE,7,3,1,key,door key,,,,4,,,"))
    assert obj.opens_vault == 4
    assert obj.enchantment is None
    assert obj.runic is None


def test_unknown_category_is_rejected():
    with pytest.raises(CatalogFormatError, match="Unknown object category 'widget'"):
        CatalogObject.from_record(_record("CE,1,2,1,widget,thing,,,,,,,"))


def test_gold_piles():
    assert gold_piles("gold pieces") == 1
    assert gold_piles("gold pieces (12 piles)") == 12


def test_gold_kind_matches_pile_names():
    assert find_partial(KINDS_BY_CATEGORY[Category.GOLD], "gold") == "gold pieces"
