from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .category import Category

# ---------------------------------------------------------------------------
# Monsters
# ---------------------------------------------------------------------------

MONSTER_CLASSES: Tuple[str, ...] = (
    "airborne",
    "abomination",
    "animal",
    "dar",
    "dragon",
    "fireborne",
    "goblin",
    "infernal",
    "jelly",
    "mage",
    "ogre",
    "troll",
    "turret",
    "undead",
    "waterborne",
)

MONSTER_KINDS: Tuple[str, ...] = (
    "acid mound",
    "acidic jelly",
    "arrow turret",
    "black jelly",
    "bloat",
    "bog monster",
    "centaur",
    "centipede",
    "dar battlemage",
    "dar blademaster",
    "dar priestess",
    "dart turret",
    "dragon",
    "eel",
    "explosive bloat",
    "flame turret",
    "flamedancer",
    "fury",
    "goblin",
    "goblin conjurer",
    "goblin mystic",
    "goblin totem",
    "goblin warlord",
    "golem",
    "guardian spirit",
    "ifrit",
    "imp",
    "jackal",
    "kobold",
    "kraken",
    "lich",
    "mangrove dryad",
    "mirrored totem",
    "monkey",
    "naga",
    "ogre",
    "ogre shaman",
    "ogre totem",
    "phantom",
    "phoenix",
    "phoenix egg",
    "phylactery",
    "pink jelly",
    "pit bloat",
    "pixie",
    "rat",
    "revenant",
    "salamander",
    "sentinel",
    "spark turret",
    "spectral blade",
    "spider",
    "stone guardian",
    "tentacle horror",
    "toad",
    "troll",
    "underworm",
    "unicorn",
    "vampire",
    "vampire bat",
    "warden of yendor",
    "will-o-the-wisp",
    "winged guardian",
    "wraith",
    "zombie",
)

MUTATIONS: Tuple[str, ...] = (
    "agile",
    "explosive",
    "grappling",
    "infested",
    "juggernaut",
    "reflective",
    "toxic",
    "vampiric",
)

# "allied" is how the catalog marks a legendary ally.
ALLY_STATUSES: Tuple[str, ...] = ("allied", "caged", "shackled")
LEGENDARY_STATUS = "allied"

ALLY_STATUS_LABELS: Dict[str, str] = {
    "allied": "legendary",
    "caged": "caged",
    "shackled": "shackled",
}

# ---------------------------------------------------------------------------
# Weapons and armor
# ---------------------------------------------------------------------------

# Longer names first where one contains another ("war axe" / "axe").
WEAPON_KINDS: Tuple[str, ...] = (
    "broadsword",
    "dagger",
    "sword",
    "mace",
    "war hammer",
    "spear",
    "war pike",
    "war axe",
    "axe",
    "rapier",
    "whip",
    "flail",
    "incendiary dart",
    "dart",
    "javelin",
)

WEAPON_RUNICS: Tuple[str, ...] = (
    "confusion",
    "force",
    "multiplicity",
    "paralysis",
    "quietus",
    "slowing",
    "speed",
    "mercy",
    "plenty",
) + tuple(f"{mclass} slaying" for mclass in MONSTER_CLASSES)

ARMOR_KINDS: Tuple[str, ...] = (
    "banded mail",
    "chain mail",
    "leather armor",
    "plate armor",
    "scale mail",
    "splint mail",
)

ARMOR_RUNICS: Tuple[str, ...] = (
    "absorption",
    "dampening",
    "multiplicity",
    "mutuality",
    "reflection",
    "reprisal",
    "respiration",
    "burden",
    "immolation",
    "vulnerability",
) + tuple(f"{mclass} immunity" for mclass in MONSTER_CLASSES)

# ---------------------------------------------------------------------------
# Consumables and magic items
# ---------------------------------------------------------------------------

POTION_KINDS: Tuple[str, ...] = (
    "caustic gas",
    "confusion",
    "creeping death",
    "darkness",
    "descent",
    "detect magic",
    "fire immunity",
    "hallucination",
    "incineration",
    "invisibility",
    "levitation",
    "life",
    "paralysis",
    "speed",
    "strength",
    "telepathy",
)

SCROLL_KINDS: Tuple[str, ...] = (
    "aggravate monsters",
    "discord",
    "enchanting",
    "identify",
    "magic mapping",
    "negation",
    "protect armor",
    "protect weapon",
    "recharging",
    "remove curse",
    "sanctuary",
    "shattering",
    "summon monsters",
    "teleportation",
)

STAFF_KINDS: Tuple[str, ...] = (
    "blinking",
    "conjuration",
    "discord",
    "entrancement",
    "firebolt",
    "haste",
    "healing",
    "lightning",
    "obstruction",
    "poison",
    "protection",
    "tunneling",
)

WAND_KINDS: Tuple[str, ...] = (
    "beckoning",
    "domination",
    "empowerment",
    "invisibility",
    "negation",
    "plenty",
    "polymorphism",
    "slowness",
    "teleportation",
)

RING_KINDS: Tuple[str, ...] = (
    "awareness",
    "clairvoyance",
    "light",
    "reaping",
    "regeneration",
    "stealth",
    "transference",
    "wisdom",
)

CHARM_KINDS: Tuple[str, ...] = (
    "fire immunity",
    "guardian",
    "haste",
    "health",
    "invisibility",
    "levitation",
    "negation",
    "protection",
    "recharging",
    "shattering",
    "telepathy",
    "teleportation",
)

FOOD_KINDS: Tuple[str, ...] = ("mango", "ration of food")
ALTAR_KINDS: Tuple[str, ...] = ("commutation altar", "resurrection altar")
KEY_KINDS: Tuple[str, ...] = ("door key", "cage key", "crystal orb")
# Piles are appended by the catalog: "gold pieces (3 piles)".
GOLD_KINDS: Tuple[str, ...] = ("gold pieces",)

# Staves listed here help whatever they are pointed at.
MALEVOLENT_KINDS: Dict[Category, Tuple[str, ...]] = {
    Category.POTION: (
        "caustic gas",
        "confusion",
        "creeping death",
        "darkness",
        "descent",
        "hallucination",
        "incineration",
        "paralysis",
    ),
    Category.SCROLL: ("aggravate monsters", "summon monsters"),
    Category.STAFF: ("haste", "healing", "protection"),
    Category.WAND: ("empowerment", "invisibility", "plenty"),
}

KINDS_BY_CATEGORY: Dict[Category, Tuple[str, ...]] = {
    Category.ALLY: MONSTER_KINDS,
    Category.ALTAR: ALTAR_KINDS,
    Category.ARMOR: ARMOR_KINDS,
    Category.CHARM: CHARM_KINDS,
    Category.FOOD: FOOD_KINDS,
    Category.GOLD: GOLD_KINDS,
    Category.KEY: KEY_KINDS,
    Category.POTION: POTION_KINDS,
    Category.RING: RING_KINDS,
    Category.SCROLL: SCROLL_KINDS,
    Category.STAFF: STAFF_KINDS,
    Category.WAND: WAND_KINDS,
    Category.WEAPON: WEAPON_KINDS,
}

RUNICS_BY_CATEGORY: Dict[Category, Tuple[str, ...]] = {
    Category.ARMOR: ARMOR_RUNICS,
    Category.WEAPON: WEAPON_RUNICS,
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def find_exact(names: Iterable[str], value: str) -> Optional[str]:
    for name in names:
        if name == value:
            return name
    return None


def find_partial(names: Iterable[str], value: str) -> Optional[str]:
    """Return the first name that contains `value`."""
    for name in names:
        if value in name:
            return name
    return None


def is_malevolent(category: Category, kind: str) -> bool:
    """True when `kind` is a harmful potion/scroll or a wand/staff that aids its target.

    Matching is by substring so longer catalog names ("haste other") still
    resolve against the short table entries.
    """
    names = MALEVOLENT_KINDS.get(category, ())
    return any(name in kind for name in names)


__all__ = [
    "MONSTER_CLASSES",
    "MONSTER_KINDS",
    "MUTATIONS",
    "ALLY_STATUSES",
    "ALLY_STATUS_LABELS",
    "LEGENDARY_STATUS",
    "WEAPON_KINDS",
    "WEAPON_RUNICS",
    "ARMOR_KINDS",
    "ARMOR_RUNICS",
    "POTION_KINDS",
    "SCROLL_KINDS",
    "STAFF_KINDS",
    "WAND_KINDS",
    "RING_KINDS",
    "CHARM_KINDS",
    "FOOD_KINDS",
    "ALTAR_KINDS",
    "KEY_KINDS",
    "GOLD_KINDS",
    "MALEVOLENT_KINDS",
    "KINDS_BY_CATEGORY",
    "RUNICS_BY_CATEGORY",
    "find_exact",
    "find_partial",
    "is_malevolent",
]
