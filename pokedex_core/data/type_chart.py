"""Static type chart utilities for Pokemon type calculations."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ..errors import UnknownCategoryError
from .localization import CATEGORY_NAMES

TYPE_ORDER: Tuple[str, ...] = (
    "normal",
    "fire",
    "water",
    "grass",
    "electric",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)

SUPER_EFFECTIVE = 2.0
NOT_VERY_EFFECTIVE = 0.5
NO_EFFECT = 0.0
NEUTRAL = 1.0

# Attacker -> defenders grouped by multiplier. Pairs not listed are neutral.
TYPE_CHART: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "normal": {"double": (), "half": ("rock", "steel"), "zero": ("ghost",)},
    "fire": {
        "double": ("grass", "ice", "bug", "steel"),
        "half": ("fire", "water", "rock", "dragon"),
        "zero": (),
    },
    "water": {
        "double": ("fire", "ground", "rock"),
        "half": ("water", "grass", "dragon"),
        "zero": (),
    },
    "electric": {
        "double": ("water", "flying"),
        "half": ("electric", "grass", "dragon"),
        "zero": ("ground",),
    },
    "grass": {
        "double": ("water", "ground", "rock"),
        "half": ("fire", "grass", "poison", "flying", "bug", "dragon", "steel"),
        "zero": (),
    },
    "ice": {
        "double": ("grass", "ground", "flying", "dragon"),
        "half": ("fire", "water", "ice", "steel"),
        "zero": (),
    },
    "fighting": {
        "double": ("normal", "ice", "rock", "dark", "steel"),
        "half": ("poison", "flying", "psychic", "bug", "fairy"),
        "zero": ("ghost",),
    },
    "poison": {
        "double": ("grass", "fairy"),
        "half": ("poison", "ground", "rock", "ghost"),
        "zero": ("steel",),
    },
    "ground": {
        "double": ("fire", "electric", "poison", "rock", "steel"),
        "half": ("grass", "bug"),
        "zero": ("flying",),
    },
    "flying": {
        "double": ("grass", "fighting", "bug"),
        "half": ("electric", "rock", "steel"),
        "zero": (),
    },
    "psychic": {
        "double": ("fighting", "poison"),
        "half": ("psychic", "steel"),
        "zero": ("dark",),
    },
    "bug": {
        "double": ("grass", "psychic", "dark"),
        "half": ("fire", "fighting", "poison", "flying", "ghost", "steel", "fairy"),
        "zero": (),
    },
    "rock": {
        "double": ("fire", "ice", "flying", "bug"),
        "half": ("fighting", "ground", "steel"),
        "zero": (),
    },
    "ghost": {
        "double": ("psychic", "ghost"),
        "half": ("dark",),
        "zero": ("normal",),
    },
    "dragon": {
        "double": ("dragon",),
        "half": ("steel",),
        "zero": ("fairy",),
    },
    "dark": {
        "double": ("psychic", "ghost"),
        "half": ("fighting", "dark", "fairy"),
        "zero": (),
    },
    "steel": {
        "double": ("ice", "rock", "fairy"),
        "half": ("fire", "water", "electric", "steel"),
        "zero": (),
    },
    "fairy": {
        "double": ("fighting", "dragon", "dark"),
        "half": ("fire", "poison", "steel"),
        "zero": (),
    },
}

_GROUP_MULTIPLIERS = {
    "double": SUPER_EFFECTIVE,
    "half": NOT_VERY_EFFECTIVE,
    "zero": NO_EFFECT,
}


def _build_pair_table() -> Dict[Tuple[str, str], float]:
    table: Dict[Tuple[str, str], float] = {}
    for attacker, groups in TYPE_CHART.items():
        for group, defenders in groups.items():
            for defender in defenders:
                key = (attacker, defender)
                assert key not in table, f"duplicate chart entry {key}"
                table[key] = _GROUP_MULTIPLIERS[group]
    return table


# Only explicit entries live here; everything else is NEUTRAL.
PAIR_MULTIPLIERS: Dict[Tuple[str, str], float] = _build_pair_table()

_ALIASES: Dict[str, str] = {slug: slug for slug in TYPE_ORDER}
for _names in CATEGORY_NAMES.values():
    _ALIASES.update({display.lower(): slug for slug, display in _names.items()})


def normalize_category(name: str) -> str:
    """Return the canonical slug for ``name``.

    Accepts any casing and the localized display names (``"Feuer"`` maps to
    ``"fire"``). Anything else raises :class:`UnknownCategoryError`.
    """

    if not isinstance(name, str):
        raise UnknownCategoryError(name)
    slug = _ALIASES.get(name.strip().lower())
    if slug is None:
        raise UnknownCategoryError(name)
    return slug


def multiplier(attacker: str, defender: str) -> float:
    """Return the multiplier of ``attacker`` hitting a pure ``defender`` type."""

    atk = normalize_category(attacker)
    dfn = normalize_category(defender)
    return PAIR_MULTIPLIERS.get((atk, dfn), NEUTRAL)


def damage_multiplier(attack_type: str, defender_types: Iterable[str]) -> float:
    """Compute damage multiplier for an attack hitting defender types."""

    total = NEUTRAL
    for defender in defender_types:
        total *= multiplier(attack_type, defender)
    return total


def sort_categories(categories: Iterable[str]) -> List[str]:
    """Order categories the way the type chart lists them."""

    return sorted(
        {normalize_category(c) for c in categories},
        key=TYPE_ORDER.index,
    )
