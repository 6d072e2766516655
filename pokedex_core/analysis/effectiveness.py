"""Offensive strengths, defensive weaknesses and per-type profiles."""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

from ..data.type_chart import (
    NEUTRAL,
    NO_EFFECT,
    TYPE_ORDER,
    damage_multiplier,
    multiplier,
    normalize_category,
)
from ..models import DefensiveProfile, OffensiveProfile, TypeProfile


def offensive_strengths(attacker_types: Iterable[str]) -> Set[str]:
    """Types that at least one of ``attacker_types`` hits super-effectively.

    Union per attacking type; multipliers are not stacked.
    """

    strengths: Set[str] = set()
    for attacker in attacker_types:
        for defender in TYPE_ORDER:
            if multiplier(attacker, defender) > NEUTRAL:
                strengths.add(defender)
    return strengths


def _defender_slugs(defender_types: Iterable[str]) -> List[str]:
    slugs = list(dict.fromkeys(normalize_category(t) for t in defender_types))
    if not 1 <= len(slugs) <= 2:
        raise ValueError(f"A Pokemon has one or two types, got {slugs!r}")
    return slugs


def defensive_multipliers(defender_types: Iterable[str]) -> Dict[str, float]:
    """Combined multiplier of every attacking type against ``defender_types``."""

    defenders = _defender_slugs(defender_types)
    totals: Dict[str, float] = {}
    for attacker in TYPE_ORDER:
        totals[attacker] = damage_multiplier(attacker, defenders)
    return totals


def defensive_weaknesses(defender_types: Iterable[str]) -> Set[str]:
    """Attacking types whose stacked multiplier against the defender exceeds 1.

    A resistance on one type can cancel a weakness on the other (2 * 0.5 == 1),
    and shared weaknesses stack to 4x.
    """

    return {
        attacker
        for attacker, total in defensive_multipliers(defender_types).items()
        if total > NEUTRAL
    }


def type_profile(category: str) -> TypeProfile:
    """Bucket every type once on the offensive and once on the defensive axis."""

    slug = normalize_category(category)
    profile = TypeProfile(
        category=slug,
        offensive=OffensiveProfile(),
        defensive=DefensiveProfile(),
    )
    for other in TYPE_ORDER:
        out = multiplier(slug, other)
        if out > NEUTRAL:
            profile.offensive.strong_against.append(other)
        elif out == NO_EFFECT:
            profile.offensive.no_effect_against.append(other)
        elif out < NEUTRAL:
            profile.offensive.weak_against.append(other)
        else:
            profile.offensive.neutral_against.append(other)

        incoming = multiplier(other, slug)
        if incoming > NEUTRAL:
            profile.defensive.weak_from.append(other)
        elif incoming == NO_EFFECT:
            profile.defensive.immune_to.append(other)
        elif incoming < NEUTRAL:
            profile.defensive.resistant_to.append(other)
        else:
            profile.defensive.neutral_from.append(other)
    return profile
