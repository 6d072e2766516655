"""Tests for offensive strengths, defensive weaknesses and type profiles."""

from __future__ import annotations

import pytest

from pokedex_core.analysis import (
    defensive_multipliers,
    defensive_weaknesses,
    offensive_strengths,
    type_profile,
)
from pokedex_core.data.type_chart import TYPE_ORDER, multiplier


def test_single_type_weaknesses_match_the_chart_column() -> None:
    for defender in TYPE_ORDER:
        expected = {a for a in TYPE_ORDER if multiplier(a, defender) > 1}
        assert defensive_weaknesses([defender]) == expected


def test_fire_weaknesses() -> None:
    assert defensive_weaknesses(["fire"]) == {"water", "ground", "rock"}


def test_resist_and_weakness_cancel_out() -> None:
    # Ground alone is weak to Water; Water resists it, product is exactly 1.
    assert "water" in defensive_weaknesses(["ground"])
    assert "water" not in defensive_weaknesses(["water", "ground"])
    assert defensive_weaknesses(["water", "ground"]) == {"grass"}


def test_shared_weakness_stacks_to_quadruple() -> None:
    totals = defensive_multipliers(["grass", "bug"])
    assert totals["fire"] == 4.0
    assert totals["flying"] == 4.0
    assert {"fire", "flying"} <= defensive_weaknesses(["grass", "bug"])


def test_immunity_wins_over_weakness() -> None:
    # Flying is weak to Electric but Ground is immune.
    assert defensive_multipliers(["ground", "flying"])["electric"] == 0.0
    assert "electric" not in defensive_weaknesses(["ground", "flying"])


def test_duplicate_defender_types_collapse() -> None:
    assert defensive_weaknesses(["fire", "Fire"]) == defensive_weaknesses(["fire"])


@pytest.mark.parametrize("types", [[], ["fire", "water", "grass"]])
def test_defender_needs_one_or_two_types(types) -> None:
    with pytest.raises(ValueError):
        defensive_weaknesses(types)


def test_offensive_strengths_is_a_union_without_stacking() -> None:
    assert offensive_strengths(["fire"]) == {"grass", "ice", "bug", "steel"}
    assert offensive_strengths(["fire", "water"]) == {
        "grass",
        "ice",
        "bug",
        "steel",
        "fire",
        "ground",
        "rock",
    }
    assert offensive_strengths(["normal"]) == set()
    assert offensive_strengths([]) == set()


def test_fire_profile() -> None:
    profile = type_profile("Fire")
    assert profile.category == "fire"
    assert profile.offensive.strong_against == ["grass", "ice", "bug", "steel"]
    assert profile.offensive.weak_against == ["fire", "water", "rock", "dragon"]
    assert profile.offensive.no_effect_against == []
    assert profile.defensive.weak_from == ["water", "ground", "rock"]
    assert profile.defensive.resistant_to == ["fire", "grass", "ice", "bug", "steel", "fairy"]
    assert profile.defensive.immune_to == []


def test_ghost_profile_immunities() -> None:
    profile = type_profile("ghost")
    assert profile.offensive.no_effect_against == ["normal"]
    assert profile.defensive.immune_to == ["normal", "fighting"]
    assert profile.defensive.weak_from == ["ghost", "dark"]


@pytest.mark.parametrize("category", TYPE_ORDER)
def test_profile_buckets_partition_every_type_once(category: str) -> None:
    profile = type_profile(category)
    offensive = (
        profile.offensive.strong_against
        + profile.offensive.weak_against
        + profile.offensive.no_effect_against
        + profile.offensive.neutral_against
    )
    defensive = (
        profile.defensive.weak_from
        + profile.defensive.resistant_to
        + profile.defensive.immune_to
        + profile.defensive.neutral_from
    )
    assert sorted(offensive) == sorted(TYPE_ORDER)
    assert sorted(defensive) == sorted(TYPE_ORDER)
