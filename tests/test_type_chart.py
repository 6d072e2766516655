"""Tests for the static type chart."""

from __future__ import annotations

import pytest

from pokedex_core.data.type_chart import (
    PAIR_MULTIPLIERS,
    TYPE_CHART,
    TYPE_ORDER,
    damage_multiplier,
    multiplier,
    normalize_category,
    sort_categories,
)
from pokedex_core.errors import UnknownCategoryError


def test_chart_covers_all_eighteen_types() -> None:
    assert len(TYPE_ORDER) == 18
    assert set(TYPE_CHART) == set(TYPE_ORDER)


def test_explicit_entries_match_the_canonical_chart_size() -> None:
    values = list(PAIR_MULTIPLIERS.values())
    assert values.count(2.0) == 51
    assert values.count(0.5) == 61
    assert values.count(0.0) == 8


def test_pairs_missing_from_the_table_are_neutral() -> None:
    for attacker in TYPE_ORDER:
        for defender in TYPE_ORDER:
            value = multiplier(attacker, defender)
            assert value in {0.0, 0.5, 1.0, 2.0}
            if (attacker, defender) not in PAIR_MULTIPLIERS:
                assert value == 1.0


@pytest.mark.parametrize(
    ("attacker", "defender", "expected"),
    [
        ("fire", "grass", 2.0),
        ("water", "fire", 2.0),
        ("electric", "ground", 0.0),
        ("ground", "flying", 0.0),
        ("normal", "ghost", 0.0),
        ("ghost", "normal", 0.0),
        ("dragon", "fairy", 0.0),
        ("poison", "steel", 0.0),
        ("psychic", "dark", 0.0),
        ("fighting", "ghost", 0.0),
        ("bug", "fairy", 0.5),
        ("bug", "rock", 1.0),
        ("fairy", "dragon", 2.0),
        ("steel", "fairy", 2.0),
        ("ice", "dragon", 2.0),
        ("dark", "psychic", 2.0),
        ("dragon", "fire", 1.0),
    ],
)
def test_multiplier_spot_checks(attacker: str, defender: str, expected: float) -> None:
    assert multiplier(attacker, defender) == expected


def test_damage_multiplier_stacks_dual_types() -> None:
    assert damage_multiplier("ice", ["dragon", "flying"]) == 4.0
    assert damage_multiplier("electric", ["water", "ground"]) == 0.0
    assert damage_multiplier("water", ["water", "ground"]) == 1.0


def test_normalize_accepts_case_and_german_names() -> None:
    assert normalize_category(" Fire ") == "fire"
    assert normalize_category("Feuer") == "fire"
    assert normalize_category("käfer") == "bug"
    assert multiplier("Wasser", "Feuer") == 2.0


def test_unknown_type_fails_loudly() -> None:
    with pytest.raises(UnknownCategoryError):
        multiplier("sound", "fire")
    with pytest.raises(UnknownCategoryError):
        normalize_category(None)  # type: ignore[arg-type]


def test_sort_categories_uses_chart_order() -> None:
    assert sort_categories({"fairy", "Normal", "grass", "electric"}) == [
        "normal",
        "grass",
        "electric",
        "fairy",
    ]
