"""Tests for evolution chain resolution."""

from __future__ import annotations

import pytest

from pokedex_core.analysis import enumerate_paths, find_ambiguous_targets, resolve_evolution_chain
from pokedex_core.errors import EvolutionTreeError
from pokedex_core.models import EvolutionNode, EvolutionStage


def _bulbasaur_line() -> EvolutionNode:
    return EvolutionNode(
        id=1,
        name="bulbasaur",
        evolves_to=[
            EvolutionNode(
                id=2,
                name="ivysaur",
                condition="Lvl 16",
                evolves_to=[EvolutionNode(id=3, name="venusaur", condition="Lvl 32")],
            )
        ],
    )


def _branching_tree() -> EvolutionNode:
    return EvolutionNode(
        id=10,
        name="a",
        evolves_to=[
            EvolutionNode(id=11, name="b", condition="Sun Stone"),
            EvolutionNode(id=12, name="c", condition="Moon Stone"),
        ],
    )


@pytest.mark.parametrize("target", [1, 2, 3])
def test_linear_chain_is_returned_whole_for_any_target(target: int) -> None:
    chain = resolve_evolution_chain(_bulbasaur_line(), target)
    assert chain == [
        EvolutionStage(id=1, name="bulbasaur", condition=None),
        EvolutionStage(id=2, name="ivysaur", condition="Lvl 16"),
        EvolutionStage(id=3, name="venusaur", condition="Lvl 32"),
    ]


def test_branch_containing_the_target_is_selected() -> None:
    chain = resolve_evolution_chain(_branching_tree(), 12)
    assert [stage.id for stage in chain] == [10, 12]
    assert chain[1].condition == "Moon Stone"


def test_base_form_of_a_fork_gets_the_leftmost_branch() -> None:
    assert [stage.id for stage in resolve_evolution_chain(_branching_tree(), 10)] == [10, 11]


def test_unknown_target_falls_back_to_leftmost_path() -> None:
    assert [stage.id for stage in resolve_evolution_chain(_branching_tree(), 999)] == [10, 11]


def test_single_node_resolves_to_one_stage() -> None:
    chain = resolve_evolution_chain(EvolutionNode(id=132, name="ditto"), 132)
    assert chain == [EvolutionStage(id=132, name="ditto")]


def test_root_condition_is_dropped() -> None:
    root = EvolutionNode(id=1, condition="ignored", evolves_to=[EvolutionNode(id=2, condition="Lvl 5")])
    chain = resolve_evolution_chain(root, 2)
    assert [stage.condition for stage in chain] == [None, "Lvl 5"]


def test_paths_are_enumerated_depth_first_in_child_order() -> None:
    root = EvolutionNode(
        id=1,
        evolves_to=[
            EvolutionNode(id=2, evolves_to=[EvolutionNode(id=4), EvolutionNode(id=5)]),
            EvolutionNode(id=3),
        ],
    )
    assert [[s.id for s in path] for path in enumerate_paths(root)] == [[1, 2, 4], [1, 2, 5], [1, 3]]


def test_target_on_two_branches_takes_the_first() -> None:
    root = EvolutionNode(
        id=1,
        evolves_to=[
            EvolutionNode(id=2, evolves_to=[EvolutionNode(id=9)]),
            EvolutionNode(id=3, evolves_to=[EvolutionNode(id=9)]),
        ],
    )
    assert [s.id for s in resolve_evolution_chain(root, 9)] == [1, 2, 9]
    assert find_ambiguous_targets(root) == {9}


def test_well_formed_tree_has_no_ambiguous_targets() -> None:
    root = EvolutionNode(
        id=1,
        evolves_to=[
            EvolutionNode(id=2),
            EvolutionNode(id=3, evolves_to=[EvolutionNode(id=4), EvolutionNode(id=5)]),
        ],
    )
    assert find_ambiguous_targets(root) == set()


def test_cycle_is_rejected() -> None:
    root = EvolutionNode(id=1)
    child = EvolutionNode(id=2, evolves_to=[root])
    root.evolves_to.append(child)
    with pytest.raises(EvolutionTreeError):
        resolve_evolution_chain(root, 2)
