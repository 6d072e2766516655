"""Flatten branching evolution trees into the single line a Pokemon belongs to."""

from __future__ import annotations

from collections import Counter
from typing import List, Set

from ..errors import EvolutionTreeError
from ..models import EvolutionNode, EvolutionStage


def enumerate_paths(root: EvolutionNode) -> List[List[EvolutionStage]]:
    """Every root-to-leaf path, depth first, children in input order."""

    paths: List[List[EvolutionStage]] = []
    _walk(root, [], set(), paths)
    return paths


def _walk(
    node: EvolutionNode,
    prefix: List[EvolutionStage],
    seen: Set[int],
    paths: List[List[EvolutionStage]],
) -> None:
    if node.id in seen:
        raise EvolutionTreeError(f"Evolution tree revisits species {node.id}")
    # The root has no incoming edge, so it never carries a condition.
    condition = node.condition if prefix else None
    stage = EvolutionStage(id=node.id, name=node.name, condition=condition)
    path = prefix + [stage]
    if not node.evolves_to:
        paths.append(path)
        return
    seen.add(node.id)
    for child in node.evolves_to:
        _walk(child, path, seen, paths)
    seen.discard(node.id)


def resolve_evolution_chain(root: EvolutionNode, target_id: int) -> List[EvolutionStage]:
    """Return the evolution line that contains ``target_id``.

    All leaf paths are collected first; the first one holding the target wins.
    If the target is not in the tree the leftmost path is returned instead so
    the caller always has a lineage to show. A target sitting on several
    branches resolves to the first branch in depth-first order.
    """

    paths = enumerate_paths(root)
    for path in paths:
        if any(stage.id == target_id for stage in path):
            return path
    return paths[0]


def find_ambiguous_targets(root: EvolutionNode) -> Set[int]:
    """Ids held by more than one node of the tree.

    Well-formed species data never produces any; for these ids
    :func:`resolve_evolution_chain` silently picks the first branch found.
    """

    enumerate_paths(root)  # rejects cycles before the node walk below
    counts: Counter[int] = Counter()
    stack = [root]
    while stack:
        node = stack.pop()
        counts[node.id] += 1
        stack.extend(node.evolves_to)
    return {species_id for species_id, count in counts.items() if count > 1}
