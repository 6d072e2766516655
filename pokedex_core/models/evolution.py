"""Evolution tree input and flattened chain output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class EvolutionNode:
    """One species in a branching evolution tree.

    ``condition`` describes the edge leading *into* this node; it is ``None``
    for the root.
    """

    id: int
    name: Optional[str] = None
    condition: Optional[str] = None
    evolves_to: List["EvolutionNode"] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class EvolutionStage:
    id: int
    name: Optional[str] = None
    condition: Optional[str] = None
