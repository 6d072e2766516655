"""Core dataclasses shared across the pokedex analyzers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

MAX_TEAM_SIZE = 6


@dataclass(slots=True)
class PokemonEntry:
    """A creature as supplied by the reference data service."""

    id: int
    name: str
    types: List[str] = field(default_factory=list)
    display_name: Optional[str] = None
    stats: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class Team:
    """Ordered roster of up to six Pokemon with unique ids."""

    name: Optional[str] = None
    pokemon: List[PokemonEntry] = field(default_factory=list)

    def add_pokemon(self, pokemon: PokemonEntry) -> bool:
        """Append ``pokemon`` unless the team is full or already holds its id."""

        if len(self.pokemon) >= MAX_TEAM_SIZE or self.contains(pokemon.id):
            return False
        self.pokemon.append(pokemon)
        return True

    def remove_pokemon(self, pokemon_id: int) -> bool:
        before = len(self.pokemon)
        self.pokemon = [p for p in self.pokemon if p.id != pokemon_id]
        return len(self.pokemon) != before

    def contains(self, pokemon_id: int) -> bool:
        return any(p.id == pokemon_id for p in self.pokemon)

    def clear(self) -> None:
        self.pokemon.clear()

    def is_empty(self) -> bool:
        return not self.pokemon

    def __len__(self) -> int:
        return len(self.pokemon)


@dataclass(slots=True)
class SynergyReport:
    """Per-type tallies and suggestions for a roster; rebuilt on every call."""

    weakness_counts: Dict[str, int] = field(default_factory=dict)
    coverage_counts: Dict[str, int] = field(default_factory=dict)
    suggestions: List[str] = field(default_factory=list)


@dataclass(slots=True)
class OffensiveProfile:
    strong_against: List[str] = field(default_factory=list)
    weak_against: List[str] = field(default_factory=list)
    no_effect_against: List[str] = field(default_factory=list)
    neutral_against: List[str] = field(default_factory=list)


@dataclass(slots=True)
class DefensiveProfile:
    weak_from: List[str] = field(default_factory=list)
    resistant_to: List[str] = field(default_factory=list)
    immune_to: List[str] = field(default_factory=list)
    neutral_from: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TypeProfile:
    """Full offensive and defensive breakdown of a single type."""

    category: str
    offensive: OffensiveProfile = field(default_factory=OffensiveProfile)
    defensive: DefensiveProfile = field(default_factory=DefensiveProfile)
