"""Shared dataclasses for pokedex analysis."""

from .evolution import EvolutionNode, EvolutionStage
from .team import (
    MAX_TEAM_SIZE,
    DefensiveProfile,
    OffensiveProfile,
    PokemonEntry,
    SynergyReport,
    Team,
    TypeProfile,
)

__all__ = [
    "MAX_TEAM_SIZE",
    "DefensiveProfile",
    "EvolutionNode",
    "EvolutionStage",
    "OffensiveProfile",
    "PokemonEntry",
    "SynergyReport",
    "Team",
    "TypeProfile",
]
