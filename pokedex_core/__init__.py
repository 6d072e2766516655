"""Pokedex type effectiveness, evolution chain and team synergy utilities."""

from .analysis.effectiveness import defensive_weaknesses, offensive_strengths, type_profile
from .analysis.evolution import resolve_evolution_chain
from .analysis.team_analyzer import TeamSynergyAnalyzer
from .data.type_chart import multiplier

__all__ = [
    "TeamSynergyAnalyzer",
    "defensive_weaknesses",
    "multiplier",
    "offensive_strengths",
    "resolve_evolution_chain",
    "type_profile",
]
