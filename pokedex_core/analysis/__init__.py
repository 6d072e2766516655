"""Type effectiveness, evolution chain and team synergy analysis."""

from .effectiveness import (
    defensive_multipliers,
    defensive_weaknesses,
    offensive_strengths,
    type_profile,
)
from .evolution import enumerate_paths, find_ambiguous_targets, resolve_evolution_chain
from .team_analyzer import TeamSynergyAnalyzer, analyze_team_synergy

__all__ = [
    "TeamSynergyAnalyzer",
    "analyze_team_synergy",
    "defensive_multipliers",
    "defensive_weaknesses",
    "enumerate_paths",
    "find_ambiguous_targets",
    "offensive_strengths",
    "resolve_evolution_chain",
    "type_profile",
]
