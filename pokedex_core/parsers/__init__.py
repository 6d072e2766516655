"""Adapters for reference-service payloads."""

from .pokeapi import (
    format_evolution_condition,
    localized_name,
    parse_evolution_chain,
    parse_pokemon,
    parse_stats,
    species_id_from_url,
)
from .roster import parse_team

__all__ = [
    "parse_team",
    "format_evolution_condition",
    "localized_name",
    "parse_evolution_chain",
    "parse_pokemon",
    "parse_stats",
    "species_id_from_url",
]
