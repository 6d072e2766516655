"""FastMCP server exposing the pokedex type, evolution and team tools."""

from __future__ import annotations

import sys
from dataclasses import asdict
from typing import Annotated, Any, Dict, List

from fastmcp import FastMCP

from .analysis import (
    TeamSynergyAnalyzer,
    defensive_multipliers,
    defensive_weaknesses,
    offensive_strengths,
    resolve_evolution_chain,
    type_profile,
)
from .config import Settings
from .data import multiplier, sort_categories
from .errors import PokedexCoreError
from .parsers import parse_evolution_chain, parse_team

app = FastMCP("pokedex-core")
_settings = Settings.from_env()


@app.tool()
def calculate_type_matchup(
    attacker_type: Annotated[str, "Attacking type"],
    defender_type: Annotated[str, "Defending type"],
) -> str:
    """Return the effectiveness multiplier of an attacking type against a defender type."""

    try:
        value = multiplier(attacker_type, defender_type)
    except PokedexCoreError as exc:
        return f"Error: {exc}"
    return f"{attacker_type.strip().title()} vs {defender_type.strip().title()} -> {value}x"


@app.tool()
def get_type_profile(
    type_name: Annotated[str, "Type to describe (e.g. 'fire' or 'Feuer')"],
) -> Dict[str, Any]:
    """Offensive and defensive breakdown of a single type."""

    try:
        return asdict(type_profile(type_name))
    except PokedexCoreError as exc:
        return {"error": str(exc)}


@app.tool()
def get_defensive_weaknesses(
    types: Annotated[List[str], "One or two defending types"],
) -> Dict[str, Any]:
    """Attacking types that hit this type combination super-effectively."""

    try:
        weaknesses = sort_categories(defensive_weaknesses(types))
        multipliers = defensive_multipliers(types)
    except (PokedexCoreError, ValueError) as exc:
        return {"error": str(exc)}
    return {
        "weaknesses": weaknesses,
        "multipliers": {t: multipliers[t] for t in weaknesses},
    }


@app.tool()
def get_offensive_strengths(
    types: Annotated[List[str], "Attacking types"],
) -> Dict[str, Any]:
    """Defending types that at least one of the given types hits super-effectively."""

    try:
        return {"strong_against": sort_categories(offensive_strengths(types))}
    except PokedexCoreError as exc:
        return {"error": str(exc)}


@app.tool()
def analyze_team_synergy(
    team: Annotated[List[Dict[str, Any]], "Roster entries: [{id, name, types}]"],
    language: Annotated[str, "Suggestion language ('en' or 'de')"] = "",
) -> Dict[str, Any]:
    """Weakness and coverage tallies plus suggestions for a roster of up to six."""

    try:
        roster = parse_team(team)
        analyzer = TeamSynergyAnalyzer(language=language or _settings.language)
        return asdict(analyzer.analyze(roster))
    except (PokedexCoreError, ValueError) as exc:
        return {"error": str(exc)}


@app.tool(name="resolve_evolution_chain")
def get_evolution_line(
    chain: Annotated[Dict[str, Any], "PokeAPI evolution-chain payload"],
    pokemon_id: Annotated[int, "Species id whose line should be shown"],
    language: Annotated[str, "Condition language ('en' or 'de')"] = "",
) -> Dict[str, Any]:
    """Resolve a branching evolution chain to the line containing ``pokemon_id``."""

    try:
        root = parse_evolution_chain(chain, language=language or _settings.language)
        stages = resolve_evolution_chain(root, pokemon_id)
    except (PokedexCoreError, ValueError) as exc:
        return {"error": str(exc)}
    return {"stages": [asdict(stage) for stage in stages]}


def run() -> None:
    """Entry point for `python -m pokedex_core.server` or console script."""

    # stdout carries the MCP stdio stream
    print("[pokedex-core] Starting MCP server. Press Ctrl+C to stop.", file=sys.stderr)
    app.run()


if __name__ == "__main__":
    run()
