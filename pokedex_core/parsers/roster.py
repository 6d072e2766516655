"""Parser for roster JSON as stored by the team builder."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..data.type_chart import normalize_category
from ..errors import PayloadError
from ..models import MAX_TEAM_SIZE, PokemonEntry, Team
from .pokeapi import parse_pokemon, parse_stats


def parse_team(entries: Sequence[Mapping[str, Any]], *, name: Optional[str] = None) -> Team:
    """Build a Team from ``[{"id": 6, "name": "charizard", "types": [...]}, ...]``.

    ``types`` may be plain type names or PokeAPI type slots, so raw ``pokemon``
    payloads can be passed through unchanged.
    """

    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        raise PayloadError("Team payload must be a list of Pokemon objects")
    if len(entries) > MAX_TEAM_SIZE:
        raise PayloadError(f"Team has {len(entries)} Pokemon; at most {MAX_TEAM_SIZE} are allowed")

    team = Team(name=name)
    for entry in entries:
        pokemon = _parse_entry(entry)
        if not team.add_pokemon(pokemon):
            raise PayloadError(f"Duplicate Pokemon id {pokemon.id} in team")
    return team


def _parse_entry(entry: Mapping[str, Any]) -> PokemonEntry:
    if not isinstance(entry, Mapping):
        raise PayloadError(f"Team entry must be an object, got {entry!r}")
    types = entry.get("types") or []
    if types and all(isinstance(t, Mapping) for t in types):
        return parse_pokemon(entry)

    try:
        pokemon_id = int(entry["id"])
    except (KeyError, TypeError, ValueError) as exc:
        raise PayloadError(f"Team entry lacks a numeric id: {dict(entry)!r}") from exc
    slugs = [normalize_category(t) for t in types]
    if not 1 <= len(slugs) <= 2:
        raise PayloadError(f"Pokemon {pokemon_id} has {len(slugs)} types; expected one or two")
    return PokemonEntry(
        id=pokemon_id,
        name=str(entry.get("name") or pokemon_id),
        types=slugs,
        display_name=entry.get("display_name"),
        stats=parse_stats(entry.get("stats"), owner=str(pokemon_id)),
    )
