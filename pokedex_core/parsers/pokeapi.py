"""Convert already-fetched PokeAPI payloads into pokedex_core models."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..data.localization import DEFAULT_LANGUAGE, message, resolve_language
from ..data.type_chart import normalize_category
from ..errors import PayloadError
from ..models import EvolutionNode, PokemonEntry


def parse_pokemon(
    payload: Mapping[str, Any],
    species: Optional[Mapping[str, Any]] = None,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> PokemonEntry:
    """Build a :class:`PokemonEntry` from a ``pokemon/{id}`` payload.

    ``species`` is the optional ``pokemon-species/{id}`` payload, used only for
    the localized display name.
    """

    try:
        pokemon_id = int(payload["id"])
        name = str(payload["name"])
    except (KeyError, TypeError, ValueError) as exc:
        raise PayloadError(f"Pokemon payload lacks id/name: {exc}") from exc

    try:
        slots = sorted(payload.get("types", []), key=lambda slot: slot.get("slot", 0))
        types = [normalize_category(slot["type"]["name"]) for slot in slots]
    except (KeyError, TypeError, AttributeError) as exc:
        raise PayloadError(f"Malformed type slot for {name}: {exc}") from exc
    if not 1 <= len(types) <= 2:
        raise PayloadError(f"{name} has {len(types)} types; expected one or two")

    return PokemonEntry(
        id=pokemon_id,
        name=name,
        types=types,
        display_name=localized_name(species, name, language=language) if species else None,
        stats=parse_stats(payload.get("stats"), owner=name),
    )


def parse_stats(raw: Any, *, owner: str = "Pokemon") -> Dict[str, int]:
    """Base stats from a PokeAPI ``stats`` list or a plain ``{name: value}`` map."""

    if not raw:
        return {}
    try:
        if isinstance(raw, Mapping):
            return {str(key): int(value) for key, value in raw.items()}
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
            raise TypeError(f"unexpected {type(raw).__name__}")
        return {
            entry["stat"]["name"]: int(entry["base_stat"])
            for entry in raw
            if entry.get("stat") and entry.get("base_stat") is not None
        }
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise PayloadError(f"Malformed stats for {owner}: {exc}") from exc


def localized_name(
    species: Mapping[str, Any], fallback: str, *, language: str = DEFAULT_LANGUAGE
) -> str:
    """Pick the species name for ``language`` or capitalize ``fallback``."""

    code = resolve_language(language)
    for entry in species.get("names", []):
        if (entry.get("language") or {}).get("name") == code and entry.get("name"):
            return entry["name"]
    return fallback[:1].upper() + fallback[1:]


def parse_evolution_chain(
    payload: Mapping[str, Any], *, language: str = DEFAULT_LANGUAGE
) -> EvolutionNode:
    """Turn an ``evolution-chain/{id}`` payload (or its ``chain``) into a tree."""

    if not isinstance(payload, Mapping):
        raise PayloadError(f"Evolution chain payload must be an object, got {payload!r}")
    link = payload.get("chain", payload)
    return _parse_link(link, resolve_language(language), is_root=True)


def _parse_link(link: Mapping[str, Any], language: str, *, is_root: bool) -> EvolutionNode:
    if not isinstance(link, Mapping):
        raise PayloadError(f"Evolution link must be an object, got {link!r}")
    species = link.get("species") or {}
    if not isinstance(species, Mapping):
        raise PayloadError(f"Evolution species must be an object, got {species!r}")
    url = species.get("url")
    if not url:
        raise PayloadError(f"Evolution link lacks a species url: {dict(link)!r}")
    evolves_to = link.get("evolves_to") or []
    if isinstance(evolves_to, (str, bytes, Mapping)) or not isinstance(evolves_to, Sequence):
        raise PayloadError(f"evolves_to must be a list, got {evolves_to!r}")
    children = [_parse_link(child, language, is_root=False) for child in evolves_to]
    return EvolutionNode(
        id=species_id_from_url(url),
        name=species.get("name"),
        condition=None if is_root else format_evolution_condition(
            link.get("evolution_details", []), language=language
        ),
        evolves_to=children,
    )


def species_id_from_url(url: str) -> int:
    """``https://pokeapi.co/api/v2/pokemon-species/133/`` -> ``133``."""

    segments = [segment for segment in url.split("/") if segment]
    try:
        return int(segments[-1])
    except (IndexError, ValueError) as exc:
        raise PayloadError(f"Cannot read species id from {url!r}") from exc


def format_evolution_condition(
    details: List[Dict[str, Any]], *, language: str = DEFAULT_LANGUAGE
) -> Optional[str]:
    """Short label for how an evolution happens, e.g. ``Lvl 16`` or ``Fire Stone``."""

    if not details:
        return None
    if isinstance(details, (str, bytes, Mapping)) or not isinstance(details, Sequence):
        raise PayloadError(f"Evolution details must be a list, got {details!r}")
    detail = details[0]
    if not isinstance(detail, Mapping):
        raise PayloadError(f"Evolution detail must be an object, got {detail!r}")
    trigger = (detail.get("trigger") or {}).get("name")
    item = (detail.get("item") or {}).get("name")
    held_item = (detail.get("held_item") or {}).get("name")

    if detail.get("min_level"):
        return message("condition_level", language, level=detail["min_level"])
    if trigger == "use-item" and item:
        return _title(item)
    if trigger == "trade":
        label = message("condition_trade", language)
        return f"{label} ({_title(held_item)})" if held_item else label
    if detail.get("min_happiness"):
        return message("condition_friendship", language)
    if trigger:
        return _title(trigger)
    return None


def _title(slug: str) -> str:
    return " ".join(part.capitalize() for part in slug.split("-"))
