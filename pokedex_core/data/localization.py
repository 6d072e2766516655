"""Display names and message templates for the supported UI languages."""

from __future__ import annotations

from typing import Dict, Iterable

SUPPORTED_LANGUAGES = ("en", "de")
DEFAULT_LANGUAGE = "en"

CATEGORY_NAMES: Dict[str, Dict[str, str]] = {
    "en": {
        "normal": "Normal",
        "fire": "Fire",
        "water": "Water",
        "electric": "Electric",
        "grass": "Grass",
        "ice": "Ice",
        "fighting": "Fighting",
        "poison": "Poison",
        "ground": "Ground",
        "flying": "Flying",
        "psychic": "Psychic",
        "bug": "Bug",
        "rock": "Rock",
        "ghost": "Ghost",
        "dragon": "Dragon",
        "dark": "Dark",
        "steel": "Steel",
        "fairy": "Fairy",
    },
    "de": {
        "normal": "Normal",
        "fire": "Feuer",
        "water": "Wasser",
        "electric": "Elektro",
        "grass": "Pflanze",
        "ice": "Eis",
        "fighting": "Kampf",
        "poison": "Gift",
        "ground": "Boden",
        "flying": "Flug",
        "psychic": "Psycho",
        "bug": "Käfer",
        "rock": "Gestein",
        "ghost": "Geist",
        "dragon": "Drache",
        "dark": "Unlicht",
        "steel": "Stahl",
        "fairy": "Fee",
    },
}

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "empty_team": "Add Pokémon to your team to get an analysis.",
        "major_weakness": "Warning: your team is very vulnerable to {types}.",
        "missing_coverage": "Your team lacks offensive coverage against: {types}.",
        "redundancy": "You have many {types}-type Pokémon. More variety improves your chances!",
        "all_clear": "Your team looks well balanced! Great!",
        "condition_level": "Lvl {level}",
        "condition_trade": "Trade",
        "condition_friendship": "Friendship",
    },
    "de": {
        "empty_team": "Füge Pokemon hinzu, um eine Analyse zu erhalten.",
        "major_weakness": "Achtung: Dein Team ist sehr anfällig gegen {types}.",
        "missing_coverage": "Dir fehlt Offensive gegen: {types}.",
        "redundancy": "Du hast viele {types}-Pokemon. Mehr Vielfalt erhöht deine Chancen!",
        "all_clear": "Dein Team sieht sehr ausgewogen aus! Super!",
        "condition_level": "Lvl {level}",
        "condition_trade": "Tausch",
        "condition_friendship": "Freundschaft",
    },
}


def resolve_language(language: str | None) -> str:
    """Normalize a language code, raising ValueError for unsupported ones."""

    code = (language or DEFAULT_LANGUAGE).strip().lower()
    if code not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported language {language!r}; expected one of {', '.join(SUPPORTED_LANGUAGES)}"
        )
    return code


def category_name(slug: str, language: str = DEFAULT_LANGUAGE) -> str:
    return CATEGORY_NAMES[resolve_language(language)][slug]


def category_names(slugs: Iterable[str], language: str = DEFAULT_LANGUAGE) -> list[str]:
    return [category_name(slug, language) for slug in slugs]


def message(key: str, language: str = DEFAULT_LANGUAGE, **params: object) -> str:
    template = MESSAGES[resolve_language(language)][key]
    return template.format(**params)
