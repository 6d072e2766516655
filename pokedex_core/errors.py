"""Exceptions raised by the pokedex core."""

from __future__ import annotations


class PokedexCoreError(Exception):
    """Base class for every error raised by pokedex_core."""


class UnknownCategoryError(PokedexCoreError, ValueError):
    """Raised when a type name is not one of the 18 known categories."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown type: {name!r}")
        self.name = name


class EvolutionTreeError(PokedexCoreError, ValueError):
    """Raised when an evolution tree is malformed (e.g. contains a cycle)."""


class PayloadError(PokedexCoreError, ValueError):
    """Raised when a reference-service payload is missing required fields."""
