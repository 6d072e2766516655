"""Static tables: the type chart and localized display strings."""

from .localization import SUPPORTED_LANGUAGES, category_name, resolve_language
from .type_chart import (
    TYPE_ORDER,
    damage_multiplier,
    multiplier,
    normalize_category,
    sort_categories,
)

__all__ = [
    "SUPPORTED_LANGUAGES",
    "TYPE_ORDER",
    "category_name",
    "damage_multiplier",
    "multiplier",
    "normalize_category",
    "resolve_language",
    "sort_categories",
]
