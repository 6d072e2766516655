"""Runtime settings read from the environment and optional .env files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .data.localization import DEFAULT_LANGUAGE, resolve_language

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    language: str = DEFAULT_LANGUAGE
    debug: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        load_files: bool = True,
    ) -> "Settings":
        """Build settings from ``POKEDEX_LANGUAGE`` and ``POKEDEX_DEBUG``."""

        if load_files:
            # .env.local overrides .env so per-user values win.
            load_dotenv(find_dotenv(usecwd=True))
            load_dotenv(".env.local", override=True)
        env = os.environ if environ is None else environ
        return cls(
            language=resolve_language(env.get("POKEDEX_LANGUAGE") or DEFAULT_LANGUAGE),
            debug=(env.get("POKEDEX_DEBUG") or "").strip().lower() in TRUTHY,
        )
