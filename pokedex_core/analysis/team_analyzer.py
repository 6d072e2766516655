"""Team synergy heuristics built on the type effectiveness tables."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from ..data.localization import DEFAULT_LANGUAGE, category_names, message, resolve_language
from ..data.type_chart import TYPE_ORDER, normalize_category
from ..models import MAX_TEAM_SIZE, PokemonEntry, SynergyReport, Team
from .effectiveness import defensive_weaknesses, offensive_strengths

MAJOR_WEAKNESS_THRESHOLD = 3
REDUNDANCY_THRESHOLD = 3
MISSING_COVERAGE_LIMIT = 3
MIN_TEAM_SIZE_FOR_COVERAGE = 3
MIN_TEAM_SIZE_FOR_ALL_CLEAR = 4


class TeamSynergyAnalyzer:
    """Flags shared weaknesses, coverage holes and type stacking in a roster."""

    def __init__(
        self,
        *,
        language: str = DEFAULT_LANGUAGE,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.language = resolve_language(language)
        self._debug_logger = debug_logger

    def _debug(self, message_text: str) -> None:
        if self._debug_logger:
            self._debug_logger(message_text)

    def analyze(self, team: Union[Team, Sequence[PokemonEntry]]) -> SynergyReport:
        members = list(team.pokemon if isinstance(team, Team) else team)
        if len(members) > MAX_TEAM_SIZE:
            raise ValueError(
                f"Team has {len(members)} Pokemon; at most {MAX_TEAM_SIZE} are allowed"
            )
        if not members:
            self._debug("Empty team; skipping synergy analysis")
            return SynergyReport(suggestions=[message("empty_team", self.language)])

        weakness_counts, coverage_counts = self._tally(members)
        suggestions = self._build_suggestions(members, weakness_counts, coverage_counts)
        return SynergyReport(
            weakness_counts=weakness_counts,
            coverage_counts=coverage_counts,
            suggestions=suggestions,
        )

    # ------------------------------------------------------------------
    # Tallies
    # ------------------------------------------------------------------
    def _tally(self, members: List[PokemonEntry]) -> tuple[Dict[str, int], Dict[str, int]]:
        weakness_counts: Dict[str, int] = {t: 0 for t in TYPE_ORDER}
        coverage_counts: Dict[str, int] = {t: 0 for t in TYPE_ORDER}
        for pokemon in members:
            weak = defensive_weaknesses(pokemon.types)
            strong = offensive_strengths(pokemon.types)
            self._debug(
                f"{pokemon.name}: weak to {len(weak)} type(s), hits {len(strong)} type(s) super-effectively"
            )
            for attack_type in weak:
                weakness_counts[attack_type] += 1
            for defender_type in strong:
                coverage_counts[defender_type] += 1
        return weakness_counts, coverage_counts

    @staticmethod
    def _membership_counts(members: Iterable[PokemonEntry]) -> Dict[str, int]:
        counts: Dict[str, int] = {t: 0 for t in TYPE_ORDER}
        for pokemon in members:
            for slug in dict.fromkeys(normalize_category(t) for t in pokemon.types):
                counts[slug] += 1
        return counts

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------
    def _build_suggestions(
        self,
        members: List[PokemonEntry],
        weakness_counts: Dict[str, int],
        coverage_counts: Dict[str, int],
    ) -> List[str]:
        suggestions: List[str] = []
        team_size = len(members)

        major = [t for t in TYPE_ORDER if weakness_counts[t] >= MAJOR_WEAKNESS_THRESHOLD]
        if major:
            self._debug(f"Major weaknesses: {major}")
            suggestions.append(
                message("major_weakness", self.language, types=self._join(major, ", "))
            )

        if team_size >= MIN_TEAM_SIZE_FOR_COVERAGE:
            missing = [t for t in TYPE_ORDER if coverage_counts[t] == 0]
            if missing:
                self._debug(f"No super-effective coverage against: {missing}")
                shown = missing[:MISSING_COVERAGE_LIMIT]
                suggestions.append(
                    message("missing_coverage", self.language, types=self._join(shown, ", "))
                )

        membership = self._membership_counts(members)
        redundant = [t for t in TYPE_ORDER if membership[t] >= REDUNDANCY_THRESHOLD]
        if redundant:
            self._debug(f"Redundant types: {redundant}")
            suggestions.append(
                message("redundancy", self.language, types=self._join(redundant, "/"))
            )

        if not suggestions and team_size >= MIN_TEAM_SIZE_FOR_ALL_CLEAR:
            suggestions.append(message("all_clear", self.language))
        return suggestions

    def _join(self, slugs: List[str], separator: str) -> str:
        return separator.join(category_names(slugs, self.language))


def analyze_team_synergy(
    team: Union[Team, Sequence[PokemonEntry]], *, language: str = DEFAULT_LANGUAGE
) -> SynergyReport:
    """Convenience wrapper around :class:`TeamSynergyAnalyzer`."""

    return TeamSynergyAnalyzer(language=language).analyze(team)
