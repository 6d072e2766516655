"""Command-line interface for the pokedex type, evolution and team tools."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pokedex_core.analysis import (
    TeamSynergyAnalyzer,
    defensive_multipliers,
    defensive_weaknesses,
    resolve_evolution_chain,
    type_profile,
)
from pokedex_core.config import Settings
from pokedex_core.data import SUPPORTED_LANGUAGES, category_name, multiplier, sort_categories
from pokedex_core.errors import PokedexCoreError
from pokedex_core.parsers import parse_evolution_chain, parse_team


def _read_json(path: str) -> Any:
    if path == "-":
        data = sys.stdin.read()
        if not data.strip():
            raise SystemExit("No JSON provided on stdin.")
    else:
        file_path = Path(path)
        if not file_path.exists():
            raise SystemExit(f"File not found: {file_path}")
        data = file_path.read_text(encoding="utf-8")
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def _names(slugs: list[str], language: str) -> str:
    return ", ".join(category_name(s, language) for s in slugs) or "-"


def _cmd_matchup(args: argparse.Namespace) -> Any:
    value = multiplier(args.attacker, args.defender)
    if args.json:
        return {"attacker": args.attacker, "defender": args.defender, "multiplier": value}
    return f"{args.attacker.title()} vs {args.defender.title()} -> {value}x"


def _cmd_weaknesses(args: argparse.Namespace) -> Any:
    weak = sort_categories(defensive_weaknesses(args.types))
    totals = defensive_multipliers(args.types)
    if args.json:
        return {"types": args.types, "weaknesses": {t: totals[t] for t in weak}}
    lines = [f"Weak to ({'/'.join(t.title() for t in args.types)}):"]
    lines.extend(f"  - {category_name(t, args.language)} ({totals[t]}x)" for t in weak)
    if not weak:
        lines.append("  - none")
    return "\n".join(lines)


def _cmd_profile(args: argparse.Namespace) -> Any:
    profile = type_profile(args.type)
    if args.json:
        return asdict(profile)
    lang = args.language
    off, dfn = profile.offensive, profile.defensive
    return "\n".join(
        [
            f"{category_name(profile.category, lang)}",
            "Offense:",
            f"  strong against: {_names(off.strong_against, lang)}",
            f"  weak against: {_names(off.weak_against, lang)}",
            f"  no effect against: {_names(off.no_effect_against, lang)}",
            "Defense:",
            f"  weak from: {_names(dfn.weak_from, lang)}",
            f"  resistant to: {_names(dfn.resistant_to, lang)}",
            f"  immune to: {_names(dfn.immune_to, lang)}",
        ]
    )


def _cmd_team(args: argparse.Namespace) -> Any:
    payload = _read_json(args.team_file)
    team = parse_team(payload)
    _debug_print(args.debug, f"Parsed team with {len(team)} Pokémon")
    analyzer = TeamSynergyAnalyzer(
        language=args.language,
        debug_logger=lambda msg: _debug_print(args.debug, msg),
    )
    report = analyzer.analyze(team)
    if args.json:
        return asdict(report)
    lines: list[str] = []
    shared = {t: n for t, n in report.weakness_counts.items() if n}
    if shared:
        lines.append("Weaknesses:")
        for t, count in sorted(shared.items(), key=lambda kv: kv[1], reverse=True):
            lines.append(f"  - {category_name(t, args.language)}: {count}")
        lines.append("")
    lines.append("Suggestions:")
    lines.extend(f"  - {s}" for s in report.suggestions)
    return "\n".join(lines)


def _cmd_evolution(args: argparse.Namespace) -> Any:
    payload = _read_json(args.chain_file)
    root = parse_evolution_chain(payload, language=args.language)
    stages = resolve_evolution_chain(root, args.target)
    _debug_print(args.debug, f"Resolved {len(stages)} stage(s) for #{args.target}")
    if args.json:
        return [asdict(stage) for stage in stages]
    parts = []
    for stage in stages:
        label = stage.name or f"#{stage.id}"
        parts.append(f"--[{stage.condition}]--> {label}" if stage.condition else label)
    return " ".join(parts)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pokedex type, evolution and team tools")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        default=settings.language,
        help=f"Display language (default: {settings.language})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.debug,
        help="Print debug progress information to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    matchup = sub.add_parser("matchup", help="Multiplier of one type attacking another")
    matchup.add_argument("attacker")
    matchup.add_argument("defender")
    matchup.set_defaults(handler=_cmd_matchup)

    weak = sub.add_parser("weaknesses", help="Weaknesses of a one- or two-type Pokémon")
    weak.add_argument("types", nargs="+", metavar="TYPE")
    weak.set_defaults(handler=_cmd_weaknesses)

    profile = sub.add_parser("profile", help="Offensive and defensive profile of one type")
    profile.add_argument("type")
    profile.set_defaults(handler=_cmd_profile)

    team = sub.add_parser("team", help="Synergy analysis of a roster JSON file")
    team.add_argument("team_file", help="Path to roster JSON or '-' to read from stdin")
    team.set_defaults(handler=_cmd_team)

    evolution = sub.add_parser("evolution", help="Resolve a PokeAPI evolution chain")
    evolution.add_argument("chain_file", help="Path to evolution-chain JSON or '-'")
    evolution.add_argument("--target", type=int, required=True, help="Species id to show")
    evolution.set_defaults(handler=_cmd_evolution)
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    args = _build_parser(settings).parse_args(argv)
    _debug_print(args.debug, f"Arguments parsed: {args}")
    try:
        result = args.handler(args)
    except (PokedexCoreError, ValueError) as exc:
        raise SystemExit(f"Error: {exc}") from exc

    if args.json:
        json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
