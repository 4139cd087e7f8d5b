"""
Fantasy Trade Analytics CLI

Command-line interface for scoring trades from JSON files
without running the API server.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from trade_analytics.config import get_settings
from trade_analytics.logging_utils import setup_logging
from trade_analytics.models.league import League, Team
from trade_analytics.models.trade import TradeProposal
from trade_analytics.models.trade_analysis import TradeAnalysis
from trade_analytics.services.roster_depth import RosterDepthAnalyzer
from trade_analytics.services.trade_scoring import TradeScoringEngine

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when an input file cannot be read or validated."""


def load_model(path: str, model: type[BaseModel]) -> Any:
    """Load and validate a JSON file as ``model``."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
        return model.model_validate_json(raw)
    except OSError as e:
        raise InputError(f"Could not read {path}: {e}") from e
    except ValidationError as e:
        raise InputError(f"Invalid {model.__name__} in {path}:\n{e}") from e


def format_analysis(analysis: TradeAnalysis, proposal: TradeProposal) -> str:
    """Human-readable summary of a trade analysis."""
    lines = [
        f"📊 Trade {proposal.id}: {proposal.from_team.name} ⇄ {proposal.to_team.name}",
        "",
        f"  {proposal.from_team.name} gives: "
        + (", ".join(p.name for p in proposal.from_players) or "nothing"),
        f"  {proposal.from_team.name} gets:  "
        + (", ".join(p.name for p in proposal.to_players) or "nothing"),
        "",
        f"Grade:          {analysis.overall_grade.value}",
        f"Fairness:       {analysis.fairness_score}/100",
        f"Recommendation: {analysis.recommendation.value.replace('_', ' ').title()}",
        f"Confidence:     {analysis.confidence}%",
        f"Risk:           {analysis.risk_assessment.overall_risk.value}",
        "",
        f"Value diff:     {analysis.current_value_diff:+.1f} now, "
        f"{analysis.projected_value_diff:+.1f} projected, "
        f"{analysis.season_end_value_diff:+.1f} season end",
    ]

    for impact in (analysis.from_team_impact, analysis.to_team_impact):
        lines.append(
            f"  {impact.team_name:<25} {impact.weekly_projection_change:+.2f} pts/week, "
            f"bench {impact.bench_depth_change:+.2f} pts/week"
        )

    lines.append("")
    lines.append(f"Schedule: {analysis.schedule_analysis.rest_of_season_outlook}")

    for title, items in (
        ("Strengths", analysis.strengths),
        ("Weaknesses", analysis.weaknesses),
        ("Warnings", analysis.warnings),
        ("Risk factors", analysis.risk_assessment.risk_factors),
    ):
        if items:
            lines.append(f"\n{title}:")
            lines.extend(f"  - {item}" for item in items)

    if analysis.improvement_suggestions:
        lines.append("\nSuggestions:")
        lines.extend(f"  - {s.suggestion}" for s in analysis.improvement_suggestions)

    return "\n".join(lines)


def cmd_analyze(args: argparse.Namespace) -> int:
    proposal = load_model(args.proposal, TradeProposal)
    league = load_model(args.league, League)
    week = args.week or league.current_week
    logger.debug(
        "Loaded proposal %s (%d players) and league %s", proposal.id, proposal.player_count, league.id
    )

    engine = TradeScoringEngine(get_settings())
    analysis = engine.analyze(proposal, league, week)

    if args.json:
        print(analysis.model_dump_json(indent=2))
    else:
        print(format_analysis(analysis, proposal))
    return 0


def parse_slots(value: str) -> dict[str, int]:
    """Parse ``QB=1,RB=2`` into a starter slot map."""
    slots = {}
    for item in filter(None, (part.strip() for part in value.split(","))):
        pos, _, count = item.partition("=")
        try:
            n = int(count)
        except ValueError:
            n = -1
        if n < 0:
            raise argparse.ArgumentTypeError(f"invalid slot '{item}', expected POS=N")
        slots[pos.strip().upper()] = n
    return slots


def cmd_depth(args: argparse.Namespace) -> int:
    team = load_model(args.team, Team)
    depth = RosterDepthAnalyzer(args.slots).analyze(team)

    print(f"📊 {depth.team_name} - Roster Depth\n")
    print(f"{'Pos':<5} {'Slots':<6} {'Lineup':<10} {'Bench':<10} Starters")
    print("-" * 60)
    for pos in depth.positions:
        print(
            f"{pos.position:<5} {pos.starter_slots:<6} {pos.lineup_projection:<10.1f} "
            f"{pos.bench_projection:<10.1f} {', '.join(pos.starters)}"
        )
    if depth.open_slots:
        print(f"\nOpen starter slots: {', '.join(depth.open_slots)}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from trade_analytics.main import run

    run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fantasy Football Trade Analytics CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score a trade
  trade-cli analyze proposal.json --league league.json --week 6

  # Full JSON report
  trade-cli analyze proposal.json --league league.json --json

  # Lineup and bench depth for a team
  trade-cli depth team.json

  # Depth with custom starter slots
  trade-cli depth team.json --slots QB=1,RB=3,WR=3,TE=1

  # Run the API server
  trade-cli serve
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a trade proposal")
    analyze_parser.add_argument("proposal", help="Trade proposal JSON file")
    analyze_parser.add_argument(
        "--league", "-l", required=True, help="League context JSON file"
    )
    analyze_parser.add_argument(
        "--week", "-w",
        type=int,
        default=None,
        help="Current NFL week (default: league current_week)",
    )
    analyze_parser.add_argument(
        "--json", action="store_true", help="Print the full report as JSON"
    )
    analyze_parser.set_defaults(handler=cmd_analyze)

    # depth command
    depth_parser = subparsers.add_parser("depth", help="Show roster lineup/bench depth")
    depth_parser.add_argument("team", help="Team JSON file")
    depth_parser.add_argument(
        "--slots", "-s",
        type=parse_slots,
        default=None,
        help="Starter slots as POS=N pairs, e.g. QB=1,RB=2 (default: QB=1,RB=2,WR=2,TE=1)",
    )
    depth_parser.set_defaults(handler=cmd_depth)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.set_defaults(handler=cmd_serve)

    return parser


def cli_main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging("DEBUG" if args.verbose else get_settings().log_level)

    try:
        return args.handler(args)
    except InputError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


def run_cli():
    """Entry point for CLI."""
    sys.exit(cli_main())


if __name__ == "__main__":
    run_cli()
