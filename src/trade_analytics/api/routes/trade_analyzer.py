"""
Trade Analyzer API Routes

Endpoints for scoring trade proposals and inspecting roster depth and
positional scarcity.
"""

from typing import Annotated

from fastapi import APIRouter, Body

from trade_analytics.api.dependencies import ScoringEngineDep
from trade_analytics.models.league import League, Team
from trade_analytics.models.roster_depth import RosterDepth
from trade_analytics.models.trade import TradeProposal
from trade_analytics.models.trade_analysis import PositionalAnalysis, TradeAnalysis
from trade_analytics.services.roster_depth import RosterDepthAnalyzer

router = APIRouter()


@router.post(
    "/analyze",
    response_model=TradeAnalysis,
    summary="Analyze trade proposal",
    description="Score a trade for fairness, value, team impact, risk and schedule.",
)
def analyze_trade(
    engine: ScoringEngineDep,
    proposal: Annotated[TradeProposal, Body(description="Trade being proposed")],
    league: Annotated[League, Body(description="League context")],
    current_week: Annotated[int, Body(description="Current NFL week", ge=1, le=18)] = 1,
) -> TradeAnalysis:
    """Analyze a trade proposal from the proposing team's side."""
    return engine.analyze(proposal, league, current_week)


@router.post(
    "/roster-depth",
    response_model=RosterDepth,
    summary="Get roster depth",
    description="Split a roster into starting lineup and bench by projection.",
)
def get_roster_depth(
    team: Annotated[Team, Body(description="Team to analyze")],
    starter_slots: Annotated[
        dict[str, int] | None,
        Body(description="Position -> starter slots (defaults to QB1 RB2 WR2 TE1)"),
    ] = None,
) -> RosterDepth:
    """Get lineup and bench depth for a team."""
    return RosterDepthAnalyzer(starter_slots).analyze(team)


@router.post(
    "/positional",
    response_model=list[PositionalAnalysis],
    summary="Get positional scarcity",
    description="League-wide scarcity, replacement level and market value per position.",
)
def get_positional_scarcity(
    engine: ScoringEngineDep,
    league: Annotated[League, Body(description="League context")],
) -> list[PositionalAnalysis]:
    """Positional scarcity with no trade applied."""
    return engine.positional.analyze(league)
