"""Pydantic models and schemas."""

from trade_analytics.models.league import DEFAULT_STARTER_SLOTS, League, Team, TeamRecord
from trade_analytics.models.player import Player, PlayerStats, Position
from trade_analytics.models.roster_depth import PositionDepth, RosterDepth
from trade_analytics.models.trade import DraftPick, TradeProposal, TradeStatus
from trade_analytics.models.trade_analysis import (
    AlternativeOffer,
    ImprovementSuggestion,
    Outlook,
    PositionalAnalysis,
    Recommendation,
    RiskAssessment,
    RiskLevel,
    ScheduleAnalysis,
    SuggestionType,
    TeamImpactAnalysis,
    TradeAnalysis,
    TradeGrade,
)

__all__ = [
    # League
    "DEFAULT_STARTER_SLOTS",
    "League",
    "Team",
    "TeamRecord",
    # Player
    "Player",
    "PlayerStats",
    "Position",
    # Roster depth
    "PositionDepth",
    "RosterDepth",
    # Trade
    "DraftPick",
    "TradeProposal",
    "TradeStatus",
    # Trade analysis
    "AlternativeOffer",
    "ImprovementSuggestion",
    "Outlook",
    "PositionalAnalysis",
    "Recommendation",
    "RiskAssessment",
    "RiskLevel",
    "ScheduleAnalysis",
    "SuggestionType",
    "TeamImpactAnalysis",
    "TradeAnalysis",
    "TradeGrade",
]
