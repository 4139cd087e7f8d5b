"""Business logic services."""

from trade_analytics.services.draft_picks import DraftPickValuator
from trade_analytics.services.positional import PositionalScarcityService
from trade_analytics.services.roster_depth import RosterDepthAnalyzer
from trade_analytics.services.trade_scoring import (
    TradeScoringEngine,
    analyze_trade,
    grade_for_score,
)

__all__ = [
    "DraftPickValuator",
    "PositionalScarcityService",
    "RosterDepthAnalyzer",
    "TradeScoringEngine",
    "analyze_trade",
    "grade_for_score",
]
