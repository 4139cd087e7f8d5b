"""
Trade Analysis Models

Report produced by the trade scoring engine. Reports are immutable once built.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from trade_analytics.models.player import Player


class TradeGrade(str, Enum):
    """Letter grade on an 11-point scale."""

    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D = "D"
    F = "F"


class Recommendation(str, Enum):
    STRONG_ACCEPT = "strong_accept"
    ACCEPT = "accept"
    CONSIDER = "consider"
    REJECT = "reject"
    STRONG_REJECT = "strong_reject"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Outlook(str, Enum):
    BULLISH = "bullish"
    NEUTRAL = "neutral"
    BEARISH = "bearish"


class SuggestionType(str, Enum):
    ADD_PLAYER = "add_player"
    REMOVE_PLAYER = "remove_player"
    ADD_PICK = "add_pick"
    ADJUST_TERMS = "adjust_terms"


class _Report(BaseModel):
    model_config = ConfigDict(frozen=True)


class TeamImpactAnalysis(_Report):
    """How a trade changes one team."""

    team_id: str
    team_name: str
    overall_change: float = Field(ge=-100, le=100, description="-100 to +100 scale")
    position_changes: dict[str, float] = Field(
        description="Position -> net season projection change"
    )
    starting_lineup_change: float
    bench_depth_change: float
    weekly_projection_change: float
    playoff_odds_change: float
    championship_odds_change: float


class PositionalAnalysis(_Report):
    """League-wide view of one position in the context of the trade."""

    position: str
    scarcity_score: float = Field(ge=0, le=100)
    market_value: float
    future_outlook: Outlook
    replacement_level: float
    trade_impact: float


class RiskAssessment(_Report):
    overall_risk: RiskLevel
    injury_risk: float
    performance_volatility: float
    age_risk: float
    situational_risk: float
    risk_factors: list[str] = Field(default_factory=list)


class ScheduleAnalysis(_Report):
    bye_week_conflicts: int
    strength_of_schedule: float
    playoff_schedule_diff: float
    next_four_weeks_impact: float
    rest_of_season_outlook: str


class ImprovementSuggestion(_Report):
    type: SuggestionType
    description: str
    impact: float
    confidence: int
    suggestion: str


class AlternativeOffer(_Report):
    id: str
    description: str
    from_players: list[Player]
    to_players: list[Player]
    expected_improvement: float
    reasoning: str


class TradeAnalysis(_Report):
    """Complete trade analysis."""

    overall_grade: TradeGrade
    fairness_score: int = Field(ge=0, le=100, description="50 is perfectly fair")
    recommendation: Recommendation
    confidence: int = Field(ge=50, le=95)

    # Value analysis
    current_value_diff: float
    projected_value_diff: float
    season_end_value_diff: float

    # Team impact
    from_team_impact: TeamImpactAnalysis
    to_team_impact: TeamImpactAnalysis

    # Advanced metrics
    positional_analysis: list[PositionalAnalysis]
    risk_assessment: RiskAssessment
    schedule_analysis: ScheduleAnalysis

    # Suggestions
    improvement_suggestions: list[ImprovementSuggestion] = Field(default_factory=list)
    alternative_offers: list[AlternativeOffer] = Field(default_factory=list)

    # Reasoning
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
