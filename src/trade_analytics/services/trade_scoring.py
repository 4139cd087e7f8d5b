"""
Trade Scoring Engine

Scores a trade proposal for fairness, value, team impact, risk and schedule,
and turns those scores into a grade, recommendation and written feedback.
Every step is a deterministic function of the proposal and league context.
"""

import logging
import math

from trade_analytics.config import Settings, get_settings
from trade_analytics.models.league import League, Team
from trade_analytics.models.player import Player, Position
from trade_analytics.models.trade import TradeProposal
from trade_analytics.models.trade_analysis import (
    AlternativeOffer,
    ImprovementSuggestion,
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
from trade_analytics.services.draft_picks import DraftPickValuator
from trade_analytics.services.positional import PositionalScarcityService
from trade_analytics.services.roster_depth import RosterDepthAnalyzer

logger = logging.getLogger(__name__)

# (minimum score, grade), checked top down
GRADE_THRESHOLDS: list[tuple[float, TradeGrade]] = [
    (90, TradeGrade.A_PLUS),
    (85, TradeGrade.A),
    (80, TradeGrade.A_MINUS),
    (75, TradeGrade.B_PLUS),
    (70, TradeGrade.B),
    (65, TradeGrade.B_MINUS),
    (60, TradeGrade.C_PLUS),
    (55, TradeGrade.C),
    (50, TradeGrade.C_MINUS),
    (40, TradeGrade.D),
]

AGE_RISK_BASELINE = 25
OLD_PLAYER_AGE = 30
OLD_RB_AGE = 28

SEASON_OUTLOOKS = {
    "favorable": "Favorable matchups ahead",
    "challenging": "Challenging schedule remaining",
    "mixed": "Mixed outlook with some tough matchups",
    "playoffs": "Strong playoff schedule",
    "difficult": "Difficult upcoming stretch",
}


def _average(values: list[float]) -> float:
    """Mean of ``values``; 0.0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves up (40.5 -> 41)."""
    return math.floor(value + 0.5)


def grade_for_score(score: float) -> TradeGrade:
    """Map a grade score to its letter."""
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return TradeGrade.F


class TradeScoringEngine:
    """
    Engine for trade proposal analysis.

    Analyzes trades from multiple angles:
    - Auction value and projection differentials
    - Fairness, grade, recommendation and confidence
    - Per-team impact (lineup, bench depth, playoff odds)
    - Positional scarcity, risk and schedule
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.pick_valuator = DraftPickValuator()
        self.positional = PositionalScarcityService(
            season_weeks=self.settings.season_weeks,
            default_age=self.settings.default_player_age,
        )

    def analyze(
        self, proposal: TradeProposal, league: League, current_week: int = 1
    ) -> TradeAnalysis:
        """
        Analyze a trade proposal from the proposing (from) team's side.

        Args:
            proposal: Players and picks exchanged between two teams
            league: League context (rosters, player pool, starter slots)
            current_week: Week the trade would take effect

        Returns:
            Complete trade analysis
        """
        from_total = self._auction_total(proposal.from_players)
        to_total = self._auction_total(proposal.to_players)
        value_difference = to_total - from_total

        # Every rule below sees the same integer score the report carries
        fairness = round_half_up(self.calculate_fairness(proposal, value_difference))

        depth = RosterDepthAnalyzer(league.starter_slots)
        from_team_impact = self.analyze_team_impact(
            proposal.from_team, proposal.from_players, proposal.to_players, depth, league
        )
        to_team_impact = self.analyze_team_impact(
            proposal.to_team, proposal.to_players, proposal.from_players, depth, league
        )

        positional_analysis = self.analyze_positional_impact(proposal, league)
        risk = self.assess_risk(proposal)
        schedule = self.analyze_schedule(proposal, league, current_week)

        recommendation = self.recommend(fairness, value_difference, risk)
        grade = self.calculate_grade(fairness, value_difference, risk)
        confidence = self.calculate_confidence(fairness, risk)

        logger.debug(
            "Trade %s: value diff %.1f, fairness %d, grade %s, %s",
            proposal.id,
            value_difference,
            fairness,
            grade.value,
            recommendation.value,
        )

        return TradeAnalysis(
            overall_grade=grade,
            fairness_score=fairness,
            recommendation=recommendation,
            confidence=confidence,
            current_value_diff=value_difference,
            projected_value_diff=self.projected_value_diff(proposal),
            season_end_value_diff=self.season_end_value_diff(proposal),
            from_team_impact=from_team_impact,
            to_team_impact=to_team_impact,
            positional_analysis=positional_analysis,
            risk_assessment=risk,
            schedule_analysis=schedule,
            improvement_suggestions=self.suggest_improvements(proposal, value_difference),
            alternative_offers=self.alternative_offers(proposal),
            strengths=self.identify_strengths(proposal, value_difference),
            weaknesses=self.identify_weaknesses(proposal, risk),
            warnings=self.generate_warnings(proposal, risk, schedule),
        )

    # ------------------------------------------------------------------
    # Fairness
    # ------------------------------------------------------------------

    def calculate_fairness(self, proposal: TradeProposal, value_difference: float) -> float:
        """Fairness on a 0-100 scale where 50 is perfectly fair."""
        fairness = 50.0

        # Value differential impact, capped
        fairness -= min(30.0, abs(value_difference) * 1.5)

        fairness += self._position_scarcity_adjustment(proposal)
        fairness += self._team_need_adjustment(proposal)
        fairness -= self._age_risk_adjustment(proposal)
        fairness += self._future_value_adjustment(proposal)

        return _clamp(fairness, 0.0, 100.0)

    def _position_scarcity_adjustment(self, proposal: TradeProposal) -> float:
        # Not modelled yet: contributes nothing to fairness
        return 0.0

    def _team_need_adjustment(self, proposal: TradeProposal) -> float:
        # Not modelled yet: contributes nothing to fairness
        return 0.0

    def _future_value_adjustment(self, proposal: TradeProposal) -> float:
        # Not modelled yet: keeper/dynasty value does not move fairness
        return 0.0

    def _age_risk_adjustment(self, proposal: TradeProposal) -> float:
        return sum(2.0 for p in proposal.all_players if self._age(p) > OLD_PLAYER_AGE)

    # ------------------------------------------------------------------
    # Value differentials
    # ------------------------------------------------------------------

    def projected_value_diff(self, proposal: TradeProposal) -> float:
        from_projected = self._projection_total(proposal.from_players)
        to_projected = self._projection_total(proposal.to_players)
        return (to_projected - from_projected) * 0.8

    def season_end_value_diff(self, proposal: TradeProposal) -> float:
        """Keeper/dynasty value differential, including draft picks."""
        player_diff = (
            self._auction_total(proposal.to_players) - self._auction_total(proposal.from_players)
        ) * 0.9
        pick_diff = self.pick_valuator.total_value(
            proposal.to_draft_picks
        ) - self.pick_valuator.total_value(proposal.from_draft_picks)
        return player_diff + pick_diff

    # ------------------------------------------------------------------
    # Team impact
    # ------------------------------------------------------------------

    def analyze_team_impact(
        self,
        team: Team,
        players_out: list[Player],
        players_in: list[Player],
        depth: RosterDepthAnalyzer | None = None,
        league: League | None = None,
    ) -> TeamImpactAnalysis:
        """
        How the trade changes one team.

        Bench depth uses the team's own roster, falling back to the league's
        copy of the team when the proposal only names it.
        """
        depth = depth or RosterDepthAnalyzer()
        weeks = self.settings.season_weeks

        out_value = self._projection_total(players_out)
        in_value = self._projection_total(players_in)
        net_change = in_value - out_value

        roster = team.roster
        if not roster and league is not None:
            league_team = league.get_team(team.id)
            if league_team is not None:
                roster = league_team.roster

        bench_change = depth.bench_depth_change(roster, players_out, players_in)

        return TeamImpactAnalysis(
            team_id=str(team.id),
            team_name=team.name,
            overall_change=_clamp(net_change * 0.1, -100.0, 100.0),
            position_changes=self._position_changes(players_out, players_in),
            starting_lineup_change=net_change,
            bench_depth_change=bench_change / weeks,
            weekly_projection_change=net_change / weeks,
            playoff_odds_change=net_change * 0.2,
            championship_odds_change=net_change * 0.1,
        )

    def _position_changes(
        self, players_out: list[Player], players_in: list[Player]
    ) -> dict[str, float]:
        changes: dict[str, float] = {}
        for player in players_in:
            pos = player.position.value
            changes[pos] = changes.get(pos, 0.0) + player.projection
        for player in players_out:
            pos = player.position.value
            changes[pos] = changes.get(pos, 0.0) - player.projection
        return changes

    # ------------------------------------------------------------------
    # Positional, risk and schedule
    # ------------------------------------------------------------------

    def analyze_positional_impact(
        self, proposal: TradeProposal, league: League
    ) -> list[PositionalAnalysis]:
        return self.positional.analyze(league, proposal.from_players, proposal.to_players)

    def assess_risk(self, proposal: TradeProposal) -> RiskAssessment:
        """Injury, age, volatility and situational risk of everyone involved."""
        players = proposal.all_players

        injury_risk = _average([self._injury_risk(p) for p in players])
        average_age = _average([self._age(p) for p in players])
        age_risk = max(0.0, (average_age - AGE_RISK_BASELINE) * 4)
        performance_risk = self.settings.performance_volatility
        situational_risk = self.settings.situational_risk

        average_risk = (injury_risk + age_risk + performance_risk + situational_risk) / 4
        if average_risk > 60:
            overall = RiskLevel.HIGH
        elif average_risk > 30:
            overall = RiskLevel.MEDIUM
        else:
            overall = RiskLevel.LOW

        return RiskAssessment(
            overall_risk=overall,
            injury_risk=injury_risk,
            performance_volatility=performance_risk,
            age_risk=age_risk,
            situational_risk=situational_risk,
            risk_factors=self._risk_factors(players, average_age),
        )

    def _injury_risk(self, player: Player) -> float:
        risk = 10.0
        if self._age(player) > OLD_PLAYER_AGE:
            risk += 10
        if player.position == Position.RB:
            risk += 5
        return risk

    def _risk_factors(self, players: list[Player], average_age: float) -> list[str]:
        factors = []
        if average_age > 29:
            factors.append("Player age concerns")
        if any(p.position == Position.RB and self._age(p) > OLD_RB_AGE for p in players):
            factors.append("RB age concerns")
        if len(players) > 3:
            factors.append("Complex multi-player trade")
        return factors

    def analyze_schedule(
        self, proposal: TradeProposal, league: League, current_week: int
    ) -> ScheduleAnalysis:
        """Bye conflicts and near-term / playoff projection swings."""
        next_weeks = range(current_week, current_week + 4)
        playoff_weeks = range(league.playoff_week_start, self.settings.season_weeks + 1)

        near_term = self._weekly_swing(proposal, next_weeks)
        playoff_diff = self._weekly_swing(proposal, playoff_weeks)

        return ScheduleAnalysis(
            bye_week_conflicts=self.bye_week_conflicts(proposal.all_players),
            strength_of_schedule=self.settings.strength_of_schedule,
            playoff_schedule_diff=playoff_diff,
            next_four_weeks_impact=near_term,
            rest_of_season_outlook=self._season_outlook(near_term, playoff_diff),
        )

    @staticmethod
    def bye_week_conflicts(players: list[Player]) -> int:
        return max(0, len(players) - len({p.bye for p in players}))

    def _weekly_swing(self, proposal: TradeProposal, weeks: range) -> float:
        """Weekly projections gained minus lost over ``weeks``."""

        def total(players: list[Player]) -> float:
            return sum(p.stats.weekly_projections.get(week, 0.0) for p in players for week in weeks)

        return total(proposal.to_players) - total(proposal.from_players)

    def _season_outlook(self, near_term: float, playoff_diff: float) -> str:
        if near_term > 0 and playoff_diff > 0:
            key = "playoffs" if playoff_diff >= near_term else "favorable"
        elif near_term > 0:
            key = "favorable"
        elif near_term < 0 and playoff_diff < 0:
            key = "challenging"
        elif near_term < 0:
            key = "difficult"
        elif playoff_diff > 0:
            key = "playoffs"
        else:
            key = "mixed"
        return SEASON_OUTLOOKS[key]

    # ------------------------------------------------------------------
    # Verdict
    # ------------------------------------------------------------------

    def recommend(
        self, fairness: float, value_difference: float, risk: RiskAssessment
    ) -> Recommendation:
        """First matching rule wins."""
        diff = abs(value_difference)

        if fairness > 75 and diff < 5 and risk.overall_risk == RiskLevel.LOW:
            return Recommendation.STRONG_ACCEPT
        if fairness > 60 and diff < 10:
            return Recommendation.ACCEPT
        if fairness > 40 and diff < 15:
            return Recommendation.CONSIDER
        if fairness < 25 or diff > 20:
            return Recommendation.STRONG_REJECT
        return Recommendation.REJECT

    def calculate_grade(
        self, fairness: float, value_difference: float, risk: RiskAssessment
    ) -> TradeGrade:
        score = fairness - abs(value_difference) * 2
        score -= self._risk_penalty(risk, high=15, medium=5)
        return grade_for_score(score)

    def calculate_confidence(self, fairness: float, risk: RiskAssessment) -> int:
        confidence = 85

        # Clear-cut trades either way
        if fairness > 80 or fairness < 20:
            confidence += 10

        confidence -= self._risk_penalty(risk, high=15, medium=5)
        return int(_clamp(confidence, 50, 95))

    @staticmethod
    def _risk_penalty(risk: RiskAssessment, high: int, medium: int) -> int:
        if risk.overall_risk == RiskLevel.HIGH:
            return high
        if risk.overall_risk == RiskLevel.MEDIUM:
            return medium
        return 0

    # ------------------------------------------------------------------
    # Suggestions and reasoning
    # ------------------------------------------------------------------

    def suggest_improvements(
        self, proposal: TradeProposal, value_difference: float
    ) -> list[ImprovementSuggestion]:
        suggestions = []
        gap = abs(value_difference)

        if gap > 10:
            gaining = value_difference > 0
            suggestions.append(
                ImprovementSuggestion(
                    type=SuggestionType.REMOVE_PLAYER if gaining else SuggestionType.ADD_PLAYER,
                    description=f"{'Remove a player' if gaining else 'Add a player'} to balance trade value",
                    impact=gap * 0.8,
                    confidence=85,
                    suggestion=(
                        f"Consider {'removing' if gaining else 'adding'} a mid-tier player "
                        "to achieve better balance"
                    ),
                )
            )

            if not proposal.has_picks:
                round_num = self.pick_valuator.closest_round(gap)
                suggestions.append(
                    ImprovementSuggestion(
                        type=SuggestionType.ADD_PICK,
                        description=f"Add a round {round_num} draft pick to balance trade value",
                        impact=gap * 0.5,
                        confidence=60,
                        suggestion=(
                            f"Consider {'including' if gaining else 'asking for'} a round "
                            f"{round_num} pick to close the {gap:.0f}-point value gap"
                        ),
                    )
                )

        imbalance = self._position_imbalance(proposal)
        if imbalance:
            suggestions.append(
                ImprovementSuggestion(
                    type=SuggestionType.ADD_PLAYER,
                    description=f"Address {imbalance} position imbalance",
                    impact=15,
                    confidence=70,
                    suggestion=f"Consider adding depth at {imbalance} to maintain roster balance",
                )
            )

        return suggestions

    def _position_imbalance(self, proposal: TradeProposal) -> str | None:
        rb_out = sum(1 for p in proposal.from_players if p.position == Position.RB)
        rb_in = sum(1 for p in proposal.to_players if p.position == Position.RB)
        if rb_out > rb_in + 1:
            return "RB"
        return None

    def alternative_offers(self, proposal: TradeProposal) -> list[AlternativeOffer]:
        alternatives = []

        if len(proposal.from_players) > 1 and len(proposal.to_players) > 1:
            alternatives.append(
                AlternativeOffer(
                    id="simplified",
                    description="Simplified core player trade",
                    from_players=[proposal.from_players[0]],
                    to_players=[proposal.to_players[0]],
                    expected_improvement=20,
                    reasoning="Focuses on core value exchange while reducing complexity",
                )
            )

        alternatives.append(
            AlternativeOffer(
                id="enhanced",
                description="Enhanced trade with additional value",
                from_players=list(proposal.from_players),
                to_players=list(proposal.to_players),
                expected_improvement=15,
                reasoning="Adds complementary pieces to improve overall team balance",
            )
        )

        return alternatives

    def identify_strengths(self, proposal: TradeProposal, value_difference: float) -> list[str]:
        strengths = []

        if abs(value_difference) < 5:
            strengths.append("Well-balanced trade value")
        if value_difference > 5:
            strengths.append("Favorable value for your team")

        positions = {p.position for p in proposal.all_players}
        if len(positions) <= 2:
            strengths.append("Position-focused trade maintains roster balance")

        return strengths

    def identify_weaknesses(self, proposal: TradeProposal, risk: RiskAssessment) -> list[str]:
        weaknesses = []

        if risk.overall_risk == RiskLevel.HIGH:
            weaknesses.append("High risk factors involved")
        if proposal.player_count > 4:
            weaknesses.append("Complex multi-player trade increases uncertainty")
        if _average([self._age(p) for p in proposal.all_players]) > 29:
            weaknesses.append("Involves older players with limited upside")

        return weaknesses

    def generate_warnings(
        self, proposal: TradeProposal, risk: RiskAssessment, schedule: ScheduleAnalysis
    ) -> list[str]:
        warnings = []

        if risk.injury_risk > 30:
            warnings.append("High injury risk - monitor player health reports")
        if schedule.bye_week_conflicts > 1:
            warnings.append("Multiple bye week conflicts may impact lineup options")

        return warnings

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _age(self, player: Player) -> int:
        return player.age if player.age is not None else self.settings.default_player_age

    @staticmethod
    def _auction_total(players: list[Player]) -> float:
        return sum(p.auction_value for p in players)

    @staticmethod
    def _projection_total(players: list[Player]) -> float:
        return sum(p.projection for p in players)


def analyze_trade(
    proposal: TradeProposal, league: League, current_week: int = 1
) -> TradeAnalysis:
    """Analyze a trade with the default settings."""
    return TradeScoringEngine().analyze(proposal, league, current_week)
