"""
Positional Scarcity Service

League-wide depth, replacement level and market value per position,
computed over the league player pool with pandas.
"""

import numpy as np
import pandas as pd

from trade_analytics.models.league import League
from trade_analytics.models.player import Player
from trade_analytics.models.trade_analysis import Outlook, PositionalAnalysis

ANALYZED_POSITIONS = ["QB", "RB", "WR", "TE"]

# Average age gap (years) between incoming and outgoing players that moves
# the outlook off neutral
OUTLOOK_AGE_GAP = 2


class PositionalScarcityService:
    """
    Service for positional scarcity analysis.

    Provides per position:
    - Replacement level (weekly points of the first non-starter)
    - Scarcity score (pool depth versus league-wide starter demand)
    - Market value (mean auction value)
    - Trade impact and future outlook for the proposing team
    """

    def __init__(self, season_weeks: int = 17, default_age: int = 25):
        self.season_weeks = season_weeks
        self.default_age = default_age

    def build_pool(self, league: League, extra: list[Player] | None = None) -> pd.DataFrame:
        """Player pool as a DataFrame, de-duplicated by player id."""
        players = list(league.player_pool()) + list(extra or [])
        if not players:
            return pd.DataFrame(columns=["id", "position", "projection", "auction_value", "age"])

        df = pd.DataFrame(
            [
                {
                    "id": p.id,
                    "position": p.position.value,
                    "projection": p.projection,
                    "auction_value": p.auction_value,
                    "age": p.age if p.age is not None else self.default_age,
                }
                for p in players
            ]
        )
        return df.drop_duplicates(subset="id", keep="first")

    def analyze(
        self,
        league: League,
        players_out: list[Player] | None = None,
        players_in: list[Player] | None = None,
    ) -> list[PositionalAnalysis]:
        """
        Analyze each skill position.

        Args:
            league: League context (player pool, team count, starter slots)
            players_out: Players the proposing team gives away
            players_in: Players the proposing team receives

        Returns:
            One PositionalAnalysis per analyzed position
        """
        players_out = players_out or []
        players_in = players_in or []
        pool = self.build_pool(league, players_out + players_in)
        # A trade always involves two teams, even when the league lists fewer
        teams = max(league.num_teams, 2)

        results = []
        for pos in ANALYZED_POSITIONS:
            pos_df = pool[pool["position"] == pos].sort_values("projection", ascending=False)
            demand = max(1, teams * league.starter_slots.get(pos, 0))

            out_pos = [p for p in players_out if p.position.value == pos]
            in_pos = [p for p in players_in if p.position.value == pos]

            results.append(
                PositionalAnalysis(
                    position=pos,
                    scarcity_score=round(self._scarcity(len(pos_df), demand), 1),
                    market_value=round(self._market_value(pos_df), 2),
                    future_outlook=self._outlook(out_pos, in_pos),
                    replacement_level=round(self._replacement_level(pos_df, demand), 2),
                    trade_impact=round(
                        (sum(p.projection for p in in_pos) - sum(p.projection for p in out_pos))
                        / self.season_weeks,
                        2,
                    ),
                )
            )

        return results

    def _scarcity(self, count: int, demand: int) -> float:
        return float(np.clip(100 * (1 - count / (2 * demand)), 0, 100))

    def _market_value(self, pos_df: pd.DataFrame) -> float:
        if pos_df.empty:
            return 0.0
        return float(pos_df["auction_value"].mean())

    def _replacement_level(self, pos_df: pd.DataFrame, demand: int) -> float:
        """Weekly projection of the best player outside league-wide starters."""
        if pos_df.empty:
            return 0.0
        index = min(demand, len(pos_df) - 1)
        return float(pos_df["projection"].iloc[index]) / self.season_weeks

    def _outlook(self, players_out: list[Player], players_in: list[Player]) -> Outlook:
        if not players_out or not players_in:
            return Outlook.NEUTRAL

        avg_out = np.mean([self._age(p) for p in players_out])
        avg_in = np.mean([self._age(p) for p in players_in])

        if avg_out - avg_in >= OUTLOOK_AGE_GAP:
            return Outlook.BULLISH
        if avg_in - avg_out >= OUTLOOK_AGE_GAP:
            return Outlook.BEARISH
        return Outlook.NEUTRAL

    def _age(self, player: Player) -> int:
        return player.age if player.age is not None else self.default_age
