"""
Roster Depth Service

Splits a roster into starting lineup and bench by projection and measures
how a trade moves bench strength.
"""

from collections import defaultdict

from trade_analytics.models.league import DEFAULT_STARTER_SLOTS, Team
from trade_analytics.models.player import Player
from trade_analytics.models.roster_depth import PositionDepth, RosterDepth


class RosterDepthAnalyzer:
    """
    Service for lineup/bench depth analysis.

    Starters at each position are the highest projected players, up to the
    number of starter slots; everyone else is bench. An empty slot map means
    no starters at all.
    """

    def __init__(self, starter_slots: dict[str, int] | None = None):
        if starter_slots is None:
            starter_slots = DEFAULT_STARTER_SLOTS
        self.starter_slots = dict(starter_slots)

    def analyze(self, team: Team) -> RosterDepth:
        """
        Analyze a team's lineup and bench depth.

        Args:
            team: Team to analyze

        Returns:
            Per-position lineup and bench breakdown
        """
        positions = []
        open_slots = []
        lineup_total = 0.0
        bench_total = 0.0

        for pos, slots, starters, bench in self._split(team.roster):
            if len(starters) < slots:
                open_slots.append(pos)

            lineup_projection = sum(p.projection for p in starters)
            bench_projection = sum(p.projection for p in bench)
            lineup_total += lineup_projection
            bench_total += bench_projection

            positions.append(
                PositionDepth(
                    position=pos,
                    starter_slots=slots,
                    starters=[p.name for p in starters],
                    bench=[p.name for p in bench],
                    lineup_projection=round(lineup_projection, 1),
                    bench_projection=round(bench_projection, 1),
                )
            )

        return RosterDepth(
            team_id=str(team.id),
            team_name=team.name,
            positions=positions,
            lineup_projection=round(lineup_total, 1),
            bench_projection=round(bench_total, 1),
            open_slots=open_slots,
        )

    def bench_projection(self, roster: list[Player]) -> float:
        """Total season projection of non-starters (unrounded)."""
        return sum(p.projection for _, _, _, bench in self._split(roster) for p in bench)

    def bench_depth_change(
        self,
        roster: list[Player],
        players_out: list[Player],
        players_in: list[Player],
    ) -> float:
        """
        Season bench projection gained (positive) or lost by a trade.

        Returns 0.0 for an empty roster, since there is no depth to compare.
        """
        if not roster:
            return 0.0

        outgoing_ids = {p.id for p in players_out}
        after = [p for p in roster if p.id not in outgoing_ids] + list(players_in)

        return self.bench_projection(after) - self.bench_projection(roster)

    def _split(
        self, roster: list[Player]
    ) -> list[tuple[str, int, list[Player], list[Player]]]:
        """(position, slots, starters, bench) for every position in play."""
        by_position: dict[str, list[Player]] = defaultdict(list)
        for player in roster:
            by_position[player.position.value].append(player)

        # Configured starter positions first, then anything else on the roster
        ordered = list(self.starter_slots) + sorted(
            pos for pos in by_position if pos not in self.starter_slots
        )

        split = []
        for pos in ordered:
            slots = self.starter_slots.get(pos, 0)
            players = sorted(
                by_position.get(pos, []), key=lambda p: p.projection, reverse=True
            )
            split.append((pos, slots, players[:slots], players[slots:]))
        return split
