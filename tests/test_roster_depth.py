"""
Tests for the RosterDepthAnalyzer.
"""

import pytest

from trade_analytics.services.roster_depth import RosterDepthAnalyzer
from tests.factories import make_player, make_team


class TestRosterDepthAnalyzer:
    """Test cases for RosterDepthAnalyzer."""

    def setup_method(self):
        self.analyzer = RosterDepthAnalyzer()
        self.roster = [
            make_player("QB", projection=320, name="Starter QB"),
            make_player("RB", projection=240, name="RB1"),
            make_player("RB", projection=200, name="RB2"),
            make_player("RB", projection=120, name="RB3"),
            make_player("WR", projection=260, name="WR1"),
            make_player("K", projection=130, name="Kicker"),
        ]
        self.team = make_team(7, "Bench Mob", self.roster)

    def test_lineup_and_bench_split(self):
        depth = self.analyzer.analyze(self.team)

        assert depth.team_id == "7"
        assert depth.team_name == "Bench Mob"
        assert [p.position for p in depth.positions] == ["QB", "RB", "WR", "TE", "K"]

        rb = depth.positions[1]
        assert rb.starters == ["RB1", "RB2"]
        assert rb.bench == ["RB3"]
        assert rb.lineup_projection == 440
        assert rb.bench_projection == 120

        # Positions without starter slots are all bench
        kicker = depth.positions[4]
        assert kicker.starter_slots == 0
        assert kicker.bench == ["Kicker"]

        assert depth.lineup_projection == 1020
        assert depth.bench_projection == 250

    def test_open_slots(self):
        depth = self.analyzer.analyze(self.team)

        assert depth.open_slots == ["WR", "TE"]

    def test_custom_starter_slots(self):
        depth = RosterDepthAnalyzer({"RB": 3}).analyze(self.team)

        assert depth.positions[0].starters == ["RB1", "RB2", "RB3"]
        assert depth.bench_projection == 320 + 260 + 130

    def test_bench_depth_change(self):
        rb3 = self.roster[3]

        # Swapping the bench RB for a better one only moves bench points
        change = self.analyzer.bench_depth_change(
            self.roster, [rb3], [make_player("RB", projection=180)]
        )

        assert change == pytest.approx(60.0)

    def test_bench_depth_change_empty_roster(self):
        change = self.analyzer.bench_depth_change([], [], [make_player(projection=300)])

        assert change == 0.0

    def test_empty_starter_slots_bench_everyone(self):
        depth = RosterDepthAnalyzer({}).analyze(self.team)

        assert depth.lineup_projection == 0
        assert depth.bench_projection == 1270
        assert depth.open_slots == []
        assert all(not p.starters for p in depth.positions)

    def test_bench_depth_change_is_not_rounded(self):
        roster = [
            make_player("RB", projection=300),
            make_player("RB", projection=290),
            make_player("RB", projection=100.04),
        ]

        change = self.analyzer.bench_depth_change(
            roster, [roster[2]], [make_player("RB", projection=100.08)]
        )

        assert change == pytest.approx(0.04)
