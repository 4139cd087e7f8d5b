"""
Tests for the PositionalScarcityService.
"""

import pytest

from trade_analytics.models import Outlook
from trade_analytics.services.positional import PositionalScarcityService
from tests.factories import make_league, make_player


class TestPositionalScarcityService:
    """Test cases for PositionalScarcityService."""

    def setup_method(self):
        self.service = PositionalScarcityService(season_weeks=17)
        self.rbs = [
            make_player("RB", projection=proj, auction_value=value)
            for proj, value in [(300, 50), (250, 40), (200, 30), (150, 20), (100, 10)]
        ]
        self.league = make_league(all_players=self.rbs)

    def test_rb_market(self):
        rb = self.service.analyze(self.league)[1]

        assert rb.position == "RB"
        # Two teams x two RB slots: the fifth RB is replacement level
        assert rb.replacement_level == pytest.approx(round(100 / 17, 2))
        assert rb.scarcity_score == pytest.approx(37.5)
        assert rb.market_value == pytest.approx(30.0)
        assert rb.trade_impact == 0
        assert rb.future_outlook == Outlook.NEUTRAL

    def test_empty_position(self):
        qb = self.service.analyze(self.league)[0]

        assert qb.scarcity_score == 100
        assert qb.market_value == 0
        assert qb.replacement_level == 0

    def test_shallow_pool_uses_last_player(self):
        league = make_league(all_players=self.rbs[:2])

        rb = self.service.analyze(league)[1]

        assert rb.replacement_level == pytest.approx(round(250 / 17, 2))

    def test_traded_players_join_pool_once(self):
        outgoing = self.rbs[0]
        incoming = make_player("WR", projection=170, auction_value=22)

        results = self.service.analyze(self.league, [outgoing], [incoming])

        wr = results[2]
        assert wr.market_value == pytest.approx(22.0)
        assert results[1].market_value == pytest.approx(30.0)
        assert wr.trade_impact == pytest.approx(10.0)

    def test_outlook_bearish_for_older_incoming(self):
        results = self.service.analyze(
            self.league,
            [make_player("TE", age=24)],
            [make_player("TE", age=29)],
        )

        assert results[3].future_outlook == Outlook.BEARISH

    def test_empty_league(self):
        results = self.service.analyze(make_league(teams=[]))

        assert len(results) == 4
        assert all(r.scarcity_score == 100 for r in results)

    def test_team_count_floor_is_two(self):
        """A league listing no teams is sized like the two trading teams."""
        league = make_league(teams=[], all_players=self.rbs)

        rb = self.service.analyze(league)[1]

        assert rb.scarcity_score == pytest.approx(37.5)
        assert rb.replacement_level == pytest.approx(round(100 / 17, 2))
