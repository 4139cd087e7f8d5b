"""
Tests for DraftPickValuator.
"""

from trade_analytics.models import DraftPick
from trade_analytics.services.draft_picks import DraftPickValuator


def test_table_values():
    valuator = DraftPickValuator()

    assert valuator.get_pick_value(1, 1) == 100
    assert valuator.get_pick_value(1) == 75
    assert valuator.get_pick_value(2, 20) == 18
    assert valuator.get_pick_value(7) == 0.5


def test_estimated_value_wins():
    valuator = DraftPickValuator()
    picks = [
        DraftPick(season=2026, round=1, original_team_id="3", estimated_value=12),
        DraftPick(season=2026, round=3, original_team_id="4"),
    ]

    assert valuator.total_value(picks) == 22
    assert valuator.total_value([]) == 0


def test_closest_round():
    valuator = DraftPickValuator()

    assert valuator.closest_round(70) == 1
    assert valuator.closest_round(25) == 2
    assert valuator.closest_round(11) == 3
    assert valuator.closest_round(1) == 4
