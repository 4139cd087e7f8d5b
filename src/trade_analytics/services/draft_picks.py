"""
Draft Pick Valuation

Assigns keeper/dynasty value to future draft picks.
"""

from trade_analytics.models.trade import DraftPick


class DraftPickValuator:
    """Values draft picks from their estimate or a round/pick table."""

    # Dynasty/keeper draft pick values (1-12 picks per round)
    PICK_VALUES: dict[int, dict[int, float]] = {
        1: {1: 100, 2: 95, 3: 90, 4: 85, 5: 80, 6: 75, 7: 70, 8: 65, 9: 60, 10: 55, 11: 50, 12: 45},
        2: {1: 40, 2: 38, 3: 36, 4: 34, 5: 32, 6: 30, 7: 28, 8: 26, 9: 24, 10: 22, 11: 20, 12: 18},
        3: {1: 15, 2: 14, 3: 13, 4: 12, 5: 11, 6: 10, 7: 9, 8: 8, 9: 7, 10: 6, 11: 5, 12: 4},
        4: {1: 3, 2: 3, 3: 2, 4: 2, 5: 2, 6: 2, 7: 1, 8: 1, 9: 1, 10: 1, 11: 1, 12: 1},
    }

    def get_pick_value(self, round_num: int, pick_num: int = 6) -> float:
        """
        Get draft pick trade value from the table.

        Args:
            round_num: Draft round (1-4)
            pick_num: Pick number within round (1-12)

        Returns:
            Trade value for the pick
        """
        if round_num in self.PICK_VALUES:
            pick_num = min(max(pick_num, 1), 12)
            return self.PICK_VALUES[round_num].get(pick_num, 1.0)
        return 0.5

    def value_of(self, pick: DraftPick) -> float:
        """Value of a pick, preferring its own estimate."""
        if pick.estimated_value is not None:
            return pick.estimated_value
        return self.get_pick_value(pick.round)

    def total_value(self, picks: list[DraftPick]) -> float:
        return sum(self.value_of(pick) for pick in picks)

    def closest_round(self, value: float) -> int:
        """Round whose mid-round pick is worth closest to ``value``."""
        return min(
            self.PICK_VALUES,
            key=lambda r: abs(self.get_pick_value(r) - value),
        )
