"""
Trade proposal models.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from trade_analytics.models.league import Team
from trade_analytics.models.player import Player


class TradeStatus(str, Enum):
    """Lifecycle state of a trade proposal."""

    DRAFT = "draft"
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COUNTERED = "countered"


class DraftPick(BaseModel):
    """Future draft pick included in a trade."""

    season: int
    round: int = Field(ge=1)
    original_team_id: str
    estimated_value: float | None = None
    description: str = ""


class TradeProposal(BaseModel):
    """A proposed exchange of players and picks between two teams."""

    id: str
    from_team: Team
    to_team: Team
    from_players: list[Player] = Field(
        default_factory=list, description="Players leaving from_team"
    )
    to_players: list[Player] = Field(
        default_factory=list, description="Players arriving at from_team"
    )
    from_draft_picks: list[DraftPick] = Field(default_factory=list)
    to_draft_picks: list[DraftPick] = Field(default_factory=list)
    status: TradeStatus = TradeStatus.DRAFT
    created_at: datetime = Field(default_factory=datetime.now)
    message: str | None = None

    @property
    def all_players(self) -> list[Player]:
        return [*self.from_players, *self.to_players]

    @property
    def player_count(self) -> int:
        return len(self.from_players) + len(self.to_players)

    @property
    def has_picks(self) -> bool:
        return bool(self.from_draft_picks or self.to_draft_picks)
