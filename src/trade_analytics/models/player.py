"""
Player-related Pydantic models.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Position(str, Enum):
    """Fantasy roster positions."""

    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DST = "DST"


class PlayerStats(BaseModel):
    """Projection bundle carried on a player."""

    projection: float = Field(default=0.0, description="Season fantasy point projection")
    last_year: float = Field(default=0.0, description="Fantasy points scored last season")
    vorp: float = Field(default=0.0, description="Value over replacement player")
    weekly_projections: dict[int, float] = Field(
        default_factory=dict, description="Week number -> projected points"
    )


class Player(BaseModel):
    """NFL player as seen by the trade tools."""

    id: int
    name: str
    position: Position
    team: str = Field(default="FA", description="NFL team code")
    rank: int = 0
    adp: float | None = Field(default=None, description="Average draft position")
    bye: int = 0
    tier: int | None = Field(default=None, ge=1, le=5)
    age: int | None = None
    auction_value: float = Field(default=0.0, description="Draft auction value")
    stats: PlayerStats = Field(default_factory=PlayerStats)

    @property
    def projection(self) -> float:
        return self.stats.projection
