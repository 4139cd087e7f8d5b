"""
Roster depth models.
"""

from pydantic import BaseModel, Field


class PositionDepth(BaseModel):
    """Lineup and bench split for one position."""

    position: str
    starter_slots: int
    starters: list[str] = Field(description="Player names in the starting lineup")
    bench: list[str] = Field(description="Player names on the bench")
    lineup_projection: float
    bench_projection: float


class RosterDepth(BaseModel):
    """Lineup and bench strength for a whole roster."""

    team_id: str
    team_name: str
    positions: list[PositionDepth]
    lineup_projection: float
    bench_projection: float
    open_slots: list[str] = Field(
        default_factory=list, description="Positions without enough starters"
    )
