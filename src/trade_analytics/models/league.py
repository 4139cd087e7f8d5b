"""
League-related Pydantic models.
"""

from pydantic import BaseModel, Field

from trade_analytics.models.player import Player

DEFAULT_STARTER_SLOTS: dict[str, int] = {
    "QB": 1,
    "RB": 2,
    "WR": 2,
    "TE": 1,
}


class TeamRecord(BaseModel):
    """Win/loss record."""

    wins: int = 0
    losses: int = 0
    ties: int = 0


class Team(BaseModel):
    """Fantasy team and its roster."""

    id: int
    name: str
    roster: list[Player] = Field(default_factory=list)
    record: TeamRecord = Field(default_factory=TeamRecord)


class League(BaseModel):
    """League context supplied alongside a trade."""

    id: str
    name: str = ""
    teams: list[Team] = Field(default_factory=list)
    all_players: list[Player] = Field(
        default_factory=list, description="Player pool used for positional scarcity"
    )
    current_week: int = Field(default=1, ge=1)
    playoff_week_start: int = Field(default=15, ge=1)
    starter_slots: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_STARTER_SLOTS),
        description="Position -> starting lineup slots",
    )

    @property
    def num_teams(self) -> int:
        return len(self.teams)

    def get_team(self, team_id: int) -> Team | None:
        return next((t for t in self.teams if t.id == team_id), None)

    def player_pool(self) -> list[Player]:
        """All known players: the explicit pool, else every rostered player."""
        if self.all_players:
            return self.all_players
        return [p for team in self.teams for p in team.roster]
