"""Builders for test players, teams, leagues and proposals."""

from itertools import count

from trade_analytics.models import (
    DraftPick,
    League,
    Player,
    PlayerStats,
    Position,
    Team,
    TradeProposal,
)

_ids = count(1000)


def make_player(
    position: str = "WR",
    auction_value: float = 20,
    age: int | None = 25,
    bye: int = 7,
    projection: float = 150,
    weekly: dict[int, float] | None = None,
    player_id: int | None = None,
    name: str | None = None,
) -> Player:
    pid = player_id if player_id is not None else next(_ids)
    return Player(
        id=pid,
        name=name or f"Player {pid}",
        position=Position(position),
        team="KC",
        rank=pid,
        bye=bye,
        age=age,
        auction_value=auction_value,
        stats=PlayerStats(projection=projection, weekly_projections=weekly or {}),
    )


def make_team(team_id: int, name: str | None = None, roster: list[Player] | None = None) -> Team:
    return Team(id=team_id, name=name or f"Team {team_id}", roster=roster or [])


def make_proposal(
    from_players: list[Player],
    to_players: list[Player],
    from_picks: list[DraftPick] | None = None,
    to_picks: list[DraftPick] | None = None,
    from_team: Team | None = None,
    to_team: Team | None = None,
) -> TradeProposal:
    return TradeProposal(
        id="trade-1",
        from_team=from_team or make_team(1, "Gridiron Gurus"),
        to_team=to_team or make_team(2, "Fourth and Long"),
        from_players=from_players,
        to_players=to_players,
        from_draft_picks=from_picks or [],
        to_draft_picks=to_picks or [],
    )


def make_league(**kwargs) -> League:
    kwargs.setdefault("id", "league-1")
    kwargs.setdefault("name", "Test League")
    kwargs.setdefault("teams", [make_team(1, "Gridiron Gurus"), make_team(2, "Fourth and Long")])
    return League(**kwargs)
