"""
Tests for the trade analyzer API routes.
"""

from fastapi.testclient import TestClient

from trade_analytics import __version__
from trade_analytics.main import create_app
from tests.factories import make_league, make_player, make_proposal, make_team

client = TestClient(create_app())


def _trade_body(current_week: int = 3) -> dict:
    proposal = make_proposal(
        [make_player("WR", auction_value=20, bye=7)],
        [make_player("WR", auction_value=20, bye=9)],
    )
    return {
        "proposal": proposal.model_dump(mode="json"),
        "league": make_league().model_dump(mode="json"),
        "current_week": current_week,
    }


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_analyze_trade():
    response = client.post("/api/trade-analyzer/analyze", json=_trade_body())

    assert response.status_code == 200
    data = response.json()
    assert data["overall_grade"] == "C-"
    assert data["fairness_score"] == 50
    assert data["recommendation"] == "consider"
    assert data["confidence"] == 85
    assert data["from_team_impact"]["team_name"] == "Gridiron Gurus"
    assert len(data["positional_analysis"]) == 4


def test_analyze_trade_rejects_bad_week():
    response = client.post("/api/trade-analyzer/analyze", json=_trade_body(current_week=0))

    assert response.status_code == 422


def test_analyze_trade_requires_proposal():
    body = _trade_body()
    del body["proposal"]

    response = client.post("/api/trade-analyzer/analyze", json=body)

    assert response.status_code == 422


def test_roster_depth():
    team = make_team(
        4,
        "Depth Chart",
        [make_player("QB", projection=300), make_player("QB", projection=250)],
    )

    response = client.post(
        "/api/trade-analyzer/roster-depth",
        json={"team": team.model_dump(mode="json"), "starter_slots": {"QB": 1}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["lineup_projection"] == 300
    assert data["bench_projection"] == 250


def test_positional():
    league = make_league(all_players=[make_player("TE", auction_value=12)])

    response = client.post("/api/trade-analyzer/positional", json=league.model_dump(mode="json"))

    assert response.status_code == 200
    data = response.json()
    assert [p["position"] for p in data] == ["QB", "RB", "WR", "TE"]
    assert data[3]["market_value"] == 12
