"""
Tests for the command-line interface.
"""

import json

import pytest

from trade_analytics.cli import cli_main
from tests.factories import make_league, make_player, make_proposal, make_team


def _write_inputs(tmp_path):
    proposal = make_proposal(
        [make_player("RB", auction_value=10, name="Old Legs")],
        [make_player("WR", auction_value=40, name="Young Wheels")],
    )
    proposal_path = tmp_path / "proposal.json"
    proposal_path.write_text(proposal.model_dump_json(), encoding="utf-8")

    league_path = tmp_path / "league.json"
    league_path.write_text(make_league().model_dump_json(), encoding="utf-8")

    return str(proposal_path), str(league_path)


def test_analyze_summary(tmp_path, capsys):
    proposal_path, league_path = _write_inputs(tmp_path)

    exit_code = cli_main(["analyze", proposal_path, "--league", league_path, "--week", "4"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Grade:          F" in out
    assert "Strong Reject" in out
    assert "Old Legs" in out


def test_analyze_json(tmp_path, capsys):
    proposal_path, league_path = _write_inputs(tmp_path)

    exit_code = cli_main(["analyze", proposal_path, "--league", league_path, "--json"])

    assert exit_code == 0
    report = json.loads(capsys.readouterr().out)
    assert report["current_value_diff"] == 30
    assert report["recommendation"] == "strong_reject"


def test_depth(tmp_path, capsys):
    team_path = tmp_path / "team.json"
    team = make_team(3, "Depth Chart", [make_player("TE", projection=140, name="Tight End")])
    team_path.write_text(team.model_dump_json(), encoding="utf-8")

    exit_code = cli_main(["depth", str(team_path)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Depth Chart - Roster Depth" in out
    assert "Tight End" in out


def test_missing_file(tmp_path, capsys):
    exit_code = cli_main(
        ["analyze", str(tmp_path / "nope.json"), "--league", str(tmp_path / "league.json")]
    )

    assert exit_code == 1
    assert "Could not read" in capsys.readouterr().err


def test_invalid_json(tmp_path, capsys):
    proposal_path, league_path = _write_inputs(tmp_path)
    (tmp_path / "proposal.json").write_text('{"id": "x"}', encoding="utf-8")

    exit_code = cli_main(["analyze", proposal_path, "--league", league_path])

    assert exit_code == 1
    assert "Invalid TradeProposal" in capsys.readouterr().err


def test_no_command():
    assert cli_main([]) == 1


def test_depth_with_starter_slots(tmp_path, capsys):
    team_path = tmp_path / "team.json"
    team = make_team(3, "Depth Chart", [make_player("TE", projection=140, name="Tight End")])
    team_path.write_text(team.model_dump_json(), encoding="utf-8")

    exit_code = cli_main(["depth", str(team_path), "--slots", "RB=1,TE=0"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Open starter slots: RB\n" in out
    assert "QB" not in out


def test_depth_rejects_bad_slots(tmp_path):
    team_path = tmp_path / "team.json"
    team_path.write_text(make_team(3, "Depth Chart").model_dump_json(), encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli_main(["depth", str(team_path), "--slots", "RB=two"])

    assert exc.value.code == 2
