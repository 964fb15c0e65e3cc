"""
Project: MatchupGraph
File Created: 2026-10-18 13:05:21
Author: Xingnan Zhu
File Name: test_records.py
Description:
    Tests for the team / matchup record adapters.
"""

import math

import pandas as pd
import pytest

from matchup_graph.data.records import (
    matchup_from_record,
    matchups_from_frame,
    matchups_from_records,
    team_from_record,
    teams_from_records,
)


class TestTeamRecords:
    def test_basic(self):
        team = team_from_record({"id": "notre-dame", "name": "Notre Dame", "conferenceId": "ind"})
        assert team.team_id == "notre-dame"
        assert team.label == "Notre Dame"
        assert team.conference_id == "ind"

    def test_name_defaults_to_id(self):
        assert team_from_record({"id": "usc"}).name == "usc"

    def test_missing_id(self):
        with pytest.raises(ValueError, match="no id"):
            team_from_record({"name": "Nameless"})

    def test_lookup(self):
        teams = teams_from_records([{"id": "a", "name": "A"}, {"id": "b", "name": "B"}])
        assert list(teams) == ["a", "b"]


class TestMatchupRecords:
    def test_flat_record(self):
        m = matchup_from_record({
            "id": "g1",
            "homeTeamId": "minnesota",
            "awayTeamId": "purdue",
            "category": "CONFERENCE",
            "leverage": 0.45,
        })
        assert (m.home_team_id, m.away_team_id) == ("minnesota", "purdue")
        assert m.category == "CONFERENCE"
        assert math.isclose(m.leverage, 0.45)
        assert m.matchup_id == "g1"

    def test_nested_teams_and_type_alias(self):
        m = matchup_from_record({
            "home": {"id": "oregon"},
            "away": {"id": "usc"},
            "type": "NON_CONFERENCE",
        })
        assert (m.home_team_id, m.away_team_id) == ("oregon", "usc")
        assert m.category == "NON_CONFERENCE"
        assert m.leverage is None
        assert m.leverage_value == 0.0

    def test_missing_team(self):
        with pytest.raises(ValueError, match="missing a team id"):
            matchup_from_record({"homeTeamId": "a", "category": "CONFERENCE"})

    def test_order_preserved(self):
        matchups = matchups_from_records([
            {"homeTeamId": "b", "awayTeamId": "c", "category": "X"},
            {"homeTeamId": "a", "awayTeamId": "b", "category": "X"},
        ])
        assert [m.home_team_id for m in matchups] == ["b", "a"]


class TestMatchupFrame:
    def test_nan_leverage(self):
        df = pd.DataFrame({
            "homeTeamId": ["a", "b"],
            "awayTeamId": ["b", "c"],
            "category": ["CONFERENCE", "POSTSEASON"],
            "leverage": [0.6, float("nan")],
        })
        matchups = matchups_from_frame(df)
        assert math.isclose(matchups[0].leverage, 0.6)
        assert matchups[1].leverage is None
        assert matchups[1].category == "POSTSEASON"

    def test_missing_columns(self):
        with pytest.raises(ValueError, match="awayTeamId"):
            matchups_from_frame(pd.DataFrame({"homeTeamId": ["a"], "category": ["X"]}))
