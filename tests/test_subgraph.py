"""
Project: MatchupGraph
File Created: 2026-10-18 10:51:17
Author: Xingnan Zhu
File Name: test_subgraph.py
Description:
    Tests for degree-bounded subgraph extraction.
"""

import pytest

from matchup_graph.core.models import Matchup
from matchup_graph.core.types import pair_key
from matchup_graph.network.builder import build_matchup_graph
from matchup_graph.network.paths import shortest_path
from matchup_graph.network.subgraph import extract_subgraph


def _game(home: str, away: str, leverage=0.5) -> Matchup:
    return Matchup(home_team_id=home, away_team_id=away, category="CONFERENCE", leverage=leverage)


def _extract(matchups, source, destination, max_degrees, with_path=True):
    graph = build_matchup_graph(matchups)
    path = shortest_path(source, destination, graph) if with_path else None
    return extract_subgraph(source, destination, max_degrees, graph, shortest_path=path)


class TestEndpoints:
    def test_endpoints_always_degree_zero(self, minnesota_matchups):
        model = _extract(minnesota_matchups, "minnesota", "notre-dame", 3)
        assert model.degree_of("minnesota") == 0
        assert model.degree_of("notre-dame") == 0

    def test_disconnected_keeps_endpoints(self):
        model = _extract([_game("a", "b"), _game("c", "d")], "a", "d", 2)
        assert set(model.teams) == {"a", "d"}
        assert model.is_empty
        assert model.path == ()

    def test_unknown_teams(self):
        model = _extract([], "ghost", "phantom", 1)
        assert model.teams == ("ghost", "phantom")
        assert model.edges == ()

    def test_negative_degrees_rejected(self):
        graph = build_matchup_graph([_game("a", "b")])
        with pytest.raises(ValueError, match="max_degrees"):
            extract_subgraph("a", "b", -1, graph)


class TestZeroDegrees:
    def test_only_direct_pair(self, ohio_state_matchups):
        model = _extract(ohio_state_matchups, "ohio-state", "purdue", 0)
        assert set(model.teams) == {"ohio-state", "purdue"}
        assert model.edges == (pair_key("ohio-state", "purdue"),)
        assert model.path == ("ohio-state", "purdue")

    def test_no_direct_pair(self, ohio_state_matchups):
        model = _extract(ohio_state_matchups, "ohio-state", "miami", 0)
        assert len(model.teams) == 2
        assert model.edges == ()
        assert model.path == ()


class TestDegrees:
    def test_common_opponent_at_degree_one(self, ohio_state_matchups):
        model = _extract(ohio_state_matchups, "ohio-state", "purdue", 1)
        assert model.degree_of("illinois") == 1
        assert pair_key("ohio-state", "illinois") in model.edges
        assert pair_key("illinois", "purdue") in model.edges
        assert not model.contains("michigan")

    def test_path_labelled_by_position(self, ohio_state_matchups):
        model = _extract(ohio_state_matchups, "ohio-state", "miami", 3)
        assert model.degree_of("purdue") == 1
        assert model.degree_of("notre-dame") == 2
        assert model.degree_of("miami") == 0
        assert model.path == ("ohio-state", "purdue", "notre-dame", "miami")

    def test_extended_degree_touches_endpoint(self, ohio_state_matchups):
        model = _extract(ohio_state_matchups, "ohio-state", "miami", 3)
        assert model.degree_of("illinois") == 2
        assert not model.contains("michigan")

    def test_minnesota_common_opponents(self, minnesota_matchups):
        model = _extract(minnesota_matchups, "minnesota", "notre-dame", 3)
        assert model.degree_of("michigan-state") == 1
        assert model.degree_of("purdue") == 1
        assert model.degree_of("rutgers") == 1
        assert model.degree_of("usc") == 2

    def test_path_kept_beyond_degree_budget(self, bridge_matchups):
        model = _extract(bridge_matchups, "minnesota", "notre-dame", 1)
        assert model.path == ("minnesota", "oregon", "usc", "notre-dame")
        assert model.degree_of("usc") == 2
        assert model.degree_of("purdue") == 1

    def test_without_path(self, bridge_matchups):
        model = _extract(bridge_matchups, "minnesota", "notre-dame", 1, with_path=False)
        assert set(model.teams) == {"minnesota", "notre-dame", "purdue"}

    def test_every_team_has_an_edge(self, minnesota_matchups):
        model = _extract(minnesota_matchups, "minnesota", "notre-dame", 3)
        touched = {t for key in model.edges for t in key}
        assert set(model.teams) <= touched

    def test_degrees_within_budget(self, minnesota_matchups):
        model = _extract(minnesota_matchups, "minnesota", "notre-dame", 2)
        assert all(0 <= d <= 2 for d in model.degrees.values())

    def test_edges_exist_in_graph(self, minnesota_matchups):
        graph = build_matchup_graph(minnesota_matchups)
        path = shortest_path("minnesota", "notre-dame", graph)
        model = extract_subgraph("minnesota", "notre-dame", 3, graph, shortest_path=path)
        assert all(key in graph.edges for key in model.edges)

    def test_deterministic(self, minnesota_matchups):
        first = _extract(minnesota_matchups, "minnesota", "notre-dame", 3)
        second = _extract(minnesota_matchups, "minnesota", "notre-dame", 3)
        assert first == second

    def test_mismatched_path_ignored(self, ohio_state_matchups):
        graph = build_matchup_graph(ohio_state_matchups)
        other = shortest_path("ohio-state", "miami", graph)
        model = extract_subgraph("ohio-state", "purdue", 1, graph, shortest_path=other)
        assert model.path == ()
        assert not model.contains("miami")
