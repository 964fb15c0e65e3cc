"""
Project: MatchupGraph
File Created: 2026-10-18 10:34:51
Author: Xingnan Zhu
File Name: test_paths.py
Description:
    Tests for the leverage-weighted shortest path finder.
"""

import math

from matchup_graph.core.models import Matchup
from matchup_graph.network.builder import build_matchup_graph
from matchup_graph.network.paths import shortest_path


def _game(home: str, away: str, leverage=0.5, category: str = "CONFERENCE") -> Matchup:
    return Matchup(home_team_id=home, away_team_id=away, category=category, leverage=leverage)


class TestShortestPath:
    def test_more_hops_win_with_higher_leverage(self):
        graph = build_matchup_graph([
            _game("a", "b", 0.75),
            _game("b", "c", 0.85),
            _game("c", "d", 0.80),
            _game("a", "x", 0.35),
            _game("x", "d", 0.30),
        ])
        path = shortest_path("a", "d", graph)

        assert path.teams == ("a", "b", "c", "d")
        assert path.hops == 3
        assert math.isclose(path.cost, 1 / 0.75 + 1 / 0.85 + 1 / 0.80)

    def test_direct_edge_preferred(self):
        graph = build_matchup_graph([
            _game("a", "b", 0.9),
            _game("a", "c", 0.9),
            _game("c", "b", 0.9),
        ])
        path = shortest_path("a", "b", graph)
        assert path.teams == ("a", "b")
        assert path.edges == (("a", "b"),)

    def test_minnesota_to_notre_dame(self, minnesota_matchups):
        graph = build_matchup_graph(minnesota_matchups)
        path = shortest_path("minnesota", "notre-dame", graph)

        assert path.teams == ("minnesota", "michigan-state", "notre-dame")
        assert math.isclose(path.cost, 1 / 0.7 + 1 / 0.75)

    def test_multi_hop_through_other_category(self, ohio_state_matchups):
        graph = build_matchup_graph(ohio_state_matchups)
        path = shortest_path("ohio-state", "miami", graph)
        assert path.teams == ("ohio-state", "purdue", "notre-dame", "miami")
        assert path.edges == (
            ("ohio-state", "purdue"),
            ("notre-dame", "purdue"),
            ("miami", "notre-dame"),
        )

    def test_category_filter_disconnects(self, ohio_state_matchups):
        graph = build_matchup_graph(ohio_state_matchups, category="CONFERENCE")
        assert shortest_path("ohio-state", "miami", graph) is None

    def test_leverage_floor_disconnects(self, ohio_state_matchups):
        graph = build_matchup_graph(ohio_state_matchups, min_leverage=0.95)
        assert shortest_path("ohio-state", "purdue", graph) is None

    def test_disjoint_components(self):
        graph = build_matchup_graph([_game("a", "b"), _game("c", "d")])
        assert shortest_path("a", "d", graph) is None

    def test_unknown_teams(self):
        graph = build_matchup_graph([_game("a", "b")])
        assert shortest_path("nobody", "b", graph) is None
        assert shortest_path("a", "nobody", graph) is None

    def test_same_team_is_trivial(self):
        graph = build_matchup_graph([_game("a", "b")])
        path = shortest_path("a", "a", graph)
        assert path.is_trivial
        assert path.teams == ("a",)
        assert path.cost == 0.0

    def test_tie_keeps_first_discovered_route(self):
        matchups = [
            _game("a", "m", 0.5),
            _game("a", "n", 0.5),
            _game("m", "z", 0.5),
            _game("n", "z", 0.5),
        ]
        graph = build_matchup_graph(matchups)
        assert shortest_path("a", "z", graph).teams == ("a", "m", "z")

    def test_deterministic(self, minnesota_matchups):
        first = shortest_path("minnesota", "notre-dame", build_matchup_graph(minnesota_matchups))
        second = shortest_path("minnesota", "notre-dame", build_matchup_graph(minnesota_matchups))
        assert first == second

    def test_every_edge_exists(self, minnesota_matchups):
        graph = build_matchup_graph(minnesota_matchups)
        path = shortest_path("oregon", "stanford", graph)
        for a, b in zip(path.teams, path.teams[1:]):
            assert graph.are_adjacent(a, b)
