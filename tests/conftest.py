"""
Project: MatchupGraph
File Created: 2026-10-18 10:12:40
Author: Xingnan Zhu
File Name: conftest.py
Description:
    Shared schedule fixtures: small hand-built seasons whose shortest
    paths and layouts are known.
"""

import pytest

from matchup_graph.core.models import Matchup, Team


def game(home: str, away: str, leverage: float | None = 0.5, category: str = "CONFERENCE") -> Matchup:
    return Matchup(home_team_id=home, away_team_id=away, category=category, leverage=leverage)


def games(pairs) -> list[Matchup]:
    """(home, away, leverage) triples → Matchups."""
    return [game(h, a, lev) for h, a, lev in pairs]


@pytest.fixture
def minnesota_matchups() -> list[Matchup]:
    """Big Ten-ish season where Minnesota → Michigan State → Notre Dame is best."""
    return games([
        ("minnesota", "michigan-state", 0.7),
        ("michigan-state", "notre-dame", 0.75),
        ("minnesota", "purdue", 0.45),
        ("purdue", "notre-dame", 0.35),
        ("minnesota", "northwestern", 0.6),
        ("minnesota", "ohio-state", 0.7),
        ("minnesota", "oregon", 0.65),
        ("minnesota", "iowa", 0.6),
        ("minnesota", "nebraska", 0.6),
        ("minnesota", "rutgers", 0.5),
        ("minnesota", "california", 0.5),
        ("oregon", "usc", 0.75),
        ("usc", "notre-dame", 0.8),
        ("northwestern", "usc", 0.7),
        ("michigan-state", "usc", 0.7),
        ("iowa", "usc", 0.7),
        ("nebraska", "usc", 0.7),
        ("purdue", "usc", 0.75),
        ("ohio-state", "michigan-state", 0.8),
        ("northwestern", "ohio-state", 0.6),
        ("northwestern", "iowa", 0.55),
        ("nebraska", "iowa", 0.55),
        ("california", "stanford", 0.6),
        ("stanford", "notre-dame", 0.6),
        ("boston-college", "california", 0.5),
        ("boston-college", "michigan-state", 0.5),
        ("boston-college", "notre-dame", 0.6),
        ("rutgers", "notre-dame", 0.4),
    ])


@pytest.fixture
def minnesota_teams() -> dict[str, Team]:
    names = {
        "minnesota": "Minnesota",
        "notre-dame": "Notre Dame",
        "michigan-state": "Michigan State",
        "purdue": "Purdue",
        "northwestern": "Northwestern",
        "ohio-state": "Ohio State",
        "oregon": "Oregon",
        "usc": "USC",
        "iowa": "Iowa",
        "nebraska": "Nebraska",
        "rutgers": "Rutgers",
        "california": "California",
        "stanford": "Stanford",
        "boston-college": "Boston College",
    }
    return {tid: Team(team_id=tid, name=name) for tid, name in names.items()}


@pytest.fixture
def bridge_matchups() -> list[Matchup]:
    """High-leverage 3-hop route via Oregon/USC, weaker 2-hop route via Purdue."""
    return games([
        ("minnesota", "purdue", 0.5),
        ("purdue", "notre-dame", 0.5),
        ("minnesota", "oregon", 0.9),
        ("oregon", "usc", 0.9),
        ("usc", "notre-dame", 0.9),
    ])


@pytest.fixture
def ohio_state_matchups() -> list[Matchup]:
    """Mixed-category season around Ohio State."""
    return [
        game("ohio-state", "michigan", 0.9, "CONFERENCE"),
        game("ohio-state", "purdue", 0.8, "CONFERENCE"),
        game("purdue", "illinois", 0.7, "CONFERENCE"),
        game("illinois", "ohio-state", 0.6, "CONFERENCE"),
        game("purdue", "notre-dame", 0.85, "NON_CONFERENCE"),
        game("notre-dame", "miami", 0.9, "NON_CONFERENCE"),
    ]
