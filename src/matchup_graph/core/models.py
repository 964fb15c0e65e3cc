"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: core/models.py
Description:
    Core data models shared across all MatchupGraph modules.
    Teams and matchups are created by the data-loading layer and are
    read-only from here on; every algorithm treats them as immutable
    snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass

# Wildcard category filter: every matchup passes.
ALL_CATEGORIES = "ALL"


@dataclass(frozen=True)
class Team:
    """A team in the schedule graph."""

    team_id: str
    name: str
    conference_id: str | None = None

    @property
    def label(self) -> str:
        """Display label used for deterministic ordering in layouts."""
        return self.name or self.team_id


@dataclass(frozen=True)
class Matchup:
    """A single game between two teams.

    Home/away only records where the game was played; the graph treats the
    pair as unordered.  ``leverage`` comes from an external scoring step and
    may be missing, in which case it counts as 0.
    """

    home_team_id: str
    away_team_id: str
    category: str  # e.g. "CONFERENCE", "NON_CONFERENCE", "POSTSEASON"
    leverage: float | None = None
    matchup_id: str | None = None

    @property
    def leverage_value(self) -> float:
        """Leverage with missing values treated as 0."""
        return self.leverage if self.leverage is not None else 0.0

    @property
    def is_self_matchup(self) -> bool:
        return self.home_team_id == self.away_team_id

    def passes(self, category: str, min_leverage: float) -> bool:
        """True if this matchup survives a category filter and leverage floor."""
        if category != ALL_CATEGORIES and self.category != category:
            return False
        return self.leverage_value >= min_leverage
