"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: data/records.py
Description:
    Adapters from raw team / matchup records to core models.

    Accepted shapes (camelCase keys, as served by the schedule API):
        team:    {"id", "name", "conferenceId"?}
        matchup: {"homeTeamId", "awayTeamId", "category" | "type",
                  "leverage"?, "id"?}
    Matchups may also carry nested team objects instead of ids:
        {"home": {"id", ...}, "away": {"id", ...}, ...}
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from matchup_graph.core.models import Matchup, Team

if TYPE_CHECKING:
    import pandas as pd


def team_from_record(record: Mapping[str, Any]) -> Team:
    """Build a Team from a team record.

    Raises:
        ValueError: If the record has no id.
    """
    team_id = record.get("id")
    if team_id is None or team_id == "":
        raise ValueError(f"Team record has no id: {dict(record)!r}")
    conference = record.get("conferenceId")
    return Team(
        team_id=str(team_id),
        name=record.get("name") or str(team_id),
        conference_id=str(conference) if conference is not None else None,
    )


def matchup_from_record(record: Mapping[str, Any]) -> Matchup:
    """Build a Matchup from a matchup record.

    Raises:
        ValueError: If either team id is missing.
    """
    home_id = _side_id(record, "home")
    away_id = _side_id(record, "away")
    if home_id is None or away_id is None:
        raise ValueError(f"Matchup record is missing a team id: {dict(record)!r}")

    category = record.get("category", record.get("type"))
    matchup_id = record.get("id")
    if _is_missing(matchup_id):
        matchup_id = None
    return Matchup(
        home_team_id=home_id,
        away_team_id=away_id,
        category=str(category) if category is not None else "",
        leverage=_leverage(record.get("leverage")),
        matchup_id=str(matchup_id) if matchup_id is not None else None,
    )


def teams_from_records(records: Iterable[Mapping[str, Any]]) -> dict[str, Team]:
    """Team records → team_id → Team lookup (later duplicates win)."""
    teams: dict[str, Team] = {}
    for record in records:
        team = team_from_record(record)
        teams[team.team_id] = team
    return teams


def matchups_from_records(records: Iterable[Mapping[str, Any]]) -> list[Matchup]:
    """Matchup records → Matchups, preserving input order."""
    return [matchup_from_record(r) for r in records]


def matchups_from_frame(df: pd.DataFrame) -> list[Matchup]:
    """Convert a DataFrame of matchups (one row per game) to Matchups.

    Required columns: homeTeamId, awayTeamId, category.
    Optional columns: leverage (NaN → missing), id.
    """
    missing = {"homeTeamId", "awayTeamId", "category"} - set(df.columns)
    if missing:
        raise ValueError(f"Matchup frame is missing columns: {sorted(missing)}")
    return [matchup_from_record(row) for row in df.to_dict(orient="records")]


def _side_id(record: Mapping[str, Any], side: str) -> str | None:
    team_id = record.get(f"{side}TeamId")
    if team_id is None:
        nested = record.get(side)
        if isinstance(nested, Mapping):
            team_id = nested.get("id")
    if _is_missing(team_id):
        return None
    return str(team_id)


def _is_missing(value: Any) -> bool:
    # pandas reports missing cells as NaN
    if isinstance(value, float):
        return math.isnan(value)
    return value is None or value == ""


def _leverage(value: Any) -> float | None:
    if _is_missing(value):
        return None
    return float(value)
