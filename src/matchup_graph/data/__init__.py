"""Record adapters — raw team / matchup records to core models."""

from matchup_graph.data.records import (
    matchup_from_record,
    matchups_from_frame,
    matchups_from_records,
    team_from_record,
    teams_from_records,
)

__all__ = [
    "matchup_from_record",
    "matchups_from_frame",
    "matchups_from_records",
    "team_from_record",
    "teams_from_records",
]
