"""
Core models and types shared across all MatchupGraph modules.
"""

from matchup_graph.core.models import ALL_CATEGORIES, Matchup, Team
from matchup_graph.core.types import PairKey, TeamId, pair_key

__all__ = ["ALL_CATEGORIES", "Matchup", "PairKey", "Team", "TeamId", "pair_key"]
