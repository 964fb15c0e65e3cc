"""
Project: MatchupGraph
Author: Xingnan Zhu
File Name: core/types.py
Description:
    Type aliases shared by the graph and layout modules.
"""

from __future__ import annotations

TeamId = str

# Canonical identity of an unordered team pair: ids sorted lexicographically.
PairKey = tuple[str, str]


def pair_key(a: TeamId, b: TeamId) -> PairKey:
    """Order-independent key for the pair (a, b).

    >>> pair_key("zebra", "apple")
    ('apple', 'zebra')
    """
    return (a, b) if a <= b else (b, a)
