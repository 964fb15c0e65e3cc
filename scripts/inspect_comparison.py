#!/usr/bin/env python3
"""
MatchupGraph comparison inspector — CLI entry point.

Loads teams and matchups from local JSON files (lists of records in the
schedule API shape), runs one comparison and prints:
  1. Filtered graph size
  2. Weighted shortest path with per-hop leverage
  3. Subgraph teams grouped by degree
  4. Layer assignment (bridges marked) and final positions

Usage:
    python scripts/inspect_comparison.py teams.json matchups.json minnesota notre-dame
    python scripts/inspect_comparison.py teams.json matchups.json ohio-state miami --degrees 3
    python scripts/inspect_comparison.py teams.json matchups.json a b --category CONFERENCE -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure the src tree is on path so imports work when run as a script
_src_root = Path(__file__).resolve().parent.parent / "src"
if str(_src_root) not in sys.path:
    sys.path.insert(0, str(_src_root))


# ── Pretty-printing helpers ──────────────────────────────────────────────────


def _header(title: str) -> str:
    width = 60
    return f"\n{'═' * width}\n  {title}\n{'═' * width}"


def _kv(key: str, value, indent: int = 4) -> str:
    pad = " " * indent
    return f"{pad}{key}: {value}"


def _load_json(path: str) -> list[dict]:
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        # {"teams": [...]} / {"games": [...]} wrappers
        data = next(iter(data.values()), [])
    return data


# ── Report sections ──────────────────────────────────────────────────────────


def _report(comparison, teams) -> None:
    from matchup_graph.core.models import Team

    def name(tid: str) -> str:
        return teams.get(tid, Team(team_id=tid, name=tid)).label

    q = comparison.query
    print(_header(f"{name(q.source)} → {name(q.destination)}"))
    print(_kv("Status", comparison.status))
    print(_kv("Filters", f"category={q.category}, min_leverage={q.min_leverage}"))
    print(_kv("Graph", f"{len(comparison.graph.teams)} teams, {len(comparison.graph.edges)} pairs"))

    if comparison.path is not None:
        print(_header("Shortest path"))
        for key in comparison.path.edges:
            edge = comparison.graph.edges[key]
            print(_kv(f"{name(key[0])} – {name(key[1])}", f"leverage {edge.average_leverage:.3f}"))
        print(_kv("Total cost", f"{comparison.path.cost:.4f}"))

    print(_header("Subgraph"))
    by_degree: dict[int, list[str]] = {}
    for tid in comparison.subgraph.teams:
        by_degree.setdefault(comparison.subgraph.degrees[tid], []).append(name(tid))
    for degree in sorted(by_degree):
        print(_kv(f"Degree {degree}", ", ".join(by_degree[degree])))

    from tabulate import tabulate

    print(_header("Layout"))
    df = comparison.layout.to_df()
    df["team_id"] = df["team_id"].map(name)
    rows = df.sort_values(["x", "y"]).itertuples(index=False)
    print(tabulate(
        [(r.team_id, r.layer, "yes" if r.bridge else "", r.x, r.y) for r in rows],
        headers=["Team", "Layer", "Bridge", "x", "y"],
        floatfmt=".1f",
    ))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Inspect a two-team comparison: path, subgraph and layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("teams", help="JSON file with team records")
    parser.add_argument("matchups", help="JSON file with matchup records")
    parser.add_argument("source", help="Source team id")
    parser.add_argument("destination", help="Destination team id")
    parser.add_argument(
        "--degrees", type=int, default=1,
        help="Maximum degrees of separation (default: 1)",
    )
    parser.add_argument(
        "--category", default="ALL",
        help="Matchup category filter (default: ALL)",
    )
    parser.add_argument(
        "--min-leverage", type=float, default=0.0,
        help="Ignore matchups below this leverage (default: 0)",
    )
    parser.add_argument(
        "--width", type=float, default=800.0,
        help="Canvas width (default: 800)",
    )
    parser.add_argument(
        "--height", type=float, default=600.0,
        help="Canvas height (default: 600)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Show algorithm traces (layering, ordering, collisions)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from matchup_graph.comparison import ComparisonQuery, compare_teams
    from matchup_graph.data.records import matchups_from_records, teams_from_records
    from matchup_graph.layout.models import LayoutConfig

    teams = teams_from_records(_load_json(args.teams))
    matchups = matchups_from_records(_load_json(args.matchups))

    try:
        query = ComparisonQuery(
            args.source,
            args.destination,
            max_degrees=args.degrees,
            category=args.category,
            min_leverage=args.min_leverage,
        )
        config = LayoutConfig(width=args.width, height=args.height)
    except ValueError as exc:
        parser.error(str(exc))

    comparison = compare_teams(matchups, query, teams=teams, config=config)
    _report(comparison, teams)


if __name__ == "__main__":
    main()
