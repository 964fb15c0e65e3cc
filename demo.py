"""MatchupGraph Demo — Compare Minnesota and Notre Dame through common opponents.

Usage:
    uv run python demo.py
"""

from matchup_graph.comparison import ComparisonQuery, compare_teams
from matchup_graph.core.models import Matchup, Team

# (home, away, leverage) for a slice of a Big Ten / independent season
SEASON = [
    ("minnesota", "michigan-state", 0.70),
    ("michigan-state", "notre-dame", 0.75),
    ("minnesota", "purdue", 0.45),
    ("purdue", "notre-dame", 0.35),
    ("minnesota", "northwestern", 0.60),
    ("minnesota", "ohio-state", 0.70),
    ("minnesota", "oregon", 0.65),
    ("minnesota", "iowa", 0.60),
    ("minnesota", "rutgers", 0.50),
    ("oregon", "usc", 0.75),
    ("usc", "notre-dame", 0.80),
    ("northwestern", "usc", 0.70),
    ("michigan-state", "usc", 0.70),
    ("iowa", "usc", 0.70),
    ("ohio-state", "michigan-state", 0.80),
    ("boston-college", "michigan-state", 0.50),
    ("boston-college", "notre-dame", 0.60),
    ("rutgers", "notre-dame", 0.40),
]

NAMES = {
    "minnesota": "Minnesota",
    "notre-dame": "Notre Dame",
    "michigan-state": "Michigan State",
    "purdue": "Purdue",
    "northwestern": "Northwestern",
    "ohio-state": "Ohio State",
    "oregon": "Oregon",
    "iowa": "Iowa",
    "rutgers": "Rutgers",
    "usc": "USC",
    "boston-college": "Boston College",
}


def main():
    matchups = [
        Matchup(home_team_id=h, away_team_id=a, category="CONFERENCE", leverage=lev)
        for h, a, lev in SEASON
    ]
    teams = {tid: Team(team_id=tid, name=name) for tid, name in NAMES.items()}

    query = ComparisonQuery("minnesota", "notre-dame", max_degrees=3)
    result = compare_teams(matchups, query, teams=teams)

    print(f"Comparison: {NAMES[query.source]} vs {NAMES[query.destination]}")
    print(f"Status: {result.status}\n")

    if result.path is not None:
        route = " → ".join(NAMES[t] for t in result.path.teams)
        print(f"Shortest path: {route}")
        print(f"Cost (Σ 1/leverage): {result.path.cost:.3f}\n")

    print("=" * 60)
    print("LAYOUT (x, y) by layer")
    print("=" * 60)
    layers = result.layout.layers
    for team_id, pos in sorted(result.layout.positions.items(), key=lambda kv: (kv[1].x, kv[1].y)):
        layer = layers.layers.get(team_id) if layers else None
        degree = result.subgraph.degree_of(team_id)
        bridge = "  (bridge)" if layer is not None and layer.bridge else ""
        print(f"  {NAMES[team_id]:<16} degree {degree}  ({pos.x:6.1f}, {pos.y:6.1f}){bridge}")

    df = result.layout.to_df()
    print(f"\n{len(df)} teams laid out across {df['layer'].nunique()} layers")


if __name__ == "__main__":
    main()
