"""
CLI runner for the MVP leaderboard
"""
import argparse
import json
import logging
import os
import sys

from mvp_leaderboard.errors import LeaderboardError
from mvp_leaderboard.score.loader import DEFAULT_CFG
from mvp_leaderboard.score.runner import build_leaderboard

def setup_logging(verbose: bool = False):
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(description="Build the MVP leaderboard from a roster and event log")
    parser.add_argument("players", help="Path to players.json")
    parser.add_argument("events", help="Path to events.json")
    parser.add_argument("-c", "--config", default=DEFAULT_CFG, help="Config file path")
    parser.add_argument("-o", "--output", default="leaderboard", help="Output directory")
    parser.add_argument("-f", "--force", action="store_true", help="Force rebuild (ignore cache)")
    parser.add_argument("-t", "--top", action="store_true", help="Only list top performers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    # Validate inputs
    for label, path in (("players", args.players), ("events", args.events), ("config", args.config)):
        if not os.path.exists(path):
            print(f"Error: {label} file not found: {path}")
            sys.exit(1)

    try:
        result = build_leaderboard(args.players, args.events, args.config, args.output, args.force)
    except LeaderboardError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: invalid config: {e}")
        sys.exit(1)

    print(f"✅ Leaderboard: {result['leaderboard_path']}")
    print(f"  Players: {result['players']}  Points awarded: {result['total_points']}")

    if args.top:
        rows = result["top"]
    else:
        with open(result["leaderboard_path"], "r", encoding="utf-8") as f:
            rows = json.load(f)["entries"]

    if not rows:
        print("  (no players)")
    for rank, row in enumerate(rows, start=1):
        print(f"  #{rank:<3} {row['name']:<24} ⭐ {row['score']}")

if __name__ == "__main__":
    main()
