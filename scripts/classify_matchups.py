#!/usr/bin/env python3
"""
Label a games export with team tiers and matchup classes.

Usage:
    python scripts/classify_matchups.py \
        --games data/games_2025.csv \
        --memberships data/team_membership.csv \
        --conferences data/teams.csv \
        [--output data/games_2025_matchups.csv]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cfb.config import load_config, tier_rules_from_config, transitional_teams_from_config  # noqa: E402
from cfb.features import annotate_matchup_classes, matchup_class_summary  # noqa: E402
from cfb.io.teams import TeamDirectory  # noqa: E402

logger = logging.getLogger("classify_matchups")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify games into P5/G5/FCS matchup classes.")
    parser.add_argument("--games", type=Path, required=True, help="CSV of games (season, home/away team ids).")
    parser.add_argument("--memberships", type=Path, required=True, help="CSV of season,team_id,level rows.")
    parser.add_argument("--conferences", type=Path, help="CSV of team_id,conference[,season] rows.")
    parser.add_argument("--config", type=Path, help="YAML config (defaults to CFB_CONFIG or config/defaults.yaml).")
    parser.add_argument("--season-col", default="season", help="Season column in the games CSV (default season).")
    parser.add_argument("--home-col", default="home_team_id", help="Home team column (default home_team_id).")
    parser.add_argument("--away-col", default="away_team_id", help="Away team column (default away_team_id).")
    parser.add_argument("--output", type=Path, help="Optional path for the annotated CSV.")
    parser.add_argument("--drop-unsupported", action="store_true", help="Drop FCS vs FCS games from the output.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    rules = tier_rules_from_config(config)
    transitional = transitional_teams_from_config(config)
    directory = TeamDirectory.from_csv(args.memberships, args.conferences)

    games = pd.read_csv(args.games)
    logger.info("Classifying %d games from %s", len(games), args.games)
    annotated = annotate_matchup_classes(
        games,
        directory,
        season_col=args.season_col,
        home_team_col=args.home_col,
        away_team_col=args.away_col,
        rules=rules,
        transitional=transitional,
    )

    summary = matchup_class_summary(annotated)
    if args.drop_unsupported and not annotated.empty:
        annotated = annotated[annotated["matchup_class"].notna()]

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        annotated.to_csv(args.output, index=False)
        logger.info("Wrote %d rows to %s", len(annotated), args.output)

    print("Matchup class distribution")
    print("=" * 30)
    total = int(summary.sum())
    for label, count in summary.items():
        share = (count / total * 100.0) if total else 0.0
        print(f"{label:<12} {count:>6}  {share:5.1f}%")
    print("-" * 30)
    print(f"{'total':<12} {total:>6}")
    if "transitional_matchup" in annotated.columns:
        print(f"{'transitional':<12} {int(annotated['transitional_matchup'].sum()):>6}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)
