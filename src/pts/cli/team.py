from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from pts import export
from pts.config import get_settings
from pts.team_api import team_sticks
from pts.tui import app
from pts.validation import current_year, validate


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("team", metavar="teamKey", help="Team abbreviation, e.g., DET (see `pts teams`)")
    parser.add_argument(
        "-s",
        "--season",
        default=None,
        help="Season to view stats for (default: current year).",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Directory for cached leaderboard CSVs (default: ./pts_cache or $PTS_CACHE_DIR).",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Re-fetch stats even if a cached copy of a past season exists.",
    )
    parser.add_argument(
        "--no-errors",
        action="store_true",
        help="Leave fielding errors out of negative points.",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Also write the scored table to this CSV file.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the whole table once instead of opening the pager (default when not on a terminal).",
    )


def main_from_parsed(args: argparse.Namespace) -> None:
    settings = get_settings().with_overrides(cache_dir=args.cache_dir)
    this_year = current_year()
    raw_season = args.season if args.season is not None else str(this_year)
    team, season = validate(args.team, raw_season, this_year)

    sticks = team_sticks(
        team,
        season,
        cache_dir=settings.cache_dir,
        refresh=args.refresh,
        include_errors=not args.no_errors,
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
        this_year=this_year,
    )

    if args.csv:
        out_path = export.save_csv(sticks, args.csv)
        print(f"Wrote {len(sticks)} rows to {out_path}", file=sys.stderr)

    interactive = not args.plain and sys.stdin.isatty() and sys.stdout.isatty()
    app.show(sticks, team, season, interactive=interactive)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show PtS stats for all players on the given team.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
