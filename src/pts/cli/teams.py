from __future__ import annotations

import argparse
from typing import Sequence

from pts.teams import FANGRAPHS_TEAM_IDS, sorted_teams


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--sort",
        choices=["name", "abbr"],
        default="name",
        help="Sort output by franchise name (default) or team key.",
    )
    parser.add_argument(
        "--ids",
        action="store_true",
        help="Also show the Fangraphs team id used in leaderboard URLs.",
    )


def format_team(abbr: str, name: str, with_id: bool = False) -> str:
    line = f"{abbr} - {name}"
    if with_id:
        line += f" (fangraphs id {FANGRAPHS_TEAM_IDS[abbr]})"
    return line


def main_from_parsed(args: argparse.Namespace) -> None:
    for abbr, name in sorted_teams(args.sort):
        print(format_team(abbr, name, with_id=args.ids))


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List the team keys pts accepts.")
    configure_parser(parser)
    main_from_parsed(parser.parse_args(args))


if __name__ == "__main__":
    main()
