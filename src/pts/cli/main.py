from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from pts import __version__
from pts.cli import team, teams
from pts.errors import PtsError
from pts.log import configure_logging

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    # Usage errors exit 1 like every other reported error.
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="pts",
        description=(
            "pts is a Pick the Stick points calculator for Major League Baseball. "
            "It allows you to easily compare players to make the best pick in your draft."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug output).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, parser_class=_Parser)

    team_parser = subparsers.add_parser("team", help="Show PtS stats for all players on the given team.")
    team.configure_parser(team_parser)

    teams_parser = subparsers.add_parser("teams", help="List supported MLB team keys")
    teams.configure_parser(teams_parser)
    return parser


def main(args: Sequence[str] | None = None) -> int:
    parser = build_parser()
    opts = parser.parse_args(args)
    configure_logging(opts.verbose)

    try:
        if opts.command == "team":
            team.main_from_parsed(opts)
        elif opts.command == "teams":
            teams.main_from_parsed(opts)
        else:
            parser.error(f"Unknown command {opts.command}")
    except PtsError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
