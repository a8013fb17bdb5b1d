"""
Fuse scraped batting and fielding tables into ``Stick`` records.

Columns are looked up by header name once per table. On the Fangraphs team
leaderboard they sit at fixed positions (Name=1, PA=4, 1B=6, ... for batting;
Name=1, E=8 for fielding), but header lookup survives column reordering and
fails loudly when a column disappears.
"""
from __future__ import annotations

import re
from collections import defaultdict
from typing import Sequence

from pts.errors import ParseFailed
from pts.stick import Stick
from pts.table import DataTable

NAME_COLUMN = "Name"

# Stick field -> batting header
BATTING_COLUMNS: dict[str, str] = {
    "plate_appearances": "PA",
    "singles": "1B",
    "doubles": "2B",
    "triples": "3B",
    "home_runs": "HR",
    "runs_scored": "R",
    "runs_batted_in": "RBI",
    "walks": "BB",
    "strike_outs": "SO",
    "hit_by_pitches": "HBP",
    "sac_bunts": "SH",
    "ground_into_double_plays": "GDP",
    "stolen_bases": "SB",
}
OPTIONAL_BATTING_COLUMNS: dict[str, str] = {
    "games_played": "G",
}
ERRORS_COLUMN = "E"

_EMPTY_CELLS = {"", "-", "–", "—"}


def parse_count(cell: str, *, strict: bool = True, column: str = "") -> int:
    """
    Parse a counting-stat cell.

    Empty cells and dashes mean zero (Fangraphs leaves some zero cells blank).
    Anything else that is not a non-negative integer raises ``ParseFailed``,
    unless ``strict`` is False, in which case it is read as zero.
    """
    text = (cell or "").strip().replace(",", "")
    if text in _EMPTY_CELLS:
        return 0
    if re.fullmatch(r"\d+", text):
        return int(text)
    if strict:
        where = f" in column {column}" if column else ""
        raise ParseFailed(f"Unexpected value {cell!r}{where}; expected a count")
    return 0


def name_key(name: str) -> str:
    return " ".join((name or "").split()).casefold()


def _cell(row: Sequence[str], idx: int) -> str:
    return row[idx] if idx < len(row) else ""


def errors_by_player(fielding: DataTable, *, strict: bool = True) -> dict[str, int]:
    """
    Total fielding errors per player.

    A player listed at several positions has one row per position; their
    errors are summed.
    """
    totals: dict[str, int] = defaultdict(int)
    if not fielding.rows:
        return totals
    cols = fielding.column_indices([NAME_COLUMN, ERRORS_COLUMN], label="fielding table")
    for row in fielding.rows:
        key = name_key(_cell(row, cols[NAME_COLUMN]))
        totals[key] += parse_count(_cell(row, cols[ERRORS_COLUMN]), strict=strict, column=ERRORS_COLUMN)
    return totals


def fuse(
    batting: DataTable,
    fielding: DataTable,
    *,
    include_errors: bool = True,
    strict: bool = True,
) -> list[Stick]:
    """
    One ``Stick`` per batting row, in batting-row order.

    Errors come from every fielding row whose player name matches (trimmed,
    case-insensitive); players with no fielding rows get zero errors.
    """
    if not batting.rows:
        return []
    cols = batting.column_indices([NAME_COLUMN, *BATTING_COLUMNS.values()], label="batting table")
    optional = {
        field_name: batting.column_index(header)
        for field_name, header in OPTIONAL_BATTING_COLUMNS.items()
        if batting.has_column(header)
    }
    errors = errors_by_player(fielding, strict=strict) if include_errors else {}

    sticks: list[Stick] = []
    for row_num, row in enumerate(batting.rows, start=1):
        name = _cell(row, cols[NAME_COLUMN]).strip()
        if not name:
            raise ParseFailed(f"Batting row {row_num} has no player name")
        counts = {
            field_name: parse_count(_cell(row, cols[header]), strict=strict, column=header)
            for field_name, header in BATTING_COLUMNS.items()
        }
        for field_name, idx in optional.items():
            counts[field_name] = parse_count(_cell(row, idx), strict=False)
        sticks.append(Stick(name=name, errors=errors.get(name_key(name), 0), **counts))
    return sticks
