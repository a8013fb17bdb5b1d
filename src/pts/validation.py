"""
Entry-point validation for the team key and season.

Validation happens once, before any I/O; later stages assume a supported team
key and a season in [FIRST_SEASON, current year].
"""
from __future__ import annotations

import datetime
from typing import Optional

from pts.errors import YearNotNumeric, YearOutOfRange
from pts.teams import normalize_team_key

FIRST_SEASON = 1901


def current_year(today: Optional[datetime.date] = None) -> int:
    return (today or datetime.date.today()).year


def parse_season(raw_year: str | int, this_year: Optional[int] = None) -> int:
    this_year = current_year() if this_year is None else this_year
    text = str(raw_year).strip()
    try:
        year = int(text, 10)
    except ValueError:
        raise YearNotNumeric(str(raw_year)) from None
    # int() accepts digit separators ("2_023"); a season never has them.
    if "_" in text:
        raise YearNotNumeric(str(raw_year))
    if year < FIRST_SEASON or year > this_year:
        raise YearOutOfRange(year, this_year)
    return year


def validate(raw_team_key: str, raw_year: str | int, this_year: Optional[int] = None) -> tuple[str, int]:
    """
    Normalize and check user input.

    Returns ``(team_key, season)``; raises ``UnknownTeam``, ``YearNotNumeric``
    or ``YearOutOfRange``.
    """
    team = normalize_team_key(raw_team_key)
    season = parse_season(raw_year, this_year)
    return team, season
