"""
Supported MLB franchises and their Fangraphs team ids.

The Fangraphs id is only used to build leaderboard URLs; everything else in
pts (cache file names, the UI footer) uses the three-letter team key.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from pts.errors import UnknownTeam

TEAMS: list[tuple[str, str]] = [
    ("ARI", "Arizona Diamondbacks"),
    ("ATL", "Atlanta Braves"),
    ("BAL", "Baltimore Orioles"),
    ("BOS", "Boston Red Sox"),
    ("CHC", "Chicago Cubs"),
    ("CHW", "Chicago White Sox"),
    ("CIN", "Cincinnati Reds"),
    ("CLE", "Cleveland Guardians"),
    ("COL", "Colorado Rockies"),
    ("DET", "Detroit Tigers"),
    ("HOU", "Houston Astros"),
    ("KCR", "Kansas City Royals"),
    ("LAA", "Los Angeles Angels"),
    ("LAD", "Los Angeles Dodgers"),
    ("MIA", "Miami Marlins"),
    ("MIL", "Milwaukee Brewers"),
    ("MIN", "Minnesota Twins"),
    ("NYM", "New York Mets"),
    ("NYY", "New York Yankees"),
    ("OAK", "Oakland Athletics"),
    ("PHI", "Philadelphia Phillies"),
    ("PIT", "Pittsburgh Pirates"),
    ("SDP", "San Diego Padres"),
    ("SEA", "Seattle Mariners"),
    ("SFG", "San Francisco Giants"),
    ("STL", "St. Louis Cardinals"),
    ("TBR", "Tampa Bay Rays"),
    ("TEX", "Texas Rangers"),
    ("TOR", "Toronto Blue Jays"),
    ("WSN", "Washington Nationals"),
]

FANGRAPHS_TEAM_IDS: Mapping[str, int] = MappingProxyType(
    {
        "ARI": 15,
        "ATL": 16,
        "BAL": 2,
        "BOS": 3,
        "CHC": 17,
        "CHW": 4,
        "CIN": 18,
        "CLE": 5,
        "COL": 19,
        "DET": 6,
        "HOU": 21,
        "KCR": 7,
        "LAA": 1,
        "LAD": 22,
        "MIA": 20,
        "MIL": 23,
        "MIN": 8,
        "NYM": 25,
        "NYY": 9,
        "OAK": 10,
        "PHI": 26,
        "PIT": 27,
        "SDP": 29,
        "SEA": 11,
        "SFG": 30,
        "STL": 28,
        "TBR": 12,
        "TEX": 13,
        "TOR": 14,
        "WSN": 24,
    }
)

TEAM_NAMES: Mapping[str, str] = MappingProxyType(dict(TEAMS))


def normalize_team_key(raw: str) -> str:
    """
    Uppercase a user-supplied team key and check it against the supported set.
    """
    key = re.sub(r"\s+", "", str(raw)).upper()
    if key not in FANGRAPHS_TEAM_IDS:
        raise UnknownTeam(str(raw))
    return key


def team_id(team_key: str) -> int:
    code = team_key.upper()
    if code not in FANGRAPHS_TEAM_IDS:
        raise UnknownTeam(team_key)
    return FANGRAPHS_TEAM_IDS[code]


def sorted_teams(sort: str = "name") -> list[tuple[str, str]]:
    key = (lambda t: t[1]) if sort == "name" else (lambda t: t[0])
    return sorted(TEAMS, key=key)
