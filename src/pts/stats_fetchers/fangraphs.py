"""
Fetch and parse Fangraphs legacy leaderboards for a single team and season.

The legacy leaderboard renders a Telerik grid (``table.rgMasterTable``) with a
two-row header: a pager row on top and the leaf column names below it. Only
the last header row is used.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from bs4 import BeautifulSoup

from pts.errors import FetchFailed, ParseFailed
from pts.table import DataTable, fit_row
from pts.teams import team_id

logger = logging.getLogger(__name__)

LEADERBOARD_URL = "https://www.fangraphs.com/leaders-legacy.aspx/major-league"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; pts/1.0)"
HEADERS = {"User-Agent": DEFAULT_USER_AGENT}
DEFAULT_TIMEOUT = 30.0

BATTING = "bat"
FIELDING = "fld"
STAT_KINDS = (BATTING, FIELDING)


def leaderboard_url(team: str, season: int, stats: str) -> str:
    """
    Build the leaderboard URL for one team/season.

    stats: "bat" or "fld". Only qualified players are requested (qual=1), at
    most 100 rows.
    """
    if stats not in STAT_KINDS:
        raise ValueError(f"Unknown stat kind '{stats}' (expected one of {STAT_KINDS})")
    return (
        f"{LEADERBOARD_URL}"
        f"?pos=all&stats={stats}&lg=all&type=0&season={season}"
        f"&month=0&season1={season}&ind=0&team={team_id(team)}&qual=1&page=1_100"
    )


def fetch_html(
    url: str,
    session: Optional[Any] = None,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Optional[dict[str, str]] = None,
) -> str:
    http = session if session is not None else requests
    logger.info("Requesting %s", url)
    try:
        resp = http.get(url, headers=headers or HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchFailed(url, exc) from exc
    try:
        resp.raise_for_status()
        return resp.text
    except requests.RequestException as exc:
        raise FetchFailed(url, exc) from exc
    finally:
        resp.close()


def extract_table_data(html: str) -> DataTable:
    """
    Pull the header row and body rows out of the leaderboard grid.

    Body rows are sized to the header: missing cells become "" and extra cells
    are dropped so columns stay aligned with their headers.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:
        raise ParseFailed(f"Could not parse leaderboard HTML: {exc}") from exc

    table = soup.select_one("table.rgMasterTable")
    if table is None:
        raise ParseFailed("Could not find leaderboard table (table.rgMasterTable)")

    header_rows = table.select("thead tr")
    headers: list[str] = []
    if header_rows:
        headers = [th.get_text().strip() for th in header_rows[-1].find_all("th")]
    if not headers:
        raise ParseFailed("Leaderboard table has no header row")

    rows: list[list[str]] = []
    for tr in table.select("tbody tr"):
        # Empty grids render a single "No records to display." placeholder row.
        if "rgNoRecords" in (tr.get("class") or []):
            continue
        cells = [td.get_text().strip() for td in tr.find_all("td")]
        rows.append(fit_row(cells, len(headers)))
    return DataTable(headers=headers, rows=rows)


def fetch_table(
    team: str,
    season: int,
    stats: str,
    session: Optional[Any] = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: Optional[str] = None,
) -> DataTable:
    url = leaderboard_url(team, season, stats)
    headers = {"User-Agent": user_agent} if user_agent else None
    table = extract_table_data(fetch_html(url, session=session, timeout=timeout, headers=headers))
    logger.info("Parsed %d %s rows for %s %s", len(table), stats, team, season)
    return table
