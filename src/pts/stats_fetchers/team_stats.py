"""
Batting and fielding leaderboards for one team and season.

Non-current seasons are served from the CSV cache when possible. The current
season is always re-fetched, since its numbers change daily. Fetched tables
are written through to the cache; a failed cache write is logged and the
fetched tables are still returned.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pts.errors import CacheReadFailed, CacheWriteFailed
from pts.stats_fetchers import cache, fangraphs
from pts.table import DataTable
from pts.validation import current_year

logger = logging.getLogger(__name__)


def fetch_team_stats(
    team: str,
    season: int,
    session: Optional[Any] = None,
    timeout: float = fangraphs.DEFAULT_TIMEOUT,
    user_agent: Optional[str] = None,
) -> tuple[DataTable, DataTable]:
    kwargs = {"session": session, "timeout": timeout, "user_agent": user_agent}
    batting = fangraphs.fetch_table(team, season, fangraphs.BATTING, **kwargs)
    fielding = fangraphs.fetch_table(team, season, fangraphs.FIELDING, **kwargs)
    return batting, fielding


def get_team_stats(
    team: str,
    season: int,
    *,
    cache_dir: Path = cache.DEFAULT_CACHE_DIR,
    refresh: bool = False,
    session: Optional[Any] = None,
    timeout: float = fangraphs.DEFAULT_TIMEOUT,
    user_agent: Optional[str] = None,
    this_year: Optional[int] = None,
) -> tuple[DataTable, DataTable]:
    """
    Return ``(batting, fielding)`` tables for a validated team key and season.

    Raises ``FetchFailed`` / ``ParseFailed`` when the remote path is taken and
    fails. Cache problems never escape this function.
    """
    this_year = current_year() if this_year is None else this_year

    if season != this_year and not refresh:
        try:
            batting, fielding = cache.read_team_cache(cache_dir, team, season)
            logger.info("Using cached %s %s stats from %s", team, season, cache_dir)
            return batting, fielding
        except CacheReadFailed as exc:
            logger.info("Cache miss for %s %s: %s", team, season, exc)

    batting, fielding = fetch_team_stats(team, season, session=session, timeout=timeout, user_agent=user_agent)
    try:
        cache.write_team_cache(cache_dir, team, season, batting, fielding)
    except CacheWriteFailed as exc:
        logger.warning("Could not cache %s %s stats: %s", team, season, exc)
    return batting, fielding
