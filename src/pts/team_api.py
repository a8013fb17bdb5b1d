"""
Team adapter: validated team key and season in, scored sticks out.

This is the seam between the data pipeline and its presenters (the terminal
table and the CSV export). Nothing here touches the terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pts.fuse import fuse
from pts.stats_fetchers import cache
from pts.stats_fetchers.fangraphs import DEFAULT_TIMEOUT
from pts.stats_fetchers.team_stats import get_team_stats
from pts.stick import Stick

logger = logging.getLogger(__name__)


def team_sticks(
    team: str,
    season: int,
    *,
    cache_dir: Path = cache.DEFAULT_CACHE_DIR,
    refresh: bool = False,
    include_errors: bool = True,
    session: Optional[Any] = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: Optional[str] = None,
    this_year: Optional[int] = None,
) -> list[Stick]:
    batting, fielding = get_team_stats(
        team,
        season,
        cache_dir=cache_dir,
        refresh=refresh,
        session=session,
        timeout=timeout,
        user_agent=user_agent,
        this_year=this_year,
    )
    sticks = fuse(batting, fielding, include_errors=include_errors)
    logger.info("Built %d sticks for %s %s", len(sticks), team, season)
    return sticks
