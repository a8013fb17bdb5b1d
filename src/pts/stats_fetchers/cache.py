"""
On-disk CSV cache for scraped leaderboards.

Each (team, season) entry is two files in the cache directory:
``<TEAM>-<YEAR>-bat.csv`` and ``<TEAM>-<YEAR>-fld.csv``. The first line is the
header row exactly as scraped; every following line is one player row.
"""
from __future__ import annotations

import csv
import logging
import os
import tempfile
from pathlib import Path

from pts.errors import CacheReadFailed, CacheWriteFailed
from pts.stats_fetchers.fangraphs import BATTING, FIELDING
from pts.table import DataTable, fit_row

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path("pts_cache")
CACHE_DIR_MODE = 0o755
CACHE_FILE_MODE = 0o644


def cache_path(cache_dir: Path, team: str, season: int, stats: str) -> Path:
    return Path(cache_dir) / f"{team.upper()}-{season}-{stats}.csv"


def cache_paths(cache_dir: Path, team: str, season: int) -> tuple[Path, Path]:
    return (
        cache_path(cache_dir, team, season, BATTING),
        cache_path(cache_dir, team, season, FIELDING),
    )



def _write_temp(table: DataTable, path: Path) -> str:
    """Write ``table`` to a temp file beside ``path`` and return the temp name."""
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerow(table.headers)
            writer.writerows(table.rows)
        # NamedTemporaryFile creates 0600; cache files are world-readable.
        os.chmod(tmp_name, CACHE_FILE_MODE)
    except (OSError, csv.Error) as exc:
        _discard(tmp_name)
        raise CacheWriteFailed(path, exc) from exc
    return tmp_name


def _discard(name: str | Path | None) -> None:
    if name is not None and os.path.exists(name):
        os.unlink(name)


def write_csv(table: DataTable, path: Path) -> None:
    """
    Write a table to ``path`` via a temp file in the same directory.

    Readers never observe a half-written file: the temp file only replaces the
    target once it is complete.
    """
    path = Path(path)
    tmp_name = _write_temp(table, path)
    try:
        os.replace(tmp_name, path)
    except OSError as exc:
        _discard(tmp_name)
        raise CacheWriteFailed(path, exc) from exc


def read_csv(path: Path) -> DataTable:
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as fh:
            data = list(csv.reader(fh, strict=True))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise CacheReadFailed(path, exc) from exc
    if not data or not any(cell.strip() for cell in data[0]):
        raise CacheReadFailed(path, "file is empty")
    headers = data[0]
    rows = [fit_row(row, len(headers)) for row in data[1:]]
    return DataTable(headers=headers, rows=rows)


def write_team_cache(cache_dir: Path, team: str, season: int, batting: DataTable, fielding: DataTable) -> None:
    cache_dir = Path(cache_dir)
    try:
        cache_dir.mkdir(mode=CACHE_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise CacheWriteFailed(cache_dir, exc) from exc

    bat_path, fld_path = cache_paths(cache_dir, team, season)
    bat_tmp = _write_temp(batting, bat_path)
    try:
        fld_tmp = _write_temp(fielding, fld_path)
    except CacheWriteFailed:
        _discard(bat_tmp)
        raise

    # Both files are complete on disk before either is moved into place. If
    # the second move fails, the batting file is removed so the entry reads
    # as a miss instead of pairing new batting rows with old fielding rows.
    try:
        os.replace(bat_tmp, bat_path)
    except OSError as exc:
        _discard(bat_tmp)
        _discard(fld_tmp)
        raise CacheWriteFailed(bat_path, exc) from exc
    try:
        os.replace(fld_tmp, fld_path)
    except OSError as exc:
        _discard(fld_tmp)
        _discard(bat_path)
        raise CacheWriteFailed(fld_path, exc) from exc
    logger.info("Cached %s %s stats in %s and %s", team, season, bat_path, fld_path)


def read_team_cache(cache_dir: Path, team: str, season: int) -> tuple[DataTable, DataTable]:
    cache_dir = Path(cache_dir)
    if not cache_dir.is_dir():
        raise CacheReadFailed(cache_dir, "cache directory does not exist")
    bat_path, fld_path = cache_paths(cache_dir, team, season)
    batting = read_csv(bat_path)
    fielding = read_csv(fld_path)
    return batting, fielding
