from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from conftest import FakeSession
from pts.errors import FetchFailed, ParseFailed
from pts.stats_fetchers import cache
from pts.stats_fetchers.team_stats import get_team_stats
from pts.table import DataTable

THIS_YEAR = 2024


def test_past_season_fetches_once_then_reads_cache(tmp_path: Path, fake_session: FakeSession) -> None:
    first = get_team_stats("DET", 2023, cache_dir=tmp_path, session=fake_session, this_year=THIS_YEAR)
    assert len(fake_session.calls) == 2
    assert "stats=bat" in fake_session.calls[0]["url"]
    assert "stats=fld" in fake_session.calls[1]["url"]
    assert (tmp_path / "DET-2023-bat.csv").exists()
    assert (tmp_path / "DET-2023-fld.csv").exists()

    second = get_team_stats("DET", 2023, cache_dir=tmp_path, session=fake_session, this_year=THIS_YEAR)
    assert second == first
    assert len(fake_session.calls) == 2


def test_current_season_bypasses_and_overwrites_cache(tmp_path: Path, fake_session: FakeSession) -> None:
    stale = DataTable(headers=["#", "Name"], rows=[["1", "Old Timer"]])
    cache.write_team_cache(tmp_path, "DET", THIS_YEAR, stale, stale)

    batting, fielding = get_team_stats("DET", THIS_YEAR, cache_dir=tmp_path, session=fake_session, this_year=THIS_YEAR)

    assert len(fake_session.calls) == 2
    assert batting.rows[0][1] == "Spencer Torkelson"
    cached_bat, cached_fld = cache.read_team_cache(tmp_path, "DET", THIS_YEAR)
    assert cached_bat == batting
    assert cached_fld == fielding


def test_refresh_forces_fetch_for_past_season(tmp_path: Path, fake_session: FakeSession) -> None:
    stale = DataTable(headers=["#", "Name"], rows=[["1", "Old Timer"]])
    cache.write_team_cache(tmp_path, "DET", 2023, stale, stale)

    batting, _ = get_team_stats("DET", 2023, cache_dir=tmp_path, refresh=True, session=fake_session, this_year=THIS_YEAR)

    assert len(fake_session.calls) == 2
    assert batting.rows[0][1] == "Spencer Torkelson"


def test_corrupt_cache_falls_back_to_fetch(tmp_path: Path, fake_session: FakeSession) -> None:
    (tmp_path / "DET-2023-bat.csv").write_text("", encoding="utf-8")
    (tmp_path / "DET-2023-fld.csv").write_text("", encoding="utf-8")

    batting, _ = get_team_stats("DET", 2023, cache_dir=tmp_path, session=fake_session, this_year=THIS_YEAR)

    assert len(fake_session.calls) == 2
    assert len(batting) == 3
    assert cache.read_team_cache(tmp_path, "DET", 2023)[0] == batting


def test_cache_write_failure_is_logged_not_raised(
    tmp_path: Path, fake_session: FakeSession, caplog: pytest.LogCaptureFixture
) -> None:
    blocker = tmp_path / "pts_cache"
    blocker.write_text("in the way", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="pts"):
        batting, fielding = get_team_stats("DET", 2023, cache_dir=blocker, session=fake_session, this_year=THIS_YEAR)

    assert len(batting) == 3
    assert len(fielding) == 4
    assert "Could not cache DET 2023 stats" in caplog.text


def test_fetch_failure_propagates(tmp_path: Path, bat_html: str, fld_html: str) -> None:
    session = FakeSession({"bat": bat_html, "fld": fld_html}, status_code=500)
    with pytest.raises(FetchFailed):
        get_team_stats("DET", 2023, cache_dir=tmp_path, session=session, this_year=THIS_YEAR)
    assert not (tmp_path / "DET-2023-bat.csv").exists()


def test_parse_failure_propagates(tmp_path: Path) -> None:
    session = FakeSession({"bat": "<html></html>", "fld": "<html></html>"})
    with pytest.raises(ParseFailed):
        get_team_stats("DET", 2023, cache_dir=tmp_path, session=session, this_year=THIS_YEAR)


def test_half_written_cache_is_refetched(
    tmp_path: Path, fake_session: FakeSession, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    stale = DataTable(headers=["#", "Name", "E"], rows=[["1", "Old", "9"]])
    cache.write_team_cache(tmp_path, "DET", 2023, stale, stale)

    real_replace = os.replace

    def replace(src, dst):
        if str(dst).endswith("-fld.csv"):
            raise OSError(28, "No space left on device")
        return real_replace(src, dst)

    monkeypatch.setattr(cache.os, "replace", replace)
    with caplog.at_level(logging.WARNING, logger="pts"):
        get_team_stats("DET", 2023, cache_dir=tmp_path, refresh=True, session=fake_session, this_year=THIS_YEAR)
    assert "Could not cache DET 2023 stats" in caplog.text
    monkeypatch.undo()

    batting, fielding = get_team_stats("DET", 2023, cache_dir=tmp_path, session=fake_session, this_year=THIS_YEAR)
    assert len(fake_session.calls) == 4
    assert [row[1] for row in batting.rows] == ["Spencer Torkelson", "Riley Greene", "Kerry Carpenter"]
    assert "Old" not in [row[1] for row in fielding.rows]
