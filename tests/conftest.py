from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from pts.table import DataTable

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200, url: str = "") -> None:
        self.text = text
        self.status_code = status_code
        self.url = url
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error for url: {self.url}", response=self)

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """
    Stands in for ``requests``: serves a page per stat kind ("bat"/"fld") and
    records every request.
    """

    def __init__(self, pages: dict[str, str], status_code: int = 200, error: Optional[Exception] = None) -> None:
        self.pages = pages
        self.status_code = status_code
        self.error = error
        self.calls: list[dict] = []
        self.responses: list[FakeResponse] = []

    def get(self, url: str, headers=None, timeout=None) -> FakeResponse:
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        stats = parse_qs(urlparse(url).query)["stats"][0]
        resp = FakeResponse(self.pages[stats], status_code=self.status_code, url=url)
        self.responses.append(resp)
        return resp


@pytest.fixture
def bat_html() -> str:
    return (FIXTURES / "det_2023_bat.html").read_text(encoding="utf-8")


@pytest.fixture
def fld_html() -> str:
    return (FIXTURES / "det_2023_fld.html").read_text(encoding="utf-8")


@pytest.fixture
def fake_session(bat_html: str, fld_html: str) -> FakeSession:
    return FakeSession({"bat": bat_html, "fld": fld_html})


@pytest.fixture
def batting_table() -> DataTable:
    headers = ["#", "Name", "G", "AB", "PA", "H", "1B", "2B", "3B", "HR", "R", "RBI",
               "BB", "IBB", "SO", "HBP", "SF", "SH", "GDP", "SB", "CS", "AVG"]
    rows = [
        ["1", "X", "20", "90", "100", "18", "10", "5", "1", "2", "7", "8",
         "6", "0", "20", "1", "1", "0", "3", "3", "0", ".200"],
        ["2", "Y", "5", "0", "0", "0", "", "", "", "", "", "",
         "", "", "", "", "", "", "", "", "", ""],
    ]
    return DataTable(headers=headers, rows=rows)


@pytest.fixture
def fielding_table() -> DataTable:
    headers = ["#", "Name", "Pos", "G", "GS", "Inn", "PO", "A", "E", "FE", "TE", "DP"]
    rows = [
        ["1", "X", "SS", "10", "10", "90.0", "12", "20", "3", "1", "2", "4"],
        ["2", "Z", "C", "10", "10", "90.0", "50", "5", "9", "0", "9", "1"],
        ["3", "X", "2B", "8", "8", "70.0", "10", "15", "4", "2", "2", "3"],
    ]
    return DataTable(headers=headers, rows=rows)
