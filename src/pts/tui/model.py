"""
Paging and sorting state for the stats table, independent of any terminal.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pts.scoring import Score, display_row, score
from pts.stick import Stick

PAGE_SIZE = 12


@dataclass(frozen=True)
class Column:
    key: str
    title: str
    width: int
    sort_value: Callable[[Stick, Score], float]


def _rate(val: Optional[float]) -> float:
    return 0.0 if val is None else val


COLUMNS: tuple[Column, ...] = (
    Column("name", "Name", 20, lambda st, sc: 0.0),
    Column("pa", "PA", 6, lambda st, sc: float(st.plate_appearances)),
    Column("pospts", "+P", 6, lambda st, sc: float(sc.positive)),
    Column("posptsperpa", "+P/PA", 6, lambda st, sc: _rate(sc.positive_per_pa)),
    Column("negpts", "-P", 6, lambda st, sc: -float(sc.negative)),
    Column("negptsperpa", "-P/PA", 6, lambda st, sc: -_rate(sc.negative_per_pa)),
    Column("pts", "P", 6, lambda st, sc: float(sc.net)),
    Column("ptsperpa", "P/PA", 6, lambda st, sc: _rate(sc.net_per_pa)),
)
COLUMNS_BY_KEY = {col.key: col for col in COLUMNS}
DEFAULT_SORT = "ptsperpa"


@dataclass
class _Entry:
    stick: Stick
    score: Score
    cells: dict[str, str]


class StatTableModel:
    """
    Sticks for one team/season, sorted and split into pages.

    Pages are 1-based. Moving past the last page wraps to the first and
    vice versa.
    """

    def __init__(
        self,
        sticks: Sequence[Stick],
        team: str,
        season: int | str,
        page_size: int = PAGE_SIZE,
        sort_key: str = DEFAULT_SORT,
        descending: bool = True,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.team = team
        self.season = str(season)
        self.page_size = page_size
        self.current_page = 1
        self._entries = [_Entry(st, score(st), display_row(st)) for st in sticks]
        self.sort_key = sort_key
        self.descending = descending
        self._apply_sort()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def max_pages(self) -> int:
        return max(1, math.ceil(len(self._entries) / self.page_size))

    def _apply_sort(self) -> None:
        if self.sort_key not in COLUMNS_BY_KEY:
            raise ValueError(f"Unknown column '{self.sort_key}'")
        if self.sort_key == "name":
            self._entries.sort(key=lambda e: e.stick.name.casefold(), reverse=self.descending)
            return
        col = COLUMNS_BY_KEY[self.sort_key]
        # Name ascending breaks ties in both directions.
        self._entries.sort(key=lambda e: e.stick.name.casefold())
        self._entries.sort(key=lambda e: col.sort_value(e.stick, e.score), reverse=self.descending)

    def sort_by(self, key: str) -> None:
        """
        Sort by a column; choosing the active column again flips the direction.
        """
        if key == self.sort_key:
            self.descending = not self.descending
        else:
            self.sort_key = key
            self.descending = key != "name"
        self._apply_sort()
        self.current_page = 1

    def next_page(self) -> None:
        self.current_page = self.current_page % self.max_pages + 1

    def prev_page(self) -> None:
        self.current_page = (self.current_page - 2) % self.max_pages + 1

    def first_page(self) -> None:
        self.current_page = 1

    def last_page(self) -> None:
        self.current_page = self.max_pages

    def all_rows(self) -> list[dict[str, str]]:
        return [e.cells for e in self._entries]

    def visible_rows(self) -> list[dict[str, str]]:
        start = (self.current_page - 1) * self.page_size
        return [e.cells for e in self._entries[start:start + self.page_size]]

    def footer(self) -> str:
        return f"Viewing {self.team} {self.season} - Pg. {self.current_page}/{self.max_pages}"
