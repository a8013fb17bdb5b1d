from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from pts.errors import ParseFailed


@dataclass
class DataTable:
    """
    A scraped leaderboard: header names plus rows of string cells.

    No typing happens at this layer; every cell is kept exactly as scraped.
    """

    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def column_index(self, name: str) -> int:
        return self.column_indices([name])[name]

    def column_indices(self, names: Iterable[str], *, label: str = "table") -> dict[str, int]:
        """
        Resolve header names to column positions, failing on any that are missing.

        The first occurrence wins when a header repeats.
        """
        positions: dict[str, int] = {}
        for idx, header in enumerate(self.headers):
            positions.setdefault(header.strip(), idx)
        wanted = list(names)
        missing = [name for name in wanted if name not in positions]
        if missing:
            raise ParseFailed(f"{label} is missing expected columns: {', '.join(missing)}")
        return {name: positions[name] for name in wanted}

    def has_column(self, name: str) -> bool:
        return any(header.strip() == name for header in self.headers)


def fit_row(cells: Iterable[str], width: int) -> List[str]:
    """
    Pad with empty strings or truncate so a row has exactly ``width`` cells.
    """
    row = list(cells)[:width]
    row.extend([""] * (width - len(row)))
    return row
