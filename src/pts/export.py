from __future__ import annotations

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

import pandas as pd

from pts.errors import ExportFailed
from pts.scoring import display_row, score
from pts.stick import Stick

logger = logging.getLogger(__name__)

EXPORT_COLUMNS: list[tuple[str, str]] = [
    ("name", "Name"),
    ("pa", "PA"),
    ("pospts", "+P"),
    ("posptsperpa", "+P/PA"),
    ("negpts", "-P"),
    ("negptsperpa", "-P/PA"),
    ("pts", "P"),
    ("ptsperpa", "P/PA"),
]


def sticks_frame(sticks: Sequence[Stick]) -> pd.DataFrame:
    """
    Scored table as a DataFrame, sorted by P/PA like the terminal table.

    Display columns carry the formatted strings shown in the terminal table;
    the raw counting stats follow so the export can be re-scored.
    """
    records = []
    for stick in sticks:
        cells = display_row(stick)
        record = {label: cells[key] for key, label in EXPORT_COLUMNS}
        record.update({k: v for k, v in asdict(stick).items() if k != "name"})
        net_rate = score(stick).net_per_pa
        record["_sort"] = net_rate if net_rate is not None else 0.0
        records.append(record)
    if not records:
        return pd.DataFrame(columns=[label for _, label in EXPORT_COLUMNS])
    df = pd.DataFrame(records)
    df = df.sort_values("_sort", ascending=False, kind="stable").drop(columns=["_sort"])
    return df.reset_index(drop=True)


def save_csv(sticks: Sequence[Stick], path: Path) -> Path:
    path = Path(path)
    df = sticks_frame(sticks)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
    except OSError as exc:
        raise ExportFailed(path, exc) from exc
    logger.info("Saved %s (%d rows)", path, len(df))
    return path
