from __future__ import annotations

from pathlib import Path

import pandas as pd

from pts.export import save_csv, sticks_frame
from pts.stick import Stick


def test_sticks_frame_includes_display_and_raw_columns() -> None:
    df = sticks_frame([
        Stick(name="Low", plate_appearances=10, walks=1),
        Stick(name="High", plate_appearances=10, walks=5, errors=1),
    ])
    assert list(df["Name"]) == ["High", "Low"]
    assert df.loc[0, "P/PA"] == "0.400"
    assert df.loc[0, "-P"] == "-1"
    assert df.loc[0, "walks"] == 5
    assert df.loc[0, "errors"] == 1


def test_empty_export_still_has_header(tmp_path: Path) -> None:
    out = save_csv([], tmp_path / "empty.csv")
    assert out.read_text(encoding="utf-8").splitlines()[0] == "Name,PA,+P,+P/PA,-P,-P/PA,P,P/PA"
    assert pd.read_csv(out).empty
