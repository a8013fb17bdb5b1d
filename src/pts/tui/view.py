from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.style import Style
from rich.table import Table
from rich.text import Text

from pts.tui.model import COLUMNS, StatTableModel

STYLE_SUBTLE = Style(color="#888888")
STYLE_BASE = Style(color="#eeeeee")
STYLE_BORDER = Style(color="#89b4fa")
HELP_TEXT = "Press ctrl+c or esc to quit. ←/→ page, 1-8 sort."


def build_table(model: StatTableModel, rows: Optional[list[dict[str, str]]] = None, caption: Optional[str] = None) -> Table:
    table = Table(
        box=box.ROUNDED,
        style=STYLE_BASE,
        border_style=STYLE_BORDER,
        header_style=Style(bold=True),
        caption=model.footer() if caption is None else caption,
        caption_style=STYLE_SUBTLE,
    )
    for col in COLUMNS:
        title = col.title
        if col.key == model.sort_key:
            title += " ▼" if model.descending else " ▲"
        table.add_column(
            title,
            justify="left" if col.key == "name" else "right",
            min_width=col.width,
            no_wrap=True,
            style=Style(bold=True) if col.key == "ptsperpa" else None,
        )
    for row in model.visible_rows() if rows is None else rows:
        table.add_row(*(row[col.key] for col in COLUMNS))
    return table


def render(model: StatTableModel) -> RenderableType:
    """One screen: the key help line above the current page."""
    view = Group(Text(HELP_TEXT, style=STYLE_SUBTLE), build_table(model))
    return Padding(view, (0, 0, 0, 1))


def render_all(model: StatTableModel) -> RenderableType:
    """Every row in one table, for non-interactive output."""
    caption = f"Viewing {model.team} {model.season} - {len(model)} players"
    return Padding(build_table(model, rows=model.all_rows(), caption=caption), (0, 0, 0, 1))
