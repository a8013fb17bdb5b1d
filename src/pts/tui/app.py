"""
Interactive pager for the stats table.

Redraws the current page after every key press. Esc or ctrl+c quits.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence

import click
from rich.console import Console

from pts.stick import Stick
from pts.tui import view
from pts.tui.model import COLUMNS, StatTableModel

ESC = "\x1b"
CTRL_C = "\x03"

# POSIX escape sequences and Windows scan codes as returned by click.getchar().
NEXT_KEYS = {"\x1b[C", "\x1bOC", "\x1b[6~", "\xe0M", "\x00M", "\xe0Q", "\x00Q", "l", "n", " "}
PREV_KEYS = {"\x1b[D", "\x1bOD", "\x1b[5~", "\xe0K", "\x00K", "\xe0I", "\x00I", "h", "p"}
FIRST_KEYS = {"\x1b[H", "\x1bOH", "\x1b[1~", "\xe0G", "\x00G", "g"}
LAST_KEYS = {"\x1b[F", "\x1bOF", "\x1b[4~", "\xe0O", "\x00O", "G"}
QUIT_KEYS = {ESC, CTRL_C}
SORT_KEYS = {str(i): col.key for i, col in enumerate(COLUMNS, start=1)}


def handle_key(model: StatTableModel, key: str) -> bool:
    """
    Apply one key press to the model. Returns False when the pager should exit.
    """
    if key in QUIT_KEYS:
        return False
    if key in NEXT_KEYS:
        model.next_page()
    elif key in PREV_KEYS:
        model.prev_page()
    elif key in FIRST_KEYS:
        model.first_page()
    elif key in LAST_KEYS:
        model.last_page()
    elif key in SORT_KEYS:
        model.sort_by(SORT_KEYS[key])
    return True


def run(
    model: StatTableModel,
    console: Optional[Console] = None,
    getchar: Callable[[], str] = click.getchar,
) -> None:
    console = console or Console()
    while True:
        console.clear()
        console.print(view.render(model))
        try:
            key = getchar()
        except (KeyboardInterrupt, EOFError):
            break
        if not handle_key(model, key):
            break


def show(
    sticks: Sequence[Stick],
    team: str,
    season: int | str,
    *,
    interactive: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Present scored sticks: the paged pager on a terminal, one full table otherwise.
    """
    console = console or Console()
    model = StatTableModel(sticks, team, season)
    if interactive:
        run(model, console=console)
    else:
        console.print(view.render_all(model))
