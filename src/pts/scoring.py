"""
Pick the Stick scoring.

Positive points reward production (total bases plus runs, RBI, steals, walks,
HBP and sac bunts); negative points charge strikeouts, double plays (twice)
and fielding errors. Rates divide by plate appearances and are undefined for a
player with none.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pts.stick import Stick

RATE_PLACES = 3


def positive_points(stick: Stick) -> int:
    return (
        stick.singles
        + 2 * stick.doubles
        + 3 * stick.triples
        + 4 * stick.home_runs
        + stick.runs_scored
        + stick.runs_batted_in
        + stick.stolen_bases
        + stick.walks
        + stick.hit_by_pitches
        + stick.sac_bunts
    )


def negative_points(stick: Stick) -> int:
    return stick.strike_outs + 2 * stick.ground_into_double_plays + stick.errors


def per_pa(points: int, plate_appearances: int) -> Optional[float]:
    if plate_appearances <= 0:
        return None
    return points / plate_appearances


@dataclass(frozen=True)
class Score:
    positive: int
    negative: int
    net: int
    positive_per_pa: Optional[float]
    negative_per_pa: Optional[float]
    net_per_pa: Optional[float]


def score(stick: Stick) -> Score:
    pos = positive_points(stick)
    neg = negative_points(stick)
    net = pos - neg
    pa = stick.plate_appearances
    return Score(
        positive=pos,
        negative=neg,
        net=net,
        positive_per_pa=per_pa(pos, pa),
        negative_per_pa=per_pa(neg, pa),
        net_per_pa=per_pa(net, pa),
    )


def fmt_count(val: int) -> str:
    return str(val) if val > 0 else "0"


def fmt_negative_count(val: int) -> str:
    return f"-{val}" if val > 0 else "0"


def fmt_rate(val: Optional[float]) -> str:
    """
    Three-decimal rate, or "0" when the rate is undefined (no plate appearances).
    """
    if val is None:
        return "0"
    return f"{val:.{RATE_PLACES}f}"


def fmt_negative_rate(val: Optional[float]) -> str:
    # Always shown with a leading minus, whatever the sign of the value.
    if val is None:
        return "0"
    return f"-{val:.{RATE_PLACES}f}"


def display_row(stick: Stick) -> dict[str, str]:
    """
    Cell strings for the UI columns, keyed by column key.
    """
    s = score(stick)
    return {
        "name": stick.name,
        "pa": fmt_count(stick.plate_appearances),
        "pospts": fmt_count(s.positive),
        "posptsperpa": fmt_rate(s.positive_per_pa),
        "negpts": fmt_negative_count(s.negative),
        "negptsperpa": fmt_negative_rate(s.negative_per_pa),
        "pts": str(s.net),
        "ptsperpa": fmt_rate(s.net_per_pa),
    }
