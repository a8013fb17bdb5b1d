from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class Stick:
    """
    One batter's season of counting stats.

    Points and rates are derived on demand in ``pts.scoring``; nothing derived
    is stored here.
    """

    name: str
    games_played: int = 0
    plate_appearances: int = 0
    singles: int = 0
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    runs_scored: int = 0
    runs_batted_in: int = 0
    stolen_bases: int = 0
    walks: int = 0
    hit_by_pitches: int = 0
    sac_bunts: int = 0
    strike_outs: int = 0
    ground_into_double_plays: int = 0
    errors: int = 0

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Stick name must not be empty")
        for f in fields(self):
            if f.name == "name":
                continue
            if getattr(self, f.name) < 0:
                raise ValueError(f"{f.name} must be >= 0 for {self.name}")


COUNT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(Stick) if f.name != "name")
