"""
Tick Generator

Axis ticks for a viewport at a zoom tier.

Ticks are snapped outward to the tier's minor interval so the first and
last tick may sit just outside the visible range; the renderer culls them.
"""

import math
from typing import List

from ..types import Tick, Viewport, ZoomLevel

# Tiers at or below this ordinal abbreviate thousands ("2.5k BC")
ABBREVIATE_MAX_LEVEL = 2


def format_tick_label(year: int, level: int) -> str:
    """
    Format a tick year for the given zoom ordinal.

    Coarse tiers abbreviate magnitudes >= 1000 to "Nk", with one decimal
    unless the year is a whole thousand. Year 0 is "1 AD".
    """
    if year == 0:
        return "1 AD"

    era = "BC" if year < 0 else "AD"
    magnitude = abs(year)
    if level <= ABBREVIATE_MAX_LEVEL and magnitude >= 1000:
        if magnitude % 1000 == 0:
            return f"{magnitude // 1000}k {era}"
        # Halves round up: 1250 is "1.3k"
        tenths = math.floor(magnitude / 100 + 0.5)
        return f"{tenths / 10:.1f}k {era}"
    return f"{magnitude} {era}"


def generate_ticks(viewport: Viewport, level: ZoomLevel) -> List[Tick]:
    """
    One tick per minor step across the (snapped) viewport.

    A tick is major iff its year is a multiple of the major interval.
    """
    minor = level.minor_interval
    first = math.floor(viewport.start / minor) * minor
    last = math.ceil(viewport.end / minor) * minor

    ticks = []
    for year in range(int(first), int(last) + 1, minor):
        ticks.append(Tick(
            year=year,
            label=format_tick_label(year, level.level),
            is_major=year % level.major_interval == 0,
        ))
    return ticks
