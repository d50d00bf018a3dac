"""
Zoom Levels

Discrete zoom tiers derived from how many years the viewport shows.
The tier drives tick spacing and whether artifact labels are drawn.
"""

from typing import Tuple

from ..types import Viewport, ZoomLevel

# Ordered coarsest to finest; the first tier whose min_span fits wins
ZOOM_LEVELS: Tuple[ZoomLevel, ...] = (
    ZoomLevel(level=1, name="Era", min_span=2500, major_interval=1000, minor_interval=500, show_items=False),
    ZoomLevel(level=2, name="Period", min_span=250, major_interval=100, minor_interval=50, show_items=True),
    ZoomLevel(level=3, name="Century", min_span=50, major_interval=50, minor_interval=10, show_items=True),
    ZoomLevel(level=4, name="Decade", min_span=0, major_interval=10, minor_interval=5, show_items=True),
)


def zoom_level_for_span(span: float) -> ZoomLevel:
    for level in ZOOM_LEVELS:
        if span >= level.min_span:
            return level
    return ZOOM_LEVELS[-1]


def zoom_level_of(viewport: Viewport) -> ZoomLevel:
    """Zoom tier of a viewport (pure function of end - start)."""
    return zoom_level_for_span(viewport.span)


def get_zoom_level(level: int) -> ZoomLevel:
    """
    Look up a tier by ordinal.

    Raises:
        ValueError: If level is not 1-4
    """
    for zoom_level in ZOOM_LEVELS:
        if zoom_level.level == level:
            return zoom_level
    raise ValueError(f"Unknown zoom level: {level}")
