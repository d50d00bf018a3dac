"""
Timing System

Year-axis math. Years are signed numbers on the astronomical axis (BC
negative); pixels only appear at the year_to_pixel/pixel_to_year seam.

Modules:
- era_parser: Free-text era strings to year intervals
- viewport: Year <-> pixel mapping, zoom, pan, clamping
- zoom_levels: Discrete zoom tiers
- tick_generator: Axis ticks per tier
- grid_renderer: Draws the axis (PyQt6; import it directly)
"""

from .era_parser import parse_era, format_year, century_bounds
from .viewport import (
    ViewportModel, make_viewport, clamp_viewport, initial_viewport, full_viewport,
    year_to_pixel, pixel_to_year, zoom, pan,
)
from .zoom_levels import ZOOM_LEVELS, zoom_level_of, zoom_level_for_span, get_zoom_level
from .tick_generator import generate_ticks, format_tick_label

__all__ = [
    'parse_era',
    'format_year',
    'century_bounds',
    'ViewportModel',
    'make_viewport',
    'clamp_viewport',
    'initial_viewport',
    'full_viewport',
    'year_to_pixel',
    'pixel_to_year',
    'zoom',
    'pan',
    'ZOOM_LEVELS',
    'zoom_level_of',
    'zoom_level_for_span',
    'get_zoom_level',
    'generate_ticks',
    'format_tick_label',
]
