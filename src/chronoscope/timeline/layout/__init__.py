"""
Timeline Layout

Entity building, row packing and per-frame projection.
"""

from .row_packer import pack, row_count, point_intervals
from .entities import build_entities, build_artifact_entity, build_landmark_entity, assign_rows
from .geometry import FrameGeometry, TextRole, approximate_text_width
from .tooltip import place_tooltip
from .projector import FrameProjector, truncate_label

__all__ = [
    'pack',
    'row_count',
    'point_intervals',
    'build_entities',
    'build_artifact_entity',
    'build_landmark_entity',
    'assign_rows',
    'FrameGeometry',
    'TextRole',
    'approximate_text_width',
    'place_tooltip',
    'FrameProjector',
    'truncate_label',
]
