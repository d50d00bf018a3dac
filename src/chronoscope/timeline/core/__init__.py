"""
Timeline Core Components

Qt surface, painter and engine.
"""

from .canvas import TimelineCanvas
from .engine import TimelineEngine
from .painter import FramePainter
from .style import TimelineStyle

__all__ = [
    'TimelineCanvas',
    'TimelineEngine',
    'FramePainter',
    'TimelineStyle',
]
