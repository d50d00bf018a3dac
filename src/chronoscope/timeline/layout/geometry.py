"""
Frame Geometry
==============

Immutable per-frame draw description produced by the FrameProjector and
consumed by the FramePainter. All coordinates are canvas pixels.

Only entities that survive culling appear in a frame.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Tuple

from ..types import ZoomLevel


class TextRole(Enum):
    """Which font a piece of text is drawn (and measured) with."""
    TICK_LABEL = auto()
    ARTIFACT_LABEL = auto()
    SPAN_LABEL = auto()
    MARKER_LABEL = auto()
    TOOLTIP_TITLE = auto()
    TOOLTIP_SUBTITLE = auto()
    CURSOR_LABEL = auto()


# (text, role) -> rendered width in pixels
TextMeasure = Callable[[str, TextRole], float]

# Vertical extent used for hit testing labels drawn under markers
MARKER_HIT_LABEL_HEIGHT = 14
HIT_SLOP = 3


def approximate_text_width(text: str, role: TextRole) -> float:
    """Font-free width estimate, used when no real font metrics are available."""
    per_char = 7.5 if role is TextRole.TOOLTIP_TITLE else 6.0
    return len(text) * per_char


@dataclass(frozen=True)
class ArtifactGeometry:
    key: str
    x: float
    y: float
    size: float
    hovered: bool
    label: str
    label_x: float
    label_y: float
    label_visible: bool


@dataclass(frozen=True)
class SpanGeometry:
    """
    A landmark bar. start_x/end_x are the unclipped endpoints; bar_start_x
    and bar_end_x are the drawn (clipped) extent.
    """
    key: str
    y: float
    start_x: float
    end_x: float
    bar_start_x: float
    bar_end_x: float
    show_start_diamond: bool
    show_end_diamond: bool
    label: str
    label_x: float
    label_y: float


@dataclass(frozen=True)
class MarkerGeometry:
    key: str
    x: float
    y: float
    half_height: float
    label: str
    label_x: float
    label_y: float


@dataclass(frozen=True)
class TickGeometry:
    x: float
    half_height: float
    is_major: bool
    label: Optional[str]
    label_y: float


@dataclass(frozen=True)
class AxisGeometry:
    y: float
    width: float
    ticks: Tuple[TickGeometry, ...] = ()


@dataclass(frozen=True)
class CursorGeometry:
    x: float
    label: str
    label_y: float


@dataclass(frozen=True)
class TooltipGeometry:
    x: float
    y: float
    width: float
    height: float
    title: str
    subtitle: str
    title_x: float
    title_y: float
    subtitle_x: float
    subtitle_y: float


@dataclass(frozen=True)
class FrameGeometry:
    width: float
    height: float
    zoom_level: ZoomLevel
    axis: AxisGeometry
    artifacts: Tuple[ArtifactGeometry, ...] = ()
    spans: Tuple[SpanGeometry, ...] = ()
    markers: Tuple[MarkerGeometry, ...] = ()
    cursor: Optional[CursorGeometry] = None
    tooltip: Optional[TooltipGeometry] = None
    visible_entity_count: int = 0
    visible_landmark_count: int = 0

    def hit_test(self, x: float, y: float) -> Optional[str]:
        """
        Key of the topmost entity under (x, y), or None.

        Artifacts win over markers, markers over spans. Within a layer the
        later item is on top.
        """
        for artifact in reversed(self.artifacts):
            reach = artifact.size + HIT_SLOP
            if abs(x - artifact.x) + abs(y - artifact.y) <= reach:
                return artifact.key

        for marker in reversed(self.markers):
            top = marker.y - marker.half_height
            bottom = marker.y + marker.half_height + MARKER_HIT_LABEL_HEIGHT
            if abs(x - marker.x) <= HIT_SLOP + 1 and top <= y <= bottom:
                return marker.key

        for span in reversed(self.spans):
            if span.bar_start_x <= x <= span.bar_end_x and abs(y - span.y) <= HIT_SLOP + 2:
                return span.key

        return None
