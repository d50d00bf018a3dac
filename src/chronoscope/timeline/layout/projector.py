"""
Frame Projector
===============

Projects entities, row assignments and the current viewport onto canvas
pixels, producing an immutable FrameGeometry for the painter.

Vertical layout (fractions of canvas height, top = 0):
    span rows      0.42, stacking upward by span_row_spacing
    marker rows    0.52, stacking downward by marker_row_spacing
    artifacts      0.78
    axis           0.88 (artifact labels sit below it)
"""

from typing import Dict, List, Optional, Sequence

from ..types import TimelineEntity, EntityRole, TooltipDescriptor, Viewport
from ..settings import TimelineSettings
from ..constants import (
    MAJOR_TICK_HEIGHT, MINOR_TICK_HEIGHT, TICK_LABEL_OFFSET,
    CURSOR_LABEL_OFFSET, SPAN_LABEL_OFFSET, MARKER_HALF_HEIGHT, MARKER_LABEL_OFFSET,
)
from ..timing.viewport import year_to_pixel, pixel_to_year
from ..timing.zoom_levels import zoom_level_of
from ..timing.tick_generator import generate_ticks
from ..timing.era_parser import format_year
from .geometry import (
    FrameGeometry, AxisGeometry, TickGeometry, ArtifactGeometry, SpanGeometry,
    MarkerGeometry, CursorGeometry, TextMeasure, TextRole, approximate_text_width,
)
from .tooltip import place_tooltip


def truncate_label(name: str, max_chars: int) -> str:
    """Cut to max_chars characters, the last one being an ellipsis."""
    if len(name) <= max_chars:
        return name
    return name[:max_chars - 1] + "…"


class FrameProjector:
    """
    Stateless frame projection.

    measure_text supplies label widths; the Qt canvas passes real font
    metrics, tests can rely on the default estimate.
    """

    def __init__(self, settings: Optional[TimelineSettings] = None, measure_text: Optional[TextMeasure] = None):
        self.settings = settings or TimelineSettings()
        self.measure_text = measure_text or approximate_text_width

    def project(
        self,
        entities: Sequence[TimelineEntity],
        rows: Dict[str, int],
        viewport: Viewport,
        width: float,
        height: float,
        hover: Optional[TooltipDescriptor] = None,
        cursor_x: Optional[float] = None
    ) -> FrameGeometry:
        """
        Build the geometry for one frame.

        Args:
            entities: Resolved entities (any order; draw order follows it)
            rows: Row assignment for spans and point markers
            viewport: Visible year range
            width, height: Canvas size in pixels (must be positive)
            hover: Active tooltip, if any
            cursor_x: Pointer x for the cursor readout, None when outside

        Returns:
            FrameGeometry
        """
        s = self.settings
        level = zoom_level_of(viewport)
        axis_y = height * s.axis_y_ratio
        hovered_key = hover.key if hover else None

        artifacts: List[ArtifactGeometry] = []
        spans: List[SpanGeometry] = []
        markers: List[MarkerGeometry] = []
        visible_entities = 0

        for entity in entities:
            if entity.role is EntityRole.ARTIFACT:
                geometry = self._project_artifact(entity, viewport, width, height, axis_y, level.show_items, hovered_key)
                if geometry is not None:
                    artifacts.append(geometry)
                    if 0 < geometry.x < width:
                        visible_entities += 1
            elif entity.role is EntityRole.SPAN:
                geometry = self._project_span(entity, rows.get(entity.key, 0), viewport, width, height)
                if geometry is not None:
                    spans.append(geometry)
            else:
                geometry = self._project_marker(entity, rows.get(entity.key, 0), viewport, width, height)
                if geometry is not None:
                    markers.append(geometry)

        return FrameGeometry(
            width=width,
            height=height,
            zoom_level=level,
            axis=self._project_axis(viewport, level, width, axis_y),
            artifacts=tuple(artifacts),
            spans=tuple(spans),
            markers=tuple(markers),
            cursor=self._project_cursor(cursor_x, viewport, width, axis_y),
            tooltip=self._project_tooltip(hover, width),
            visible_entity_count=visible_entities,
            visible_landmark_count=len(spans),
        )

    # =========================================================================
    # Entities
    # =========================================================================

    def _in_cull_range(self, x: float, width: float) -> bool:
        margin = self.settings.cull_margin
        return -margin < x < width + margin

    def _project_artifact(self, entity, viewport, width, height, axis_y, show_labels, hovered_key):
        s = self.settings
        x = year_to_pixel(entity.midpoint, viewport, width)
        if not self._in_cull_range(x, width):
            return None

        hovered = entity.key == hovered_key
        size = s.artifact_size * (s.artifact_hover_scale if hovered else 1.0)
        return ArtifactGeometry(
            key=entity.key,
            x=x,
            y=height * s.artifact_y_ratio,
            size=size,
            hovered=hovered,
            label=truncate_label(entity.name, s.artifact_label_max_chars),
            label_x=x,
            label_y=axis_y + s.artifact_label_offset,
            label_visible=show_labels,
        )

    def _project_span(self, entity, row, viewport, width, height):
        s = self.settings
        start_x = year_to_pixel(entity.interval.year_start, viewport, width)
        end_x = year_to_pixel(entity.interval.year_end, viewport, width)
        if end_x < -s.cull_margin or start_x > width + s.cull_margin:
            return None

        clip = s.clip_margin
        y = height * s.span_y_ratio - row * s.span_row_spacing

        label_width = self.measure_text(entity.name, TextRole.SPAN_LABEL)
        center_x = (start_x + end_x) / 2
        low = label_width / 2 + s.label_edge_margin
        high = width - label_width / 2 - s.label_edge_margin
        label_x = max(low, min(high, center_x))

        return SpanGeometry(
            key=entity.key,
            y=y,
            start_x=start_x,
            end_x=end_x,
            bar_start_x=max(-clip, start_x),
            bar_end_x=min(width + clip, end_x),
            show_start_diamond=-clip < start_x < width + clip,
            show_end_diamond=-clip < end_x < width + clip,
            label=entity.name,
            label_x=label_x,
            label_y=y - SPAN_LABEL_OFFSET,
        )

    def _project_marker(self, entity, row, viewport, width, height):
        s = self.settings
        x = year_to_pixel(entity.midpoint, viewport, width)
        if not self._in_cull_range(x, width):
            return None

        y = height * s.marker_y_ratio + row * s.marker_row_spacing
        return MarkerGeometry(
            key=entity.key,
            x=x,
            y=y,
            half_height=MARKER_HALF_HEIGHT,
            label=entity.name,
            label_x=x,
            label_y=y + MARKER_LABEL_OFFSET,
        )

    # =========================================================================
    # Axis / overlays
    # =========================================================================

    def _project_axis(self, viewport, level, width, axis_y) -> AxisGeometry:
        clip = self.settings.clip_margin
        ticks = []
        for tick in generate_ticks(viewport, level):
            x = year_to_pixel(tick.year, viewport, width)
            if x < -clip or x > width + clip:
                continue
            ticks.append(TickGeometry(
                x=x,
                half_height=MAJOR_TICK_HEIGHT if tick.is_major else MINOR_TICK_HEIGHT,
                is_major=tick.is_major,
                label=tick.label if tick.is_major else None,
                label_y=axis_y + TICK_LABEL_OFFSET,
            ))
        return AxisGeometry(y=axis_y, width=width, ticks=tuple(ticks))

    def _project_cursor(self, cursor_x, viewport, width, axis_y) -> Optional[CursorGeometry]:
        if cursor_x is None or not 0 <= cursor_x <= width:
            return None
        year = round(pixel_to_year(cursor_x, viewport, width))
        return CursorGeometry(x=cursor_x, label=format_year(year), label_y=axis_y - CURSOR_LABEL_OFFSET)

    def _project_tooltip(self, hover, width):
        if hover is None:
            return None
        text_width = max(
            self.measure_text(hover.title, TextRole.TOOLTIP_TITLE),
            self.measure_text(hover.subtitle, TextRole.TOOLTIP_SUBTITLE),
        )
        return place_tooltip(hover, width, text_width, self.settings)

    # =========================================================================
    # Hover descriptors
    # =========================================================================

    def describe(self, entity: TimelineEntity, frame: FrameGeometry) -> Optional[TooltipDescriptor]:
        """
        Tooltip descriptor for an entity drawn in `frame`, anchored above it.

        Returns None if the entity was culled from the frame.
        """
        lift = self.settings.tooltip_anchor_lift
        for item in (*frame.artifacts, *frame.markers):
            if item.key == entity.key:
                return TooltipDescriptor(entity.key, entity.name, entity.subtitle, item.x, item.y - lift)
        for span in frame.spans:
            if span.key == entity.key:
                return TooltipDescriptor(entity.key, entity.name, entity.subtitle, span.label_x, span.y - lift)
        return None
