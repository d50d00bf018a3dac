"""
Frame Painter

Draws a FrameGeometry with QPainter. Holds no timeline logic: every
position, visibility decision and label comes from the geometry.

Draw order (back to front): cursor line, markers, spans, axis,
artifacts, artifact labels, tooltip.
"""

from PyQt6.QtGui import QPainter, QPen, QBrush, QPolygonF, QFontMetricsF
from PyQt6.QtCore import Qt, QPointF, QRectF, QLineF

from ..layout.geometry import FrameGeometry, TextRole
from ..timing.grid_renderer import GridRenderer
from ..constants import SPAN_BAR_HEIGHT, SPAN_DIAMOND_SIZE
from .style import TimelineStyle as Colors


def diamond(x: float, y: float, size: float) -> QPolygonF:
    return QPolygonF([
        QPointF(x, y - size),
        QPointF(x + size, y),
        QPointF(x, y + size),
        QPointF(x - size, y),
    ])


class FramePainter:
    """Paints frames onto a QPainter."""

    def __init__(self):
        self.grid_renderer = GridRenderer()

    def paint(self, painter: QPainter, frame: FrameGeometry) -> None:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(QRectF(0, 0, frame.width, frame.height), Colors.BG_COLOR)

        self._draw_cursor_line(painter, frame)
        self._draw_markers(painter, frame)
        self._draw_spans(painter, frame)
        self.grid_renderer.draw_axis(painter, frame.axis)
        self._draw_artifacts(painter, frame)
        self._draw_cursor_label(painter, frame)
        self._draw_tooltip(painter, frame)

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _draw_text(painter: QPainter, text: str, role: TextRole, x: float, y: float,
                   h_align: float = 0.5, v_align: float = 0.0) -> None:
        """
        Draw text anchored at (x, y).

        h_align/v_align pick the anchor inside the text box
        (0 = left/top, 0.5 = centre, 1 = right/bottom).
        """
        font = Colors.font_for(role)
        metrics = QFontMetricsF(font)
        width = metrics.horizontalAdvance(text)
        painter.setFont(font)
        left = x - width * h_align
        top = y - metrics.height() * v_align
        painter.drawText(QPointF(left, top + metrics.ascent()), text)

    # =========================================================================
    # Layers
    # =========================================================================

    def _draw_cursor_line(self, painter: QPainter, frame: FrameGeometry) -> None:
        if frame.cursor is None:
            return
        pen = QPen(Colors.CURSOR_LINE, 1)
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.drawLine(QLineF(frame.cursor.x, 0, frame.cursor.x, frame.height))

    def _draw_cursor_label(self, painter: QPainter, frame: FrameGeometry) -> None:
        if frame.cursor is None:
            return
        painter.setPen(Colors.CURSOR_LABEL)
        self._draw_text(painter, frame.cursor.label, TextRole.CURSOR_LABEL,
                        frame.cursor.x, frame.cursor.label_y, v_align=1.0)

    def _draw_markers(self, painter: QPainter, frame: FrameGeometry) -> None:
        for marker in frame.markers:
            painter.fillRect(
                QRectF(marker.x - 1, marker.y - marker.half_height, 2, marker.half_height * 2),
                Colors.MARKER_FILL,
            )
            painter.setPen(Colors.MARKER_LABEL)
            self._draw_text(painter, marker.label, TextRole.MARKER_LABEL, marker.label_x, marker.label_y)

    def _draw_spans(self, painter: QPainter, frame: FrameGeometry) -> None:
        half = SPAN_BAR_HEIGHT / 2
        for span in frame.spans:
            bar_width = span.bar_end_x - span.bar_start_x
            if bar_width > 0:
                painter.fillRect(QRectF(span.bar_start_x, span.y - half, bar_width, SPAN_BAR_HEIGHT),
                                 Colors.SPAN_BAR)

            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(Colors.SPAN_DIAMOND))
            if span.show_start_diamond:
                painter.drawPolygon(diamond(span.start_x, span.y, SPAN_DIAMOND_SIZE))
            if span.show_end_diamond:
                painter.drawPolygon(diamond(span.end_x, span.y, SPAN_DIAMOND_SIZE))
            painter.setBrush(Qt.BrushStyle.NoBrush)

            painter.setPen(Colors.SPAN_LABEL)
            self._draw_text(painter, span.label, TextRole.SPAN_LABEL, span.label_x, span.label_y, v_align=1.0)

    def _draw_artifacts(self, painter: QPainter, frame: FrameGeometry) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(Colors.ARTIFACT_FILL))
        for artifact in frame.artifacts:
            painter.drawPolygon(diamond(artifact.x, artifact.y, artifact.size))
        painter.setBrush(Qt.BrushStyle.NoBrush)

        painter.setPen(Colors.ARTIFACT_LABEL)
        for artifact in frame.artifacts:
            if artifact.label_visible:
                self._draw_text(painter, artifact.label, TextRole.ARTIFACT_LABEL,
                                artifact.label_x, artifact.label_y)

    def _draw_tooltip(self, painter: QPainter, frame: FrameGeometry) -> None:
        tooltip = frame.tooltip
        if tooltip is None:
            return

        pen = QPen(Colors.TOOLTIP_BORDER, 1)
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.setBrush(QBrush(Colors.TOOLTIP_BG))
        painter.drawRoundedRect(QRectF(tooltip.x, tooltip.y, tooltip.width, tooltip.height),
                                Colors.TOOLTIP_RADIUS, Colors.TOOLTIP_RADIUS)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        painter.setPen(Colors.TOOLTIP_TITLE)
        self._draw_text(painter, tooltip.title, TextRole.TOOLTIP_TITLE,
                        tooltip.title_x, tooltip.title_y, h_align=0.0)
        painter.setPen(Colors.TOOLTIP_SUBTITLE)
        self._draw_text(painter, tooltip.subtitle, TextRole.TOOLTIP_SUBTITLE,
                        tooltip.subtitle_x, tooltip.subtitle_y, h_align=0.0)
