"""
Grid Renderer

Draws the year axis: the baseline, tick marks and major tick labels.

Design:
- Geometry comes precomputed in AxisGeometry (no year math here)
- Cosmetic pens for consistent line width
- Batch drawing with drawLines(), one call per pen
"""

from typing import List

from PyQt6.QtGui import QPainter, QPen, QFontMetricsF
from PyQt6.QtCore import QLineF, QPointF

from ..layout.geometry import AxisGeometry, TextRole


class GridRenderer:
    """Draws an AxisGeometry with QPainter."""

    def __init__(self):
        self.show_tick_labels = True

    def draw_axis(self, painter: QPainter, axis: AxisGeometry) -> None:
        """
        Draw baseline, ticks and labels.

        Args:
            painter: Active QPainter on the canvas
            axis: Projected axis for this frame
        """
        from ..core.style import TimelineStyle as Colors

        base_pen = QPen(Colors.AXIS_LINE, 1)
        base_pen.setCosmetic(True)
        painter.setPen(base_pen)
        painter.drawLine(QLineF(0, axis.y, axis.width, axis.y))

        major_lines: List[QLineF] = []
        minor_lines: List[QLineF] = []
        for tick in axis.ticks:
            line = QLineF(tick.x, axis.y - tick.half_height, tick.x, axis.y + tick.half_height)
            if tick.is_major:
                major_lines.append(line)
            else:
                minor_lines.append(line)

        if minor_lines:
            minor_pen = QPen(Colors.TICK_MINOR, 1)
            minor_pen.setCosmetic(True)
            painter.setPen(minor_pen)
            painter.drawLines(minor_lines)

        if major_lines:
            major_pen = QPen(Colors.TICK_MAJOR, 1)
            major_pen.setCosmetic(True)
            painter.setPen(major_pen)
            painter.drawLines(major_lines)

        if not self.show_tick_labels:
            return

        font = Colors.font_for(TextRole.TICK_LABEL)
        metrics = QFontMetricsF(font)
        painter.setFont(font)
        painter.setPen(Colors.TICK_LABEL)
        for tick in axis.ticks:
            if not tick.label:
                continue
            # Label hangs below label_y, centred on the tick
            x = tick.x - metrics.horizontalAdvance(tick.label) / 2
            painter.drawText(QPointF(x, tick.label_y + metrics.ascent()), tick.label)
