"""
Timeline Canvas

The drawable surface: a plain QWidget that paints the most recent
FrameGeometry handed to it. Input is not handled here; the engine
installs an event filter on the canvas instead.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtGui import QPainter, QFontMetricsF
from PyQt6.QtCore import Qt

from ..layout.geometry import FrameGeometry, TextRole
from .painter import FramePainter
from .style import TimelineStyle


class TimelineCanvas(QWidget):
    """
    Surface the TimelineEngine draws on.

    At most one engine is bound to a canvas at a time (see
    TimelineEngine.init()).
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._frame: Optional[FrameGeometry] = None
        self._painter = FramePainter()
        self._metrics = {}

        # Bound engine; managed by TimelineEngine
        self.engine = None

        self.setMouseTracking(True)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

    @property
    def frame(self) -> Optional[FrameGeometry]:
        return self._frame

    def set_frame(self, frame: Optional[FrameGeometry]) -> None:
        """Store the frame to paint and schedule a repaint."""
        self._frame = frame
        self.update()

    def measure_text(self, text: str, role: TextRole) -> float:
        """Rendered width of text in the font used for role."""
        metrics = self._metrics.get(role)
        if metrics is None:
            metrics = QFontMetricsF(TimelineStyle.font_for(role))
            self._metrics[role] = metrics
        return metrics.horizontalAdvance(text)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            if self._frame is None:
                painter.fillRect(self.rect(), TimelineStyle.BG_COLOR)
            else:
                self._painter.paint(painter, self._frame)
        finally:
            painter.end()
