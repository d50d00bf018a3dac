"""
Timeline Style Configuration

Style constants for the timeline canvas: a fixed dark palette with cyan
artifacts, gold landmark spans and purple person markers.
"""

from PyQt6.QtGui import QColor, QFont

from ..layout.geometry import TextRole


def _with_alpha(color: QColor, alpha: float) -> QColor:
    c = QColor(color)
    c.setAlphaF(alpha)
    return c


class TimelineStyle:
    """
    Style configuration for the timeline canvas.

    Colors can be overridden on the class before the canvas is shown.
    """

    # =========================================================================
    # Palette
    # =========================================================================
    BG_COLOR = QColor(0x1a, 0x1a, 0x1a)
    BORDER = QColor(0x33, 0x33, 0x33)
    CYAN = QColor(0x22, 0xd3, 0xee)
    GOLD = QColor(0xf5, 0x9e, 0x0b)
    PURPLE = QColor(0xa8, 0x55, 0xf7)
    TEXT_PRIMARY = QColor(255, 255, 255)
    TEXT_DIM = QColor(0x6b, 0x72, 0x80)
    TEXT_MUTED = QColor(0x9c, 0xa3, 0xaf)

    # =========================================================================
    # Element Colors
    # =========================================================================
    ARTIFACT_FILL = _with_alpha(CYAN, 0.9)
    ARTIFACT_LABEL = _with_alpha(CYAN, 0.8)
    SPAN_BAR = _with_alpha(GOLD, 0.3)
    SPAN_DIAMOND = _with_alpha(GOLD, 0.8)
    SPAN_LABEL = _with_alpha(GOLD, 0.7)
    MARKER_FILL = _with_alpha(PURPLE, 0.9)
    MARKER_LABEL = _with_alpha(PURPLE, 0.85)
    AXIS_LINE = _with_alpha(CYAN, 0.3)
    TICK_MAJOR = _with_alpha(CYAN, 0.5)
    TICK_MINOR = _with_alpha(CYAN, 0.2)
    TICK_LABEL = TEXT_DIM
    CURSOR_LINE = _with_alpha(TEXT_DIM, 0.4)
    CURSOR_LABEL = CYAN
    TOOLTIP_BG = _with_alpha(QColor(0x0a, 0x0a, 0x0a), 0.95)
    TOOLTIP_BORDER = _with_alpha(CYAN, 0.6)
    TOOLTIP_TITLE = TEXT_PRIMARY
    TOOLTIP_SUBTITLE = CYAN

    TOOLTIP_RADIUS = 8

    # =========================================================================
    # Fonts
    # =========================================================================
    SANS_FAMILY = "system-ui, -apple-system, Segoe UI, sans-serif"
    MONO_FAMILY = "SF Mono, Consolas, Monaco, monospace"

    @classmethod
    def _font(cls, family: str, pixel_size: int, weight: QFont.Weight = QFont.Weight.Normal) -> QFont:
        font = QFont()
        font.setFamily(family)
        font.setPixelSize(pixel_size)
        font.setWeight(weight)
        if family == cls.MONO_FAMILY:
            font.setStyleHint(QFont.StyleHint.Monospace)
        return font

    @classmethod
    def font_for(cls, role: TextRole) -> QFont:
        """Font used to draw (and measure) text of the given role."""
        if role is TextRole.TOOLTIP_TITLE:
            return cls._font(cls.SANS_FAMILY, 13, QFont.Weight.DemiBold)
        if role is TextRole.TOOLTIP_SUBTITLE:
            return cls._font(cls.MONO_FAMILY, 11)
        if role is TextRole.CURSOR_LABEL:
            return cls._font(cls.MONO_FAMILY, 11, QFont.Weight.DemiBold)
        if role is TextRole.MARKER_LABEL:
            return cls._font(cls.SANS_FAMILY, 9, QFont.Weight.Medium)
        if role is TextRole.SPAN_LABEL:
            return cls._font(cls.MONO_FAMILY, 9)
        return cls._font(cls.MONO_FAMILY, 10)
