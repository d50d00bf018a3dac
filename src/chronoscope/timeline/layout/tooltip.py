"""
Tooltip Placement

Sizes the tooltip box to its text and keeps it on the canvas: centred
above the anchor, flipped below when there is no room on top, and
narrowed when the canvas is thinner than the box.
"""

from ..types import TooltipDescriptor
from ..settings import TimelineSettings
from .geometry import TooltipGeometry


def tooltip_width(text_width: float, settings: TimelineSettings) -> float:
    content = text_width + 2 * settings.tooltip_padding
    return min(settings.tooltip_max_width, max(settings.tooltip_min_width, content))


def place_tooltip(
    descriptor: TooltipDescriptor,
    canvas_width: float,
    text_width: float,
    settings: TimelineSettings
) -> TooltipGeometry:
    """
    Lay out the tooltip box for a descriptor.

    Args:
        descriptor: Text and anchor point
        canvas_width: Canvas width in pixels
        text_width: Width of the wider of title and subtitle
        settings: Tooltip geometry settings

    Returns:
        TooltipGeometry whose horizontal extent lies within [0, canvas_width]
    """
    margin = settings.tooltip_margin
    padding = settings.tooltip_padding
    height = settings.tooltip_height

    width = tooltip_width(text_width, settings)
    available = canvas_width - 2 * margin
    if width > available:
        if available > 0:
            width = available
        else:
            width = max(0.0, canvas_width)
            margin = 0.0

    x = descriptor.anchor_x - width / 2
    x = max(margin, min(canvas_width - width - margin, x))

    y = descriptor.anchor_y - height - settings.tooltip_offset
    if y < settings.tooltip_margin:
        y = descriptor.anchor_y + settings.tooltip_flip_offset

    return TooltipGeometry(
        x=x,
        y=y,
        width=width,
        height=height,
        title=descriptor.title,
        subtitle=descriptor.subtitle,
        title_x=x + padding,
        title_y=y + padding,
        subtitle_x=x + padding,
        subtitle_y=y + padding + settings.tooltip_subtitle_offset,
    )
