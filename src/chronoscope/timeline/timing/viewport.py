"""
Viewport

Maps years to pixels and back, and applies zoom/pan to the visible range.

Design:
- Viewport values are immutable; every operation returns a new one
- Every returned viewport is clamped: inside the domain, span between
  min_span and the domain width
- ViewportModel is the only mutable holder and notifies listeners on change
"""

from typing import Callable, Iterable, List, Optional

from ..types import Domain, Viewport
from ..constants import MIN_VISIBLE_SPAN, INITIAL_PADDING_RATIO

ViewportListener = Callable[[Viewport], None]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_viewport(viewport: Viewport) -> Viewport:
    """
    Enforce the viewport invariants.

    Too-narrow spans are widened around their center, too-wide spans are
    cut to the domain, then the range is slid back inside the domain
    without changing its span.
    """
    domain = viewport.domain
    min_span = min(viewport.min_span, domain.width)

    start, end = viewport.start, viewport.end
    if end < start:
        start, end = end, start

    span = _clamp(end - start, min_span, domain.width)
    if span != end - start:
        center = (start + end) / 2
        start = center - span / 2
        end = center + span / 2

    if start < domain.start:
        start, end = domain.start, domain.start + span
    elif end > domain.end:
        start, end = domain.end - span, domain.end

    if start == viewport.start and end == viewport.end:
        return viewport
    return Viewport(start, end, domain, viewport.min_span)


def make_viewport(
    start: float,
    end: float,
    domain: Optional[Domain] = None,
    min_span: float = MIN_VISIBLE_SPAN
) -> Viewport:
    """Create a clamped viewport."""
    return clamp_viewport(Viewport(start, end, domain or Domain(), min_span))


def full_viewport(domain: Optional[Domain] = None, min_span: float = MIN_VISIBLE_SPAN) -> Viewport:
    domain = domain or Domain()
    return Viewport(domain.start, domain.end, domain, min_span)


def initial_viewport(
    midpoints: Iterable[float],
    domain: Optional[Domain] = None,
    min_span: float = MIN_VISIBLE_SPAN,
    padding_ratio: float = INITIAL_PADDING_RATIO
) -> Viewport:
    """
    Fit the viewport to a set of entity midpoints.

    The midpoint range is padded by padding_ratio of its width on each
    side. No midpoints gives the whole domain; a single year is widened
    to min_span by clamping.
    """
    domain = domain or Domain()
    years = list(midpoints)
    if not years:
        return full_viewport(domain, min_span)

    low, high = min(years), max(years)
    padding = (high - low) * padding_ratio
    start = max(domain.start, low - padding)
    end = min(domain.end, high + padding)
    return make_viewport(start, end, domain, min_span)


def year_to_pixel(year: float, viewport: Viewport, pixel_width: float) -> float:
    return ((year - viewport.start) / viewport.span) * pixel_width


def pixel_to_year(pixel: float, viewport: Viewport, pixel_width: float) -> float:
    if pixel_width <= 0:
        return viewport.start
    return viewport.start + (pixel / pixel_width) * viewport.span


def zoom(viewport: Viewport, factor: float, anchor_pixel: float, pixel_width: float) -> Viewport:
    """
    Zoom around an anchor pixel.

    factor > 1 zooms in (fewer years visible). The year under anchor_pixel
    stays under it unless domain clamping has to slide the range.
    Non-positive width or factor leaves the viewport unchanged.

    Args:
        viewport: Current viewport
        factor: Span divisor
        anchor_pixel: Pixel x that stays fixed
        pixel_width: Canvas width in pixels

    Returns:
        New clamped Viewport
    """
    if pixel_width <= 0 or factor <= 0:
        return viewport

    domain = viewport.domain
    min_span = min(viewport.min_span, domain.width)
    new_span = _clamp(viewport.span / factor, min_span, domain.width)

    ratio = anchor_pixel / pixel_width
    anchor_year = viewport.start + viewport.span * ratio
    start = anchor_year - new_span * ratio
    end = anchor_year + new_span * (1 - ratio)
    return clamp_viewport(Viewport(start, end, domain, viewport.min_span))


def pan(viewport: Viewport, delta_years: float) -> Viewport:
    """Shift by delta_years, sliding back inside the domain at the edges."""
    return clamp_viewport(
        Viewport(viewport.start + delta_years, viewport.end + delta_years,
                 viewport.domain, viewport.min_span)
    )


class ViewportModel:
    """
    Mutable holder for the current viewport.

    Listeners are called with the new viewport after every change that
    actually moves it.
    """

    def __init__(self, viewport: Optional[Viewport] = None):
        self._viewport = clamp_viewport(viewport) if viewport else full_viewport()
        self._listeners: List[ViewportListener] = []

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def add_listener(self, listener: ViewportListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ViewportListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set(self, viewport: Viewport) -> Viewport:
        viewport = clamp_viewport(viewport)
        if viewport != self._viewport:
            self._viewport = viewport
            for listener in list(self._listeners):
                listener(viewport)
        return self._viewport

    def zoom(self, factor: float, anchor_pixel: float, pixel_width: float) -> Viewport:
        return self.set(zoom(self._viewport, factor, anchor_pixel, pixel_width))

    def zoom_centered(self, factor: float, pixel_width: float) -> Viewport:
        return self.zoom(factor, pixel_width / 2, pixel_width)

    def pan(self, delta_years: float) -> Viewport:
        return self.set(pan(self._viewport, delta_years))
