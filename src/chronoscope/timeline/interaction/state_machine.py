"""
Interaction State Machine
=========================

Turns pointer, touch and wheel input into viewport changes.

State Machine:
    IDLE -> (press / one touch) -> PANNING -> (release) -> IDLE
      |                               |
      +------ (second touch) ---------+--> PINCHING -> (point lifted) -> IDLE

Wheel zoom is stateless and applies in any state. Hover (the single
active tooltip) and the cursor readout are tracked independently of
pan/zoom state.

Dragging always re-derives the viewport from the snapshot taken at
press time (origin pixel and pre-drag viewport), never incrementally,
so a drag cannot accumulate drift. Pinching is frame-to-frame: each
update zooms by the ratio to the previous distance.
"""

import math
from typing import Callable, List, Optional, Sequence, Tuple

from ..types import InteractionState, PanAnchor, PinchAnchor, TooltipDescriptor
from ..constants import CLICK_THRESHOLD_PX, WHEEL_ZOOM_IN_FACTOR, WHEEL_ZOOM_OUT_FACTOR
from ..timing.viewport import ViewportModel, pan
from ..logging import TimelineLog as Log

TouchPoint = Tuple[float, float]
StateListener = Callable[[InteractionState], None]


def touch_distance(points: Sequence[TouchPoint]) -> float:
    (x1, y1), (x2, y2) = points[0], points[1]
    return math.hypot(x1 - x2, y1 - y2)


def touch_midpoint(points: Sequence[TouchPoint]) -> float:
    return (points[0][0] + points[1][0]) / 2


class InteractionStateMachine:
    """
    Pan / pinch / wheel state machine over a ViewportModel.

    Args:
        viewport_model: Viewport to mutate
        width_provider: Returns the current canvas width in pixels
        click_threshold: Max pointer travel (pixels) for a press/release
            to count as a click
    """

    def __init__(
        self,
        viewport_model: ViewportModel,
        width_provider: Callable[[], float],
        click_threshold: float = CLICK_THRESHOLD_PX,
        wheel_zoom_in_factor: float = WHEEL_ZOOM_IN_FACTOR,
        wheel_zoom_out_factor: float = WHEEL_ZOOM_OUT_FACTOR
    ):
        self._model = viewport_model
        self._width_provider = width_provider
        self.click_threshold = click_threshold
        self.wheel_zoom_in_factor = wheel_zoom_in_factor
        self.wheel_zoom_out_factor = wheel_zoom_out_factor

        self._state = InteractionState.IDLE
        self._pan_anchor: Optional[PanAnchor] = None
        self._pinch_anchor: Optional[PinchAnchor] = None
        self._max_travel = 0.0
        self._last_x: Optional[float] = None

        self._hover: Optional[TooltipDescriptor] = None
        self._cursor_x: Optional[float] = None

        self._shut_down = False
        self._listeners: List[StateListener] = []

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def pan_anchor(self) -> Optional[PanAnchor]:
        return self._pan_anchor

    @property
    def pinch_anchor(self) -> Optional[PinchAnchor]:
        return self._pinch_anchor

    @property
    def hover_descriptor(self) -> Optional[TooltipDescriptor]:
        return self._hover

    @property
    def cursor_x(self) -> Optional[float]:
        return self._cursor_x

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    def add_state_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _set_state(self, state: InteractionState) -> None:
        if state is self._state:
            return
        Log.debug(f"Interaction: {self._state.name} -> {state.name}")
        self._state = state
        if state is not InteractionState.PANNING:
            self._pan_anchor = None
        if state is not InteractionState.PINCHING:
            self._pinch_anchor = None
        for listener in list(self._listeners):
            listener(state)

    # =========================================================================
    # Pointer
    # =========================================================================

    def press(self, x: float) -> None:
        """Begin a drag (IDLE -> PANNING); ignored in any other state."""
        if self._shut_down or self._state is not InteractionState.IDLE:
            return
        self._pan_anchor = PanAnchor(origin_pixel=x, origin_viewport=self._model.viewport)
        self._max_travel = 0.0
        self._last_x = x
        self._set_state(InteractionState.PANNING)

    def move(self, x: float) -> None:
        """Track the cursor; while panning, translate the pre-drag viewport."""
        if self._shut_down:
            return
        self._cursor_x = x
        if self._state is not InteractionState.PANNING or self._pan_anchor is None:
            return

        width = self._width_provider()
        if width <= 0:
            return

        anchor = self._pan_anchor
        offset = x - anchor.origin_pixel
        self._max_travel = max(self._max_travel, abs(offset))
        self._last_x = x

        delta_years = -offset * (anchor.origin_viewport.span / width)
        self._model.set(pan(anchor.origin_viewport, delta_years))

    def release(self, x: float) -> bool:
        """
        End a drag (PANNING -> IDLE).

        Returns:
            True if the pointer never travelled more than click_threshold
            pixels from the press, i.e. the gesture was a click
        """
        if self._shut_down or self._state is not InteractionState.PANNING:
            return False
        travel = max(self._max_travel, abs(x - self._pan_anchor.origin_pixel))
        self._set_state(InteractionState.IDLE)
        return travel <= self.click_threshold

    def leave(self) -> None:
        """Pointer left the surface: cancel any gesture, drop cursor and hover."""
        if self._shut_down:
            return
        self._cursor_x = None
        self._hover = None
        self._set_state(InteractionState.IDLE)

    # =========================================================================
    # Touch
    # =========================================================================

    def _begin_pinch(self, points: Sequence[TouchPoint]) -> None:
        self._set_state(InteractionState.PINCHING)
        self._pinch_anchor = PinchAnchor(touch_distance(points), touch_midpoint(points))

    def touch_begin(self, points: Sequence[TouchPoint]) -> None:
        if self._shut_down or not points:
            return
        if len(points) >= 2:
            self._begin_pinch(points)
        elif self._state is InteractionState.IDLE:
            self.press(points[0][0])

    def touch_update(self, points: Sequence[TouchPoint]) -> None:
        if self._shut_down or not points:
            return

        if len(points) >= 2:
            if self._state is not InteractionState.PINCHING or self._pinch_anchor is None:
                self._begin_pinch(points)
                return
            distance = touch_distance(points)
            midpoint = touch_midpoint(points)
            last = self._pinch_anchor
            if last.distance > 0 and distance > 0:
                self._model.zoom(distance / last.distance, midpoint, self._width_provider())
            self._pinch_anchor = PinchAnchor(distance, midpoint)
            return

        if self._state is InteractionState.PINCHING:
            # A finger lifted mid-pinch
            self._set_state(InteractionState.IDLE)
        elif self._state is InteractionState.PANNING:
            self.move(points[0][0])

    def touch_end(self, points: Sequence[TouchPoint] = ()) -> bool:
        """
        All touch points lifted.

        Returns:
            True if the gesture was a single-finger tap
        """
        if self._shut_down:
            return False
        if self._state is InteractionState.PANNING:
            x = points[0][0] if points else self._last_x
            return self.release(x)
        self._set_state(InteractionState.IDLE)
        return False

    # =========================================================================
    # Wheel
    # =========================================================================

    def wheel(self, delta_y: float, x: float) -> None:
        """Zoom around x: scrolling down (delta_y > 0) zooms out."""
        if self._shut_down:
            return
        factor = self.wheel_zoom_out_factor if delta_y > 0 else self.wheel_zoom_in_factor
        self._model.zoom(factor, x, self._width_provider())

    # =========================================================================
    # Hover
    # =========================================================================

    def hover(self, descriptor: Optional[TooltipDescriptor]) -> None:
        if self._shut_down:
            return
        self._hover = descriptor

    def clear_hover(self) -> None:
        self.hover(None)

    # =========================================================================
    # Teardown
    # =========================================================================

    def shutdown(self) -> None:
        """Drop all gesture state; every later input call is ignored."""
        if self._shut_down:
            return
        self._set_state(InteractionState.IDLE)
        self._hover = None
        self._cursor_x = None
        self._listeners.clear()
        self._shut_down = True
