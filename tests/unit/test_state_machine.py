"""
Unit tests for the interaction state machine.

Covers drag panning (including click detection), wheel zoom, two-finger
pinch, hover tracking and shutdown.
"""
import pytest

from chronoscope.timeline.types import InteractionState, TooltipDescriptor
from chronoscope.timeline.timing.viewport import ViewportModel, make_viewport
from chronoscope.timeline.interaction.state_machine import (
    InteractionStateMachine, touch_distance, touch_midpoint,
)

WIDTH = 1000


@pytest.fixture
def model():
    return ViewportModel(make_viewport(-2000, 0))


@pytest.fixture
def machine(model):
    return InteractionStateMachine(model, lambda: WIDTH)


class TestPanning:
    """Press, drag, release."""

    def test_press_starts_panning(self, machine, model):
        machine.press(100)

        assert machine.state is InteractionState.PANNING
        assert machine.pan_anchor.origin_pixel == 100
        assert machine.pan_anchor.origin_viewport == model.viewport

    def test_drag_translates_viewport(self, machine, model):
        """Dragging right by dx moves the view back in time by dx * span / width."""
        machine.press(100)
        machine.move(300)

        assert model.viewport.start == pytest.approx(-2400)
        assert model.viewport.end == pytest.approx(-400)

    def test_drag_is_relative_to_press_snapshot(self, machine, model):
        machine.press(100)
        machine.move(300)
        machine.move(400)

        assert model.viewport.start == pytest.approx(-2600)
        assert model.viewport.end == pytest.approx(-600)

    def test_drag_back_to_origin_restores_viewport(self, machine, model):
        original = model.viewport
        machine.press(100)
        machine.move(700)
        machine.move(100)

        assert model.viewport.start == pytest.approx(original.start)
        assert model.viewport.end == pytest.approx(original.end)

    def test_drag_left_moves_forward_in_time(self, machine, model):
        machine.press(500)
        machine.move(400)
        assert model.viewport.start == pytest.approx(-1800)

    def test_drag_is_clamped_to_domain(self):
        model = ViewportModel(make_viewport(-4400, -2400))
        machine = InteractionStateMachine(model, lambda: WIDTH)

        machine.press(0)
        machine.move(1000)

        assert (model.viewport.start, model.viewport.end) == (-4500, -2500)

    def test_release_after_drag_is_not_a_click(self, machine):
        machine.press(100)
        machine.move(300)

        assert machine.release(300) is False
        assert machine.state is InteractionState.IDLE
        assert machine.pan_anchor is None

    def test_release_within_threshold_is_a_click(self, machine):
        machine.press(100)
        machine.move(103)

        assert machine.release(103) is True

    def test_travel_is_measured_at_its_maximum(self, machine):
        """Dragging away and back is still a drag."""
        machine.press(100)
        machine.move(150)
        machine.move(101)

        assert machine.release(101) is False

    def test_release_without_press(self, machine):
        assert machine.release(100) is False

    def test_press_while_panning_is_ignored(self, machine):
        machine.press(100)
        machine.press(500)
        assert machine.pan_anchor.origin_pixel == 100

    def test_move_without_press_only_tracks_cursor(self, machine, model):
        original = model.viewport
        machine.move(250)

        assert machine.cursor_x == 250
        assert model.viewport is original

    def test_leave_cancels_drag(self, machine, model):
        machine.press(100)
        machine.move(200)
        dragged = model.viewport
        machine.leave()

        assert machine.state is InteractionState.IDLE
        assert machine.cursor_x is None
        machine.move(600)
        assert model.viewport is dragged

    def test_zero_width_ignores_drag(self, model):
        machine = InteractionStateMachine(model, lambda: 0)
        original = model.viewport
        machine.press(100)
        machine.move(300)
        assert model.viewport is original

    def test_state_listener(self, machine):
        states = []
        machine.add_state_listener(states.append)

        machine.press(0)
        machine.release(0)

        assert states == [InteractionState.PANNING, InteractionState.IDLE]


class TestWheel:
    """Wheel zoom anchored at the pointer."""

    def test_scroll_down_zooms_out(self, machine, model):
        machine.wheel(120, 500)
        assert model.viewport.span == pytest.approx(2000 / 0.9)

    def test_scroll_up_zooms_in(self, machine, model):
        machine.wheel(-120, 500)
        assert model.viewport.span == pytest.approx(2000 / 1.1)

    def test_anchor_year_stays_under_pointer(self, machine, model):
        machine.wheel(-120, 250)
        # -1500 was under x=250 before the zoom
        assert model.viewport.start + model.viewport.span * 0.25 == pytest.approx(-1500)

    def test_wheel_does_not_change_state(self, machine):
        machine.press(100)
        machine.wheel(-120, 500)
        assert machine.state is InteractionState.PANNING


class TestTouch:
    """Single-finger pan and two-finger pinch."""

    def test_helpers(self):
        points = [(400, 0), (600, 0)]
        assert touch_distance(points) == 200
        assert touch_midpoint(points) == 500

    def test_single_touch_pans(self, machine, model):
        machine.touch_begin([(100, 10)])
        assert machine.state is InteractionState.PANNING

        machine.touch_update([(300, 10)])
        assert model.viewport.start == pytest.approx(-2400)

        assert machine.touch_end([(300, 10)]) is False
        assert machine.state is InteractionState.IDLE

    def test_tap(self, machine):
        machine.touch_begin([(200, 10)])
        assert machine.touch_end([(201, 10)]) is True

    def test_two_touches_start_pinch(self, machine):
        machine.touch_begin([(400, 0), (600, 0)])

        assert machine.state is InteractionState.PINCHING
        assert machine.pinch_anchor.distance == 200
        assert machine.pinch_anchor.midpoint_pixel == 500

    def test_spreading_fingers_zooms_in_at_midpoint(self, machine, model):
        machine.touch_begin([(400, 0), (600, 0)])
        machine.touch_update([(300, 0), (700, 0)])

        assert model.viewport.start == pytest.approx(-1500)
        assert model.viewport.end == pytest.approx(-500)
        assert machine.pinch_anchor.distance == 400

    def test_pinch_is_frame_to_frame(self, machine, model):
        machine.touch_begin([(400, 0), (600, 0)])
        machine.touch_update([(300, 0), (700, 0)])
        zoomed = model.viewport
        machine.touch_update([(300, 0), (700, 0)])

        assert model.viewport == zoomed

    def test_second_finger_while_panning_switches_to_pinch(self, machine):
        machine.touch_begin([(100, 0)])
        machine.touch_update([(100, 0), (300, 0)])

        assert machine.state is InteractionState.PINCHING
        assert machine.pan_anchor is None

    def test_lifting_a_finger_ends_pinch(self, machine):
        machine.touch_begin([(400, 0), (600, 0)])
        machine.touch_update([(400, 0)])

        assert machine.state is InteractionState.IDLE
        assert machine.pinch_anchor is None

    def test_touch_end_after_pinch_is_not_a_tap(self, machine):
        machine.touch_begin([(400, 0), (600, 0)])
        assert machine.touch_end() is False
        assert machine.state is InteractionState.IDLE


class TestHover:
    def test_hover_and_clear(self, machine):
        descriptor = TooltipDescriptor("artifact:a", "A", "476 AD", 10, 20)
        machine.hover(descriptor)
        assert machine.hover_descriptor is descriptor

        machine.clear_hover()
        assert machine.hover_descriptor is None

    def test_leave_clears_hover(self, machine):
        machine.hover(TooltipDescriptor("artifact:a", "A", "", 0, 0))
        machine.leave()
        assert machine.hover_descriptor is None


class TestShutdown:
    """After shutdown every input is ignored."""

    def test_inputs_ignored(self, machine, model):
        original = model.viewport
        machine.press(100)
        machine.shutdown()

        assert machine.is_shut_down
        assert machine.state is InteractionState.IDLE

        machine.press(100)
        machine.move(500)
        machine.wheel(-120, 500)
        machine.touch_begin([(0, 0), (100, 0)])
        machine.hover(TooltipDescriptor("artifact:a", "A", "", 0, 0))

        assert machine.state is InteractionState.IDLE
        assert machine.release(500) is False
        assert machine.hover_descriptor is None
        assert machine.cursor_x is None
        assert model.viewport is original

    def test_shutdown_twice(self, machine):
        machine.shutdown()
        machine.shutdown()
        assert machine.is_shut_down
