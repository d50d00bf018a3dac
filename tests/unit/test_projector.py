"""
Unit tests for frame projection, tooltip placement and hit testing.

The projector runs with the default font-free text measure, so label
widths are len(text) * 6 (7.5 for tooltip titles).
"""
import pytest

from chronoscope.timeline.settings import TimelineSettings
from chronoscope.timeline.types import (
    ArtifactRecord, LandmarkRecord, LandmarkType, TooltipDescriptor,
)
from chronoscope.timeline.timing.viewport import full_viewport, make_viewport
from chronoscope.timeline.layout.entities import assign_rows, build_entities
from chronoscope.timeline.layout.projector import FrameProjector, truncate_label
from chronoscope.timeline.layout.tooltip import place_tooltip, tooltip_width

WIDTH = 1000
HEIGHT = 500


@pytest.fixture
def entities():
    return build_entities(
        artifacts=[
            ArtifactRecord("coin", "Coin", era="500 BC"),
            ArtifactRecord("edge", "Edge", era="1040 BC"),
            ArtifactRecord("far", "Far", era="1100 BC"),
            ArtifactRecord("right", "Right", era="40 AD"),
        ],
        landmarks=[
            LandmarkRecord("old", "Old Kingdom", LandmarkType.CIVILIZATION, year_start=-1200, year_end=-800),
            LandmarkRecord("myc", "Mycenae", LandmarkType.CIVILIZATION, year_start=-900, year_end=-700),
            LandmarkRecord("hit", "Hittites", LandmarkType.CIVILIZATION, year_start=-1600, year_end=-1100),
            LandmarkRecord("solon", "Solon", LandmarkType.PERSON, year_start=-630, year_end=-560),
            LandmarkRecord("draco", "Draco", LandmarkType.MAJOR_EVENT, year=-621),
        ],
    )


@pytest.fixture
def rows(entities):
    return assign_rows(entities)


@pytest.fixture
def projector():
    return FrameProjector()


@pytest.fixture
def viewport():
    # 1 pixel per year at WIDTH
    return make_viewport(-1000, 0)


def _by_key(items):
    return {item.key: item for item in items}


class TestArtifacts:
    """Artifact diamonds along the artifact row."""

    def test_position_and_label(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        coin = _by_key(frame.artifacts)["artifact:coin"]

        assert coin.x == pytest.approx(500)
        assert coin.y == pytest.approx(390)
        assert coin.size == 5
        assert coin.label == "Coin"
        assert coin.label_y == pytest.approx(470)
        assert coin.label_visible

    def test_culling_and_visible_count(self, projector, entities, rows, viewport):
        """Artifacts within the cull margin are drawn but only on-canvas ones count."""
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        drawn = _by_key(frame.artifacts)

        assert set(drawn) == {"artifact:coin", "artifact:edge", "artifact:right"}
        assert frame.visible_entity_count == 1

    def test_labels_hidden_at_era_tier(self, projector, entities, rows):
        frame = projector.project(entities, rows, full_viewport(), WIDTH, HEIGHT)
        assert frame.zoom_level.level == 1
        assert not any(a.label_visible for a in frame.artifacts)

    def test_hovered_artifact_is_enlarged(self, projector, entities, rows, viewport):
        hover = TooltipDescriptor("artifact:coin", "Coin", "500 BC", 500, 370)
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT, hover=hover)
        coin = _by_key(frame.artifacts)["artifact:coin"]

        assert coin.hovered
        assert coin.size == pytest.approx(7.5)

    def test_long_names_are_truncated(self):
        label = truncate_label("Athenian Owl Tetradrachm of Pericles", 20)
        assert len(label) == 20
        assert label == "Athenian Owl Tetrad…"
        assert truncate_label("Short", 20) == "Short"


class TestSpans:
    """Landmark span bars."""

    def test_clipping_and_diamonds(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        old = _by_key(frame.spans)["landmark:old"]

        assert old.start_x == pytest.approx(-200)
        assert old.end_x == pytest.approx(200)
        assert old.bar_start_x == -10
        assert old.bar_end_x == pytest.approx(200)
        assert not old.show_start_diamond
        assert old.show_end_diamond

    def test_label_stays_on_canvas(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        old = _by_key(frame.spans)["landmark:old"]

        # Centre is x=0; "Old Kingdom" is 66px wide, so it is pushed to 33 + 5
        assert old.label_x == pytest.approx(38)

    def test_rows_stack_upward(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        spans = _by_key(frame.spans)

        # Hittites take row 0, so Old Kingdom collides and moves up; Mycenae
        # starts after the Hittites buffer and drops back to row 0
        assert rows["landmark:hit"] == 0
        assert rows["landmark:old"] == 1
        assert rows["landmark:myc"] == 0
        assert spans["landmark:old"].y == pytest.approx(182)
        assert spans["landmark:myc"].y == pytest.approx(210)
        assert spans["landmark:old"].label_y == pytest.approx(174)

    def test_offscreen_span_is_culled(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)

        assert "landmark:hit" not in _by_key(frame.spans)
        assert frame.visible_landmark_count == 2


class TestMarkers:
    """Point markers stack downward."""

    def test_marker_rows(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        markers = _by_key(frame.markers)

        assert {rows["landmark:draco"], rows["landmark:solon"]} == {0, 1}
        for key, marker in markers.items():
            assert marker.y == pytest.approx(260 + rows[key] * 26)
            assert marker.label_y == pytest.approx(marker.y + 8)

        assert markers["landmark:solon"].x == pytest.approx(405)
        assert markers["landmark:draco"].x == pytest.approx(379)


class TestAxisAndCursor:
    """Axis ticks and cursor readout."""

    def test_ticks(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        ticks = frame.axis.ticks

        assert frame.axis.y == pytest.approx(440)
        assert len(ticks) == 21
        majors = [t for t in ticks if t.is_major]
        assert len(majors) == 11
        assert all(t.label for t in majors)
        assert all(t.label is None for t in ticks if not t.is_major)
        assert {t.half_height for t in majors} == {8}
        assert majors[0].label == "1k BC"

    def test_cursor_label(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT, cursor_x=250)

        assert frame.cursor.x == 250
        assert frame.cursor.label == "750 BC"
        assert frame.cursor.label_y == pytest.approx(435)

    def test_cursor_outside_canvas(self, projector, entities, rows, viewport):
        assert projector.project(entities, rows, viewport, WIDTH, HEIGHT).cursor is None
        assert projector.project(entities, rows, viewport, WIDTH, HEIGHT, cursor_x=1200).cursor is None


class TestTooltip:
    """Tooltip sizing and placement."""

    def _place(self, anchor_x, anchor_y, canvas_width=WIDTH, text_width=36):
        descriptor = TooltipDescriptor("artifact:coin", "Coin", "500 BC", anchor_x, anchor_y)
        return place_tooltip(descriptor, canvas_width, text_width, TimelineSettings())

    def test_width_bounds(self):
        settings = TimelineSettings()
        assert tooltip_width(36, settings) == 180
        assert tooltip_width(200, settings) == 224
        assert tooltip_width(750, settings) == 300

    def test_centred_above_anchor(self):
        tooltip = self._place(500, 370)

        assert tooltip.x == pytest.approx(410)
        assert tooltip.y == pytest.approx(299)
        assert (tooltip.width, tooltip.height) == (180, 56)
        assert tooltip.title_x == pytest.approx(422)
        assert tooltip.title_y == pytest.approx(311)
        assert tooltip.subtitle_y == pytest.approx(333)

    def test_flips_below_when_no_room_on_top(self):
        tooltip = self._place(500, 50)
        assert tooltip.y == pytest.approx(80)

    def test_clamped_to_edges(self):
        assert self._place(20, 300).x == 10
        assert self._place(990, 300).x == 810

    def test_narrow_canvas_shrinks_box(self):
        tooltip = self._place(50, 300, canvas_width=100)
        assert tooltip.width == 80
        assert tooltip.x == 10

    @pytest.mark.parametrize("canvas_width", [0, 5, 20, 100, 199, 200, 1000])
    @pytest.mark.parametrize("anchor_fraction", [-0.5, 0, 0.5, 1, 1.5])
    def test_always_within_canvas(self, canvas_width, anchor_fraction):
        tooltip = self._place(canvas_width * anchor_fraction - 10, 300, canvas_width=canvas_width, text_width=400)
        assert tooltip.x >= 0
        assert tooltip.x + tooltip.width <= canvas_width + 1e-9

    def test_projected_from_hover(self, projector, entities, rows, viewport):
        hover = TooltipDescriptor("artifact:coin", "Coin", "500 BC", 500, 370)
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT, hover=hover)

        assert frame.tooltip.title == "Coin"
        assert frame.tooltip.subtitle == "500 BC"
        assert frame.tooltip.x == pytest.approx(410)


class TestHitTest:
    """Topmost entity under a point."""

    def test_hits(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        draco = _by_key(frame.markers)["landmark:draco"]

        assert frame.hit_test(502, 391) == "artifact:coin"
        assert frame.hit_test(100, 184) == "landmark:old"
        assert frame.hit_test(200, 212) == "landmark:myc"
        assert frame.hit_test(draco.x + 1, draco.y + 10) == "landmark:draco"
        assert frame.hit_test(700, 20) is None

    def test_describe_anchors_above_entity(self, projector, entities, rows, viewport):
        frame = projector.project(entities, rows, viewport, WIDTH, HEIGHT)
        by_key = {e.key: e for e in entities}

        coin = projector.describe(by_key["artifact:coin"], frame)
        assert (coin.anchor_x, coin.anchor_y) == (pytest.approx(500), pytest.approx(370))
        assert coin.subtitle == "500 BC"

        old = projector.describe(by_key["landmark:old"], frame)
        assert (old.anchor_x, old.anchor_y) == (pytest.approx(38), pytest.approx(162))
        assert old.subtitle == "1200 BC – 800 BC"

        assert projector.describe(by_key["landmark:hit"], frame) is None
