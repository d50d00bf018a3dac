"""
Unit tests for entity resolution and row assignment.
"""
import pytest

from chronoscope.timeline.types import (
    ArtifactRecord, EntityKind, EntityRole, LandmarkRecord, LandmarkType,
)
from chronoscope.timeline.layout.entities import (
    artifact_key, assign_rows, build_artifact_entity, build_entities,
    build_landmark_entity, landmark_key,
)


def _landmark(id, type=LandmarkType.CIVILIZATION, **years):
    return LandmarkRecord(id=id, name=id.title(), type=type, **years)


class TestArtifacts:
    """Artifacts sit at the midpoint of their parsed era."""

    def test_parsed_era_midpoint(self):
        entity = build_artifact_entity(ArtifactRecord("owl", "Owl", era="6th Century BC"))

        assert entity.key == "artifact:owl"
        assert entity.kind is EntityKind.ARTIFACT
        assert entity.role is EntityRole.ARTIFACT
        assert entity.midpoint == -550
        assert entity.interval.is_point
        assert entity.subtitle == "6th Century BC"
        assert entity.is_navigable

    def test_explicit_range_overrides_era(self):
        record = ArtifactRecord("coin", "Coin", era="Roman", year_start=-100, year_end=-300)
        entity = build_artifact_entity(record)

        assert (entity.interval.year_start, entity.interval.year_end) == (-300, -100)
        assert entity.midpoint == -200
        assert entity.subtitle == "Roman"

    def test_half_explicit_range_uses_era(self):
        record = ArtifactRecord("coin", "Coin", era="476 AD", year_start=-100)
        assert build_artifact_entity(record).midpoint == 476


class TestLandmarks:
    """Landmark roles and malformed records."""

    def test_span(self):
        entity = build_landmark_entity(_landmark("egypt", year_start=-3100, year_end=-30))

        assert entity.key == "landmark:egypt"
        assert entity.kind is EntityKind.LANDMARK
        assert entity.role is EntityRole.SPAN
        assert entity.landmark_type is LandmarkType.CIVILIZATION
        assert not entity.is_navigable

    def test_person_span_is_point_marker(self):
        entity = build_landmark_entity(
            _landmark("caesar", type=LandmarkType.PERSON, year_start=-100, year_end=-44)
        )
        assert entity.role is EntityRole.POINT_MARKER
        assert entity.midpoint == -72

    def test_point_landmark_is_point_marker(self):
        entity = build_landmark_entity(_landmark("rome", type=LandmarkType.MAJOR_EVENT, year=-753))
        assert entity.role is EntityRole.POINT_MARKER
        assert entity.interval.is_point
        assert entity.midpoint == -753

    def test_subtitle_prefers_description(self):
        record = LandmarkRecord("troy", "Troy", description="Sacked", year=-1180)
        assert build_landmark_entity(record).subtitle == "Sacked"

    def test_subtitle_falls_back_to_years(self):
        span = build_landmark_entity(_landmark("persia", year_start=-550, year_end=-330))
        point = build_landmark_entity(_landmark("rome", year=-753))
        assert span.subtitle == "550 BC – 330 BC"
        assert point.subtitle == "753 BC"

    @pytest.mark.parametrize("years", [
        {},
        {"year": -500, "year_start": -600, "year_end": -400},
        {"year_start": -600},
        {"year_start": -400, "year_end": -600},
        {"year": float("nan")},
        {"year_start": float("-inf"), "year_end": -600},
    ])
    def test_malformed_is_skipped(self, years, timeline_log_records):
        assert build_landmark_entity(_landmark("bad", **years)) is None
        assert any("malformed landmark 'bad'" in message for _, message in timeline_log_records)


class TestBuildEntities:
    """Combined resolution."""

    def test_sorted_by_midpoint(self):
        entities = build_entities(
            artifacts=[
                ArtifactRecord("late", "Late", era="476 AD"),
                ArtifactRecord("early", "Early", era="2400-2200 BC"),
            ],
            landmarks=[_landmark("rome", year=-753)],
        )
        assert [e.key for e in entities] == ["artifact:early", "landmark:rome", "artifact:late"]

    def test_malformed_landmarks_are_dropped(self):
        entities = build_entities(landmarks=[_landmark("ok", year=0), _landmark("bad")])
        assert [e.id for e in entities] == ["ok"]

    def test_key_helpers(self):
        assert artifact_key("x") == "artifact:x"
        assert landmark_key("x") == "landmark:x"


class TestAssignRows:
    """Spans and markers are packed into independent row sets."""

    def test_overlapping_spans_stack(self):
        entities = build_entities(landmarks=[
            _landmark("a", year_start=-3000, year_end=-1000),
            _landmark("b", year_start=-2000, year_end=-500),
            _landmark("c", year_start=-450, year_end=0),
        ])
        rows = assign_rows(entities)

        assert rows["landmark:a"] == 0
        assert rows["landmark:b"] == 1
        # c starts 50 years after b ends (inside the buffer) but clears a
        assert rows["landmark:c"] == 0

    def test_markers_within_label_width_stack(self):
        entities = build_entities(landmarks=[
            _landmark("p", type=LandmarkType.PERSON, year_start=-500, year_end=-400),
            _landmark("q", type=LandmarkType.PERSON, year_start=-450, year_end=-350),
            _landmark("r", year=-200),
        ])
        rows = assign_rows(entities)

        assert rows["landmark:p"] == 0
        assert rows["landmark:q"] == 1
        # 250 years from p clears the two 80 year label half-widths
        assert rows["landmark:r"] == 0

    def test_spans_and_markers_use_separate_rows(self):
        entities = build_entities(landmarks=[
            _landmark("span", year_start=-600, year_end=-300),
            _landmark("point", year=-450),
        ])
        rows = assign_rows(entities)
        assert rows == {"landmark:span": 0, "landmark:point": 0}

    def test_artifacts_are_not_packed(self):
        entities = build_entities(artifacts=[ArtifactRecord("x", "X", era="476 AD")])
        assert assign_rows(entities) == {}
