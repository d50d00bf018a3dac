"""
Unit tests for timeline records and value types.
"""
import pytest

from chronoscope.timeline.interfaces import StaticRecordSource
from chronoscope.timeline.navigation import build_item_path
from chronoscope.timeline.types import (
    ArtifactRecord, Domain, EngineState, Interval, LandmarkRecord, LandmarkType,
)


class TestInterval:
    """Interval construction helpers."""

    def test_of_orders_bounds_and_computes_midpoint(self):
        interval = Interval.of(-100, -300)
        assert (interval.year_start, interval.year_end, interval.midpoint) == (-300, -100, -200)
        assert interval.length == 200
        assert not interval.is_point

    def test_point(self):
        interval = Interval.point(-753)
        assert interval.is_point
        assert interval.midpoint == -753


class TestDomain:
    """Domain bounds."""

    def test_default_bounds(self):
        domain = Domain()
        assert (domain.start, domain.end, domain.width) == (-4500, 1500, 6000)

    def test_start_must_precede_end(self):
        with pytest.raises(ValueError):
            Domain(100, 100)


class TestArtifactRecordFromDict:
    """Loading artifacts from plain mappings."""

    def test_camel_case_years_and_extra_fields(self):
        record = ArtifactRecord.from_dict({
            "id": "amphora-7",
            "name": "Amphora",
            "era": "6th Century BC",
            "yearStart": "-600",
            "yearEnd": -500,
            "material": "Terracotta",
        })

        assert record.id == "amphora-7"
        assert record.year_start == -600
        assert record.year_end == -500
        assert record.has_explicit_range
        assert record.fields == {"material": "Terracotta"}

    def test_missing_optional_fields(self):
        record = ArtifactRecord.from_dict({"id": 12})
        assert record.id == "12"
        assert record.name == "12"
        assert record.era == ""
        assert not record.has_explicit_range

    def test_unparseable_years_are_ignored(self):
        record = ArtifactRecord.from_dict({"id": "x", "year_start": "unknown", "year_end": True})
        assert record.year_start is None
        assert record.year_end is None

    def test_non_finite_years_are_ignored(self):
        record = ArtifactRecord.from_dict({"id": "x", "era": "500 BC", "year_start": "nan", "year_end": "inf"})
        assert not record.has_explicit_range


class TestLandmarkRecordFromDict:
    """Loading landmarks from plain mappings."""

    def test_span(self):
        record = LandmarkRecord.from_dict({
            "id": "egypt", "name": "Egypt", "type": "civilization",
            "yearStart": -3100, "yearEnd": -30,
        })
        assert record.type is LandmarkType.CIVILIZATION
        assert record.is_span
        assert record.is_well_formed

    def test_point_defaults_to_major_event(self):
        record = LandmarkRecord.from_dict({"id": "rome", "name": "Rome", "year": -753})
        assert record.type is LandmarkType.MAJOR_EVENT
        assert record.is_point

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            LandmarkRecord.from_dict({"id": "x", "type": "volcano", "year": 0})

    def test_inverted_span_is_not_well_formed(self):
        record = LandmarkRecord("x", "X", year_start=10, year_end=0)
        assert record.is_span
        assert not record.is_well_formed

    @pytest.mark.parametrize("value", ["nan", "inf", "-Infinity", "1e400", float("nan"), float("inf")])
    def test_non_finite_years_are_dropped(self, value):
        record = LandmarkRecord.from_dict({"id": "x", "name": "X", "year": value})
        assert record.year is None
        assert not record.is_well_formed

    def test_non_finite_span_bound_is_not_well_formed(self):
        record = LandmarkRecord("x", "X", year_start=float("-inf"), year_end=0)
        assert record.is_span
        assert not record.is_well_formed


class TestEngineState:
    def test_to_dict(self):
        state = EngineState(-2000, 0, 2, 5, 3)
        assert state.to_dict() == {
            "viewport_start": -2000,
            "viewport_end": 0,
            "zoom_level": 2,
            "visible_entity_count": 5,
            "visible_landmark_count": 3,
        }


class TestStaticRecordSource:
    def test_returns_given_records(self):
        artifact = ArtifactRecord("a", "A")
        landmark = LandmarkRecord("l", "L", year=0)
        source = StaticRecordSource([artifact], [landmark])
        assert list(source.get_artifacts()) == [artifact]
        assert list(source.get_landmarks()) == [landmark]


class TestBuildItemPath:
    """Item routes under the configured base path."""

    @pytest.mark.parametrize("base,expected", [
        ("/Archive", "/Archive/item/owl-1"),
        ("/Archive/", "/Archive/item/owl-1"),
        ("//museum//", "/museum/item/owl-1"),
        ("", "/item/owl-1"),
    ])
    def test_paths(self, base, expected):
        assert build_item_path(base, "owl-1") == expected
