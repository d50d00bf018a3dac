"""
Entity Builder

Resolves raw artifact and landmark records into TimelineEntity values and
packs spans and point markers into rows.

Records are never mutated. Malformed landmarks (both or neither of the
point/span representations, or start after end) are dropped here with a
warning so they never reach the row packer.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from ..types import (
    ArtifactRecord, LandmarkRecord, LandmarkType, TimelineEntity,
    EntityKind, EntityRole, Interval, PackInterval,
)
from ..constants import SPAN_YEAR_BUFFER, MARKER_YEAR_BUFFER
from ..timing.era_parser import parse_era, format_year
from ..logging import TimelineLog as Log
from .row_packer import pack, point_intervals, RowAssignment

ARTIFACT_KEY_PREFIX = "artifact:"
LANDMARK_KEY_PREFIX = "landmark:"


def artifact_key(artifact_id: str) -> str:
    return f"{ARTIFACT_KEY_PREFIX}{artifact_id}"


def landmark_key(landmark_id: str) -> str:
    return f"{LANDMARK_KEY_PREFIX}{landmark_id}"


def format_year_range(interval: Interval) -> str:
    if interval.is_point:
        return format_year(interval.year_start)
    return f"{format_year(interval.year_start)} – {format_year(interval.year_end)}"


def build_artifact_entity(record: ArtifactRecord) -> TimelineEntity:
    """
    Resolve an artifact.

    The era text is parsed and the artifact sits at its midpoint; explicit
    year_start/year_end on the record take precedence over the parsed era.
    """
    parsed = parse_era(record.era)
    if record.has_explicit_range:
        interval = Interval.of(record.year_start, record.year_end)
    else:
        interval = Interval.point(parsed.midpoint)

    return TimelineEntity(
        key=artifact_key(record.id),
        id=record.id,
        kind=EntityKind.ARTIFACT,
        role=EntityRole.ARTIFACT,
        name=record.name,
        interval=interval,
        subtitle=record.era,
    )


def build_landmark_entity(record: LandmarkRecord) -> Optional[TimelineEntity]:
    """
    Resolve a landmark, or return None if it is malformed.

    Point landmarks and person lifespans become point markers at their
    midpoint; every other span becomes a span bar.
    """
    if not record.is_well_formed:
        Log.warning(
            f"EntityBuilder: skipping malformed landmark '{record.id}' "
            f"(year={record.year}, year_start={record.year_start}, year_end={record.year_end})"
        )
        return None

    if record.is_point:
        interval = Interval.point(record.year)
        role = EntityRole.POINT_MARKER
    else:
        interval = Interval.of(record.year_start, record.year_end)
        role = EntityRole.POINT_MARKER if record.type is LandmarkType.PERSON else EntityRole.SPAN

    return TimelineEntity(
        key=landmark_key(record.id),
        id=record.id,
        kind=EntityKind.LANDMARK,
        role=role,
        name=record.name,
        interval=interval,
        subtitle=record.description or format_year_range(interval),
        landmark_type=record.type,
    )


def build_entities(
    artifacts: Iterable[ArtifactRecord] = (),
    landmarks: Iterable[LandmarkRecord] = ()
) -> List[TimelineEntity]:
    """
    Resolve all records, ordered by midpoint.

    The sort is stable, so records sharing a midpoint keep input order
    (artifacts before landmarks).
    """
    entities = [build_artifact_entity(record) for record in artifacts]
    skipped = 0
    for record in landmarks:
        entity = build_landmark_entity(record)
        if entity is None:
            skipped += 1
            continue
        entities.append(entity)

    entities.sort(key=lambda e: e.midpoint)
    Log.debug(f"EntityBuilder: built {len(entities)} entities ({skipped} landmarks skipped)")
    return entities


def assign_rows(
    entities: Sequence[TimelineEntity],
    span_buffer: float = SPAN_YEAR_BUFFER,
    marker_half_width: float = MARKER_YEAR_BUFFER
) -> Dict[str, int]:
    """
    Pack spans and point markers into rows (two independent row sets).

    Spans use their literal range with a year buffer; markers are widened
    to midpoint +/- marker_half_width (room for the label) with no buffer.
    Artifacts are not packed.
    """
    spans = [
        PackInterval(e.key, e.interval.year_start, e.interval.year_end)
        for e in entities if e.role is EntityRole.SPAN
    ]
    markers = point_intervals(
        ((e.key, e.midpoint) for e in entities if e.role is EntityRole.POINT_MARKER),
        marker_half_width,
    )

    rows: RowAssignment = {}
    rows.update(pack(spans, span_buffer))
    rows.update(pack(markers, 0))
    return rows
