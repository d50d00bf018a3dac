"""
Timeline Data Types
====================

Public data contracts for the timeline engine.

These types define the input/output interface of the engine.
Consumers use these types to communicate with the timeline -
they don't need to know about internal representations.

Years live on an astronomical axis: BC years are negative, AD years are
positive, and there is no year-zero gap ("1 BC" and "1 AD" are adjacent
integers).
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Hashable
from enum import Enum, auto

from .constants import DOMAIN_START_YEAR, DOMAIN_END_YEAR, MIN_VISIBLE_SPAN

# =============================================================================
# Intervals
# =============================================================================

@dataclass(frozen=True)
class Interval:
    """
    Resolved year interval.

    Invariant: year_start <= year_end and midpoint == (year_start + year_end) / 2.
    Use Interval.of() to get the midpoint computed and the bounds ordered.
    """
    year_start: float
    year_end: float
    midpoint: float

    @classmethod
    def of(cls, year_start: float, year_end: float) -> 'Interval':
        if year_start > year_end:
            year_start, year_end = year_end, year_start
        return cls(year_start, year_end, (year_start + year_end) / 2)

    @classmethod
    def point(cls, year: float) -> 'Interval':
        return cls(year, year, year)

    @property
    def is_point(self) -> bool:
        return self.year_start == self.year_end

    @property
    def length(self) -> float:
        return self.year_end - self.year_start


@dataclass(frozen=True)
class ParsedEra(Interval):
    """Interval parsed from an era string; display keeps the input for UI echo."""
    display: str = ""

    def to_interval(self) -> Interval:
        return Interval(self.year_start, self.year_end, self.midpoint)


@dataclass(frozen=True)
class PackInterval:
    """Input to the row packer: an opaque key plus the range to keep clear."""
    key: Hashable
    range_start: float
    range_end: float


# =============================================================================
# Input Records (data you pass to the engine)
# =============================================================================

class LandmarkType(Enum):
    """Landmark categories. PERSON landmarks are drawn as point markers."""
    CIVILIZATION_START = "civilization_start"
    CIVILIZATION = "civilization"
    CIVILIZATION_END = "civilization_end"
    MAJOR_EVENT = "major_event"
    PERSON = "person"


def _optional_number(value: Any) -> Optional[float]:
    """Finite number from a record field, or None ("nan" and "inf" included)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class ArtifactRecord:
    """
    A collection artifact.

    Attributes:
        id: Unique identifier (used for navigation)
        name: Display name
        era: Free-form era text, e.g. "6th Century BC" or "27 BC - 14 AD"
        year_start / year_end: Optional explicit range; overrides the era
            position when both are given
        fields: Remaining display fields (category, material, ...), pass-through
    """
    id: str
    name: str
    era: str = ""
    year_start: Optional[float] = None
    year_end: Optional[float] = None
    fields: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def has_explicit_range(self) -> bool:
        return self.year_start is not None and self.year_end is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ArtifactRecord':
        """Create from a plain mapping; unknown keys land in fields."""
        known = {'id', 'name', 'era', 'yearStart', 'yearEnd', 'year_start', 'year_end'}
        return cls(
            id=str(data['id']),
            name=str(data.get('name', data['id'])),
            era=str(data.get('era') or ""),
            year_start=_optional_number(data.get('year_start', data.get('yearStart'))),
            year_end=_optional_number(data.get('year_end', data.get('yearEnd'))),
            fields={k: v for k, v in data.items() if k not in known},
        )


@dataclass(frozen=True)
class LandmarkRecord:
    """
    A historical landmark: either a point (year) or a span (year_start, year_end).

    Exactly one representation must be present; anything else is malformed
    and is excluded from layout.
    """
    id: str
    name: str
    type: LandmarkType = LandmarkType.MAJOR_EVENT
    description: Optional[str] = None
    year: Optional[float] = None
    year_start: Optional[float] = None
    year_end: Optional[float] = None

    @property
    def is_point(self) -> bool:
        return self.year is not None and self.year_start is None and self.year_end is None

    @property
    def is_span(self) -> bool:
        return self.year is None and self.year_start is not None and self.year_end is not None

    @property
    def is_well_formed(self) -> bool:
        if self.is_point:
            return math.isfinite(self.year)
        return (self.is_span and math.isfinite(self.year_start) and math.isfinite(self.year_end)
                and self.year_start <= self.year_end)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LandmarkRecord':
        """
        Create from a plain mapping (camelCase or snake_case year keys).

        Raises:
            ValueError: If the type is not a known LandmarkType
        """
        return cls(
            id=str(data['id']),
            name=str(data.get('name', data['id'])),
            type=LandmarkType(data.get('type', LandmarkType.MAJOR_EVENT.value)),
            description=data.get('description'),
            year=_optional_number(data.get('year')),
            year_start=_optional_number(data.get('year_start', data.get('yearStart'))),
            year_end=_optional_number(data.get('year_end', data.get('yearEnd'))),
        )


# =============================================================================
# Timeline Entities (engine-side, resolved)
# =============================================================================

class EntityKind(Enum):
    ARTIFACT = auto()
    LANDMARK = auto()


class EntityRole(Enum):
    """How an entity is laid out and drawn."""
    ARTIFACT = auto()      # Diamond near the axis
    SPAN = auto()          # Bar between two years
    POINT_MARKER = auto()  # Thin vertical marker (people, dated events)


@dataclass(frozen=True)
class TimelineEntity:
    """
    An artifact or landmark with its resolved interval.

    key is unique across kinds ("artifact:<id>" / "landmark:<id>"); id is the
    record identifier handed to navigation.
    """
    key: str
    id: str
    kind: EntityKind
    role: EntityRole
    name: str
    interval: Interval
    subtitle: str = ""
    landmark_type: Optional[LandmarkType] = None

    @property
    def midpoint(self) -> float:
        return self.interval.midpoint

    @property
    def is_navigable(self) -> bool:
        return self.kind is EntityKind.ARTIFACT


# =============================================================================
# Viewport
# =============================================================================

@dataclass(frozen=True)
class Domain:
    """Fixed outer bound of all navigable years."""
    start: float = DOMAIN_START_YEAR
    end: float = DOMAIN_END_YEAR

    def __post_init__(self):
        if not self.start < self.end:
            raise ValueError(f"Domain start must be before end: {self.start} >= {self.end}")

    @property
    def width(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Viewport:
    """
    Visible [start, end) sub-range of the domain.

    Build through viewport.make_viewport() / clamp_viewport() to get the
    invariants enforced: domain.start <= start < end <= domain.end and
    end - start >= min_span.
    """
    start: float
    end: float
    domain: Domain = field(default_factory=Domain)
    min_span: float = MIN_VISIBLE_SPAN

    @property
    def span(self) -> float:
        return self.end - self.start

    @property
    def center(self) -> float:
        return (self.start + self.end) / 2


@dataclass(frozen=True)
class ZoomLevel:
    """
    Discrete zoom tier derived from the viewport span.

    Attributes:
        level: Ordinal 1 (coarsest) to 4 (finest)
        name: Display name ("Era", "Period", "Century", "Decade")
        min_span: Smallest span (years) that still maps to this level
        major_interval / minor_interval: Tick spacing in years
        show_items: Whether point-entity (artifact) labels render
    """
    level: int
    name: str
    min_span: float
    major_interval: int
    minor_interval: int
    show_items: bool


@dataclass(frozen=True)
class Tick:
    """Axis tick in year space."""
    year: int
    label: str
    is_major: bool


# =============================================================================
# Interaction
# =============================================================================

class InteractionState(Enum):
    """State machine for pan/zoom gestures."""
    IDLE = auto()
    PANNING = auto()
    PINCHING = auto()


@dataclass(frozen=True)
class PanAnchor:
    """Snapshot taken when a drag starts."""
    origin_pixel: float
    origin_viewport: Viewport


@dataclass(frozen=True)
class PinchAnchor:
    """Last observed two-finger distance and midpoint (pixels)."""
    distance: float
    midpoint_pixel: float


@dataclass(frozen=True)
class TooltipDescriptor:
    """The single active tooltip: what to show and where it points."""
    key: str
    title: str
    subtitle: str
    anchor_x: float
    anchor_y: float


# =============================================================================
# Output Types
# =============================================================================

@dataclass(frozen=True)
class EngineState:
    """Snapshot returned by TimelineEngine.get_state(); years rounded for display."""
    viewport_start: int
    viewport_end: int
    zoom_level: int
    visible_entity_count: int
    visible_landmark_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'viewport_start': self.viewport_start,
            'viewport_end': self.viewport_end,
            'zoom_level': self.zoom_level,
            'visible_entity_count': self.visible_entity_count,
            'visible_landmark_count': self.visible_landmark_count,
        }
