"""
Row Packer
==========

Greedy first-fit assignment of year intervals to display rows so that
intervals sharing a row stay at least `buffer` years apart.

The packer is deterministic: identical input order and buffer always
produce the same assignment. It is not optimal (first-fit, not minimum
row count), which is fine for a few hundred landmarks.
"""

from typing import Dict, Hashable, Iterable, List, Sequence, Tuple

from ..types import PackInterval
from ..errors import InvalidIntervalError

RowAssignment = Dict[Hashable, int]


def _fits(row: List[Tuple[float, float]], start: float, end: float, buffer: float) -> bool:
    for occupied_start, occupied_end in row:
        if not (end + buffer < occupied_start or start - buffer > occupied_end):
            return False
    return True


def pack(intervals: Sequence[PackInterval], buffer: float = 0) -> RowAssignment:
    """
    Assign each interval the lowest row it fits in.

    Intervals are visited in stable range_start order; a row accepts an
    interval iff it clears every range already placed there by more than
    `buffer` on both sides.

    Args:
        intervals: Ranges to place, keyed by an opaque hashable key
        buffer: Minimum gap in years between ranges on the same row

    Returns:
        Mapping key -> row index (0-based)

    Raises:
        InvalidIntervalError: If any interval has range_start > range_end
    """
    for interval in intervals:
        if interval.range_start > interval.range_end:
            raise InvalidIntervalError(
                f"Interval {interval.key!r} has start {interval.range_start} "
                f"after end {interval.range_end}"
            )

    rows: List[List[Tuple[float, float]]] = []
    assignment: RowAssignment = {}

    for interval in sorted(intervals, key=lambda i: i.range_start):
        start, end = interval.range_start, interval.range_end
        for index, row in enumerate(rows):
            if _fits(row, start, end, buffer):
                break
        else:
            index = len(rows)
            rows.append([])
        rows[index].append((start, end))
        assignment[interval.key] = index

    return assignment


def row_count(assignment: RowAssignment) -> int:
    return max(assignment.values()) + 1 if assignment else 0


def point_intervals(items: Iterable[Tuple[Hashable, float]], half_width: float) -> List[PackInterval]:
    """
    Widen points to [year - half_width, year + half_width].

    Used for markers whose label, not their position, takes up the room.
    """
    return [PackInterval(key, year - half_width, year + half_width) for key, year in items]
