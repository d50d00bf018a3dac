"""
Timeline Interfaces

Protocol definitions for timeline integration points.
These let the engine work with any record source and any navigation
target (a browser, a router, a log line).

Note: Item selection is also published as the Qt signal
TimelineEngine.item_activated for embedding UIs.
"""

from typing import Protocol, Callable, List, Sequence, runtime_checkable

from .types import ArtifactRecord, LandmarkRecord


@runtime_checkable
class RecordSourceInterface(Protocol):
    """
    Protocol for timeline data providers.

    Records are read once per set_records() call and never mutated.
    """

    def get_artifacts(self) -> Sequence[ArtifactRecord]:
        """
        Get collection artifacts.

        Returns:
            Artifact records; the era text is parsed by the engine
        """
        ...

    def get_landmarks(self) -> Sequence[LandmarkRecord]:
        """
        Get historical landmarks.

        Returns:
            Landmark records; malformed ones are skipped by the engine
        """
        ...


# (base_path, entity_id) -> None
NavigationCallback = Callable[[str, str], None]


class StaticRecordSource:
    """In-memory RecordSourceInterface over fixed lists."""

    def __init__(self, artifacts: Sequence[ArtifactRecord] = (), landmarks: Sequence[LandmarkRecord] = ()):
        self._artifacts: List[ArtifactRecord] = list(artifacts)
        self._landmarks: List[LandmarkRecord] = list(landmarks)

    def get_artifacts(self) -> Sequence[ArtifactRecord]:
        return list(self._artifacts)

    def get_landmarks(self) -> Sequence[LandmarkRecord]:
        return list(self._landmarks)
