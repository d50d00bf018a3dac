"""
Timeline Engine
===============

Owns the viewport, the interaction state machine and the frame loop for
one TimelineCanvas.

Lifecycle:
    engine = TimelineEngine(artifacts, landmarks, settings=settings)
    engine.init(canvas)      # binds input, starts the frame timer
    ...
    engine.destroy()         # stops the timer, unbinds input (idempotent)

Input reaches the engine through a Qt event filter installed on the
canvas, so destroy() can unsubscribe everything in one step. Frames are
re-projected on the next timer tick after anything changes (viewport,
hover, cursor, size); render_frame() projects synchronously.
"""

import math
from typing import Dict, List, Optional, Sequence

from PyQt6.QtCore import QObject, QEvent, QTimer, Qt, pyqtSignal
from PyQt6.QtGui import QEventPoint

from ..types import (
    ArtifactRecord, LandmarkRecord, TimelineEntity, EntityRole,
    EngineState, InteractionState, Viewport,
)
from ..settings import TimelineSettings
from ..errors import SurfaceUnavailableError, EngineDestroyedError
from ..interfaces import NavigationCallback, RecordSourceInterface
from ..navigation import build_item_path
from ..timing.viewport import ViewportModel, initial_viewport
from ..timing.zoom_levels import zoom_level_of
from ..layout.entities import build_entities, assign_rows
from ..layout.geometry import FrameGeometry
from ..layout.projector import FrameProjector
from ..interaction.state_machine import InteractionStateMachine
from ..logging import TimelineLog as Log
from .canvas import TimelineCanvas


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TimelineEngine(QObject):
    """
    Interactive timeline bound to a canvas.

    Signals:
        frame_rendered(): A new frame was projected and handed to the canvas
        viewport_changed(start, end): Visible year range changed
        item_activated(entity_id): An artifact was clicked or tapped
    """

    frame_rendered = pyqtSignal()
    viewport_changed = pyqtSignal(float, float)
    item_activated = pyqtSignal(str)

    def __init__(
        self,
        artifacts: Sequence[ArtifactRecord] = (),
        landmarks: Sequence[LandmarkRecord] = (),
        settings: Optional[TimelineSettings] = None,
        navigate: Optional[NavigationCallback] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.settings = settings or TimelineSettings()
        self._navigate = navigate

        self._entities: List[TimelineEntity] = []
        self._entity_by_key: Dict[str, TimelineEntity] = {}
        self._rows: Dict[str, int] = {}
        self._load(artifacts, landmarks)

        s = self.settings
        start = initial_viewport(
            (e.midpoint for e in self._entities if e.role is EntityRole.ARTIFACT),
            s.domain(), s.min_visible_span, s.initial_padding_ratio,
        )
        self._model = ViewportModel(start)
        self._model.add_listener(self._on_viewport_changed)

        self._interaction = InteractionStateMachine(
            self._model,
            self._surface_width,
            click_threshold=s.click_threshold_px,
            wheel_zoom_in_factor=s.wheel_zoom_in_factor,
            wheel_zoom_out_factor=s.wheel_zoom_out_factor,
        )
        self._interaction.add_state_listener(self._on_interaction_state)

        self._projector = FrameProjector(s)
        self._surface: Optional[TimelineCanvas] = None
        self._frame: Optional[FrameGeometry] = None
        self._dirty = True
        self._destroyed = False

        self._timer = QTimer(self)
        self._timer.setInterval(s.frame_interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @classmethod
    def from_source(cls, source: RecordSourceInterface, **kwargs) -> 'TimelineEngine':
        return cls(source.get_artifacts(), source.get_landmarks(), **kwargs)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def viewport(self) -> Viewport:
        return self._model.viewport

    @property
    def viewport_model(self) -> ViewportModel:
        return self._model

    @property
    def interaction(self) -> InteractionStateMachine:
        return self._interaction

    @property
    def entities(self) -> List[TimelineEntity]:
        return list(self._entities)

    @property
    def rows(self) -> Dict[str, int]:
        return dict(self._rows)

    @property
    def frame(self) -> Optional[FrameGeometry]:
        return self._frame

    @property
    def surface(self) -> Optional[TimelineCanvas]:
        return self._surface

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def entity(self, key: str) -> Optional[TimelineEntity]:
        return self._entity_by_key.get(key)

    # =========================================================================
    # Records
    # =========================================================================

    def _load(self, artifacts: Sequence[ArtifactRecord], landmarks: Sequence[LandmarkRecord]) -> None:
        self._entities = build_entities(artifacts, landmarks)
        self._entity_by_key = {e.key: e for e in self._entities}
        self._rows = assign_rows(
            self._entities,
            span_buffer=self.settings.span_year_buffer,
            marker_half_width=self.settings.marker_year_buffer,
        )

    def set_records(self, artifacts: Sequence[ArtifactRecord], landmarks: Sequence[LandmarkRecord]) -> None:
        """Replace the entity set (rows are re-packed; the viewport is kept)."""
        self._check_alive()
        self._load(artifacts, landmarks)
        self._interaction.clear_hover()
        self._dirty = True

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _check_alive(self) -> None:
        if self._destroyed:
            raise EngineDestroyedError("Timeline engine has been destroyed")

    def init(self, surface: Optional[TimelineCanvas]) -> None:
        """
        Bind to a canvas and start the frame timer.

        A canvas holds at most one engine; any other engine bound to it is
        destroyed first.

        Raises:
            SurfaceUnavailableError: If surface is None or has zero size
            EngineDestroyedError: If this engine was destroyed
        """
        self._check_alive()
        if surface is None:
            raise SurfaceUnavailableError("No surface to draw on")
        if surface.width() <= 0 or surface.height() <= 0:
            raise SurfaceUnavailableError(
                f"Surface has no drawable area ({surface.width()}x{surface.height()})"
            )

        previous = getattr(surface, 'engine', None)
        if previous is not None and previous is not self:
            Log.warning("TimelineEngine: surface already bound to another engine, destroying it")
            previous.destroy()

        if self._surface is not None and self._surface is not surface:
            self._detach()

        self._surface = surface
        surface.engine = self
        surface.installEventFilter(self)
        self._projector = FrameProjector(self.settings, surface.measure_text)

        self.render_frame()
        self._timer.start()
        Log.info(
            f"TimelineEngine: initialized on {surface.width()}x{surface.height()} surface, "
            f"{len(self._entities)} entities"
        )

    def _detach(self) -> None:
        surface = self._surface
        if surface is None:
            return
        surface.removeEventFilter(self)
        if getattr(surface, 'engine', None) is self:
            surface.engine = None
            surface.set_frame(None)
        surface.setCursor(Qt.CursorShape.OpenHandCursor)
        self._surface = None

    def destroy(self) -> None:
        """Stop the timer, unbind input and release the canvas. Safe to call twice."""
        if self._destroyed:
            return
        self._timer.stop()
        self._detach()
        self._interaction.shutdown()
        self._model.remove_listener(self._on_viewport_changed)
        self._frame = None
        self._destroyed = True
        Log.debug("TimelineEngine: destroyed")

    # =========================================================================
    # Frames
    # =========================================================================

    def _surface_width(self) -> float:
        return float(self._surface.width()) if self._surface is not None else 0.0

    def _on_tick(self) -> None:
        if self._dirty:
            self.render_frame()

    def render_frame(self) -> Optional[FrameGeometry]:
        """
        Project and hand a frame to the canvas now.

        Returns:
            The new frame, or None when the canvas currently has zero size
            (the frame is skipped; the next valid tick renders normally)

        Raises:
            EngineDestroyedError: If the engine was destroyed
            SurfaceUnavailableError: If init() was never called
        """
        self._check_alive()
        if self._surface is None:
            raise SurfaceUnavailableError("Engine is not bound to a surface")

        width, height = self._surface.width(), self._surface.height()
        if width <= 0 or height <= 0:
            Log.debug(f"TimelineEngine: skipping frame on {width}x{height} surface")
            return None

        frame = self._projector.project(
            self._entities,
            self._rows,
            self._model.viewport,
            width,
            height,
            hover=self._interaction.hover_descriptor,
            cursor_x=self._interaction.cursor_x,
        )
        self._frame = frame
        self._dirty = False
        self._surface.set_frame(frame)
        self.frame_rendered.emit()
        return frame

    # =========================================================================
    # Public controls
    # =========================================================================

    def get_state(self) -> EngineState:
        """
        Current viewport and visibility counts (years rounded).

        Raises:
            EngineDestroyedError: If the engine was destroyed
        """
        self._check_alive()
        if self._surface is not None and (self._dirty or self._frame is None):
            self.render_frame()

        viewport = self._model.viewport
        frame = self._frame
        return EngineState(
            viewport_start=round_half_up(viewport.start),
            viewport_end=round_half_up(viewport.end),
            zoom_level=zoom_level_of(viewport).level,
            visible_entity_count=frame.visible_entity_count if frame else 0,
            visible_landmark_count=frame.visible_landmark_count if frame else 0,
        )

    def _zoom_centered(self, factor: float) -> None:
        self._check_alive()
        # Centred zoom only depends on the ratio, so any positive width works
        width = self._surface_width() or 1.0
        self._model.zoom_centered(factor, width)

    def zoom_in(self) -> None:
        self._zoom_centered(self.settings.button_zoom_in_factor)

    def zoom_out(self) -> None:
        self._zoom_centered(self.settings.button_zoom_out_factor)

    # =========================================================================
    # Selection / hover
    # =========================================================================

    def activate(self, entity: TimelineEntity) -> None:
        """Navigate to an artifact (landmarks are not navigable)."""
        if not entity.is_navigable:
            return
        path = build_item_path(self.settings.base_path, entity.id)
        Log.info(f"TimelineEngine: navigating to {path}")
        self.item_activated.emit(entity.id)
        if self._navigate is not None:
            self._navigate(self.settings.base_path, entity.id)

    def _activate_at(self, x: float, y: float) -> None:
        if self._frame is None:
            return
        key = self._frame.hit_test(x, y)
        entity = self._entity_by_key.get(key) if key else None
        if entity is not None:
            self.activate(entity)

    def _update_hover(self, x: float, y: float) -> None:
        frame = self._frame
        if frame is None:
            return
        key = frame.hit_test(x, y)
        current = self._interaction.hover_descriptor

        if key is None:
            if current is not None:
                self._interaction.clear_hover()
        elif current is None or current.key != key:
            entity = self._entity_by_key.get(key)
            if entity is not None:
                self._interaction.hover(self._projector.describe(entity, frame))

        if self._surface is not None and self._interaction.state is InteractionState.IDLE:
            entity = self._entity_by_key.get(key) if key else None
            if entity is not None and entity.is_navigable:
                self._surface.setCursor(Qt.CursorShape.PointingHandCursor)
            else:
                self._surface.setCursor(Qt.CursorShape.OpenHandCursor)

    # =========================================================================
    # Callbacks
    # =========================================================================

    def _on_viewport_changed(self, viewport: Viewport) -> None:
        self._dirty = True
        self.viewport_changed.emit(float(viewport.start), float(viewport.end))

    def _on_interaction_state(self, state: InteractionState) -> None:
        if self._surface is None:
            return
        if state is InteractionState.PANNING:
            self._surface.setCursor(Qt.CursorShape.ClosedHandCursor)
        else:
            self._surface.setCursor(Qt.CursorShape.OpenHandCursor)

    # =========================================================================
    # Event filter
    # =========================================================================

    @staticmethod
    def _touch_points(event, include_released: bool = False):
        points = []
        for point in event.points():
            if not include_released and point.state() == QEventPoint.State.Released:
                continue
            pos = point.position()
            points.append((pos.x(), pos.y()))
        return points

    def eventFilter(self, obj, event) -> bool:
        if self._destroyed or obj is not self._surface:
            return False

        etype = event.type()

        if etype == QEvent.Type.MouseButtonPress:
            if event.button() != Qt.MouseButton.LeftButton:
                return False
            self._interaction.press(event.position().x())
            self._dirty = True
            return True

        if etype == QEvent.Type.MouseMove:
            pos = event.position()
            self._interaction.move(pos.x())
            self._update_hover(pos.x(), pos.y())
            self._dirty = True
            return True

        if etype == QEvent.Type.MouseButtonRelease:
            if event.button() != Qt.MouseButton.LeftButton:
                return False
            pos = event.position()
            if self._interaction.release(pos.x()):
                self._activate_at(pos.x(), pos.y())
            self._dirty = True
            return True

        if etype == QEvent.Type.Leave:
            self._interaction.leave()
            self._dirty = True
            return False

        if etype == QEvent.Type.Wheel:
            delta = event.angleDelta().y() or event.pixelDelta().y()
            if delta == 0:
                return False
            # Qt reports scrolling down as a negative delta
            self._interaction.wheel(-delta, event.position().x())
            return True

        if etype == QEvent.Type.TouchBegin:
            self._interaction.touch_begin(self._touch_points(event))
            event.accept()
            return True

        if etype == QEvent.Type.TouchUpdate:
            self._interaction.touch_update(self._touch_points(event))
            return True

        if etype in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            points = self._touch_points(event, include_released=True)
            tapped = self._interaction.touch_end(points)
            if tapped and etype == QEvent.Type.TouchEnd and points:
                self._activate_at(*points[0])
            self._dirty = True
            return True

        if etype == QEvent.Type.Resize:
            self._dirty = True
            return False

        if etype == QEvent.Type.Hide:
            self._timer.stop()
            return False

        if etype == QEvent.Type.Show:
            self._dirty = True
            self._timer.start()
            return False

        return False
