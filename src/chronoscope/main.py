"""
Chronoscope Qt Entry Point

Launches a window with the interactive timeline over the built-in sample
collection.

Environment (a .env file in the working directory is loaded first):
    CHRONOSCOPE_LOG_LEVEL   DEBUG / INFO / WARNING / ERROR
    CHRONOSCOPE_BASE_PATH   Navigation base path (overrides settings)
    CHRONOSCOPE_LOG_FILE    "1" to also log to a file in the user log directory
                            (the "log_to_file" setting does the same)
"""
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PyQt6.QtCore import QTimer

from chronoscope import __version__
from chronoscope.utils.message import Log
from chronoscope.utils.settings import Settings, get_app_settings
from chronoscope.timeline.logging import TimelineLog
from chronoscope.timeline.settings import TimelineSettings
from chronoscope.timeline.navigation import build_item_path
from chronoscope.timeline.core import TimelineCanvas, TimelineEngine
from chronoscope.timeline.errors import SurfaceUnavailableError
from chronoscope.sample_data import sample_artifacts, sample_landmarks


def _forward_timeline_log(level: int, message: str) -> None:
    """Route timeline package logs into the application logger."""
    if level >= TimelineLog.ERROR:
        Log.error(message)
    elif level >= TimelineLog.WARNING:
        Log.warning(message)
    elif level >= TimelineLog.INFO:
        Log.info(message)
    else:
        Log.debug(message)


def file_logging_requested(app_settings: Settings) -> bool:
    """True if the environment or the saved settings ask for a log file."""
    if os.getenv("CHRONOSCOPE_LOG_FILE", "").strip().lower() in ("1", "true", "yes"):
        return True
    return bool(app_settings.get("log_to_file"))


class TimelineWindow(QMainWindow):
    """Demo window: canvas, zoom buttons and a status line."""

    def __init__(self, settings: TimelineSettings, app_settings: Optional[Settings] = None):
        super().__init__()
        self.app_settings = app_settings
        self.setWindowTitle(f"Chronoscope {__version__}")
        self.resize(1200, 480)
        self._restore_geometry()

        self.canvas = TimelineCanvas()
        self.canvas.setMinimumHeight(240)

        zoom_in_button = QPushButton("+")
        zoom_out_button = QPushButton("−")
        self.status_label = QLabel()

        controls = QHBoxLayout()
        controls.addWidget(zoom_out_button)
        controls.addWidget(zoom_in_button)
        controls.addWidget(self.status_label, 1)

        layout = QVBoxLayout()
        layout.addWidget(self.canvas, 1)
        layout.addLayout(controls)
        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

        self.engine = TimelineEngine(
            sample_artifacts(),
            sample_landmarks(),
            settings=settings,
            navigate=self._navigate,
            parent=self,
        )
        self.engine.frame_rendered.connect(self._update_status)
        zoom_in_button.clicked.connect(self.engine.zoom_in)
        zoom_out_button.clicked.connect(self.engine.zoom_out)

    def start(self) -> None:
        """Bind the engine once the canvas has been laid out."""
        self.engine.init(self.canvas)

    def _navigate(self, base_path: str, entity_id: str) -> None:
        path = build_item_path(base_path, entity_id)
        Log.info(f"Navigate: {path}")
        self.statusBar().showMessage(f"Open {path}", 3000)

    def _update_status(self) -> None:
        state = self.engine.get_state()
        self.status_label.setText(
            f"{state.viewport_start} to {state.viewport_end}  |  zoom {state.zoom_level}  |  "
            f"{state.visible_entity_count} items, {state.visible_landmark_count} landmarks"
        )

    def _restore_geometry(self) -> None:
        if self.app_settings is None:
            return
        geometry = self.app_settings.get("window_geometry")
        if not isinstance(geometry, list) or len(geometry) != 4 or not all(isinstance(v, int) for v in geometry):
            if geometry is not None:
                Log.warning(f"Ignoring invalid window_geometry setting: {geometry!r}")
            return
        self.setGeometry(*geometry)

    def closeEvent(self, event):
        if self.app_settings is not None:
            rect = self.geometry()
            self.app_settings.set("window_geometry", [rect.x(), rect.y(), rect.width(), rect.height()])
        self.engine.destroy()
        super().closeEvent(event)


def main():
    """Main entry point for the Qt demo"""
    load_dotenv()
    Log.set_level(os.getenv("CHRONOSCOPE_LOG_LEVEL", "INFO"))
    app_settings = get_app_settings()
    if file_logging_requested(app_settings):
        Log.info(f"Logging to {Log.enable_file_logging()}")

    TimelineLog.level = TimelineLog.DEBUG
    TimelineLog.set_handler(_forward_timeline_log)

    app = QApplication(sys.argv)
    app.setApplicationName("Chronoscope")
    app.setOrganizationName("Chronoscope")

    Log.info("=" * 60)
    Log.info(f"Chronoscope {__version__}")
    Log.info("=" * 60)

    settings = app_settings.timeline_settings()
    base_path = os.getenv("CHRONOSCOPE_BASE_PATH", "").strip()
    if base_path:
        settings.base_path = base_path

    window = TimelineWindow(settings, app_settings)
    window.show()

    def _start():
        try:
            window.start()
        except SurfaceUnavailableError as e:
            Log.error(f"Cannot start timeline: {e}")
            app.exit(1)

    QTimer.singleShot(0, _start)

    exit_code = app.exec()
    Log.info("Chronoscope exited")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
