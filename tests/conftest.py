"""
Shared pytest configuration.

Qt tests run headless on the offscreen platform plugin.
"""
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Make the src/ layout importable without an editable install
_SRC = Path(__file__).resolve().parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


@pytest.fixture(scope="session")
def qapp():
    """Ensure a QApplication exists for widgets, fonts and timers."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def timeline_log_records():
    """Capture TimelineLog output as (level, message) tuples."""
    from chronoscope.timeline.logging import TimelineLog

    records = []
    previous_level = TimelineLog.level
    TimelineLog.level = TimelineLog.DEBUG
    TimelineLog.set_handler(lambda level, message: records.append((level, message)))
    yield records
    TimelineLog.set_handler(None)
    TimelineLog.level = previous_level
