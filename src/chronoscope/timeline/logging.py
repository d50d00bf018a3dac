"""
Timeline Logging

Log sink for the timeline engine. The engine does not depend on the
application's colorama logger; the host routes engine messages wherever
it likes:

    from chronoscope.timeline.logging import TimelineLog
    TimelineLog.set_handler(lambda level, message: ...)

With no handler installed, messages go to stderr prefixed with
"[Timeline:LEVEL]". Setting TimelineLog.enabled = False silences the engine.
"""

import sys
from typing import Callable, Dict, Optional

LogHandler = Callable[[int, str], None]


class TimelineLog:
    """Class-level logger shared by every timeline component."""

    enabled: bool = True

    DEBUG: int = 10
    INFO: int = 20
    WARNING: int = 30
    ERROR: int = 40

    # Threshold; quieter messages are dropped before reaching the handler
    level: int = INFO

    _handler: Optional[LogHandler] = None
    _names: Dict[int, str] = {DEBUG: "DEBUG", INFO: "INFO", WARNING: "WARNING", ERROR: "ERROR"}

    @classmethod
    def set_handler(cls, handler: Optional[LogHandler]) -> None:
        """Route messages to handler(level, message); None restores stderr."""
        cls._handler = handler

    @classmethod
    def _emit(cls, level: int, message: str) -> None:
        if not cls.enabled or level < cls.level:
            return
        if cls._handler is not None:
            cls._handler(level, message)
            return
        print(f"[Timeline:{cls._names.get(level, 'LOG')}] {message}", file=sys.stderr)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._emit(cls.DEBUG, message)

    @classmethod
    def info(cls, message: str) -> None:
        cls._emit(cls.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._emit(cls.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._emit(cls.ERROR, message)


Log = TimelineLog
