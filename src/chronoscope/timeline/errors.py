"""
Timeline Errors

Exception hierarchy for the timeline engine. Unparseable era text is never
an error (the parser degrades instead), so only layout-boundary and
environment failures appear here.
"""


class TimelineError(Exception):
    """Base class for all timeline engine errors."""


class SurfaceUnavailableError(TimelineError):
    """The drawable surface is missing or has no drawable area."""


class InvalidIntervalError(TimelineError, ValueError):
    """An interval handed to the row packer has start > end."""


class EngineDestroyedError(TimelineError):
    """A public engine operation was called after destroy()."""
