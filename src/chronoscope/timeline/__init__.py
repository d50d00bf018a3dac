"""
Timeline Package
================

An interactive historical timeline for PyQt6 applications: artifacts,
landmark spans and person markers on a pannable, zoomable year axis.

Directory Structure
-------------------
- timing/       - Era parsing, viewport math, zoom tiers, axis ticks
- layout/       - Entity building, row packing, frame projection
- interaction/  - Pan/pinch/wheel state machine
- core/         - Qt canvas, painter, style and the TimelineEngine

Only core/ and timing/grid_renderer.py import PyQt6; everything else is
plain Python and can be used without a display.

Import Examples
---------------
    from chronoscope.timeline.core import TimelineEngine, TimelineCanvas
    from chronoscope.timeline.timing import parse_era, ViewportModel
    from chronoscope.timeline.layout import pack, FrameProjector
    from chronoscope.timeline.interaction import InteractionStateMachine
    from chronoscope.timeline.types import ArtifactRecord, LandmarkRecord
    from chronoscope.timeline.settings import TimelineSettings

Features
--------
- Free-text era parsing ("6th Century BC", "27 BC - 14 AD")
- Anchor-preserving wheel, pinch and button zoom, clamped to the domain
- Drag panning with click/tap detection
- Greedy row packing for overlapping landmark spans and person markers
- Zoom-dependent axis ticks and artifact labels
- Hover tooltips and a cursor year readout
"""

__version__ = "0.1.0"
