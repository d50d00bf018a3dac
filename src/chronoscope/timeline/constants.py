"""
Timeline Constants

Central location for timeline dimensions, year bounds and timing constants.
Colors are defined in core/style.py for centralized styling.
These are the defaults; TimelineSettings can override any of them.
"""

# =============================================================================
# Year Domain
# =============================================================================

DOMAIN_START_YEAR = -4500  # Earliest navigable year (4501 BC)
DOMAIN_END_YEAR = 1500     # Latest navigable year
MIN_VISIBLE_SPAN = 50      # Minimum years visible (maximum zoom)

# Initial viewport padding around the artifacts, as a fraction of their range
INITIAL_PADDING_RATIO = 0.2

# =============================================================================
# Zoom
# =============================================================================

BUTTON_ZOOM_IN_FACTOR = 1.5
BUTTON_ZOOM_OUT_FACTOR = 0.67
WHEEL_ZOOM_IN_FACTOR = 1.1   # Wheel scrolled up (deltaY < 0)
WHEEL_ZOOM_OUT_FACTOR = 0.9  # Wheel scrolled down (deltaY > 0)

# Pointer movement (pixels) above which a press/release is a drag, not a click
CLICK_THRESHOLD_PX = 5

# =============================================================================
# Layout (ratios of canvas height)
# =============================================================================

AXIS_Y_RATIO = 0.88      # Axis near the bottom, with bottom padding
ARTIFACT_Y_RATIO = 0.78  # Collection artifacts just above the axis
MARKER_Y_RATIO = 0.52    # Point markers (people), rows stack downward
SPAN_Y_RATIO = 0.42      # Landmark spans, rows stack upward

SPAN_ROW_SPACING = 28
MARKER_ROW_SPACING = 26

# Year buffers used by the row packer
SPAN_YEAR_BUFFER = 100    # Gap required between spans sharing a row
MARKER_YEAR_BUFFER = 80   # Approximate label half-width of a point marker

# =============================================================================
# Culling and labels (pixels)
# =============================================================================

CULL_MARGIN = 50         # Entities further off-screen than this are not drawn
CLIP_MARGIN = 10         # Span bars / ticks are clipped to [-10, width + 10]
LABEL_EDGE_MARGIN = 5    # Span labels keep this distance from the canvas edges

ARTIFACT_SIZE = 5            # Half-diagonal of the artifact diamond
ARTIFACT_HOVER_SCALE = 1.5
ARTIFACT_LABEL_OFFSET = 30   # Below the axis line (and its tick labels)
ARTIFACT_LABEL_MAX_CHARS = 20

SPAN_BAR_HEIGHT = 4
SPAN_DIAMOND_SIZE = 4
SPAN_LABEL_OFFSET = 8
MARKER_HALF_HEIGHT = 6
MARKER_LABEL_OFFSET = 8

MAJOR_TICK_HEIGHT = 8
MINOR_TICK_HEIGHT = 4
TICK_LABEL_OFFSET = 12
CURSOR_LABEL_OFFSET = 5

# =============================================================================
# Tooltip (pixels)
# =============================================================================

TOOLTIP_PADDING = 12
TOOLTIP_MIN_WIDTH = 180
TOOLTIP_MAX_WIDTH = 300
TOOLTIP_HEIGHT = 56
TOOLTIP_OFFSET = 15        # Gap between the anchor and the tooltip bottom
TOOLTIP_FLIP_OFFSET = 30   # Gap below the anchor when flipped
TOOLTIP_MARGIN = 10        # Horizontal and top safety margin
TOOLTIP_ANCHOR_LIFT = 20   # Anchor sits this far above the hovered artifact
TOOLTIP_SUBTITLE_OFFSET = 22

# =============================================================================
# Timing
# =============================================================================

# Target 60 FPS for re-projection
FRAME_INTERVAL_MS = 16  # ~60 FPS (1000ms / 60 = 16.67ms)

# =============================================================================
# Navigation
# =============================================================================

DEFAULT_BASE_PATH = "/Archive"
ITEM_ROUTE = "item"
