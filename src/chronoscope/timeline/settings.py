"""
Timeline Settings

Tunable parameters of the timeline engine, persisted as part of the
application settings file. Defaults come from constants.py.
"""

from dataclasses import dataclass

from chronoscope.settings import BaseSettings, ValidationResult, validated_field

from .types import Domain
from .constants import (
    DOMAIN_START_YEAR, DOMAIN_END_YEAR, MIN_VISIBLE_SPAN, INITIAL_PADDING_RATIO,
    BUTTON_ZOOM_IN_FACTOR, BUTTON_ZOOM_OUT_FACTOR,
    WHEEL_ZOOM_IN_FACTOR, WHEEL_ZOOM_OUT_FACTOR, CLICK_THRESHOLD_PX,
    AXIS_Y_RATIO, ARTIFACT_Y_RATIO, MARKER_Y_RATIO, SPAN_Y_RATIO,
    SPAN_ROW_SPACING, MARKER_ROW_SPACING, SPAN_YEAR_BUFFER, MARKER_YEAR_BUFFER,
    CULL_MARGIN, CLIP_MARGIN, LABEL_EDGE_MARGIN,
    ARTIFACT_SIZE, ARTIFACT_HOVER_SCALE, ARTIFACT_LABEL_OFFSET, ARTIFACT_LABEL_MAX_CHARS,
    TOOLTIP_PADDING, TOOLTIP_MIN_WIDTH, TOOLTIP_MAX_WIDTH, TOOLTIP_HEIGHT,
    TOOLTIP_OFFSET, TOOLTIP_FLIP_OFFSET, TOOLTIP_MARGIN, TOOLTIP_ANCHOR_LIFT,
    TOOLTIP_SUBTITLE_OFFSET, FRAME_INTERVAL_MS, DEFAULT_BASE_PATH,
)

_RATIO_FIELDS = ('axis_y_ratio', 'artifact_y_ratio', 'marker_y_ratio', 'span_y_ratio')


@dataclass
class TimelineSettings(BaseSettings):
    """
    Timeline engine configuration.

    Year values are on the astronomical axis (BC negative). Ratios are
    fractions of the canvas height; spacings and margins are pixels.
    """

    # Domain / zoom
    domain_start_year: float = validated_field(DOMAIN_START_YEAR)
    domain_end_year: float = validated_field(DOMAIN_END_YEAR)
    min_visible_span: float = validated_field(MIN_VISIBLE_SPAN, min_value=1)
    initial_padding_ratio: float = validated_field(INITIAL_PADDING_RATIO, min_value=0.0)
    button_zoom_in_factor: float = validated_field(BUTTON_ZOOM_IN_FACTOR, min_value=1.0, max_value=10.0)
    button_zoom_out_factor: float = validated_field(BUTTON_ZOOM_OUT_FACTOR, min_value=0.1, max_value=1.0)
    wheel_zoom_in_factor: float = validated_field(WHEEL_ZOOM_IN_FACTOR, min_value=1.0, max_value=10.0)
    wheel_zoom_out_factor: float = validated_field(WHEEL_ZOOM_OUT_FACTOR, min_value=0.1, max_value=1.0)
    click_threshold_px: float = validated_field(CLICK_THRESHOLD_PX, min_value=0)

    # Layout
    axis_y_ratio: float = validated_field(AXIS_Y_RATIO, min_value=0.0, max_value=1.0)
    artifact_y_ratio: float = validated_field(ARTIFACT_Y_RATIO, min_value=0.0, max_value=1.0)
    marker_y_ratio: float = validated_field(MARKER_Y_RATIO, min_value=0.0, max_value=1.0)
    span_y_ratio: float = validated_field(SPAN_Y_RATIO, min_value=0.0, max_value=1.0)
    span_row_spacing: float = validated_field(SPAN_ROW_SPACING, min_value=0)
    marker_row_spacing: float = validated_field(MARKER_ROW_SPACING, min_value=0)
    span_year_buffer: float = validated_field(SPAN_YEAR_BUFFER, min_value=0)
    marker_year_buffer: float = validated_field(MARKER_YEAR_BUFFER, min_value=0)

    # Culling / labels
    cull_margin: float = validated_field(CULL_MARGIN, min_value=0)
    clip_margin: float = validated_field(CLIP_MARGIN, min_value=0)
    label_edge_margin: float = validated_field(LABEL_EDGE_MARGIN, min_value=0)
    artifact_size: float = validated_field(ARTIFACT_SIZE, min_value=1)
    artifact_hover_scale: float = validated_field(ARTIFACT_HOVER_SCALE, min_value=1.0)
    artifact_label_offset: float = validated_field(ARTIFACT_LABEL_OFFSET)
    artifact_label_max_chars: int = validated_field(ARTIFACT_LABEL_MAX_CHARS, min_value=2)

    # Tooltip
    tooltip_padding: float = validated_field(TOOLTIP_PADDING, min_value=0)
    tooltip_min_width: float = validated_field(TOOLTIP_MIN_WIDTH, min_value=0)
    tooltip_max_width: float = validated_field(TOOLTIP_MAX_WIDTH, min_value=1)
    tooltip_height: float = validated_field(TOOLTIP_HEIGHT, min_value=1)
    tooltip_offset: float = validated_field(TOOLTIP_OFFSET)
    tooltip_flip_offset: float = validated_field(TOOLTIP_FLIP_OFFSET)
    tooltip_margin: float = validated_field(TOOLTIP_MARGIN, min_value=0)
    tooltip_anchor_lift: float = validated_field(TOOLTIP_ANCHOR_LIFT)
    tooltip_subtitle_offset: float = validated_field(TOOLTIP_SUBTITLE_OFFSET)

    # Timing / navigation
    frame_interval_ms: int = validated_field(FRAME_INTERVAL_MS, min_value=1, max_value=1000)
    base_path: str = validated_field(
        DEFAULT_BASE_PATH,
        required=True,
        pattern=r"^/",
        pattern_message="Base path must start with '/'",
    )

    def domain(self) -> Domain:
        """
        Domain built from the configured bounds.

        Raises:
            ValueError: If start is not before end (see validate())
        """
        return Domain(self.domain_start_year, self.domain_end_year)

    def validate(self) -> ValidationResult:
        result = super().validate()

        if self.domain_start_year >= self.domain_end_year:
            result.add_error(
                f"domain_start_year: {self.domain_start_year} must be before "
                f"domain_end_year {self.domain_end_year}"
            )
        elif self.min_visible_span > self.domain_end_year - self.domain_start_year:
            result.add_error(
                f"min_visible_span: {self.min_visible_span} exceeds the domain width "
                f"{self.domain_end_year - self.domain_start_year}"
            )

        if self.tooltip_min_width > self.tooltip_max_width:
            result.add_error(
                f"tooltip_min_width: {self.tooltip_min_width} is above "
                f"tooltip_max_width {self.tooltip_max_width}"
            )

        ratios = {name: getattr(self, name) for name in _RATIO_FIELDS}
        if ratios['axis_y_ratio'] < max(ratios['artifact_y_ratio'], ratios['marker_y_ratio'], ratios['span_y_ratio']):
            result.add_warning("axis_y_ratio: axis is drawn above some entity rows")

        return result
