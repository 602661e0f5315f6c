"""
Timeline Settings Storage

Single source of truth for the engine's tunable constants: the shared
axis scale, zoom limits and the per-track spacing values.

Usage:
    settings = TimelineSettingsManager(preferences_repo)

    # Read settings
    ppy = settings.pixels_per_year

    # Write settings (validated, auto-persists)
    settings.set('max_scale', 8.0)

    # Listen for changes
    settings.settings_changed.connect(my_handler)
"""
from dataclasses import dataclass

from .base_settings import BaseSettings, BaseSettingsManager, ValidationResult, validated_field
from ..constants import (
    PIXELS_PER_YEAR,
    DEFAULT_SCALE,
    MIN_SCALE,
    MAX_SCALE,
    ZOOM_FACTOR,
    ERA_MIN_CLEARANCE_PX,
    RANGE_MIN_WIDTH_PX,
    RANGE_MIN_SPACING_PX,
    IDIOM_SPAN_YEARS,
    EVENT_MARKER_MIN_SPACING_PX,
)


# =============================================================================
# Settings Schema (Dataclass)
# =============================================================================

@dataclass
class TimelineSettings(BaseSettings):
    """
    Timeline engine settings schema.

    All fields have defaults for backwards compatibility.
    """

    # Axis
    pixels_per_year: float = validated_field(PIXELS_PER_YEAR, greater_than=0)

    # Zoom settings
    default_scale: float = validated_field(DEFAULT_SCALE, greater_than=0)
    min_scale: float = validated_field(MIN_SCALE, greater_than=0)
    max_scale: float = validated_field(MAX_SCALE, greater_than=0)
    zoom_factor: float = validated_field(ZOOM_FACTOR, greater_than=1.0)

    # Lane spacing (pixels unless noted)
    era_min_clearance_px: float = validated_field(ERA_MIN_CLEARANCE_PX, min_value=0)
    media_min_width_px: float = validated_field(RANGE_MIN_WIDTH_PX, min_value=0)
    media_min_spacing_px: float = validated_field(RANGE_MIN_SPACING_PX, min_value=0)
    podcast_min_width_px: float = validated_field(RANGE_MIN_WIDTH_PX, min_value=0)
    podcast_min_spacing_px: float = validated_field(RANGE_MIN_SPACING_PX, min_value=0)
    idiom_span_years: float = validated_field(IDIOM_SPAN_YEARS, min_value=0)  # years
    event_marker_min_spacing_px: float = validated_field(EVENT_MARKER_MIN_SPACING_PX, min_value=0)

    # Era clipping: clip eras to the visible window when no year filter is set
    clip_eras_to_viewport: bool = True

    def _validate_relations(self) -> ValidationResult:
        result = ValidationResult()
        if self.min_scale >= self.max_scale:
            result.add_error(
                f"min_scale ({self.min_scale}) must be below max_scale ({self.max_scale})"
            )
        elif not self.min_scale <= self.default_scale <= self.max_scale:
            result.add_error(
                f"default_scale ({self.default_scale}) must lie within "
                f"[{self.min_scale}, {self.max_scale}]"
            )
        return result


# =============================================================================
# Settings Manager
# =============================================================================

class TimelineSettingsManager(BaseSettingsManager):
    """
    Settings manager for the timeline engine.

    Signals:
        settings_changed(str): Emitted when a setting changes (key name)
        settings_loaded(): Emitted when settings are loaded from storage
    """

    NAMESPACE = "timeline"
    SETTINGS_CLASS = TimelineSettings

    @property
    def pixels_per_year(self) -> float:
        return self._settings.pixels_per_year

    @property
    def min_scale(self) -> float:
        return self._settings.min_scale

    @property
    def max_scale(self) -> float:
        return self._settings.max_scale

    @property
    def zoom_factor(self) -> float:
        return self._settings.zoom_factor

    @property
    def clip_eras_to_viewport(self) -> bool:
        return self._settings.clip_eras_to_viewport
