"""
Zoom/Pan Controller
===================

Single owner of the viewport's {scale, offset_x} state.

Content pixels (from CoordinateMapper) map to viewport pixels as
    viewport_x = content_x * scale + offset_x

Rules:
- scale is always clamped to [min_scale, max_scale]
- offset_x is always edge clamped: content narrower than the viewport is
  centered (no panning); wider content may not leave a gap at either edge
- zooming keeps the content under the anchor (viewport center by default)
  fixed on screen
- until the first user zoom/pan, the view re-centers whenever the time
  range or container width changes; afterwards it is only re-clamped
- a degenerate time range or unknown container width pins offset_x to 0
"""

from typing import Optional
from PyQt6.QtCore import QObject, pyqtSignal

from ..constants import PIXELS_PER_YEAR, DEFAULT_SCALE, MIN_SCALE, MAX_SCALE, ZOOM_FACTOR
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import TimeRange, VisibleYearRange, ZoomPanState
from ..utils.message import Log


def _css_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


class ZoomPanController(QObject):
    """
    Zoom and pan state for one viewport.

    Signals:
        state_changed(float, float): Emitted with (scale, offset_x) after any change
        zoom_changed(float): Emitted with the new scale when the scale changes
    """

    state_changed = pyqtSignal(float, float)
    zoom_changed = pyqtSignal(float)

    def __init__(
        self,
        time_range: Optional[TimeRange] = None,
        container_width: float = 0.0,
        pixels_per_year: float = PIXELS_PER_YEAR,
        min_scale: float = MIN_SCALE,
        max_scale: float = MAX_SCALE,
        zoom_factor: float = ZOOM_FACTOR,
        default_scale: float = DEFAULT_SCALE,
        parent=None
    ):
        super().__init__(parent)

        self._pixels_per_year = pixels_per_year
        self._min_scale = min_scale
        self._max_scale = max_scale
        self._zoom_factor = zoom_factor
        self._default_scale = default_scale

        self._time_range = time_range or TimeRange()
        self._container_width = max(0.0, float(container_width))
        self._scale = self.clamp_scale(default_scale)
        self._offset_x = 0.0

        # False until the user zooms or pans with real content laid out
        self._initialized = False

        self._offset_x = self.initial_offset()

    @classmethod
    def from_settings(cls, settings, time_range: Optional[TimeRange] = None,
                      container_width: float = 0.0, parent=None) -> 'ZoomPanController':
        """Build a controller from a TimelineSettings instance."""
        return cls(
            time_range=time_range,
            container_width=container_width,
            pixels_per_year=settings.pixels_per_year,
            min_scale=settings.min_scale,
            max_scale=settings.max_scale,
            zoom_factor=settings.zoom_factor,
            default_scale=settings.default_scale,
            parent=parent,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset_x(self) -> float:
        return self._offset_x

    @property
    def state(self) -> ZoomPanState:
        return ZoomPanState(scale=self._scale, offset_x=self._offset_x)

    @property
    def time_range(self) -> TimeRange:
        return self._time_range

    @property
    def container_width(self) -> float:
        return self._container_width

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def mapper(self) -> CoordinateMapper:
        return CoordinateMapper(self._time_range, self._pixels_per_year)

    @property
    def timeline_width(self) -> float:
        """Width of the whole content in viewport pixels at the current scale."""
        return self.mapper.content_width * self._scale

    @property
    def can_layout(self) -> bool:
        """True once a non-degenerate range and a positive width are known."""
        return not self._time_range.is_degenerate and self._container_width > 0

    @property
    def visible_year_range(self) -> VisibleYearRange:
        """Year window currently visible in the viewport."""
        px_per_year = self._scale * self._pixels_per_year
        visible_width_in_years = self._container_width / px_per_year
        offset_in_years = self._offset_x / px_per_year

        start = self._time_range.min_year - offset_in_years
        return VisibleYearRange(start=start, end=start + visible_width_in_years)

    @property
    def transform(self) -> str:
        """CSS transform for a renderer that scales the content layer."""
        return f"translateX({_css_number(self._offset_x)}px) scaleX({_css_number(self._scale)})"

    # =========================================================================
    # Clamping
    # =========================================================================

    def clamp_scale(self, value: float) -> float:
        return max(self._min_scale, min(self._max_scale, value))

    def clamp_offset(self, offset_x: float, scale: Optional[float] = None) -> float:
        """
        Edge clamp an offset for the given (or current) scale.

        Content that fits in the viewport is centered regardless of the
        requested offset.
        """
        if not self.can_layout:
            return 0.0

        if scale is None:
            scale = self._scale
        timeline_width = self.mapper.content_width * scale

        if timeline_width <= self._container_width:
            return (self._container_width - timeline_width) / 2
        return max(self._container_width - timeline_width, min(0.0, offset_x))

    def initial_offset(self, scale: Optional[float] = None) -> float:
        """
        Offset that centers year 0 in the viewport.

        When year 0 lies outside the time range the content midpoint is
        centered instead. The result is edge clamped.
        """
        if not self.can_layout:
            return 0.0

        if scale is None:
            scale = self._scale

        if self._time_range.contains(0):
            anchor_year = 0
        else:
            anchor_year = (self._time_range.min_year + self._time_range.max_year) / 2

        offset = self._container_width / 2 - self.mapper.year_to_position(anchor_year) * scale
        return self.clamp_offset(offset, scale)

    # =========================================================================
    # Inputs
    # =========================================================================

    def set_time_range(self, time_range: TimeRange):
        """
        Update the content range (e.g. after a filter change).

        Re-centers before the first user interaction, re-clamps after.
        """
        if time_range == self._time_range:
            return
        self._time_range = time_range
        self._relayout()

    def set_container_width(self, width: float):
        width = max(0.0, float(width))
        if width == self._container_width:
            return
        self._container_width = width
        self._relayout()

    def _relayout(self):
        if self._initialized and self.can_layout:
            self._apply(self._scale, self.clamp_offset(self._offset_x))
        else:
            self._initialized = False
            self._apply(self._scale, self.initial_offset())

    # =========================================================================
    # Zoom
    # =========================================================================

    def zoom_at(self, new_scale: float, anchor_x: float):
        """
        Zoom keeping the content under viewport x = anchor_x fixed.

        Args:
            new_scale: Requested scale (clamped)
            anchor_x: Viewport pixel to keep stable
        """
        content_x = (anchor_x - self._offset_x) / self._scale
        scale = self.clamp_scale(new_scale)
        offset = anchor_x - content_x * scale

        self._mark_interaction()
        self._apply(scale, self.clamp_offset(offset, scale))

    def zoom_at_center(self, new_scale: float):
        self.zoom_at(new_scale, self._container_width / 2)

    def zoom_to(self, new_scale: float, center_x: Optional[float] = None):
        """Zoom to a scale around a viewport x (viewport center by default)."""
        if center_x is None:
            self.zoom_at_center(new_scale)
        else:
            self.zoom_at(new_scale, center_x)

    def zoom_in(self):
        self.zoom_at_center(self._scale * self._zoom_factor)

    def zoom_out(self):
        self.zoom_at_center(self._scale / self._zoom_factor)

    # =========================================================================
    # Pan
    # =========================================================================

    def pan_to(self, new_offset_x: float):
        self._mark_interaction()
        self._apply(self._scale, self.clamp_offset(new_offset_x))

    def pan_by(self, delta_x: float):
        """Pan by a viewport pixel delta (positive moves content right)."""
        self.pan_to(self._offset_x + delta_x)

    def center_on_year(self, year: float):
        """Pan so the given year sits at the viewport center (edge clamped)."""
        offset = self._container_width / 2 - self.mapper.year_to_position(year) * self._scale
        self.pan_to(offset)

    def reset(self):
        """Scale back to default and re-center; the view follows data again."""
        self._initialized = False
        scale = self.clamp_scale(self._default_scale)
        self._apply(scale, self.initial_offset(scale))

    # =========================================================================
    # Internal
    # =========================================================================

    def _mark_interaction(self):
        if self.can_layout:
            self._initialized = True

    def _apply(self, scale: float, offset_x: float):
        scale_changed = scale != self._scale
        offset_changed = offset_x != self._offset_x
        if not (scale_changed or offset_changed):
            return

        self._scale = scale
        self._offset_x = offset_x
        Log.debug(f"[ZoomPan] scale={scale:.4f} offset_x={offset_x:.2f}")

        if scale_changed:
            self.zoom_changed.emit(scale)
        self.state_changed.emit(scale, offset_x)
