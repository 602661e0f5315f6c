"""
Coordinate Mapper

Converts between calendar years and content pixel positions.
Positions are measured from the left edge of the content (the range's
min_year), before zoom and pan are applied.

Design:
- Pure functions (no side effects)
- Pixels-per-year is shared by every track so all rows align
- Exact inverses: position_to_year(year_to_position(y)) == y
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..constants import PIXELS_PER_YEAR
from ..types import TimeRange, HistoryEvent


@dataclass(frozen=True)
class CoordinateMapper:
    """
    Maps years to content pixels for one time range.

    A degenerate range still yields defined values; callers that need a
    positive content width check time_range.is_degenerate first.
    """
    time_range: TimeRange = TimeRange()
    pixels_per_year: float = PIXELS_PER_YEAR

    def year_to_position(self, year: float) -> float:
        return (year - self.time_range.min_year) * self.pixels_per_year

    def position_to_year(self, position: float) -> float:
        return position / self.pixels_per_year + self.time_range.min_year

    def width_for(self, start_year: float, end_year: float) -> float:
        """Pixel width of a year interval."""
        return (end_year - start_year) * self.pixels_per_year

    @property
    def content_width(self) -> float:
        """Unscaled pixel width of the whole range."""
        return self.width_for(self.time_range.min_year, self.time_range.max_year)


def compute_time_range(
    events: Iterable[HistoryEvent],
    override: Optional[TimeRange] = None
) -> TimeRange:
    """
    Derive the time range from event years.

    Args:
        events: Active (filtered) events
        override: Explicit year-range filter; wins when given

    Returns:
        TimeRange spanning all event years, or {0, 0} with no events
    """
    if override is not None:
        return override

    years = [event.year for event in events]
    if not years:
        return TimeRange(0, 0)
    return TimeRange(min(years), max(years))
