"""
Podcast Track

Podcast series bars, packed on the pixel axis with the same minimum
width and spacing policy as the media track. Region and short-series
filters are applied before the series reach this adapter.
"""

from typing import List, Sequence

from ..constants import RANGE_MIN_WIDTH_PX, RANGE_MIN_SPACING_PX
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import PodcastLaneData, PodcastSeries, Span
from .base import TrackAdapter


class PodcastTrack(TrackAdapter):
    name = "podcast"

    def __init__(
        self,
        mapper: CoordinateMapper,
        min_width_px: float = RANGE_MIN_WIDTH_PX,
        min_spacing_px: float = RANGE_MIN_SPACING_PX
    ):
        super().__init__(mapper)
        self.min_width_px = min_width_px
        self.min_spacing_px = min_spacing_px

    def build(self, series: Sequence[PodcastSeries]) -> List[PodcastLaneData]:
        items = []
        for s in sorted(series, key=lambda s: s.coverage_start_year):
            extent = self.bar_bounds(s.id, s.coverage_start_year, s.coverage_end_year, self.min_width_px)
            if extent is not None:
                items.append(PodcastLaneData(series=s, position=extent[0], end_position=extent[1]))

        spans = [Span(item.record_id, item.position, item.end_position) for item in items]
        result = self.pack(spans, self.min_spacing_px)
        for item, assignment in zip(items, result.assignments):
            item.lane_index = assignment.lane_index
        return items
