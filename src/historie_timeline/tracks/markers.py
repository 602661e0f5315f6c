"""
Event Marker Track

Point markers at each event's year, sorted by year. A marker occupies
only its position; min_spacing_px of clearance separates markers
sharing a lane.
"""

from typing import List, Sequence

from ..constants import EVENT_MARKER_MIN_SPACING_PX
from ..lanes.packer import build_span
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import EventMarkerData, HistoryEvent
from .base import TrackAdapter


class EventMarkerTrack(TrackAdapter):
    name = "marker"

    def __init__(self, mapper: CoordinateMapper, min_spacing_px: float = EVENT_MARKER_MIN_SPACING_PX):
        super().__init__(mapper)
        self.min_spacing_px = min_spacing_px

    def build(self, events: Sequence[HistoryEvent]) -> List[EventMarkerData]:
        kept = []
        spans = []
        for event in sorted(events, key=lambda e: e.year):
            position = self.mapper.year_to_position(event.year)
            span = build_span(event.id, position, position, self.name)
            if span is not None:
                kept.append(EventMarkerData(event=event, position=position))
                spans.append(span)

        result = self.pack(spans, self.min_spacing_px)
        for item, assignment in zip(kept, result.assignments):
            item.lane_index = assignment.lane_index
        return kept
