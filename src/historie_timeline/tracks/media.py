"""
Media Track
===========

Manga and novels placed by their coverage years.

Only works with a coverage range are packed. A work with one bound is
treated as a zero-width range at that bound; a work with no bounds is
passed through with no position and no lane. Bars are drawn at least
min_width_px wide and need min_spacing_px of clearance within a lane.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..constants import RANGE_MIN_WIDTH_PX, RANGE_MIN_SPACING_PX
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import HistoryEvent, MediaItem, MediaLaneData, Span, coverage_bounds
from .base import TrackAdapter

MediaEntry = Tuple[MediaItem, Optional[str]]  # (media, parent event id)


def media_from_events(events: Iterable[HistoryEvent]) -> List[MediaEntry]:
    """Media nested inside events, paired with their parent event id."""
    return [(media, event.id) for event in events for media in event.media]


class MediaTrack(TrackAdapter):
    name = "media"

    def __init__(
        self,
        mapper: CoordinateMapper,
        min_width_px: float = RANGE_MIN_WIDTH_PX,
        min_spacing_px: float = RANGE_MIN_SPACING_PX
    ):
        super().__init__(mapper)
        self.min_width_px = min_width_px
        self.min_spacing_px = min_spacing_px

    def build(self, entries: Sequence[MediaEntry]) -> List[MediaLaneData]:
        """
        Lay out media entries.

        Returns:
            Ranged works in start order (with lanes), then unranged works
            in input order (no position, no lane)
        """
        ranged: List[MediaLaneData] = []
        unranged: List[MediaLaneData] = []

        for media, parent_event_id in entries:
            item = MediaLaneData(media=media, parent_event_id=parent_event_id)
            bounds = coverage_bounds(media.coverage)
            if bounds is None:
                unranged.append(item)
                continue

            extent = self.bar_bounds(media.id, bounds[0], bounds[1], self.min_width_px)
            if extent is None:
                continue
            item.position, item.end_position = extent
            ranged.append(item)

        ranged.sort(key=lambda item: item.position)

        # Titles may repeat across events, so span ids are positional
        spans = [
            Span(f"{index}:{item.record_id}", item.position, item.end_position)
            for index, item in enumerate(ranged)
        ]
        result = self.pack(spans, self.min_spacing_px)
        for item, assignment in zip(ranged, result.assignments):
            item.lane_index = assignment.lane_index

        return ranged + unranged
