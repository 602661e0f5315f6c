"""
Era Track
=========

One bar per (region, era): the bar runs from the earliest to the latest
member event year. Bars are clipped to the active year window and
dropped when they fall entirely outside it. Each region is packed on its
own, from lane 0, with no clearance (eras may touch end-to-start).

Region groups are ordered by the region display order; unknown regions
follow in alphabetical order. Within a region, bars are ordered by start.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import ERA_MIN_CLEARANCE_PX, REGION_ORDER
from ..lanes.packer import build_span
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import EraLaneData, HistoryEvent, RegionEraGroup, VisibleYearRange
from .base import TrackAdapter


def region_sort_key(region: str) -> Tuple[int, str]:
    if region in REGION_ORDER:
        return REGION_ORDER.index(region), ""
    return len(REGION_ORDER), region


class EraTrack(TrackAdapter):
    name = "era"

    def __init__(
        self,
        mapper: CoordinateMapper,
        min_clearance_px: float = ERA_MIN_CLEARANCE_PX,
        clip_range: Optional[VisibleYearRange] = None
    ):
        super().__init__(mapper)
        self.min_clearance_px = min_clearance_px
        self.clip_range = clip_range

    def build(self, events: Sequence[HistoryEvent]) -> List[RegionEraGroup]:
        members: Dict[Tuple[str, str], List[HistoryEvent]] = {}
        for event in events:
            members.setdefault((event.region, event.era), []).append(event)

        by_region: Dict[str, List[EraLaneData]] = {}
        for (region, era), era_events in members.items():
            lane = self._make_lane(region, era, era_events)
            if lane is not None:
                by_region.setdefault(region, []).append(lane)

        groups = []
        for region in sorted(by_region, key=region_sort_key):
            lanes = self._pack_region(by_region[region])
            if lanes:
                groups.append(RegionEraGroup(region=region, lanes=lanes))
        return groups

    def _make_lane(self, region: str, era: str, era_events: List[HistoryEvent]) -> Optional[EraLaneData]:
        years = [e.year for e in era_events]
        start_year, end_year = min(years), max(years)

        if self.clip_range is not None:
            clipped = self.clip_range.clip(start_year, end_year)
            if clipped is None:
                return None
            start_year, end_year = clipped

        return EraLaneData(
            era=era,
            region=region,
            start_year=start_year,
            end_year=end_year,
            events=list(era_events),
            position=self.mapper.year_to_position(start_year),
            end_position=self.mapper.year_to_position(end_year),
        )

    def _pack_region(self, lanes: List[EraLaneData]) -> List[EraLaneData]:
        lanes = sorted(lanes, key=lambda lane: lane.start_year)

        kept = []
        spans = []
        for lane in lanes:
            span = build_span(lane.record_id, lane.position, lane.end_position, self.name)
            if span is not None:
                kept.append(lane)
                spans.append(span)

        result = self.pack(spans, self.min_clearance_px)
        for lane, assignment in zip(kept, result.assignments):
            lane.lane_index = assignment.lane_index
        return kept
