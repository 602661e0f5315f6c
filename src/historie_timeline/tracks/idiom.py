"""
Idiom Track

Idioms are points in time. For packing, each one occupies
[year, year + span_years] so neighbours in a lane stay apart; the
clearance is already inside the widened span.
"""

from typing import List, Sequence

from ..constants import IDIOM_SPAN_YEARS
from ..lanes.packer import build_span
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import Idiom, IdiomLaneData
from .base import TrackAdapter


class IdiomTrack(TrackAdapter):
    name = "idiom"

    def __init__(self, mapper: CoordinateMapper, span_years: float = IDIOM_SPAN_YEARS):
        super().__init__(mapper)
        self.span_years = span_years

    def build(self, idioms: Sequence[Idiom]) -> List[IdiomLaneData]:
        kept = []
        spans = []
        for idiom in sorted(idioms, key=lambda i: i.year):
            position = self.mapper.year_to_position(idiom.year)
            span = build_span(
                idiom.id,
                position,
                self.mapper.year_to_position(idiom.year + self.span_years),
                self.name,
            )
            if span is not None:
                kept.append(IdiomLaneData(idiom=idiom, position=position))
                spans.append(span)

        result = self.pack(spans, 0)
        for item, assignment in zip(kept, result.assignments):
            item.lane_index = assignment.lane_index
        return kept
