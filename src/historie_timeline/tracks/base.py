"""
Track Adapter Base

A track adapter turns domain records into spans on the shared pixel
axis, hands them to the LanePacker and maps the lane indices back onto
layout records. Every adapter converts years to pixels through the same
CoordinateMapper, so spacing values are always in pixels.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from ..lanes.packer import LanePacker, LanePackResult, build_span
from ..timing.coordinate_mapper import CoordinateMapper
from ..types import Span


class TrackAdapter(ABC):
    """Base class for per-track layout adapters."""

    name: str = "track"

    def __init__(self, mapper: CoordinateMapper):
        self.mapper = mapper

    def pack(self, spans: Sequence[Span], min_clearance: float) -> LanePackResult:
        return LanePacker(min_clearance).pack(spans)

    def bar_bounds(
        self,
        record_id: str,
        start_year: float,
        end_year: float,
        min_width_px: float
    ) -> Optional[Tuple[float, float]]:
        """
        Pixel extent of a range bar, at least min_width_px wide.

        Returns None (logged) for an inverted range; the range is checked
        before widening since widening alone would make it look valid.
        """
        start_px = self.mapper.year_to_position(start_year)
        end_px = self.mapper.year_to_position(end_year)
        if build_span(record_id, start_px, end_px, self.name) is None:
            return None
        return widened_bounds(start_px, end_px, min_width_px)

    @abstractmethod
    def build(self, records) -> List[Any]:
        """Lay out records; returns the track's layout records."""
        raise NotImplementedError


def widened_bounds(start_px: float, end_px: float, min_width_px: float) -> Tuple[float, float]:
    """Drawn extent of a range bar anchored at start_px, at least min_width_px wide."""
    return start_px, start_px + max(end_px - start_px, min_width_px)
