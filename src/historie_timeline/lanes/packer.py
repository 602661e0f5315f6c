"""
Lane Packer
===========

Track-agnostic first-fit greedy lane assignment.

Every track turns its records into Spans in one axis and hands them here.
Spans are sorted by start (stable, ties keep input order) and each goes
into the lowest-indexed lane whose last occupant ends at least
min_clearance before the span starts; otherwise a new lane is opened.

With min_clearance == 0 this is greedy interval-graph colouring and uses
the minimum number of lanes. A positive clearance keeps adjacent items
legible and may use more lanes than the minimum.

Packing groups are independent: pack_groups() packs each group from
lane 0 (eras are packed per region).
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence

from ..errors import InvalidSpanError
from ..types import Span, LaneAssignment
from ..utils.message import Log


@dataclass
class LanePackResult:
    """
    Output of one packing run.

    Attributes:
        assignments: One LaneAssignment per packed span, in input order
        lane_count: Number of lanes opened (0 for empty input)
    """
    assignments: List[LaneAssignment] = field(default_factory=list)
    lane_count: int = 0

    def lane_of(self, span_id: str) -> Optional[int]:
        """Lane index of a span, or None if it was not packed."""
        for assignment in self.assignments:
            if assignment.span_id == span_id:
                return assignment.lane_index
        return None

    def as_dict(self) -> Dict[str, int]:
        return {a.span_id: a.lane_index for a in self.assignments}

    @property
    def max_lane_index(self) -> int:
        """Highest lane index in use; 0 for empty input."""
        return max(self.lane_count - 1, 0)


class LanePacker:
    """
    First-fit greedy packer for one axis and one clearance value.

    Example:
        packer = LanePacker(min_clearance=0)
        result = packer.pack([Span("a", 0, 10), Span("b", 5, 15), Span("c", 12, 20)])
        result.as_dict()  # {"a": 0, "b": 1, "c": 0}
    """

    def __init__(self, min_clearance: float = 0.0):
        if min_clearance < 0:
            raise ValueError(f"min_clearance cannot be negative: {min_clearance}")
        self.min_clearance = min_clearance

    def pack(self, spans: Sequence[Span]) -> LanePackResult:
        if not spans:
            return LanePackResult()

        # sorted() is stable, so equal starts keep their input order
        order = sorted(range(len(spans)), key=lambda i: spans[i].start)

        lane_ends: List[float] = []
        lanes: Dict[int, int] = {}

        for i in order:
            span = spans[i]
            assigned = -1
            for lane_index, lane_end in enumerate(lane_ends):
                if span.start >= lane_end + self.min_clearance:
                    assigned = lane_index
                    break

            if assigned == -1:
                assigned = len(lane_ends)
                lane_ends.append(span.end)
            else:
                lane_ends[assigned] = span.end

            lanes[i] = assigned

        assignments = [LaneAssignment(spans[i].id, lanes[i]) for i in range(len(spans))]
        return LanePackResult(assignments=assignments, lane_count=len(lane_ends))


def pack_spans(spans: Sequence[Span], min_clearance: float = 0.0) -> LanePackResult:
    """Pack spans with a one-off LanePacker."""
    return LanePacker(min_clearance).pack(spans)


def pack_groups(
    groups: Mapping[Hashable, Sequence[Span]],
    min_clearance: float = 0.0
) -> Dict[Hashable, LanePackResult]:
    """Pack each group independently; every group starts at lane 0."""
    packer = LanePacker(min_clearance)
    return {key: packer.pack(spans) for key, spans in groups.items()}


def build_span(span_id: str, start: float, end: float, track: str = "") -> Optional[Span]:
    """
    Build a span, or log and return None if end < start.

    Track adapters use this so one malformed record is dropped from its
    track instead of failing the whole layout.
    """
    try:
        return Span(span_id, start, end)
    except InvalidSpanError as e:
        prefix = f"[{track}] " if track else ""
        Log.warning(f"{prefix}Dropping record from lane layout: {e}")
        return None


def build_spans(items: Iterable[tuple], track: str = "") -> List[Span]:
    """Build spans from (id, start, end) tuples, dropping invalid ones."""
    spans = []
    for span_id, start, end in items:
        span = build_span(span_id, start, end, track)
        if span is not None:
            spans.append(span)
    return spans
