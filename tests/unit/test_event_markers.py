"""
Tests for the event marker track.
"""
from historie_timeline.timing import CoordinateMapper
from historie_timeline.tracks import EventMarkerTrack
from historie_timeline.types import TimeRange


class TestEventMarkerTrack:
    """Tests for EventMarkerTrack.build()."""

    def test_markers_keep_80px_apart(self, make_event):
        track = EventMarkerTrack(CoordinateMapper(TimeRange(0, 100)))
        markers = track.build([
            make_event("a", 0, "X"),
            make_event("b", 10, "X"),
            make_event("c", 50, "X"),
        ])

        assert [m.position for m in markers] == [0, 20, 100]
        assert [m.lane_index for m in markers] == [0, 1, 0]

    def test_sorted_by_year(self, make_event):
        track = EventMarkerTrack(CoordinateMapper(TimeRange(-100, 100)))
        markers = track.build([make_event("late", 90, "X"), make_event("early", -90, "X")])
        assert [m.record_id for m in markers] == ["early", "late"]

    def test_custom_spacing(self, make_event):
        track = EventMarkerTrack(CoordinateMapper(TimeRange(0, 100)), min_spacing_px=10)
        markers = track.build([make_event("a", 0, "X"), make_event("b", 10, "X")])
        assert [m.lane_index for m in markers] == [0, 0]
