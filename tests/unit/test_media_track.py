"""
Tests for the media coverage track.
"""
import pytest

from historie_timeline.timing import CoordinateMapper
from historie_timeline.tracks import MediaTrack, media_from_events
from historie_timeline.types import FullRange, MediaItem, PointRange, TimeRange, Unranged


@pytest.fixture
def track():
    return MediaTrack(CoordinateMapper(TimeRange(0, 1000)))


def media(media_id, coverage):
    return MediaItem(id=media_id, title=f"Title {media_id}", coverage=coverage)


class TestMediaTrack:
    """Tests for MediaTrack.build()."""

    def test_ranged_works_packed_with_spacing(self, track):
        entries = [
            (media("a", FullRange(0, 100)), None),
            (media("b", FullRange(50, 60)), None),
            (media("c", FullRange(110, 150)), None),
        ]
        items = track.build(entries)

        assert [(i.record_id, i.lane_index) for i in items] == [("a", 0), ("b", 1), ("c", 0)]

    def test_min_width_applied(self, track):
        items = track.build([(media("a", FullRange(50, 60)), None)])
        assert items[0].position == 100
        assert items[0].end_position == 160

    def test_parsed_text_bounds_lay_out(self, track):
        """Works parsed with a text coverage year fall back instead of failing layout."""
        point = MediaItem.from_dict({'id': 'p', 'title': 'p', 'coverageStartYear': '50', 'coverageEndYear': 80})
        loose = MediaItem.from_dict({'id': 'u', 'title': 'u', 'coverageStartYear': '50'})
        items = track.build([(point, None), (loose, None)])

        assert [(i.record_id, i.lane_index) for i in items] == [("p", 0), ("u", None)]
        assert items[0].position == 160

    def test_point_range_is_zero_width_span(self, track):
        """A single bound lays out like a range starting and ending there."""
        items = track.build([(media("a", PointRange(110)), "e1")])
        assert items[0].position == 220
        assert items[0].end_position == 280
        assert items[0].lane_index == 0
        assert items[0].parent_event_id == "e1"

    def test_unranged_bypass_packing(self, track):
        entries = [
            (media("u", Unranged()), "e9"),
            (media("a", FullRange(0, 10)), None),
        ]
        items = track.build(entries)

        assert [i.record_id for i in items] == ["a", "u"]
        unranged = items[1]
        assert unranged.lane_index is None
        assert unranged.position is None
        assert unranged.parent_event_id == "e9"

    def test_sorted_by_position(self, track):
        entries = [
            (media("late", FullRange(500, 600)), None),
            (media("early", FullRange(0, 10)), None),
        ]
        assert [i.record_id for i in track.build(entries)] == ["early", "late"]

    def test_repeated_work_gets_own_lane(self, track):
        """The same title under two events is laid out twice."""
        work = media("a", FullRange(0, 100))
        items = track.build([(work, "e1"), (work, "e2")])
        assert [i.lane_index for i in items] == [0, 1]

    def test_inverted_coverage_dropped(self, track):
        items = track.build([
            (media("bad", FullRange(100, 0)), None),
            (media("ok", FullRange(0, 100)), None),
        ])
        assert [i.record_id for i in items] == ["ok"]

    def test_custom_spacing(self):
        track = MediaTrack(CoordinateMapper(TimeRange(0, 1000)), min_width_px=0, min_spacing_px=0)
        items = track.build([
            (media("a", FullRange(0, 10)), None),
            (media("b", FullRange(10, 20)), None),
        ])
        assert [i.lane_index for i in items] == [0, 0]


class TestMediaFromEvents:
    """Tests for media_from_events()."""

    def test_pairs_media_with_parent(self, make_event):
        m1 = media("m1", FullRange(0, 10))
        m2 = media("m2", Unranged())
        events = [make_event("e1", 0, "X", media=[m1]), make_event("e2", 5, "X", media=[m2])]

        assert media_from_events(events) == [(m1, "e1"), (m2, "e2")]
