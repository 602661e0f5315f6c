"""
Tests for the podcast series track.
"""
from historie_timeline.timing import CoordinateMapper
from historie_timeline.tracks import PodcastTrack
from historie_timeline.types import PodcastSeries, TimeRange


def series(series_id, start, end, region='china', series_type='normal'):
    return PodcastSeries(
        id=series_id,
        title=f"Series {series_id}",
        region=region,
        coverage_start_year=start,
        coverage_end_year=end,
        type=series_type,
    )


class TestPodcastTrack:
    """Tests for PodcastTrack.build()."""

    def setup_method(self):
        self.track = PodcastTrack(CoordinateMapper(TimeRange(-500, 500)))

    def test_sorted_by_coverage_start(self):
        items = self.track.build([series("b", 100, 200), series("a", -200, -100)])
        assert [i.record_id for i in items] == ["a", "b"]

    def test_overlapping_series_stack(self):
        items = self.track.build([
            series("a", -200, 0),
            series("b", -100, 100),
            series("c", 10, 50),
        ])
        # a: 600..1000, b: 800..1200, c: 1020..1100
        assert [i.lane_index for i in items] == [0, 1, 0]

    def test_spacing_required_within_lane(self):
        items = self.track.build([series("a", 0, 100), series("b", 103, 200)])
        # b starts 6px after a ends
        assert [i.lane_index for i in items] == [0, 1]

    def test_short_series_widened(self):
        items = self.track.build([series("a", 0, 5, series_type='short')])
        assert items[0].end_position - items[0].position == 60

    def test_empty(self):
        assert self.track.build([]) == []

    def test_inverted_coverage_dropped(self):
        """An end before the start is dropped even though widening would hide it."""
        items = self.track.build([series("bad", 100, 0), series("ok", 0, 100)])
        assert [i.record_id for i in items] == ["ok"]
