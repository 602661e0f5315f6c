"""
Tests for the idiom track.
"""
from historie_timeline.timing import CoordinateMapper
from historie_timeline.tracks import IdiomTrack
from historie_timeline.types import Idiom, TimeRange


def idiom(idiom_id, year):
    return Idiom(id=idiom_id, idiom=f"成語{idiom_id}", year=year)


class TestIdiomTrack:
    """Tests for IdiomTrack.build()."""

    def setup_method(self):
        self.mapper = CoordinateMapper(TimeRange(0, 1000))
        self.track = IdiomTrack(self.mapper)

    def test_forty_year_spacing(self):
        """Idioms need 40 years between them to share a lane."""
        items = self.track.build([idiom("a", 100), idiom("b", 120), idiom("c", 140), idiom("d", 200)])
        assert [i.lane_index for i in items] == [0, 1, 0, 0]

    def test_sorted_by_year(self):
        items = self.track.build([idiom("late", 500), idiom("early", 10)])
        assert [i.record_id for i in items] == ["early", "late"]

    def test_position_is_origin_year(self):
        items = self.track.build([idiom("a", 250)])
        assert items[0].position == 500

    def test_custom_span(self):
        track = IdiomTrack(self.mapper, span_years=10)
        items = track.build([idiom("a", 100), idiom("b", 110)])
        assert [i.lane_index for i in items] == [0, 0]
