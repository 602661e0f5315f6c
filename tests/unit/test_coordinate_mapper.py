"""
Tests for year <-> pixel conversion and time range derivation.
"""
import pytest

from historie_timeline.timing import CoordinateMapper, compute_time_range
from historie_timeline.types import TimeRange


class TestCoordinateMapper:
    """Tests for CoordinateMapper."""

    def test_positions_measured_from_min_year(self):
        """Two pixels per year from the left edge of the range."""
        mapper = CoordinateMapper(TimeRange(-221, 280))
        assert mapper.year_to_position(-221) == 0
        assert mapper.year_to_position(-121) == 200

    def test_position_to_year_is_inverse(self):
        """Converting there and back returns the original year."""
        mapper = CoordinateMapper(TimeRange(-3000, 2025))
        for year in (-3000, -1234, -1, 0, 7, 1868, 2025):
            assert mapper.position_to_year(mapper.year_to_position(year)) == year

    def test_custom_pixels_per_year(self):
        mapper = CoordinateMapper(TimeRange(0, 100), pixels_per_year=5)
        assert mapper.year_to_position(10) == 50
        assert mapper.content_width == 500

    def test_width_for_interval(self):
        mapper = CoordinateMapper(TimeRange(-500, 500))
        assert mapper.width_for(-100, 100) == 400
        assert mapper.content_width == 2000

    def test_degenerate_range_still_defined(self):
        """An empty range produces values, not errors."""
        mapper = CoordinateMapper(TimeRange(0, 0))
        assert mapper.content_width == 0
        assert mapper.year_to_position(10) == 20
        assert mapper.position_to_year(20) == 10


class TestTimeRange:
    """Tests for TimeRange."""

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            TimeRange(100, -100)

    def test_default_is_degenerate(self):
        assert TimeRange().is_degenerate
        assert not TimeRange(-1, 1).is_degenerate

    def test_contains_is_inclusive(self):
        time_range = TimeRange(-10, 10)
        assert time_range.contains(-10)
        assert time_range.contains(10)
        assert not time_range.contains(11)


class TestComputeTimeRange:
    """Tests for compute_time_range()."""

    def test_empty_events_give_zero_range(self):
        assert compute_time_range([]) == TimeRange(0, 0)

    def test_spans_min_and_max_year(self, make_event):
        events = [make_event("a", 300, "x"), make_event("b", -200, "y"), make_event("c", 50, "z")]
        assert compute_time_range(events) == TimeRange(-200, 300)

    def test_override_wins(self, make_event):
        events = [make_event("a", 300, "x"), make_event("b", -200, "y")]
        override = TimeRange(-1000, 1000)
        assert compute_time_range(events, override) == override
