"""
Tests for the person track.
"""
from historie_timeline.timing import CoordinateMapper
from historie_timeline.tracks import PersonTrack
from historie_timeline.types import Person, TimeRange


class TestPersonTrack:
    """Tests for PersonTrack.build()."""

    def test_deduplicated_by_name(self, sample_events):
        mapper = CoordinateMapper(TimeRange(-600, 600))
        people = PersonTrack(mapper).build(sample_events)

        assert len(people) == 1
        assert people[0].record_id == "孔子"
        assert people[0].related_event_ids == ["e1", "e3"]

    def test_first_occurrence_supplies_years(self, make_event):
        mapper = CoordinateMapper(TimeRange(-600, 600))
        events = [
            make_event("a", -500, "X", persons=[Person("老子", -571, -471)]),
            make_event("b", -400, "X", persons=[Person("老子", -600, -400)]),
        ]
        person = PersonTrack(mapper).build(events)[0]

        assert (person.person.birth_year, person.person.death_year) == (-571, -471)
        assert person.position == mapper.year_to_position(-571)
        assert person.end_position == mapper.year_to_position(-471)

    def test_related_ids_are_an_ordered_set(self, make_event):
        mapper = CoordinateMapper(TimeRange(0, 100))
        p = Person("P", 0, 50)
        events = [make_event("b", 10, "X", persons=[p, p]), make_event("a", 20, "X", persons=[p])]
        person = PersonTrack(mapper).build(events)[0]
        assert person.related_event_ids == ["b", "a"]

    def test_people_keep_first_seen_order(self, make_event):
        mapper = CoordinateMapper(TimeRange(0, 100))
        events = [
            make_event("a", 10, "X", persons=[Person("B", 0, 10)]),
            make_event("b", 20, "X", persons=[Person("A", 0, 10)]),
        ]
        assert [p.record_id for p in PersonTrack(mapper).build(events)] == ["B", "A"]

    def test_not_packed(self, sample_events):
        people = PersonTrack(CoordinateMapper(TimeRange(-600, 600))).build(sample_events)
        assert all(p.lane_index is None for p in people)

    def test_no_persons(self, make_event):
        assert PersonTrack(CoordinateMapper(TimeRange(0, 1))).build([make_event("a", 0, "X")]) == []
