"""
Person Track

People are deduplicated by name across the filtered events. The first
occurrence supplies birth/death years; related event ids accumulate in
first-seen order. The track is a flat list and is not packed.
"""

from typing import Dict, List, Sequence

from ..types import HistoryEvent, Person, PersonLaneData
from .base import TrackAdapter


class PersonTrack(TrackAdapter):
    name = "person"

    def build(self, events: Sequence[HistoryEvent]) -> List[PersonLaneData]:
        people: Dict[str, PersonLaneData] = {}
        related: Dict[str, Dict[str, None]] = {}

        for event in events:
            for person in event.persons:
                if person.name not in people:
                    people[person.name] = self._make_entry(person)
                    related[person.name] = {}
                related[person.name][event.id] = None

        for name, entry in people.items():
            entry.related_event_ids = list(related[name])
        return list(people.values())

    def _make_entry(self, person: Person) -> PersonLaneData:
        start = self.mapper.year_to_position(person.birth_year)
        end = self.mapper.year_to_position(person.death_year)
        return PersonLaneData(
            person=Person(person.name, person.birth_year, person.death_year, person.description),
            position=start,
            end_position=max(start, end),
        )
