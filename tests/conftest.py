"""
Shared fixtures for the timeline engine tests.
"""
import pytest

from historie_timeline.types import HistoryEvent, Person


def _make_event(event_id, year, era, region='china', persons=None, media=None):
    return HistoryEvent(
        id=event_id,
        year=year,
        era=era,
        region=region,
        title=f"Event {event_id}",
        persons=list(persons or []),
        media=list(media or []),
    )


@pytest.fixture
def sample_events():
    """A small two-region dataset spanning -500..500."""
    confucius = Person("孔子", -551, -479)
    return [
        _make_event("e1", -500, "春秋", persons=[confucius]),
        _make_event("e2", -300, "戦国"),
        _make_event("e3", -221, "秦", persons=[confucius]),
        _make_event("e4", 100, "漢"),
        _make_event("e5", 200, "弥生", region='japan'),
        _make_event("e6", 500, "古墳", region='japan'),
    ]


@pytest.fixture
def make_event():
    """Factory for HistoryEvent records."""
    return _make_event
