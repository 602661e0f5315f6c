"""
Timeline Filters

Plain filter state applied to records before any track adapter runs.
Owned by one TimelineEngine; there is no process-wide filter state.

- selected_regions / selected_eras: empty means "all"
- year_range: explicit year window; also overrides the derived TimeRange
- show_short_series: when False, podcast series of type 'short' are hidden
- show_events / show_podcast / show_media: whole-section toggles
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .types import HistoryEvent, Idiom, MediaItem, PodcastSeries, TimeRange


@dataclass
class TimelineFilters:
    selected_regions: List[str] = field(default_factory=list)
    selected_eras: List[str] = field(default_factory=list)
    year_range: Optional[TimeRange] = None
    show_short_series: bool = True
    show_events: bool = True
    show_podcast: bool = True
    show_media: bool = True

    @property
    def has_active_filters(self) -> bool:
        return bool(self.selected_regions or self.selected_eras or self.year_range)

    def clear(self):
        """Drop region, era and year filters; section toggles are kept."""
        self.selected_regions = []
        self.selected_eras = []
        self.year_range = None

    def _region_match(self, region: str) -> bool:
        return not self.selected_regions or region in self.selected_regions

    def _year_match(self, year: float) -> bool:
        return self.year_range is None or self.year_range.contains(year)

    def filter_events(self, events: Iterable[HistoryEvent]) -> List[HistoryEvent]:
        return [
            event for event in events
            if self._region_match(event.region)
            and (not self.selected_eras or event.era in self.selected_eras)
            and self._year_match(event.year)
        ]

    def filter_idioms(self, idioms: Iterable[Idiom]) -> List[Idiom]:
        return [
            idiom for idiom in idioms
            if self._region_match(idiom.region) and self._year_match(idiom.year)
        ]

    def filter_series(self, series: Iterable[PodcastSeries]) -> List[PodcastSeries]:
        return [
            s for s in series
            if self._region_match(s.region)
            and (self.show_short_series or not s.is_short)
        ]

    def filter_media(self, media: Iterable[MediaItem], events: Sequence[HistoryEvent]) -> List[MediaItem]:
        """
        Standalone media follow the event filters: with filters active,
        only works related to a surviving event are kept.
        """
        if not self.has_active_filters:
            return list(media)
        event_ids = {event.id for event in events}
        return [m for m in media if event_ids.intersection(m.related_event_ids)]


def available_regions(events: Iterable[HistoryEvent]) -> List[str]:
    return sorted({event.region for event in events})


def available_eras(events: Iterable[HistoryEvent]) -> List[str]:
    return sorted({event.era for event in events})
