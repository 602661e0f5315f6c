"""
Timeline Engine
===============

Per-viewport context object tying records, filters, settings and the
zoom/pan state together.

Every call to layout() recomputes all tracks from scratch; layouts are
pure functions of (records, filters, container width, zoom/pan state)
and nothing is cached between calls.

Usage:
    engine = TimelineEngine(container_width=1200)
    engine.set_records(events, idioms=idioms)
    engine.zoom.zoom_in()
    layout = engine.layout()
"""

from typing import Iterable, List, Optional

from ..dataset import HistorieData, PodcastData
from ..filters import TimelineFilters
from ..interfaces import RecordSourceInterface
from ..settings.storage import TimelineSettings
from ..timing.coordinate_mapper import CoordinateMapper, compute_time_range
from ..tracks import (
    EraTrack,
    EventMarkerTrack,
    IdiomTrack,
    MediaTrack,
    PersonTrack,
    PodcastTrack,
    media_from_events,
)
from ..types import (
    HistoryEvent,
    Idiom,
    MediaItem,
    PodcastSeries,
    TimeRange,
    TimelineLayout,
    VisibleYearRange,
)
from ..utils.message import Log
from .zoom_pan import ZoomPanController


class TimelineEngine:
    """
    Lays out every timeline track for one viewport.

    Attributes:
        settings: Engine constants (axis scale, zoom limits, spacing)
        filters: Active filters, applied before any track adapter
        zoom: The viewport's ZoomPanController
    """

    def __init__(
        self,
        settings: Optional[TimelineSettings] = None,
        container_width: float = 0.0,
        filters: Optional[TimelineFilters] = None
    ):
        self.settings = settings or TimelineSettings()
        validation = self.settings.validate()
        if not validation.valid:
            raise ValueError(f"Invalid timeline settings: {'; '.join(validation.errors)}")

        self.filters = filters or TimelineFilters()

        self._events: List[HistoryEvent] = []
        self._media: List[MediaItem] = []
        self._idioms: List[Idiom] = []
        self._series: List[PodcastSeries] = []

        self.zoom = ZoomPanController.from_settings(self.settings, container_width=container_width)

    # =========================================================================
    # Inputs
    # =========================================================================

    def set_records(
        self,
        events: Iterable[HistoryEvent],
        media: Optional[Iterable[MediaItem]] = None,
        idioms: Optional[Iterable[Idiom]] = None
    ):
        """Replace events (and optionally standalone media and idioms)."""
        self._events = list(events)
        if media is not None:
            self._media = list(media)
        if idioms is not None:
            self._idioms = list(idioms)
        self._sync_time_range()

    def set_idioms(self, idioms: Iterable[Idiom]):
        self._idioms = list(idioms)

    def set_podcast_series(self, series: Iterable[PodcastSeries]):
        self._series = list(series)

    def set_filters(self, filters: TimelineFilters):
        self.filters = filters
        self._sync_time_range()

    def set_container_width(self, width: float):
        self.zoom.set_container_width(width)

    def load(self, source: RecordSourceInterface):
        """
        Pull a dataset through an injected source and replace all records.

        The document may carry podcast 'series' next to the history data.
        """
        data = source.fetch()
        history = HistorieData.from_dict(data)
        self.set_records(history.events, media=history.media, idioms=history.idioms)
        if 'series' in data:
            self.set_podcast_series(PodcastData.from_dict(data).series)

    # =========================================================================
    # Derived state
    # =========================================================================

    @property
    def events(self) -> List[HistoryEvent]:
        return list(self._events)

    def filtered_events(self) -> List[HistoryEvent]:
        return self.filters.filter_events(self._events)

    @property
    def time_range(self) -> TimeRange:
        return compute_time_range(self.filtered_events(), self.filters.year_range)

    @property
    def mapper(self) -> CoordinateMapper:
        return self.zoom.mapper

    def era_clip_range(self) -> Optional[VisibleYearRange]:
        """
        Window eras are clipped to: the year filter if set, else the
        visible window (when enabled and the viewport is laid out).
        """
        if self.filters.year_range is not None:
            return VisibleYearRange(self.filters.year_range.min_year, self.filters.year_range.max_year)
        if self.settings.clip_eras_to_viewport and self.zoom.can_layout:
            return self.zoom.visible_year_range
        return None

    def _sync_time_range(self):
        self.zoom.set_time_range(self.time_range)

    # =========================================================================
    # Layout
    # =========================================================================

    def layout(self) -> TimelineLayout:
        """Recompute every track for the current inputs."""
        self._sync_time_range()

        settings = self.settings
        filters = self.filters
        mapper = self.mapper
        events = self.filtered_events()

        era_groups = EraTrack(
            mapper,
            min_clearance_px=settings.era_min_clearance_px,
            clip_range=self.era_clip_range(),
        ).build(events)

        persons = PersonTrack(mapper).build(events)

        media = []
        if filters.show_media:
            entries = [
                (m, m.related_event_ids[0] if m.related_event_ids else None)
                for m in filters.filter_media(self._media, events)
            ]
            entries.extend(media_from_events(events))
            media = MediaTrack(
                mapper,
                min_width_px=settings.media_min_width_px,
                min_spacing_px=settings.media_min_spacing_px,
            ).build(entries)

        podcast = []
        if filters.show_podcast:
            podcast = PodcastTrack(
                mapper,
                min_width_px=settings.podcast_min_width_px,
                min_spacing_px=settings.podcast_min_spacing_px,
            ).build(filters.filter_series(self._series))

        idioms = IdiomTrack(mapper, span_years=settings.idiom_span_years).build(
            filters.filter_idioms(self._idioms)
        )

        markers = []
        if filters.show_events:
            markers = EventMarkerTrack(
                mapper, min_spacing_px=settings.event_marker_min_spacing_px
            ).build(events)

        Log.debug(
            f"[TimelineEngine] Layout: {len(events)} events, {len(era_groups)} era regions, "
            f"{len(media)} media, {len(podcast)} series, {len(idioms)} idioms"
        )

        return TimelineLayout(
            time_range=self.zoom.time_range,
            zoom=self.zoom.state,
            visible_range=self.zoom.visible_year_range,
            era_groups=era_groups,
            persons=persons,
            media=media,
            podcast=podcast,
            idioms=idioms,
            markers=markers,
        )
