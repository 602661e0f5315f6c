"""
Timeline Data Types
====================

Public data contracts for the timeline engine.

Input types are the domain records the engine lays out (events, media,
podcast series, idioms). Output types are the per-track layout records a
rendering layer draws. Record parsing accepts the camelCase keys of the
JSON datasets as well as snake_case.

All types are dataclasses for easy serialization and comparison.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple, Union

from .constants import REGION_LABELS
from .errors import InvalidSpanError, DatasetFormatError
from .utils.message import Log


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key (camelCase or snake_case spelling)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _require(data: Dict[str, Any], kind: str, *keys: str) -> Any:
    value = _pick(data, *keys)
    if value is None:
        raise DatasetFormatError(f"{kind} record is missing '{keys[0]}': {data!r}")
    return value


def _is_year(value: Any) -> bool:
    # bool is an int subclass; True is not a year
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_year(data: Dict[str, Any], kind: str, *keys: str) -> Union[int, float]:
    value = _require(data, kind, *keys)
    if not _is_year(value):
        raise DatasetFormatError(f"{kind} record has non-numeric '{keys[0]}': {value!r}")
    return value


def _year_or_none(value: Any, label: str) -> Optional[Union[int, float]]:
    """Keep a numeric bound; log and drop anything else."""
    if value is None or _is_year(value):
        return value
    Log.warning(f"[types] Ignoring non-numeric {label}: {value!r}")
    return None


# =============================================================================
# Axis / Viewport Types
# =============================================================================

@dataclass(frozen=True)
class TimeRange:
    """
    The min/max year window governing coordinate conversion.

    Years may be negative (BCE). {0, 0} is the empty-dataset range.
    """
    min_year: int = 0
    max_year: int = 0

    def __post_init__(self):
        if self.min_year > self.max_year:
            raise ValueError(
                f"TimeRange min_year ({self.min_year}) is after max_year ({self.max_year})"
            )

    @property
    def is_degenerate(self) -> bool:
        """True when the range has no width (includes the empty {0, 0} case)."""
        return self.min_year == self.max_year

    @property
    def span_years(self) -> int:
        return self.max_year - self.min_year

    def contains(self, year: float) -> bool:
        return self.min_year <= year <= self.max_year

    def to_dict(self) -> Dict[str, Any]:
        return {'min_year': self.min_year, 'max_year': self.max_year}


@dataclass(frozen=True)
class VisibleYearRange:
    """Year window currently visible in the viewport."""
    start: float
    end: float

    def clip(self, start_year: float, end_year: float) -> Optional[Tuple[float, float]]:
        """
        Clip [start_year, end_year] to this window.

        Returns:
            The clipped (start, end) pair, or None if the interval lies
            entirely outside the window.
        """
        if end_year < self.start or start_year > self.end:
            return None
        return max(start_year, self.start), min(end_year, self.end)

    def to_dict(self) -> Dict[str, Any]:
        return {'start': self.start, 'end': self.end}


@dataclass(frozen=True)
class ZoomPanState:
    """Snapshot of the {scale, offset_x} pair controlling the viewport."""
    scale: float = 1.0
    offset_x: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {'scale': self.scale, 'offset_x': self.offset_x}


# =============================================================================
# Packing Types
# =============================================================================

@dataclass(frozen=True)
class Span:
    """
    A start/end pair in a single coordinate axis (years or pixels).

    A point is a span with start == end. Building a span whose end
    precedes its start raises InvalidSpanError.
    """
    id: str
    start: float
    end: float

    def __post_init__(self):
        if self.end < self.start:
            raise InvalidSpanError(self.id, self.start, self.end)

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class LaneAssignment:
    """Lane index assigned to a span. Lane 0 is the topmost row."""
    span_id: str
    lane_index: int


# =============================================================================
# Coverage Range (tagged variant)
# =============================================================================

@dataclass(frozen=True)
class Unranged:
    """No coverage years known; the item is displayed without a lane."""


@dataclass(frozen=True)
class PointRange:
    """Only one coverage bound known; treated as a zero-width range."""
    year: int


@dataclass(frozen=True)
class FullRange:
    """Both coverage bounds known."""
    start_year: int
    end_year: int


CoverageRange = Union[Unranged, PointRange, FullRange]


def coverage_from_bounds(start_year: Optional[int], end_year: Optional[int]) -> CoverageRange:
    """
    Build the coverage variant from two independently optional bounds.

    A bound that is not a number is logged and treated as absent.
    """
    start_year = _year_or_none(start_year, "coverage start year")
    end_year = _year_or_none(end_year, "coverage end year")
    if start_year is None and end_year is None:
        return Unranged()
    if start_year is None:
        return PointRange(end_year)
    if end_year is None:
        return PointRange(start_year)
    return FullRange(start_year, end_year)


def coverage_bounds(coverage: CoverageRange) -> Optional[Tuple[int, int]]:
    """
    Resolve a coverage variant to (start_year, end_year).

    Returns None for Unranged; PointRange resolves to (year, year).
    """
    if isinstance(coverage, FullRange):
        return coverage.start_year, coverage.end_year
    if isinstance(coverage, PointRange):
        return coverage.year, coverage.year
    return None


def _coverage_to_dict(coverage: CoverageRange) -> Dict[str, Any]:
    if isinstance(coverage, FullRange):
        return {'coverage_start_year': coverage.start_year, 'coverage_end_year': coverage.end_year}
    if isinstance(coverage, PointRange):
        return {'coverage_start_year': coverage.year}
    return {}


# =============================================================================
# Input Types (Domain records)
# =============================================================================

@dataclass
class Person:
    """A notable person with a lifespan."""
    name: str
    birth_year: int
    death_year: int
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'name': self.name,
            'birth_year': self.birth_year,
            'death_year': self.death_year,
        }
        if self.description:
            result['description'] = self.description
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Person':
        return cls(
            name=_require(data, "Person", 'name'),
            birth_year=_require_year(data, "Person", 'birthYear', 'birth_year'),
            death_year=_require_year(data, "Person", 'deathYear', 'death_year'),
            description=data.get('description'),
        )


@dataclass
class MediaItem:
    """
    A manga or novel covering a span of history.

    Attributes:
        id: Unique identifier
        title: Display title
        type: 'manga' or 'novel'
        remark: Free-form note
        coverage: Coverage years as a tagged variant
        kindle_url: Optional store link
        related_event_ids: Events this work depicts
    """
    id: str
    title: str
    type: str = 'manga'
    remark: str = ''
    coverage: CoverageRange = field(default_factory=Unranged)
    kindle_url: Optional[str] = None
    related_event_ids: List[str] = field(default_factory=list)

    @property
    def is_ranged(self) -> bool:
        return not isinstance(self.coverage, Unranged)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'title': self.title,
            'type': self.type,
            'remark': self.remark,
            'related_event_ids': list(self.related_event_ids),
        }
        result.update(_coverage_to_dict(self.coverage))
        if self.kindle_url:
            result['kindle_url'] = self.kindle_url
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], fallback_id: Optional[str] = None) -> 'MediaItem':
        """
        Create from dictionary.

        Media nested inside events carry no id in older datasets; those
        fall back to fallback_id, then to the title.
        """
        title = _require(data, "Media", 'title')
        return cls(
            id=data.get('id') or fallback_id or title,
            title=title,
            type=data.get('type', 'manga'),
            remark=data.get('remark', ''),
            coverage=coverage_from_bounds(
                _pick(data, 'coverageStartYear', 'coverage_start_year'),
                _pick(data, 'coverageEndYear', 'coverage_end_year'),
            ),
            kindle_url=_pick(data, 'kindleUrl', 'kindle_url'),
            related_event_ids=list(_pick(data, 'relatedEventIds', 'related_event_ids', default=[])),
        )


@dataclass
class HistoryEvent:
    """
    A dated historical event.

    The event's year drives the time range and the event marker track;
    its (region, era) pair drives the era track; its persons feed the
    person track; nested media feed the media track.
    """
    id: str
    year: int
    era: str
    region: str = 'other'
    title: str = ''
    year_display: str = ''
    description: str = ''
    links: List[str] = field(default_factory=list)
    media: List[MediaItem] = field(default_factory=list)
    persons: List[Person] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'year': self.year,
            'year_display': self.year_display,
            'era': self.era,
            'region': self.region,
            'title': self.title,
            'description': self.description,
            'links': list(self.links),
            'media': [m.to_dict() for m in self.media],
            'persons': [p.to_dict() for p in self.persons],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryEvent':
        event_id = str(_require(data, "Event", 'id'))
        return cls(
            id=event_id,
            year=_require_year(data, "Event", 'year'),
            era=_require(data, "Event", 'era'),
            region=data.get('region', 'other'),
            title=data.get('title', ''),
            year_display=_pick(data, 'yearDisplay', 'year_display', default=''),
            description=data.get('description', ''),
            links=list(data.get('links', [])),
            media=[
                MediaItem.from_dict(m, fallback_id=f"{event_id}-media-{i}")
                for i, m in enumerate(data.get('media') or [])
            ],
            persons=[Person.from_dict(p) for p in data.get('persons') or []],
        )


@dataclass
class PodcastSeries:
    """A podcast series covering a span of history."""
    id: str
    title: str
    region: str
    coverage_start_year: int
    coverage_end_year: int
    type: str = 'normal'
    episode_count: Optional[int] = None
    url: Optional[str] = None

    @property
    def is_short(self) -> bool:
        return self.type == 'short'

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'title': self.title,
            'region': self.region,
            'type': self.type,
            'coverage_start_year': self.coverage_start_year,
            'coverage_end_year': self.coverage_end_year,
        }
        if self.episode_count is not None:
            result['episode_count'] = self.episode_count
        if self.url:
            result['url'] = self.url
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PodcastSeries':
        # One known bound collapses to a point, as for media coverage
        bounds = coverage_bounds(coverage_from_bounds(
            _pick(data, 'coverageStartYear', 'coverage_start_year'),
            _pick(data, 'coverageEndYear', 'coverage_end_year'),
        ))
        if bounds is None:
            raise DatasetFormatError(f"Series record has no coverage years: {data!r}")
        return cls(
            id=str(_require(data, "Series", 'id')),
            title=data.get('title', ''),
            region=data.get('region', 'other'),
            coverage_start_year=bounds[0],
            coverage_end_year=bounds[1],
            type=data.get('type', 'normal'),
            episode_count=_pick(data, 'episodeCount', 'episode_count'),
            url=data.get('url'),
        )


@dataclass
class Idiom:
    """An idiom (故事成語) anchored to the year of its origin story."""
    id: str
    idiom: str
    year: int
    region: str = 'other'
    reading: str = ''
    meaning: str = ''
    origin: str = ''
    year_display: str = ''
    era: str = ''
    related_event_ids: List[str] = field(default_factory=list)
    related_media_ids: List[str] = field(default_factory=list)
    links: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'idiom': self.idiom,
            'reading': self.reading,
            'meaning': self.meaning,
            'origin': self.origin,
            'year': self.year,
            'year_display': self.year_display,
            'era': self.era,
            'region': self.region,
            'related_event_ids': list(self.related_event_ids),
            'related_media_ids': list(self.related_media_ids),
            'links': list(self.links),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Idiom':
        return cls(
            id=str(_require(data, "Idiom", 'id')),
            idiom=_require(data, "Idiom", 'idiom'),
            year=_require_year(data, "Idiom", 'year'),
            region=data.get('region', 'other'),
            reading=data.get('reading', ''),
            meaning=data.get('meaning', ''),
            origin=data.get('origin', ''),
            year_display=_pick(data, 'yearDisplay', 'year_display', default=''),
            era=data.get('era', ''),
            related_event_ids=list(_pick(data, 'relatedEventIds', 'related_event_ids', default=[])),
            related_media_ids=list(_pick(data, 'relatedMediaIds', 'related_media_ids', default=[])),
            links=list(data.get('links', [])),
        )


# =============================================================================
# Output Types (Per-track layout records)
# =============================================================================

@dataclass
class EraLaneData:
    """An era bar within its region's row group."""
    era: str
    region: str
    start_year: float
    end_year: float
    events: List[HistoryEvent] = field(default_factory=list)
    lane_index: int = 0
    position: float = 0.0
    end_position: float = 0.0

    @property
    def record_id(self) -> str:
        return f"{self.region}:{self.era}"

    @property
    def duration(self) -> float:
        return abs(self.end_year - self.start_year)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_id': self.record_id,
            'era': self.era,
            'region': self.region,
            'start_year': self.start_year,
            'end_year': self.end_year,
            'duration': self.duration,
            'event_ids': [e.id for e in self.events],
            'lane_index': self.lane_index,
            'position': self.position,
            'end_position': self.end_position,
        }


@dataclass
class RegionEraGroup:
    """All era lanes of one region, packed independently of other regions."""
    region: str
    lanes: List[EraLaneData] = field(default_factory=list)

    @property
    def region_label(self) -> str:
        return REGION_LABELS.get(self.region, self.region)

    @property
    def lane_count(self) -> int:
        if not self.lanes:
            return 0
        return max(lane.lane_index for lane in self.lanes) + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'region': self.region,
            'region_label': self.region_label,
            'lane_count': self.lane_count,
            'lanes': [lane.to_dict() for lane in self.lanes],
        }


@dataclass
class PersonLaneData:
    """A deduplicated person; rendered as a flat list, not packed."""
    person: Person
    related_event_ids: List[str] = field(default_factory=list)
    position: float = 0.0
    end_position: float = 0.0
    lane_index: Optional[int] = None

    @property
    def record_id(self) -> str:
        return self.person.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_id': self.record_id,
            'person': self.person.to_dict(),
            'related_event_ids': list(self.related_event_ids),
            'position': self.position,
            'end_position': self.end_position,
        }


@dataclass
class MediaLaneData:
    """
    A media work on the media track.

    Unranged works have no position and no lane; the renderer lists them
    without placing them on the axis.
    """
    media: MediaItem
    parent_event_id: Optional[str] = None
    lane_index: Optional[int] = None
    position: Optional[float] = None
    end_position: Optional[float] = None

    @property
    def record_id(self) -> str:
        return self.media.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_id': self.record_id,
            'title': self.media.title,
            'parent_event_id': self.parent_event_id,
            'lane_index': self.lane_index,
            'position': self.position,
            'end_position': self.end_position,
        }


@dataclass
class PodcastLaneData:
    series: PodcastSeries
    lane_index: int = 0
    position: float = 0.0
    end_position: float = 0.0

    @property
    def record_id(self) -> str:
        return self.series.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_id': self.record_id,
            'title': self.series.title,
            'lane_index': self.lane_index,
            'position': self.position,
            'end_position': self.end_position,
        }


@dataclass
class IdiomLaneData:
    idiom: Idiom
    lane_index: int = 0
    position: float = 0.0

    @property
    def record_id(self) -> str:
        return self.idiom.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_id': self.record_id,
            'idiom': self.idiom.idiom,
            'lane_index': self.lane_index,
            'position': self.position,
        }


@dataclass
class EventMarkerData:
    event: HistoryEvent
    position: float = 0.0
    lane_index: int = 0

    @property
    def record_id(self) -> str:
        return self.event.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_id': self.record_id,
            'year': self.event.year,
            'lane_index': self.lane_index,
            'position': self.position,
        }


def max_lane_index(items: List[Any]) -> int:
    """Highest lane index among items; 0 when nothing is laned."""
    indices = [item.lane_index for item in items if item.lane_index is not None]
    return max(indices) if indices else 0


@dataclass
class TimelineLayout:
    """
    Fully calculated timeline layout.

    DETERMINISTIC: same records + filters + container width + zoom state
    produce an identical layout.
    """
    time_range: TimeRange
    zoom: ZoomPanState
    visible_range: VisibleYearRange
    era_groups: List[RegionEraGroup] = field(default_factory=list)
    persons: List[PersonLaneData] = field(default_factory=list)
    media: List[MediaLaneData] = field(default_factory=list)
    podcast: List[PodcastLaneData] = field(default_factory=list)
    idioms: List[IdiomLaneData] = field(default_factory=list)
    markers: List[EventMarkerData] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'time_range': self.time_range.to_dict(),
            'zoom': self.zoom.to_dict(),
            'visible_range': self.visible_range.to_dict(),
            'era_groups': [g.to_dict() for g in self.era_groups],
            'persons': [p.to_dict() for p in self.persons],
            'media': [m.to_dict() for m in self.media],
            'podcast': [s.to_dict() for s in self.podcast],
            'idioms': [i.to_dict() for i in self.idioms],
            'markers': [m.to_dict() for m in self.markers],
        }
