"""
Dataset Containers

Whole-dataset containers parsed from the application's JSON documents:
the history dataset (events, media, idioms) and the podcast dataset
(podcast info and series).

Parsing is lenient per record: a record that cannot be parsed is logged
and skipped so one bad entry does not hide the rest of the timeline.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .errors import DatasetFormatError
from .types import HistoryEvent, Idiom, MediaItem, PodcastSeries
from .utils.message import Log

T = TypeVar('T')


def _parse_records(raw: Any, parser: Callable[[Dict[str, Any]], T], kind: str) -> List[T]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise DatasetFormatError(f"'{kind}' must be a list, got {type(raw).__name__}")

    records = []
    for index, data in enumerate(raw):
        if not isinstance(data, dict):
            Log.warning(f"[dataset] Skipping {kind}[{index}]: not an object")
            continue
        try:
            records.append(parser(data))
        except (DatasetFormatError, TypeError, ValueError) as e:
            Log.warning(f"[dataset] Skipping {kind}[{index}]: {e}")
    return records


@dataclass
class HistorieData:
    """Events, standalone media and idioms."""
    events: List[HistoryEvent] = field(default_factory=list)
    media: List[MediaItem] = field(default_factory=list)
    idioms: List[Idiom] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'events': [e.to_dict() for e in self.events],
            'media': [m.to_dict() for m in self.media],
            'idioms': [i.to_dict() for i in self.idioms],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistorieData':
        """
        Parse a history dataset.

        Raises:
            DatasetFormatError: If the document itself is malformed
        """
        if not isinstance(data, dict):
            raise DatasetFormatError(f"Dataset must be an object, got {type(data).__name__}")

        data_set = cls(
            events=_parse_records(data.get('events'), HistoryEvent.from_dict, 'events'),
            media=_parse_records(data.get('media'), MediaItem.from_dict, 'media'),
            idioms=_parse_records(data.get('idioms'), Idiom.from_dict, 'idioms'),
        )
        Log.info(
            f"[dataset] Loaded {len(data_set.events)} events, "
            f"{len(data_set.media)} media, {len(data_set.idioms)} idioms"
        )
        return data_set


@dataclass
class PodcastData:
    """Podcast info plus its series."""
    series: List[PodcastSeries] = field(default_factory=list)
    podcast: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'series': [s.to_dict() for s in self.series]}
        if self.podcast is not None:
            result['podcast'] = dict(self.podcast)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PodcastData':
        if not isinstance(data, dict):
            raise DatasetFormatError(f"Podcast dataset must be an object, got {type(data).__name__}")
        podcast = data.get('podcast')
        return cls(
            series=_parse_records(data.get('series'), PodcastSeries.from_dict, 'series'),
            podcast=dict(podcast) if isinstance(podcast, dict) else None,
        )


def load_json(path: str | Path) -> Dict[str, Any]:
    """
    Read a JSON document.

    Raises:
        DatasetFormatError: If the file is not valid JSON
    """
    path = Path(path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DatasetFormatError(f"{path}: invalid JSON: {e}") from e


class JsonFileSource:
    """
    RecordSourceInterface backed by JSON files on disk.

    The history document is required; a podcast document, if given, is
    merged in under its own 'series' and 'podcast' keys.
    """

    def __init__(self, path: str | Path, podcast_path: Optional[str | Path] = None):
        self.path = Path(path)
        self.podcast_path = Path(podcast_path) if podcast_path else None

    def fetch(self) -> Dict[str, Any]:
        data = load_json(self.path)
        if not isinstance(data, dict):
            raise DatasetFormatError(f"{self.path}: dataset must be an object")

        if self.podcast_path is not None:
            podcast = load_json(self.podcast_path)
            if not isinstance(podcast, dict):
                raise DatasetFormatError(f"{self.podcast_path}: podcast dataset must be an object")
            data = {**data, 'series': podcast.get('series', []), 'podcast': podcast.get('podcast')}
        return data
