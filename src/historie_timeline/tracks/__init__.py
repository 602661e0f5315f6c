"""
Track Adapters

One adapter per timeline track. Each derives spans from its records on
the shared pixel axis and delegates lane assignment to the LanePacker.
"""

from .base import TrackAdapter
from .era import EraTrack, region_sort_key
from .person import PersonTrack
from .media import MediaTrack, media_from_events
from .podcast import PodcastTrack
from .idiom import IdiomTrack
from .markers import EventMarkerTrack

__all__ = [
    'TrackAdapter',
    'EraTrack',
    'region_sort_key',
    'PersonTrack',
    'MediaTrack',
    'media_from_events',
    'PodcastTrack',
    'IdiomTrack',
    'EventMarkerTrack',
]
