"""
Historie Timeline Engine
========================

Coordinate mapping, zoom/pan state and lane assignment for a zoomable
historical timeline with parallel tracks (eras per region, persons,
media works, podcast series, idioms, event markers).

The engine produces positions and lane indices only; drawing is left to
the rendering layer.

Directory Structure
-------------------
- timing/     - Year <-> pixel conversion, time range derivation
- core/       - ZoomPanController and the TimelineEngine context
- lanes/      - First-fit greedy lane packer
- tracks/     - Per-track adapters (era, person, media, podcast, idiom, marker)
- settings/   - Settings schema, validation and storage
- utils/      - Logging

Import Examples
---------------
    from historie_timeline import TimelineEngine, TimelineFilters
    from historie_timeline.lanes import LanePacker
    from historie_timeline.timing import CoordinateMapper
    from historie_timeline.types import TimeRange, Span
"""

__version__ = "0.1.0"

from .core import TimelineEngine, ZoomPanController
from .filters import TimelineFilters
from .settings import TimelineSettings, TimelineSettingsManager

__all__ = [
    'TimelineEngine',
    'ZoomPanController',
    'TimelineFilters',
    'TimelineSettings',
    'TimelineSettingsManager',
]
