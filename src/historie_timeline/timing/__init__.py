"""
Timing System

Years are the single source of truth; pixel positions are derived from
them through one shared pixels-per-year value.

Modules:
- CoordinateMapper: Convert between years and content pixels
- compute_time_range: Derive the active TimeRange from records
"""

from .coordinate_mapper import CoordinateMapper, compute_time_range

__all__ = [
    'CoordinateMapper',
    'compute_time_range',
]
