"""
Core Components

- ZoomPanController: Owner of the viewport's scale/offset state
- TimelineEngine: Per-viewport layout context
"""

from .zoom_pan import ZoomPanController
from .engine import TimelineEngine

__all__ = [
    'ZoomPanController',
    'TimelineEngine',
]
