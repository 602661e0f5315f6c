"""
Lane Assignment

- LanePacker: First-fit greedy packing of spans into lanes
- pack_spans / pack_groups: Convenience wrappers
- build_span / build_spans: Span construction that drops invalid records
"""

from .packer import (
    LanePacker,
    LanePackResult,
    pack_spans,
    pack_groups,
    build_span,
    build_spans,
)

__all__ = [
    'LanePacker',
    'LanePackResult',
    'pack_spans',
    'pack_groups',
    'build_span',
    'build_spans',
]
