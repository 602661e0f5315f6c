"""
Timeline Errors

The engine is pure computation, so the error surface is small:

- InvalidSpanError: a span whose end precedes its start. Raised when the
  span is built; track adapters and the lane packer catch it, log it and
  drop the record so one bad record never halts the other tracks.
- DatasetFormatError: a dataset record missing required keys. The dataset
  loader logs and skips the record.

Degenerate ranges and out-of-bound zoom/pan requests are not errors; they
fall back to fixed defaults or are clamped.
"""


class TimelineError(Exception):
    """Base class for timeline engine errors."""


class InvalidSpanError(TimelineError, ValueError):
    """A span's end coordinate is before its start coordinate."""

    def __init__(self, span_id: str, start: float, end: float):
        self.span_id = span_id
        self.start = start
        self.end = end
        super().__init__(
            f"Span '{span_id}' has end ({end}) before start ({start})"
        )


class DatasetFormatError(TimelineError, ValueError):
    """A dataset record cannot be parsed."""
