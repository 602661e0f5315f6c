"""Shared utilities (logging)."""

from .message import Log, init_logger

__all__ = ['Log', 'init_logger']
