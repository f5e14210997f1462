"""Checkpoint stopwatch with a per-label time breakdown."""

from .core import Stopwatch, optional_tick

__all__ = ["Stopwatch", "optional_tick"]
