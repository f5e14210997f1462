"""Core stopwatch and report rendering."""

from .report import BreakdownLine, Colors, breakdown_lines, highlight_if, render_breakdown
from .stopwatch import Stopwatch, optional_tick

__all__ = [
    "BreakdownLine",
    "Colors",
    "breakdown_lines",
    "highlight_if",
    "render_breakdown",
    "Stopwatch",
    "optional_tick",
]
