"""Stopwatch for profiling time spent between labeled checkpoints."""

import logging
import sys
import time
from typing import Callable, TextIO

from .report import render_breakdown, to_ms

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class Stopwatch:
    """Accumulates elapsed time per label between successive ticks.

    Each tick charges the time since the previous tick (or construction or
    reset) to its label. Repeated labels accumulate disjoint segments.
    """

    def __init__(
        self,
        measurement_enabled: bool,
        echo_enabled: bool,
        *,
        clock: Clock | None = None,
        stream: TextIO | None = None,
        color: bool = True,
    ):
        """Create a stopwatch.

        Args:
            measurement_enabled: When False, tick/reset/breakdown skip all timing
            echo_enabled: Print each tick's label as it happens
            clock: Monotonic clock returning integer nanoseconds
            stream: Output for echoes and reports (default: current sys.stdout)
            color: Emit terminal highlight escapes in reports
        """
        self._clock = clock if clock is not None else time.perf_counter_ns
        self._stream = stream
        self._measurement_enabled = measurement_enabled
        self._echo_enabled = echo_enabled
        self._color = color
        self._last_mark = self._clock()
        self._accumulated: dict[str, int] = {}
        self._label_order: list[str] = []

    @property
    def measurement_enabled(self) -> bool:
        return self._measurement_enabled

    @property
    def echo_enabled(self) -> bool:
        return self._echo_enabled

    @property
    def color(self) -> bool:
        return self._color

    @property
    def last_mark(self) -> int:
        return self._last_mark

    @property
    def accumulated(self) -> dict[str, int]:
        """Nanoseconds per label, in first-seen order."""
        return {label: self._accumulated[label] for label in self._label_order}

    @property
    def label_order(self) -> tuple[str, ...]:
        return tuple(self._label_order)

    @property
    def total_ns(self) -> int:
        return sum(self._accumulated.values())

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)

    def reset(self) -> None:
        """Drop all accumulated time and restart from now."""
        if not self._measurement_enabled:
            return
        self._accumulated.clear()
        self._label_order.clear()
        self._last_mark = self._clock()
        logger.debug("Stopwatch reset")

    def tick(self, label: str) -> None:
        """Charge the time since the previous tick to label."""
        if self._echo_enabled:
            self._write(f"{label}\n")
        if not self._measurement_enabled:
            return
        now = self._clock()
        elapsed = now - self._last_mark
        self._last_mark = now
        if label not in self._accumulated:
            self._label_order.append(label)
            self._accumulated[label] = 0
        self._accumulated[label] += elapsed

    def render(self, count: int, unit: str, color: bool | None = None) -> str:
        """Return the breakdown report without printing it.

        Args:
            count: Number of units of work covered by the measurements
            unit: Name of the unit of work (e.g. "requests")
            color: Override the stopwatch's color setting

        Returns:
            The report text, or "" when measurement is disabled
        """
        if not self._measurement_enabled:
            return ""
        if to_ms(self.total_ns) == 0:
            logger.warning(f"Breakdown of {count} {unit} rendered with zero total time")
        return render_breakdown(
            self._accumulated,
            self._label_order,
            count,
            unit,
            color=self._color if color is None else color,
        )

    def breakdown(self, count: int, unit: str) -> None:
        """Print the time spent on each label as a single write."""
        if not self._measurement_enabled:
            return
        self._write(self.render(count, unit))


def optional_tick(stopwatch: Stopwatch | None, label: str) -> None:
    """Tick the stopwatch if one is provided, else do nothing."""
    if stopwatch is not None:
        stopwatch.tick(label)
