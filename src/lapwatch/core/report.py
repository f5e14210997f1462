"""Breakdown report rendering for stopwatch data."""

import math
from dataclasses import dataclass

NS_PER_MS = 1_000_000

# Lines above this share of the total are emphasized (strictly greater)
HIGHLIGHT_THRESHOLD = 10.0

MARKER = "%"
HEADER_PAD = MARKER * 13
MIN_SEPARATOR_WIDTH = 26


class Colors:
    BRIGHT_YELLOW = "\033[93m"  # Emphasized report lines
    RED = "\033[31m"            # Failed commands
    DIM = "\033[2m"             # Status messages
    RESET = "\033[0m"


@dataclass(frozen=True)
class BreakdownLine:
    """A single label's row in the breakdown."""
    label: str
    ms: int
    percentage: float

    @property
    def emphasized(self) -> bool:
        return self.percentage > HIGHLIGHT_THRESHOLD

    def text(self) -> str:
        return f"> {self.label} {self.ms}ms {self.percentage:.1f}%"


def to_ms(ns: int) -> int:
    """Convert nanoseconds to whole milliseconds, truncating."""
    return ns // NS_PER_MS


def safe_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator.

    Returns inf (signed) for a non-zero numerator and nan for 0/0.
    """
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def highlight_if(text: str, condition: bool) -> str:
    """Wrap text in the highlight escape sequence when condition holds."""
    if condition:
        return f"{Colors.BRIGHT_YELLOW}{text}{Colors.RESET}"
    return text


def header_text(count: int, unit: str) -> str:
    return f"{HEADER_PAD} Breakdown of {count} {unit} {HEADER_PAD}"


def separator_width(header: str) -> int:
    """Width of the closing separator for a given (plain) header.

    Measured against the highlighted header with its newline, less ten,
    which comes out to the header's visible width.
    """
    highlighted_length = len(highlight_if(header, True) + "\n")
    return max(highlighted_length - 10, MIN_SEPARATOR_WIDTH)


def breakdown_lines(durations: dict[str, int], order: list[str] | tuple[str, ...]) -> list[BreakdownLine]:
    """Compute report rows in the given label order.

    Args:
        durations: Mapping of label to accumulated nanoseconds
        order: Labels in first-seen order

    Returns:
        One BreakdownLine per label, percentages relative to the total
    """
    total_ms = to_ms(sum(durations.values()))
    lines = []
    for label in order:
        ms = to_ms(durations.get(label, 0))
        lines.append(BreakdownLine(label, ms, safe_div(ms, total_ms) * 100))
    return lines


def render_breakdown(
    durations: dict[str, int],
    order: list[str] | tuple[str, ...],
    count: int,
    unit: str,
    color: bool = True,
) -> str:
    """Render the full breakdown report as a single string.

    The header is always emphasized, label rows are emphasized above the
    threshold, and the trailer and separator never are. With color off the
    layout is identical, minus the escape sequences.
    """
    emphasize = highlight_if if color else (lambda text, condition: text)

    header = header_text(count, unit)
    out = [emphasize(header, True)]
    for line in breakdown_lines(durations, order):
        out.append(emphasize(line.text(), line.emphasized))

    total_ms = to_ms(sum(durations.values()))
    throughput = safe_div(count * 1000, total_ms)
    out.append(f"finished in {total_ms}ms ({throughput:.2f} {unit} per second)")
    out.append(emphasize(MARKER * separator_width(header), False))
    return "\n".join(out) + "\n"
