"""Text rendering of a byte-frequency table as a 256-row bar histogram."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .errors import EmptyInputError

SCREEN_COLUMNS = 72
DEFAULT_FILL = "*"
_BYTE_VALUES = 256


@dataclass(frozen=True)
class HistogramSummary:
    """Statistics shared by the summary line and every histogram row."""

    frequency_min: int
    frequency_max: int
    percentage_min: float
    percentage_max: float
    normalizer: float

    @property
    def spread(self) -> float:
        return self.percentage_max - self.percentage_min


def _check_table(table: Sequence[int], total: int) -> None:
    if len(table) != _BYTE_VALUES:
        raise ValueError(f"frequency table must have {_BYTE_VALUES} entries, got {len(table)}")
    if total <= 0:
        raise EmptyInputError("cannot render a histogram of empty input")


def summarize(table: Sequence[int], total: int) -> HistogramSummary:
    """Compute min/max counts, their percentages and the bar normalizer."""
    _check_table(table, total)
    frequency_min = min(table)
    frequency_max = max(table)
    return HistogramSummary(
        frequency_min=frequency_min,
        frequency_max=frequency_max,
        percentage_min=frequency_min / total * 100.0,
        percentage_max=frequency_max / total * 100.0,
        normalizer=total / frequency_max,
    )


def summary_line(summary: HistogramSummary) -> str:
    return "(range: {:.2f}% - {:.2f}%, distribution: {:.2f}pt.)".format(
        summary.percentage_min, summary.percentage_max, summary.spread
    )


def bar_length(count: int, frequency_max: int, columns: int = SCREEN_COLUMNS) -> int:
    """Bar length for one byte value; the most frequent value fills *columns*.

    This is floor(columns * count / total * total / frequency_max) with the
    total cancelled out, computed on integers so no rounding can shorten the
    longest bar.
    """
    return columns * count // frequency_max


def histogram_lines(
    table: Sequence[int],
    total: int,
    columns: int = SCREEN_COLUMNS,
    fill: str = DEFAULT_FILL,
) -> Iterator[str]:
    """Yield the summary line followed by one row per byte value 0x00..0xff."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    if len(fill) != 1:
        raise ValueError("fill must be a single character")

    summary = summarize(table, total)
    yield summary_line(summary)
    for value in range(_BYTE_VALUES):
        frequency = table[value] / total
        length = bar_length(table[value], summary.frequency_max, columns)
        bar = fill * length
        padding = " " * (columns - length)
        yield f"{value:02x} |{bar}{padding}|{frequency * 100.0:5.2f}%"


def render(
    table: Sequence[int],
    total: int,
    columns: int = SCREEN_COLUMNS,
    fill: str = DEFAULT_FILL,
) -> str:
    """Render the full histogram as newline-terminated text.

    Raises :class:`EmptyInputError` when *total* is zero; callers are expected
    to report empty input themselves.
    """
    return "".join(line + "\n" for line in histogram_lines(table, total, columns, fill))
