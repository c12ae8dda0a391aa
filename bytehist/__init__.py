from __future__ import annotations

from .accumulator import CHUNK_SIZE, accumulate, accumulate_path
from .errors import (
    ChartError,
    EmptyInputError,
    HistogramError,
    InputOpenError,
    ReadError,
    WriteError,
)
from .renderer import DEFAULT_FILL, SCREEN_COLUMNS, HistogramSummary, render, summarize

__all__ = [
    "CHUNK_SIZE",
    "DEFAULT_FILL",
    "SCREEN_COLUMNS",
    "HistogramSummary",
    "accumulate",
    "accumulate_path",
    "render",
    "summarize",
    "HistogramError",
    "InputOpenError",
    "ReadError",
    "WriteError",
    "EmptyInputError",
    "ChartError",
]
