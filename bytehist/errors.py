"""Error types raised while building and printing a byte histogram."""
from __future__ import annotations


class HistogramError(Exception):
    """Base class for every failure reported by the histogram tool."""


class InputOpenError(HistogramError):
    """Raised when the named input file cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot open '{path}': {reason}")
        self.path = path


class ReadError(HistogramError):
    """Raised when reading the input fails for a reason other than an interrupt."""


class WriteError(HistogramError):
    """Raised when the histogram cannot be written to the output stream."""


class EmptyInputError(HistogramError, ValueError):
    """Raised when a histogram is requested for zero bytes of input."""


class ChartError(HistogramError):
    """Raised when the PNG chart cannot be produced or saved."""
