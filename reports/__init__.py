from __future__ import annotations

from .histogram_chart import make_histogram_chart

__all__ = ["make_histogram_chart"]
