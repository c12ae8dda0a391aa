from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

from bytehist.errors import ChartError, EmptyInputError
from utils.plotting import new_figure, nice_axes, plt, save

_TITLE = "Byte Value Distribution"
_BAR_COLOR = "#4c72b0"
_MAX_COLOR = "#c44e52"


def _percentages(table: Sequence[int], total: int) -> Tuple[float, ...]:
    return tuple(count / total * 100.0 for count in table)


def make_histogram_chart(table: Sequence[int], total: int, save_path: str | Path) -> Path:
    """Render the byte-frequency table as a PNG bar chart and return the file path."""
    if total <= 0:
        raise EmptyInputError("cannot chart a histogram of empty input")

    percentages = _percentages(table, total)
    fig, ax = new_figure()
    try:
        nice_axes(ax, _TITLE, xlabel="Byte Value", ylabel="Frequency (%)")
        ax.bar(range(len(percentages)), percentages, width=1.0, color=_BAR_COLOR)
        peak = max(percentages)
        ax.axhline(peak, color=_MAX_COLOR, linestyle="--", linewidth=1, label=f"Maximum ({peak:.2f}%)")
        ax.set_xlim(-0.5, 255.5)
        ax.set_xticks(range(0, 256, 16))
        ax.set_xticklabels([f"{value:02x}" for value in range(0, 256, 16)])
        ax.legend()
        fig.tight_layout()
        return save(fig, save_path)
    except (OSError, ValueError, RuntimeError) as exc:
        raise ChartError(f"cannot save chart to '{save_path}': {exc}") from exc
    finally:
        plt.close(fig)
