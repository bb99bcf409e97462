from __future__ import annotations

import io
import logging
from typing import Dict, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.colors import is_color_like
from matplotlib.ticker import MaxNLocator

from ..analysis.aggregate import chart_series
from ..analysis.models import CategoryAggregate

logger = logging.getLogger("obsolescence.chart")

DEFAULT_BAR_COLOR = "#cccccc"


class RenderError(Exception):
    """Raised when the chart or the report document cannot be produced."""


def render_bar_chart(
    aggregates: Dict[Optional[str], CategoryAggregate],
    width: float = 8.4,
    height: float = 4.0,
    dpi: int = 200,
    default_color: str = DEFAULT_BAR_COLOR,
) -> bytes:
    """One bar per category in mapping order; returns PNG bytes."""
    series = chart_series(aggregates)
    colors = [c if c and is_color_like(c) else default_color for c in series.colors]

    try:
        fig, ax = plt.subplots(figsize=(width, height))
        try:
            positions = list(range(len(series.counts)))
            ax.bar(positions, series.counts, color=colors)
            ax.set_xticks(positions)
            ax.set_xticklabels(series.labels)
            ax.set_ylim(bottom=0)
            ax.yaxis.set_major_locator(MaxNLocator(integer=True))
            for side in ("top", "right"):
                ax.spines[side].set_visible(False)
            fig.tight_layout()
            buf = io.BytesIO()
            fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight")
        finally:
            plt.close(fig)
    except (ValueError, TypeError, RuntimeError) as exc:
        logger.error("Bar chart rendering failed: %s", exc)
        raise RenderError(f"Could not render bar chart: {exc}") from exc

    png = buf.getvalue()
    logger.debug("Rendered bar chart: %d bars, %d bytes", len(series.counts), len(png))
    return png


__all__ = ["DEFAULT_BAR_COLOR", "RenderError", "render_bar_chart"]
