"""Matplotlib timeline renderer: birth, wedding and MarriedMore on one axis per person."""

from __future__ import annotations

import io

from matplotlib.figure import Figure

from marriedmore.formatting import format_long_date
from marriedmore.models import TimelineRow

_BG = "#fff9f3"
_UNMARRIED_COLOR = "#cbd5e1"
_MARRIED_COLOR = "#e11d48"
_TEXT_COLOR = "#334155"


def render_timeline_figure(rows: list[TimelineRow], width: float = 8.0) -> Figure:
    """Render each row as two equal-length bars: unmarried, then married.

    Labels are always English; the bundled matplotlib fonts carry no
    Hangul glyphs.

    Args:
        rows: One TimelineRow per person, drawn top to bottom.
        width: Figure width in inches.

    Returns:
        matplotlib Figure object.
    """
    # Figure() instead of pyplot keeps the Streamlit server off any GUI backend.
    fig = Figure(figsize=(width, 1.2 + 1.1 * len(rows)))
    fig.patch.set_facecolor(_BG)
    ax = fig.subplots()
    ax.set_facecolor(_BG)

    for i, row in enumerate(rows):
        y = len(rows) - 1 - i
        ax.plot([row.birth, row.wedding], [y, y], color=_UNMARRIED_COLOR, linewidth=8,
                solid_capstyle="round", zorder=1)
        ax.plot([row.wedding, row.married_more], [y, y], color=_MARRIED_COLOR, linewidth=8,
                solid_capstyle="round", zorder=1)
        ax.scatter([row.birth, row.wedding, row.married_more], [y, y, y],
                   s=60, color="white", edgecolors=_TEXT_COLOR, zorder=2)

        for when, name, align in (
            (row.birth, "Birth", "left"),
            (row.wedding, "Wedding", "center"),
            (row.married_more, "MarriedMore", "right"),
        ):
            ax.annotate(f"{name}\n{format_long_date(when, 'en')}", (when, y),
                        xytext=(0, 12), textcoords="offset points",
                        ha=align, va="bottom", fontsize=8, color=_TEXT_COLOR)
        ax.annotate(row.label, (row.birth, y), xytext=(0, -18), textcoords="offset points",
                    ha="left", va="top", fontsize=9, fontweight="bold", color=_TEXT_COLOR)

    ax.set_ylim(-0.8, len(rows) - 0.2)
    ax.axis("off")
    return fig


def timeline_png_bytes(rows: list[TimelineRow]) -> bytes:
    """Render the timeline to PNG bytes for st.download_button()."""
    buf = io.BytesIO()
    render_timeline_figure(rows).savefig(buf, format="png", facecolor=_BG, dpi=150, bbox_inches="tight")
    return buf.getvalue()
