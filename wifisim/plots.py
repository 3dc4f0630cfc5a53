"""Signal-vs-distance chart rendering.

Draws strength (%) against distance (m) for a sampled curve, with the y-axis
fixed to 0..100 and an optional highlighted distance drawn as a larger dot in
its quality colour. The same figure is saved as a PNG or shown in the dashboard.
"""

from pathlib import Path
from typing import Iterable, Optional

import numpy as np
import matplotlib.pyplot as plt

from .curve import curve_arrays
from .quality import color_for_strength
from .signal_model import SignalReading

_LINE_COLOR = "#2563eb"


def signal_curve_figure(
    readings: Iterable[SignalReading],
    highlight_distance_m: Optional[float] = None,
    title: str = "Signal vs Distance (Free-Space 2.4 GHz)",
):
    """Build the curve figure; the caller owns it and must close it."""
    rows = list(readings)
    if not rows:
        raise ValueError("No readings to plot")
    arrays = curve_arrays(rows)
    xs = arrays["distance_m"]
    ys = arrays["strength_percent"]

    fig, ax = plt.subplots(figsize=(6, 4.5), dpi=140)
    ax.plot(xs, ys, color=_LINE_COLOR, linewidth=2.5, marker="o", markersize=3, label="Signal strength")
    if highlight_distance_m is not None:
        hits = [r for r in rows if r.distance_m == highlight_distance_m]
        if hits:
            cur = hits[0]
            ax.scatter(
                [cur.distance_m], [cur.strength_percent],
                s=80, color=color_for_strength(cur.strength_percent), edgecolors="white", zorder=3,
                label=f"{cur.distance_m:g} m: {cur.strength_percent:g}%",
            )
    ax.set_ylim(0, 100)
    ax.set_xticks(np.arange(5, xs.max() + 1, 5))
    ax.grid(True, linestyle="--", alpha=0.5)
    ax.set_title(title)
    ax.set_xlabel("Distance (m)")
    ax.set_ylabel("Signal (%)")
    ax.legend(loc="upper right")
    fig.tight_layout()
    return fig


def plot_signal_curve(
    readings: Iterable[SignalReading],
    outfile: str | Path,
    highlight_distance_m: Optional[float] = None,
    title: str = "Signal vs Distance (Free-Space 2.4 GHz)",
) -> Path:
    """Render the curve to outfile and return its path."""
    fig = signal_curve_figure(readings, highlight_distance_m, title)
    outp = Path(outfile)
    outp.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(outp)
    plt.close(fig)
    return outp
