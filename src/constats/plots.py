"""PNG rendering of the z-score histogram (matplotlib)."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
import numpy as np

from src.constats.aggregator import StatsRecord
from src.constats.histogram import Bucket

BAR_COLOR = "#2980b9"


def plot_zhistogram(buckets: list[Bucket], stats: StatsRecord, path: Path) -> Path:
    """Bar chart of bucket counts, one bar per z-score bucket."""
    x = np.arange(len(buckets))
    counts = [b.count for b in buckets]
    labels = [f"{b.z_low:+.1f}\n{b.z_high:+.1f}" for b in buckets]

    fig, ax = plt.subplots(figsize=(max(6, len(buckets) * 0.8), 4.5))
    ax.bar(x, counts, 0.9, color=BAR_COLOR, edgecolor="black", linewidth=0.5)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, fontsize=8)
    ax.set_xlabel("z-score range")
    ax.set_ylabel("samples")
    ax.yaxis.set_major_formatter(ticker.FuncFormatter(lambda v, _: f"{v:,.0f}"))
    ax.grid(True, axis="y", alpha=0.3)
    ax.set_title(
        f"n={stats.count:,}  outliers={stats.outlier_count:,}  "
        f"mean={stats.norm_mean:,.1f}  sigma={stats.norm_stdev:,.1f}",
        fontsize=10,
    )

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path
