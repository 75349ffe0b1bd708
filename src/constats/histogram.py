"""Z-score histogram: range counting, bucketing and text bars.

The z axis runs from ``max(-3, z(min))`` to ``min(3, z(max))`` in half-sigma
buckets. Every bucket is half-open ``[low, high)`` except the last, which is
closed, so adjacent buckets never count the same sample twice.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import structlog

from src.common.constants import (
    BAR_CHAR,
    BAR_SHIFT,
    BAR_WIDTH,
    COUNT_WIDTH,
    INT64_MAX,
    INT64_MIN,
    VALUE_WIDTH,
    Z_LIMIT,
    Z_STEP,
)
from src.constats.aggregator import StatsRecord, inlier_mask
from src.constats.formatting import format_fixed
from src.constats.samples import SampleLike, as_samples
from src.constats.ztransform import value_at_zscore, zscore_at_value

_log = structlog.get_logger("histogram")


@dataclass(frozen=True)
class Bucket:
    """One histogram row: a z-score interval and the samples falling in it."""

    z_low: float
    z_high: float
    low: int
    high: int
    count: int
    closed: bool = False


def count_in_range(
    samples: SampleLike,
    low: int,
    high: int,
    *,
    inclusive: bool = True,
) -> int:
    """Count samples in ``[low, high]``, or ``[low, high)`` if not *inclusive*."""
    arr = as_samples(samples)
    if not inclusive:
        high -= 1
    low, high = max(low, INT64_MIN), min(high, INT64_MAX)
    if low > high:
        return 0
    return int(np.count_nonzero((arr >= low) & (arr <= high)))


def zscore_window(stats: StatsRecord) -> tuple[float, float]:
    """Return ``(z_start, z_end)``, the observed z range clamped to +-3."""
    z_start = max(-Z_LIMIT, zscore_at_value(stats, stats.min))
    z_end = min(Z_LIMIT, zscore_at_value(stats, stats.max))
    return z_start, z_end


def zhistogram(samples: SampleLike, stats: StatsRecord) -> list[Bucket]:
    """Bucket the non-outlier *samples* by z-score.

    Samples outside the tolerance window are never counted, so a
    distribution inside +-3 sigma sums to ``count - outlier_count``. Raises
    :class:`DegenerateDistributionError` when *stats* has no normalized
    distribution.
    """
    arr = as_samples(samples)
    z_start, z_end = zscore_window(stats)
    arr = arr[inlier_mask(arr, stats.mean, stats.tolerance)]

    if z_start >= z_end:
        low = value_at_zscore(stats, -Z_STEP)
        high = value_at_zscore(stats, Z_STEP)
        count = count_in_range(arr, low, high)
        return [Bucket(-Z_STEP, Z_STEP, low, high, count, closed=True)]

    n = math.ceil((z_end - z_start) / Z_STEP)
    edges = [z_start + i * Z_STEP for i in range(n + 1)]
    values = [value_at_zscore(stats, z) for z in edges]

    # Truncation in value_at_zscore must not drop the extreme inliers.
    if zscore_at_value(stats, stats.norm_min) >= -Z_LIMIT:
        values[0] = min(values[0], stats.norm_min)
    if zscore_at_value(stats, stats.norm_max) <= Z_LIMIT:
        values[-1] = max(values[-1], stats.norm_max)

    buckets = []
    for i in range(n):
        closed = i == n - 1
        count = count_in_range(arr, values[i], values[i + 1], inclusive=closed)
        buckets.append(Bucket(edges[i], edges[i + 1], values[i], values[i + 1], count, closed))

    _log.debug(
        "histogram_rendered",
        buckets=len(buckets),
        z_start=z_start,
        z_end=z_end,
        counted=sum(b.count for b in buckets),
    )
    return buckets


def bar_unit(total: int) -> int:
    """Samples represented by one bar character."""
    return max(1, total >> BAR_SHIFT)


def render_bar(count: int, total: int) -> str:
    filled = min(BAR_WIDTH, count // bar_unit(total))
    return BAR_CHAR * filled + " " * (BAR_WIDTH - filled)


def render_row(bucket: Bucket, total: int) -> str:
    """``<low> -> <high> : <bar> : <count>`` with fixed-width columns."""
    return (
        f"{format_fixed(bucket.low, VALUE_WIDTH)} -> "
        f"{format_fixed(bucket.high, VALUE_WIDTH)} : "
        f"{render_bar(bucket.count, total)} : "
        f"{format_fixed(bucket.count, COUNT_WIDTH)}"
    )


def render_histogram(samples: SampleLike, stats: StatsRecord) -> list[str]:
    """Return one text row per bucket of the z-score histogram."""
    return [render_row(b, stats.count) for b in zhistogram(samples, stats)]
