"""Descriptive statistics with and without outliers.

:func:`compute_stats` makes three sweeps over the sample set:

1. the exact integer sum, for the raw mean;
2. raw deviation, extrema and inlier classification against the tolerance
   window ``[mean - tolerance, mean + tolerance]``;
3. deviation of the inliers around their own mean.

Deviations are population statistics (divided by ``n``, not ``n - 1``).
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Optional

import numpy as np
import structlog

from src.common.constants import INT64_MAX, INT64_MIN
from src.constats.samples import SampleLike, as_samples
from src.constats.tolerance import OutlierStrategy, SketchTolerance

_log = structlog.get_logger("aggregator")


@dataclass(frozen=True)
class StatsRecord:
    """Raw and outlier-free statistics of one sample set."""

    count: int
    mean: float
    stdev: float
    abdev: float
    min: int
    max: int

    tolerance: float
    outlier_count: int

    # Undefined (NaN / None) when every sample is an outlier.
    norm_mean: float
    norm_stdev: float
    norm_abdev: float
    norm_min: Optional[int]
    norm_max: Optional[int]

    @property
    def inlier_count(self) -> int:
        return self.count - self.outlier_count

    @property
    def unbounded(self) -> bool:
        return math.isinf(self.tolerance)

    @property
    def degenerate(self) -> bool:
        """True when no sample survived outlier removal."""
        return self.inlier_count == 0

    def as_dict(self) -> dict:
        return asdict(self)


def _deviation(values: np.ndarray, mean: float) -> tuple[float, float]:
    """Return ``(stdev, abdev)`` of *values* around *mean*."""
    dev = np.abs(values.astype(np.float64) - mean)
    n = values.size
    return math.sqrt(float((dev * dev).sum()) / n), float(dev.sum()) / n


def inlier_mask(samples: np.ndarray, mean: float, tolerance: float) -> np.ndarray:
    """Boolean mask of samples inside ``[mean - tolerance, mean + tolerance]``."""
    if math.isinf(tolerance):
        return np.ones(samples.size, dtype=bool)
    lower = max(math.ceil(mean - tolerance), INT64_MIN)
    upper = min(math.floor(mean + tolerance), INT64_MAX)
    return (samples >= lower) & (samples <= upper)


def compute_stats(
    samples: SampleLike,
    strategy: OutlierStrategy | None = None,
) -> StatsRecord:
    """Compute a :class:`StatsRecord` for *samples*.

    *strategy* decides the outlier tolerance and defaults to
    :class:`SketchTolerance`. Raises :class:`InvalidInputError` for an empty
    or malformed sample set.
    """
    arr = as_samples(samples)
    strategy = strategy or SketchTolerance()
    count = int(arr.size)

    mean = sum(arr.tolist()) / count
    tolerance = strategy.tolerance(arr)

    stdev, abdev = _deviation(arr, mean)
    mask = inlier_mask(arr, mean, tolerance)
    inliers = arr[mask]
    outlier_count = count - int(inliers.size)

    if inliers.size:
        norm_mean = sum(inliers.tolist()) / inliers.size
        norm_stdev, norm_abdev = _deviation(inliers, norm_mean)
        norm_min, norm_max = int(inliers.min()), int(inliers.max())
    else:
        norm_mean = norm_stdev = norm_abdev = math.nan
        norm_min = norm_max = None
        _log.warning(
            "degenerate_distribution",
            count=count,
            tolerance=tolerance,
            strategy=strategy.name,
        )

    stats = StatsRecord(
        count=count,
        mean=mean,
        stdev=stdev,
        abdev=abdev,
        min=int(arr.min()),
        max=int(arr.max()),
        tolerance=tolerance,
        outlier_count=outlier_count,
        norm_mean=norm_mean,
        norm_stdev=norm_stdev,
        norm_abdev=norm_abdev,
        norm_min=norm_min,
        norm_max=norm_max,
    )
    _log.debug(
        "stats_computed",
        count=count,
        strategy=strategy.name,
        tolerance=tolerance,
        outliers=outlier_count,
    )
    return stats
