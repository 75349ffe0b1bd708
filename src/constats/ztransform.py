"""Conversion between raw sample values and z-scores.

Both directions are parameterised by the outlier-free (normalized) mean and
standard deviation of a :class:`StatsRecord`.
"""

from __future__ import annotations

from src.constats.aggregator import StatsRecord
from src.constats.errors import DegenerateDistributionError


def _require_normalized(stats: StatsRecord) -> None:
    if stats.degenerate:
        raise DegenerateDistributionError(
            f"all {stats.count} samples are outliers; no normalized distribution"
        )


def value_at_zscore(stats: StatsRecord, z: float) -> int:
    """Sample value lying *z* normalized deviations from the normalized mean."""
    _require_normalized(stats)
    return int(stats.norm_mean + z * stats.norm_stdev)


def zscore_at_value(stats: StatsRecord, value: int) -> float:
    """z-score of *value*; 0 for a zero-width distribution."""
    _require_normalized(stats)
    if stats.norm_stdev == 0:
        return 0.0
    return (value - stats.norm_mean) / stats.norm_stdev
