"""Text report: summary block, z-score histogram and the quarter-split driver."""

from __future__ import annotations

import numpy as np
import structlog

from src.common.console import DIV, header
from src.common.constants import SPLIT_PARTS
from src.constats.aggregator import StatsRecord, compute_stats
from src.constats.errors import DegenerateDistributionError, InvalidInputError
from src.constats.histogram import render_histogram
from src.constats.samples import SampleLike, as_samples
from src.constats.tolerance import OutlierStrategy

_log = structlog.get_logger("report")


def _opt(value: int | None) -> str:
    return "n/a" if value is None else str(value)


def format_stats(stats: StatsRecord) -> list[str]:
    """Return the summary block for *stats*."""
    lines = [
        f"Sample Size            : {stats.count}",
        f"Average value          : {stats.mean:f}",
        f"Minimum value          : {stats.min}",
        f"Maximum value          : {stats.max}",
        f"Standard Deviation     : {stats.stdev:f}",
        f"Mean Absolute Deviation: {stats.abdev:f}",
        "",
        f"Outlier Count   : {stats.outlier_count}",
    ]
    if stats.outlier_count > 0:
        lines.append("Without Outliers:")
        lines.append(f"\tAverage value          : {stats.norm_mean:f}")
        lines.append(f"\tMinimum value          : {_opt(stats.norm_min)}")
        lines.append(f"\tMaximum value          : {_opt(stats.norm_max)}")
        lines.append(f"\tStandard Deviation     : {stats.norm_stdev:f}")
        lines.append(f"\tMean Absolute Deviation: {stats.norm_abdev:f}")
    return lines


def format_report(samples: SampleLike, stats: StatsRecord) -> list[str]:
    """Return the full report: summary, histogram and trailing summary."""
    lines = [DIV, *format_stats(stats), ""]
    try:
        lines.extend(render_histogram(samples, stats))
    except DegenerateDistributionError as exc:
        _log.warning("histogram_skipped", reason=str(exc))
        lines.append(f"(no histogram: {exc})")
    lines.append("")
    lines.append("Summary:")
    lines.append(f"norm mean:\t{stats.norm_mean:f};\tnorm abs dev:\t{stats.norm_abdev:f}")
    lines.append(f"min:\t\t{stats.min};\t\tmax:\t\t{stats.max}")
    lines.append(DIV)
    return lines


def print_stats(samples: SampleLike, stats: StatsRecord) -> None:
    for line in format_report(samples, stats):
        print(line)


def print_info(
    samples: SampleLike,
    strategy: OutlierStrategy | None = None,
) -> StatsRecord:
    """Compute statistics of *samples*, print the report and return them."""
    arr = as_samples(samples)
    stats = compute_stats(arr, strategy)
    print_stats(arr, stats)
    return stats


def print_info_split(
    samples: SampleLike,
    strategy: OutlierStrategy | None = None,
) -> list[StatsRecord]:
    """Report each of four contiguous, near-equal quarters of *samples*."""
    arr = as_samples(samples)
    if arr.size < SPLIT_PARTS:
        raise InvalidInputError(
            f"need at least {SPLIT_PARTS} samples to split, got {arr.size}"
        )

    results = []
    start = 0
    for idx, part in enumerate(np.array_split(arr, SPLIT_PARTS), start=1):
        end = start + part.size
        print(header(f"Part {idx}/{SPLIT_PARTS}  (samples {start}..{end - 1})"))
        results.append(print_info(part, strategy))
        start = end
    return results
