"""CLI entrypoint for the sample analysis script."""

from __future__ import annotations

import argparse
import logging
import math
import textwrap
from pathlib import Path

import numpy as np

from src.common.console import fail, info, ok, warn
from src.common.constants import (
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SAMPLE_HIGH,
    DEFAULT_SAMPLE_LOW,
)
from src.common.logging import configure_structlog, get_json_file_logger
from src.constats.aggregator import StatsRecord
from src.constats.errors import ConstatsError
from src.constats.histogram import zhistogram
from src.constats.plots import plot_zhistogram
from src.constats.report import print_info, print_info_split
from src.constats.samples import generate_samples, load_samples
from src.constats.tolerance import FixedThreshold, OutlierStrategy, SketchTolerance


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Descriptive statistics, outliers and a z-score histogram.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              python3 analyze_samples.py                      # 1M random samples
              python3 analyze_samples.py -n 10000 --seed 7
              python3 analyze_samples.py -i latencies.txt --split
              python3 analyze_samples.py -i timings.npy --threshold 500 --plot hist.png
        """),
    )
    parser.add_argument(
        "-n", "--count", type=int, default=DEFAULT_SAMPLE_COUNT,
        help=f"Number of random samples to generate. Default: {DEFAULT_SAMPLE_COUNT:,}",
    )
    parser.add_argument("--low", type=int, default=DEFAULT_SAMPLE_LOW,
                        help="Smallest generated value (inclusive)")
    parser.add_argument("--high", type=int, default=DEFAULT_SAMPLE_HIGH,
                        help="Largest generated value (inclusive)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random generator")
    parser.add_argument(
        "-i", "--input", metavar="FILE", type=Path, default=None,
        help="Load samples from FILE (.npy, or one integer per line) instead of generating",
    )
    parser.add_argument(
        "--split", action="store_true", default=False,
        help="Report each quarter of the sample set separately",
    )
    parser.add_argument(
        "--threshold", type=int, default=None,
        help="Fixed outlier tolerance instead of the sketch estimate",
    )
    parser.add_argument("--plot", metavar="FILE", type=Path, default=None,
                        help="Also write the z-score histogram as a PNG")
    parser.add_argument("--log-file", metavar="FILE", type=Path, default=None,
                        help="Append a JSON line per analysed set to FILE")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Enable debug logging")
    return parser


def _plot_paths(base: Path, parts: int) -> list[Path]:
    if parts == 1:
        return [base]
    return [base.with_name(f"{base.stem}_part{i}{base.suffix}") for i in range(1, parts + 1)]


def _json_fields(stats: StatsRecord) -> dict:
    """Record fields with NaN and infinity replaced by None (JSON has neither)."""
    return {
        k: None if isinstance(v, float) and not math.isfinite(v) else v
        for k, v in stats.as_dict().items()
    }


def _run(args: argparse.Namespace) -> list[StatsRecord]:
    if args.input is not None:
        samples = load_samples(args.input)
        info(f"Loaded {samples.size:,} samples from {args.input}")
    else:
        samples = generate_samples(args.count, args.low, args.high, seed=args.seed)
        info(f"Generated {samples.size:,} samples in [{args.low}, {args.high}]")

    strategy: OutlierStrategy = (
        SketchTolerance() if args.threshold is None else FixedThreshold(args.threshold)
    )

    if args.split:
        results = print_info_split(samples, strategy)
        parts = np.array_split(samples, len(results))
    else:
        results = [print_info(samples, strategy)]
        parts = [samples]

    if args.plot is not None:
        for path, part, stats in zip(_plot_paths(args.plot, len(parts)), parts, results):
            if stats.degenerate:
                warn(f"No histogram to plot for {path}: all samples are outliers")
                continue
            plot_zhistogram(zhistogram(part, stats), stats, path)
            ok(f"Histogram → {path}")

    if args.log_file is not None:
        file_log = get_json_file_logger(args.log_file)
        for idx, stats in enumerate(results, start=1):
            file_log.info(
                "analysis_complete",
                part=idx,
                parts=len(results),
                strategy=strategy.name,
                **_json_fields(stats),
            )
    return results


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_structlog(logging.DEBUG if args.verbose else logging.INFO)

    try:
        _run(args)
    except ConstatsError as exc:
        fail(str(exc))
    except OSError as exc:
        fail(f"{exc.strerror}: {exc.filename}")
