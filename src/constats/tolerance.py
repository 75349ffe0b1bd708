"""Outlier tolerance: the prefix sketch and the classification strategies.

The aggregator asks a strategy for a single deviation bound; samples further
than that from the mean are outliers. Two strategies exist:

* :class:`SketchTolerance` derives the bound from a cheap look at the first
  sixteenth of the data (5 x its mean absolute deviation).
* :class:`FixedThreshold` uses a caller-supplied bound.

Both return :data:`UNBOUNDED` when no sample can ever be an outlier.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from src.common.constants import (
    SKETCH_ABDEV_LIMIT,
    SKETCH_MIN_SIZE,
    SKETCH_SHIFT,
    TOLERANCE_MULTIPLIER,
)
from src.constats.errors import InvalidInputError

UNBOUNDED = math.inf


def sketch_size(count: int) -> int:
    """Number of leading samples the sketch looks at."""
    return count >> SKETCH_SHIFT if count > SKETCH_MIN_SIZE else count


def sketch_abdev(samples: np.ndarray) -> float:
    """Mean absolute deviation of the sketch prefix around its own mean."""
    prefix = samples[: sketch_size(samples.size)]
    mean = sum(prefix.tolist()) / prefix.size
    return float(np.abs(prefix.astype(np.float64) - mean).sum() / prefix.size)


def sketch_tolerance(samples: np.ndarray) -> float:
    """Return ``5 x sketch abdev`` truncated to an int, or :data:`UNBOUNDED`."""
    abdev = sketch_abdev(samples)
    if abdev > SKETCH_ABDEV_LIMIT:
        return UNBOUNDED
    return int(TOLERANCE_MULTIPLIER * abdev)


class OutlierStrategy:
    """Base class for outlier classification strategies."""

    name: str = ""

    def tolerance(self, samples: np.ndarray) -> float:  # pragma: no cover
        raise NotImplementedError


@dataclass(frozen=True)
class SketchTolerance(OutlierStrategy):
    """Tolerance estimated from the leading sixteenth of the sample set."""

    name = "sketch"

    def tolerance(self, samples: np.ndarray) -> float:
        return sketch_tolerance(samples)


@dataclass(frozen=True)
class FixedThreshold(OutlierStrategy):
    """Caller-supplied tolerance; ``None`` means nothing is an outlier."""

    bound: int | None = None
    name = "fixed"

    def __post_init__(self) -> None:
        if self.bound is not None and self.bound < 0:
            raise InvalidInputError(f"threshold must be non-negative, got {self.bound}")

    def tolerance(self, samples: np.ndarray) -> float:
        return UNBOUNDED if self.bound is None else int(self.bound)
