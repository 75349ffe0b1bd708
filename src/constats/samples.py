"""Sample-set coercion, generation and loading."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

import numpy as np
import structlog

from src.common.constants import INT64_MAX, INT64_MIN
from src.constats.errors import InvalidInputError

SampleLike = Union[Sequence[int], np.ndarray]

_log = structlog.get_logger("samples")


def as_samples(samples: SampleLike) -> np.ndarray:
    """Return *samples* as a read-only 1-D int64 array.

    Raises :class:`InvalidInputError` for empty, multi-dimensional or
    non-integer input, and for values outside the signed 64-bit range.
    """
    try:
        arr = np.asarray(samples)
    except (OverflowError, ValueError) as exc:
        raise InvalidInputError(f"sample set is not a flat integer sequence: {exc}") from exc

    if arr.ndim != 1:
        raise InvalidInputError(f"sample set must be 1-D, got {arr.ndim}-D")
    if arr.size == 0:
        raise InvalidInputError("sample set is empty")
    if arr.dtype.kind not in "iu":
        raise InvalidInputError(f"sample set must hold integers, got dtype {arr.dtype}")
    if arr.dtype.kind == "u" and int(arr.max()) > INT64_MAX:
        raise InvalidInputError("sample set holds values above the signed 64-bit range")

    view = arr.astype(np.int64, copy=False).view()
    view.flags.writeable = False
    return view


def generate_samples(
    count: int,
    low: int,
    high: int,
    seed: int | None = None,
) -> np.ndarray:
    """Uniformly random integers in the closed range ``[low, high]``."""
    if count <= 0:
        raise InvalidInputError(f"sample count must be positive, got {count}")
    if low > high:
        raise InvalidInputError(f"empty sample range [{low}, {high}]")
    if low < INT64_MIN or high > INT64_MAX:
        raise InvalidInputError(
            f"sample range [{low}, {high}] exceeds the signed 64-bit range"
        )
    rng = np.random.default_rng(seed)
    samples = rng.integers(low, high, size=count, dtype=np.int64, endpoint=True)
    _log.debug("samples_generated", count=count, low=low, high=high, seed=seed)
    return samples


def load_samples(path: Path) -> np.ndarray:
    """Load a sample set from ``.npy`` or a text file of one integer per line.

    Blank lines and ``#`` comments are ignored in text files.
    """
    if path.suffix == ".npy":
        try:
            loaded = np.load(path, allow_pickle=False)
        except (ValueError, EOFError) as exc:
            raise InvalidInputError(f"{path}: not a readable .npy file: {exc}") from exc
        samples = as_samples(loaded)
        _log.info("samples_loaded", path=str(path), count=int(samples.size))
        return samples

    values: list[int] = []
    try:
        with open(path, encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.split("#", 1)[0].strip()
                if not line:
                    continue
                try:
                    values.append(int(line))
                except ValueError:
                    raise InvalidInputError(
                        f"{path}:{lineno}: not an integer: {line!r}"
                    ) from None
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"{path}: not a UTF-8 text file: {exc.reason}") from exc

    samples = as_samples(values)
    _log.info("samples_loaded", path=str(path), count=int(samples.size))
    return samples
