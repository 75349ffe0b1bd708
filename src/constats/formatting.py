"""Fixed-width integer formatting with magnitude suffixes."""

from __future__ import annotations

from src.common.constants import MAGNITUDE_SUFFIXES
from src.constats.errors import FormattingOverflowError


def format_fixed(value: int, width: int) -> str:
    """Render *value* left-aligned in exactly *width* characters.

    Too many digits are dropped three at a time and replaced by a suffix
    (``K`` for 10^3 up to ``E`` for 10^18), e.g. ``1234567`` in five
    characters becomes ``1234K``. The result is truncated, not rounded.
    """
    value = int(value)
    if width <= 0:
        raise FormattingOverflowError(value, width)

    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    room = width - len(sign)
    if len(digits) <= room:
        return f"{sign}{digits}".ljust(width)

    for power, suffix in enumerate(MAGNITUDE_SUFFIXES, start=1):
        kept = len(digits) - 3 * power
        if kept < 1:
            break
        if kept + 1 <= room:
            return f"{sign}{digits[:kept]}{suffix}".ljust(width)

    raise FormattingOverflowError(value, width)
