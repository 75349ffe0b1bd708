"""Constats-specific exceptions."""


class ConstatsError(Exception):
    """Base class for every failure raised by the analysis pipeline."""


class InvalidInputError(ConstatsError, ValueError):
    """Raised for an empty or malformed sample set, or an invalid threshold.

    Raised before any computation starts; no partial result exists.
    """


class DegenerateDistributionError(ConstatsError):
    """Raised when the outlier-free distribution is needed but empty.

    This happens when every sample is classified as an outlier, so the
    normalized mean and deviation are undefined.
    """


class FormattingOverflowError(ConstatsError, ValueError):
    """Raised when a value cannot fit its column even with a magnitude suffix."""

    def __init__(self, value: int, width: int) -> None:
        super().__init__(f"{value} does not fit in {width} characters")
        self.value = value
        self.width = width
