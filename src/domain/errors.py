"""Gradient error types."""


class GradientError(Exception):
    """Base class for gradient errors."""


class OutOfRangeError(GradientError, ValueError):
    """Normalized value outside [0, 1] (or NaN) passed to an interpolator."""

    def __init__(self, t: float) -> None:
        self.t = t
        super().__init__(f'Value must be in [0.0, 1.0], got {t!r}')


class EmptySequenceError(GradientError, ValueError):
    """Color sequence (or sub-range view) without any colors."""
