"""Color gradient interpolation over ordered color sequences."""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING

import numpy as np

from domain.color import Color
from domain.errors import OutOfRangeError
from palettes import (
    INCANDESCENT,
    IRIDESCENT,
    RAINBOW,
    RAINBOW_PURPLE_TO_RED,
    get_palette,
)
from shared.constants import DEFAULT_LUT_SIZE, OPAQUE_ALPHA, T_MAX, T_MIN

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from domain.models import GradientSettings
    from domain.sequence import ColorSequence
    from shared.constants import PaletteName

logger = logging.getLogger(__name__)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def check_t(t: float) -> float:
    """
    Validate a normalized value.

    Raises:
        OutOfRangeError: t is not a real number, is outside [0, 1] or NaN

    """
    if isinstance(t, bool) or not isinstance(t, numbers.Real):
        raise OutOfRangeError(t)
    t = float(t)
    if not (T_MIN <= t <= T_MAX):
        raise OutOfRangeError(t)
    return t


def check_t_array(values: ArrayLike) -> np.ndarray:
    """Array version of :func:`check_t`, returns float64 values."""
    raw = np.asarray(values)
    if not (
        np.issubdtype(raw.dtype, np.integer)
        or np.issubdtype(raw.dtype, np.floating)
    ):
        raise OutOfRangeError(raw.flat[0] if raw.size else values)
    t = raw.astype(np.float64)
    in_range = (t >= T_MIN) & (t <= T_MAX)
    if not np.all(in_range):
        raise OutOfRangeError(float(t[~in_range].flat[0]))
    return t


def interpolate(sequence: ColorSequence, t: float) -> Color:
    """
    Color at normalized position t of a sequence (low to high).

    Channels are blended linearly between the two surrounding control points
    and truncated to int. The result is always opaque.

    Args:
        sequence: Control points, first element is the low end
        t: Normalized value in [0, 1]

    Returns:
        Interpolated color

    Raises:
        OutOfRangeError: t is outside [0, 1]

    """
    t = check_t(t)
    n = len(sequence)
    if n == 1:
        return sequence[0].opaque()

    scaled = t * (n - 1)
    pos = math.floor(scaled)
    delta = scaled - pos

    c = sequence[pos]
    if pos == n - 1:
        return c.opaque()

    nxt = sequence[pos + 1]
    return Color(
        int(lerp(c.r, nxt.r, delta)),
        int(lerp(c.g, nxt.g, delta)),
        int(lerp(c.b, nxt.b, delta)),
        OPAQUE_ALPHA,
    )


def gradient(t: float) -> Color:
    """
    Default gradient from low to high: smooth rainbow, purple to red.

    Small values are purple, large values are red.
    """
    return interpolate(RAINBOW_PURPLE_TO_RED, t)


def incandescent(t: float) -> Color:
    return interpolate(INCANDESCENT, t)


def iridescent(t: float) -> Color:
    return interpolate(IRIDESCENT, t)


def rainbow(t: float) -> Color:
    return interpolate(RAINBOW, t)


def palette_gradient(name: PaletteName | str, t: float) -> Color:
    """Gradient over a registered palette looked up by name."""
    return interpolate(get_palette(name), t)


def interpolate_array(sequence: ColorSequence, values: ArrayLike) -> np.ndarray:
    """
    Vectorized :func:`interpolate` over an array of normalized values.

    Produces exactly the same channel values as the scalar version.

    Args:
        sequence: Control points, first element is the low end
        values: Normalized values in [0, 1], any shape

    Returns:
        RGBA array of shape values.shape + (4,), uint8

    Raises:
        OutOfRangeError: any value is outside [0, 1] or NaN

    """
    t = check_t_array(values)

    colors = sequence.as_array()[:, :3].astype(np.float64)
    n = len(colors)

    scaled = t * (n - 1)
    pos = np.floor(scaled).astype(np.intp)
    delta = scaled - pos
    # at pos == n-1 delta is 0, so blending with itself returns c unchanged
    nxt = np.minimum(pos + 1, n - 1)

    c = colors[pos]
    rgb = c + (colors[nxt] - c) * delta[..., np.newaxis]

    out = np.empty((*t.shape, 4), dtype=np.uint8)
    out[..., :3] = rgb.astype(np.uint8)
    out[..., 3] = OPAQUE_ALPHA
    return out


def build_color_lut(
    sequence: ColorSequence,
    lut_size: int = DEFAULT_LUT_SIZE,
) -> list[Color]:
    """
    Build a lookup table (LUT) from a color sequence.

    Args:
        sequence: Control points, first element is the low end
        lut_size: Size of the resulting LUT

    Returns:
        List of colors, entry i is the color at t = i / (lut_size - 1)

    """
    if lut_size < 1:
        msg = f'lut_size must be positive, got {lut_size}'
        raise ValueError(msg)
    lut = [
        interpolate(sequence, i / (lut_size - 1) if lut_size > 1 else 0.0)
        for i in range(lut_size)
    ]
    logger.debug('Color LUT built: size=%d control_points=%d', lut_size, len(sequence))
    return lut


def color_at_lut(lut: list[Color], t: float) -> Color:
    """
    Get color from LUT at normalized position t.

    Args:
        lut: Color lookup table
        t: Normalized value in [0, 1]

    Returns:
        Nearest-below LUT entry

    Raises:
        OutOfRangeError: t is outside [0, 1]

    """
    t = check_t(t)
    idx = int(t * (len(lut) - 1))
    return lut[idx]


class ColorMapper:
    """Helper class for mapping values to colors using a LUT."""

    def __init__(
        self,
        sequence: ColorSequence,
        lut_size: int = DEFAULT_LUT_SIZE,
    ) -> None:
        self.sequence = sequence
        self._lut_list = build_color_lut(sequence, lut_size)
        self._lut = np.array([c.rgba for c in self._lut_list], dtype=np.uint8)

    @classmethod
    def from_settings(cls, settings: GradientSettings) -> ColorMapper:
        return cls(settings.resolve_sequence(), settings.lut_size)

    def color_at(self, t: float) -> Color:
        """Get color at normalized position t in [0, 1]."""
        return color_at_lut(self._lut_list, t)

    def colorize(self, values: ArrayLike) -> np.ndarray:
        """
        Map an array of normalized values through the LUT.

        Returns:
            RGBA array of shape values.shape + (4,), uint8

        """
        t = check_t_array(values)
        indices = (t * (len(self._lut) - 1)).astype(np.intp)
        return self._lut[indices]

    @property
    def lut(self) -> np.ndarray:
        """Access the underlying LUT as numpy array."""
        return self._lut
