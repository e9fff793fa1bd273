"""Gradient scale strips rendered as in-memory images."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from services.color_utils import interpolate_array
from shared.constants import DEFAULT_STRIP_HEIGHT_PX, DEFAULT_STRIP_WIDTH_PX

if TYPE_CHECKING:
    from domain.models import GradientSettings
    from domain.sequence import ColorSequence

logger = logging.getLogger(__name__)


def gradient_ramp(length: int) -> np.ndarray:
    """Normalized positions i / (length - 1) for i in [0, length)."""
    if length < 1:
        msg = f'length must be positive, got {length}'
        raise ValueError(msg)
    if length == 1:
        return np.zeros(1, dtype=np.float64)
    return np.arange(length, dtype=np.float64) / (length - 1)


def render_gradient_strip(
    sequence: ColorSequence,
    width: int = DEFAULT_STRIP_WIDTH_PX,
    height: int = DEFAULT_STRIP_HEIGHT_PX,
    *,
    vertical: bool = False,
) -> Image.Image:
    """
    Render a gradient scale from low to high.

    Horizontal strips go left (low) to right (high), vertical strips bottom
    (low) to top (high).

    Args:
        sequence: Control points, first element is the low end
        width: Strip width (px)
        height: Strip height (px)
        vertical: Vary the color along the vertical axis

    Returns:
        RGBA image

    """
    if width < 1 or height < 1:
        msg = f'Strip size must be positive, got {width}x{height}'
        raise ValueError(msg)

    if vertical:
        colors = interpolate_array(sequence, gradient_ramp(height)[::-1])
        arr = np.broadcast_to(colors[:, np.newaxis, :], (height, width, 4))
    else:
        colors = interpolate_array(sequence, gradient_ramp(width))
        arr = np.broadcast_to(colors[np.newaxis, :, :], (height, width, 4))

    logger.debug(
        'Gradient strip rendered: %dx%d vertical=%s control_points=%d',
        width,
        height,
        vertical,
        len(sequence),
    )
    return Image.fromarray(np.ascontiguousarray(arr))


def render_settings_strip(settings: GradientSettings) -> Image.Image:
    """Gradient strip for the palette and size given in settings."""
    return render_gradient_strip(
        settings.resolve_sequence(),
        settings.strip_width_px,
        settings.strip_height_px,
        vertical=settings.vertical,
    )
