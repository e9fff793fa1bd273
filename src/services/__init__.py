"""Services package - gradient interpolation and rendering."""

from services.color_utils import (
    ColorMapper,
    build_color_lut,
    check_t,
    check_t_array,
    color_at_lut,
    gradient,
    incandescent,
    interpolate,
    interpolate_array,
    iridescent,
    lerp,
    palette_gradient,
    rainbow,
)
from services.gradient_strip import (
    gradient_ramp,
    render_gradient_strip,
    render_settings_strip,
)

__all__ = [
    'ColorMapper',
    'build_color_lut',
    'check_t',
    'check_t_array',
    'color_at_lut',
    'gradient',
    'gradient_ramp',
    'incandescent',
    'interpolate',
    'interpolate_array',
    'iridescent',
    'lerp',
    'palette_gradient',
    'rainbow',
    'render_gradient_strip',
    'render_settings_strip',
]
