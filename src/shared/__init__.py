"""Shared constants and helpers."""
from shared.constants import (
    OPAQUE_ALPHA,
    PaletteName,
    default_palette_name,
    parse_palette_name,
)

__all__ = [
    'OPAQUE_ALPHA',
    'PaletteName',
    'default_palette_name',
    'parse_palette_name',
]
