"""Registry of the named published palettes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from domain.sequence import ColorSequence
from palettes.tol import (
    INCANDESCENT,
    IRIDESCENT,
    RAINBOW,
    RAINBOW_PURPLE_TO_RED,
)
from shared.constants import (
    PALETTE_LABELS,
    PAUL_TOL_URL,
    PaletteName,
    parse_palette_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteInfo:
    """Descriptive metadata of a published palette."""

    name: PaletteName
    label: str
    url: str
    print_friendly: bool = True
    note: str = ''


def _build_registry() -> dict[PaletteName, ColorSequence]:
    registry = {
        PaletteName.INCANDESCENT: INCANDESCENT,
        PaletteName.IRIDESCENT: IRIDESCENT,
        PaletteName.RAINBOW: RAINBOW,
        PaletteName.RAINBOW_PURPLE_TO_RED: RAINBOW_PURPLE_TO_RED,
    }
    logger.debug(
        'Palette registry built: %s',
        ', '.join(f'{name.value}={len(seq)}' for name, seq in registry.items()),
    )
    return registry


PALETTES: dict[PaletteName, ColorSequence] = _build_registry()

PALETTE_INFO: dict[PaletteName, PaletteInfo] = {
    PaletteName.INCANDESCENT: PaletteInfo(
        name=PaletteName.INCANDESCENT,
        label=PALETTE_LABELS[PaletteName.INCANDESCENT],
        url=f'{PAUL_TOL_URL}#fig:scheme_incandescent',
        print_friendly=False,
        note='Not print friendly.',
    ),
    PaletteName.IRIDESCENT: PaletteInfo(
        name=PaletteName.IRIDESCENT,
        label=PALETTE_LABELS[PaletteName.IRIDESCENT],
        url=f'{PAUL_TOL_URL}#fig:scheme_iridescent',
    ),
    PaletteName.RAINBOW: PaletteInfo(
        name=PaletteName.RAINBOW,
        label=PALETTE_LABELS[PaletteName.RAINBOW],
        url=f'{PAUL_TOL_URL}#fig:scheme_rainbow_smooth',
        note='Does not have to be used over the full range.',
    ),
    PaletteName.RAINBOW_PURPLE_TO_RED: PaletteInfo(
        name=PaletteName.RAINBOW_PURPLE_TO_RED,
        label=PALETTE_LABELS[PaletteName.RAINBOW_PURPLE_TO_RED],
        url=f'{PAUL_TOL_URL}#fig:scheme_rainbow_smooth',
        note='Small values are purple, large values are red.',
    ),
}


def get_palette(name: PaletteName | str) -> ColorSequence:
    """Palette by name (enum member or case-insensitive string)."""
    return PALETTES[parse_palette_name(name)]


def palette_info(name: PaletteName | str) -> PaletteInfo:
    return PALETTE_INFO[parse_palette_name(name)]


def list_palettes() -> list[PaletteName]:
    return list(PALETTES)


__all__ = [
    'INCANDESCENT',
    'IRIDESCENT',
    'PALETTES',
    'PALETTE_INFO',
    'RAINBOW',
    'RAINBOW_PURPLE_TO_RED',
    'PaletteInfo',
    'get_palette',
    'list_palettes',
    'palette_info',
]
