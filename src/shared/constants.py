from enum import Enum

# Полностью непрозрачный альфа-канал (все выходные цвета непрозрачны)
OPAQUE_ALPHA = 255

# Диапазон 8-битного канала
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Допустимый диапазон нормализованного значения t
T_MIN = 0.0
T_MAX = 1.0

# Границы поддиапазона радуги: от фиолетового (индекс 8) до красного (индекс 29)
RAINBOW_PURPLE_START = 8
RAINBOW_PURPLE_STOP = 30

# Размер LUT по умолчанию
DEFAULT_LUT_SIZE = 2048

# Минимальный размер LUT (концы шкалы)
MIN_LUT_SIZE = 2

# Размер полосы-шкалы по умолчанию (px)
DEFAULT_STRIP_WIDTH_PX = 500
DEFAULT_STRIP_HEIGHT_PX = 100

# Источник цветовых схем
PAUL_TOL_URL = 'https://personal.sron.nl/~pault/'


class PaletteName(str, Enum):
    INCANDESCENT = 'INCANDESCENT'
    IRIDESCENT = 'IRIDESCENT'
    RAINBOW = 'RAINBOW'
    RAINBOW_PURPLE_TO_RED = 'RAINBOW_PURPLE_TO_RED'


# Человекочитаемые названия
PALETTE_LABELS: dict[PaletteName, str] = {
    PaletteName.INCANDESCENT: 'Incandescent',
    PaletteName.IRIDESCENT: 'Iridescent',
    PaletteName.RAINBOW: 'Smooth rainbow',
    PaletteName.RAINBOW_PURPLE_TO_RED: 'Smooth rainbow (purple to red)',
}


def default_palette_name() -> PaletteName:
    return PaletteName.RAINBOW_PURPLE_TO_RED


def parse_palette_name(name: PaletteName | str) -> PaletteName:
    """Resolve a palette name given as enum member or case-insensitive string."""
    if isinstance(name, PaletteName):
        return name
    key = str(name).strip().upper().replace('-', '_').replace(' ', '_')
    try:
        return PaletteName(key)
    except ValueError:
        known = ', '.join(p.value for p in PaletteName)
        msg = f'Unknown palette: {name!r} (known: {known})'
        raise KeyError(msg) from None
