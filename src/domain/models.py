from pydantic import BaseModel, field_validator

from domain.sequence import ColorSequence
from palettes import get_palette
from shared.constants import (
    DEFAULT_LUT_SIZE,
    DEFAULT_STRIP_HEIGHT_PX,
    DEFAULT_STRIP_WIDTH_PX,
    MIN_LUT_SIZE,
    PaletteName,
    default_palette_name,
    parse_palette_name,
)


class GradientSettings(BaseModel):
    """Настройки градиента: палитра, направление шкалы, размеры LUT и полосы."""

    model_config = {
        'extra': 'ignore',  # игнорировать лишние поля из TOML
    }

    # Палитра (опорные цвета)
    palette: PaletteName = default_palette_name()
    # Инвертировать шкалу (high -> low)
    reverse: bool = False
    # Размер таблицы цветов для ColorMapper
    lut_size: int = DEFAULT_LUT_SIZE

    # Размер полосы-шкалы (px)
    strip_width_px: int = DEFAULT_STRIP_WIDTH_PX
    strip_height_px: int = DEFAULT_STRIP_HEIGHT_PX
    # Вертикальная полоса (верх = высокие значения)
    vertical: bool = False

    @field_validator('palette', mode='before')
    @classmethod
    def validate_palette(cls, v: PaletteName | str) -> PaletteName:
        try:
            return parse_palette_name(v)
        except KeyError as e:
            raise ValueError(str(e.args[0])) from None

    @field_validator('lut_size')
    @classmethod
    def validate_lut_size(cls, v: int) -> int:
        v = int(v)
        if v < MIN_LUT_SIZE:
            msg = f'lut_size должен быть не меньше {MIN_LUT_SIZE}'
            raise ValueError(msg)
        return v

    @field_validator('strip_width_px', 'strip_height_px')
    @classmethod
    def validate_strip_size(cls, v: int) -> int:
        v = int(v)
        if v < 1:
            msg = 'Размер полосы должен быть положительным'
            raise ValueError(msg)
        return v

    def resolve_sequence(self) -> ColorSequence:
        """Palette colors, reversed if requested."""
        seq = get_palette(self.palette)
        return seq.reversed_sequence() if self.reverse else seq
