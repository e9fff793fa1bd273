"""Color value type."""

from __future__ import annotations

import numbers
from dataclasses import dataclass

from shared.constants import CHANNEL_MAX, CHANNEL_MIN, OPAQUE_ALPHA

HEX_RGB_LEN = 6
HEX_RGBA_LEN = 8


@dataclass(frozen=True)
class Color:
    """8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = OPAQUE_ALPHA

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b', 'a'):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                msg = f'Channel {name} must be int, got {type(v).__name__}'
                raise TypeError(msg)
            v = int(v)
            if not (CHANNEL_MIN <= v <= CHANNEL_MAX):
                msg = f'Channel {name} must be in [0, 255], got {v}'
                raise ValueError(msg)
            object.__setattr__(self, name, v)

    @classmethod
    def from_tuple(cls, values: tuple[int, ...]) -> Color:
        """Build from (R, G, B) or (R, G, B, A)."""
        if len(values) not in (3, 4):
            msg = f'Expected 3 or 4 channels, got {len(values)}'
            raise ValueError(msg)
        return cls(*values)

    @classmethod
    def from_hex(cls, code: str) -> Color:
        """Build from '#rrggbb' or '#rrggbbaa'."""
        s = code.strip().lstrip('#')
        if len(s) not in (HEX_RGB_LEN, HEX_RGBA_LEN):
            msg = f'Invalid hex color: {code!r}'
            raise ValueError(msg)
        try:
            channels = [int(s[i : i + 2], 16) for i in range(0, len(s), 2)]
        except ValueError:
            msg = f'Invalid hex color: {code!r}'
            raise ValueError(msg) from None
        return cls(*channels)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def opaque(self) -> Color:
        """Same color with a fully opaque alpha channel."""
        if self.a == OPAQUE_ALPHA:
            return self
        return Color(self.r, self.g, self.b, OPAQUE_ALPHA)
