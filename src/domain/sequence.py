"""Ordered color sequences and read-only sub-range views."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

import numpy as np

from domain.color import Color
from domain.errors import EmptySequenceError


def _as_color(value: Color | tuple[int, ...]) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_tuple(tuple(value))


class ColorSequence(Sequence[Color]):
    """
    Immutable, non-empty, ordered list of colors (low end first).

    A sub-range view (``seq[8:30]``, ``seq.view(8, 30)``) does not copy the
    colors: it keeps a reference to the root backing tuple plus an offset and
    a length.
    """

    __slots__ = ('_base', '_length', '_offset')

    def __init__(self, colors: Iterable[Color | tuple[int, ...]]) -> None:
        base = tuple(_as_color(c) for c in colors)
        if not base:
            msg = 'Color sequence must contain at least one color'
            raise EmptySequenceError(msg)
        self._base = base
        self._offset = 0
        self._length = len(base)

    @classmethod
    def _from_storage(
        cls, base: tuple[Color, ...], offset: int, length: int
    ) -> ColorSequence:
        if length <= 0:
            msg = f'Empty sub-range view (offset={offset})'
            raise EmptySequenceError(msg)
        seq = cls.__new__(cls)
        seq._base = base
        seq._offset = offset
        seq._length = length
        return seq

    @property
    def base(self) -> tuple[Color, ...]:
        """Backing storage shared by a sequence and all of its views."""
        return self._base

    @property
    def offset(self) -> int:
        """Start of this sequence within :attr:`base`."""
        return self._offset

    @property
    def is_view(self) -> bool:
        return self._offset != 0 or self._length != len(self._base)

    def shares_storage_with(self, other: ColorSequence) -> bool:
        return self._base is other._base

    def view(self, start: int, stop: int | None = None) -> ColorSequence:
        """Read-only sub-range ``[start, stop)`` sharing this sequence's storage."""
        begin, end, _ = slice(start, stop).indices(self._length)
        return self._from_storage(self._base, self._offset + begin, end - begin)

    def __len__(self) -> int:
        return self._length

    @overload
    def __getitem__(self, index: int) -> Color: ...

    @overload
    def __getitem__(self, index: slice) -> ColorSequence: ...

    def __getitem__(self, index: int | slice) -> Color | ColorSequence:
        if isinstance(index, slice):
            if index.step not in (None, 1):
                msg = 'Sub-range views only support step 1'
                raise ValueError(msg)
            return self.view(
                0 if index.start is None else index.start,
                index.stop,
            )
        i = int(index)
        if i < 0:
            i += self._length
        if not (0 <= i < self._length):
            msg = f'Color index {index} out of range for length {self._length}'
            raise IndexError(msg)
        return self._base[self._offset + i]

    def __iter__(self) -> Iterator[Color]:
        base = self._base
        for i in range(self._offset, self._offset + self._length):
            yield base[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSequence):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other)
        )

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        if self.is_view:
            return (
                f'ColorSequence(len={self._length}, view '
                f'[{self._offset}:{self._offset + self._length}] '
                f'of {len(self._base)})'
            )
        return f'ColorSequence(len={self._length})'

    def reversed_sequence(self) -> ColorSequence:
        """New sequence in high-to-low order (inverts the mapped scale)."""
        return ColorSequence(reversed(tuple(self)))

    def as_array(self) -> np.ndarray:
        """Colors as an (N, 4) uint8 array of RGBA rows."""
        return np.array([c.rgba for c in self], dtype=np.uint8)
