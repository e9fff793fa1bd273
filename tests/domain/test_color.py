"""Tests for domain.color."""
import dataclasses

import numpy as np
import pytest

from domain.color import Color


class TestColor:
    def test_default_alpha_opaque(self):
        assert Color(1, 2, 3).a == 255

    def test_value_equality_and_hash(self):
        assert Color(1, 2, 3) == Color(1, 2, 3, 255)
        assert hash(Color(1, 2, 3)) == hash(Color(1, 2, 3, 255))
        assert Color(1, 2, 3) != Color(1, 2, 3, 0)

    def test_immutable(self):
        c = Color(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        'channels', [(256, 0, 0), (0, -1, 0), (0, 0, 300), (0, 0, 0, 256)]
    )
    def test_channel_range(self, channels):
        with pytest.raises(ValueError, match=r'\[0, 255\]'):
            Color(*channels)

    def test_numpy_integers_stored_as_int(self):
        c = Color(np.uint8(200), np.int64(3), np.int32(0), np.uint8(255))
        assert c == Color(200, 3, 0)
        assert all(type(v) is int for v in c.rgba)
        assert hash(c) == hash(Color(200, 3, 0))

    def test_numpy_integer_out_of_range(self):
        with pytest.raises(ValueError):
            Color(np.int64(256), 0, 0)

    @pytest.mark.parametrize('bad', [1.5, '1', True, np.float64(2.0)])
    def test_channel_type(self, bad):
        with pytest.raises(TypeError):
            Color(bad, 0, 0)

    def test_tuples(self):
        c = Color(10, 20, 30, 40)
        assert c.rgb == (10, 20, 30)
        assert c.rgba == (10, 20, 30, 40)

    def test_from_tuple(self):
        assert Color.from_tuple((1, 2, 3)) == Color(1, 2, 3)
        assert Color.from_tuple((1, 2, 3, 4)) == Color(1, 2, 3, 4)
        with pytest.raises(ValueError):
            Color.from_tuple((1, 2))

    def test_hex(self):
        assert Color.from_hex('#6f4c9b') == Color(111, 76, 155)
        assert Color.from_hex('6F4C9B80') == Color(111, 76, 155, 128)
        assert Color(218, 34, 34).hex == '#da2222'

    @pytest.mark.parametrize('code', ['#fff', '#gggggg', ''])
    def test_hex_invalid(self, code):
        with pytest.raises(ValueError):
            Color.from_hex(code)

    def test_opaque(self):
        c = Color(1, 2, 3)
        assert c.opaque() is c
        assert Color(1, 2, 3, 7).opaque() == c
