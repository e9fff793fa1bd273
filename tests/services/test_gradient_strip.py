"""Tests for services.gradient_strip."""
import numpy as np
import pytest

from domain.models import GradientSettings
from palettes import INCANDESCENT
from services.color_utils import gradient
from services.gradient_strip import (
    gradient_ramp,
    render_gradient_strip,
    render_settings_strip,
)


class TestGradientRamp:
    def test_endpoints(self):
        ramp = gradient_ramp(5)
        assert ramp.tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_single(self):
        assert gradient_ramp(1).tolist() == [0.0]

    def test_invalid(self):
        with pytest.raises(ValueError):
            gradient_ramp(0)


class TestRenderGradientStrip:
    def test_horizontal(self, black_to_color):
        img = render_gradient_strip(black_to_color, width=5, height=2)
        assert img.mode == 'RGBA'
        assert img.size == (5, 2)
        assert img.getpixel((0, 0)) == (0, 0, 0, 255)
        assert img.getpixel((1, 1)) == (25, 50, 12, 255)
        assert img.getpixel((2, 1)) == (50, 100, 25, 255)
        assert img.getpixel((4, 0)) == (100, 200, 50, 255)

    def test_vertical_high_on_top(self, black_to_color):
        img = render_gradient_strip(black_to_color, width=2, height=5, vertical=True)
        assert img.size == (2, 5)
        assert img.getpixel((0, 0)) == (100, 200, 50, 255)
        assert img.getpixel((1, 2)) == (50, 100, 25, 255)
        assert img.getpixel((1, 4)) == (0, 0, 0, 255)

    def test_default_gradient_scale(self):
        # 500x100 scale, column x has value x / 499
        from palettes import RAINBOW_PURPLE_TO_RED

        img = render_gradient_strip(RAINBOW_PURPLE_TO_RED)
        assert img.size == (500, 100)
        arr = np.asarray(img)
        for x in (0, 1, 137, 250, 498, 499):
            assert tuple(arr[50, x]) == gradient(x / 499).rgba

    def test_rows_identical(self):
        arr = np.asarray(render_gradient_strip(INCANDESCENT, width=32, height=4))
        assert (arr == arr[0]).all()

    @pytest.mark.parametrize(('w', 'h'), [(0, 10), (10, 0)])
    def test_invalid_size(self, w, h):
        with pytest.raises(ValueError):
            render_gradient_strip(INCANDESCENT, width=w, height=h)

    def test_logs(self, caplog, black_to_color):
        import logging

        caplog.set_level(logging.DEBUG, logger='services.gradient_strip')
        render_gradient_strip(black_to_color, width=3, height=1)
        assert 'Gradient strip rendered: 3x1' in caplog.text


class TestRenderSettingsStrip:
    def test_uses_settings(self):
        s = GradientSettings(
            palette='INCANDESCENT', reverse=True, strip_width_px=16, strip_height_px=3
        )
        img = render_settings_strip(s)
        assert img.size == (16, 3)
        assert img.getpixel((0, 0)) == INCANDESCENT[-1].rgba
        assert img.getpixel((15, 2)) == INCANDESCENT[0].rgba
