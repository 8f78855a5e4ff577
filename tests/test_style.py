"""Tests for rendering/style.py - scoped drawing and shadows."""

import cairo
import numpy as np
import pytest

from rendering.style import DrawStyle, Shadow, paint_path, saved_state

RED = (1.0, 0.0, 0.0, 1.0)


def _ctx(size=40):
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, size, size)
    return surface, cairo.Context(surface)


def _alpha(surface):
    surface.flush()
    arr = np.ndarray(
        shape=(surface.get_height(), surface.get_stride() // 4, 4),
        dtype=np.uint8,
        buffer=surface.get_data()
    )
    return arr[:, :surface.get_width(), 3].copy()


def _square(ctx):
    ctx.translate(5, 5)
    ctx.rectangle(0, 0, 10, 10)


class TestSavedState:
    def test_restores_after_exception(self):
        _, ctx = _ctx()
        with pytest.raises(RuntimeError):
            with saved_state(ctx):
                ctx.translate(10, 10)
                raise RuntimeError("boom")
        assert ctx.get_matrix() == cairo.Matrix()


class TestPaintPath:
    def test_builder_transform_does_not_leak(self):
        _, ctx = _ctx()
        paint_path(ctx, _square, DrawStyle(color=RED))
        assert ctx.get_matrix() == cairo.Matrix()

    def test_failed_builder_leaves_context_usable(self):
        _, ctx = _ctx()

        def broken(c):
            c.translate(3, 3)
            raise ValueError("bad path")

        with pytest.raises(ValueError):
            paint_path(ctx, broken, DrawStyle(color=RED))
        assert ctx.get_matrix() == cairo.Matrix()
        paint_path(ctx, _square, DrawStyle(color=RED))

    def test_fill(self):
        surface, ctx = _ctx()
        paint_path(ctx, _square, DrawStyle(color=RED))
        alpha = _alpha(surface)
        assert alpha[10, 10] == 255
        assert alpha[30, 30] == 0

    def test_alpha(self):
        surface, ctx = _ctx()
        paint_path(ctx, _square, DrawStyle(color=RED, alpha=0.5))
        assert abs(int(_alpha(surface)[10, 10]) - 128) <= 1

    def test_shadow_offset_in_device_space(self):
        surface, ctx = _ctx()
        ctx.translate(20, 20)
        ctx.rotate(np.pi / 2)
        style = DrawStyle(color=RED, shadow=Shadow(alpha=1.0, blur=0, offset_x=10, offset_y=0))
        paint_path(ctx, lambda c: c.rectangle(-3, -3, 6, 6), style)
        alpha = _alpha(surface)
        assert alpha[20, 20] == 255
        # shadow shifted right by 10 device pixels despite the rotation
        assert alpha[20, 30] == 255
        assert alpha[30, 20] == 0

    def test_blurred_shadow_spreads(self):
        surface, ctx = _ctx()
        style = DrawStyle(color=RED, shadow=Shadow(alpha=1.0, blur=4))
        paint_path(ctx, _square, style)
        alpha = _alpha(surface)
        # one pixel outside the square only the blurred shadow shows
        assert 0 < alpha[10, 15] < 255
