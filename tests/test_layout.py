"""Tests for rendering/layout.py - pure seal geometry."""

import math

import pytest

from rendering.layout import (
    GlyphPlacement,
    inner_ring_radius,
    inner_ring_width,
    star_origin,
    company_angle_step,
    company_glyph_angles,
    company_glyph_positions,
    title_anchor,
    dashed_border_segments,
    COMPANY_ARC_SPAN,
)


class TestCompanyArc:
    @pytest.mark.parametrize("count", [2, 3, 4, 7, 12])
    def test_step_is_span_over_gaps(self, count):
        angles = company_glyph_angles(count)
        expected = 240 / (count - 1)
        assert company_angle_step(count) == pytest.approx(expected)
        for a, b in zip(angles, angles[1:]):
            assert b - a == pytest.approx(expected)

    @pytest.mark.parametrize("count", [2, 5, 10])
    def test_first_and_last_symmetric_about_top(self, count):
        angles = company_glyph_angles(count)
        assert angles[0] == pytest.approx(-210)
        assert angles[-1] == pytest.approx(30)
        assert (angles[0] + angles[-1]) / 2 == pytest.approx(-90)
        assert angles[-1] - angles[0] == pytest.approx(COMPANY_ARC_SPAN)

    @pytest.mark.parametrize("ratio", [0.1, 0.5, 0.75, 1.0])
    def test_single_glyph_sits_at_top(self, ratio):
        placements = company_glyph_positions("印", 180, ratio)
        assert len(placements) == 1
        glyph = placements[0]
        assert glyph.angle_deg == -90
        assert math.isfinite(glyph.x) and math.isfinite(glyph.y)
        assert glyph.x == pytest.approx(0, abs=1e-9)
        assert glyph.y == pytest.approx(-180 * ratio)
        assert company_angle_step(1) == 0.0

    def test_empty_text_has_no_glyphs(self):
        assert company_glyph_angles(0) == []
        assert company_glyph_positions("", 180, 0.75) == []

    def test_positions_on_circle(self):
        placements = company_glyph_positions("测试公司", 200, 0.75)
        assert [p.char for p in placements] == list("测试公司")
        for p in placements:
            assert math.hypot(p.x, p.y) == pytest.approx(150)

    def test_glyph_rotation_follows_tangent(self):
        top = GlyphPlacement(char="A", x=0, y=-100, angle_deg=-90)
        assert top.rotation == pytest.approx(0)
        right = GlyphPlacement(char="A", x=100, y=0, angle_deg=0)
        assert right.rotation == pytest.approx(math.pi / 2)


class TestRadii:
    def test_inner_ring(self):
        assert inner_ring_radius(180) == 168
        assert inner_ring_width(6) == 3
        assert inner_ring_width(3) == 2

    def test_title_anchor(self):
        assert title_anchor(206, 0.3) == (0.0, pytest.approx(61.8))

    def test_star_at_origin(self):
        assert star_origin() == (0.0, 0.0)


class TestDashedBorder:
    def test_thirty_six_segments(self):
        assert len(dashed_border_segments()) == 36

    def test_each_segment_spans_five_degrees(self):
        for start, end in dashed_border_segments():
            assert math.degrees(end - start) == pytest.approx(5)

    def test_segments_start_every_ten_degrees(self):
        starts = [math.degrees(s) for s, _ in dashed_border_segments()]
        assert starts[0] == pytest.approx(0)
        for a, b in zip(starts, starts[1:]):
            assert b - a == pytest.approx(10)
        assert starts[-1] == pytest.approx(350)
