"""
Seal renderer using Cairo.
Draws the border, star, company-name arc and title onto a transparent canvas.
"""

import math
import cairo
import numpy as np

from config.seal_config import SealConfig, parse_color
from .base import Renderer
from .layout import (
    GlyphPlacement,
    inner_ring_radius,
    inner_ring_width,
    star_origin,
    company_glyph_positions,
    title_anchor,
    dashed_border_segments
)
from .style import DrawStyle, Shadow, PathBuilder, paint_path, saved_state

STAR_GLYPH = '★'
STAR_OUTLINE_COLOR = '#a00000'

BORDER_SHADOW = Shadow(alpha=0.08, blur=2)
STAR_SHADOW = Shadow(alpha=0.12, blur=2)
TEXT_SHADOW = Shadow(alpha=0.10, blur=2, offset_x=1, offset_y=1)


class SealRenderer(Renderer):
    def __init__(self, config: SealConfig = None):
        super().__init__(config or SealConfig())
        self.color = self.config.rgba

    def _style(self, mode='fill', line_width=1.0, shadow=None, color=None) -> DrawStyle:
        return DrawStyle(
            color=color or self.color,
            mode=mode,
            line_width=line_width,
            shadow=shadow,
            alpha=self.config.opacity
        )

    def _text_path(self, text: str, font_size: float, bold: bool,
                   x: float = 0.0, y: float = 0.0, rotation: float = 0.0) -> PathBuilder:
        """Path builder for text centered on (x, y), like textAlign=center / textBaseline=middle."""
        weight = cairo.FONT_WEIGHT_BOLD if bold else cairo.FONT_WEIGHT_NORMAL
        family = self.config.font_family

        def build(ctx: cairo.Context):
            ctx.select_font_face(family, cairo.FONT_SLANT_NORMAL, weight)
            ctx.set_font_size(font_size)
            ctx.translate(x, y)
            ctx.rotate(rotation)
            ascent, descent = ctx.font_extents()[:2]
            extents = ctx.text_extents(text)
            ctx.move_to(-extents.x_advance / 2, (ascent - descent) / 2)
            ctx.text_path(text)

        return build

    def _draw_border(self, ctx: cairo.Context):
        radius = self.config.radius
        style = self._style('stroke', self.config.border_width, BORDER_SHADOW)

        if self.config.border_style == 'solid':
            paint_path(ctx, lambda c: c.arc(0, 0, radius, 0, 2 * math.pi), style)
            return

        for start, end in dashed_border_segments():
            paint_path(ctx, lambda c, a0=start, a1=end: c.arc(0, 0, radius, a0, a1), style)

    def _draw_inner_ring(self, ctx: cairo.Context):
        radius = inner_ring_radius(self.config.radius)
        style = self._style('stroke', inner_ring_width(self.config.border_width))
        paint_path(ctx, lambda c: c.arc(0, 0, radius, 0, 2 * math.pi), style)

    def _draw_star(self, ctx: cairo.Context):
        x, y = star_origin()
        build = self._text_path(STAR_GLYPH, self.config.star_size, bold=True, x=x, y=y)

        paint_path(ctx, build, self._style('fill', shadow=STAR_SHADOW))
        paint_path(ctx, build, self._style('stroke', 2.0, color=parse_color(STAR_OUTLINE_COLOR)))

    def _draw_glyph(self, ctx: cairo.Context, glyph: GlyphPlacement):
        build = self._text_path(
            glyph.char, self.config.company_font_size, bold=True,
            x=glyph.x, y=glyph.y, rotation=glyph.rotation
        )
        # Stroke under the fill in the same colour simulates a heavier weight
        paint_path(ctx, build, self._style('stroke', 1.2, TEXT_SHADOW))
        paint_path(ctx, build, self._style('fill', shadow=TEXT_SHADOW))

    def _draw_company_name(self, ctx: cairo.Context):
        placements = company_glyph_positions(
            self.config.company,
            self.config.radius,
            self.config.company_radius_ratio
        )
        for glyph in placements:
            self._draw_glyph(ctx, glyph)

    def _draw_title(self, ctx: cairo.Context):
        x, y = title_anchor(self.config.radius, self.config.title_radius_ratio)
        build = self._text_path(self.config.title, self.config.title_font_size, bold=False, x=x, y=y)
        paint_path(ctx, build, self._style('fill', shadow=TEXT_SHADOW))

    def render_frame(self) -> np.ndarray:
        """
        Render the seal.

        Returns:
            Straight-alpha RGBA numpy array of shape [size, size, 4]
        """
        surface, ctx = self._create_surface()

        with saved_state(ctx):
            cx, cy = self.config.center
            ctx.translate(cx, cy)
            ctx.rotate(math.radians(self.config.rotation))

            self._draw_border(ctx)
            if self.config.show_inner_circle:
                self._draw_inner_ring(ctx)
            self._draw_star(ctx)
            self._draw_company_name(ctx)
            self._draw_title(ctx)

        return self._surface_to_numpy(surface)
