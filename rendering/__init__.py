"""
Rendering module for company seals.
Uses Cairo for drawing and numpy for pixel post-processing.
"""

from config.seal_config import SealConfig
from .seal_renderer import SealRenderer
from .aging import AgingFilter, FadeArea, generate_fade_areas
from .generator import SealGenerator
from .exporters import encode_png, write_png
from .fonts import register_font, resolve_font_family, FALLBACK_FAMILY
from .layout import (
    GlyphPlacement,
    company_glyph_positions,
    company_glyph_angles,
    title_anchor,
    dashed_border_segments
)
