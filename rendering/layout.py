"""
Seal layout: pure geometry for the border, star, company arc and title.

All coordinates are in the seal frame, i.e. relative to the canvas center
and before the global rotation. Angles follow the canvas convention:
0 deg points right, -90 deg points up.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

COMPANY_ARC_SPAN = 240.0
COMPANY_ARC_CENTER = -90.0

INNER_RING_GAP = 12

DASH_COUNT = 36
DASH_STEP = 10.0
DASH_SWEEP = 5.0


@dataclass(frozen=True)
class GlyphPlacement:
    char: str
    x: float
    y: float
    angle_deg: float

    @property
    def rotation(self) -> float:
        """Glyph rotation in radians; the baseline follows the arc tangent."""
        return math.radians(self.angle_deg) + math.pi / 2


def inner_ring_radius(outer_radius: float) -> float:
    return outer_radius - INNER_RING_GAP


def inner_ring_width(border_width: float) -> float:
    return max(2.0, border_width * 0.5)


def star_origin() -> Tuple[float, float]:
    return 0.0, 0.0


def company_angle_step(count: int) -> float:
    """Angular step between adjacent company glyphs, in degrees."""
    if count < 2:
        return 0.0
    return COMPANY_ARC_SPAN / (count - 1)


def company_glyph_angles(count: int) -> List[float]:
    """
    Angles (degrees) of each company glyph on the 240 deg top arc.

    A single glyph sits at the top of the arc instead of dividing by zero.
    """
    if count == 0:
        return []
    if count == 1:
        return [COMPANY_ARC_CENTER]

    start = COMPANY_ARC_CENTER - COMPANY_ARC_SPAN / 2
    step = company_angle_step(count)
    return [start + i * step for i in range(count)]


def company_glyph_positions(text: str, radius: float, ratio: float) -> List[GlyphPlacement]:
    chars = list(text)
    arc_radius = radius * ratio

    placements = []
    for char, angle in zip(chars, company_glyph_angles(len(chars))):
        theta = math.radians(angle)
        placements.append(GlyphPlacement(
            char=char,
            x=arc_radius * math.cos(theta),
            y=arc_radius * math.sin(theta),
            angle_deg=angle
        ))
    return placements


def title_anchor(radius: float, ratio: float) -> Tuple[float, float]:
    return 0.0, radius * ratio


def dashed_border_segments() -> List[Tuple[float, float]]:
    """(start, end) radians of each dash: a 5 deg sweep every 10 deg."""
    return [
        (math.radians(i * DASH_STEP), math.radians(i * DASH_STEP + DASH_SWEEP))
        for i in range(DASH_COUNT)
    ]
