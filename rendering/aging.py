"""
Aging post-process: grain, edge erosion and patchy fading on a rendered seal.

Operates on a straight-alpha RGBA buffer in absolute pixel coordinates.
Fully transparent pixels are never written, so the seal's silhouette is kept.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

FADE_AREA_COUNT = 2
EDGE_BAND = 8


@dataclass(frozen=True)
class FadeArea:
    x: float
    y: float
    rx: float
    ry: float
    fade: float

    def contains(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        dx = (xs - self.x) / self.rx
        dy = (ys - self.y) / self.ry
        return dx * dx + dy * dy < 1


def generate_fade_areas(rng: np.random.Generator, center: Tuple[float, float],
                        radius: float, count: int = FADE_AREA_COUNT) -> List[FadeArea]:
    cx, cy = center
    return [
        FadeArea(
            x=cx + (rng.random() - 0.5) * radius * 0.7,
            y=cy + (rng.random() - 0.5) * radius * 0.7,
            rx=30 + rng.random() * 30,
            ry=18 + rng.random() * 18,
            fade=0.5 + rng.random() * 0.2
        )
        for _ in range(count)
    ]


class AgingFilter:
    """
    Simulates physical wear on a seal impression.

    Unseeded by default so every aged seal looks different; pass a seed or a
    numpy Generator to make a pass reproducible.
    """

    def __init__(self, strength: float, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self.strength = strength
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def apply(self, image: np.ndarray, radius: float = None,
              fade_areas: Optional[List[FadeArea]] = None) -> np.ndarray:
        """
        Age an RGBA uint8 image of shape [H, W, 4] in place.

        Args:
            image: straight-alpha RGBA buffer, modified in place
            radius: radius of the erosion band, defaults to size / 2 - 20
            fade_areas: fade ellipses to use instead of two random ones

        Returns:
            The same array, for chaining
        """
        height, width = image.shape[:2]
        cx, cy = width / 2, height / 2
        if radius is None:
            radius = min(width, height) / 2 - 20

        rng = self.rng
        s = self.strength

        if fade_areas is None:
            fade_areas = generate_fade_areas(rng, (cx, cy), radius)

        touched = image[:, :, 3] > 0
        ys, xs = np.nonzero(touched)
        px = image[touched].astype(np.float64)
        n = len(px)
        if n == 0:
            return image

        # 1. Global fade, red fades faster
        px[:, 0] *= 0.93 - 0.2 * s
        px[:, 1:3] *= 0.93 - 0.1 * s

        # 2. Grain noise
        noise = (rng.random(n) - 0.5) * 255 * s * 0.7
        px[:, 0] += noise
        px[:, 1] += noise * 0.5
        px[:, 2] += noise * 0.5
        px[:, :3] = np.clip(px[:, :3], 0, 255)

        # 3. Edge erosion around the border ring
        dist = np.hypot(xs - cx, ys - cy)
        in_band = (dist > radius - EDGE_BAND) & (dist < radius + EDGE_BAND)

        erased = in_band & (rng.random(n) < 0.13 * s)
        erase_factor = rng.uniform(0.5, 0.8, n)
        px[erased, 3] *= erase_factor[erased]

        darkened = in_band & (rng.random(n) < 0.18 * s)
        px[darkened, :3] *= 0.7

        # 4. Localized fade ellipses
        for area in fade_areas:
            inside = area.contains(xs, ys)
            alpha_factor = rng.uniform(0.92, 0.98, n)
            px[inside, :3] *= area.fade
            px[inside, 3] *= alpha_factor[inside]

        # 5. Alpha jitter
        px[:, 3] *= rng.uniform(0.97, 1.03, n)
        px[:, 3] = np.clip(px[:, 3], 0, 255)

        image[touched] = np.clip(np.rint(px), 0, 255).astype(np.uint8)
        return image
