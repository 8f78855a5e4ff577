"""
Base renderer class defining the interface for all renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.seal_config import SealConfig


class Renderer(ABC):
    def __init__(self, config: SealConfig):
        self.config = config

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.size,
            self.config.size
        )
        ctx = cairo.Context(surface)
        ctx.set_antialias(cairo.ANTIALIAS_BEST)

        # Fully transparent, never an opaque background
        ctx.set_operator(cairo.OPERATOR_CLEAR)
        ctx.paint()
        ctx.set_operator(cairo.OPERATOR_OVER)

        return surface, ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        """
        Copy a cairo ARGB32 surface into a straight-alpha RGBA array.

        Cairo stores premultiplied BGRA on little-endian machines; the colour
        channels are divided back out by alpha so pixel filters and PNG
        export see plain RGBA values.
        """
        surface.flush()
        height, width = surface.get_height(), surface.get_width()
        arr = np.ndarray(
            shape=(height, surface.get_stride() // 4, 4),
            dtype=np.uint8,
            buffer=surface.get_data()
        )
        bgra = arr[:, :width].astype(np.float32)

        rgba = np.zeros_like(bgra)
        rgba[:, :, 0] = bgra[:, :, 2]  # R
        rgba[:, :, 1] = bgra[:, :, 1]  # G
        rgba[:, :, 2] = bgra[:, :, 0]  # B
        rgba[:, :, 3] = bgra[:, :, 3]  # A

        alpha = rgba[:, :, 3]
        covered = alpha > 0
        rgb = rgba[:, :, :3]
        rgb[covered] = rgb[covered] * 255.0 / alpha[covered][:, np.newaxis]

        return np.clip(np.rint(rgba), 0, 255).astype(np.uint8)

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass
