"""
Seal generation: render, optionally age, and export one seal.
"""

import asyncio
import numpy as np
from typing import Optional

from config.seal_config import SealConfig
from .seal_renderer import SealRenderer
from .aging import AgingFilter
from .exporters import encode_png, write_bytes, write_png
from .fonts import resolve_font_family


class SealGenerator:
    def __init__(self, config: SealConfig = None, font_path: Optional[str] = None,
                 rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        config = config or SealConfig()
        family = resolve_font_family(config.font_family, font_path)
        if family != config.font_family:
            config = config.replace(font_family=family)

        self.config = config
        self.rng = rng
        self.seed = seed

    def render(self) -> np.ndarray:
        """Render the seal and apply the aging pass if enabled."""
        image = SealRenderer(self.config).render_frame()
        if self.config.aging:
            aging = AgingFilter(self.config.aging_strength, rng=self.rng, seed=self.seed)
            aging.apply(image, radius=self.config.radius)
        return image

    def to_png_bytes(self) -> bytes:
        return encode_png(self.render())

    def generate(self, output_path: str) -> str:
        """Render the seal and write it as PNG. Returns the output path."""
        return write_png(self.render(), output_path)

    async def generate_async(self, output_path: str) -> str:
        """Like generate(), but the file write is awaited off the event loop."""
        data = self.to_png_bytes()
        return await asyncio.to_thread(write_bytes, data, output_path)
