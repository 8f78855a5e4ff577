"""
Shared test fixtures for the seal generator test suite.
"""

import numpy as np
import pytest

from config import SealConfig


# ---------------------------------------------------------------------------
# Seal configs
# ---------------------------------------------------------------------------

@pytest.fixture
def small_config():
    """A small, un-aged seal that renders quickly."""
    return SealConfig(
        size=200,
        company='AB',
        star_size=40,
        company_font_size=16,
        title_font_size=12,
        aging=False,
    )


@pytest.fixture
def ring_config():
    """Border rings only: no company text and a small star."""
    return SealConfig(
        size=200,
        company='',
        title=' ',
        star_size=40,
        aging=False,
    )


# ---------------------------------------------------------------------------
# Pixel buffers
# ---------------------------------------------------------------------------

@pytest.fixture
def disc_image():
    """200x200 RGBA buffer: an opaque red disc on a transparent background."""
    size = 200
    image = np.zeros((size, size, 4), dtype=np.uint8)
    ys, xs = np.mgrid[0:size, 0:size]
    disc = np.hypot(xs - size / 2, ys - size / 2) < 85
    image[disc] = (200, 40, 40, 255)
    return image
