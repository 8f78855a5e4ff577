"""
PNG export for rendered seals.
Keeps encoding and file I/O separate from the renderer.
"""

import numpy as np
import imageio.v3 as iio
from pathlib import Path


def encode_png(image: np.ndarray) -> bytes:
    """Encode an RGBA uint8 array of shape [H, W, 4] as PNG bytes."""
    return iio.imwrite('<bytes>', image, extension='.png')


def write_bytes(data: bytes, output_path: str) -> str:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return str(path)


def write_png(image: np.ndarray, output_path: str) -> str:
    """
    Encode and write a seal image.

    Returns the written path. Write errors propagate to the caller.
    """
    return write_bytes(encode_png(image), output_path)
