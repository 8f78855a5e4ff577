"""
Font provisioning.

Cairo's text API resolves family names through fontconfig, so a bundled
TTF has to be added to fontconfig's application font set before any text is
drawn. Failure is never fatal: drawing falls back to the system default.

Registration goes through the first libfontconfig ctypes can find. If cairo
links a different copy (bundled wheels do), the call succeeds against a
fontconfig cairo never consults, and text silently resolves the family
from the system fonts instead.
"""

import ctypes
import ctypes.util
from pathlib import Path
from typing import Dict, Optional

from PIL import ImageFont

FALLBACK_FAMILY = 'sans-serif'

_registered: Dict[str, str] = {}


def _load_fontconfig():
    name = ctypes.util.find_library('fontconfig')
    if name is None:
        return None
    lib = ctypes.CDLL(name)
    lib.FcConfigAppFontAddFile.argtypes = [ctypes.c_void_p, ctypes.c_char_p]
    lib.FcConfigAppFontAddFile.restype = ctypes.c_int
    return lib


def font_family_name(font_path: str) -> str:
    """Family name stored in the font file itself."""
    family, _style = ImageFont.truetype(str(font_path), size=12).getname()
    return family


def register_font(font_path: str, family: Optional[str] = None) -> str:
    """
    Register a font file and return the family name to draw with.

    Results are cached per file, so each process registers a file once.
    """
    path = Path(font_path)
    key = str(path.resolve())
    if key in _registered:
        return _registered[key]

    try:
        if not path.is_file():
            raise FileNotFoundError(f"font file not found: {path}")
        resolved = font_family_name(path) or family or FALLBACK_FAMILY

        fontconfig = _load_fontconfig()
        if fontconfig is None:
            raise OSError("fontconfig library not available")
        if not fontconfig.FcConfigAppFontAddFile(None, str(path).encode()):
            raise OSError(f"fontconfig rejected {path}")
    except OSError as e:
        print(f"Warning: could not load font ({e}), using default font")
        resolved = FALLBACK_FAMILY

    _registered[key] = resolved
    return resolved


def resolve_font_family(family: str, font_path: Optional[str] = None) -> str:
    """Family for drawing: the registered file's family, or the configured one."""
    if font_path is None:
        return family
    return register_font(font_path, family)
