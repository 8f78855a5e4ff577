"""
Configuration for a single seal render.
"""

from dataclasses import dataclass, asdict, fields, replace
from typing import Tuple, Literal, Dict, Any

from PIL import ImageColor

BorderStyle = Literal['solid', 'dashed']

BORDER_STYLES = ('solid', 'dashed')

# camelCase option keys, mapped to dataclass fields
CAMEL_CASE_KEYS = {
    'starSize': 'star_size',
    'companyFontSize': 'company_font_size',
    'titleFontSize': 'title_font_size',
    'borderWidth': 'border_width',
    'borderStyle': 'border_style',
    'companyRadiusRatio': 'company_radius_ratio',
    'titleRadiusRatio': 'title_radius_ratio',
    'starBottomAngle': 'star_bottom_angle',
    'showInnerCircle': 'show_inner_circle',
    'agingStrength': 'aging_strength',
    'fontFamily': 'font_family',
}

BORDER_MARGIN = 20


def parse_color(color: str) -> Tuple[float, float, float, float]:
    """Parse a CSS-style colour string into cairo RGBA floats."""
    rgba = ImageColor.getrgb(color)
    if len(rgba) == 3:
        rgba = (*rgba, 255)
    return tuple(c / 255.0 for c in rgba)


@dataclass(frozen=True)
class SealConfig:
    size: int = 400
    color: str = '#FF0000'
    company: str = '测试公司'
    title: str = ' '

    star_size: float = 100
    company_font_size: float = 24
    title_font_size: float = 20

    rotation: float = 0.0  # degrees
    opacity: float = 1.0

    border_width: float = 6
    border_style: BorderStyle = 'solid'

    company_radius_ratio: float = 0.75
    title_radius_ratio: float = 0.33
    star_bottom_angle: float = 108  # not consumed by the layout
    show_inner_circle: bool = True

    aging: bool = True
    aging_strength: float = 0.13

    font_family: str = 'SimHei'

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.size != int(self.size):
            raise ValueError(f"size must be a whole number of pixels, got {self.size}")
        # cairo surfaces take integer dimensions
        object.__setattr__(self, 'size', int(self.size))
        for name in ('star_size', 'company_font_size', 'title_font_size', 'border_width'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be in [0, 1], got {self.opacity}")
        if not 0.0 <= self.aging_strength <= 1.0:
            raise ValueError(f"aging_strength must be in [0, 1], got {self.aging_strength}")
        for name in ('company_radius_ratio', 'title_radius_ratio'):
            ratio = getattr(self, name)
            if not 0.0 < ratio <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {ratio}")
        if self.border_style not in BORDER_STYLES:
            raise ValueError(
                f"border_style must be one of {BORDER_STYLES}, got {self.border_style!r}"
            )
        if not self.color:
            raise ValueError("color must not be empty")
        try:
            parse_color(self.color)
        except ValueError:
            raise ValueError(f"Unrecognised color: {self.color!r}") from None

    @property
    def radius(self) -> float:
        """Usable radius: the border ring and the erosion band sit here."""
        return self.size / 2 - BORDER_MARGIN

    @property
    def center(self) -> Tuple[float, float]:
        return self.size / 2, self.size / 2

    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        return parse_color(self.color)

    def replace(self, **changes) -> 'SealConfig':
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SealConfig':
        """
        Build a config from a dict of options.

        Accepts snake_case field names as well as camelCase keys
        (e.g. ``starSize``). Missing keys take their
        defaults, unknown keys raise ValueError.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown seal option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)
