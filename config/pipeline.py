"""
Batch configuration for seal generation.

Holds everything the batch driver needs: where the company names come from,
where the seals go, and the seal template every name is stamped onto.
"""

from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path
import json

from .seal_config import SealConfig


def default_template() -> SealConfig:
    return SealConfig(
        size=452,
        color='#d20000',
        title=' ',
        star_size=150,
        company_font_size=60,
        title_font_size=28,
        border_width=7,
        border_style='solid',
        company_radius_ratio=0.75,
        title_radius_ratio=0.3,
        star_bottom_angle=108,
        show_inner_circle=False,
        aging=False,
        aging_strength=0.13,
    )


@dataclass
class BatchConfig:
    """
    Configuration for a batch run.
    Output paths are derived from output_dir and the company name.
    """

    # ==================== INPUT ====================
    names_file: str = '1.txt'
    default_company: str = '河北理铭科技有限公司'

    # ==================== OUTPUT ====================
    output_dir: str = 'output'

    # ==================== FONTS ====================
    # No font ships with the package. Without a font file, text uses whatever
    # fontconfig resolves for the template's font_family.
    font_path: Optional[str] = None

    # ==================== EXECUTION ====================
    workers: int = 1

    # ==================== SEAL TEMPLATE ====================
    template: SealConfig = field(default_factory=default_template)

    def __post_init__(self):
        if isinstance(self.template, dict):
            self.template = SealConfig.from_dict(self.template)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)

    @property
    def default_output_path(self) -> Path:
        return self.output_path / 'default.png'

    def seal_output_path(self, safe_name: str) -> Path:
        return self.output_path / f'{safe_name}.png'

    def seal_config(self, company: str) -> SealConfig:
        return self.template.replace(company=company)

    def create_output_dirs(self):
        self.output_path.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/pipeline.json') -> BatchConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return BatchConfig()

    with open(config_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    return BatchConfig(**data)


def save_config(config: BatchConfig, path: str = 'config/pipeline.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'names_file': config.names_file,
        'default_company': config.default_company,
        'output_dir': config.output_dir,
        'font_path': config.font_path,
        'workers': config.workers,
        'template': config.template.to_dict(),
    }

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    print(f"Saved config to {config_path}")
