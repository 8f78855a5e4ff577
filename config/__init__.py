"""
Configuration module.
"""

from .seal_config import SealConfig, BorderStyle, parse_color
from .pipeline import BatchConfig, default_template, load_config, save_config

__all__ = [
    'SealConfig',
    'BorderStyle',
    'parse_color',
    'BatchConfig',
    'default_template',
    'load_config',
    'save_config'
]
