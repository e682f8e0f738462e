"""Utility helpers shared by scripts and tests."""

from .config import load_config_any, load_config_dict, load_guidance_config
from .logger import setup_logger

__all__ = [
    "load_config_any",
    "load_config_dict",
    "load_guidance_config",
    "setup_logger",
]
