"""
Configuration module for the outfit generator.

This module provides centralized configuration management using pydantic-settings.
Environment-driven values come from Settings; tuned algorithm constants come
from config.constants.

Usage:
    from config import get_settings, DEFAULT_GENERATION_CONFIG

    settings = get_settings()
    target = settings.target_outfits
"""

from config.constants import (
    DEFAULT_GENERATION_CONFIG,
    DEFAULT_SELECTION_CONFIG,
    GenerationConfig,
    SelectionConfig,
)
from config.settings import Settings, get_settings, get_settings_for_testing

__all__ = [
    "Settings",
    "get_settings",
    "get_settings_for_testing",
    "GenerationConfig",
    "SelectionConfig",
    "DEFAULT_GENERATION_CONFIG",
    "DEFAULT_SELECTION_CONFIG",
]
