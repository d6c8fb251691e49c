"""Configuration module for typewriter."""

from typewriter.config.settings import (
    InferenceSettings,
    RenderingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "InferenceSettings",
    "RenderingSettings",
    "Settings",
    "get_settings",
]
