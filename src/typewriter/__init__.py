"""typewriter - infer structural types from example data and render them as code."""

__version__ = "0.1.0"

from typewriter.config import Settings, get_settings
from typewriter.core import UNDEFINED, ConfigurationError, Kind, RedefinitionError
from typewriter.inference import AddOptions, TypeModel, TypeModelBuilder
from typewriter.rendering import FormatOptions, RenderOptions, render

__all__ = [
    "AddOptions",
    "ConfigurationError",
    "FormatOptions",
    "Kind",
    "RedefinitionError",
    "RenderOptions",
    "Settings",
    "TypeModel",
    "TypeModelBuilder",
    "UNDEFINED",
    "get_settings",
    "render",
]
