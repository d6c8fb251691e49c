"""Core abstractions and shared utilities for typewriter."""

from typewriter.core.errors import (
    ConfigurationError,
    RedefinitionError,
    TypewriterError,
)
from typewriter.core.protocols import ModelView, TypeNameGenerator
from typewriter.core.types import UNDEFINED, Dialect, Kind

__all__ = [
    "ModelView",
    "TypeNameGenerator",
    "UNDEFINED",
    "Dialect",
    "Kind",
    "ConfigurationError",
    "RedefinitionError",
    "TypewriterError",
]
