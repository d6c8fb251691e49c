"""Code generation from inferred type models."""

from typewriter.formatting import FormatOptions
from typewriter.rendering.base import BaseRenderer, RenderedField, property_key
from typewriter.rendering.factory import RENDERERS, get_renderer, render
from typewriter.rendering.options import RenderOptions
from typewriter.rendering.prop_types import PropTypesRenderer
from typewriter.rendering.typescript import TypeScriptRenderer

__all__ = [
    "RENDERERS",
    "BaseRenderer",
    "FormatOptions",
    "PropTypesRenderer",
    "RenderOptions",
    "RenderedField",
    "TypeScriptRenderer",
    "get_renderer",
    "property_key",
    "render",
]
