"""Renderer registry and the render entry point."""

import logging

from typewriter.config import get_settings
from typewriter.core.errors import ConfigurationError
from typewriter.core.protocols import ModelView
from typewriter.core.types import Dialect
from typewriter.rendering.base import BaseRenderer
from typewriter.rendering.options import RenderOptions
from typewriter.rendering.prop_types import PropTypesRenderer
from typewriter.rendering.typescript import TypeScriptRenderer

logger = logging.getLogger(__name__)

RENDERERS: dict[Dialect, type[BaseRenderer]] = {
    Dialect.TYPESCRIPT: TypeScriptRenderer,
    Dialect.PROP_TYPES: PropTypesRenderer,
}


def get_renderer(dialect: str | Dialect | None = None) -> type[BaseRenderer]:
    """Get the renderer class for a dialect.

    The dialect is determined by (in order of precedence):
    1. Explicit dialect parameter
    2. TYPEWRITER_DEFAULT_DIALECT environment variable
    3. Default to "typescript"

    Args:
        dialect: Dialect name or alias (typescript, ts, prop_types, propTypes).

    Returns:
        Renderer class for the dialect.

    Raises:
        ConfigurationError: If the dialect is unknown.
    """
    requested = dialect or get_settings().default_dialect
    resolved = Dialect.from_name(requested)
    if resolved is None:
        available = ", ".join(d.value for d in RENDERERS)
        raise ConfigurationError(
            f"Unknown dialect: {requested}. Available: {available}"
        )
    return RENDERERS[resolved]


def render(
    model: ModelView,
    dialect: str | Dialect | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Render a model as source text in the given dialect."""
    renderer_class = get_renderer(dialect)
    options = options or RenderOptions()
    logger.debug(
        f"Rendering with {renderer_class.__name__} "
        f"({'inlined' if options.inlined else 'named'})"
    )
    return renderer_class(model, options).render()
