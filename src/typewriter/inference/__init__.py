"""Structural type inference from example values.

Examples are merged keypath by keypath into a ``TypeModel``: every structural
position keeps one shape record per observed kind, with field optionality
tracked across all observations.

Usage:
    from typewriter.inference import TypeModelBuilder

    builder = TypeModelBuilder()
    builder.add_examples([{"name": "Ada"}, {"name": "Marie", "born": 1867}])
    builder.generate("typescript")
"""

from typewriter.inference.builder import TypeModelBuilder
from typewriter.inference.models import FieldRef, ShapeRecord, TypeModel
from typewriter.inference.naming import (
    camel_case,
    default_type_name_generator,
    resolve_type_name,
)
from typewriter.inference.options import AddOptions

__all__ = [
    "TypeModelBuilder",
    "AddOptions",
    "FieldRef",
    "ShapeRecord",
    "TypeModel",
    "camel_case",
    "default_type_name_generator",
    "resolve_type_name",
]
