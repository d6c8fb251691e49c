"""Deterministic layout of generated code."""

from typewriter.formatting.doc import (
    HARDLINE,
    LINE,
    SOFTLINE,
    Doc,
    concat,
    group,
    if_break,
    indent,
    join,
)
from typewriter.formatting.options import FormatOptions
from typewriter.formatting.printer import format_doc, format_expression, format_program

__all__ = [
    "HARDLINE",
    "LINE",
    "SOFTLINE",
    "Doc",
    "FormatOptions",
    "concat",
    "format_doc",
    "format_expression",
    "format_program",
    "group",
    "if_break",
    "indent",
    "join",
]
