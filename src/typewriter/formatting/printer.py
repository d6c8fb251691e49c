from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from typewriter.formatting.doc import (
    HARDLINE,
    Concat,
    Doc,
    Group,
    IfBreak,
    Indent,
    Line,
    concat,
    join,
    propagate_breaks,
)
from typewriter.formatting.options import FormatOptions

logger = logging.getLogger(__name__)


class _Mode(Enum):
    BREAK = "break"
    FLAT = "flat"


_Command = tuple[int, _Mode, Doc]


def format_doc(doc: Doc, options: FormatOptions | None = None) -> str:
    """Lay out a document within the configured print width."""
    options = options or FormatOptions()
    doc, _ = propagate_breaks(doc)

    out: list[str] = []
    pos = 0
    stack: list[_Command] = [(0, _Mode.BREAK, doc)]

    while stack:
        level, mode, node = stack.pop()

        if isinstance(node, str):
            out.append(node)
            pos += len(node)
        elif isinstance(node, Concat):
            stack.extend((level, mode, part) for part in reversed(node.parts))
        elif isinstance(node, Indent):
            stack.append((level + options.tab_width, mode, node.contents))
        elif isinstance(node, Group):
            if mode is _Mode.FLAT and not node.should_break:
                stack.append((level, _Mode.FLAT, node.contents))
                continue
            flat = (level, _Mode.FLAT, node.contents)
            if not node.should_break and _fits(flat, stack, options.print_width - pos):
                stack.append(flat)
            else:
                stack.append((level, _Mode.BREAK, node.contents))
        elif isinstance(node, Line):
            if mode is _Mode.FLAT and not node.hard:
                out.append(node.flat)
                pos += len(node.flat)
            else:
                out.append("\n" + " " * level)
                pos = level
        elif isinstance(node, IfBreak):
            chosen = node.break_contents if mode is _Mode.BREAK else node.flat_contents
            stack.append((level, mode, chosen))
        else:
            raise TypeError(f"Unsupported document node: {node!r}")

    return "\n".join(line.rstrip() for line in "".join(out).split("\n"))


def _fits(next_command: _Command, rest: list[_Command], width: int) -> bool:
    commands = [next_command]
    rest_index = len(rest)

    while width >= 0:
        if not commands:
            if rest_index == 0:
                return True
            rest_index -= 1
            commands.append(rest[rest_index])
            continue

        level, mode, node = commands.pop()
        if isinstance(node, str):
            width -= len(node)
        elif isinstance(node, Concat):
            commands.extend((level, mode, part) for part in reversed(node.parts))
        elif isinstance(node, Indent):
            commands.append((level, mode, node.contents))
        elif isinstance(node, Group):
            group_mode = _Mode.BREAK if node.should_break else mode
            commands.append((level, group_mode, node.contents))
        elif isinstance(node, Line):
            if mode is _Mode.BREAK or node.hard:
                return True
            width -= len(node.flat)
        elif isinstance(node, IfBreak):
            chosen = node.break_contents if mode is _Mode.BREAK else node.flat_contents
            commands.append((level, mode, chosen))

    return False


def format_program(statements: Sequence[Doc], options: FormatOptions | None = None) -> str:
    """Format top-level statements, one per line, ending with a newline."""
    if not statements:
        return ""
    options = options or FormatOptions()
    terminated = [concat(statement, options.terminator) for statement in statements]
    text = format_doc(join(HARDLINE, terminated), options)
    logger.debug(f"Formatted {len(statements)} statements")
    return text + "\n"


def format_expression(expression: Doc, options: FormatOptions | None = None) -> str:
    """Format a single expression with no statement terminator."""
    return format_doc(expression, options).strip()
