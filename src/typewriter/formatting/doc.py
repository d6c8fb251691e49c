"""Layout documents consumed by the printer.

A document is a tree of plain strings and the nodes below. Groups are laid
out flat when their contents fit in the remaining width, otherwise every
line directly inside them breaks.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Concat:
    parts: tuple[Doc, ...]


@dataclass(frozen=True)
class Group:
    contents: Doc
    should_break: bool = False


@dataclass(frozen=True)
class Indent:
    contents: Doc


@dataclass(frozen=True)
class Line:
    flat: str = " "
    hard: bool = False


@dataclass(frozen=True)
class IfBreak:
    break_contents: Doc
    flat_contents: Doc = field(default="")


Doc = Union[str, Concat, Group, Indent, Line, IfBreak]

LINE = Line()
SOFTLINE = Line(flat="")
HARDLINE = Line(flat="", hard=True)


def concat(*parts: Doc) -> Concat:
    return Concat(parts=tuple(parts))


def group(*parts: Doc) -> Group:
    return Group(contents=concat(*parts))


def indent(*parts: Doc) -> Indent:
    return Indent(contents=concat(*parts))


def if_break(break_contents: Doc, flat_contents: Doc = "") -> IfBreak:
    return IfBreak(break_contents=break_contents, flat_contents=flat_contents)


def join(separator: Doc, docs: Iterable[Doc]) -> Concat:
    parts: list[Doc] = []
    for i, doc in enumerate(docs):
        if i:
            parts.append(separator)
        parts.append(doc)
    return Concat(parts=tuple(parts))


def propagate_breaks(doc: Doc) -> tuple[Doc, bool]:
    """Force every group that contains a hard line to break.

    Returns the rewritten document and whether it contains a hard line.
    """
    if isinstance(doc, str):
        return doc, False
    if isinstance(doc, Line):
        return doc, doc.hard
    if isinstance(doc, Concat):
        parts = []
        has_hard = False
        for part in doc.parts:
            new_part, hard = propagate_breaks(part)
            parts.append(new_part)
            has_hard = has_hard or hard
        return Concat(parts=tuple(parts)), has_hard
    if isinstance(doc, Indent):
        contents, hard = propagate_breaks(doc.contents)
        return Indent(contents=contents), hard
    if isinstance(doc, Group):
        contents, hard = propagate_breaks(doc.contents)
        return Group(contents=contents, should_break=doc.should_break or hard), hard
    if isinstance(doc, IfBreak):
        break_contents, hard = propagate_breaks(doc.break_contents)
        flat_contents, _ = propagate_breaks(doc.flat_contents)
        return IfBreak(break_contents=break_contents, flat_contents=flat_contents), hard
    raise TypeError(f"Unsupported document node: {doc!r}")
