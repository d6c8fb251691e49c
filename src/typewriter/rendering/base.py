from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from typewriter.core.protocols import ModelView
from typewriter.core.types import Dialect, Kind
from typewriter.formatting import Doc, format_expression, format_program
from typewriter.inference.models import ShapeRecord
from typewriter.rendering.options import RenderOptions

_RE_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def property_key(name: str) -> str:
    if _RE_IDENTIFIER.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)


@dataclass(frozen=True)
class RenderedField:
    name: str
    required: bool
    nullable: bool
    value: Doc

    @property
    def key(self) -> str:
        return property_key(self.name)


class BaseRenderer(ABC):
    """Walks a model and builds layout documents for one dialect.

    Subclasses supply one method per ``Kind`` plus the union and declaration
    syntax; the walk itself, reference resolution and formatting live here.
    """

    dialect: Dialect

    def __init__(self, model: ModelView, options: RenderOptions | None = None):
        self.model = model
        self.options = options or RenderOptions()

    def render(self) -> str:
        if self.options.inlined:
            return self.render_inlined(self.options.root)
        return self.render_named()

    def render_named(self) -> str:
        declarations = [
            self.declaration(name, self.keypath_doc(name, inline=False, visiting=()))
            for name in self.declaration_order()
        ]
        if not declarations:
            return ""
        return format_program(self.preamble() + declarations, self.options.format)

    def declaration_order(self) -> list[str]:
        return [name for name in self.model.type_names() if self.model.has(name)]

    def references(self, keypath: str) -> list[str]:
        """Named types used by a keypath, looking through anonymous children."""
        found: list[str] = []
        pending = [keypath]
        seen = {keypath}
        while pending:
            current = pending.pop()
            for record in self.model.kinds(current).values():
                for _, ref in record.items():
                    child = ref.keypath
                    if child in seen:
                        continue
                    seen.add(child)
                    if self.model.is_named(child):
                        found.append(child)
                    else:
                        pending.append(child)
        return found

    def render_inlined(self, root: str | None = None) -> str:
        if root is None:
            roots = self.model.root_names
            root = roots[-1] if roots else None
        if root is None or not self.model.has(root):
            return ""
        doc = self.keypath_doc(root, inline=True, visiting=())
        return format_expression(doc, self.options.format)

    def keypath_doc(self, keypath: str, inline: bool, visiting: tuple[str, ...]) -> Doc:
        kinds = self.model.kinds(keypath)
        if not kinds:
            return self.render_unknown()

        visiting = visiting + (keypath,)
        alternatives = [
            (kind, self.kind_doc(kind, record, inline, visiting))
            for kind, record in kinds.items()
        ]
        if len(alternatives) == 1:
            return alternatives[0][1]
        return self.union(alternatives)

    def reference_doc(self, keypath: str, inline: bool, visiting: tuple[str, ...]) -> Doc:
        if self.model.is_named(keypath) and (not inline or keypath in visiting):
            return keypath
        return self.keypath_doc(keypath, inline, visiting)

    def kind_doc(
        self,
        kind: Kind,
        record: ShapeRecord,
        inline: bool,
        visiting: tuple[str, ...],
    ) -> Doc:
        if kind is Kind.OBJECT:
            fields = [
                RenderedField(
                    name=name,
                    required=ref.required,
                    nullable=any(k.is_nullish for k in self.model.kinds(ref.keypath)),
                    value=self.reference_doc(ref.keypath, inline, visiting),
                )
                for name, ref in record.items()
            ]
            return self.render_object(fields)

        if kind is Kind.ARRAY:
            element = record.element
            if element is None or not self.model.has(element.keypath):
                return self.render_array(None)
            return self.render_array(self.reference_doc(element.keypath, inline, visiting))

        primitives = {
            Kind.NULL: self.render_null,
            Kind.BOOLEAN: self.render_boolean,
            Kind.NUMBER: self.render_number,
            Kind.STRING: self.render_string,
            Kind.FUNCTION: self.render_function,
            Kind.UNDEFINED: self.render_undefined,
            Kind.UNKNOWN: self.render_unknown,
        }
        return primitives[kind]()

    def preamble(self) -> list[Doc]:
        return []

    @abstractmethod
    def declaration(self, name: str, doc: Doc) -> Doc: ...

    @abstractmethod
    def union(self, alternatives: list[tuple[Kind, Doc]]) -> Doc: ...

    @abstractmethod
    def render_object(self, fields: list[RenderedField]) -> Doc: ...

    @abstractmethod
    def render_array(self, element: Doc | None) -> Doc: ...

    @abstractmethod
    def render_null(self) -> Doc: ...

    @abstractmethod
    def render_boolean(self) -> Doc: ...

    @abstractmethod
    def render_number(self) -> Doc: ...

    @abstractmethod
    def render_string(self) -> Doc: ...

    @abstractmethod
    def render_function(self) -> Doc: ...

    @abstractmethod
    def render_undefined(self) -> Doc: ...

    @abstractmethod
    def render_unknown(self) -> Doc: ...
