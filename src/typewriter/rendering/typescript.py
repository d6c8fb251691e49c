from typewriter.core.types import Dialect, Kind
from typewriter.formatting import LINE, SOFTLINE, Doc, concat, group, if_break, indent, join
from typewriter.rendering.base import BaseRenderer, RenderedField


class TypeScriptRenderer(BaseRenderer):
    """Renders TypeScript type aliases and type literals."""

    dialect = Dialect.TYPESCRIPT

    def declaration(self, name: str, doc: Doc) -> Doc:
        return concat("type ", name, " = ", doc)

    def union(self, alternatives: list[tuple[Kind, Doc]]) -> Doc:
        docs = [doc for _, doc in alternatives]
        return group(indent(SOFTLINE, if_break("| "), join(concat(LINE, "| "), docs)))

    def render_object(self, fields: list[RenderedField]) -> Doc:
        if not fields:
            return "{}"

        terminator = self.options.format.terminator
        members = [
            concat(field.key, "" if field.required else "?", ": ", field.value)
            for field in fields
        ]
        return group(
            "{",
            indent(LINE, join(concat(if_break(terminator, ";"), LINE), members)),
            if_break(terminator),
            LINE,
            "}",
        )

    def render_array(self, element: Doc | None) -> Doc:
        if element is None:
            return "Array<any>"
        return group("Array<", indent(SOFTLINE, element), SOFTLINE, ">")

    def render_null(self) -> Doc:
        return "null"

    def render_boolean(self) -> Doc:
        return "boolean"

    def render_number(self) -> Doc:
        return "number"

    def render_string(self) -> Doc:
        return "string"

    def render_function(self) -> Doc:
        return "{ (): any }"

    def render_undefined(self) -> Doc:
        return "undefined"

    def render_unknown(self) -> Doc:
        return "any"
