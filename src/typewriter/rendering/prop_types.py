from typewriter.core.types import Dialect, Kind
from typewriter.formatting import LINE, SOFTLINE, Doc, concat, group, if_break, indent, join
from typewriter.rendering.base import BaseRenderer, RenderedField

PROP_TYPES = "PropTypes"


class PropTypesRenderer(BaseRenderer):
    """Renders React ``prop-types`` validators.

    Null and undefined are not validator types of their own: alongside other
    kinds they only make the value nullable, which drops ``.isRequired``.
    """

    dialect = Dialect.PROP_TYPES

    def preamble(self) -> list[Doc]:
        return [f'import {PROP_TYPES} from "prop-types"']

    def declaration_order(self) -> list[str]:
        """Place every validator after the validators it references.

        A ``const`` cannot be read before its declaration runs, so types a
        later batch wraps around earlier ones still come out dependencies
        first. Self references keep their place.
        """
        declared = super().declaration_order()
        names = set(declared)
        ordered: list[str] = []
        visited: set[str] = set()

        def visit(name: str) -> None:
            if name in visited:
                return
            visited.add(name)
            for dependency in self.references(name):
                if dependency in names:
                    visit(dependency)
            ordered.append(name)

        for name in declared:
            visit(name)
        return ordered

    def declaration(self, name: str, doc: Doc) -> Doc:
        return concat("const ", name, " = ", doc)

    def union(self, alternatives: list[tuple[Kind, Doc]]) -> Doc:
        docs = [doc for kind, doc in alternatives if not kind.is_nullish]
        if not docs:
            values = [kind.value for kind, _ in alternatives]
            return concat(f"{PROP_TYPES}.oneOf([", ", ".join(values), "])")
        if len(docs) == 1:
            return docs[0]
        return group(
            f"{PROP_TYPES}.oneOfType([",
            indent(SOFTLINE, join(concat(",", LINE), docs)),
            if_break(","),
            SOFTLINE,
            "])",
        )

    def render_object(self, fields: list[RenderedField]) -> Doc:
        if not fields:
            return f"{PROP_TYPES}.shape({{}})"

        members = [
            concat(
                field.key,
                ": ",
                field.value,
                ".isRequired" if field.required and not field.nullable else "",
            )
            for field in fields
        ]
        body = group(
            "{",
            indent(LINE, join(concat(",", LINE), members)),
            if_break(","),
            LINE,
            "}",
        )
        return concat(f"{PROP_TYPES}.shape(", body, ")")

    def render_array(self, element: Doc | None) -> Doc:
        if element is None:
            return f"{PROP_TYPES}.array"
        return self._call("arrayOf", element)

    def render_null(self) -> Doc:
        return f"{PROP_TYPES}.oneOf([null])"

    def render_boolean(self) -> Doc:
        return f"{PROP_TYPES}.bool"

    def render_number(self) -> Doc:
        return f"{PROP_TYPES}.number"

    def render_string(self) -> Doc:
        return f"{PROP_TYPES}.string"

    def render_function(self) -> Doc:
        return f"{PROP_TYPES}.func"

    def render_undefined(self) -> Doc:
        return f"{PROP_TYPES}.oneOf([undefined])"

    def render_unknown(self) -> Doc:
        return f"{PROP_TYPES}.any"

    def _call(self, validator: str, argument: Doc) -> Doc:
        return group(f"{PROP_TYPES}.{validator}(", indent(SOFTLINE, argument), SOFTLINE, ")")

