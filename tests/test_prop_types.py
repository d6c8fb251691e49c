"""Tests for the PropTypes renderer."""

from typewriter.core.types import UNDEFINED

IMPORT = 'import PropTypes from "prop-types"\n'


class TestSimpleTypes:
    """Tests for flat shapes."""

    def test_required_and_optional(self, builder):
        """Test required fields get .isRequired."""
        builder.add_examples([
            {"firstName": "Marie", "lastName": "Curie"},
            {"firstName": "Ada"},
        ])

        assert builder.generate("propTypes", inlined=True) == (
            "PropTypes.shape({\n"
            "  firstName: PropTypes.string.isRequired,\n"
            "  lastName: PropTypes.string,\n"
            "})"
        )
        assert builder.generate("propTypes") == (
            IMPORT
            + "const Root = PropTypes.shape({\n"
            "  firstName: PropTypes.string.isRequired,\n"
            "  lastName: PropTypes.string,\n"
            "})\n"
        )

    def test_flat_shape(self, builder):
        """Test a short shape stays on one line."""
        builder.add_examples([{"a": 1, "b": True}])

        assert builder.generate("prop_types", inlined=True, print_width=400) == (
            "PropTypes.shape({ a: PropTypes.number.isRequired, b: PropTypes.bool.isRequired })"
        )

    def test_nullable_union(self, builder):
        """Test null makes a union nullable instead of an alternative."""
        builder.add_examples([{"foo": None}, {"foo": "s"}, {"foo": 1}])

        assert builder.generate("prop_types", inlined=True) == (
            "PropTypes.shape({\n"
            "  foo: PropTypes.oneOfType([PropTypes.string, PropTypes.number]),\n"
            "})"
        )

    def test_nullable_single_kind(self, builder):
        """Test a nullable single kind is not required."""
        builder.add_examples([{"name": "Ada"}, {"name": None}])

        assert builder.generate("prop_types", inlined=True) == (
            "PropTypes.shape({ name: PropTypes.string })"
        )

    def test_only_null(self, builder):
        """Test a value only ever null or undefined."""
        builder.add_examples([{"a": None, "b": None}, {"a": None, "b": UNDEFINED}])

        assert builder.generate("prop_types", inlined=True, print_width=400) == (
            "PropTypes.shape({ a: PropTypes.oneOf([null]), "
            "b: PropTypes.oneOf([null, undefined]) })"
        )

    def test_arrays(self, builder):
        """Test arrays with and without element observations."""
        builder.add_examples([{"foo": [], "bar": []}, {"foo": [1, 2, 3], "bar": []}])

        assert builder.generate("prop_types", inlined=True, print_width=400) == (
            "PropTypes.shape({ foo: PropTypes.arrayOf(PropTypes.number).isRequired, "
            "bar: PropTypes.array.isRequired })"
        )

    def test_function_and_unknown(self, builder):
        """Test functions and unknown values."""
        builder.add_examples([{"cb": print, "when": object()}])

        assert builder.generate("prop_types", inlined=True, print_width=400) == (
            "PropTypes.shape({ cb: PropTypes.func.isRequired, when: PropTypes.any.isRequired })"
        )

    def test_semicolons(self, builder):
        """Test semi terminates the import and declarations."""
        builder.add_examples([{"a": 1}])

        assert builder.generate("prop_types", semi=True) == (
            'import PropTypes from "prop-types";\n'
            "const Root = PropTypes.shape({ a: PropTypes.number.isRequired });\n"
        )


class TestNamedTypes:
    """Tests for named declarations."""

    def test_nested_declarations(self, builder):
        """Test nested shapes are declared first and referenced by name."""
        builder.add_examples([{"address": {"city": "Paris"}}])

        assert builder.generate("prop_types") == (
            IMPORT
            + "const RootAddress = PropTypes.shape({ city: PropTypes.string.isRequired })\n"
            "const Root = PropTypes.shape({ address: RootAddress.isRequired })\n"
        )

    def test_empty_object(self, builder):
        """Test an empty object renders an empty shape."""
        builder.add_examples([{"empty": {}}])

        assert builder.generate("prop_types") == (
            IMPORT
            + "const RootEmpty = PropTypes.shape({})\n"
            "const Root = PropTypes.shape({ empty: RootEmpty.isRequired })\n"
        )

    def test_root_array(self, builder):
        """Test a root array validates its elements."""
        builder.add_examples([[{"foo": "x"}]])

        assert builder.generate("prop_types") == (
            IMPORT
            + "const RootItem = PropTypes.shape({ foo: PropTypes.string.isRequired })\n"
            "const Root = PropTypes.arrayOf(RootItem)\n"
        )

    def test_dependencies_declared_first(self, builder):
        """Test a type wrapped by a later batch is still declared before its user."""
        builder.add_examples([{"city": "Paris"}], root_type_name="Address")
        builder.add_examples(
            [{"home": {"city": "Lyon"}}],
            named_keypaths={"Root.home": "Address"},
        )

        assert builder.type_names() == ["Root", "Address"]
        assert builder.generate("prop_types") == (
            IMPORT
            + "const Address = PropTypes.shape({ city: PropTypes.string.isRequired })\n"
            "const Root = PropTypes.shape({ home: Address.isRequired })\n"
        )

    def test_member_named_root(self, builder):
        """Test a member called root is not a reference to the root validator."""
        builder.add_examples([{"root": "x"}])

        assert builder.generate("prop_types") == (
            IMPORT + "const Root = PropTypes.shape({ root: PropTypes.string.isRequired })\n"
        )

    def test_empty_model(self, builder):
        """Test nothing to render gives an empty string, without the import."""
        assert builder.generate("prop_types") == ""
        assert builder.generate("prop_types", inlined=True) == ""


class TestComplexTypes:
    """Tests for the combined union/array/object scenario."""

    def test_named(self, complex_builder):
        """Test declarations and references in the complex scenario."""
        code = complex_builder.generate("prop_types")

        assert code.startswith(IMPORT + "const RootEmpty = PropTypes.shape({})\n")
        assert (
            "const RootArrItem = PropTypes.shape({\n"
            "  mandatory: PropTypes.bool.isRequired,\n"
            "  bar: PropTypes.string,\n"
            "  hello: PropTypes.string,\n"
            "})\n"
        ) in code
        assert "const RootFoo = PropTypes.oneOfType([\n  PropTypes.string,\n" in code
        assert "  foo: RootFoo,\n" in code
        assert "  bax: PropTypes.arrayOf(PropTypes.string),\n" in code
        assert "  bar: PropTypes.array,\n" in code
        assert "  arr: PropTypes.arrayOf(RootArrItem),\n" in code
        assert "  empty: RootEmpty,\n" in code
        assert code.index("const RootFoo") < code.index("const Root =")

    def test_inlined(self, complex_builder):
        """Test the inlined rendering has no references."""
        code = complex_builder.generate("prop_types", inlined=True)

        assert code.startswith("PropTypes.shape({\n")
        assert "PropTypes.oneOf([null])" not in code
        for name in ("RootFoo", "RootArrItem", "RootEmpty"):
            assert name not in code
