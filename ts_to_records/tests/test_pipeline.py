import pytest

from ts_to_records.pipeline import (
    CircularDependencyError,
    CodeGeneratorConfig,
    DeclarationParser,
    DuplicateDeclarationError,
    HeterogeneousEnumError,
    MissingConfigurationError,
    NonIntegerEnumValueError,
    PipelineGenerator,
    UnsupportedAliasShapeError,
    UnsupportedTypeError,
    build_intermediate_representation,
    generate_kotlin_code,
    generate_swift_code,
)

CONFIG = CodeGeneratorConfig(kotlin_package_name="expo.modules.testmodule")


def parse(document):
    return DeclarationParser().parse(document)


def interface(name, /, **properties):
    return {"kind": "interface", "name": name, "properties": [{"name": k, "type": v} for k, v in properties.items()]}


class TestEndToEnd:
    def test_user_with_nested_types(self):
        declarations = parse(
            [
                interface("User", name="string", address="Address", status="Status"),
                interface("Address", city="string"),
                {"kind": "type-alias", "name": "Status", "type": {"union": [{"literal": "active"}, {"literal": "inactive"}]}},
            ]
        )

        swift = generate_swift_code(declarations)

        assert swift.index("enum Status: String") < swift.index("struct Address")
        assert swift.index("struct Address") < swift.index("struct User")
        assert "var status: Status = .active" in swift

    def test_output_is_deterministic(self):
        document = [interface("B", a="A"), interface("A", c="C"), {"kind": "enum", "name": "C", "members": ["x"]}]

        first = generate_kotlin_code(parse(document), CONFIG)
        second = generate_kotlin_code(parse(document), CONFIG)

        assert first == second

    def test_same_ir_for_both_targets(self):
        document = [interface("Holder", items="Item[]"), interface("Item", id="number")]

        ir = build_intermediate_representation(parse(document))

        assert [d.name for d in ir] == ["Item", "Holder"]
        assert build_intermediate_representation(parse(document)) == ir

    def test_empty_input_generates_nothing(self):
        assert generate_swift_code([]) == ""
        assert generate_kotlin_code([], CONFIG) == ""


class TestErrors:
    def test_unsupported_property_type(self):
        declarations = parse([interface("Broken", value="never")])

        with pytest.raises(UnsupportedTypeError, match="Unsupported TypeScript type: never"):
            generate_swift_code(declarations)

    def test_unsupported_generic(self):
        declarations = parse([interface("Broken", value={"generic": "Promise", "arguments": ["string"]})])

        with pytest.raises(UnsupportedTypeError) as exc_info:
            generate_swift_code(declarations)
        assert exc_info.value.display_name == "Promise<string>"

    def test_circular_dependency(self):
        declarations = parse([interface("A", b="B"), interface("B", a="A")])

        with pytest.raises(CircularDependencyError) as exc_info:
            generate_swift_code(declarations)
        assert exc_info.value.name == "A"

    def test_duplicate_declaration(self):
        declarations = parse([interface("User", id="string"), interface("User", name="string")])

        with pytest.raises(DuplicateDeclarationError, match="Duplicate declaration found: User"):
            generate_kotlin_code(declarations, CONFIG)

    def test_heterogeneous_enum(self):
        declarations = parse([{"kind": "enum", "name": "Mixed", "members": [{"name": "a", "value": "a"}, {"name": "b", "value": 1}]}])

        with pytest.raises(HeterogeneousEnumError):
            generate_swift_code(declarations)

    def test_unsupported_alias_shape(self):
        declarations = parse([{"kind": "type-alias", "name": "Id", "type": "string"}])

        with pytest.raises(UnsupportedAliasShapeError, match="Unsupported type alias shape: Id"):
            generate_swift_code(declarations)

    def test_kotlin_without_package_name(self):
        with pytest.raises(MissingConfigurationError, match="Config must specify kotlin.packageName"):
            generate_kotlin_code([], CodeGeneratorConfig())

    def test_missing_package_name_reported_before_resolution(self):
        declarations = parse([interface("Broken", value="never")])

        with pytest.raises(MissingConfigurationError):
            PipelineGenerator(declarations, CodeGeneratorConfig(), "kotlin").generate()

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="not supported"):
            PipelineGenerator([], CONFIG, "java")


class TestNullableAliases:
    def test_nullable_literal_union_alias_as_property_type(self):
        declarations = parse(
            [
                interface("Holder", status="Status", only="Only"),
                {"kind": "type-alias", "name": "Status", "type": {"union": [{"literal": "a"}, {"literal": "b"}, "null"]}},
                {"kind": "type-alias", "name": "Only", "type": {"union": [{"literal": 1}, "undefined"]}},
            ]
        )

        swift = generate_swift_code(declarations)
        kotlin = generate_kotlin_code(declarations, CONFIG)

        assert "var status: Status? = nil" in swift
        assert "var only: Only? = nil" in swift
        assert "enum Only: Int, Enumerable {\n  case _1 = 1\n}" in swift
        assert "val status: Status? = null" in kotlin


class TestRejectedShapes:
    def test_fractional_numeric_enum(self):
        declarations = parse([{"kind": "type-alias", "name": "Ratio", "type": {"union": [{"literal": 0.5}, {"literal": 1.5}]}}])

        with pytest.raises(NonIntegerEnumValueError, match="Enum Ratio has non-integer member value 0.5"):
            generate_swift_code(declarations)

    def test_plain_alias_fails_the_run_even_when_referenced(self):
        declarations = parse(
            [
                interface("User", id="UserId"),
                {"kind": "type-alias", "name": "UserId", "type": "string"},
            ]
        )

        with pytest.raises(UnsupportedAliasShapeError, match="UserId"):
            generate_swift_code(declarations)
