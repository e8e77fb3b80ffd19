import pytest

from ts_to_records.pipeline.analyzer.ir_nodes import (
    ANY,
    BOOLEAN,
    BYTE_ARRAY,
    NUMBER,
    STRING,
    array_of,
    enum_ref,
    map_of,
    record_ref,
)
from ts_to_records.pipeline.analyzer.type_resolver import TypeResolver
from ts_to_records.pipeline.declarations.nodes import DescriptorKind, TypeDescriptor
from ts_to_records.pipeline.errors import UnsupportedTypeError


def descriptor(kind, display_name="", **kwargs):
    return TypeDescriptor(kind=kind, display_name=display_name or kind.value, **kwargs)


@pytest.fixture
def resolver():
    return TypeResolver()


@pytest.mark.parametrize(
    "kind, expected",
    [
        (DescriptorKind.STRING, STRING),
        (DescriptorKind.NUMBER, NUMBER),
        (DescriptorKind.BOOLEAN, BOOLEAN),
        (DescriptorKind.ANY, ANY),
        (DescriptorKind.BYTE_ARRAY, BYTE_ARRAY),
    ],
)
def test_primitives(resolver, kind, expected):
    assert resolver.resolve(descriptor(kind)) == expected


def test_nested_arrays(resolver):
    inner = descriptor(DescriptorKind.ARRAY, "string[]", element=descriptor(DescriptorKind.STRING))
    outer = descriptor(DescriptorKind.ARRAY, "string[][]", element=inner)

    assert resolver.resolve(outer) == array_of(array_of(STRING))


def test_array_without_element_fails(resolver):
    with pytest.raises(UnsupportedTypeError):
        resolver.resolve(descriptor(DescriptorKind.ARRAY, "[]"))


def test_record_generic_becomes_map(resolver):
    record = descriptor(
        DescriptorKind.GENERIC,
        "Record<string, Address>",
        generic_name="Record",
        type_arguments=[descriptor(DescriptorKind.STRING), descriptor(DescriptorKind.RECORD_REFERENCE, "Address")],
    )

    assert resolver.resolve(record) == map_of(STRING, record_ref("Address"))


def test_record_generic_with_missing_argument_fails(resolver):
    record = descriptor(
        DescriptorKind.GENERIC,
        "Record<string>",
        generic_name="Record",
        type_arguments=[descriptor(DescriptorKind.STRING)],
    )

    with pytest.raises(UnsupportedTypeError, match="Record<string>"):
        resolver.resolve(record)


def test_other_generics_are_unsupported(resolver):
    partial = descriptor(
        DescriptorKind.GENERIC,
        "Partial<User>",
        generic_name="Partial",
        type_arguments=[descriptor(DescriptorKind.RECORD_REFERENCE, "User")],
    )

    with pytest.raises(UnsupportedTypeError, match="Partial<User>"):
        resolver.resolve(partial)


def test_references_stay_name_only(resolver):
    assert resolver.resolve(descriptor(DescriptorKind.ENUM_REFERENCE, "Status")) == enum_ref("Status")
    assert resolver.resolve(descriptor(DescriptorKind.RECORD_REFERENCE, "User")) == record_ref("User")


def test_named_union_resolves_to_enum_reference(resolver):
    union = descriptor(
        DescriptorKind.UNION,
        "Level",
        alias_name="Level",
        members=[descriptor(DescriptorKind.NUMBER_LITERAL, "1", literal_value=1)],
    )

    assert resolver.resolve(union) == enum_ref("Level")


def test_inline_union_is_unsupported(resolver):
    union = descriptor(
        DescriptorKind.UNION,
        '"pending" | "active"',
        members=[
            descriptor(DescriptorKind.STRING_LITERAL, '"pending"', literal_value="pending"),
            descriptor(DescriptorKind.STRING_LITERAL, '"active"', literal_value="active"),
        ],
    )

    with pytest.raises(UnsupportedTypeError, match='"pending" \\| "active"'):
        resolver.resolve(union)


@pytest.mark.parametrize("name", ["never", "Date", "unknown"])
def test_unsupported_names_are_reported_verbatim(resolver, name):
    with pytest.raises(UnsupportedTypeError) as exc_info:
        resolver.resolve(descriptor(DescriptorKind.OTHER, name))

    assert exc_info.value.display_name == name
    assert str(exc_info.value) == f"Unsupported TypeScript type: {name}"


def test_null_alone_is_unsupported(resolver):
    with pytest.raises(UnsupportedTypeError):
        resolver.resolve(descriptor(DescriptorKind.NULL))
