"""
External declaration node definitions.

These nodes describe source declarations (interfaces, enums and type
aliases) as a type-aware parser sees them, before any resolution into
the IR. Type descriptors are already classified: references know whether
they point at an enum or a record, and union aliases carry their name.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class DeclarationKind(str, Enum):
    """Kind of a source declaration."""

    ENUM = "enum"
    INTERFACE = "interface"
    TYPE_ALIAS = "type-alias"


class DescriptorKind(str, Enum):
    """Classification of a source type descriptor."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY = "any"
    BYTE_ARRAY = "byte-array"  # Uint8Array
    ARRAY = "array"  # T[]
    GENERIC = "generic"  # Name<A, B>
    ENUM_REFERENCE = "enum-reference"
    RECORD_REFERENCE = "record-reference"
    UNION = "union"  # A | B, named when it is an alias
    OBJECT = "object"  # { a: T; b: U }
    STRING_LITERAL = "string-literal"
    NUMBER_LITERAL = "number-literal"
    NULL = "null"
    UNDEFINED = "undefined"
    OTHER = "other"  # anything the parser could not classify


NULLISH_KINDS = frozenset({DescriptorKind.NULL, DescriptorKind.UNDEFINED})


@dataclass
class TypeDescriptor:
    """A classified source type."""

    kind: DescriptorKind = DescriptorKind.OTHER

    # Human-readable name, used in error messages
    display_name: str = ""

    # For arrays
    element: TypeDescriptor | None = None

    # For generics (e.g. Record<string, number>)
    generic_name: str = ""
    type_arguments: list[TypeDescriptor] = field(default_factory=list)

    # For unions: the alias name when the union is itself a declared alias
    alias_name: str | None = None
    members: list[TypeDescriptor] = field(default_factory=list)

    # For string/number literals
    literal_value: Any = None

    # For object shapes
    properties: list[PropertyNode] = field(default_factory=list)

    def is_nullable(self) -> bool:
        """Whether null or undefined is a possible value of this type."""
        if self.kind in NULLISH_KINDS:
            return True
        if self.kind == DescriptorKind.UNION:
            return any(member.is_nullable() for member in self.members)
        return False

    def non_nullable(self) -> TypeDescriptor:
        """Return this type with null and undefined removed (T | null -> T)."""
        if self.kind in NULLISH_KINDS:
            return TypeDescriptor(kind=DescriptorKind.OTHER, display_name="never")
        if self.kind != DescriptorKind.UNION or not self.is_nullable():
            return self

        remaining = [member for member in self.members if member.kind not in NULLISH_KINDS]
        remaining = [member.non_nullable() if member.kind == DescriptorKind.UNION else member for member in remaining]
        if not remaining:
            return TypeDescriptor(kind=DescriptorKind.OTHER, display_name="never")
        if self.alias_name:
            # Still the named enum, even with a single literal left
            return replace(self, members=remaining)
        if len(remaining) == 1:
            return remaining[0]
        return TypeDescriptor(
            kind=DescriptorKind.UNION,
            display_name=" | ".join(member.display_name for member in remaining),
            members=remaining,
        )

    def flattened_members(self) -> list[TypeDescriptor]:
        """Union members with nested unions flattened and repeated literals dropped."""
        result: list[TypeDescriptor] = []
        seen: set[tuple[DescriptorKind, Any]] = set()
        for member in self.members:
            nested = member.flattened_members() if member.kind == DescriptorKind.UNION else [member]
            for item in nested:
                if item.kind in (DescriptorKind.STRING_LITERAL, DescriptorKind.NUMBER_LITERAL):
                    key = (item.kind, item.literal_value)
                    if key in seen:
                        continue
                    seen.add(key)
                result.append(item)
        return result


@dataclass
class PropertyNode:
    """A property of an interface or object-shaped alias."""

    name: str = ""
    type: TypeDescriptor | None = None
    is_optional: bool = False  # Explicit `?` marker


@dataclass
class EnumMemberNode:
    """A member of a source enum. `value` is None when the member has no initializer."""

    name: str = ""
    value: str | int | float | None = None


@dataclass
class DeclarationNode:
    """Base class for source declarations."""

    kind: DeclarationKind = DeclarationKind.INTERFACE
    name: str = ""


@dataclass
class EnumDeclarationNode(DeclarationNode):
    """`enum Name { ... }`"""

    kind: DeclarationKind = DeclarationKind.ENUM
    members: list[EnumMemberNode] = field(default_factory=list)


@dataclass
class InterfaceDeclarationNode(DeclarationNode):
    """`interface Name { ... }`"""

    kind: DeclarationKind = DeclarationKind.INTERFACE
    properties: list[PropertyNode] = field(default_factory=list)


@dataclass
class TypeAliasDeclarationNode(DeclarationNode):
    """`type Name = ...`"""

    kind: DeclarationKind = DeclarationKind.TYPE_ALIAS
    type: TypeDescriptor | None = None
