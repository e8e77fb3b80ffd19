"""
IR (Intermediate Representation) node definitions.

These nodes represent resolved declarations, ready for code generation.
IR types reference other declarations by name only, so the IR itself
never contains cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class IRTypeKind(Enum):
    """Kind of type in the IR."""

    STRING = "string"
    NUMBER = "number"  # No int/float distinction here
    BOOLEAN = "boolean"
    ANY = "any"
    BYTE_ARRAY = "byte-array"
    ARRAY = "array"  # list of element
    MAP = "map"  # key -> value
    ENUM = "enum"  # Reference to an enum declaration by name
    RECORD = "record"  # Reference to a record declaration by name


@dataclass(frozen=True)
class IRType:
    """A resolved type."""

    kind: IRTypeKind = IRTypeKind.ANY

    # Declaration name, for ENUM and RECORD
    name: str = ""

    # For ARRAY
    element: IRType | None = None

    # For MAP
    key: IRType | None = None
    value: IRType | None = None

    def referenced_names(self) -> list[str]:
        """Names of declarations referenced anywhere in this type, in first-seen order."""
        if self.kind in (IRTypeKind.ENUM, IRTypeKind.RECORD):
            return [self.name]
        if self.kind == IRTypeKind.ARRAY:
            return self.element.referenced_names()
        if self.kind == IRTypeKind.MAP:
            names = self.key.referenced_names()
            names.extend(name for name in self.value.referenced_names() if name not in names)
            return names
        return []


STRING = IRType(IRTypeKind.STRING)
NUMBER = IRType(IRTypeKind.NUMBER)
BOOLEAN = IRType(IRTypeKind.BOOLEAN)
ANY = IRType(IRTypeKind.ANY)
BYTE_ARRAY = IRType(IRTypeKind.BYTE_ARRAY)


def array_of(element: IRType) -> IRType:
    return IRType(IRTypeKind.ARRAY, element=element)


def map_of(key: IRType, value: IRType) -> IRType:
    return IRType(IRTypeKind.MAP, key=key, value=value)


def enum_ref(name: str) -> IRType:
    return IRType(IRTypeKind.ENUM, name=name)


def record_ref(name: str) -> IRType:
    return IRType(IRTypeKind.RECORD, name=name)


class DeclarationKind(Enum):
    """Kind of declaration in the IR."""

    ENUM = "enum"
    RECORD = "record"


@dataclass(frozen=True)
class EnumMember:
    """An enum member. Values within one enum are all strings or all numbers."""

    name: str = ""
    value: str | int | float = 0


@dataclass(frozen=True)
class EnumDeclaration:
    """An enum declaration."""

    name: str = ""
    members: tuple[EnumMember, ...] = field(default_factory=tuple)

    kind = DeclarationKind.ENUM

    @property
    def is_string_enum(self) -> bool:
        return all(isinstance(member.value, str) for member in self.members)

    def dependencies(self) -> list[str]:
        return []


@dataclass(frozen=True)
class RecordProperty:
    """A property of a record. Nullability lives here, never in the type."""

    name: str = ""
    type: IRType = ANY
    is_optional: bool = False


@dataclass(frozen=True)
class RecordDeclaration:
    """A record (struct/class) declaration."""

    name: str = ""
    properties: tuple[RecordProperty, ...] = field(default_factory=tuple)

    kind = DeclarationKind.RECORD

    def dependencies(self) -> list[str]:
        """Distinct declaration names referenced by the property types."""
        names: list[str] = []
        for prop in self.properties:
            names.extend(name for name in prop.type.referenced_names() if name not in names)
        return names


IRDeclaration = EnumDeclaration | RecordDeclaration
