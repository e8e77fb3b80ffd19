"""
Declaration resolver.

Converts one source declaration into one IR declaration:

- enums keep their members in source order, auto-numbering members
  without an initializer
- interfaces and object-shaped aliases become records
- aliases of a pure string or number literal union become enums
"""

from __future__ import annotations

from ..declarations.nodes import (
    NULLISH_KINDS,
    DeclarationNode,
    DescriptorKind,
    EnumDeclarationNode,
    InterfaceDeclarationNode,
    PropertyNode,
    TypeAliasDeclarationNode,
    TypeDescriptor,
)
from ..errors import EmptyEnumError, HeterogeneousEnumError, NonIntegerEnumValueError, UnsupportedAliasShapeError
from .ir_nodes import EnumDeclaration, EnumMember, IRDeclaration, RecordDeclaration, RecordProperty
from .type_resolver import TypeResolver

LITERAL_KINDS = (DescriptorKind.STRING_LITERAL, DescriptorKind.NUMBER_LITERAL)


class DeclarationResolver:
    """Resolves source declarations to IR declarations."""

    def __init__(self, type_resolver: TypeResolver | None = None):
        self.type_resolver = type_resolver or TypeResolver()

    def resolve(self, declaration: DeclarationNode) -> IRDeclaration:
        """
        Resolve a single declaration.

        Cross-references stay name-only; nothing here looks at other
        declarations.
        """
        if isinstance(declaration, EnumDeclarationNode):
            return self._resolve_enum(declaration)
        if isinstance(declaration, InterfaceDeclarationNode):
            return self._resolve_record(declaration.name, declaration.properties)
        if isinstance(declaration, TypeAliasDeclarationNode):
            return self._resolve_type_alias(declaration)
        raise TypeError(f"Unknown declaration node: {type(declaration).__name__}")

    def _resolve_enum(self, declaration: EnumDeclarationNode) -> EnumDeclaration:
        members = []
        next_value: int | float | None = 0
        for member in declaration.members:
            value = member.value
            if value is None:
                if next_value is None:
                    # Auto-numbering after a string member
                    raise HeterogeneousEnumError(declaration.name)
                value = next_value
            next_value = value + 1 if not isinstance(value, str) else None
            members.append(EnumMember(name=member.name, value=value))

        return self._make_enum(declaration.name, members)

    def _make_enum(self, name: str, members: list[EnumMember]) -> EnumDeclaration:
        if not members:
            raise EmptyEnumError(name)
        string_members = sum(isinstance(member.value, str) for member in members)
        if string_members not in (0, len(members)):
            raise HeterogeneousEnumError(name)
        for member in members:
            if isinstance(member.value, float) and not member.value.is_integer():
                raise NonIntegerEnumValueError(name, member.value)
        return EnumDeclaration(name=name, members=tuple(members))

    def _resolve_record(self, name: str, properties: list[PropertyNode]) -> RecordDeclaration:
        return RecordDeclaration(
            name=name,
            properties=tuple(self._resolve_property(prop) for prop in properties),
        )

    def _resolve_property(self, prop: PropertyNode) -> RecordProperty:
        # string | undefined -> optional string
        is_optional = prop.is_optional or prop.type.is_nullable()
        return RecordProperty(
            name=prop.name,
            type=self.type_resolver.resolve(prop.type.non_nullable()),
            is_optional=is_optional,
        )

    def _resolve_type_alias(self, declaration: TypeAliasDeclarationNode) -> IRDeclaration:
        aliased = declaration.type

        if aliased.kind == DescriptorKind.UNION:
            literals = self._literal_union_members(aliased)
            if literals is None:
                raise UnsupportedAliasShapeError(declaration.name)
            members = [EnumMember(name=str(literal.literal_value), value=literal.literal_value) for literal in literals]
            return self._make_enum(declaration.name, members)

        if aliased.kind == DescriptorKind.OBJECT:
            return self._resolve_record(declaration.name, aliased.properties)

        raise UnsupportedAliasShapeError(declaration.name)

    def _literal_union_members(self, union: TypeDescriptor) -> list[TypeDescriptor] | None:
        """Return the literal members if the union is all-string or all-number literals."""
        members = [member for member in union.flattened_members() if member.kind not in NULLISH_KINDS]
        if not members:
            return None
        kinds = {member.kind for member in members}
        if len(kinds) != 1 or kinds.pop() not in LITERAL_KINDS:
            return None
        return members
