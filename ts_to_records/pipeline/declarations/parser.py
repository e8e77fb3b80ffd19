"""
Declaration document parser.

Phase 1 of the pipeline: turn a JSON declaration document into classified
declaration nodes. The document describes TypeScript declarations
structurally; this parser plays the part of the type-aware front-end by
classifying every named reference against the whole document.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from ..errors import DeclarationParseError
from .nodes import (
    DeclarationKind,
    DeclarationNode,
    DescriptorKind,
    EnumDeclarationNode,
    EnumMemberNode,
    InterfaceDeclarationNode,
    PropertyNode,
    TypeAliasDeclarationNode,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


class DeclarationParser:
    """Parses a declaration document into declaration nodes."""

    # Built-in type names
    PRIMITIVE_TYPES = {
        "string": DescriptorKind.STRING,
        "number": DescriptorKind.NUMBER,
        "boolean": DescriptorKind.BOOLEAN,
        "any": DescriptorKind.ANY,
        "Uint8Array": DescriptorKind.BYTE_ARRAY,
        "null": DescriptorKind.NULL,
        "undefined": DescriptorKind.UNDEFINED,
    }

    def __init__(self):
        self._raw_by_name: dict[str, dict[str, Any]] = {}
        self._alias_stack: list[str] = []

    def parse(self, document: dict[str, Any] | list[Any]) -> list[DeclarationNode]:
        """
        Parse a declaration document.

        Args:
            document: Either a list of declaration objects or an object
                with a "declarations" list

        Returns:
            Declaration nodes in document order
        """
        raw_declarations = self._declaration_list(document)

        # Symbol table first, so references can point forward
        self._raw_by_name = {}
        for raw in raw_declarations:
            self._validate_declaration(raw)
            self._raw_by_name.setdefault(raw["name"], raw)

        declarations = [self._parse_declaration(raw) for raw in raw_declarations]
        logger.debug(f"Parsed {len(declarations)} declarations")
        return declarations

    def _declaration_list(self, document: Any) -> list[dict[str, Any]]:
        if isinstance(document, dict):
            document = document.get("declarations", [])
        if not isinstance(document, list):
            raise DeclarationParseError("Declaration document must be a list or contain a 'declarations' list")
        return document

    def _validate_declaration(self, raw: Any) -> None:
        if not isinstance(raw, dict):
            raise DeclarationParseError(f"Declaration must be an object, got {type(raw).__name__}")
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise DeclarationParseError("Declaration is missing a name")
        kinds = [kind.value for kind in DeclarationKind]
        if raw.get("kind") not in kinds:
            raise DeclarationParseError(f"Declaration {name} has unknown kind {raw.get('kind')!r}, expected one of {kinds}")

    def _parse_declaration(self, raw: dict[str, Any]) -> DeclarationNode:
        kind = DeclarationKind(raw["kind"])
        name = raw["name"]

        if kind == DeclarationKind.ENUM:
            members = [self._parse_enum_member(name, member) for member in raw.get("members", [])]
            return EnumDeclarationNode(name=name, members=members)

        if kind == DeclarationKind.INTERFACE:
            properties = [self._parse_property(name, prop) for prop in raw.get("properties", [])]
            return InterfaceDeclarationNode(name=name, properties=properties)

        if "type" not in raw:
            raise DeclarationParseError(f"Type alias {name} is missing its aliased type")
        return TypeAliasDeclarationNode(name=name, type=self._parse_type(raw["type"]))

    def _parse_enum_member(self, enum_name: str, raw: Any) -> EnumMemberNode:
        if isinstance(raw, str):
            return EnumMemberNode(name=raw)
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            raise DeclarationParseError(f"Enum {enum_name} has a member without a name")
        value = raw.get("value")
        if value is not None and (isinstance(value, bool) or not isinstance(value, (str, int, float))):
            raise DeclarationParseError(f"Enum member {enum_name}.{raw['name']} must have a string or number value")
        return EnumMemberNode(name=raw["name"], value=value)

    def _parse_property(self, owner: str, raw: Any) -> PropertyNode:
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            raise DeclarationParseError(f"{owner} has a property without a name")
        if "type" not in raw:
            raise DeclarationParseError(f"Property {owner}.{raw['name']} is missing its type")
        return PropertyNode(
            name=raw["name"],
            type=self._parse_type(raw["type"]),
            is_optional=bool(raw.get("optional", False)),
        )

    def _parse_type(self, raw: Any) -> TypeDescriptor:
        """Parse a type expression into a classified descriptor."""
        if isinstance(raw, str):
            return self._parse_named_type(raw)

        if not isinstance(raw, dict):
            raise DeclarationParseError(f"Invalid type expression: {raw!r}")

        if "array" in raw:
            element = self._parse_type(raw["array"]) if raw["array"] is not None else None
            display = f"{element.display_name}[]" if element else "[]"
            return TypeDescriptor(kind=DescriptorKind.ARRAY, display_name=display, element=element)

        if "generic" in raw:
            generic_name = raw["generic"]
            arguments = [self._parse_type(arg) for arg in raw.get("arguments", [])]
            display = f"{generic_name}<{', '.join(arg.display_name for arg in arguments)}>"
            return TypeDescriptor(
                kind=DescriptorKind.GENERIC,
                display_name=display,
                generic_name=generic_name,
                type_arguments=arguments,
            )

        if "union" in raw:
            members = [self._parse_type(member) for member in raw["union"]]
            return TypeDescriptor(
                kind=DescriptorKind.UNION,
                display_name=" | ".join(member.display_name for member in members),
                members=members,
            )

        if "literal" in raw:
            return self._parse_literal(raw["literal"])

        if "object" in raw:
            properties = [self._parse_property("Object type", prop) for prop in raw["object"]]
            body = "; ".join(f"{prop.name}: {prop.type.display_name}" for prop in properties)
            return TypeDescriptor(
                kind=DescriptorKind.OBJECT,
                display_name=f"{{ {body} }}" if body else "{}",
                properties=properties,
            )

        raise DeclarationParseError(f"Invalid type expression: {raw!r}")

    def _parse_literal(self, value: Any) -> TypeDescriptor:
        if isinstance(value, str):
            return TypeDescriptor(kind=DescriptorKind.STRING_LITERAL, display_name=f'"{value}"', literal_value=value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return TypeDescriptor(kind=DescriptorKind.NUMBER_LITERAL, display_name=str(value), literal_value=value)
        raise DeclarationParseError(f"Literal types must be strings or numbers, got {value!r}")

    def _parse_named_type(self, name: str) -> TypeDescriptor:
        if name.endswith("[]"):
            element = self._parse_named_type(name[:-2])
            return TypeDescriptor(kind=DescriptorKind.ARRAY, display_name=name, element=element)

        if name in self.PRIMITIVE_TYPES:
            return TypeDescriptor(kind=self.PRIMITIVE_TYPES[name], display_name=name)

        return self._parse_reference(name)

    def _parse_reference(self, name: str) -> TypeDescriptor:
        """Classify a reference to a declared name."""
        raw = self._raw_by_name.get(name)
        if raw is None:
            # Unknown to this document, e.g. `never` or `Date`
            return TypeDescriptor(kind=DescriptorKind.OTHER, display_name=name)

        kind = DeclarationKind(raw["kind"])
        if kind == DeclarationKind.ENUM:
            return TypeDescriptor(kind=DescriptorKind.ENUM_REFERENCE, display_name=name)
        if kind == DeclarationKind.INTERFACE:
            return TypeDescriptor(kind=DescriptorKind.RECORD_REFERENCE, display_name=name)

        aliased_raw = raw.get("type")
        if isinstance(aliased_raw, dict) and "object" in aliased_raw:
            return TypeDescriptor(kind=DescriptorKind.RECORD_REFERENCE, display_name=name)

        if name in self._alias_stack:
            return TypeDescriptor(kind=DescriptorKind.OTHER, display_name=name)

        self._alias_stack.append(name)
        try:
            aliased = self._parse_type(aliased_raw)
        finally:
            self._alias_stack.pop()

        if aliased.kind == DescriptorKind.UNION:
            return dataclasses.replace(aliased, display_name=name, alias_name=name)
        # Other aliases stand for their target (type Name = string); the
        # alias declaration itself is rejected during resolution
        return aliased
