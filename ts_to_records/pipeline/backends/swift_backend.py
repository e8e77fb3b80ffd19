"""
Swift code generation backend.

Generates Expo Modules `Record` structs and `Enumerable` enums.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import IRTypeKind
from .base import CodeBackend

SWIFT_RESERVED_KEYWORDS = frozenset(
    {
        "Any",
        "Self",
        "as",
        "associatedtype",
        "break",
        "case",
        "catch",
        "class",
        "continue",
        "default",
        "defer",
        "deinit",
        "do",
        "else",
        "enum",
        "extension",
        "fallthrough",
        "false",
        "fileprivate",
        "for",
        "func",
        "guard",
        "if",
        "import",
        "in",
        "init",
        "inout",
        "internal",
        "is",
        "let",
        "nil",
        "open",
        "operator",
        "private",
        "protocol",
        "public",
        "repeat",
        "rethrows",
        "return",
        "self",
        "static",
        "struct",
        "subscript",
        "super",
        "switch",
        "throw",
        "throws",
        "true",
        "try",
        "typealias",
        "var",
        "where",
        "while",
    }
)


class SwiftBackend(CodeBackend):
    """Swift code generation backend."""

    TEMPLATE_LANG = "swift"
    FILE_EXTENSION = "swift"

    TYPE_MAP = {
        IRTypeKind.STRING: "String",
        IRTypeKind.NUMBER: "Double",
        IRTypeKind.BOOLEAN: "Bool",
        IRTypeKind.ANY: "Any",
        IRTypeKind.BYTE_ARRAY: "Data",
    }

    DEFAULT_MAP = {
        IRTypeKind.STRING: '""',
        IRTypeKind.NUMBER: "0.0",
        IRTypeKind.BOOLEAN: "false",
        IRTypeKind.ANY: "[:]",
        IRTypeKind.BYTE_ARRAY: "Data()",
        IRTypeKind.ARRAY: "[]",
        IRTypeKind.MAP: "[:]",
    }

    STRING_RAW_TYPE = "String"
    INTEGER_RAW_TYPE = "Int"

    NULL_LITERAL = "nil"

    RESERVED_KEYWORDS = SWIFT_RESERVED_KEYWORDS

    def _prepare_prefix_context(self) -> dict[str, Any]:
        ctx = super()._prepare_prefix_context()
        ctx["imports"] = self.config.swift_imports
        return ctx

    def array_type(self, element_type: str) -> str:
        return f"[{element_type}]"

    def map_type(self, key_type: str, value_type: str) -> str:
        return f"[{key_type}: {value_type}]"

    def optional_type(self, type_str: str) -> str:
        return f"{type_str}?"

    def enum_case_reference(self, enum_name: str, case_name: str) -> str:
        # The field's declared type lets Swift infer the enum
        return f".{case_name}"
