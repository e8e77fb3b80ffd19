"""
Kotlin code generation backend.

Generates Expo Modules `Record` classes and `Enumerable` enum classes
inside the configured package.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import IRTypeKind
from ..config import CodeGeneratorConfig
from .base import CodeBackend

KOTLIN_RESERVED_KEYWORDS = frozenset(
    {
        "as",
        "break",
        "class",
        "continue",
        "do",
        "else",
        "false",
        "for",
        "fun",
        "if",
        "in",
        "interface",
        "is",
        "null",
        "object",
        "package",
        "return",
        "super",
        "this",
        "throw",
        "true",
        "try",
        "typealias",
        "typeof",
        "val",
        "var",
        "when",
        "while",
    }
)


class KotlinBackend(CodeBackend):
    """Kotlin code generation backend."""

    TEMPLATE_LANG = "kotlin"
    FILE_EXTENSION = "kt"

    TYPE_MAP = {
        IRTypeKind.STRING: "String",
        IRTypeKind.NUMBER: "Double",
        IRTypeKind.BOOLEAN: "Boolean",
        IRTypeKind.ANY: "Any",
        IRTypeKind.BYTE_ARRAY: "ByteArray",
    }

    DEFAULT_MAP = {
        IRTypeKind.STRING: '""',
        IRTypeKind.NUMBER: "0.0",
        IRTypeKind.BOOLEAN: "false",
        IRTypeKind.ANY: "mapOf()",
        IRTypeKind.BYTE_ARRAY: "ByteArray(0)",
        IRTypeKind.ARRAY: "listOf()",
        IRTypeKind.MAP: "mapOf()",
    }

    STRING_RAW_TYPE = "String"
    INTEGER_RAW_TYPE = "Int"

    NULL_LITERAL = "null"

    RESERVED_KEYWORDS = KOTLIN_RESERVED_KEYWORDS

    def __init__(self, config: CodeGeneratorConfig):
        config.require_kotlin_package_name()
        super().__init__(config)

    def _prepare_prefix_context(self) -> dict[str, Any]:
        ctx = super()._prepare_prefix_context()
        ctx["package_name"] = self.config.kotlin_package_name
        ctx["imports"] = self.config.kotlin_imports
        return ctx

    def array_type(self, element_type: str) -> str:
        return f"List<{element_type}>"

    def map_type(self, key_type: str, value_type: str) -> str:
        return f"Map<{key_type}, {value_type}>"

    def optional_type(self, type_str: str) -> str:
        return f"{type_str}?"

    def enum_case_reference(self, enum_name: str, case_name: str) -> str:
        return f"{enum_name}.{case_name}"
