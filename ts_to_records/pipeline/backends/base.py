"""
Base class for code generation backends.

Holds the emission contract shared by every target: type mapping,
default values, optionality and identifier legalization. Subclasses only
provide their token tables and container syntax.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import (
    DeclarationKind,
    EnumDeclaration,
    IRDeclaration,
    IRType,
    IRTypeKind,
    RecordDeclaration,
    RecordProperty,
)
from ..config import GENERATION_COMMENT, CodeGeneratorConfig

logger = logging.getLogger(__name__)

_NON_IDENTIFIER_CHARS = re.compile(r"\W")


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Type names for the non-container IR kinds
    TYPE_MAP: dict[IRTypeKind, str] = {}

    # Default values for primitive and container IR kinds
    DEFAULT_MAP: dict[IRTypeKind, str] = {}

    # Enum raw value types
    STRING_RAW_TYPE: str = ""
    INTEGER_RAW_TYPE: str = ""

    NULL_LITERAL: str = ""

    # Words that need escaping when used as identifiers
    RESERVED_KEYWORDS: frozenset[str] = frozenset()

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        # Enum name -> declaration, for first-member defaults
        self.enum_declarations: dict[str, EnumDeclaration] = {}
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=False,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.record_template = self.jinja_env.get_template(f"record.{self.FILE_EXTENSION}.jinja2")

    def generate(self, declarations: list[IRDeclaration]) -> str:
        """
        Generate code from ordered IR declarations.

        Enums are rendered first, then records, each in the given order.

        Args:
            declarations: Declarations ordered dependency-first

        Returns:
            Generated code, or an empty string when there is nothing to emit
        """
        if not declarations:
            return ""

        self.enum_declarations = {d.name: d for d in declarations if d.kind == DeclarationKind.ENUM}

        rendered = [self._render_enum(d) for d in declarations if d.kind == DeclarationKind.ENUM]
        rendered += [self._render_record(d) for d in declarations if d.kind == DeclarationKind.RECORD]

        prefix = self.prefix_template.render(self._prepare_prefix_context()).strip()
        sections = [prefix] if prefix else []
        sections.extend(rendered)

        code = "\n\n".join(sections)
        logger.debug(f"Generated {len(code)} characters of {self.TEMPLATE_LANG} code for {len(declarations)} declarations")
        return code

    def _prepare_prefix_context(self) -> dict[str, Any]:
        return {"generation_comment": GENERATION_COMMENT if self.config.add_generation_comment else ""}

    def _render_enum(self, enum_decl: EnumDeclaration) -> str:
        return self.enum_template.render(self._prepare_enum_context(enum_decl)).rstrip()

    def _render_record(self, record_decl: RecordDeclaration) -> str:
        return self.record_template.render(self._prepare_record_context(record_decl)).rstrip()

    def _prepare_enum_context(self, enum_decl: EnumDeclaration) -> dict[str, Any]:
        """
        Prepare the template context for an enum.

        Case names are legalized; raw values keep the original literal.
        """
        names = self.legalize_identifiers([member.name for member in enum_decl.members])
        cases = [{"NAME": name, "VALUE": self.format_literal(member.value)} for name, member in zip(names, enum_decl.members)]
        return {
            "CLASS_NAME": enum_decl.name,
            "RAW_TYPE": self.STRING_RAW_TYPE if enum_decl.is_string_enum else self.INTEGER_RAW_TYPE,
            "cases": cases,
        }

    def _prepare_record_context(self, record_decl: RecordDeclaration) -> dict[str, Any]:
        names = self.legalize_identifiers([prop.name for prop in record_decl.properties])
        properties = []
        for name, prop in zip(names, record_decl.properties):
            field_ctx = self._prepare_field_context(prop)
            field_ctx["NAME"] = name
            properties.append(field_ctx)
        return {"CLASS_NAME": record_decl.name, "properties": properties}

    def _prepare_field_context(self, prop: RecordProperty) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        An optional field is always nullable and defaults to the null
        literal, whatever its type.
        """
        type_str = self.translate_type(prop.type)
        if prop.is_optional:
            type_str = self.optional_type(type_str)
            init = self.NULL_LITERAL
        else:
            init = self.default_value(prop.type)

        return {"NAME": self.legalize_identifier(prop.name), "TYPE": type_str, "INIT": init}

    def translate_type(self, ir_type: IRType) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            ir_type: The IR type

        Returns:
            Language-specific type string
        """
        if ir_type.kind in self.TYPE_MAP:
            return self.TYPE_MAP[ir_type.kind]

        if ir_type.kind == IRTypeKind.ARRAY:
            return self.array_type(self.translate_type(ir_type.element))

        if ir_type.kind == IRTypeKind.MAP:
            return self.map_type(self.translate_type(ir_type.key), self.translate_type(ir_type.value))

        if ir_type.kind in (IRTypeKind.ENUM, IRTypeKind.RECORD):
            return ir_type.name

        raise ValueError(f"Unknown IR type kind: {ir_type.kind}")

    def default_value(self, ir_type: IRType) -> str:
        """
        Default value for a required field of the given type.

        Args:
            ir_type: The IR type

        Returns:
            Language-specific default value expression
        """
        if ir_type.kind in self.DEFAULT_MAP:
            return self.DEFAULT_MAP[ir_type.kind]

        if ir_type.kind == IRTypeKind.RECORD:
            return f"{ir_type.name}()"

        if ir_type.kind == IRTypeKind.ENUM:
            enum_decl = self.enum_declarations.get(ir_type.name)
            if enum_decl is None:
                return f"{ir_type.name}()"
            # First member in declaration order
            first_case = self.legalize_identifier(enum_decl.members[0].name)
            return self.enum_case_reference(enum_decl.name, first_case)

        raise ValueError(f"Unknown IR type kind: {ir_type.kind}")

    def format_literal(self, value: str | int | float) -> str:
        """Format an enum raw value."""
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def legalize_identifier(self, name: str) -> str:
        """
        Turn a source name into a legal identifier for this target.

        Numeric names from literal unions ("1") get an underscore prefix
        ("_1"); characters that cannot appear in identifiers become
        underscores; reserved words are escaped.
        """
        legal = _NON_IDENTIFIER_CHARS.sub("_", name)
        if not legal or legal[0].isdigit():
            legal = f"_{legal}"
        if legal in self.RESERVED_KEYWORDS:
            return self.escape_keyword(legal)
        return legal

    def legalize_identifiers(self, names: list[str]) -> list[str]:
        """
        Legalize a group of sibling names, keeping the results distinct.

        A name that collides with an earlier one ("a-b" after "a_b") gets
        a numeric suffix ("a_b_2"); the first occurrence is never renamed.
        """
        legal_names: list[str] = []
        for name in names:
            candidate = self.legalize_identifier(name)
            suffix = 2
            while candidate in legal_names:
                candidate = self.legalize_identifier(f"{name}_{suffix}")
                suffix += 1
            legal_names.append(candidate)
        return legal_names

    def escape_keyword(self, name: str) -> str:
        return f"`{name}`"

    @abstractmethod
    def array_type(self, element_type: str) -> str:
        """Type of a sequence of `element_type`."""

    @abstractmethod
    def map_type(self, key_type: str, value_type: str) -> str:
        """Type of a dictionary from `key_type` to `value_type`."""

    @abstractmethod
    def optional_type(self, type_str: str) -> str:
        """Nullable variant of `type_str`."""

    @abstractmethod
    def enum_case_reference(self, enum_name: str, case_name: str) -> str:
        """Expression referring to one case of an enum, used as a default."""
