"""
Error taxonomy for the code generator pipeline.

Every error is fatal to the current generation run and propagates
unchanged to the caller.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all code generation errors."""


class UnsupportedTypeError(CodegenError):
    """A type descriptor resolves to no supported IR shape."""

    def __init__(self, display_name: str):
        self.display_name = display_name
        super().__init__(f"Unsupported TypeScript type: {display_name}")


class UnsupportedAliasShapeError(CodegenError):
    """A type alias is neither a pure literal union nor a plain object shape."""

    def __init__(self, alias_name: str):
        self.alias_name = alias_name
        super().__init__(f"Unsupported type alias shape: {alias_name}")


class HeterogeneousEnumError(CodegenError):
    """An enum mixes string and numeric member values."""

    def __init__(self, enum_name: str):
        self.enum_name = enum_name
        super().__init__(f"Enum {enum_name} mixes string and numeric member values")


class EmptyEnumError(CodegenError):
    """An enum declares no members, so it has no default case."""

    def __init__(self, enum_name: str):
        self.enum_name = enum_name
        super().__init__(f"Enum {enum_name} has no members")


class DuplicateDeclarationError(CodegenError):
    """Two input declarations share one name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate declaration found: {name}")


class CircularDependencyError(CodegenError):
    """A reference cycle was found while ordering declarations."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Circular dependency detected involving {name}")


class MissingConfigurationError(CodegenError):
    """A required per-target configuration value is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Config must specify {field}")


class DeclarationParseError(CodegenError):
    """A declaration document is malformed."""


class NonIntegerEnumValueError(CodegenError):
    """A numeric enum member has a fractional value, which no integer raw type can hold."""

    def __init__(self, enum_name: str, value: float):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Enum {enum_name} has non-integer member value {value}")
