"""
Pipeline - declaration-driven Swift and Kotlin record generator.

This module provides a multi-phase architecture for generating native
data-model declarations from TypeScript-style declarations:

1. Phase 1 (Parser): Parse a declaration document into declaration nodes
2. Phase 2 (Analyzer): Resolve declarations into IR, then validate and order them
3. Phase 3 (Backend): Render the ordered IR with Jinja2 templates per target
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .declarations import DeclarationParser
from .errors import (
    CircularDependencyError,
    CodegenError,
    DeclarationParseError,
    DuplicateDeclarationError,
    EmptyEnumError,
    HeterogeneousEnumError,
    MissingConfigurationError,
    NonIntegerEnumValueError,
    UnsupportedAliasShapeError,
    UnsupportedTypeError,
)
from .generator import (
    SUPPORTED_LANGUAGES,
    PipelineGenerator,
    build_intermediate_representation,
    generate_kotlin_code,
    generate_swift_code,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "DeclarationParser",
    "SUPPORTED_LANGUAGES",
    "build_intermediate_representation",
    "generate_swift_code",
    "generate_kotlin_code",
    "CodegenError",
    "UnsupportedTypeError",
    "UnsupportedAliasShapeError",
    "HeterogeneousEnumError",
    "EmptyEnumError",
    "DuplicateDeclarationError",
    "CircularDependencyError",
    "MissingConfigurationError",
    "DeclarationParseError",
    "NonIntegerEnumValueError",
]
