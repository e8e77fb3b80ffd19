"""TypeScript declarations to native records

A Python package for generating Swift and Kotlin record and enum
declarations from one set of TypeScript-style interfaces, enums and
type aliases.
"""

__version__ = "1.0.1"

from .pipeline import (
    CircularDependencyError,
    CodeGeneratorConfig,
    CodegenError,
    DeclarationParseError,
    DeclarationParser,
    DuplicateDeclarationError,
    EmptyEnumError,
    HeterogeneousEnumError,
    MissingConfigurationError,
    NonIntegerEnumValueError,
    PipelineGenerator,
    UnsupportedAliasShapeError,
    UnsupportedTypeError,
    build_intermediate_representation,
    generate_kotlin_code,
    generate_swift_code,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "DeclarationParser",
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
