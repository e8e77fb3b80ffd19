"""
Analyzer module.

Contains type resolution, declaration resolution and the declaration
set builder that produces the ordered IR.
"""

from __future__ import annotations

from .declaration_resolver import DeclarationResolver
from .declaration_set import DeclarationSetBuilder
from .ir_nodes import (
    EnumDeclaration,
    EnumMember,
    IRDeclaration,
    IRType,
    IRTypeKind,
    RecordDeclaration,
    RecordProperty,
)
from .type_resolver import TypeResolver

__all__ = [
    "IRType",
    "IRTypeKind",
    "IRDeclaration",
    "EnumDeclaration",
    "EnumMember",
    "RecordDeclaration",
    "RecordProperty",
    "TypeResolver",
    "DeclarationResolver",
    "DeclarationSetBuilder",
]
