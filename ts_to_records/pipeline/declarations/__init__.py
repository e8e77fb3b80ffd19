"""
Declarations module.

Contains the external declaration nodes and the document parser.
"""

from __future__ import annotations

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
from .parser import DeclarationParser

__all__ = [
    "DeclarationKind",
    "DeclarationNode",
    "DescriptorKind",
    "EnumDeclarationNode",
    "EnumMemberNode",
    "InterfaceDeclarationNode",
    "PropertyNode",
    "TypeAliasDeclarationNode",
    "TypeDescriptor",
    "DeclarationParser",
]
