"""
Source AST module.

Contains the node definitions and the tree-sitter parser for TypeScript entity sources.
"""

from __future__ import annotations

from .nodes import (
    ClassUnit,
    CollectionType,
    DeferredType,
    EnumMember,
    EnumUnit,
    NamedType,
    NullableType,
    OpaqueType,
    PropertyDecl,
    SourceUnit,
    TypeExpr,
)
from .parser import SourceParser

__all__ = [
    "SourceUnit",
    "ClassUnit",
    "PropertyDecl",
    "EnumUnit",
    "EnumMember",
    "TypeExpr",
    "NamedType",
    "CollectionType",
    "DeferredType",
    "NullableType",
    "OpaqueType",
    "SourceParser",
]
