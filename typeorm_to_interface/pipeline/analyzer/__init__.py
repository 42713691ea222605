"""
Analyzer module.

Contains symbol table construction, relation classification, type
rewriting and cross-reference resolution.
"""

from __future__ import annotations

from .analyzer import EntityAnalyzer
from .ir_nodes import (
    OutputModel,
    PropertySignature,
    RelationKind,
    ShapeDefinition,
    SymbolTable,
)
from .name_resolver import NameResolver
from .reference_resolver import ReferenceResolver
from .relation_classifier import RelationClassifier
from .type_rewriter import TypeRewriter

__all__ = [
    "EntityAnalyzer",
    "NameResolver",
    "RelationClassifier",
    "TypeRewriter",
    "ReferenceResolver",
    "RelationKind",
    "SymbolTable",
    "PropertySignature",
    "ShapeDefinition",
    "OutputModel",
]
