"""
Type rewriter.

Produces the output type of a property: plain fields keep their
declared type text, relations are rewritten to reference the full
shape of their target entity.
"""

from __future__ import annotations

import logging

from ..config import GeneratorConfig
from ..source_ast.nodes import CollectionType, DeferredType, NamedType, NullableType, PropertyDecl, TypeExpr
from .ir_nodes import RelationKind, SymbolTable

logger = logging.getLogger(__name__)


class TypeRewriter:
    """Rewrites property types through the symbol table."""

    def __init__(self, symbol_table: SymbolTable, config: GeneratorConfig):
        """
        Initialize the rewriter.

        Args:
            symbol_table: Complete class -> shape mapping of the run
            config: Generator configuration (opaque marker, deferred wrapper)
        """
        self.symbol_table = symbol_table
        self.config = config

    def rewrite(self, prop: PropertyDecl, kind: RelationKind, owner: str = "") -> str:
        """
        Produce the output type text of a property.

        Never fails: an unresolved relation target becomes the opaque
        marker and a warning is logged.

        Args:
            prop: The property declaration
            kind: The property's relation kind
            owner: Name of the declaring class (for log messages)

        Returns:
            The output type text
        """
        if kind == RelationKind.NONE:
            return prop.type_text

        declared = prop.declared_type
        # Profile[] | undefined -> IProfileData[] | undefined
        nullish_suffix = ""
        if isinstance(declared, NullableType):
            declared, nullish_suffix = declared.inner, declared.suffix

        if kind == RelationKind.EAGER_COLLECTION and isinstance(declared, CollectionType):
            target = declared.element
        elif kind == RelationKind.LAZY_SINGLE and isinstance(declared, DeferredType):
            target = declared.inner
        else:
            target = declared

        resolved = self.resolve_target(target)
        if resolved is None:
            logger.warning(f"Cannot resolve relation target of {owner}.{prop.name} ({prop.type_text}), using {self.config.opaque_type}")
            resolved = self.config.opaque_type

        if kind == RelationKind.EAGER_COLLECTION:
            return f"{resolved}[]{nullish_suffix}"
        if kind == RelationKind.LAZY_SINGLE:
            return f"{self.config.deferred_wrapper}<{resolved}>{nullish_suffix}"
        return f"{resolved}{nullish_suffix}"

    def resolve_target(self, target: TypeExpr) -> str | None:
        """
        Resolve a relation target to the full shape name of its entity.

        Args:
            target: The target type expression

        Returns:
            The full shape name (keeping a `| null` suffix), or None if the
            target is not a known entity
        """
        if isinstance(target, NullableType):
            resolved = self.resolve_target(target.inner)
            return None if resolved is None else resolved + target.suffix
        if not isinstance(target, NamedType):
            return None
        # models.Profile -> Profile
        return self.symbol_table.full_shape_name(target.name.rsplit(".", 1)[-1])
