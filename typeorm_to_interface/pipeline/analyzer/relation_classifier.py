"""
Relation classifier.

Determines whether a property is a plain field or a relation, and
which relation kind it is, from its decorators and declared type.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..source_ast.nodes import CollectionType, DeferredType, NullableType, PropertyDecl
from .ir_nodes import RelationKind


class RelationClassifier:
    """Classifies properties by relation kind."""

    def __init__(self, relation_decorators: Iterable[str]):
        """
        Initialize the classifier.

        Args:
            relation_decorators: Decorator names marking a relation (e.g., "ManyToOne")
        """
        self.relation_decorators = frozenset(relation_decorators)

    def is_relation(self, prop: PropertyDecl) -> bool:
        return not self.relation_decorators.isdisjoint(prop.annotations)

    def classify(self, prop: PropertyDecl) -> RelationKind:
        """
        Classify a property.

        A lazy relation always targets a single entity, read out of the
        wrapper's type argument. A `| null` or `| undefined` union is
        classified by its non-nullish member.

        Args:
            prop: The property declaration

        Returns:
            The property's RelationKind
        """
        if not self.is_relation(prop):
            return RelationKind.NONE
        declared = prop.declared_type
        if isinstance(declared, NullableType):
            declared = declared.inner
        if isinstance(declared, DeferredType):
            return RelationKind.LAZY_SINGLE
        if isinstance(declared, CollectionType):
            return RelationKind.EAGER_COLLECTION
        return RelationKind.EAGER_SINGLE
