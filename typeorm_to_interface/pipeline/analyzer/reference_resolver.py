"""
Cross-reference resolver for multi-file output.

Finds the other shapes (and enums) a generated shape refers to, so
that per-class files can import them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .ir_nodes import ShapeDefinition

# Identifiers in a TypeScript type: `Promise<IUserData>[]` -> Promise, IUserData
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][\w$]*")


class ReferenceResolver:
    """Resolves textual references between generated shapes."""

    def __init__(self, shape_names: Iterable[str], enum_names: Iterable[str] = ()):
        """
        Initialize the resolver.

        Args:
            shape_names: Every shape name generated in the run
            enum_names: Every enum name passed through in the run
        """
        self.shape_names = frozenset(shape_names)
        self.enum_names = frozenset(enum_names)

    def _identifiers(self, shape: ShapeDefinition) -> set[str]:
        identifiers: set[str] = set()
        for prop in shape.properties:
            identifiers.update(_IDENTIFIER_PATTERN.findall(prop.type))
        return identifiers

    def resolve(self, shape: ShapeDefinition) -> set[str]:
        """
        Get the shape names referenced by a shape.

        Args:
            shape: The shape definition

        Returns:
            Distinct referenced shape names, excluding the shape itself
        """
        return (self._identifiers(shape) & self.shape_names) - {shape.name}

    def resolve_enums(self, shape: ShapeDefinition) -> set[str]:
        """Get the enum names referenced by a shape."""
        return self._identifiers(shape) & self.enum_names
