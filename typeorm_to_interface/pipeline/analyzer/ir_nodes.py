"""
IR (Intermediate Representation) node definitions.

These nodes represent the resolved output model, ready for
emission. All relation references are rewritten to shape names.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

from ..source_ast.nodes import EnumUnit


class RelationKind(Enum):
    """Relation kind of a property."""

    NONE = "none"  # Plain field
    EAGER_SINGLE = "eager_single"  # profile: Profile
    EAGER_COLLECTION = "eager_collection"  # members: Employee[]
    LAZY_SINGLE = "lazy_single"  # customer: Promise<Customer>


class SymbolTable(Mapping[str, str]):
    """Read-only mapping from entity class name to shape name."""

    def __init__(self, shape_names: Mapping[str, str], full_shape_suffix: str = "Data"):
        self._shape_names = dict(shape_names)
        self.full_shape_suffix = full_shape_suffix

    def __getitem__(self, class_name: str) -> str:
        return self._shape_names[class_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._shape_names)

    def __len__(self) -> int:
        return len(self._shape_names)

    def __repr__(self) -> str:
        return f"SymbolTable({self._shape_names!r})"

    def full_shape_name(self, class_name: str) -> str | None:
        """Name of the relation-inclusive shape of a class, or None if unknown."""
        shape_name = self._shape_names.get(class_name)
        if shape_name is None:
            return None
        return shape_name + self.full_shape_suffix

    def all_shape_names(self) -> set[str]:
        """All plain and full shape names generated from this table."""
        names = set(self._shape_names.values())
        names.update(name + self.full_shape_suffix for name in self._shape_names.values())
        return names


@dataclass(frozen=True)
class PropertySignature:
    """A property of a generated shape."""

    name: str = ""
    type: str = ""
    optional: bool = False


@dataclass
class ShapeDefinition:
    """A generated interface declaration."""

    name: str = ""
    properties: list[PropertySignature] = field(default_factory=list)

    # Entity class this shape was generated from
    source_class: str = ""


@dataclass
class OutputModel:
    """The complete output of the engine: enums first, then shapes."""

    enums: list[EnumUnit] = field(default_factory=list)
    shapes: list[ShapeDefinition] = field(default_factory=list)

    # Mapping used to build the shapes
    symbol_table: SymbolTable = field(default_factory=lambda: SymbolTable({}))

    def shapes_by_class(self) -> dict[str, list[ShapeDefinition]]:
        """Group shapes by source class, keeping model order."""
        grouped: dict[str, list[ShapeDefinition]] = {}
        for shape in self.shapes:
            grouped.setdefault(shape.source_class, []).append(shape)
        return grouped
