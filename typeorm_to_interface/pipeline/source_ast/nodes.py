"""
AST node definitions for parsed TypeScript entity sources.

These nodes represent the declarations found in a source file before
any symbol resolution or type rewriting takes place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TypeExpr:
    """Base class for structured type expressions."""

    pass


@dataclass(frozen=True)
class NamedType(TypeExpr):
    """A reference to a named type (e.g., `Profile` or `models.Profile`)."""

    name: str = ""


@dataclass(frozen=True)
class CollectionType(TypeExpr):
    """An array type, from `T[]` or `Array<T>`."""

    element: TypeExpr = field(default_factory=lambda: OpaqueType())


@dataclass(frozen=True)
class DeferredType(TypeExpr):
    """A deferred-value wrapper with a single type argument (e.g., `Promise<T>`)."""

    inner: TypeExpr = field(default_factory=lambda: OpaqueType())


@dataclass(frozen=True)
class NullableType(TypeExpr):
    """A type united with `null` and/or `undefined` only (e.g., `Profile | null`).

    `suffix` holds the nullish members as written, `" | null"` for the example.
    """

    inner: TypeExpr = field(default_factory=lambda: OpaqueType())
    suffix: str = ""


@dataclass(frozen=True)
class OpaqueType(TypeExpr):
    """Any type the engine does not look into (unions, literals, primitives...)."""

    text: str = ""


@dataclass
class PropertyDecl:
    """A property declared on an entity class."""

    name: str = ""
    declared_type: TypeExpr = field(default_factory=OpaqueType)

    # Verbatim source text of the type annotation
    type_text: str = ""

    optional: bool = False

    # Decorator names applied to the property (e.g., {"Column"}, {"ManyToOne", "JoinColumn"})
    annotations: frozenset[str] = frozenset()


@dataclass
class ClassUnit:
    """A parsed class declaration.

    `name` is empty for classes without a resolvable name.
    """

    name: str = ""
    properties: list[PropertyDecl] = field(default_factory=list)

    # Source location (for log messages)
    source_path: str = ""
    line: int = 0


@dataclass
class EnumMember:
    """An enum member with its optional initializer, kept as raw source text."""

    name: str = ""
    value: str | None = None


@dataclass
class EnumUnit:
    """A parsed enum declaration."""

    name: str = ""
    members: list[EnumMember] = field(default_factory=list)


@dataclass
class SourceUnit:
    """Root of a parsed source file."""

    path: Path | None = None
    classes: list[ClassUnit] = field(default_factory=list)
    enums: list[EnumUnit] = field(default_factory=list)

    # Whether tree-sitter reported syntax errors in the file
    has_errors: bool = False
