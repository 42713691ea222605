"""
TypeScript source parser that builds the source AST.

Phase 1 of the pipeline: parse entity sources with tree-sitter into
ClassUnit/EnumUnit declarations without resolving any symbol.
"""

from __future__ import annotations

import logging
from pathlib import Path

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser

from ..config import GeneratorConfig
from ..errors import SourceReadError
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

logger = logging.getLogger(__name__)


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


class SourceParser:
    """Parses TypeScript entity sources into a SourceUnit."""

    # `class` is the node type of an anonymous `export default class { ... }`
    CLASS_NODE_TYPES = {"class_declaration", "abstract_class_declaration", "class"}

    FIELD_NODE_TYPES = {"public_field_definition", "field_definition"}

    NAMED_TYPE_NODES = {"type_identifier", "nested_type_identifier"}

    NULLISH_TYPES = {"null", "undefined"}

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the parser.

        Args:
            config: Generator configuration (deferred wrapper name, opaque marker)
        """
        self.config = config or GeneratorConfig()
        self.language = Language(tstypescript.language_typescript())
        self.parser = Parser()
        self.parser.language = self.language

    def parse_file(self, path: Path) -> SourceUnit:
        """
        Read and parse a source file.

        Args:
            path: Path of the TypeScript file

        Returns:
            SourceUnit with the file's classes and enums

        Raises:
            SourceReadError: If the file cannot be read
        """
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Cannot read source file {path}: {e}") from e

        unit = self.parse(source, path)
        if unit.has_errors:
            logger.warning(f"Syntax errors in {path}, generating from the partial parse")
        return unit

    def parse(self, source: str, path: Path | None = None) -> SourceUnit:
        """
        Parse TypeScript source text.

        Args:
            source: The source text
            path: Path the source was read from (for log messages)

        Returns:
            SourceUnit with classes and enums in declaration order
        """
        tree = self.parser.parse(source.encode("utf-8"))
        root = tree.root_node

        unit = SourceUnit(path=path, has_errors=root.has_error)
        for node in root.named_children:
            self._parse_statement(node, unit)
        return unit

    def _parse_statement(self, node: Node, unit: SourceUnit) -> None:
        """Parse a top-level statement, unwrapping `export` and `export default`."""
        if node.type == "export_statement":
            declaration = node.child_by_field_name("declaration") or node.child_by_field_name("value")
            if declaration is None:
                return
            node = declaration

        if node.type in self.CLASS_NODE_TYPES:
            unit.classes.append(self._parse_class(node, unit))
        elif node.type == "enum_declaration":
            unit.enums.append(self._parse_enum(node))

    def _parse_class(self, node: Node, unit: SourceUnit) -> ClassUnit:
        """Parse a class declaration and its field definitions."""
        name_node = node.child_by_field_name("name")
        class_unit = ClassUnit(
            name=_text(name_node) if name_node else "",
            source_path=str(unit.path) if unit.path else "",
            line=node.start_point[0] + 1,
        )

        body = node.child_by_field_name("body")
        if body is None:
            return class_unit

        # Older grammars attach member decorators to the class body, before the member
        pending_decorators: list[str] = []
        for child in body.named_children:
            if child.type == "comment":
                continue
            if child.type == "decorator":
                pending_decorators.append(self._decorator_name(child))
                continue
            if child.type in self.FIELD_NODE_TYPES:
                prop = self._parse_property(child, pending_decorators)
                if prop is not None:
                    class_unit.properties.append(prop)
            pending_decorators = []

        return class_unit

    def _parse_property(self, node: Node, decorators: list[str]) -> PropertyDecl | None:
        """
        Parse a field definition.

        Args:
            node: The field definition node
            decorators: Decorator names found before the field in the class body

        Returns:
            PropertyDecl, or None for static fields and fields without a name
        """
        annotations = set(decorators)
        optional = False
        for child in node.children:
            if child.type == "static":
                return None
            if child.type == "decorator":
                annotations.add(self._decorator_name(child))
            elif child.type == "?":
                optional = True

        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        type_annotation = node.child_by_field_name("type")
        type_node = self._first_named_child(type_annotation) if type_annotation else None
        if type_node is None:
            type_text = self.config.opaque_type
            declared_type: TypeExpr = OpaqueType(type_text)
        else:
            type_text = _text(type_node)
            declared_type = self._parse_type(type_node)

        annotations.discard("")
        return PropertyDecl(
            name=_text(name_node),
            declared_type=declared_type,
            type_text=type_text,
            optional=optional,
            annotations=frozenset(annotations),
        )

    def _parse_type(self, node: Node) -> TypeExpr:
        """Build the structured type expression for a type node."""
        if node.type in self.NAMED_TYPE_NODES:
            return NamedType(_text(node))

        if node.type == "array_type":
            element = self._first_named_child(node)
            return CollectionType(self._parse_type(element) if element else OpaqueType())

        if node.type == "parenthesized_type":
            inner = self._first_named_child(node)
            return self._parse_type(inner) if inner else OpaqueType(_text(node))

        if node.type == "union_type":
            members = self._union_members(node)
            nullish = [_text(m) for m in members if _text(m) in self.NULLISH_TYPES]
            others = [m for m in members if _text(m) not in self.NULLISH_TYPES]
            if nullish and len(others) == 1:
                return NullableType(self._parse_type(others[0]), "".join(f" | {t}" for t in nullish))

        if node.type == "generic_type":
            name_node = node.child_by_field_name("name")
            args_node = node.child_by_field_name("type_arguments")
            args = [c for c in args_node.named_children if c.type != "comment"] if args_node else []
            if name_node is not None and len(args) == 1:
                name = _text(name_node)
                if name == "Array":
                    return CollectionType(self._parse_type(args[0]))
                if name == self.config.deferred_wrapper:
                    return DeferredType(self._parse_type(args[0]))

        return OpaqueType(_text(node))

    def _union_members(self, node: Node) -> list[Node]:
        """Flatten `A | B | C`, which the grammar nests as `(A | B) | C`."""
        members = []
        for child in node.named_children:
            if child.type == "comment":
                continue
            if child.type == "union_type":
                members.extend(self._union_members(child))
            else:
                members.append(child)
        return members

    def _parse_enum(self, node: Node) -> EnumUnit:
        """Parse an enum declaration, keeping initializers as raw text."""
        name_node = node.child_by_field_name("name")
        enum_unit = EnumUnit(name=_text(name_node) if name_node else "")

        body = node.child_by_field_name("body")
        if body is None:
            return enum_unit

        for child in body.named_children:
            if child.type == "comment":
                continue
            if child.type == "enum_assignment":
                member_name = child.child_by_field_name("name") or child.named_children[0]
                value = child.child_by_field_name("value") or child.named_children[-1]
                enum_unit.members.append(EnumMember(name=_text(member_name), value=_text(value)))
            else:
                enum_unit.members.append(EnumMember(name=_text(child)))

        return enum_unit

    def _decorator_name(self, node: Node) -> str:
        """Get the name of a decorator (`@Column`, `@ManyToOne(...)`, `@orm.OneToMany(...)`)."""
        expr = self._first_named_child(node)
        if expr is not None and expr.type == "call_expression":
            expr = expr.child_by_field_name("function")
        if expr is not None and expr.type == "member_expression":
            expr = expr.child_by_field_name("property")
        return _text(expr) if expr is not None else ""

    def _first_named_child(self, node: Node) -> Node | None:
        for child in node.named_children:
            if child.type != "comment":
                return child
        return None
