"""
Entity analyzer that transforms source units into the output model.

Phase 2 of the pipeline: build the symbol table and collect enums over
every unit, then classify, rewrite and assemble the shapes of each class.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import GeneratorConfig
from ..source_ast.nodes import ClassUnit, EnumUnit, SourceUnit
from .ir_nodes import OutputModel, PropertySignature, RelationKind, ShapeDefinition, SymbolTable
from .name_resolver import NameResolver
from .relation_classifier import RelationClassifier
from .type_rewriter import TypeRewriter

logger = logging.getLogger(__name__)


class EntityAnalyzer:
    """Analyzes entity classes and builds the output model."""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the analyzer.

        Args:
            config: Generator configuration
        """
        self.config = config
        self.name_resolver = NameResolver(config)
        self.classifier = RelationClassifier(config.relation_decorators)

    def analyze(self, units: Sequence[SourceUnit]) -> OutputModel:
        """
        Analyze the source units and build the output model.

        Args:
            units: Parsed source units, in input order

        Returns:
            OutputModel with enums and shapes in input order

        Raises:
            NameCollisionError: If two classes produce the same generated name
        """
        # First pass: symbol table and enums over all units
        symbol_table = self.name_resolver.build(class_unit for unit in units for class_unit in unit.classes)
        enums = self._collect_enums(units)

        # Second pass: shapes, resolved against the complete table
        rewriter = TypeRewriter(symbol_table, self.config)
        model = OutputModel(enums=enums, symbol_table=symbol_table)
        for unit in units:
            for class_unit in unit.classes:
                if class_unit.name not in symbol_table:
                    continue
                model.shapes.extend(self._analyze_class(class_unit, symbol_table, rewriter))

        return model

    def _collect_enums(self, units: Sequence[SourceUnit]) -> list[EnumUnit]:
        """Collect enums keyed by name, first declaration wins."""
        enums: dict[str, EnumUnit] = {}
        for unit in units:
            for enum_unit in unit.enums:
                if not enum_unit.name:
                    continue
                if enum_unit.name in enums:
                    logger.warning(f"Enum {enum_unit.name} is declared more than once, keeping the first declaration")
                    continue
                enums[enum_unit.name] = enum_unit
        return list(enums.values())

    def _analyze_class(
        self,
        class_unit: ClassUnit,
        symbol_table: SymbolTable,
        rewriter: TypeRewriter,
    ) -> tuple[ShapeDefinition, ShapeDefinition]:
        """
        Build the plain and full shapes of a class.

        Args:
            class_unit: The entity class
            symbol_table: Complete class -> shape mapping
            rewriter: Type rewriter bound to the symbol table

        Returns:
            (plain shape, full shape)
        """
        shape_name = symbol_table[class_unit.name]
        plain = ShapeDefinition(name=shape_name, source_class=class_unit.name)
        full = ShapeDefinition(name=shape_name + symbol_table.full_shape_suffix, source_class=class_unit.name)

        for prop in class_unit.properties:
            kind = self.classifier.classify(prop)
            signature = PropertySignature(
                name=prop.name,
                type=rewriter.rewrite(prop, kind, owner=class_unit.name),
                optional=prop.optional,
            )
            if kind == RelationKind.NONE:
                plain.properties.append(signature)
            full.properties.append(signature)

        if self.config.verbose:
            logger.info(f"Generated {plain.name} and {full.name} from {class_unit.name}")

        return plain, full
