"""
Name resolver that builds the symbol table.

Maps entity class names to generated shape names and rejects
configurations where two classes would produce the same name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import GeneratorConfig
from ..errors import NameCollisionError
from ..source_ast.nodes import ClassUnit
from .ir_nodes import SymbolTable

logger = logging.getLogger(__name__)


class NameResolver:
    """Resolves shape names for entity classes."""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the resolver.

        Args:
            config: Generator configuration (prefix and suffix settings)
        """
        self.config = config

    def shape_name(self, class_name: str) -> str:
        """Plain shape name of a class (User -> IUser with prefixing on)."""
        if self.config.use_prefix:
            return f"{self.config.shape_prefix}{class_name}"
        return class_name

    def build(self, classes: Iterable[ClassUnit]) -> SymbolTable:
        """
        Build the symbol table over all classes of the run.

        Args:
            classes: Every class of every input unit, in input order

        Returns:
            SymbolTable mapping class names to shape names

        Raises:
            NameCollisionError: If two classes produce the same generated name
        """
        shape_names: dict[str, str] = {}
        # generated name -> class it belongs to
        owners: dict[str, str] = {}

        for class_unit in classes:
            if not class_unit.name:
                logger.debug(f"Skipping class without a name in {class_unit.source_path}:{class_unit.line}")
                continue
            if class_unit.name in self.config.ignore_classes:
                continue
            if class_unit.name in shape_names:
                raise NameCollisionError(f"Class {class_unit.name} is declared more than once ({class_unit.source_path}:{class_unit.line})")

            shape_name = self.shape_name(class_unit.name)
            for generated in (shape_name, shape_name + self.config.full_shape_suffix):
                if generated in owners:
                    raise NameCollisionError(f"Classes {owners[generated]} and {class_unit.name} both generate {generated}")
                owners[generated] = class_unit.name

            shape_names[class_unit.name] = shape_name

        return SymbolTable(shape_names, self.config.full_shape_suffix)
