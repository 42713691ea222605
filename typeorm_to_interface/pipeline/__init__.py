"""
Pipeline - TypeORM entities to TypeScript interfaces generator.

This module provides a multi-phase architecture for generating
interfaces from TypeORM entity classes:

1. Phase 1 (Parser): Parse TypeScript sources into a source AST (tree-sitter)
2. Phase 2 (Analyzer): Build the symbol table, classify relations, rewrite types
3. Phase 3 (Backend): Render enums and interfaces through Jinja2 templates
4. Phase 4 (Writer): Atomically write the artifacts
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputLayout
from .errors import (
    ArtifactValidationError,
    GenerationError,
    NameCollisionError,
    NoInputFilesError,
    OutputWriteError,
    SourceReadError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputLayout",
    "GenerationError",
    "NoInputFilesError",
    "NameCollisionError",
    "SourceReadError",
    "OutputWriteError",
    "ArtifactValidationError",
    "AtomicWriter",
]
