"""TypeORM to Interface Generator

A Python package for generating TypeScript interfaces from TypeORM
entity classes. Relation properties are rewritten to reference the
generated interfaces, with single-file or per-class output.
"""

__version__ = "1.0.0"

from .pipeline import (
    GenerationError,
    GeneratorConfig,
    OutputConfig,
    OutputLayout,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputLayout",
    "GenerationError",
]
