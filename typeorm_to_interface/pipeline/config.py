"""
Configuration for the interface generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# TypeORM association decorators
DEFAULT_RELATION_DECORATORS = ["OneToMany", "ManyToOne", "OneToOne", "ManyToMany"]


class OutputLayout(str, Enum):
    """Layout of the generated artifacts."""

    SINGLE_AGGREGATE = "single"  # All enums and interfaces in one file
    PER_CLASS_FILE = "per-class"  # One file per entity class, plus an enums file


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        layout: Whether to write one aggregate file or one file per class
        aggregate_file_name: File name used for the single layout when the output is a directory
        enums_file_name: File name holding the enums in the per-class layout
        atomic_write: Whether to use atomic file writes
        validate_before_write: Whether to check artifacts before writing
    """

    layout: OutputLayout = OutputLayout.PER_CLASS_FILE
    aggregate_file_name: str = "index.ts"
    enums_file_name: str = "enums.ts"
    atomic_write: bool = True
    validate_before_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for interface generation."""

    # Prefix shape names (User -> IUser)
    use_prefix: bool = True
    shape_prefix: str = "I"

    # Suffix of the relation-inclusive shape (IUser -> IUserData)
    full_shape_suffix: str = "Data"

    # Type emitted when a relation target cannot be resolved
    opaque_type: str = "any"

    # Generic wrapper marking lazy relations
    deferred_wrapper: str = "Promise"

    # Decorators marking a property as a relation
    relation_decorators: list[str] = field(default_factory=lambda: list(DEFAULT_RELATION_DECORATORS))

    # Classes to ignore during generation
    ignore_classes: list[str] = field(default_factory=list)

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Log one line per generated class
    verbose: bool = True

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                layout = v.get("layout", OutputLayout.PER_CLASS_FILE)
                if isinstance(layout, str):
                    layout = OutputLayout(layout)
                config.output = OutputConfig(
                    layout=layout,
                    aggregate_file_name=v.get("aggregate_file_name", "index.ts"),
                    enums_file_name=v.get("enums_file_name", "enums.ts"),
                    atomic_write=v.get("atomic_write", True),
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "use_prefix": self.use_prefix,
            "shape_prefix": self.shape_prefix,
            "full_shape_suffix": self.full_shape_suffix,
            "opaque_type": self.opaque_type,
            "deferred_wrapper": self.deferred_wrapper,
            "relation_decorators": self.relation_decorators,
            "ignore_classes": self.ignore_classes,
            "add_generation_comment": self.add_generation_comment,
            "verbose": self.verbose,
            "output": {
                "layout": self.output.layout.value,
                "aggregate_file_name": self.output.aggregate_file_name,
                "enums_file_name": self.output.enums_file_name,
                "atomic_write": self.output.atomic_write,
                "validate_before_write": self.output.validate_before_write,
            },
        }
