"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ... import __version__
from ...cli_utils import reconstruct_command_line
from ..analyzer.ir_nodes import OutputModel
from ..config import GeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generator configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.interface_template = self.jinja_env.get_template(f"interface.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate_aggregate(self, model: OutputModel) -> str:
        """
        Generate a single artifact holding the whole model.

        Args:
            model: The output model

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def generate_per_class(self, model: OutputModel) -> dict[str, str]:
        """
        Generate one artifact per entity class.

        Args:
            model: The output model

        Returns:
            Mapping from artifact file name to generated code, in emission order

        Raises:
            NameCollisionError: If a class artifact would replace another artifact
        """

    def _get_comment_prefix(self) -> str:
        """Get the comment prefix for the language."""
        return "//"

    def _generation_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Reconstruct command line using CLI utilities
        try:
            from ...typeorm_to_interface import typeorm_to_interface as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "typeorm_to_interface"

        return f"{self._get_comment_prefix()} Generated by typeorm_to_interface v{__version__} : {command_line}"
