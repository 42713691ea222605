"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Parser

from ..errors import ArtifactValidationError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_typescript: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_typescript: Optional validation function for TypeScript code
        """
        self._validate_typescript = validate_typescript or self._default_validate_typescript
        self._parser: Parser | None = None

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            ArtifactValidationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self.validate(content)

            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def validate(self, content: str) -> None:
        """Validate content with the configured validation function.

        Raises:
            ArtifactValidationError: If validation fails
        """
        self._validate_typescript(content)

    def _default_validate_typescript(self, content: str) -> None:
        """Default TypeScript validation: the artifact must parse without errors.

        Args:
            content: TypeScript code to validate

        Raises:
            ArtifactValidationError: If validation fails
        """
        if self._parser is None:
            self._parser = Parser()
            self._parser.language = Language(tstypescript.language_typescript())

        tree = self._parser.parse(content.encode("utf-8"))
        if tree.root_node.has_error:
            raise ArtifactValidationError("Generated TypeScript code does not parse")
