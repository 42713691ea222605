"""
Fatal error conditions of the generator.

Recoverable conditions (unresolved relation targets, nameless classes,
syntax errors in a source file) are logged and never raised.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for errors that abort a generation run."""

    pass


class NoInputFilesError(GenerationError):
    """Raised when the input path or glob matches no source file."""

    pass


class NameCollisionError(GenerationError):
    """Raised when two entity classes map to the same generated name.

    This can happen when:
    - The same class name is declared in two source files
    - A full shape name equals another class's plain shape name
      (e.g., `User` -> `IUserData` and `UserData` -> `IUserData`)
    """

    pass


class SourceReadError(GenerationError):
    """Raised when a matched source file cannot be read."""

    pass


class OutputWriteError(GenerationError):
    """Raised when the output directory or an artifact cannot be written."""

    pass


class ArtifactValidationError(GenerationError):
    """Raised when a rendered artifact fails the pre-write structural check."""

    pass
