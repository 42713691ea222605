"""
Pipeline generator.

Runs the whole pipeline: discovery, parsing, analysis, emission and
writing of the generated TypeScript interfaces.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .analyzer import EntityAnalyzer, OutputModel
from .backends import TypeScriptBackend
from .config import GeneratorConfig, OutputLayout
from .discovery import discover_sources
from .errors import OutputWriteError
from .source_ast import SourceParser, SourceUnit
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates TypeScript interfaces from TypeORM entity sources."""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            config: Generator configuration
        """
        self.config = config or GeneratorConfig()
        self.parser = SourceParser(self.config)
        self.analyzer = EntityAnalyzer(self.config)
        self.backend = TypeScriptBackend(self.config)
        self.writer = AtomicWriter()

    def parse(self, paths: Sequence[Path]) -> list[SourceUnit]:
        """Parse source files, in the given order."""
        return [self.parser.parse_file(path) for path in paths]

    def analyze(self, units: Sequence[SourceUnit]) -> OutputModel:
        """Build the output model of the parsed units."""
        return self.analyzer.analyze(units)

    def render(
        self,
        model: OutputModel,
        layout: OutputLayout | None = None,
        aggregate_file_name: str | None = None,
    ) -> dict[str, str]:
        """
        Render the output model into artifacts.

        Args:
            model: The output model
            layout: Artifact layout (defaults to the configured one)
            aggregate_file_name: File name of the single-layout artifact

        Returns:
            Mapping from artifact file name to content, in emission order
        """
        layout = layout or self.config.output.layout
        if layout == OutputLayout.SINGLE_AGGREGATE:
            name = aggregate_file_name or self.config.output.aggregate_file_name
            return {name: self.backend.generate_aggregate(model)}
        return self.backend.generate_per_class(model)

    def generate(self, units: Sequence[SourceUnit]) -> dict[str, str]:
        """
        Generate the artifacts of parsed units, without touching the filesystem.

        Args:
            units: Parsed source units, in input order

        Returns:
            Mapping from artifact file name to content
        """
        return self.render(self.analyze(units))

    def resolve_output(self, output_path: Path) -> tuple[Path, OutputLayout, str | None]:
        """
        Resolve the output target.

        A path ending with the file extension is a single aggregate file;
        anything else is a directory.

        Args:
            output_path: The output path given by the user

        Returns:
            (output directory, layout, aggregate file name or None)
        """
        if output_path.suffix == f".{self.backend.FILE_EXTENSION}":
            return output_path.parent, OutputLayout.SINGLE_AGGREGATE, output_path.name
        return output_path, self.config.output.layout, None

    def write(self, artifacts: dict[str, str], directory: Path) -> list[Path]:
        """
        Write artifacts into a directory.

        Every artifact is validated before the first one is written, so a
        validation failure leaves the output untouched.

        Args:
            artifacts: Mapping from file name to content
            directory: Output directory, created if missing

        Returns:
            Paths of the written files

        Raises:
            OutputWriteError: If the directory or a file cannot be written
            ArtifactValidationError: If an artifact fails validation
        """
        output = self.config.output
        if output.validate_before_write:
            for content in artifacts.values():
                self.writer.validate(content)

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"Cannot create output directory {directory}: {e}") from e

        written = []
        for name, content in artifacts.items():
            path = directory / name
            try:
                if output.atomic_write:
                    self.writer.write(path, content, validate=False)
                else:
                    path.write_text(content, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(f"Cannot write {path}: {e}") from e

            if self.config.verbose:
                logger.info(f"Wrote {path}")
            written.append(path)

        return written

    def run(self, input_path: str | Path, output_path: str | Path) -> list[Path]:
        """
        Run the whole pipeline.

        Args:
            input_path: Source directory, file or glob
            output_path: Output directory, or a `.ts` file for a single aggregate file

        Returns:
            Paths of the written files

        Raises:
            GenerationError: On any fatal condition; nothing is written when
                no source file matches
        """
        files = discover_sources(input_path)
        units = self.parse(files)
        model = self.analyze(units)

        directory, layout, aggregate_file_name = self.resolve_output(Path(output_path))
        artifacts = self.render(model, layout, aggregate_file_name)
        return self.write(artifacts, directory)
