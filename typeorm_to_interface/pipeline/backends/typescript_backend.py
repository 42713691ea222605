"""
TypeScript backend.

Renders enums and shape definitions as TypeScript `export enum` and
`export interface` declarations, in one file or one file per class.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ..analyzer.ir_nodes import OutputModel, ShapeDefinition
from ..analyzer.reference_resolver import ReferenceResolver
from ..errors import NameCollisionError
from ..source_ast.nodes import EnumUnit
from .base import CodeBackend


class TypeScriptBackend(CodeBackend):
    """Generates TypeScript interface declarations."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def generate_aggregate(self, model: OutputModel) -> str:
        blocks = [self._render_prefix(self._generation_comment(), [])]
        blocks.extend(self._render_enum(enum_unit) for enum_unit in model.enums)
        blocks.extend(self._render_shape(shape) for shape in model.shapes)
        return self._assemble(blocks)

    def generate_per_class(self, model: OutputModel) -> dict[str, str]:
        comment = self._generation_comment()
        artifacts: dict[str, str] = {}

        enums_file_name = self.config.output.enums_file_name
        if model.enums:
            blocks = [self._render_prefix(comment, [])]
            blocks.extend(self._render_enum(enum_unit) for enum_unit in model.enums)
            artifacts[enums_file_name] = self._assemble(blocks)

        resolver = ReferenceResolver(
            (shape.name for shape in model.shapes),
            (enum_unit.name for enum_unit in model.enums),
        )
        owners = {shape.name: shape.source_class for shape in model.shapes}
        enums_module = self._module_path(enums_file_name)

        for class_name, shapes in model.shapes_by_class().items():
            local_names = {shape.name for shape in shapes}
            imports: dict[str, set[str]] = {}
            for shape in shapes:
                for name in resolver.resolve(shape) - local_names:
                    imports.setdefault(self._module_path(owners[name]), set()).add(name)
                enum_names = resolver.resolve_enums(shape)
                if enum_names:
                    imports.setdefault(enums_module, set()).update(enum_names)

            sorted_imports = [(module, sorted(names)) for module, names in sorted(imports.items())]
            blocks = [self._render_prefix(comment, sorted_imports)]
            blocks.extend(self._render_shape(shape) for shape in shapes)
            file_name = f"{class_name}.{self.FILE_EXTENSION}"
            if file_name in artifacts:
                raise NameCollisionError(f"Class {class_name} would overwrite the generated {file_name}")
            artifacts[file_name] = self._assemble(blocks)

        return artifacts

    def _module_path(self, name: str) -> str:
        """Relative import path of a sibling artifact (`Profile` -> `./Profile`)."""
        stem = PurePosixPath(name)
        if stem.suffix == f".{self.FILE_EXTENSION}":
            stem = stem.with_suffix("")
        return f"./{stem}"

    def _render_prefix(self, comment: str, imports: list[tuple[str, list[str]]]) -> str:
        return self.prefix_template.render(GENERATION_COMMENT=comment, IMPORTS=imports).rstrip("\n")

    def _render_enum(self, enum_unit: EnumUnit) -> str:
        return self.enum_template.render(ENUM_NAME=enum_unit.name, MEMBERS=enum_unit.members).rstrip("\n")

    def _render_shape(self, shape: ShapeDefinition) -> str:
        return self.interface_template.render(SHAPE_NAME=shape.name, PROPERTIES=shape.properties).rstrip("\n")

    def _assemble(self, blocks: list[str]) -> str:
        """Join declaration blocks with one blank line; the file ends with a newline."""
        return "\n\n".join(block for block in blocks if block) + "\n"
