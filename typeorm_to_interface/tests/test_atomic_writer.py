import pytest

from typeorm_to_interface.pipeline.errors import ArtifactValidationError
from typeorm_to_interface.pipeline.writer import AtomicWriter


class TestAtomicWriter:
    """Test atomic artifact writes"""

    def test_write_creates_file_and_parents(self, tmp_path):
        path = tmp_path / "out" / "index.ts"
        AtomicWriter().write(path, "export interface IUser {\n}\n")
        assert path.read_text(encoding="utf-8") == "export interface IUser {\n}\n"
        assert [p.name for p in path.parent.iterdir()] == ["index.ts"]

    def test_write_replaces_existing_file(self, tmp_path):
        path = tmp_path / "index.ts"
        path.write_text("old", encoding="utf-8")
        AtomicWriter().write(path, "new\n")
        assert path.read_text(encoding="utf-8") == "new\n"

    def test_invalid_content_keeps_previous_file(self, tmp_path):
        path = tmp_path / "index.ts"
        path.write_text("previous", encoding="utf-8")

        with pytest.raises(ArtifactValidationError):
            AtomicWriter().write(path, "export interface IUser {\n")

        assert path.read_text(encoding="utf-8") == "previous"
        assert [p.name for p in tmp_path.iterdir()] == ["index.ts"]

    def test_braces_inside_strings_are_valid(self, tmp_path):
        path = tmp_path / "enums.ts"
        content = 'export enum Delim {\n    Open = "{",\n    Close = "}}",\n}\n\nexport interface IToken {\n    s: "{";\n}\n'
        AtomicWriter().write(path, content)
        assert path.read_text(encoding="utf-8") == content

    def test_syntax_error_is_rejected(self, tmp_path):
        with pytest.raises(ArtifactValidationError):
            AtomicWriter().write(tmp_path / "index.ts", "export interface IUser {\n    id: ;\n}\n")

    def test_empty_artifact_is_valid(self, tmp_path):
        AtomicWriter().write(tmp_path / "index.ts", "\n")
        assert (tmp_path / "index.ts").read_text(encoding="utf-8") == "\n"

    def test_validation_can_be_skipped(self, tmp_path):
        path = tmp_path / "index.ts"
        AtomicWriter().write(path, "{", validate=False)
        assert path.read_text(encoding="utf-8") == "{"

    def test_custom_validator(self, tmp_path):
        def reject_any(content):
            if ": any" in content:
                raise ArtifactValidationError("any is not allowed")

        writer = AtomicWriter(validate_typescript=reject_any)
        with pytest.raises(ArtifactValidationError, match="any is not allowed"):
            writer.write(tmp_path / "index.ts", "export interface IUser {\n    profile: any;\n}\n")
        assert not (tmp_path / "index.ts").exists()
