"""Tests for input classification and directory expansion."""

from pathlib import Path

from pdfcreator.batch.models import InputKind
from pdfcreator.batch.resolver import classify, expand_directory


class TestClassify:
    def test_directory(self, docs_dir):
        assert classify(str(docs_dir)) is InputKind.directory

    def test_file(self, docs_dir):
        assert classify(str(docs_dir / "report.docx")) is InputKind.file

    def test_file_with_unsupported_extension_is_still_a_file(self, docs_dir):
        assert classify(str(docs_dir / "notes.txt")) is InputKind.file

    def test_missing_path_is_invalid(self, tmp_path):
        assert classify(str(tmp_path / "missing.xlsx")) is InputKind.invalid

    def test_empty_argument_is_invalid(self):
        assert classify("") is InputKind.invalid


class TestExpandDirectory:
    def test_selects_recognized_extensions_only(self, docs_dir):
        names = {p.name for p in expand_directory(docs_dir)}
        assert names == {"report.docx", "legacy.DOC", "budget.xlsx", "slides.pptx"}

    def test_not_recursive(self, docs_dir):
        paths = list(expand_directory(docs_dir))
        assert all(p.parent == docs_dir for p in paths)
        assert "old.docx" not in {p.name for p in paths}

    def test_case_insensitive(self, tmp_path):
        for name in ("A.PPTX", "b.Xls", "c.dOcX"):
            (tmp_path / name).write_bytes(b"x")
        assert {p.name for p in expand_directory(tmp_path)} == {"A.PPTX", "b.Xls", "c.dOcX"}

    def test_subdirectory_named_like_document_is_ignored(self, tmp_path):
        (tmp_path / "folder.docx").mkdir()
        assert list(expand_directory(tmp_path)) == []

    def test_existing_pdfs_not_selected(self, tmp_path):
        (tmp_path / "report.pdf").write_bytes(b"%PDF")
        assert list(expand_directory(tmp_path)) == []

    def test_yields_paths_inside_directory(self, docs_dir):
        for path in expand_directory(str(docs_dir)):
            assert isinstance(path, Path)
            assert path.is_file()

    def test_dot_only_document_name_selected(self, tmp_path):
        (tmp_path / ".docx").write_bytes(b"x")
        (tmp_path / ".hidden").write_bytes(b"x")
        assert [p.name for p in expand_directory(tmp_path)] == [".docx"]
