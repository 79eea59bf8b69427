"""Shared test fixtures for PdfCreator."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pdfcreator.config.models import PdfCreatorConfig

FAKE_PDF = b"%PDF-1.7\n% fake export\n"


def _write_pdf(*args, **kwargs):
    """Stand-in for ExportAsFixedFormat: writes the destination file."""
    dest = kwargs.get("OutputFileName") or kwargs.get("Filename") or kwargs.get("Path")
    Path(dest).write_bytes(FAKE_PDF)


class FakeOffice:
    """Application factory that hands out MagicMock Office applications.

    Every launched application is recorded so tests can count sessions and
    inspect the automation calls made on them.
    """

    def __init__(self):
        self.launched: list[tuple[str, MagicMock]] = []

    def __call__(self, prog_id: str) -> MagicMock:
        app = MagicMock(name=prog_id)
        for collection in (app.Documents, app.Workbooks, app.Presentations):
            collection.Open.return_value.ExportAsFixedFormat.side_effect = _write_pdf
        self.launched.append((prog_id, app))
        return app

    @property
    def prog_ids(self) -> list[str]:
        return [prog_id for prog_id, _ in self.launched]

    @property
    def apps(self) -> list[MagicMock]:
        return [app for _, app in self.launched]


@pytest.fixture
def fake_pdf():
    """Bytes every fake export writes."""
    return FAKE_PDF


@pytest.fixture
def fake_office():
    return FakeOffice()


@pytest.fixture
def sample_config():
    return PdfCreatorConfig()


@pytest.fixture
def docs_dir(tmp_path):
    """A folder with one document per family, a stray file, and a subfolder."""
    folder = tmp_path / "docs"
    folder.mkdir()
    for name in ("report.docx", "legacy.DOC", "budget.xlsx", "slides.pptx", "notes.txt"):
        (folder / name).write_bytes(b"source")
    nested = folder / "archive"
    nested.mkdir()
    (nested / "old.docx").write_bytes(b"source")
    return folder
