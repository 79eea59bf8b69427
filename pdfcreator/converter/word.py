"""Word documents (.doc, .docx)."""

from __future__ import annotations

from typing import Any

from pdfcreator.converter.base import OfficeConverter
from pdfcreator.converter.models import DocumentFamily

WD_ALERTS_NONE = 0
WD_EXPORT_FORMAT_PDF = 17
WD_DO_NOT_SAVE_CHANGES = 0
WD_EXPORT_OPTIMIZE_FOR = {"print": 0, "screen": 1}


class WordConverter(OfficeConverter):
    family = DocumentFamily.word
    label = "Word"

    def prepare(self, app: Any) -> None:
        app.Visible = False
        app.DisplayAlerts = WD_ALERTS_NONE

    def open(self, app: Any, source: str) -> Any:
        return app.Documents.Open(
            FileName=source,
            ConfirmConversions=False,
            ReadOnly=True,
            AddToRecentFiles=False,
            Visible=False,
        )

    def export(self, document: Any, destination: str) -> None:
        document.ExportAsFixedFormat(
            OutputFileName=destination,
            ExportFormat=WD_EXPORT_FORMAT_PDF,
            OptimizeFor=WD_EXPORT_OPTIMIZE_FOR[self.settings.intent],
        )

    def close(self, document: Any) -> None:
        document.Close(SaveChanges=WD_DO_NOT_SAVE_CHANGES)
