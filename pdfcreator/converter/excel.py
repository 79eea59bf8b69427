"""Excel workbooks (.xls, .xlsx)."""

from __future__ import annotations

from typing import Any

from pdfcreator.converter.base import OfficeConverter
from pdfcreator.converter.models import DocumentFamily

XL_TYPE_PDF = 0
XL_UPDATE_LINKS_NEVER = 0
XL_QUALITY = {"print": 0, "screen": 1}  # xlQualityStandard / xlQualityMinimum


class ExcelConverter(OfficeConverter):
    family = DocumentFamily.excel
    label = "Excel"

    def prepare(self, app: Any) -> None:
        app.Visible = False
        app.DisplayAlerts = False

    def open(self, app: Any, source: str) -> Any:
        return app.Workbooks.Open(
            Filename=source,
            UpdateLinks=XL_UPDATE_LINKS_NEVER,
            ReadOnly=True,
            AddToMru=False,
        )

    def export(self, document: Any, destination: str) -> None:
        document.ExportAsFixedFormat(
            Type=XL_TYPE_PDF,
            Filename=destination,
            Quality=XL_QUALITY[self.settings.intent],
        )

    def close(self, document: Any) -> None:
        document.Close(SaveChanges=False)
