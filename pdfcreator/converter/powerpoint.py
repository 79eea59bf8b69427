"""PowerPoint presentations (.ppt, .pptx)."""

from __future__ import annotations

from typing import Any

from pdfcreator.converter.base import OfficeConverter
from pdfcreator.converter.models import DocumentFamily

MSO_TRUE = -1
MSO_FALSE = 0
PP_ALERTS_NONE = 1
PP_FIXED_FORMAT_TYPE_PDF = 2
PP_FIXED_FORMAT_INTENT = {"screen": 1, "print": 2}


class PowerPointConverter(OfficeConverter):
    family = DocumentFamily.powerpoint
    label = "PowerPoint"

    def prepare(self, app: Any) -> None:
        # Setting Visible = False raises; WithWindow=False below keeps it hidden.
        app.DisplayAlerts = PP_ALERTS_NONE

    def open(self, app: Any, source: str) -> Any:
        return app.Presentations.Open(
            FileName=source,
            ReadOnly=MSO_TRUE,
            Untitled=MSO_FALSE,
            WithWindow=MSO_FALSE,
        )

    def export(self, document: Any, destination: str) -> None:
        document.ExportAsFixedFormat(
            Path=destination,
            FixedFormatType=PP_FIXED_FORMAT_TYPE_PDF,
            Intent=PP_FIXED_FORMAT_INTENT[self.settings.intent],
        )

    def close(self, document: Any) -> None:
        document.Close()
