"""Route one candidate path to the converter for its document family."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pdfcreator.converter import OfficeConverter
from pdfcreator.converter.models import (
    ConversionTarget,
    FailureKind,
    FileOutcome,
    document_extension,
)

logger = logging.getLogger(__name__)


class Dispatcher:
    """Maps extensions to converters. Does no automation itself."""

    def __init__(self, converters: Mapping[str, OfficeConverter]) -> None:
        self._converters = {ext.lower(): c for ext, c in converters.items()}

    def target_for(self, source: str | Path) -> ConversionTarget:
        return ConversionTarget.for_source(source)

    def converter_for(self, extension: str) -> OfficeConverter | None:
        return self._converters.get(extension.lower())

    def needs_conversion(self, source: str | Path) -> bool:
        # An existing PDF wins, however old it is.
        return not self.target_for(source).destination.exists()

    def dispatch(self, source: str | Path) -> FileOutcome:
        target = self.target_for(source)
        if target.destination.exists():
            logger.info("skipping %s: %s already exists", source, target.destination)
            return FileOutcome.skipped(target)

        converter = self.converter_for(document_extension(target.source))
        if converter is None:
            return FileOutcome.failed(
                source,
                FailureKind.unsupported_type,
                f"Unsupported file type: {source}",
            )
        return converter.convert(target.source, target.destination)
