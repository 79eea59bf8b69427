"""Shared lifecycle for the Office-family converters."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from pdfcreator.config.models import ConverterSettings
from pdfcreator.converter.models import (
    ConversionTarget,
    DocumentFamily,
    FailureKind,
    FileOutcome,
)
from pdfcreator.converter.session import (
    ApplicationFactory,
    AutomationSession,
    SessionState,
    dispatch_application,
)

logger = logging.getLogger(__name__)


class OfficeConverter(ABC):
    """Converts one document per application instance.

    Subclasses supply the family-specific verbs; ``convert`` owns the
    start -> open -> export -> close -> quit sequence. Faults after the
    application has started become a failed outcome. A fault while starting
    it (AutomationStartError) propagates.
    """

    family: ClassVar[DocumentFamily]
    label: ClassVar[str]

    def __init__(
        self,
        settings: ConverterSettings,
        factory: ApplicationFactory = dispatch_application,
    ) -> None:
        self.settings = settings
        self._factory = factory

    def session(self) -> AutomationSession:
        return AutomationSession(self.settings.prog_id, self._factory)

    def convert(self, source: str | Path, destination: str | Path) -> FileOutcome:
        target = ConversionTarget(source=Path(source), destination=Path(destination))
        src = os.path.abspath(source)
        dest = os.path.abspath(destination)

        error: Exception | None = None
        with self.session() as session:
            app = session.application
            try:
                self.prepare(app)
                document = self.open(app, src)
                session.advance(SessionState.document_open)
                self.export(document, dest)
                session.advance(SessionState.exported)
                self.close(document)
                session.advance(SessionState.closed)
            except Exception as e:
                error = e
                logger.debug("%s conversion of %s failed", self.label, src, exc_info=True)

        if error is None:
            error = session.quit_error
        if error is not None:
            message = f"Error converting {self.label} file: {_describe(error)}"
            logger.info(message)
            return FileOutcome.failed(source, FailureKind.conversion, message)

        logger.info("converted %s -> %s", src, dest)
        return FileOutcome.converted(target)

    def prepare(self, app: Any) -> None:
        """Hide the application and silence its alerts before opening anything."""

    @abstractmethod
    def open(self, app: Any, source: str) -> Any:
        """Open ``source`` read-only without prompts, MRU entries, or windows."""

    @abstractmethod
    def export(self, document: Any, destination: str) -> None:
        """Write ``document`` to ``destination`` as PDF."""

    @abstractmethod
    def close(self, document: Any) -> None:
        """Close ``document`` without saving."""


def _describe(error: Exception) -> str:
    # pywintypes.com_error carries (hresult, text, excepinfo, argerror);
    # excepinfo[2] holds the application's own description.
    args = getattr(error, "args", ())
    if len(args) >= 3 and isinstance(args[2], tuple) and len(args[2]) > 2 and args[2][2]:
        return str(args[2][2])
    return str(error) or type(error).__name__
