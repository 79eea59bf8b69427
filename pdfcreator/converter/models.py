"""Pydantic models and errors for the conversion subsystem."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class DocumentFamily(str, Enum):
    """Office application family that owns a document type."""

    word = "word"
    excel = "excel"
    powerpoint = "powerpoint"


FAMILY_EXTENSIONS: dict[DocumentFamily, tuple[str, ...]] = {
    DocumentFamily.word: (".doc", ".docx"),
    DocumentFamily.excel: (".xls", ".xlsx"),
    DocumentFamily.powerpoint: (".ppt", ".pptx"),
}

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    ext for exts in FAMILY_EXTENSIONS.values() for ext in exts
)


def document_extension(path: str | Path) -> str:
    """Extension including the dot, as Windows reports it.

    Unlike ``Path.suffix``, a file named ``.docx`` has the extension ``.docx``.
    """
    name = Path(path).name
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:]


class OutcomeStatus(str, Enum):
    converted = "converted"
    skipped = "skipped"
    failed = "failed"


class FailureKind(str, Enum):
    invalid_path = "invalid_path"
    unsupported_type = "unsupported_type"
    conversion = "conversion"


class ConversionTarget(BaseModel):
    """A source document and the PDF written next to it."""

    source: Path
    destination: Path

    @classmethod
    def for_source(cls, source: str | Path) -> ConversionTarget:
        source = Path(source)
        name = source.name
        dot = name.rfind(".")
        stem = name[:dot] if dot != -1 else name
        return cls(source=source, destination=source.with_name(stem + ".pdf"))


class FileOutcome(BaseModel):
    """Result of processing one input: converted, skipped, or failed."""

    path: str
    status: OutcomeStatus
    destination: str | None = None
    failure: FailureKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not OutcomeStatus.failed

    @classmethod
    def converted(cls, target: ConversionTarget) -> FileOutcome:
        return cls(
            path=str(target.source),
            status=OutcomeStatus.converted,
            destination=str(target.destination),
        )

    @classmethod
    def skipped(cls, target: ConversionTarget) -> FileOutcome:
        return cls(
            path=str(target.source),
            status=OutcomeStatus.skipped,
            destination=str(target.destination),
        )

    @classmethod
    def failed(cls, path: str | Path, kind: FailureKind, message: str) -> FileOutcome:
        return cls(
            path=str(path),
            status=OutcomeStatus.failed,
            failure=kind,
            message=message,
        )


class AutomationStartError(Exception):
    """The automation server could not be launched.

    Fatal for the whole batch: no later file could be converted either.
    """

    def __init__(self, prog_id: str, cause: Exception | str) -> None:
        self.prog_id = prog_id
        super().__init__(f"Could not start {prog_id}: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause
