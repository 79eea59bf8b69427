"""Office-to-PDF conversion through COM automation sessions."""

from pdfcreator.config.models import PdfCreatorConfig
from pdfcreator.converter.base import OfficeConverter
from pdfcreator.converter.excel import ExcelConverter
from pdfcreator.converter.models import (
    FAMILY_EXTENSIONS,
    SUPPORTED_EXTENSIONS,
    AutomationStartError,
    ConversionTarget,
    DocumentFamily,
    FailureKind,
    FileOutcome,
    OutcomeStatus,
    document_extension,
)
from pdfcreator.converter.powerpoint import PowerPointConverter
from pdfcreator.converter.session import (
    ApplicationFactory,
    AutomationSession,
    SessionState,
    dispatch_application,
)
from pdfcreator.converter.word import WordConverter

_CONVERTER_MAP: dict[DocumentFamily, type[OfficeConverter]] = {
    DocumentFamily.word: WordConverter,
    DocumentFamily.excel: ExcelConverter,
    DocumentFamily.powerpoint: PowerPointConverter,
}


def create_converters(
    config: PdfCreatorConfig,
    factory: ApplicationFactory = dispatch_application,
) -> dict[str, OfficeConverter]:
    """Build one converter per family, keyed by every extension it handles."""
    converters: dict[str, OfficeConverter] = {}
    for family, cls in _CONVERTER_MAP.items():
        converter = cls(getattr(config, family.value), factory)
        for ext in FAMILY_EXTENSIONS[family]:
            converters[ext] = converter
    return converters


__all__ = [
    "ApplicationFactory",
    "AutomationSession",
    "AutomationStartError",
    "ConversionTarget",
    "DocumentFamily",
    "ExcelConverter",
    "FAMILY_EXTENSIONS",
    "FailureKind",
    "FileOutcome",
    "OfficeConverter",
    "OutcomeStatus",
    "PowerPointConverter",
    "SUPPORTED_EXTENSIONS",
    "SessionState",
    "WordConverter",
    "create_converters",
    "dispatch_application",
    "document_extension",
]
