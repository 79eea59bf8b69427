"""PdfCreator: batch-convert Office documents to PDF via Office automation."""

__version__ = "0.1.0"
