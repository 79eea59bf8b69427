"""Turn command-line arguments into candidate document paths."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from pdfcreator.batch.models import InputKind
from pdfcreator.converter.models import SUPPORTED_EXTENSIONS, document_extension


def classify(argument: str) -> InputKind:
    if not argument:
        return InputKind.invalid
    path = Path(argument)
    if path.is_dir():
        return InputKind.directory
    if path.is_file():
        return InputKind.file
    return InputKind.invalid


def expand_directory(directory: str | Path) -> Iterator[Path]:
    """Yield the directory's own documents, in the order the OS lists them.

    Not recursive. Extensions match case-insensitively.
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            if document_extension(entry.name).lower() in SUPPORTED_EXTENSIONS:
                yield Path(entry.path)
