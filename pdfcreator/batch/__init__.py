"""Batch pipeline: resolve inputs, dispatch by type, aggregate outcomes."""

from pdfcreator.batch.dispatcher import Dispatcher
from pdfcreator.batch.models import BatchOutcome, InputKind
from pdfcreator.batch.resolver import classify, expand_directory
from pdfcreator.batch.runner import BatchRunner

__all__ = [
    "BatchOutcome",
    "BatchRunner",
    "Dispatcher",
    "InputKind",
    "classify",
    "expand_directory",
]
