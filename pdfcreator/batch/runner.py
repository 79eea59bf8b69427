"""Sequential batch loop over the command-line arguments."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from pdfcreator.batch.dispatcher import Dispatcher
from pdfcreator.batch.models import BatchOutcome, InputKind
from pdfcreator.batch.resolver import classify, expand_directory
from pdfcreator.converter.models import FailureKind, FileOutcome

logger = logging.getLogger(__name__)


class BatchRunner:
    """Processes arguments one file at a time and collects the outcomes.

    Per-file failures are recorded and the loop moves on. An
    AutomationStartError from a converter ends the run.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        on_start: Callable[[Path], None] | None = None,
        on_outcome: Callable[[FileOutcome], None] | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self._on_start = on_start
        self._on_outcome = on_outcome

    def run(self, arguments: Iterable[str]) -> BatchOutcome:
        batch = BatchOutcome()
        for argument in arguments:
            kind = classify(argument)
            if kind is InputKind.directory:
                for path in expand_directory(argument):
                    self._record(batch, self._process(path))
            elif kind is InputKind.file:
                self._record(batch, self._process(Path(argument)))
            else:
                self._record(
                    batch,
                    FileOutcome.failed(
                        argument, FailureKind.invalid_path, f"Invalid path: {argument}"
                    ),
                )

        logger.info(
            "batch done: %d converted, %d skipped, %d failed",
            batch.converted,
            batch.skipped,
            batch.failed,
        )
        return batch

    def _process(self, path: Path) -> FileOutcome:
        if self._on_start is not None and self.dispatcher.needs_conversion(path):
            self._on_start(path)
        return self.dispatcher.dispatch(path)

    def _record(self, batch: BatchOutcome, outcome: FileOutcome) -> None:
        batch.add(outcome)
        if self._on_outcome is not None:
            self._on_outcome(outcome)
