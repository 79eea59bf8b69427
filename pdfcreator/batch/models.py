"""Pydantic models for batch runs."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from pdfcreator.converter.models import FileOutcome, OutcomeStatus


class InputKind(str, Enum):
    directory = "directory"
    file = "file"
    invalid = "invalid"


class BatchOutcome(BaseModel):
    """Every per-file outcome of one run, in processing order."""

    outcomes: list[FileOutcome] = Field(default_factory=list)

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def converted(self) -> int:
        return self._count(OutcomeStatus.converted)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.skipped)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.failed)

    @property
    def has_errors(self) -> bool:
        return any(not o.ok for o in self.outcomes)
