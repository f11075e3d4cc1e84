"""Summary of a bulk load."""
from __future__ import annotations

from dataclasses import dataclass, field

from lms.validator.diagnostics import LoadDiagnostic


@dataclass
class LoadReport:
    """Counts and per-line findings from one load.

    Parameters
    ----------
    added:
        Lines that produced a new patron.
    skipped:
        Non-blank lines that were rejected.  Blank lines count as neither.
    diagnostics:
        One entry per skipped line, in source order.
    """

    added: int = 0
    skipped: int = 0
    diagnostics: list[LoadDiagnostic] = field(default_factory=list)

    def record_skip(self, diagnostic: LoadDiagnostic) -> None:
        self.skipped += 1
        self.diagnostics.append(diagnostic)

    @property
    def summary(self) -> str:
        return f"File load complete. Added: {self.added} | Skipped: {self.skipped}"

    def __str__(self) -> str:
        return self.summary
