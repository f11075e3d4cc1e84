"""Diagnostic types for registry loads.

A ``LoadDiagnostic`` is a message attached to one line of a load
source.  The registry produces one for every line it skips; the CLI
renders them as a table.
"""
from __future__ import annotations

from dataclasses import dataclass

from lms.core.errors import LmsError


@dataclass(frozen=True)
class LoadDiagnostic:
    """A single skipped load line.

    Parameters
    ----------
    line:
        1-based line number within the load source.
    code:
        A short machine-readable identifier, e.g. ``"LMS101"``.
    message:
        Human-readable reason.
    """

    line: int
    code: str
    message: str

    def __str__(self) -> str:
        return f"Skipping line {self.line}: {self.message}"

    @classmethod
    def from_error(cls, line: int, error: LmsError) -> "LoadDiagnostic":
        """Build a diagnostic from a registry error."""
        return cls(line=line, code=error.code, message=error.message)
