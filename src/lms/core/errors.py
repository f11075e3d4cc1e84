"""Error types for the patron registry.

Every error carries a short machine-readable ``code`` so that load
diagnostics, the CLI and callers can refer to a failure without
matching on message text.

Codes
-----
    LMS001  Wrong number of fields on a load line
    LMS101  ID is not exactly 7 digits
    LMS102  Name is empty
    LMS103  Address is empty
    LMS104  Fine is not a valid number
    LMS105  Fine is outside the allowed range
    LMS201  Duplicate patron ID
    LMS301  Load source cannot be opened or read
    LMS401  Invalid configuration
"""
from __future__ import annotations


class LmsError(Exception):
    """Base class for all registry errors.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    code:
        Machine-readable identifier, e.g. ``"LMS101"``.
    """

    code: str = "LMS000"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class FormatError(LmsError):
    """Raised when a load line does not split into the expected field count."""

    code = "LMS001"

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} fields but got {found}")


class ValidationError(LmsError):
    """Raised for the first field rule a candidate patron violates.

    Parameters
    ----------
    field:
        The offending field: ``"patron_id"``, ``"name"``, ``"address"``
        or ``"fine"``.
    message:
        Human-readable reason.
    code:
        One of ``LMS101`` to ``LMS105``.
    """

    code = "LMS100"

    def __init__(self, field: str, message: str, code: str) -> None:
        self.field = field
        super().__init__(message, code)


class DuplicateIdError(LmsError, ValueError):
    """Raised when a patron ID is already present in the registry."""

    code = "LMS201"

    def __init__(self, patron_id: str) -> None:
        self.patron_id = patron_id
        super().__init__(f"duplicate ID {patron_id!r}")


class SourceUnavailableError(LmsError):
    """Raised when a load source cannot be opened or read to the end.

    Lines processed before the failure stay committed.
    """

    code = "LMS301"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read file {path}: {reason}")


class ConfigError(LmsError, ValueError):
    """Raised when a registry configuration is malformed."""

    code = "LMS401"
