"""Text rendering of patrons and patron listings.

The canonical single-line form of a patron is::

    ID: 1234567 | Name: John Smith | Address: 123 Main St | Fine: $25.00

``PatronFormatter.format_listing`` frames a sorted listing between rule
lines under an ``LMS Patron List`` heading, or prints a placeholder
when there are no patrons.
"""
from __future__ import annotations

from collections.abc import Iterable

from lms.core.patron import Patron, patron_key

_RULE = "-" * 50
_TITLE = "LMS Patron List"
_EMPTY = "(No patrons currently in the system.)"


class PatronFormatter:
    """Render patrons as plain text.

    Parameters
    ----------
    sort:
        When ``True`` (the default) listings are ordered by patron ID
        regardless of the order they are passed in.
    """

    def __init__(self, sort: bool = True) -> None:
        self._sort = sort

    def format_patron(self, patron: Patron) -> str:
        return str(patron)

    def format_listing(self, patrons: Iterable[Patron]) -> str:
        """Return the framed listing, ending with a newline."""
        items = sorted(patrons, key=patron_key) if self._sort else list(patrons)
        lines = [_RULE, _TITLE, _RULE]
        if not items:
            lines.append(_EMPTY)
        else:
            lines.extend(self.format_patron(p) for p in items)
        lines.append(_RULE)
        return "\n".join(lines) + "\n"


def format_patron(patron: Patron) -> str:
    """Convenience function: canonical one-line form of ``patron``."""
    return PatronFormatter().format_patron(patron)


def format_listing(patrons: Iterable[Patron]) -> str:
    """Convenience function: framed listing sorted by ID."""
    return PatronFormatter().format_listing(patrons)
