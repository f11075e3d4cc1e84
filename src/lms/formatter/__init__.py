"""Plain-text rendering of patrons.

Exports the ``PatronFormatter`` class and the ``format_patron`` and
``format_listing`` convenience functions.
"""
from __future__ import annotations

from lms.formatter.formatter import PatronFormatter, format_listing, format_patron

__all__ = [
    "PatronFormatter",
    "format_patron",
    "format_listing",
]
