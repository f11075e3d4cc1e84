"""Patron registry.

Exports the ``PatronRegistry`` class and the ``LoadReport`` summary.
"""
from __future__ import annotations

from lms.registry.registry import PatronRegistry
from lms.registry.report import LoadReport

__all__ = [
    "PatronRegistry",
    "LoadReport",
]
