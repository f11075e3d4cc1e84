"""Structured dumps of patron listings.

Exports the ``PatronSerializer`` class.
"""
from __future__ import annotations

from lms.serializer.serializer import PatronSerializer

__all__ = ["PatronSerializer"]
