"""Load-line parser.

Exports the ``LineParser`` class and the ``parse_line`` and
``iter_lines`` helpers.
"""
from __future__ import annotations

from lms.parser.parser import LineParser, iter_lines, parse_line

__all__ = [
    "LineParser",
    "iter_lines",
    "parse_line",
]
