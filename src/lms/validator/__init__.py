"""Patron field validation.

Exports the ``FieldValidator`` class, the ``validate`` convenience
function, the load diagnostic type and the built-in field rules.
"""
from __future__ import annotations

from lms.validator.diagnostics import LoadDiagnostic
from lms.validator.rules import DEFAULT_RULES, CandidateFields, Rule, parse_fine
from lms.validator.validator import FieldValidator, validate

__all__ = [
    "FieldValidator",
    "validate",
    "LoadDiagnostic",
    "CandidateFields",
    "Rule",
    "DEFAULT_RULES",
    "parse_fine",
]
