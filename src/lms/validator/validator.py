"""Field validator: checks raw patron fields before a record is built.

The ``FieldValidator`` runs its rules in order and stops at the first
failure, so callers always see the single most fundamental problem
with a candidate patron.  The same validator serves file loads and
manual entry.

Usage
-----
::

    from lms.validator import FieldValidator

    validator = FieldValidator()
    error = validator.check("1234567", "John Smith", "123 Main St", "25")
    if error is not None:
        print(error.code, error.message)
"""
from __future__ import annotations

from lms.core.config import RegistryConfig
from lms.core.errors import ValidationError
from lms.validator.rules import (
    DEFAULT_RULES,
    CandidateFields,
    Rule,
    check_address,
    check_fine,
    check_id,
    check_name,
)


class FieldValidator:
    """Short-circuiting validator for candidate patron fields.

    Parameters
    ----------
    config:
        Active registry configuration.  Defaults to ``RegistryConfig()``.
    rules:
        Ordered rules to apply.  Defaults to ``DEFAULT_RULES``.
    """

    def __init__(
        self,
        config: RegistryConfig | None = None,
        rules: list[Rule] | None = None,
    ) -> None:
        self._config: RegistryConfig = config if config is not None else RegistryConfig()
        self._rules: list[Rule] = rules if rules is not None else list(DEFAULT_RULES)

    @property
    def config(self) -> RegistryConfig:
        return self._config

    def check(
        self, patron_id: str, name: str, address: str, fine_text: str
    ) -> ValidationError | None:
        """Return the first rule violation, or ``None`` if the fields are valid."""
        candidate = CandidateFields(patron_id, name, address, fine_text)
        for rule in self._rules:
            error = rule(candidate, self._config)
            if error is not None:
                return error
        return None

    def validate(self, patron_id: str, name: str, address: str, fine_text: str) -> None:
        """Raise ``ValidationError`` for the first rule violation."""
        error = self.check(patron_id, name, address, fine_text)
        if error is not None:
            raise error

    # ------------------------------------------------------------------
    # Single-field checks for interactive re-prompting
    # ------------------------------------------------------------------

    def validate_id(self, patron_id: str) -> None:
        _raise_if(check_id(patron_id, self._config))

    def validate_name(self, name: str) -> None:
        _raise_if(check_name(name, self._config))

    def validate_address(self, address: str) -> None:
        _raise_if(check_address(address, self._config))

    def validate_fine(self, fine_text: str) -> None:
        _raise_if(check_fine(fine_text, self._config))

    def add_rule(self, rule: Rule) -> None:
        """Append a custom rule, run after the built-in ones."""
        self._rules.append(rule)

    @property
    def rule_count(self) -> int:
        """Return the number of rules currently registered."""
        return len(self._rules)


def _raise_if(error: ValidationError | None) -> None:
    if error is not None:
        raise error


def validate(patron_id: str, name: str, address: str, fine_text: str) -> None:
    """Convenience function: validate fields against the default config."""
    FieldValidator().validate(patron_id, name, address, fine_text)
