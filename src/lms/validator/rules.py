"""Individual field rules for patron validation.

Each rule is a callable that accepts the raw candidate fields and the
active :class:`RegistryConfig` and returns a ``ValidationError`` for
the first problem it finds, or ``None``.  ``DEFAULT_RULES`` lists them
in the order the validator applies them; validation stops at the first
failure.

    LMS101  ID is not exactly ``id_length`` ASCII digits
    LMS102  Name is empty after trimming
    LMS103  Address is empty after trimming
    LMS104  Fine is not a finite decimal number
    LMS105  Fine is outside ``[fine_min, fine_max]``
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Final

from lms.core.config import RegistryConfig
from lms.core.errors import ValidationError

_DECIMAL: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


@dataclass(frozen=True)
class CandidateFields:
    """Raw, already-trimmed fields for a patron that does not exist yet."""

    patron_id: str
    name: str
    address: str
    fine_text: str


Rule = Callable[[CandidateFields, RegistryConfig], "ValidationError | None"]


def parse_fine(text: str) -> float | None:
    """Return ``text`` as a finite float, or ``None`` if it is not one.

    Only plain decimal notation is accepted, so ``"nan"``, ``"inf"`` and
    ``"1_000"`` are all rejected even though ``float()`` takes them.
    """
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def _fine_range_message(config: RegistryConfig) -> str:
    return f"Fine must be between {config.fine_min:g} and {config.fine_max:g}."


# ---------------------------------------------------------------------------
# Per-field checks
# ---------------------------------------------------------------------------


def check_id(patron_id: str, config: RegistryConfig) -> ValidationError | None:
    """LMS101: the ID is exactly ``id_length`` ASCII digits."""
    pattern = rf"[0-9]{{{config.id_length}}}"
    if patron_id is None or not re.fullmatch(pattern, patron_id):
        return ValidationError(
            "patron_id", f"ID must be exactly {config.id_length} digits.", "LMS101"
        )
    return None


def check_name(name: str, config: RegistryConfig) -> ValidationError | None:
    """LMS102: the name is not blank."""
    if name is None or not name.strip():
        return ValidationError("name", "Name cannot be empty.", "LMS102")
    return None


def check_address(address: str, config: RegistryConfig) -> ValidationError | None:
    """LMS103: the address is not blank."""
    if address is None or not address.strip():
        return ValidationError("address", "Address cannot be empty.", "LMS103")
    return None


def check_fine(fine_text: str, config: RegistryConfig) -> ValidationError | None:
    """LMS104 and LMS105: the fine is a number inside the allowed range."""
    value = parse_fine(fine_text) if fine_text is not None else None
    if value is None:
        return ValidationError("fine", "Fine must be a valid number.", "LMS104")
    if not (config.fine_min <= value <= config.fine_max):
        return ValidationError("fine", _fine_range_message(config), "LMS105")
    return None


# ---------------------------------------------------------------------------
# Rules over a full candidate
# ---------------------------------------------------------------------------


def rule_id_shape(fields: CandidateFields, config: RegistryConfig) -> ValidationError | None:
    """LMS101: apply :func:`check_id` to the candidate ID."""
    return check_id(fields.patron_id, config)


def rule_name_present(fields: CandidateFields, config: RegistryConfig) -> ValidationError | None:
    """LMS102: apply :func:`check_name` to the candidate name."""
    return check_name(fields.name, config)


def rule_address_present(
    fields: CandidateFields, config: RegistryConfig
) -> ValidationError | None:
    """LMS103: apply :func:`check_address` to the candidate address."""
    return check_address(fields.address, config)


def rule_fine_valid(fields: CandidateFields, config: RegistryConfig) -> ValidationError | None:
    """LMS104 and LMS105: apply :func:`check_fine` to the candidate fine."""
    return check_fine(fields.fine_text, config)


DEFAULT_RULES: tuple[Rule, ...] = (
    rule_id_shape,
    rule_name_present,
    rule_address_present,
    rule_fine_valid,
)
