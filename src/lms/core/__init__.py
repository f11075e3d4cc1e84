"""Core domain types: the patron record, configuration and errors.

Submodules in core/ should not import from registry/ or cli/.
"""
from __future__ import annotations

from lms.core.config import RegistryConfig, load_config
from lms.core.errors import (
    ConfigError,
    DuplicateIdError,
    FormatError,
    LmsError,
    SourceUnavailableError,
    ValidationError,
)
from lms.core.patron import Patron, patron_key

__all__ = [
    "Patron",
    "patron_key",
    "RegistryConfig",
    "load_config",
    "LmsError",
    "FormatError",
    "ValidationError",
    "DuplicateIdError",
    "SourceUnavailableError",
    "ConfigError",
]
