"""lms-registry: in-memory library patron registry with validated bulk loading.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import lms

    registry = lms.PatronRegistry()
    report = registry.load_from_text(
        "1234567-John Smith-123 Main St-25\\n"
        "7654321-Jane Doe-456 Oak St-0\\n"
    )
    report.added, report.skipped
    (2, 0)

    registry.propose("1111111", "Ann Lee", "9 Elm St", "12.50")
    registry.remove_by_id("7654321")

    for patron in registry.list_sorted_by_id():
        print(patron)

    lms.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path

from lms.core import (
    ConfigError,
    DuplicateIdError,
    FormatError,
    LmsError,
    Patron,
    RegistryConfig,
    SourceUnavailableError,
    ValidationError,
    load_config,
    patron_key,
)
from lms.registry import LoadReport, PatronRegistry
from lms.validator import LoadDiagnostic

__version__: str = "0.1.0"


def load(
    path: str | Path, config: RegistryConfig | None = None
) -> tuple[PatronRegistry, LoadReport]:
    """Create a registry and load a patron file into it.

    Parameters
    ----------
    path:
        Path to the patron text file.
    config:
        Optional registry configuration.

    Returns
    -------
    tuple[PatronRegistry, LoadReport]
        The populated registry and the load summary.

    Raises
    ------
    SourceUnavailableError
        If the file cannot be opened or read.
    """
    registry = PatronRegistry(config)
    report = registry.load_from_file(path)
    return registry, report


__all__ = [
    "__version__",
    "load",
    "load_config",
    "Patron",
    "patron_key",
    "PatronRegistry",
    "RegistryConfig",
    "LoadReport",
    "LoadDiagnostic",
    "LmsError",
    "FormatError",
    "ValidationError",
    "DuplicateIdError",
    "SourceUnavailableError",
    "ConfigError",
]
