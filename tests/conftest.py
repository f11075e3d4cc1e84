"""Shared test fixtures for lms-registry.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from lms.registry import PatronRegistry


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "lms"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def registry() -> PatronRegistry:
    """Return an empty registry with the default configuration."""
    return PatronRegistry()


@pytest.fixture()
def sample_text() -> str:
    return "1234567-John Smith-123 Main St-25\n7654321-Jane Doe-456 Oak St-0\n"


@pytest.fixture()
def write_patrons(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes ``text`` to a fresh patron file."""
    counter = {"n": 0}

    def _write(text: str) -> Path:
        counter["n"] += 1
        path = tmp_path / f"patrons_{counter['n']}.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
