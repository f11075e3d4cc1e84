"""CLI package.

The ``cli`` sub-package contains the Click application, the command
implementations and the interactive menu shell.  It talks to the
registry only through its public API.
"""
from __future__ import annotations
