#!/usr/bin/env python3
"""Example: Quickstart: lms-registry

Minimal working example: load a patron file, inspect the skipped
lines, add and remove a patron, and print the sorted listing.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install lms-registry
"""
from __future__ import annotations

from pathlib import Path

import lms
from lms.formatter import format_listing

PATRON_FILE = Path(__file__).with_name("patrons.txt")


def main() -> None:
    print(f"lms-registry version: {lms.__version__}")

    # Step 1: Load the sample file
    registry, report = lms.load(PATRON_FILE)
    print(report.summary)
    for diag in report.diagnostics:
        print(f"  [{diag.code}] line {diag.line}: {diag.message}")

    # Step 2: Add a patron by hand
    try:
        registry.propose("4444444", "Sam Park", "77 Bay Rd Naples FL", "12.50")
    except lms.LmsError as exc:
        print(f"Could not add patron: {exc}")

    # Step 3: Remove one
    registry.remove_by_id("7654321")

    # Step 4: Print the listing
    print(format_listing(registry.list_sorted_by_id()))


if __name__ == "__main__":
    main()
