"""Unit tests for lms.formatter and lms.serializer."""
from __future__ import annotations

import json

import yaml

from lms.core.patron import Patron
from lms.formatter import PatronFormatter, format_listing, format_patron
from lms.serializer import PatronSerializer

_RULE = "-" * 50


def _patrons() -> list[Patron]:
    return [
        Patron("7654321", "Jane Doe", "456 Oak St", 0.0),
        Patron("1234567", "John Smith", "123 Main St", 25.0),
    ]


class TestFormatPatron:
    def test_canonical_line(self) -> None:
        line = format_patron(Patron("1234567", "John Smith", "123 Main St", 25))
        assert line == "ID: 1234567 | Name: John Smith | Address: 123 Main St | Fine: $25.00"

    def test_matches_str(self) -> None:
        p = _patrons()[0]
        assert PatronFormatter().format_patron(p) == str(p)


class TestFormatListing:
    def test_sorted_listing(self) -> None:
        text = format_listing(_patrons())
        lines = text.splitlines()
        assert lines[0] == _RULE
        assert lines[1] == "LMS Patron List"
        assert lines[2] == _RULE
        assert lines[3].startswith("ID: 1234567")
        assert lines[4].startswith("ID: 7654321")
        assert lines[5] == _RULE
        assert text.endswith("\n")

    def test_empty_listing(self) -> None:
        lines = format_listing([]).splitlines()
        assert lines == [_RULE, "LMS Patron List", _RULE, "(No patrons currently in the system.)", _RULE]

    def test_unsorted_formatter_keeps_order(self) -> None:
        lines = PatronFormatter(sort=False).format_listing(_patrons()).splitlines()
        assert lines[3].startswith("ID: 7654321")


class TestPatronSerializer:
    def test_to_dict(self) -> None:
        data = PatronSerializer().to_dict(_patrons())
        assert data["count"] == 2
        assert data["patrons"][0] == {
            "id": "7654321",
            "name": "Jane Doe",
            "address": "456 Oak St",
            "fine": 0.0,
        }

    def test_to_json(self) -> None:
        data = json.loads(PatronSerializer().to_json(_patrons()))
        assert [p["id"] for p in data["patrons"]] == ["7654321", "1234567"]

    def test_to_yaml_keeps_ids_as_strings(self) -> None:
        data = yaml.safe_load(PatronSerializer().to_yaml([Patron("0012345", "A", "B", 1.5)]))
        assert data["patrons"][0]["id"] == "0012345"
        assert data["patrons"][0]["fine"] == 1.5

    def test_empty(self) -> None:
        assert PatronSerializer().to_dict([]) == {"count": 0, "patrons": []}
