"""JSON and YAML dumps of patron listings.

The serialized form is a plain dict/list structure that maps naturally
to both formats.  Dumps are for display and downstream tooling; the
registry never writes them back to its load source.

Usage
-----
::

    from lms.serializer import PatronSerializer

    serializer = PatronSerializer()
    text = serializer.to_json(registry.list_sorted_by_id())
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from lms.core.patron import Patron


class PatronSerializer:
    """Converts patrons to plain dicts, JSON and YAML."""

    def patron_to_dict(self, patron: Patron) -> dict[str, object]:
        return {
            "id": patron.patron_id,
            "name": patron.name,
            "address": patron.address,
            "fine": round(patron.fine, 2),
        }

    def to_dict(self, patrons: Iterable[Patron]) -> dict[str, object]:
        """Serialize a listing, preserving the order given."""
        items = [self.patron_to_dict(p) for p in patrons]
        return {"count": len(items), "patrons": items}

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, patrons: Iterable[Patron], indent: int = 2) -> str:
        return json.dumps(self.to_dict(patrons), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, patrons: Iterable[Patron]) -> str:
        return yaml.dump(
            self.to_dict(patrons),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
