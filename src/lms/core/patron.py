"""The patron record held by the registry.

A ``Patron`` performs no validation of its own: the registry validates
raw fields once and only then constructs the record.  Identity is the
patron ID alone, obtained through :func:`patron_key`; the class keeps
default object equality so records behave predictably in generic
containers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class Patron:
    """A single library patron.

    Parameters
    ----------
    patron_id:
        7-digit ID, kept as a string so leading zeros survive.
        Read-only once set.
    name:
        Patron name.
    address:
        Postal address.
    fine:
        Outstanding overdue fine in dollars.
    """

    patron_id: str
    name: str
    address: str
    fine: float

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "patron_id" and hasattr(self, "patron_id"):
            raise AttributeError("patron_id cannot be changed once a Patron is created")
        object.__setattr__(self, key, value)

    def __str__(self) -> str:
        return (
            f"ID: {self.patron_id} | Name: {self.name} | "
            f"Address: {self.address} | Fine: ${self.fine:.2f}"
        )


def patron_key(patron: Patron) -> str:
    """Return the key used for uniqueness, lookup and ordering."""
    return patron.patron_id
