"""The in-memory patron registry.

``PatronRegistry`` owns both the insertion-ordered list of patrons and
the ID index.  Every mutation goes through this class, so the two
containers always hold exactly the same patrons and no ID appears
twice.

Records enter the registry in three steps: validate the raw fields,
build a :class:`Patron`, then :meth:`PatronRegistry.add` it.
:meth:`PatronRegistry.propose` performs all three and is what both
file loads and manual entry use.  ``add`` on its own only enforces
uniqueness.

Example
-------
::

    from lms.registry import PatronRegistry

    registry = PatronRegistry()
    report = registry.load_from_file("patrons.txt")
    for patron in registry.list_sorted_by_id():
        print(patron)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from lms.core.config import RegistryConfig
from lms.core.errors import (
    DuplicateIdError,
    FormatError,
    SourceUnavailableError,
    ValidationError,
)
from lms.core.patron import Patron, patron_key
from lms.parser.parser import LineParser, iter_lines
from lms.registry.report import LoadReport
from lms.validator.diagnostics import LoadDiagnostic
from lms.validator.validator import FieldValidator

logger = logging.getLogger(__name__)


class PatronRegistry:
    """Validated, uniqueness-enforcing store of patrons.

    Parameters
    ----------
    config:
        Validation and parsing settings.  Defaults to ``RegistryConfig()``.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config = config if config is not None else RegistryConfig()
        self._validator = FieldValidator(self._config)
        self._parser = LineParser(self._config)
        self._patrons: list[Patron] = []
        self._by_id: dict[str, Patron] = {}

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def validator(self) -> FieldValidator:
        """The field validator, for callers that check one field at a time."""
        return self._validator

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, patron_id: str, name: str, address: str, fine_text: str) -> None:
        """Check raw fields, raising ``ValidationError`` for the first failure.

        Rules run in order: ID shape, name, address, fine is a number,
        fine is in range.
        """
        self._validator.validate(patron_id, name, address, fine_text)

    def check_fields(
        self, patron_id: str, name: str, address: str, fine_text: str
    ) -> ValidationError | None:
        """Non-raising form of :meth:`validate`."""
        return self._validator.check(patron_id, name, address, fine_text)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def propose(self, patron_id: str, name: str, address: str, fine_text: str) -> Patron:
        """Validate raw fields, then build and add a patron.

        Returns
        -------
        Patron
            The newly stored record.

        Raises
        ------
        ValidationError
            If any field is invalid.
        DuplicateIdError
            If ``patron_id`` is already registered.
        """
        self.validate(patron_id, name, address, fine_text)
        if self.contains_id(patron_id):
            raise DuplicateIdError(patron_id)
        patron = Patron(patron_id, name.strip(), address.strip(), float(fine_text.strip()))
        if not self.add(patron):
            raise DuplicateIdError(patron_id)
        return patron

    def add(self, patron: Patron) -> bool:
        """Store ``patron`` unless its ID is taken.

        Only uniqueness is enforced here; field validation is the
        caller's job (see :meth:`propose`).

        Returns
        -------
        bool
            ``True`` if added, ``False`` if the ID already existed.
        """
        key = patron_key(patron)
        if key in self._by_id:
            logger.debug("Rejected duplicate patron %s", key)
            return False
        self._patrons.append(patron)
        self._by_id[key] = patron
        logger.debug("Added patron %s", key)
        return True

    def remove_by_id(self, patron_id: str) -> bool:
        """Remove the patron with ``patron_id``.

        Returns
        -------
        bool
            ``True`` if a patron was removed, ``False`` if none matched.
        """
        existing = self._by_id.pop(patron_id, None)
        if existing is None:
            return False
        self._patrons = [p for p in self._patrons if p is not existing]
        logger.debug("Removed patron %s", patron_id)
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def contains_id(self, patron_id: str) -> bool:
        return patron_id in self._by_id

    def get(self, patron_id: str) -> Patron | None:
        return self._by_id.get(patron_id)

    def list_sorted_by_id(self) -> list[Patron]:
        """Return a snapshot of all patrons in ascending ID order.

        IDs are fixed-width digit strings, so string order is numeric
        order.  The registry's own insertion order is left untouched.
        """
        return sorted(self._patrons, key=patron_key)

    def __contains__(self, patron_id: object) -> bool:
        return patron_id in self._by_id

    def __len__(self) -> int:
        return len(self._patrons)

    def __iter__(self) -> Iterator[Patron]:
        """Iterate in insertion order."""
        return iter(list(self._patrons))

    def __repr__(self) -> str:
        return f"PatronRegistry(patrons={len(self)})"

    # ------------------------------------------------------------------
    # Bulk loading
    # ------------------------------------------------------------------

    def load_from_text(self, source: str | Iterable[str]) -> LoadReport:
        """Load patrons from text, one record per line.

        Blank lines are ignored.  Lines with the wrong field count,
        invalid fields or a duplicate ID are skipped and reported;
        loading always continues to the end of the input.

        Parameters
        ----------
        source:
            The complete text, or any iterable of lines such as an open
            file.  Errors raised by the iterable propagate unchanged;
            lines already accepted stay in the registry.

        Returns
        -------
        LoadReport
            Added / skipped counts and one diagnostic per skipped line.
        """
        report = LoadReport()
        for number, line in iter_lines(source):
            if self._parser.is_blank(line):
                continue
            try:
                fields = self._parser.parse(line)
                self.propose(fields.patron_id, fields.name, fields.address, fields.fine_text)
            except (FormatError, ValidationError, DuplicateIdError) as exc:
                diagnostic = LoadDiagnostic.from_error(number, exc)
                logger.warning("%s", diagnostic)
                report.record_skip(diagnostic)
                continue
            report.added += 1
        logger.info("%s", report.summary)
        return report

    def load_from_file(self, path: str | Path) -> LoadReport:
        """Load patrons from a text file.

        The file is opened and closed within this call, including when
        reading fails part-way.

        Raises
        ------
        SourceUnavailableError
            If the file cannot be opened or read.  Patrons added from
            lines read before the failure are kept.
        """
        path = Path(path)
        try:
            with path.open("r", encoding=self._config.encoding) as handle:
                return self.load_from_text(handle)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Unable to read %s: %s", path, exc)
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            raise SourceUnavailableError(str(path), reason) from exc
