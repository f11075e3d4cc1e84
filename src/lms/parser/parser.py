"""Line parser for patron load sources.

A load source holds one patron per line::

    1234567-John Smith-123 Main St Orlando FL-25

Fields are separated by a literal delimiter (``-`` by default).  The
split keeps empty trailing fields, so ``"1234567-Name-Addr-"`` yields
four fields with an empty fine rather than three.  Each field is
trimmed of surrounding whitespace.

Blank lines are not records; :func:`iter_lines` numbers every physical
line from 1 and :class:`LineParser` leaves the decision to skip blanks
to the caller.
"""
from __future__ import annotations

import io
from collections.abc import Iterable, Iterator

from lms.core.config import RegistryConfig
from lms.core.errors import FormatError
from lms.validator.rules import CandidateFields


class LineParser:
    """Split load lines into candidate patron fields.

    Parameters
    ----------
    config:
        Supplies the delimiter and expected field count.
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config = config if config is not None else RegistryConfig()

    @staticmethod
    def is_blank(line: str) -> bool:
        return not line.strip()

    def parse(self, line: str) -> CandidateFields:
        """Parse one non-blank line.

        Raises
        ------
        FormatError
            If the line does not split into exactly ``field_count`` fields.
        """
        parts = line.rstrip("\r\n").split(self._config.delimiter)
        if len(parts) != self._config.field_count:
            raise FormatError(expected=self._config.field_count, found=len(parts))
        patron_id, name, address, fine_text = (part.strip() for part in parts)
        return CandidateFields(patron_id, name, address, fine_text)


def iter_lines(source: str | Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, text)`` pairs, numbered from 1.

    ``source`` is either the whole text or any iterable of lines, such
    as an open file.  Text is split the way a file opened in text mode
    splits it, on line feeds, carriage returns and CRLF pairs only.
    Yielded lines keep their terminator.  Errors raised while iterating
    a file propagate.
    """
    lines: Iterable[str]
    if isinstance(source, str):
        lines = io.StringIO(source, newline=None)
    else:
        lines = source
    for number, line in enumerate(lines, start=1):
        yield number, line


def parse_line(line: str, config: RegistryConfig | None = None) -> CandidateFields:
    """Convenience function: parse a single line with the given config."""
    return LineParser(config).parse(line)
