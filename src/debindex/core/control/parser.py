#!/usr/bin/env python3
"""
Purpose:
    Parses the first stanza of a Debian control record into an immutable,
    ordered `ControlRecord`.

Format:
    Package: hello
    Version: 2.10-3
    Description: example package
     with a continuation line

    - `Key: value`; the key is trimmed, the value loses leading whitespace only
    - a line starting with a space or tab continues the previous field; the
      continuation is appended after a newline with its leading whitespace removed
    - lines starting with '#' are comments and are skipped
    - a blank line ends the stanza (leading blank lines are skipped)
    - duplicate keys: last write wins
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

from debindex.core.utils import read_text, split_lines

logger = logging.getLogger(__name__)

CONTINUATION_JOINER = "\n"


class ParseError(ValueError):
    """Malformed control text. The whole record is rejected."""

    def __init__(self, message: str, line_number: int, line: str):
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line


class ControlRecord(Mapping[str, str]):
    """
    Immutable, ordered mapping of control field name -> value.

    Keys are case-sensitive and keep first-seen order.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, str]] = None):
        self._fields: Dict[str, str] = dict(fields or {})

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __hash__(self) -> int:
        return hash(tuple(self._fields.items()))

    def to_dict(self) -> Dict[str, str]:
        return dict(self._fields)

    def __repr__(self) -> str:
        return f"ControlRecord({self._fields!r})"


# --- Public API --- #

def parse_control(text: Union[str, Iterable[str]]) -> ControlRecord:
    """
    Parse raw control text (a string or a sequence of lines) into a ControlRecord.

    Raises:
        ParseError: on a key-less line, a continuation before any key, or an empty key.
    """
    fields: Dict[str, str] = {}
    current: Optional[str] = None

    for number, line in enumerate(_iter_lines(text), start=1):
        if line.startswith("#"):
            continue

        if not line.strip():
            if fields:
                break
            continue

        if line[0] in " \t":
            if current is None:
                raise ParseError("continuation line before any field", number, line)
            fields[current] = fields[current] + CONTINUATION_JOINER + line.lstrip()
            continue

        key, sep, value = line.partition(":")
        if not sep:
            raise ParseError("expected 'Key: value'", number, line)
        key = key.strip()
        if not key:
            raise ParseError("empty field name", number, line)

        if key in fields:
            logger.debug("Duplicate control field %r on line %d; keeping the last value", key, number)
        fields[key] = value.lstrip()
        current = key

    return ControlRecord(fields)


def parse_control_file(path: Union[str, Path]) -> ControlRecord:
    """Read a control file from disk and parse its first stanza."""
    return parse_control(read_text(Path(path)))


# --- Internals --- #

def _iter_lines(text: Union[str, Iterable[str]]) -> List[str]:
    """Normalize input to a list of lines without line terminators."""
    if isinstance(text, str):
        return split_lines(text)
    return [raw.rstrip("\r\n") for raw in text]
