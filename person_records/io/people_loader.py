"""Utilities for reading :class:`~person_records.models.person.Person` objects from text files."""
from __future__ import annotations

import logging
import re
from typing import List

from ..models.person import Person

logger = logging.getLogger(__name__)

FIELD_COUNT = 4

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _split_fields(line: str) -> List[str]:
    """Split ``line`` on single spaces, dropping trailing empty fields."""
    fields = line.split(" ")
    while fields and not fields[-1]:
        fields.pop()
    return fields


def _to_int(token: str, field_name: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"{field_name} must be an integer, got {token!r}")
    return int(token)


def parse_line(line: str) -> Person:
    """Build a :class:`Person` from one ``id first_name last_name security_number`` line.

    Raises
    ------
    ValueError
        If the id or the security number is not an integer.
    IndexError
        If the line holds fewer than four fields.
    """
    fields = _split_fields(line)
    return Person(
        id=_to_int(fields[0], "id"),
        security_number=_to_int(fields[3], "security_number"),
        last_name=fields[2],
        first_name=fields[1],
    )


def parse_all(path: str, encoding: str = "utf8") -> List[Person]:
    """Read every person from the file at ``path``, in file order.

    Reading stops at the first line that does not split into exactly four
    fields; that line and every line after it are ignored, even valid ones.

    Parameters
    ----------
    path:
        Path to the text file.
    encoding:
        Text encoding of the file. Bytes that do not decode are replaced
        with U+FFFD rather than raising.

    Returns
    -------
    list[Person]
        People read before the first malformed line.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    LookupError
        If ``encoding`` is not a known codec.
    ValueError
        If a four-field line holds a non-integer id or security number.
    """

    with open(path, "r", encoding=encoding, errors="replace") as handle:
        lines = [line.rstrip("\n") for line in handle]
    logger.debug("Read %d lines from %s", len(lines), path)

    people: List[Person] = []
    for lineno, line in enumerate(lines, start=1):
        if len(_split_fields(line)) != FIELD_COUNT:
            logger.info(
                "Stopped reading %s at line %d, %d line(s) left unread",
                path,
                lineno,
                len(lines) - lineno + 1,
            )
            break
        try:
            people.append(parse_line(line))
        except ValueError as exc:
            raise ValueError(f"Line {lineno}: {exc}") from exc

    logger.info("Loaded %d people from %s", len(people), path)
    return people
