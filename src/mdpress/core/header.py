"""Typed parsing of the `---` delimited metadata header at the top of a content file

Header grammar:

    ---
    title: Hello world
    tags: python, notes
    date: 2024-03-01 09:30:00
    ---
    Body text follows verbatim...

Leading blank lines are skipped; the first non-blank line must open the header.
Blank lines inside the header are ignored. Each key is declared in a schema with
a Kind; unknown keys are rejected. When a key repeats, the last occurrence wins.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable

from mdpress.core.errors import HeaderError, MissingKeyError


DELIMITER = "---"
DATETIME_RE = re.compile(
    r'^(\d{4})-(\d{2})-(\d{2})(?: (\d{2}):(\d{2})(?::(\d{2}))?)?$'
)

ParsedHeader = dict[str, Any]


class Kind(str, Enum):
    """Value kinds a header key can declare"""
    string = "string"
    list = "list"
    datetime = "datetime"


class Absent(Enum):
    """Marker for an optional key that does not appear in the header."""
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


def _decode_string(value: str) -> str:
    return value


def _decode_list(value: str) -> list[str]:
    """Split on commas; entries are trimmed and empty entries dropped."""
    return [item.strip() for item in value.split(",") if item.strip()]


def _decode_datetime(value: str) -> datetime:
    """Parse YYYY-MM-DD with an optional HH:MM or HH:MM:SS time part."""
    m = DATETIME_RE.match(value)
    if not m:
        raise ValueError(f"expected YYYY-MM-DD [HH:MM[:SS]], got {value!r}")
    parts = [int(g) for g in m.groups(default="0")]
    try:
        return datetime(*parts)
    except ValueError as e:
        raise ValueError(f"invalid date {value!r}: {e}") from e


DECODERS: dict[Kind, Callable[[str], Any]] = {
    Kind.string:   _decode_string,
    Kind.list:     _decode_list,
    Kind.datetime: _decode_datetime,
}


def _split_kv(line: str) -> tuple[str, str] | None:
    """Split `key: value` into trimmed parts; None when the line has no separator or key."""
    key, sep, value = line.partition(":")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def _find_opening(lines: list[str], path: str) -> int:
    """Return the index of the opening delimiter, skipping leading blank lines."""
    for i, line in enumerate(lines):
        if not line.strip():
            continue
        if line.rstrip() == DELIMITER:
            return i
        raise HeaderError(f"expected header to start with '{DELIMITER}'", path, i + 1)
    raise HeaderError("file is empty, no header found", path, 0)


def _find_closing(lines: list[str], start: int, path: str) -> int:
    """Return the index of the closing delimiter; an unclosed header is blamed on its opening line."""
    for i in range(start + 1, len(lines)):
        if lines[i].rstrip() == DELIMITER:
            return i
    raise HeaderError(f"header is not closed with '{DELIMITER}'", path, start + 1)


def parse_header(
    content: str,
    schema: dict[str, Kind],
    required: Iterable[str] = (),
    path: str = "",
    ) -> tuple[ParsedHeader, str]:
    """Parse the header of content against schema. Returns (header, body).

    Every schema key appears in the result; optional keys not present map to
    ABSENT. The body is everything after the closing delimiter line, untouched.
    Raises HeaderError (with the offending 1-based line) or MissingKeyError.
    """
    required = list(required)
    unknown = [k for k in required if k not in schema]
    if unknown:
        raise ValueError(f"required keys not declared in schema: {unknown}")

    lines = content.splitlines(keepends=True)
    start = _find_opening(lines, path)
    end = _find_closing(lines, start, path)
    header: ParsedHeader = {key: ABSENT for key in schema}

    for i in range(start + 1, end):
        lineno = i + 1
        line = lines[i]
        if not line.strip():
            continue

        kv = _split_kv(line)
        if kv is None:
            raise HeaderError(f"expected 'key: value', got {line.strip()!r}", path, lineno)
        key, raw = kv
        kind = schema.get(key)
        if kind is None:
            raise HeaderError(f"unknown header key {key!r}", path, lineno)
        try:
            header[key] = DECODERS[kind](raw)
        except ValueError as e:
            raise HeaderError(f"bad value for {key!r}: {e}", path, lineno) from e

    for key in required:
        if header[key] is ABSENT:
            raise MissingKeyError(f"{key!r} is required, but it's missing", path, 0)

    return header, "".join(lines[end + 1:])
