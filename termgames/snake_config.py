"""Snake game settings read from a small ``key = value`` file."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = "serpent.ini"

# Lines are read in records of at most this many characters; a longer line
# continues as a new record.
_RECORD_LIMIT = 31

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass(frozen=True)
class Settings:
    """Board size, apple count, initial snake length and frame delay."""

    width: int = 20
    height: int = 20
    apples: int = 3
    length: int = 4
    delay_us: int = 200_000


# First letter of a line -> (settings field, column where the value starts).
_FIELDS = {
    "l": ("width", 10),
    "h": ("height", 10),
    "n": ("apples", 16),
    "t": ("length", 17),
    "d": ("delay_us", 13),
}


def parse_value(line: str, offset: int) -> int:
    """Read the integer that starts at ``offset`` in ``line``.

    Leading whitespace and a sign are accepted, reading stops at the first
    non-digit, and 0 is returned when no digits are found.
    """
    match = _INTEGER.match(line[offset:])
    return int(match.group(1)) if match else 0


def _records(text: str) -> Iterator[str]:
    for line in text.splitlines(keepends=True):
        for start in range(0, len(line), _RECORD_LIMIT):
            yield line[start:start + _RECORD_LIMIT]


def parse_settings(text: str) -> Settings:
    """Build settings from the text of a configuration file.

    Each line is recognised by its first letter; unknown lines are ignored
    and missing keys keep their defaults.
    """
    values: dict[str, int] = {}
    for record in _records(text):
        entry = _FIELDS.get(record[:1])
        if entry is not None:
            name, offset = entry
            values[name] = parse_value(record, offset)
    return replace(Settings(), **values)


def load_settings(path: str | Path = DEFAULT_PATH) -> Settings:
    """Read settings from a file; raises ``OSError`` if it cannot be read."""
    return parse_settings(Path(path).read_text())