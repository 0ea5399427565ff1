"""Loading and searching the sorted word list."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from pathlib import Path

MIN_WORD_LENGTH = 2


def parse_words(lines: Iterable[str]) -> list[str]:
    """Words of at least two characters, one per line, in file order.

    Only lines ending with a line break are taken; a final unterminated
    line is ignored.
    """
    words = []
    for line in lines:
        if not line.endswith("\n"):
            continue
        word = line[:-1]
        if len(word) >= MIN_WORD_LENGTH:
            words.append(word)
    return words


def read_words(path: str | Path) -> list[str]:
    """Read a word list file; raises ``OSError`` if it cannot be opened."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_words(handle)


def contains(words: Sequence[str], word: str) -> bool:
    """Binary search for ``word`` in a sorted word list."""
    index = bisect_left(words, word)
    return index < len(words) and words[index] == word