"""Rules of the word game: scoring, letter paths and the game state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from termgames.boggle_dictionary import contains
from termgames.boggle_grid import Grid

INITIAL_TRIES = 4
GRID_SPAN_X = 11
GRID_SPAN_Y = 3


def word_score(word: str) -> int:
    """Points for a word: 2 up to four letters, doubling for each letter more."""
    return 2 ** max(1, len(word) - 3)


def on_grid(left: int, top: int, x: int, y: int) -> bool:
    """True if screen position (x, y) falls on the grid drawn at (left, top)."""
    return left <= x <= left + GRID_SPAN_X and top <= y <= top + GRID_SPAN_Y


class Position(NamedTuple):
    x: int
    y: int


class Adjacency(Enum):
    """How a clicked position relates to the previously chosen one."""

    NONE = 0
    NEIGHBOUR = 1
    SAME = 2


def letter_relation(previous: tuple[int, int], x: int, y: int, cell_width: int) -> Adjacency:
    """Whether (x, y) is next to, the same as, or unrelated to ``previous``."""
    px, py = previous
    if px in (x - cell_width, x + cell_width):
        return Adjacency.NEIGHBOUR if abs(py - y) <= 1 else Adjacency.NONE
    if px == x:
        if py == y:
            return Adjacency.SAME
        if abs(py - y) == 1:
            return Adjacency.NEIGHBOUR
    return Adjacency.NONE


@dataclass
class Path:
    """The positions chosen so far for the current word, oldest first."""

    positions: list[Position] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def last(self) -> Position:
        return self.positions[-1]

    def is_free(self, x: int, y: int) -> bool:
        return Position(x, y) not in self.positions

    def add(self, x: int, y: int) -> bool:
        """Append (x, y) unless it is already on the path."""
        if not self.is_free(x, y):
            return False
        self.positions.append(Position(x, y))
        return True

    def pop(self) -> Position:
        """Remove and return the latest position; IndexError when empty."""
        return self.positions.pop()


@dataclass
class Game:
    """Grid, dictionary, score, remaining tries and words found, newest first."""

    grid: Grid
    dictionary: list[str]
    score: int = 0
    tries: int = INITIAL_TRIES
    found: list[str] = field(default_factory=list)

    @classmethod
    def new(cls, dictionary: list[str], rng=None) -> Game:
        """A game on a fresh random grid."""
        return cls(Grid.random(rng if rng is not None else random.Random()), list(dictionary))

    def add_word_score(self, word: str) -> None:
        self.score += word_score(word)

    def out_of_tries(self) -> bool:
        return self.tries == 0

    def submit(self, word: str) -> bool:
        """Score a new dictionary word; otherwise use up one try."""
        if contains(self.dictionary, word) and word not in self.found:
            self.found.insert(0, word)
            self.add_word_score(word)
            return True
        self.tries -= 1
        return False