"""The 4 x 4 letter grid of the word game."""

from __future__ import annotations

import random
from bisect import bisect_left
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

SIZE = 4

# Upper bound (inclusive) of each letter's slice of a roll in range(100).
_BOUNDS = (0, 1, 2, 3, 4, 5, 7, 9, 11, 13, 15, 17, 20, 23, 26, 30, 34, 39, 45, 52, 59, 66, 73, 80, 88, 99)
_LETTERS = "JKQVXZBFGPWYCMUDLHRAINOSTE"


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def random_letter(rng: _RandomSource | None = None) -> str:
    """An upper-case letter drawn with roughly English letter frequencies."""
    source = rng if rng is not None else random
    roll = source.randrange(100)
    return _LETTERS[bisect_left(_BOUNDS, roll)]


class CellState(IntEnum):
    """How a grid cell is highlighted."""

    NORMAL = 0
    SELECTED = 1
    MARKED = 2


def _blank_states() -> list[list[CellState]]:
    return [[CellState.NORMAL] * SIZE for _ in range(SIZE)]


@dataclass
class Grid:
    """Letters indexed as ``letters[y][x]`` and their highlight states."""

    letters: list[list[str]]
    states: list[list[CellState]] = field(default_factory=_blank_states)

    def __post_init__(self) -> None:
        for rows in (self.letters, self.states):
            if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
                raise ValueError(f"a grid must be {SIZE} x {SIZE}")

    @classmethod
    def random(cls, rng: _RandomSource | None = None) -> Grid:
        """A grid of random letters with every cell in the normal state."""
        letters = [[random_letter(rng) for _ in range(SIZE)] for _ in range(SIZE)]
        return cls(letters)

    def set_state(self, x: int, y: int, state: CellState) -> str:
        """Set the state of the cell at column ``x``, row ``y``; return its letter."""
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        self.states[y][x] = CellState(state)
        return self.letters[y][x]

    def reset_states(self) -> None:
        """Put every cell back in the normal state."""
        self.states = _blank_states()