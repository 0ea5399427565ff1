"""Snake board model: cells, the snake, apples and the world's evolution."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Protocol

from termgames.snake_config import Settings


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Direction(Enum):
    """Heading of the snake, as a (dx, dy) step; y grows downwards."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)


class Cell(NamedTuple):
    """A board position."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Cell:
        dx, dy = direction.value
        return Cell(self.x + dx, self.y + dy)


@dataclass
class Snake:
    """The snake's cells, head first, and its heading."""

    cells: list[Cell]
    direction: Direction = Direction.EAST

    @property
    def head(self) -> Cell:
        return self.cells[0]

    @classmethod
    def create(cls, rows: int, columns: int, length: int) -> Snake:
        """A horizontal snake heading east whose head is at the board centre."""
        if length < 1:
            raise ValueError("snake length must be at least 1")
        cells = [Cell(columns // 2 - offset, rows // 2) for offset in range(length)]
        return cls(cells)

    def target(self) -> Cell:
        """The cell the head will move into next."""
        return self.head.moved(self.direction)


def random_cell(rows: int, columns: int, rng: _RandomSource) -> Cell:
    """A uniformly chosen cell of a ``columns`` x ``rows`` board."""
    x = rng.randrange(columns)
    y = rng.randrange(rows)
    return Cell(x, y)


@dataclass
class World:
    """The snake, the apples on the board and how many have been eaten."""

    snake: Snake
    apples: list[Cell] = field(default_factory=list)
    eaten: int = 0
    rng: _RandomSource = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def create(cls, settings: Settings, rng: _RandomSource | None = None) -> World:
        """A fresh world with a centred snake and the configured apples."""
        world = cls(
            snake=Snake.create(settings.height, settings.width, settings.length),
            rng=rng if rng is not None else random.Random(),
        )
        for _ in range(settings.apples):
            world.add_apple(settings)
        return world

    def is_free_of_apples(self, cell: Cell) -> bool:
        return cell not in self.apples

    def is_free_of_snake(self, cell: Cell) -> bool:
        return cell not in self.snake.cells

    def is_free(self, cell: Cell) -> bool:
        return self.is_free_of_apples(cell) and self.is_free_of_snake(cell)

    def add_apple(self, settings: Settings) -> Cell:
        """Place a new apple on a random free cell and return it."""
        occupied = {
            cell
            for cell in (*self.apples, *self.snake.cells)
            if 0 <= cell.x < settings.width and 0 <= cell.y < settings.height
        }
        if len(occupied) >= settings.width * settings.height:
            raise RuntimeError("no free cell left for an apple")
        cell = random_cell(settings.height, settings.width, self.rng)
        while not self.is_free(cell):
            cell = random_cell(settings.height, settings.width, self.rng)
        self.apples.insert(0, cell)
        return cell

    def snake_alive(self, settings: Settings) -> bool:
        """True if the snake's next move stays on the board and off its body."""
        target = self.snake.target()
        if not 0 <= target.x <= settings.width:
            return False
        if not 0 <= target.y <= settings.height:
            return False
        return self.is_free_of_snake(target)

    def remove_apple(self, cell: Cell) -> None:
        """Take the apple at ``cell`` off the board; ValueError if there is none."""
        self.apples.remove(cell)

    def step(self, settings: Settings) -> bool:
        """Move the snake one cell, eating and growing when it meets an apple.

        Returns False, leaving the world unchanged, when the move would kill
        the snake.
        """
        if not self.snake_alive(settings):
            return False
        target = self.snake.target()
        grows = not self.is_free_of_apples(target)
        self.snake.cells.insert(0, target)
        if grows:
            self.remove_apple(target)
            self.eaten += 1
            self.add_apple(settings)
        else:
            self.snake.cells.pop()
        return True