"""Terminal front end for the snake game."""

from __future__ import annotations

import argparse
import curses
import sys
import time

from termgames.snake_config import DEFAULT_PATH, Settings, load_settings
from termgames.snake_world import Cell, Direction, Snake, World

_STEERING = {
    ord("z"): Direction.NORTH,
    ord("d"): Direction.EAST,
    ord("s"): Direction.SOUTH,
    ord("q"): Direction.WEST,
}


def _put(screen, row: int, col: int, text: str) -> None:
    try:
        screen.addstr(row, col, text)
    except curses.error:
        pass


def origin_row(settings: Settings, lines: int) -> int:
    """Screen row of the board's top edge."""
    return lines // 2 - settings.height // 2


def origin_col(settings: Settings, cols: int) -> int:
    """Screen column of the board's left edge."""
    return cols // 2 - settings.width // 2


def draw_border(screen, columns: int, rows: int) -> None:
    """Draw the frame around a board of the given size."""
    lines, cols = screen.getmaxyx()
    center_col = cols // 2 - 1
    center_row = lines // 2 - 1
    top = center_row - rows // 2
    bottom = center_row + rows // 2 + 1
    left = center_col - columns // 2
    right = center_col + columns // 2 + 1
    for row in range(top, bottom + 1):
        _put(screen, row, left, "|")
        _put(screen, row, right, "|")
    for col in range(left, right + 1):
        _put(screen, top, col, "-")
        _put(screen, bottom, col, "-")


def draw_apple(screen, cell: Cell, settings: Settings) -> None:
    lines, cols = screen.getmaxyx()
    _put(screen, origin_row(settings, lines) + cell.y, origin_col(settings, cols) + cell.x, "P")


def draw_snake(screen, snake: Snake, settings: Settings) -> None:
    """Draw the head as 'o' and the body as '#'."""
    lines, cols = screen.getmaxyx()
    top = origin_row(settings, lines)
    left = origin_col(settings, cols)
    for index, cell in enumerate(snake.cells):
        _put(screen, top + cell.y, left + cell.x, "#" if index else "o")


def draw_world(screen, world: World, settings: Settings) -> None:
    """Redraw the whole board with the number of apples eaten."""
    screen.erase()
    draw_border(screen, settings.width, settings.height)
    for apple in world.apples:
        draw_apple(screen, apple, settings)
    draw_snake(screen, world.snake, settings)
    _put(screen, 0, 0, f"apples eaten : {world.eaten}")
    screen.refresh()


def wait_for_space(screen) -> None:
    """Block until the space bar is pressed."""
    while screen.getch() != ord(" "):
        pass


def steer(screen, world: World) -> None:
    """Read one key: z/d/s/q turn the snake, space pauses until pressed again."""
    key = screen.getch()
    if key in _STEERING:
        world.snake.direction = _STEERING[key]
    elif key == ord(" "):
        screen.nodelay(False)
        wait_for_space(screen)
        screen.nodelay(True)


def _setup_terminal(screen) -> None:
    try:
        curses.start_color()
        curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLUE)
        curses.init_pair(2, curses.COLOR_BLUE, curses.COLOR_GREEN)
    except curses.error:
        pass
    for call in (lambda: curses.curs_set(0), curses.noecho):
        try:
            call()
        except curses.error:
            pass
    screen.keypad(True)


def run(stdscr, settings: Settings) -> World:
    """Play one game until the snake dies; return the final world."""
    _setup_terminal(stdscr)
    world = World.create(settings)
    draw_world(stdscr, world, settings)
    stdscr.getch()
    stdscr.nodelay(True)
    while world.snake_alive(settings):
        world.step(settings)
        draw_world(stdscr, world, settings)
        time.sleep(settings.delay_us / 1_000_000)
        steer(stdscr, world)
    stdscr.nodelay(False)
    stdscr.getch()
    return world


def main(argv: list[str] | None = None) -> int:
    """Play snake in the terminal with settings read from a file."""
    parser = argparse.ArgumentParser(prog="snake", description="Terminal snake game.")
    parser.add_argument("config", nargs="?", default=DEFAULT_PATH, help="settings file")
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config)
    except OSError as exc:
        print(f"snake: cannot read {args.config}: {exc}", file=sys.stderr)
        return 1
    try:
        world = curses.wrapper(run, settings)
    except KeyboardInterrupt:
        return 0
    print(f"apples eaten : {world.eaten}")
    return 0