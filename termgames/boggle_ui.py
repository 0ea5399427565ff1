"""Terminal front end for the word game, played with the mouse."""

from __future__ import annotations

import argparse
import curses
import sys
import time
from collections.abc import Iterable

from termgames.boggle_dictionary import read_words
from termgames.boggle_game import Adjacency, Game, Path, letter_relation, on_grid
from termgames.boggle_grid import SIZE, CellState, Grid

DEFAULT_DICTIONARY = "mot"
CELL_WIDTH = 3
WORD_ROW = 10
FOUND_ROW = 15
NO_KEY = -1
IDLE_SECONDS = 0.01

HELP_LINES = (
    "Colour guide:",
    "Green for a selected letter",
    "Blue for a letter not selected yet",
)


def _pair(number: int) -> int:
    try:
        return curses.color_pair(number)
    except curses.error:
        return 0


def _put(screen, row: int, col: int, text: str, attr: int = 0) -> None:
    try:
        screen.addstr(row, col, text, attr)
    except curses.error:
        pass


def draw_cell(screen, row: int, col: int, letter: str, state: CellState) -> None:
    """Draw one letter, coloured by its state."""
    attr = 0 if state == CellState.NORMAL else _pair(1 if state == CellState.SELECTED else 2)
    _put(screen, row, col, f" {letter} ", attr)


def draw_grid(screen, grid: Grid) -> None:
    """Draw the grid centred on the screen."""
    lines, cols = screen.getmaxyx()
    top = lines // 2 - SIZE // 2
    left = cols // 2 - SIZE // 2
    for dy, (letters, states) in enumerate(zip(grid.letters, grid.states)):
        for dx, (letter, state) in enumerate(zip(letters, states)):
            draw_cell(screen, top + dy, left + dx * CELL_WIDTH, letter, state)


def draw_help(screen) -> None:
    """Draw the colour guide in the top right corner."""
    _, cols = screen.getmaxyx()
    col = cols - len(HELP_LINES[-1])
    for row, text in enumerate(HELP_LINES, start=1):
        _put(screen, row, col, text)


def draw_score(screen, score: int) -> None:
    lines, cols = screen.getmaxyx()
    text = f"score : {score}"
    _put(screen, lines // 2 - len(text) // 2, cols // 2 - SIZE // 2, text, _pair(3))


def draw_tries(screen, tries: int) -> None:
    lines, cols = screen.getmaxyx()
    text = f"tries : {tries}"
    _put(screen, lines // 2 + (len(text) // 2 - 1), cols // 2 - SIZE // 2, text, _pair(3))


def draw_found(screen, words: Iterable[str]) -> None:
    """List the words found so far on one line."""
    words = list(words)
    if words:
        _put(screen, FOUND_ROW, 0, "".join(f"{word} " for word in words))


def draw(screen, game: Game) -> None:
    """Redraw grid, help, score and remaining tries."""
    draw_grid(screen, game.grid)
    draw_help(screen)
    draw_score(screen, game.score)
    draw_tries(screen, game.tries)
    screen.refresh()


def _setup_terminal(screen) -> None:
    screen.keypad(True)
    screen.nodelay(True)
    try:
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.start_color()
        curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLACK)
        curses.init_pair(2, curses.COLOR_CYAN, curses.COLOR_BLACK)
        curses.init_pair(3, curses.COLOR_MAGENTA, curses.COLOR_BLACK)
    except curses.error:
        pass


def _cell_of(x: int, y: int, left: int, top: int) -> tuple[int, int]:
    return (x - left) // CELL_WIDTH, y - top


def run(stdscr, dictionary: list[str]) -> Game:
    """Play until the tries run out or 'q' is pressed; return the final game."""
    _setup_terminal(stdscr)
    game = Game.new(dictionary)
    lines, cols = stdscr.getmaxyx()
    left = cols // 2 - SIZE // 2 + 1
    top = lines // 2 - SIZE // 2
    path = Path()
    letters: list[str] = []

    while True:
        key = stdscr.getch()
        if key == curses.KEY_MOUSE:
            try:
                _, x, y, _, _ = curses.getmouse()
            except curses.error:
                x = y = None
            if x is not None and on_grid(left, top, x, y):
                if path:
                    relation = letter_relation(path.last, x, y, CELL_WIDTH)
                    if relation is Adjacency.NONE:
                        continue
                    if relation is Adjacency.SAME:
                        path.pop()
                        game.grid.set_state(*_cell_of(x, y, left, top), CellState.NORMAL)
                        letters.pop()
                        draw(stdscr, game)
                        continue
                if path.add(x, y):
                    letter = game.grid.set_state(*_cell_of(x, y, left, top), CellState.SELECTED)
                    _put(stdscr, WORD_ROW, len(letters), letter)
                    letters.append(letter.lower())
        elif key == ord(" "):
            word = "".join(letters)
            letters.clear()
            if not game.submit(word) and game.out_of_tries():
                stdscr.erase()
                stdscr.nodelay(False)
                break
            game.grid.reset_states()
            path = Path()
            stdscr.erase()
        elif key == ord("q"):
            break
        elif key == NO_KEY:
            time.sleep(IDLE_SECONDS)
        draw_found(stdscr, game.found)
        draw(stdscr, game)

    _put(stdscr, 0, 0, f"score : {game.score}")
    stdscr.refresh()
    stdscr.getch()
    return game


def main(argv: list[str] | None = None) -> int:
    """Play the word game with the given dictionary file."""
    parser = argparse.ArgumentParser(prog="boggle", description="Terminal word game.")
    parser.add_argument("dictionary", nargs="?", default=DEFAULT_DICTIONARY, help="sorted word list")
    args = parser.parse_args(argv)
    try:
        words = read_words(args.dictionary)
    except OSError as exc:
        print(f"boggle: cannot read {args.dictionary}: {exc}", file=sys.stderr)
        return 1
    try:
        game = curses.wrapper(run, words)
    except KeyboardInterrupt:
        return 0
    print(f"score : {game.score}")
    return 0