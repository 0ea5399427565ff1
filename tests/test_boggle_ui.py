import random

from termgames.boggle_game import Game
from termgames.boggle_grid import CellState, Grid
from termgames.boggle_ui import (
    FOUND_ROW,
    HELP_LINES,
    draw,
    draw_cell,
    draw_found,
    draw_grid,
    draw_help,
    draw_score,
    draw_tries,
    main,
)


class FakeScreen:
    def __init__(self, lines=24, cols=80):
        self.size = (lines, cols)
        self.writes = []
        self.refreshed = 0

    def getmaxyx(self):
        return self.size

    def addstr(self, row, col, text, attr=0):
        self.writes.append((row, col, text))

    def refresh(self):
        self.refreshed += 1

    def texts(self):
        return [text for _, _, text in self.writes]


def _grid():
    return Grid([list("ABCD"), list("EFGH"), list("IJKL"), list("MNOP")])


def test_draw_cell():
    screen = FakeScreen()
    draw_cell(screen, 5, 6, "X", CellState.SELECTED)
    assert screen.writes == [(5, 6, " X ")]


def test_draw_grid_layout():
    screen = FakeScreen()
    draw_grid(screen, _grid())
    assert screen.texts() == [f" {letter} " for letter in "ABCDEFGHIJKLMNOP"]
    rows = sorted({row for row, _, _ in screen.writes})
    assert rows == list(range(rows[0], rows[0] + 4))
    first_row = [col for row, col, _ in screen.writes if row == rows[0]]
    assert [b - a for a, b in zip(first_row, first_row[1:])] == [3, 3, 3]


def test_draw_help_right_aligned():
    screen = FakeScreen(cols=100)
    draw_help(screen)
    assert screen.texts() == list(HELP_LINES)
    columns = {col for _, col, _ in screen.writes}
    assert len(columns) == 1
    assert columns.pop() + len(HELP_LINES[-1]) == 100


def test_draw_score_and_tries():
    screen = FakeScreen()
    draw_score(screen, 7)
    draw_tries(screen, 3)
    assert screen.texts() == ["score : 7", "tries : 3"]


def test_draw_found():
    screen = FakeScreen()
    draw_found(screen, ["zoo", "car"])
    assert screen.writes == [(FOUND_ROW, 0, "zoo car ")]


def test_draw_found_nothing():
    screen = FakeScreen()
    draw_found(screen, [])
    assert screen.writes == []


def test_draw_whole_game():
    screen = FakeScreen()
    game = Game.new(["car"], random.Random(2))
    draw(screen, game)
    assert screen.refreshed == 1
    assert "score : 0" in screen.texts()
    assert "tries : 4" in screen.texts()
    assert len(screen.writes) == 16 + len(HELP_LINES) + 2


def test_main_missing_dictionary(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert "cannot read" in capsys.readouterr().err