"""Terminal front ends for the stopwatch."""

from __future__ import annotations

import argparse
import curses
import time

from termgames.stopwatch import (
    HOUR_MS,
    MINUTE_MS,
    SECOND_MS,
    Stopwatch,
    format_duration,
    interval_ms,
    lap_area_height,
    visible_laps,
)

REFRESH_SECONDS = 0.007
SIMPLE_REFRESH_SECONDS = 0.5
NO_KEY = -1

OPTIONS = (
    "Space  : start / pause",
    "r      : reset",
    "t      : mark lap",
    "F1/F2  : increase / decrease warning hours",
    "F3/F4  : increase / decrease warning minutes",
    "F5/F6  : increase / decrease warning seconds",
    "q      : quit",
)

_WARNING_KEYS = {
    curses.KEY_F1: (True, HOUR_MS),
    curses.KEY_F2: (False, HOUR_MS),
    curses.KEY_F3: (True, MINUTE_MS),
    curses.KEY_F4: (False, MINUTE_MS),
    curses.KEY_F5: (True, SECOND_MS),
    curses.KEY_F6: (False, SECOND_MS),
}


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


def draw_duration(screen, row: int, col: int, ms: int) -> None:
    """Write a formatted duration at the given position."""
    _put(screen, row, col, format_duration(ms))


def draw_laps(screen, watch: Stopwatch) -> int:
    """Draw the most recent laps under the title; return the rows used."""
    lines, cols = screen.getmaxyx()
    for row, (number, duration) in enumerate(visible_laps(watch.laps, lines), start=1):
        _put(screen, row, cols // 2 - 11, f"Lap {number:2d} :")
        draw_duration(screen, row, cols // 2 - 1, duration)
    return lap_area_height(watch.laps, lines)


def draw_options(screen) -> None:
    """Draw a rule and the key help starting at the cursor's row."""
    _, cols = screen.getmaxyx()
    row, _ = screen.getyx()
    _put(screen, row, 0, "-" * cols)
    for offset, line in enumerate(OPTIONS, start=1):
        _put(screen, row + offset, 0, line)


def draw_flash(screen, watch: Stopwatch, color: int) -> int:
    """Draw the warning flash block and return the colour pair for next time."""
    if watch.total_ms % 200:
        color = 2 if color == 1 else 1
    attr = _pair(color)
    for row in range(4):
        _put(screen, row, 0, "* * * * * * *", attr)
    return color


def _draw_lap_alert(screen, watch: Stopwatch) -> None:
    if watch.laps_full:
        _, cols = screen.getmaxyx()
        _put(screen, 0, cols - 1, " ", _pair(3))


def draw_interface(screen, watch: Stopwatch, color: int) -> int:
    """Redraw the full stopwatch screen; return the flash colour to use next."""
    _, cols = screen.getmaxyx()
    screen.erase()
    _put(screen, 0, cols // 2 - 9, "== Stopwatch ==")
    pos = draw_laps(screen, watch) + 2
    draw_duration(screen, pos, cols // 2 - 1, watch.total_ms)
    pos += 1
    _put(screen, pos, cols // 2 - 17, "Warning :")
    draw_duration(screen, pos, cols // 2 - 1, watch.warning_ms)
    try:
        screen.move(pos + 1, 0)
    except curses.error:
        pass
    draw_options(screen)
    _draw_lap_alert(screen, watch)
    if watch.is_flashing():
        color = draw_flash(screen, watch, color)
    screen.refresh()
    return color


def handle_key(watch: Stopwatch, key: int, now: float) -> bool:
    """Apply one key press; return False when the user asked to quit."""
    if key == ord("q"):
        return False
    if key == ord("r"):
        watch.reset()
    elif key == ord("t"):
        watch.add_lap()
    elif key == ord(" "):
        watch.toggle(now)
    elif key in _WARNING_KEYS:
        increase, step = _WARNING_KEYS[key]
        if increase:
            watch.increase_warning(step)
        else:
            watch.decrease_warning(step)
    return True


def _hide_cursor() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass


def _init_colors() -> None:
    try:
        curses.start_color()
        curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLUE)
        curses.init_pair(2, curses.COLOR_BLUE, curses.COLOR_GREEN)
        curses.init_pair(3, curses.COLOR_RED, curses.COLOR_RED)
    except curses.error:
        pass


def _draw_bottom(screen, ms: int) -> None:
    lines, cols = screen.getmaxyx()
    screen.erase()
    draw_duration(screen, lines - 1, cols // 2 - 9, ms)
    screen.refresh()


def run_simple(stdscr) -> None:
    """Show the time elapsed since start, updated twice a second."""
    _hide_cursor()
    start = time.monotonic()
    while True:
        _draw_bottom(stdscr, interval_ms(start, time.monotonic()))
        time.sleep(SIMPLE_REFRESH_SECONDS)


def run_medium(stdscr) -> None:
    """A stopwatch that space starts and pauses."""
    _hide_cursor()
    stdscr.keypad(True)
    stdscr.nodelay(True)
    watch = Stopwatch()
    while True:
        if stdscr.getch() == ord(" "):
            watch.toggle(time.monotonic())
        watch.tick(time.monotonic())
        _draw_bottom(stdscr, watch.total_ms)
        time.sleep(REFRESH_SECONDS)


def run_full(stdscr) -> Stopwatch:
    """The full stopwatch with laps and warning; return its final state."""
    _init_colors()
    _hide_cursor()
    stdscr.keypad(True)
    stdscr.nodelay(True)
    curses.noecho() if _curses_ready() else None
    watch = Stopwatch()
    color = 1
    while True:
        key = stdscr.getch()
        if key != NO_KEY and not handle_key(watch, key, time.monotonic()):
            break
        watch.tick(time.monotonic())
        color = draw_interface(stdscr, watch, color)
        time.sleep(REFRESH_SECONDS)
    return watch


def _curses_ready() -> bool:
    try:
        return not curses.isendwin()
    except curses.error:
        return False


_MODES = {"simple": run_simple, "medium": run_medium, "full": run_full}


def main(argv: list[str] | None = None) -> int:
    """Run one of the stopwatch front ends in the terminal."""
    parser = argparse.ArgumentParser(prog="stopwatch", description="Terminal stopwatch.")
    parser.add_argument("mode", nargs="?", choices=sorted(_MODES), default="full")
    args = parser.parse_args(argv)
    try:
        curses.wrapper(_MODES[args.mode])
    except KeyboardInterrupt:
        pass
    return 0