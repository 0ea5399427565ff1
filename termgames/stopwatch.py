"""Stopwatch state and time arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_LAPS = 20
DEFAULT_WARNING_MS = 25000
FLASH_WINDOW_MS = 5000
HOUR_MS = 3_600_000
MINUTE_MS = 60_000
SECOND_MS = 1000
MAX_VISIBLE_LAPS = 6


def interval_ms(start: float, end: float) -> int:
    """Whole milliseconds between two timestamps given in seconds."""
    micros = round((end - start) * 1_000_000)
    return int(micros / 1000)


def centiseconds(ms: int) -> int:
    """Hundredths of a second within the current second."""
    return (ms // 10) % 100


def seconds(ms: int) -> int:
    """Seconds within the current minute."""
    return (ms // SECOND_MS) % 60


def minutes(ms: int) -> int:
    """Minutes within the current hour."""
    return (ms // MINUTE_MS) % 60


def hours(ms: int) -> int:
    """Hours within the current day."""
    return (ms // HOUR_MS) % 24


def format_duration(ms: int) -> str:
    """Render a duration as 'hh : mm : ss : cc' with two-wide fields."""
    return f"{hours(ms):2d} : {minutes(ms):2d} : {seconds(ms):2d} : {centiseconds(ms):2d}"


def _lap_capacity(lines: int) -> int:
    if lines - 11 > MAX_VISIBLE_LAPS:
        return MAX_VISIBLE_LAPS
    return lines - 13


def visible_laps(laps: list[int], lines: int) -> list[tuple[int, int]]:
    """The laps that fit on a screen of the given height, newest first.

    Each item is a (lap number, duration in ms) pair; lap numbers start at 1.
    """
    count = max(0, min(len(laps), _lap_capacity(lines)))
    newest_first = list(enumerate(laps, start=1))[::-1]
    return newest_first[:count]


def lap_area_height(laps: list[int], lines: int) -> int:
    """Number of rows the lap list occupies below the title."""
    if not laps:
        return 1
    capacity = _lap_capacity(lines)
    if capacity == MAX_VISIBLE_LAPS:
        return min(len(laps), MAX_VISIBLE_LAPS)
    return capacity


@dataclass
class Stopwatch:
    """A start/stop stopwatch with laps and a warning threshold."""

    running: bool = False
    total_ms: int = 0
    warning_ms: int = DEFAULT_WARNING_MS
    laps: list[int] = field(default_factory=list)
    _started: float | None = field(default=None, repr=False)

    @property
    def laps_full(self) -> bool:
        return len(self.laps) >= MAX_LAPS

    def toggle(self, now: float) -> None:
        """Start the stopwatch at ``now`` or pause it."""
        if self.running:
            self.running = False
        else:
            self._started = now
            self.running = True

    def tick(self, now: float) -> None:
        """Accumulate the time elapsed since the previous tick while running."""
        if self.running and self._started is not None:
            self.total_ms += interval_ms(self._started, now)
            self._started = now

    def reset(self) -> None:
        """Stop and clear the elapsed time and laps; the warning is kept."""
        self.total_ms = 0
        self.running = False
        self.laps.clear()

    def add_lap(self) -> bool:
        """Record the current time as a lap; False when no room is left."""
        if self.laps_full:
            return False
        self.laps.append(self.total_ms)
        return True

    def increase_warning(self, step: int) -> None:
        self.warning_ms += step

    def decrease_warning(self, step: int) -> None:
        """Lower the warning by ``step`` unless that would not leave it positive."""
        if self.warning_ms > step:
            self.warning_ms -= step

    def is_flashing(self) -> bool:
        """True within the few seconds after the warning time is passed."""
        return self.warning_ms < self.total_ms < self.warning_ms + FLASH_WINDOW_MS