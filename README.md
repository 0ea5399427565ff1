# termgames

Three small programs for the terminal, drawn with `curses`:

- a **stopwatch** with laps and a flashing warning time,
- a **snake** game on a bordered board with apples to eat,
- a **Boggle**-style word game played with the mouse on a 4×4 letter grid.

No third-party libraries are needed; a terminal with `curses` support is.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stopwatch

```
termgames-stopwatch [simple|medium|full]
```

The mode defaults to `full`.

- `simple` shows the time elapsed since the program started, at the bottom
  of the screen, updated twice a second.
- `medium` shows a stopwatch that Space starts and pauses.
- `full` is the complete stopwatch described below.

`simple` and `medium` have no quit key; stop them with Ctrl-C.

Keys in `full` mode:

| Key       | Action                                   |
|-----------|------------------------------------------|
| Space     | start / pause                            |
| `r`       | reset (the warning time is kept)         |
| `t`       | record a lap (at most 20)                |
| F1 / F2   | warning time: one hour more / less       |
| F3 / F4   | warning time: one minute more / less     |
| F5 / F6   | warning time: one second more / less     |
| `q`       | quit                                     |

Times are shown as `hours : minutes : seconds : hundredths`. The warning
time starts at 25 seconds and is only lowered while it stays above the step
removed. For five seconds after the running time passes it, a coloured
banner flashes. The most recent laps (up to six, fewer on a short terminal)
are listed at the top, newest first. When the 20-lap limit is reached a red
marker appears in the top-right corner.

The state and time helpers in `termgames.stopwatch` are usable on their own:

```python
from termgames.stopwatch import Stopwatch, format_duration

watch = Stopwatch()
watch.toggle(0.0)        # start at t = 0 s
watch.tick(1.5)          # 1.5 s later
watch.add_lap()
print(watch.total_ms)            # 1500
print(format_duration(100412))   # " 0 :  1 : 40 : 41"
```

## Snake

```
termgames-snake [CONFIG]
```

Settings are read from `CONFIG`, by default `serpent.ini` in the current
directory; if the file cannot be read the command reports it and exits with
status 1. Each line is recognised by its first letter, and the number is
read from a fixed column of that line. Unknown lines are ignored and missing
settings keep their defaults:

| First letter | Setting                              | Value starts at column | Default |
|--------------|--------------------------------------|------------------------|---------|
| `l`          | board width                          | 10                     | 20      |
| `h`          | board height                         | 10                     | 20      |
| `n`          | number of apples on the board        | 16                     | 3       |
| `t`          | initial snake length                 | 17                     | 4       |
| `d`          | delay between moves, in microseconds | 13                     | 200000  |

For example:

```
largeur = 30
hauteur = 15
nombre_pommes = 5
taille_serpent = 4
delai = 150000
```

Press any key to start. Steer with `z` (up), `d` (right), `s` (down) and
`q` (left); Space pauses until Space is pressed again. Every apple eaten
makes the snake one cell longer and a new apple appears on a free cell. The
game ends when the snake's next move would take it off the board or into
itself; press a key to leave, and the number of apples eaten is printed.

The settings parser (`termgames.snake_config.parse_settings`,
`load_settings`) and the board model (`termgames.snake_world.World`,
`Snake`, `Cell`, `Direction`) can be used without a terminal.

## Boggle

```
termgames-boggle [DICTIONARY]
```

The dictionary is read from `DICTIONARY`, by default a file named `mot` in
the current directory: one lower-case word per line, sorted, since lookups
are a binary search. Words shorter than two letters and a last line without
a line break are ignored. If the file cannot be read the command reports it
and exits with status 1.

Click letters on the grid to build a word; each new letter must touch the
previous one, and clicking the last chosen letter again removes it. Press
Space to submit the word. A dictionary word not found before scores 2
points for up to four letters, doubling for every letter after that. Any
other word costs one of your four tries. The game ends when no tries are
left or when you press `q`; the score is shown, and printed after the
terminal is restored.

The rules live in `termgames.boggle_game` (`Game`, `Path`, `word_score`,
`letter_relation`), the grid in `termgames.boggle_grid` and dictionary
loading in `termgames.boggle_dictionary`.

## Limitations

- Nothing is saved between games: there are no high scores and no saved
  stopwatch laps.
- The word game needs a terminal that reports mouse clicks; it has no
  keyboard way of choosing letters.