"""Terminal games and tools: a stopwatch, a snake game and a word-grid game."""

__version__ = "0.1.0"