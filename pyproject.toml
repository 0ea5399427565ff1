[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termgames"
version = "0.1.0"
description = "Small terminal games and tools: a stopwatch with laps, a snake game and a Boggle-style word game"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "curses", "game", "snake", "boggle", "stopwatch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termgames-stopwatch = "termgames.stopwatch_ui:main"
termgames-snake = "termgames.snake_ui:main"
termgames-boggle = "termgames.boggle_ui:main"

[tool.hatch.build.targets.wheel]
packages = ["termgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
