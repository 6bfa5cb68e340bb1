[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhythmgame"
version = "0.1.0"
description = "A four-lane terminal rhythm game with a metronome, selectable difficulty and timing judgement"
requires-python = ">=3.10"
keywords = ["rhythm", "game", "terminal", "metronome", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rhythmgame = "rhythmgame.game_manager:main"

[tool.hatch.build.targets.wheel]
packages = ["rhythmgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
