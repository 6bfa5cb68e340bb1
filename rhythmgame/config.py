"""Fixed screen layout, judgement windows and input identifiers."""

from __future__ import annotations

from enum import Enum

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 24

BUTTON_COUNT = 4

GAME_LINE_HEIGHT = 19


def perfect_judge() -> int:
    """Row index of the judgement line inside the playfield."""
    return GAME_LINE_HEIGHT - 3


def judge_end() -> int:
    """Last row index a note may reach before it counts as missed."""
    return GAME_LINE_HEIGHT + 2


def indicator_duration() -> float:
    """Seconds a hit stays visible in the timing indicator."""
    return 120.0


class ScoreType(Enum):
    NONE = 0
    MISS = 1
    BAD = 2
    GOOD = 3
    GREAT = 4
    PERFECT = 5


# Judgement windows in seconds at a judge scale of 1.
STANDARD_JUDGE = {
    ScoreType.PERFECT: 0.01,
    ScoreType.GREAT: 0.02,
    ScoreType.GOOD: 0.04,
    ScoreType.BAD: 0.08,
}


class InputControl(Enum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    ENTER = 5
    ESCAPE = 6
    BUTTON_1 = 7
    BUTTON_2 = 8
    BUTTON_3 = 9
    BUTTON_4 = 10


ACTION_BUTTONS = (
    InputControl.BUTTON_1,
    InputControl.BUTTON_2,
    InputControl.BUTTON_3,
    InputControl.BUTTON_4,
)