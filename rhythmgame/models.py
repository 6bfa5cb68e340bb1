"""Shared game, user and system state."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from .config import STANDARD_JUDGE, InputControl, ScoreType

if TYPE_CHECKING:
    from .node import Node


@dataclass
class ButtonState:
    key: str
    pressed: bool = False
    tapped: bool = False
    effect: bool = False
    effect_frame: float = -1.0


class GameState(Enum):
    NONE = 0
    TITLE = 1
    GAME = 2
    RESULT = 3


class Difficulty(IntEnum):
    NONE = 0
    BEGINNER = 1
    EASY = 2
    NORMAL = 3
    HARD = 4
    VERY_HARD = 5
    EXPERT = 6
    MASTER = 7


@dataclass
class TimeSignature:
    bpm: int = 120
    top: int = 4
    bottom: int = 4

    def total_beats(self) -> int:
        return self.top * self.bottom

    def bar_duration(self) -> float:
        """Seconds in one bar."""
        return (60 / self.bpm) * self.top

    def beat_interval(self) -> float:
        """Seconds between two subdivisions of the bar."""
        return self.bar_duration() / self.total_beats()


@dataclass
class GameData:
    game_state: GameState = GameState.NONE
    game_time: float = 0.0
    play_sound: bool = True
    difficulty: Difficulty = Difficulty.NORMAL
    note_speed: int = 2
    beat_info: TimeSignature = field(default_factory=TimeSignature)
    current_beat_index: int = 0
    current_beat_frame: float = 0.0
    stage_node_count: int = 0
    stage_nodes: list[Node] = field(default_factory=list)
    judge_scale: float = 2.0
    debug_beat_index: int = 0
    debug_spawn_node_count: int = 0

    def clear_default(self) -> None:
        """Reset the beat position and per-run counters."""
        self.current_beat_index = -1
        self.current_beat_frame = 0.0
        self.stage_node_count = 0
        self.debug_beat_index = 0
        self.debug_spawn_node_count = 0

    def judge(self, score_type: ScoreType) -> float:
        """Width in seconds of the timing window for a score type."""
        return self.judge_scale * STANDARD_JUDGE.get(score_type, 0.0)


@dataclass
class SystemData:
    is_playing: bool = True
    target_fps: float = 60.0
    current_fps: float = 0.0
    update_frame: float = 0.0
    show_debug: bool = False


def _default_input() -> dict[InputControl, ButtonState]:
    keys = {
        InputControl.LEFT: "KEY_LEFT",
        InputControl.RIGHT: "KEY_RIGHT",
        InputControl.UP: "KEY_UP",
        InputControl.DOWN: "KEY_DOWN",
        InputControl.ENTER: "KEY_ENTER",
        InputControl.ESCAPE: "KEY_ESCAPE",
        InputControl.BUTTON_1: "D",
        InputControl.BUTTON_2: "F",
        InputControl.BUTTON_3: "J",
        InputControl.BUTTON_4: "K",
    }
    return {control: ButtonState(key) for control, key in keys.items()}


@dataclass
class UserData:
    input: dict[InputControl, ButtonState] = field(default_factory=_default_input)
    scores: Counter = field(default_factory=Counter)
    indicator: list[float] = field(default_factory=list)
    fast_count: int = 0
    slow_count: int = 0
    combo_count: int = 0
    max_combo_count: int = 0
    option_focus: int = 0

    def get_input(self, control: InputControl) -> ButtonState | None:
        return self.input.get(control)

    def clear(self) -> None:
        """Forget the results of the last run and reset the menu focus."""
        self.scores.clear()
        self.indicator.clear()
        self.fast_count = 0
        self.slow_count = 0
        self.combo_count = 0
        self.max_combo_count = 0
        self.option_focus = 0


@dataclass
class DataStore:
    """All state shared between the managers of one game."""

    system: SystemData = field(default_factory=SystemData)
    game: GameData = field(default_factory=GameData)
    user: UserData = field(default_factory=UserData)