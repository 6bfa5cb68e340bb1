"""Controllers that advance the metronome and drive the scene flow."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from .config import InputControl
from .models import DataStore, Difficulty, GameState

MIN_BPM = 15
MAX_BPM = 300
BPM_STEP = 15
LAST_OPTION = 6


class Controller(ABC):
    """A unit of game logic run once per frame."""

    @abstractmethod
    def init(self) -> None:
        """Prepare for a new run."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance by delta_time seconds."""


class _Sound(Protocol):
    def play(self, frequency: int, duration: int) -> None: ...


class MeterController(Controller):
    """Steps through the subdivisions of the bar and sounds the metronome."""

    def __init__(self, data: DataStore, sound: _Sound | None = None) -> None:
        self._data = data
        self._sound = sound

    def init(self) -> None:
        game = self._data.game
        game.current_beat_index = game.beat_info.total_beats() - 1

    def update(self, delta_time: float) -> None:
        game = self._data.game
        game.current_beat_frame += delta_time

        interval = game.beat_info.beat_interval()
        if game.current_beat_frame <= interval:
            return

        game.current_beat_frame -= interval
        game.current_beat_index += 1
        if game.current_beat_index == game.beat_info.total_beats():
            game.current_beat_index = 0

        if (game.play_sound and self._sound is not None
                and game.current_beat_index % game.beat_info.bottom == 0):
            if game.current_beat_index == 0:
                self._sound.play(880, 150)
            else:
                self._sound.play(660, 100)


class SceneController(Controller):
    """Handles the option menu and switching between title, game and result."""

    def __init__(self, data: DataStore) -> None:
        self._data = data

    def init(self) -> None:
        pass

    def update(self, delta_time: float) -> None:
        state = self._data.game.game_state
        if state is GameState.TITLE:
            self._on_title()
        elif state is GameState.RESULT:
            self._on_result()
        elif state is GameState.GAME:
            self._on_game()

    def _tapped(self, control: InputControl) -> bool:
        button = self._data.user.get_input(control)
        return button is not None and button.tapped

    def _on_title(self) -> None:
        data = self._data
        game = data.game
        user = data.user

        if self._tapped(InputControl.UP) and user.option_focus > 0:
            user.option_focus -= 1
        if self._tapped(InputControl.DOWN) and user.option_focus < LAST_OPTION:
            user.option_focus += 1

        left = self._tapped(InputControl.LEFT)
        right = self._tapped(InputControl.RIGHT)
        focus = user.option_focus
        changed = False

        if focus == 0:
            if left and game.difficulty is not Difficulty.BEGINNER:
                game.difficulty = Difficulty(game.difficulty - 1)
                changed = True
            if right and game.difficulty is not Difficulty.MASTER:
                game.difficulty = Difficulty(game.difficulty + 1)
                changed = True
        elif focus == 1:
            if left:
                game.beat_info.bpm = max(MIN_BPM, game.beat_info.bpm - BPM_STEP)
                changed = True
            if right:
                game.beat_info.bpm = min(MAX_BPM, game.beat_info.bpm + BPM_STEP)
                changed = True
        elif focus == 2:
            if left and game.note_speed in (2, 4):
                game.note_speed //= 2
                changed = True
            if right and game.note_speed in (1, 2):
                game.note_speed *= 2
                changed = True
        elif focus == 3:
            if left and game.judge_scale > 0.6:
                game.judge_scale -= 0.1
            if right and game.judge_scale < 4.9:
                game.judge_scale += 0.1
        elif focus == 4:
            if left or right:
                game.play_sound = not game.play_sound
        elif focus == 5:
            if left or right:
                data.system.show_debug = not data.system.show_debug
        elif focus == 6:
            if self._tapped(InputControl.ENTER):
                game.game_state = GameState.GAME
                user.clear()
                changed = True

        if changed:
            for node in game.stage_nodes:
                node.active = False
            game.clear_default()

    def _on_game(self) -> None:
        game = self._data.game
        if self._tapped(InputControl.ESCAPE):
            game.game_state = GameState.RESULT
            game.play_sound = False
            for node in game.stage_nodes:
                node.active = False

    def _on_result(self) -> None:
        data = self._data
        if self._tapped(InputControl.ESCAPE):
            data.game.game_state = GameState.TITLE
            data.game.play_sound = True
            data.user.clear()
            data.game.clear_default()