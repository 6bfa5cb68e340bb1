"""Sets up the starting state and runs the controllers each frame."""

from __future__ import annotations

import random

from .controllers import MeterController, SceneController
from .models import DataStore, Difficulty, GameState
from .node_controller import NodeController


class StateManager:
    """Owns the game logic controllers and the initial settings."""

    def __init__(self, data: DataStore, sound=None,
                 rng: random.Random | None = None) -> None:
        self._data = data
        self._controllers = (
            NodeController(data, rng),
            MeterController(data, sound),
            SceneController(data),
        )

        game = data.game
        game.game_state = GameState.TITLE
        game.game_time = 0.0
        game.play_sound = True
        game.difficulty = Difficulty.NORMAL
        game.note_speed = 2
        # Notes move in fixed steps, so the tempo stays a multiple of 15 up to 300.
        game.beat_info.bpm = 120
        game.beat_info.top = 4
        game.beat_info.bottom = 4
        game.current_beat_index = 0
        game.current_beat_frame = 0.0
        game.stage_node_count = 0
        game.stage_nodes.clear()
        game.judge_scale = 2.0

    def init(self) -> None:
        self._data.game.clear_default()
        self._data.user.clear()
        for controller in self._controllers:
            controller.init()

    def update(self, delta_time: float) -> None:
        self._data.game.game_time += delta_time
        for controller in self._controllers:
            controller.update(delta_time)