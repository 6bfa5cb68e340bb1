"""The main loop and the command that starts the game."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from typing import TextIO

from blessed import Terminal

from .input_manager import InputManager, TerminalKeys
from .models import DataStore
from .render_manager import RenderManager
from .sound import SoundManager
from .state_manager import StateManager


class GameManager:
    """Runs input, logic and rendering until the game stops playing."""

    def __init__(self, data: DataStore, input_manager, state_manager, render_manager,
                 out: TextIO | None = None,
                 clock: Callable[[], float] | None = None) -> None:
        self._data = data
        self._input = input_manager
        self._state = state_manager
        self._render = render_manager
        self._out = out or sys.stdout
        self._clock = clock or time.monotonic
        now = self._clock()
        self._last_update = now
        self._last_render = now

    def run(self) -> None:
        now = self._clock()
        self._last_update = now
        self._last_render = now

        self._state.init()
        self._render.init()

        while self.step():
            time.sleep(0.001)

    def step(self) -> bool:
        """Run one pass of the loop; False once the game has stopped."""
        system = self._data.system
        now = self._clock()
        delta_time = now - self._last_update
        system.update_frame = delta_time

        self._input.update(delta_time)
        self._state.update(delta_time)

        if not system.is_playing:
            return False

        self._last_update = now

        render_interval = now - self._last_render
        if render_interval >= 1.0 / system.target_fps:
            system.current_fps = 1.0 / render_interval
            self._render.render(self._out)
            self._last_render = now

        return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rhythmgame",
        description="A four-lane rhythm game in the terminal. "
                    "Lanes use D F J K; arrows, Enter and Escape drive the menus.",
    )
    parser.parse_args(argv)

    try:
        terminal = Terminal()
        data = DataStore()
        keys = TerminalKeys(terminal)
        with SoundManager() as sound, terminal.cbreak(), \
                terminal.hidden_cursor(), terminal.fullscreen():
            game = GameManager(
                data,
                InputManager(data, keys.is_pressed),
                StateManager(data, sound),
                RenderManager(data),
                sys.stdout,
            )
            game.run()
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        print(exc, file=sys.stderr)
    return 0