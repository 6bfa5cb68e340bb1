"""Key state tracking: presses, taps and the short tap effect."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from .models import DataStore

EFFECT_DURATION = 0.3

_SPECIAL_KEYS = {
    "\x1b": "KEY_ESCAPE",
    "\n": "KEY_ENTER",
    "\r": "KEY_ENTER",
}


class InputManager:
    """Updates every button from a key-state query once per frame."""

    def __init__(self, data: DataStore, is_pressed: Callable[[str], bool]) -> None:
        self._data = data
        self._is_pressed = is_pressed

    def init(self) -> None:
        pass

    def update(self, delta_time: float) -> None:
        for button in self._data.user.input.values():
            was_pressed = button.pressed
            pressed = bool(self._is_pressed(button.key))

            button.tapped = False
            button.pressed = pressed
            if pressed and not was_pressed:
                button.tapped = True
                button.effect = True
                button.effect_frame = 0.0

            if button.effect:
                button.effect_frame += delta_time
                if button.effect_frame >= EFFECT_DURATION:
                    button.effect = False
                    button.effect_frame = -1.0


def _key_name(keystroke: Any) -> str:
    if keystroke.is_sequence and keystroke.name:
        return keystroke.name
    text = str(keystroke)
    return _SPECIAL_KEYS.get(text, text.upper())


class TerminalKeys:
    """Key state read from a terminal's key stream.

    A terminal reports key presses but not releases, so a key counts as held
    for hold_time seconds after it was last seen.
    """

    def __init__(self, terminal: Any, hold_time: float = 0.12) -> None:
        self._terminal = terminal
        self._hold_time = hold_time
        self._last_seen: dict[str, float] = {}

    def poll(self) -> None:
        """Read every key waiting on the terminal without blocking."""
        now = time.monotonic()
        while True:
            keystroke = self._terminal.inkey(timeout=0)
            if not keystroke:
                break
            self._last_seen[_key_name(keystroke)] = now

    def is_pressed(self, key: str) -> bool:
        self.poll()
        seen = self._last_seen.get(key)
        return seen is not None and time.monotonic() - seen <= self._hold_time