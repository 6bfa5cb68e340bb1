"""A single falling note on one of the play lines."""

from __future__ import annotations

import math

from .config import perfect_judge
from .models import GameData


class Node:
    """A note that moves down its line and plays a hit or miss effect."""

    def __init__(self, game: GameData) -> None:
        self._game = game
        self.clear()

    def clear(self) -> None:
        """Return the note to its unused state."""
        self.line = 0
        self.index = 0
        self.is_moved = False
        self.active = False
        self.is_hit = False
        self.is_miss = False
        self.hit_frame = 0.0
        self.miss_frame = 0.0
        self.graphic = " "
        self.spawn_time = 0.0

    def spawn(self, line: int) -> None:
        """Place the note at the top of a line and activate it."""
        self.clear()
        self.line = line
        self.index = 0
        self.active = True
        self.graphic = "-"
        self.spawn_time = self._game.game_time

    def set_hit(self) -> None:
        self.is_hit = True

    def set_miss(self) -> None:
        self.is_miss = True

    def has_effect(self) -> bool:
        return self.is_hit or self.is_miss

    def back(self) -> None:
        self.index -= 1

    def on_effect(self, delta_time: float) -> None:
        self._on_hit(delta_time)
        self._on_miss(delta_time)

    def elapsed(self) -> float:
        return self._game.game_time - self.spawn_time

    def _step_interval(self) -> float:
        game = self._game
        return game.beat_info.beat_interval() / game.note_speed

    def move(self) -> bool:
        """Advance one row in the second half of each step; True if it moved."""
        if not self.active and self.has_effect():
            return False

        interval = self._step_interval()
        frame = math.fmod(self._game.current_beat_frame, interval)

        if frame < interval * 0.5:
            self.is_moved = False
            return False

        if self.is_moved:
            return False

        self.is_moved = True
        self.index += 1
        return True

    def time_to_judgment_line(self) -> float:
        """Seconds past the judgement line; negative while still above it."""
        interval = self._step_interval()
        distance = self.index - perfect_judge()
        progress = math.fmod(self._game.current_beat_frame, interval) / interval
        remaining = interval * (1.0 - progress)

        total = distance * interval
        if progress >= 0.5:
            total -= remaining
        else:
            total += interval - remaining
        return total

    def _on_hit(self, delta_time: float) -> None:
        if not self.is_hit:
            return
        self.hit_frame += delta_time
        if self.hit_frame <= 0.1:
            self.graphic = "*"
        elif self.hit_frame <= 0.2:
            self.graphic = "o"
        elif self.hit_frame <= 0.4:
            self.graphic = "O"
        else:
            self.active = False

    def _on_miss(self, delta_time: float) -> None:
        if not self.is_miss:
            return
        self.miss_frame += delta_time
        if self.miss_frame <= 0.1:
            self.graphic = "x"
        elif self.miss_frame <= 0.2:
            self.graphic = "-"
        elif self.miss_frame <= 0.4:
            self.graphic = " "
        else:
            self.active = False