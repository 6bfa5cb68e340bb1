"""Composes the full console frame and writes it out."""

from __future__ import annotations

import sys
from typing import TextIO

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, perfect_judge
from .geometry import Point
from .models import DataStore, Difficulty, GameState
from .node import Node
from .renderers import GameRenderer, Renderer, TitleRenderer

_CURSOR_HOME = "\x1b[H"

_DIFFICULTY_NAMES = {
    Difficulty.BEGINNER: "Beginner   ",
    Difficulty.EASY: "Easy       ",
    Difficulty.NORMAL: "Normal     ",
    Difficulty.HARD: "Hard       ",
    Difficulty.VERY_HARD: "Very Hard  ",
    Difficulty.EXPERT: "Expert     ",
    Difficulty.MASTER: "Master     ",
}

_HIDDEN_DEBUG = " " * 29


class RenderManager:
    """Picks the renderer for the current scene and draws the frame."""

    def __init__(self, data: DataStore) -> None:
        self._data = data
        self._renderers: dict[GameState, Renderer] = {
            GameState.GAME: GameRenderer(data),
            GameState.TITLE: TitleRenderer(data),
        }

    def init(self) -> None:
        for renderer in self._renderers.values():
            renderer.init()

    def render(self, out: TextIO | None = None) -> None:
        """Draw one frame to out, starting from the top-left corner."""
        out = out or sys.stdout
        renderer = self._renderers.get(self._data.game.game_state)
        if renderer is not None:
            renderer.pre_render()

        frame = self.compose(renderer)
        out.write(_CURSOR_HOME)
        out.write(frame)
        out.flush()

        if renderer is not None:
            renderer.post_render()

    def compose(self, renderer: Renderer | None) -> str:
        """The whole frame as text: a bordered screen with status text beside it."""
        lines = []
        for y in range(SCREEN_HEIGHT):
            row = "".join(self._cell(renderer, x, y) for x in range(SCREEN_WIDTH))
            lines.append(row + "   " + self._side_text(y) + "\n")
        return "".join(lines)

    @staticmethod
    def _cell(renderer: Renderer | None, x: int, y: int) -> str:
        if y in (0, SCREEN_HEIGHT - 1) or x in (0, SCREEN_WIDTH - 1):
            return "#"
        if renderer is None:
            return " "
        return renderer.render_at(Point(x, y))

    def _side_text(self, y: int) -> str:
        data = self._data
        if y == 1:
            return f"{data.system.current_fps:.2f} FPS"
        if y == 2:
            return f"{data.system.update_frame:g} UpdateFrame"
        if y == 5:
            return f"BPM {data.game.beat_info.bpm}     "
        if y == 6:
            return "Difficulty " + _DIFFICULTY_NAMES.get(data.game.difficulty, "")
        if y > 6:
            return self._debug_text(y)
        return ""

    def _first_node(self) -> Node | None:
        for node in self._data.game.stage_nodes:
            if node.active and not node.has_effect():
                return node
        return None

    def _debug_text(self, y: int) -> str:
        data = self._data
        game = data.game
        if not data.system.show_debug:
            return _HIDDEN_DEBUG

        if y in (8, 9, 10, 11):
            node = self._first_node()
            if node is None:
                return ""
            if y == 8:
                return f"Line {node.line}"
            if y == 9:
                return f"Index {node.index} ({node.index - perfect_judge()})   "
            if y == 10:
                return f"Duration {node.time_to_judgment_line():.3f}     "
            return f"Elapsed {node.elapsed():.3f}     "
        if y == 13:
            return (f"BeatFrame {game.current_beat_frame:.3f} / "
                    f"{game.beat_info.beat_interval():g}    ")
        if y == 14:
            return f"BeatIndex {game.debug_beat_index} / {game.beat_info.total_beats()}    "
        if y == 15:
            return f"SpawnCount {game.debug_spawn_node_count}    "
        return ""