"""Renderers that layer several screens into one display."""

from __future__ import annotations

from collections.abc import Iterable

from .geometry import Point
from .models import DataStore
from .screen_base import ScreenBase
from .screens import GameScreen, IndicatorScreen, JudgeScreen, MetronomeScreen, OptionScreen

_BLANK = " "


class Renderer:
    """Draws a stack of screens; where screens overlap the earlier one wins."""

    def __init__(self, screens: Iterable[ScreenBase]) -> None:
        self._screens = tuple(screens)

    @property
    def screens(self) -> tuple[ScreenBase, ...]:
        return self._screens

    def init(self) -> None:
        for screen in self._screens:
            screen.init()

    def pre_render(self) -> None:
        for screen in self._screens:
            screen.pre_render()

    def render_at(self, point: Point) -> str:
        """Character shown at a display point, or a blank outside every screen."""
        for screen in self._screens:
            if screen.contains(point):
                return screen.char_at(point - screen.position)
        return _BLANK

    def post_render(self) -> None:
        for screen in self._screens:
            screen.post_render()


class GameRenderer(Renderer):
    """The display while a run is in progress."""

    def __init__(self, data: DataStore) -> None:
        super().__init__([
            GameScreen(data),
            MetronomeScreen(data),
            IndicatorScreen(data),
        ])


class TitleRenderer(Renderer):
    """The title display with the option menu."""

    def __init__(self, data: DataStore) -> None:
        super().__init__([
            MetronomeScreen(data),
            OptionScreen(data),
            GameScreen(data),
            JudgeScreen(data),
        ])

    def post_render(self) -> None:
        """Refresh every screen again so the next frame starts up to date."""
        for screen in self.screens:
            screen.pre_render()