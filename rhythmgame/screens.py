"""The individual panels that make up the title and game displays."""

from __future__ import annotations

from collections import Counter, deque

from .config import (
    ACTION_BUTTONS,
    BUTTON_COUNT,
    GAME_LINE_HEIGHT,
    ScoreType,
    indicator_duration,
    judge_end,
    perfect_judge,
)
from .geometry import Point, Size
from .models import DataStore, Difficulty
from .screen_base import ScreenBase


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    return int(a / b)


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


class GameScreen(ScreenBase):
    """The four play lanes, the judgement line and the falling notes."""

    def __init__(self, data: DataStore) -> None:
        super().__init__()
        self._data = data
        self.position = Point(3, 2)
        # Four lanes of three columns, three separators and two edges.
        self.resize(Size(3 * 4 + 3 + 2, GAME_LINE_HEIGHT + 2))

    def init(self) -> None:
        width, height = self.size.width, self.size.height
        user = self._data.user

        for x in range(width):
            for y in range(height):
                point = Point(x, y)
                self.set_char(point, " ")
                bottom_row = y == height - 1

                if x == 0:
                    if not bottom_row:
                        self.set_char(point, "]")
                elif x == width - 1:
                    if not bottom_row:
                        self.set_char(point, "[")
                elif x % 4 == 0:
                    if not bottom_row:
                        self.set_char(point, "|")
                elif x % 4 == 2:
                    if y == height - 2:
                        line = x // 4
                        self.set_char(point, user.input[ACTION_BUTTONS[line]].key)
                elif y == height - 5:
                    self.set_char(point, "=")

    def pre_render(self) -> None:
        self._draw_tapped()
        self._draw_nodes()

    def post_render(self) -> None:
        pass

    def _draw_tapped(self) -> None:
        user = self._data.user
        y = self.size.height - 1
        for lane, control in enumerate(ACTION_BUTTONS[:BUTTON_COUNT]):
            button = user.input.get(control)
            if button is None:
                continue
            point = Point((lane + 1) * 4 - 2, y)
            if button.effect_frame > 0:
                self.set_char(point, "*" if button.effect_frame < 0.15 else "+")
            elif button.pressed:
                self.set_char(point, "-")
            else:
                self.set_char(point, " ")

    def _draw_nodes(self) -> None:
        for lane in range(BUTTON_COUNT):
            for y in range(self.size.height - 2):
                self.set_char(Point(2 + lane * 4, y), " ")

        perfect = perfect_judge()
        for node in self._data.game.stage_nodes:
            if not node.active or node.index > judge_end():
                continue
            offset = node.index - perfect
            if offset > 0:
                offset //= 2
            self.set_char(Point(2 + node.line * 4, perfect + offset), node.graphic)


INDICATOR_WIDTH = 49
INDICATOR_HEIGHT = 5
_JUDGE_CHARS = "_o-=+*OITˆ|".replace("ˆ", "^")


class IndicatorScreen(ScreenBase):
    """Histogram of recent hit timings, early on the left and late on the right."""

    def __init__(self, data: DataStore) -> None:
        super().__init__()
        self._data = data
        self._prev_count = 0
        self._judge_points: deque[tuple[float, int]] = deque()
        self._judge_count: Counter[int] = Counter()
        self.position = Point(27, 14)
        self.resize(Size(INDICATOR_WIDTH + 2, INDICATOR_HEIGHT + 4))

    def init(self) -> None:
        self._prev_count = 0
        self._judge_points.clear()
        self._judge_count.clear()
        game = self._data.game

        self.draw_string(0, 0, " ---- Indicator ---------------------------------- ")
        for row in range(INDICATOR_HEIGHT + 2):
            self.draw_string(0, 1 + row, "|                                                 |")
        self.draw_string(0, INDICATOR_HEIGHT + 3,
                         " ------------------------------------------------- ")

        good_negative = self.indicate_to_point(-game.judge(ScoreType.GOOD))
        great_negative = self.indicate_to_point(-game.judge(ScoreType.GREAT))
        perfect_negative = self.indicate_to_point(-game.judge(ScoreType.PERFECT))
        perfect_positive = self.indicate_to_point(game.judge(ScoreType.PERFECT))
        great_positive = self.indicate_to_point(game.judge(ScoreType.GREAT))
        good_positive = self.indicate_to_point(game.judge(ScoreType.GOOD))

        bar_y = INDICATOR_HEIGHT + 1
        width = (INDICATOR_WIDTH - 1) // 2
        for i in range(width):
            if i < good_negative:
                char = "~"
            elif i < great_negative:
                char = "-"
            elif i < perfect_negative:
                char = "+"
            elif i < perfect_positive:
                char = "*"
            elif i < great_positive:
                char = "+"
            elif i < good_positive:
                char = "-"
            else:
                char = "~"
            self.draw_char(1 + i, bar_y, char)
            self.draw_char(INDICATOR_WIDTH - i, bar_y, char)

        self.draw_string(1 + width, bar_y, "|")

        indent = 2
        self.draw_string(1 + indent, bar_y + 1, "fast")
        self.draw_string(INDICATOR_WIDTH - 4 - indent, bar_y + 1, "slow")

    def pre_render(self) -> None:
        game = self._data.game
        indicator = self._data.user.indicator

        for judge in indicator[self._prev_count:]:
            point = self.indicate_to_point(judge)
            self._judge_count[point] += 1
            self._judge_points.append((game.game_time, point))
        self._prev_count = len(indicator)

        for i in range(INDICATOR_WIDTH):
            for j in range(INDICATOR_HEIGHT):
                self.draw_char(1 + i, j + 1, " ")

        char_count = len(_JUDGE_CHARS)
        for point, value in self._judge_count.items():
            value = min(value, char_count * INDICATOR_HEIGHT)
            height = 0
            while value > 0:
                char = "|" if value >= char_count else _JUDGE_CHARS[(value - 1) % char_count]
                self.draw_char(1 + point, INDICATOR_HEIGHT - height, char)
                height += 1
                value -= char_count

    def post_render(self) -> None:
        limit = self._data.game.game_time - indicator_duration()
        while self._judge_points and self._judge_points[0][0] < limit:
            _, point = self._judge_points.popleft()
            self._judge_count[point] -= 1

    def indicate_to_point(self, indicate: float) -> int:
        """Column of the histogram for a hit that was indicate seconds off."""
        half = int((INDICATOR_WIDTH - 1) * 0.5)
        percent = min(abs(indicate) / self._data.game.judge(ScoreType.BAD), 1.0)
        point = int(half * percent)
        return half - point if indicate < 0 else half + point


_JUDGE_TO_MILLI = 2000


class JudgeScreen(ScreenBase):
    """Lists the width of each timing window in milliseconds."""

    _LABELS = ("PERFECT", "GREAT", "GOOD", "BAD")
    _TYPES = (ScoreType.PERFECT, ScoreType.GREAT, ScoreType.GOOD, ScoreType.BAD)

    def __init__(self, data: DataStore) -> None:
        super().__init__()
        self._data = data
        self.position = Point(23, 2)
        self.resize(Size(14, 11))

    def init(self) -> None:
        for row, label in enumerate(self._LABELS):
            self.draw_string(0, row, label)

    def pre_render(self) -> None:
        game = self._data.game
        for row, score_type in enumerate(self._TYPES):
            self.draw_number(8, row, int(game.judge(score_type) * _JUDGE_TO_MILLI), 3)
            self.draw_string(12, row, "ms")

    def post_render(self) -> None:
        pass


_OFFSET_TOP = 2
_OFFSET_BOTTOM = 3


class MetronomeScreen(ScreenBase):
    """A grid of the bar's subdivisions with a marker on the current one."""

    def __init__(self, data: DataStore) -> None:
        super().__init__()
        self._data = data
        self._prev_beat_index = 0
        self.position = Point(40, 2)

    def init(self) -> None:
        beat_info = self._data.game.beat_info
        size = Size(38, _OFFSET_TOP + _OFFSET_BOTTOM + beat_info.bottom)
        self.resize(size)
        right, bottom = size.width - 1, size.height - 1

        for x in range(size.width):
            for y in range(size.height):
                point = Point(x, y)
                if x in (0, right):
                    self.set_char(point, "|")
                if y in (0, bottom):
                    self.set_char(point, "-")

        for corner in (Point(0, 0), Point(right, 0), Point(0, bottom), Point(right, bottom)):
            self.set_char(corner, "+")
        self.set_char(Point(2, 0), " ")
        self.draw_string(3, 0, "Metronome")
        self.set_char(Point(12, 0), " ")

        for beat in range(beat_info.top):
            x = self.beat_grid_position(beat * beat_info.bottom).x
            self.set_char(Point(x, _OFFSET_TOP), "o")
            self.set_char(Point(x, _OFFSET_BOTTOM + beat_info.bottom), "o")

    def pre_render(self) -> None:
        game = self._data.game
        bottom_row = _OFFSET_BOTTOM + game.beat_info.bottom

        if self._prev_beat_index != game.current_beat_index:
            prev = self.beat_grid_position(self._prev_beat_index)
            self.set_char(prev, " ")
            self.set_char(Point(prev.x, _OFFSET_TOP), "o")
            self.set_char(Point(prev.x, bottom_row), "o")

        current = self.beat_grid_position(game.current_beat_index)
        self.set_char(current, "+")
        self.set_char(Point(current.x, _OFFSET_TOP), "O")
        self.set_char(Point(current.x, bottom_row), "O")

        self._prev_beat_index = game.current_beat_index

    def post_render(self) -> None:
        pass

    def beat_grid_position(self, beat_index: int) -> Point:
        """Board point of a subdivision: one column per beat, one row per step."""
        beat_info = self._data.game.beat_info
        y = _trunc_mod(beat_index, beat_info.bottom)
        interval = 36 // beat_info.top
        offset = interval // 2 - 1
        x = 2 + offset + _trunc_div(beat_index, beat_info.bottom) * interval
        return Point(x, _OFFSET_BOTTOM + y)


_DIFFICULTY_LABELS = {
    Difficulty.BEGINNER: "  Beginner ",
    Difficulty.EASY: "      Easy ",
    Difficulty.NORMAL: "    Normal ",
    Difficulty.HARD: "      Hard ",
    Difficulty.VERY_HARD: "  VeryHard ",
    Difficulty.EXPERT: "    Expert ",
    Difficulty.MASTER: "    Master ",
}

_OPTION_COUNT = 7


class OptionScreen(ScreenBase):
    """The title menu of game settings with the focused entry marked."""

    def __init__(self, data: DataStore) -> None:
        super().__init__()
        self._data = data
        self.position = Point(24, 11)
        self.resize(Size(50, 20))

    def init(self) -> None:
        rows = (
            " --------------    Option   -------------- ",
            "|    Difficulty   [     VeryHard     ]    |",
            "|           BPM   [          120     ]    |",
            "|         Speed   [            1     ]    |",
            "|    JudgeScale   [          2.0     ]    |",
            "|     PlaySound   [           On     ]    |",
            "|     ShowDebug   [          Off     ]    |",
            "|                 [      Start       ]    |",
            " ----------------------------------------- ",
        )
        for offset, row in enumerate(rows):
            self.draw_string(2, 1 + offset, row)

    def pre_render(self) -> None:
        data = self._data
        game = data.game

        label = _DIFFICULTY_LABELS.get(game.difficulty)
        if label is not None:
            self.draw_string(24, 2, label)

        self.draw_number(30, 3, game.beat_info.bpm, 4)
        self.draw_number(30, 4, game.note_speed, 4)
        self.draw_double(30, 5, game.judge_scale, 1)
        self.draw_string(30, 6, "  On" if game.play_sound else " Off")
        self.draw_string(30, 7, "  On" if data.system.show_debug else " Off")

        for option in range(_OPTION_COUNT):
            y = 2 + option
            focused = data.user.option_focus == option
            self.draw_string(22, y, ">>" if focused else "  ")
            self.draw_string(36, y, "<<" if focused else "  ")

    def post_render(self) -> None:
        pass