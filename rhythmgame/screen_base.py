"""A rectangular character board placed on the console screen."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .geometry import Point, Rectangle, Size

_BLANK = " "


class ScreenBase(ABC):
    """A region of the display holding its own grid of characters.

    Points given to the board are local to the region. A point is turned into
    a row-major index, so an x beyond the width runs on into the next row.
    """

    def __init__(self) -> None:
        self._rect = Rectangle()
        self._board: list[str] = []

    @property
    def position(self) -> Point:
        return self._rect.position

    @position.setter
    def position(self, point: Point) -> None:
        self._rect.position = point

    @property
    def size(self) -> Size:
        return self._rect.size

    @abstractmethod
    def init(self) -> None:
        """Draw the parts of the board that never change."""

    @abstractmethod
    def pre_render(self) -> None:
        """Update the board before the frame is composed."""

    @abstractmethod
    def post_render(self) -> None:
        """Tidy up after the frame has been written."""

    def contains(self, point: Point) -> bool:
        """True if a screen point falls inside this region."""
        return self._rect.contains(point)

    def _index(self, point: Point) -> int:
        return point.y * self.size.width + point.x

    def char_at(self, point: Point) -> str:
        """Character at a local point, or a blank when outside the board."""
        index = self._index(point)
        if 0 <= index < len(self._board):
            return self._board[index]
        return _BLANK

    def set_char(self, point: Point, char: str) -> bool:
        """Write a character at a local point; False when outside the board."""
        index = self._index(point)
        if not 0 <= index < len(self._board):
            return False
        self._board[index] = char
        return True

    def resize(self, size: Size) -> None:
        """Replace the board with a blank one of the given size."""
        self._rect.size = size
        self._board = [_BLANK] * max(0, size.width * size.height)

    def draw_char(self, x: int, y: int, char: str) -> None:
        self.set_char(Point(x, y), char)

    def draw_string(self, x: int, y: int, message: str) -> None:
        for offset, char in enumerate(message):
            self.draw_char(x + offset, y, char)

    def draw_number(self, x: int, y: int, number: int, space: int) -> None:
        """Right-align a non-negative number in a field of the given width."""
        for offset in range(space):
            self.draw_char(x + offset, y, _BLANK)

        if number == 0:
            self.draw_char(x + space - 1, y, "0")
            return

        while number > 0:
            number, digit = divmod(number, 10)
            self.draw_char(x + space - 1, y, str(digit))
            space -= 1

    def draw_double(self, x: int, y: int, value: float, precision: int) -> None:
        """Draw a one-digit integer part, a point and a fixed number of decimals."""
        scale = 10 ** precision
        scaled = int(value * scale)
        sign = -1 if scaled < 0 else 1
        integer, decimal = divmod(abs(scaled), scale)

        self.draw_number(x, y, sign * integer, 1)
        self.draw_char(x + 1, y, ".")
        self.draw_number(x + 2, y, sign * decimal, precision)