"""Integer points, sizes and rectangles on the character grid."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        return Size(self.width - other.width, self.height - other.height)


@dataclass
class Rectangle:
    position: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    def left(self) -> int:
        return self.position.x

    def right(self) -> int:
        return self.position.x + self.size.width

    def top(self) -> int:
        return self.position.y

    def bottom(self) -> int:
        return self.position.y + self.size.height

    def contains(self, point: Point) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return (self.left() <= point.x < self.right()
                and self.top() <= point.y < self.bottom())

    def intersects(self, other: Rectangle) -> bool:
        return not (
            self.right() <= other.left()
            or other.right() <= self.left()
            or self.bottom() <= other.top()
            or other.bottom() <= self.top()
        )