"""Basic geometry and colour types, dimension values and edge drawing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def _num(value: float) -> str:
    number = float(value)
    return str(int(number)) if number.is_integer() else repr(number)


@dataclass(frozen=True, order=True)
class Color:
    """An RGBA colour; ordering compares r, g, b, then a."""

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def __str__(self) -> str:
        return f"Color [{self.r}, {self.g}, {self.b}, {self.a}]"


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
BLANK = Color(0, 0, 0, 0)
LIGHTGRAY = Color(200, 200, 200, 255)
GRAY = Color(130, 130, 130, 255)
DARKPURPLE = Color(112, 31, 126, 255)
BROWN = Color(127, 106, 79, 255)


@dataclass(frozen=True)
class Vector2:
    """A 2D point or displacement."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Vector2) -> bool:
        """Whether the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def intersection(self, other: Rectangle) -> Rectangle:
        """The overlapping area, or an empty rectangle at the origin if none."""
        left = max(self.x, other.x)
        right = min(self.x + self.width, other.x + other.width)
        top = max(self.y, other.y)
        bottom = min(self.y + self.height, other.y + other.height)
        if left < right and top < bottom:
            return Rectangle(left, top, right - left, bottom - top)
        return Rectangle()

    def __str__(self) -> str:
        return (
            f"Rectangle [{_num(self.x)}, {_num(self.y)}, "
            f"{_num(self.width)}, {_num(self.height)}]"
        )


@dataclass(frozen=True)
class Line:
    """A thick line segment to be drawn in one colour."""

    start: Vector2
    end: Vector2
    thickness: float
    color: Color


@dataclass
class Edges(Generic[T]):
    """One value per rectangle edge."""

    top: T
    bottom: T
    left: T
    right: T


@dataclass(frozen=True)
class Value(Generic[T]):
    """An absolute dimension."""

    value: T


@dataclass(frozen=True)
class Ratio:
    """A dimension relative to the parent, as a fraction."""

    ratio: float


@dataclass(frozen=True)
class Auto:
    """A dimension left to the layout engine."""


def clamp_ratio(ratio: float) -> float:
    """Clamp a ratio into [0, 1]."""
    if ratio < 0:
        return 0.0
    if ratio > 1:
        return 1.0
    return ratio


def _half(thickness: float) -> float:
    return thickness if thickness <= 1.0 else thickness / 2


def edge_lines(
    rect: Rectangle,
    top: float,
    bottom: float,
    left: float,
    right: float,
    top_color: Color,
    bottom_color: Color,
    left_color: Color,
    right_color: Color,
) -> list[Line]:
    """Lines that draw each edge of a rectangle separately, inside its bounds.

    Edges with no thickness or a fully transparent colour are skipped.  Lines
    come in the order top, left, bottom, right.
    """
    lines: list[Line] = []
    x_end = rect.x + rect.width
    y_end = rect.y + rect.height

    if top > 0.0 and top_color.a > 0:
        y = rect.y + _half(top)
        lines.append(Line(Vector2(rect.x, y), Vector2(x_end, y), top, top_color))

    if left > 0.0 and left_color.a > 0:
        x = rect.x + _half(left)
        lines.append(Line(Vector2(x, rect.y), Vector2(x, y_end), left, left_color))

    if bottom > 0.0 and bottom_color.a > 0:
        y = y_end - _half(bottom)
        lines.append(Line(Vector2(rect.x, y), Vector2(x_end, y), bottom, bottom_color))

    if right > 0.0 and right_color.a > 0:
        x = x_end - _half(right)
        lines.append(Line(Vector2(x, rect.y), Vector2(x, y_end), right, right_color))

    return lines