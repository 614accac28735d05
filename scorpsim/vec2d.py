"""Two-dimensional vector with the usual algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from collections.abc import Iterator

from scorpsim.utility import is_equal


@dataclass(eq=False)
class Vec2d:
    """A 2D vector; equality is approximate."""

    x: float = 0.0
    y: float = 0.0

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalised(self) -> Vec2d:
        """Return the unit vector in the same direction, or a copy if null."""
        length = self.length()
        return self / length if not is_equal(length, 0.0) else Vec2d(self.x, self.y)

    def normal(self) -> Vec2d:
        """Return an orthogonal vector."""
        return Vec2d(self.y, -self.x)

    def angle(self) -> float:
        """Return the polar angle in [-PI, PI]."""
        return math.atan2(self.y, self.x)

    def dot(self, other: Vec2d) -> float:
        return self.x * other.x + self.y * other.y

    def sign(self, other: Vec2d) -> int:
        """1 if other is clockwise of this vector, -1 if anticlockwise, 0 if null or equal."""
        if is_equal(other.length_squared(), 0.0) or self == other:
            return 0
        return -1 if self.y * other.x > self.x * other.y else 1

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vec2d:
        return Vec2d(-self.x, -self.y)

    def __add__(self, other: Vec2d) -> Vec2d:
        return Vec2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2d) -> Vec2d:
        return Vec2d(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2d:
        return Vec2d(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2d:
        return self * (1.0 / divisor)

    def __iadd__(self, other: Vec2d) -> Vec2d:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2d) -> Vec2d:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, factor: float) -> Vec2d:
        self.x *= factor
        self.y *= factor
        return self

    def __itruediv__(self, divisor: float) -> Vec2d:
        return self.__imul__(1.0 / divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return is_equal(self.x, other.x) and is_equal(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        raise IndexError(f"Vec2d axis must be 0 or 1, not {axis}")

    def __setitem__(self, axis: int, value: float) -> None:
        if axis == 0:
            self.x = value
        elif axis == 1:
            self.y = value
        else:
            raise IndexError(f"Vec2d axis must be 0 or 1, not {axis}")

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


def distance(a: Vec2d, b: Vec2d) -> float:
    """Distance between two points."""
    return (a - b).length()


def normal(a: Vec2d, b: Vec2d) -> Vec2d:
    """Normal vector of the segment [a, b]."""
    return (a - b).normal()