"""Geometry of a partial circle drawn as a thick triangle strip."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from scorpsim.constants import DEG_TO_RAD
from scorpsim.vec2d import Vec2d

Color = tuple[int, int, int, int]
BLACK: Color = (0, 0, 0, 255)


@dataclass
class Vertex:
    """A point of the strip with its colour."""

    position: Vec2d
    color: Color


class Rect(NamedTuple):
    """Axis-aligned rectangle."""

    left: float
    top: float
    width: float
    height: float


def _normalised_normal(a: Vec2d, b: Vec2d) -> Vec2d:
    v = a - b
    n = Vec2d(v.y, -v.x)
    length = n.length()
    return n / length if length != 0.0 else n


class Arc:
    """An arc from start to end degrees; coordinates start at the top left corner of its circle."""

    def __init__(
        self,
        start: float,
        end: float,
        radius: float,
        color: Color = BLACK,
        thickness: float = 1.0,
        point_count: int = 120,
    ) -> None:
        if point_count < 1:
            raise ValueError(f"point_count must be at least 1, got {point_count}")
        self._start = start
        self._end = end
        self._radius = radius
        self._color = color
        self._thickness = thickness
        self._point_count = point_count
        self._vertices: list[Vertex] = []
        self._rebuild()

    @property
    def start(self) -> float:
        return self._start

    @start.setter
    def start(self, value: float) -> None:
        self._start = value
        self._rebuild()

    @property
    def end(self) -> float:
        return self._end

    @end.setter
    def end(self, value: float) -> None:
        self._end = value
        self._rebuild()

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = value
        self._rebuild()

    @property
    def thickness(self) -> float:
        return self._thickness

    @thickness.setter
    def thickness(self, value: float) -> None:
        self._thickness = value
        self._rebuild()

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._color = value
        for vertex in self._vertices:
            vertex.color = value

    @property
    def point_count(self) -> int:
        return self._point_count

    def vertices(self) -> list[Vertex]:
        """Return a copy of the strip's vertices."""
        return [Vertex(Vec2d(v.position.x, v.position.y), v.color) for v in self._vertices]

    def local_bounds(self) -> Rect:
        """Bounding rectangle of all vertices."""
        xs = [v.position.x for v in self._vertices]
        ys = [v.position.y for v in self._vertices]
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)

    def _point_at(self, degrees: float) -> Vec2d:
        angle = degrees * DEG_TO_RAD
        return Vec2d(
            math.cos(angle) * self._radius + self._radius,
            math.sin(angle) * self._radius + self._radius,
        )

    def _rebuild(self) -> None:
        count = self._point_count
        step = (self._end - self._start) / count
        curve = [self._point_at(self._start + step * i) for i in range(count + 1)]

        # One outline point sits between each pair of neighbouring curve points.
        outline = [
            (p0 + p2) / 2.0 + _normalised_normal(p0, p2) * self._thickness
            for p0, p2 in zip(curve, curve[1:])
        ]

        positions: list[Vec2d] = [curve[0]]
        for out, nxt in zip(outline, curve[1:]):
            positions.extend((out, nxt))

        # Close the loop when both extremities meet.
        if (curve[-1] - curve[0]).length() <= 0.1:
            positions.append((outline[0] + outline[-1]) / 2.0)
            positions.append(Vec2d(outline[0].x, outline[0].y))

        self._vertices = [Vertex(p, self._color) for p in positions]