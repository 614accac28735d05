"""Circular bodies living on a toric (wrap-around) square world."""

from __future__ import annotations

import itertools

from scorpsim.vec2d import Vec2d, distance

DEFAULT_WORLD_SIZE = 1000.0

Target = "Vec2d | CircularCollider"


class CircularCollider:
    """A circle with a centre and a radius on a toric world of side world_size."""

    def __init__(
        self, position: Vec2d, radius: float, world_size: float = DEFAULT_WORLD_SIZE
    ) -> None:
        if radius < 0:
            raise ValueError(f"radius must not be negative, got {radius}")
        self._position = Vec2d(position.x, position.y)
        self._radius = float(radius)
        self._world_size = float(world_size)
        self.clamp()

    @property
    def position(self) -> Vec2d:
        return Vec2d(self._position.x, self._position.y)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def world_size(self) -> float:
        return self._world_size

    def _set_position(self, position: Vec2d) -> None:
        self._position = Vec2d(position.x, position.y)

    def _set_radius(self, radius: float) -> None:
        self._radius = float(radius)

    def clamp(self) -> None:
        """Bring the centre back into the world by one world size at most per axis."""
        size = self._world_size
        if self._position.x < 0:
            self._position.x += size
        if self._position.x > size:
            self._position.x -= size
        if self._position.y < 0:
            self._position.y += size
        if self._position.y > size:
            self._position.y -= size

    def direction_to(self, target: Vec2d | CircularCollider) -> Vec2d:
        """Shortest vector from this centre to a point or another collider's centre."""
        to = target._position if isinstance(target, CircularCollider) else target
        size = self._world_size
        best = Vec2d(to.x, to.y)
        for i, j in itertools.product((-1, 0, 1), repeat=2):
            candidate = to + Vec2d(i * size, j * size)
            if distance(candidate, self._position) < distance(best, self._position):
                best = candidate
        return best - self._position

    def distance_to(self, target: Vec2d | CircularCollider) -> float:
        """Length of the shortest toric vector to a point or another collider."""
        return self.direction_to(target).length()

    def move(self, dx: Vec2d) -> None:
        """Translate the centre by dx, wrapping around the world."""
        self._position = self._position + dx
        self.clamp()

    def __iadd__(self, dx: Vec2d) -> CircularCollider:
        self.move(dx)
        return self

    def is_circular_collider_inside(self, other: CircularCollider) -> bool:
        """Tell whether other lies entirely inside this collider."""
        return self._radius >= other._radius and self.distance_to(other) <= self._radius - other._radius

    def is_colliding(self, other: CircularCollider) -> bool:
        """Tell whether the two circles overlap or touch."""
        return self.distance_to(other) <= self._radius + other._radius

    def is_point_inside(self, point: Vec2d) -> bool:
        return self.distance_to(point) <= self._radius

    def __gt__(self, other: object) -> bool:
        if isinstance(other, CircularCollider):
            return self.is_circular_collider_inside(other)
        if isinstance(other, Vec2d):
            return self.is_point_inside(other)
        return NotImplemented

    def __or__(self, other: object) -> bool:
        if isinstance(other, CircularCollider):
            return self.is_colliding(other)
        return NotImplemented

    def __str__(self) -> str:
        return (
            f"CircularCollider : position = ({self._position.x:g} , {self._position.y:g}),"
            f" radius = {self._radius:g}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._position!r}, {self._radius!r})"