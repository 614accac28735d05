"""Rocks: static circular obstacles of random size and orientation."""

from __future__ import annotations

from scorpsim.collider import DEFAULT_WORLD_SIZE, CircularCollider
from scorpsim.constants import PI
from scorpsim.random_dist import uniform
from scorpsim.vec2d import Vec2d


class Rock(CircularCollider):
    """An obstacle whose radius scales with the world size."""

    def __init__(self, position: Vec2d, world_size: float = DEFAULT_WORLD_SIZE) -> None:
        size = float(world_size)
        radius = max(1.0, uniform(size / 50, 2 * size / 50))
        super().__init__(position, radius, world_size=size)
        self._orientation = uniform(-PI, PI)

    @property
    def orientation(self) -> float:
        """Orientation of the rock, in radians."""
        return self._orientation