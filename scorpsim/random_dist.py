"""Random draws from uniform, normal and exponential distributions."""

from __future__ import annotations

import math
import random
from typing import Union

from scorpsim.vec2d import Vec2d

_rng = random.Random()

Number = Union[int, float]


def uniform(low: Number, high: Number) -> Number:
    """Draw uniformly in [low, high]; integers when both bounds are integers."""
    if low > high:
        raise ValueError(f"uniform bounds are reversed: {low} > {high}")
    if isinstance(low, int) and isinstance(high, int):
        return _rng.randint(low, high)
    return _rng.uniform(low, high)


def uniform_vec(top_left: Vec2d, bottom_right: Vec2d) -> Vec2d:
    """Draw a point uniformly in the box spanned by two corners."""
    return Vec2d(uniform(top_left.x, bottom_right.x), uniform(top_left.y, bottom_right.y))


def normal(mu: float, sigma2: float) -> float:
    """Draw from a normal distribution of mean mu and variance sigma2."""
    if sigma2 < 0:
        raise ValueError(f"variance must not be negative, got {sigma2}")
    return _rng.gauss(mu, math.sqrt(sigma2))


def exponential(rate: float) -> float:
    """Draw from an exponential distribution of the given rate."""
    if rate <= 0:
        raise ValueError(f"rate must be positive, got {rate}")
    return _rng.expovariate(rate)