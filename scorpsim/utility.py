"""Small helpers shared across the simulation."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, MutableMapping
from typing import Any, NamedTuple

from scorpsim.constants import EPSILON, PI, TAU

_uid_counter = itertools.count(1)


class CellCoord(NamedTuple):
    """Integer coordinates of a grid cell."""

    x: int
    y: int


def create_uid() -> int:
    """Return a new unique identifier, starting at 1."""
    return next(_uid_counter)


def to_nice_string(real: float) -> str:
    """Format a float with a number of significant digits suited to its magnitude."""
    precision = 6
    if real > 0 and math.isfinite(real):
        digits = int(math.log10(real) + 2)
        if digits >= 0:
            precision = digits
    return f"{real:.{precision}g}"


def is_equal(x: float, y: float, epsilon: float = EPSILON) -> bool:
    """Tell whether x and y differ by less than epsilon."""
    return abs(x - y) < epsilon


def angle_delta(a: float, b: float) -> float:
    """Return a - b brought into [-PI, PI)."""
    delta = a - b
    while delta < -PI:
        delta += TAU
    while delta >= PI:
        delta -= TAU
    return delta


def split(text: str, delim: str) -> list[str]:
    """Split text on delim; a trailing empty token is dropped."""
    parts = text.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _wrap(value: float, size: float) -> float:
    value = math.fmod(value, size)
    if value < 0:
        value += size
    if value >= size:
        value -= size
    return value


def vec2d_to_cell_coord(position: Any, width: float, height: float, cell_size: float) -> CellCoord:
    """Map a position on a toric substrate to the coordinates of its cell."""
    x = _wrap(position.x, width)
    y = _wrap(position.y, height)
    return CellCoord(int(x / cell_size), int(y / cell_size))


def count_diff(value1: int, value2: int) -> int:
    """Return value1 - value2 when value1 >= value2, 0 otherwise."""
    return max(value1 - value2, 0)


def map_erase_if(mapping: MutableMapping, pred: Callable[[Any, Any], bool]) -> None:
    """Remove in place every entry for which pred(key, value) is true."""
    for key in [k for k, v in mapping.items() if pred(k, v)]:
        del mapping[key]