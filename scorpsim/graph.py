"""Time series graph with a rolling two-buffer window."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from scorpsim.vec2d import Vec2d

Color = tuple[int, int, int, int]

COLORS: tuple[Color, ...] = (
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (255, 255, 0, 255),
    (0, 255, 255, 255),
    (255, 255, 255, 255),
    (255, 0, 255, 255),
)

_X_SCALE = 10.0  # pixels per second


@dataclass
class _Serie:
    title: str
    color: Color
    last_value: float
    present: list[tuple[float, float]] = field(default_factory=list)
    past: list[tuple[float, float]] = field(default_factory=list)


class Graph:
    """Several named series drawn over a window that wraps around in time."""

    def __init__(self, titles: Sequence[str], size: Vec2d, minimum: float, maximum: float) -> None:
        if len(titles) > len(COLORS):
            raise ValueError(f"a graph holds at most {len(COLORS)} series, got {len(titles)}")
        self._size = Vec2d(size.x, size.y)
        self._y_min = min(minimum, maximum)
        self._y_max = max(minimum, maximum)
        self._last_epoch = 0.0
        self._series = [_Serie(title, color, self._y_min) for title, color in zip(titles, COLORS)]

    @property
    def titles(self) -> list[str]:
        return [serie.title for serie in self._series]

    @property
    def last_values(self) -> dict[str, float]:
        """The latest value received by each series."""
        return {serie.title: serie.last_value for serie in self._series}

    def _y_scale(self) -> float:
        return self._size.y / (self._y_max - self._y_min)

    def update_data(self, delta_epoch: float, new_data: Mapping[str, float]) -> None:
        """Add one value per series, delta_epoch seconds after the previous ones."""
        new_epoch = self._last_epoch + delta_epoch
        y_scale = self._y_scale()
        time_scale = self._size.x / _X_SCALE

        while new_epoch > time_scale:
            new_epoch -= time_scale

        x = new_epoch * _X_SCALE
        for serie in self._series:
            value = new_data[serie.title]
            y = self._size.y - (value - self._y_min) * y_scale

            if new_epoch < self._last_epoch:
                serie.past, serie.present = serie.present, []

            serie.past = [vertex for vertex in serie.past if vertex[0] > x]
            serie.present.append((x, y))
            serie.last_value = value

        self._last_epoch = new_epoch

    def reset(self) -> None:
        """Clear every series and restart the time window."""
        self._last_epoch = 0.0
        for serie in self._series:
            serie.past.clear()
            serie.present.clear()

    def series_in_string(self) -> str:
        """Tab separated table: a title line, then one line per recorded point."""
        if not self._series:
            return ""
        y_scale = self._y_scale()

        def row(buffer_name: str, index: int) -> str:
            return "\t".join(
                f"{self._y_max - getattr(serie, buffer_name)[index][1] / y_scale:.3f}"
                for serie in self._series
            )

        first = self._series[0]
        lines = ["\t".join(self.titles)]
        lines.extend(row("past", i) for i in range(len(first.past)))
        lines.extend(row("present", i) for i in range(len(first.present)))
        return "\n".join(lines) + "\n"