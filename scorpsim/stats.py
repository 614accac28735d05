"""A collection of graphs, one of which is active at a time."""

from __future__ import annotations

from collections.abc import Sequence

from scorpsim.graph import Graph
from scorpsim.vec2d import Vec2d


class Stats:
    """Named graphs keyed by identifier, with a focus on one of them."""

    def __init__(self) -> None:
        self._graphs: dict[float, Graph] = {}
        self._labels: dict[float, str] = {}
        self._active = -1
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """Total time received through update(), in seconds."""
        return self._elapsed

    @property
    def active_identifier(self) -> int:
        return self._active

    def update(self, dt: float) -> None:
        self._elapsed += dt

    def set_active(self, identifier: float) -> None:
        """Make the graph with this identifier the visible one; it is truncated to an integer."""
        self._active = int(identifier)

    def focus_on(self, title: str) -> None:
        """Switch to the graph with this title and reset it."""
        for identifier, label in self._labels.items():
            if label == title:
                self.set_active(identifier)
                self.active_graph().reset()

    def add_graph(
        self,
        identifier: float,
        title: str,
        series: Sequence[str],
        minimum: float,
        maximum: float,
        size: Vec2d,
    ) -> None:
        """Register a graph unless the identifier is taken, then make it active."""
        self._graphs.setdefault(identifier, Graph(series, size, minimum, maximum))
        self._labels.setdefault(identifier, title)
        self.set_active(identifier)

    def reset(self) -> None:
        for graph in self._graphs.values():
            graph.reset()

    def active_graph(self) -> Graph:
        """The visible graph; KeyError if none has the active identifier."""
        return self._graphs[self._active]