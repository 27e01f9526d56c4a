"""AdjacencyListGraph -- dict-based adjacency list backend.

Public API:
    AdjacencyListGraph: Maps each vertex to its list of outgoing edges.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TypeVar

from ..graph.types import Edge, Vertex
from .base import GraphBackend

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Hashable)


class AdjacencyListGraph(GraphBackend[H]):
    """Adjacency list keyed by vertex.

    Suited to sparse graphs. Adding a vertex or an edge is amortised O(1);
    ``edges`` and ``weight`` are O(out-degree).

    Repeated ``add_directed_edge`` calls for the same pair append parallel
    edges rather than overwriting; ``weight`` reports the first one.
    Vertex payloads must be hashable since vertices are dict keys.
    """

    def __init__(self) -> None:
        # Insertion-ordered, so iteration follows vertex index.
        self._adjacencies: dict[Vertex[H], list[Edge[H]]] = {}

    def create_vertex(self, data: H) -> Vertex[H]:
        vertex = Vertex(index=len(self._adjacencies), data=data)
        self._adjacencies[vertex] = []
        return vertex

    def add_directed_edge(
        self,
        source: Vertex[H],
        destination: Vertex[H],
        weight: float | None = None,
    ) -> None:
        outgoing = self._adjacencies.get(source)
        if outgoing is None:
            logger.debug("Dropping edge from unknown vertex %s", source)
            return
        outgoing.append(Edge(source=source, destination=destination, weight=weight))

    def edges(self, source: Vertex[H]) -> list[Edge[H]]:
        return list(self._adjacencies.get(source, ()))

    def weight(self, source: Vertex[H], destination: Vertex[H]) -> float | None:
        for edge in self._adjacencies.get(source, ()):
            if edge.destination == destination:
                return edge.weight
        return None

    @property
    def vertices(self) -> list[Vertex[H]]:
        return list(self._adjacencies)

    def __len__(self) -> int:
        return len(self._adjacencies)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and vertex in self._adjacencies


__all__ = ["AdjacencyListGraph"]
