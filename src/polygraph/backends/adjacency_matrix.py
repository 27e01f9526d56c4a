"""AdjacencyMatrixGraph -- dense weight-table backend.

Public API:
    AdjacencyMatrixGraph: Square matrix of optional weights indexed by vertex.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from ..exceptions import ForeignVertexError
from ..graph.types import Edge, Vertex
from .base import GraphBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AdjacencyMatrixGraph(GraphBackend[T]):
    """Adjacency matrix where ``weights[i][j]`` holds the i -> j weight.

    Suited to dense graphs: ``weight`` and ``add_directed_edge`` are O(1),
    while ``create_vertex`` and ``edges`` are O(V).

    A repeated ``add_directed_edge`` for the same pair overwrites the cell,
    so parallel edges never accumulate. A weight of None clears the cell.
    Payloads do not need to be hashable.
    """

    def __init__(self) -> None:
        self._vertices: list[Vertex[T]] = []
        self._weights: list[list[float | None]] = []

    def create_vertex(self, data: T) -> Vertex[T]:
        vertex = Vertex(index=len(self._vertices), data=data)
        self._vertices.append(vertex)
        # New column: no edges into this vertex yet.
        for row in self._weights:
            row.append(None)
        # New row: no edges out of this vertex yet.
        self._weights.append([None] * len(self._vertices))
        return vertex

    def add_directed_edge(
        self,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Set the source -> destination cell.

        Raises:
            ForeignVertexError: If either vertex was not issued by this graph.
        """
        self._require_own(source)
        self._require_own(destination)
        self._weights[source.index][destination.index] = weight

    def edges(self, source: Vertex[T]) -> list[Edge[T]]:
        if not self._owns(source):
            return []
        return [
            Edge(source=source, destination=self._vertices[column], weight=weight)
            for column, weight in enumerate(self._weights[source.index])
            if weight is not None
        ]

    def weight(self, source: Vertex[T], destination: Vertex[T]) -> float | None:
        if not (self._owns(source) and self._owns(destination)):
            return None
        return self._weights[source.index][destination.index]

    @property
    def vertices(self) -> list[Vertex[T]]:
        return list(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and self._owns(vertex)

    # ── private helpers ───────────────────────────────────────

    def _owns(self, vertex: Vertex[T]) -> bool:
        index = vertex.index
        return 0 <= index < len(self._vertices) and self._vertices[index] == vertex

    def _require_own(self, vertex: Vertex[T]) -> None:
        if not self._owns(vertex):
            logger.debug("Rejecting foreign vertex %s (size %d)", vertex, len(self._vertices))
            raise ForeignVertexError(
                f"Vertex {vertex} was not created by this graph "
                f"({len(self._vertices)} vertices)"
            )


__all__ = ["AdjacencyMatrixGraph"]
