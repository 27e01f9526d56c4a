"""Abstract base class for graph storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..graph.types import Edge, EdgeKind, Vertex

T = TypeVar("T")


class GraphBackend(ABC, Generic[T]):
    """Abstract base class for graph storage backends.

    Subclasses provide the four primitive operations; undirected insertion
    and edge-kind dispatch are implemented here once in terms of them, so
    every backend behaves identically for those.
    """

    @abstractmethod
    def create_vertex(self, data: T) -> Vertex[T]:
        """Create a vertex with a fresh index.

        Args:
            data: Payload carried by the vertex

        Returns:
            The new vertex
        """
        pass

    @abstractmethod
    def add_directed_edge(
        self,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Add a directed edge.

        Args:
            source: Tail vertex
            destination: Head vertex
            weight: Optional edge weight
        """
        pass

    @abstractmethod
    def edges(self, source: Vertex[T]) -> list[Edge[T]]:
        """Return outgoing edges of *source* ([] when unknown)."""
        pass

    @abstractmethod
    def weight(self, source: Vertex[T], destination: Vertex[T]) -> float | None:
        """Return the weight of the edge source -> destination, or None."""
        pass

    @property
    @abstractmethod
    def vertices(self) -> list[Vertex[T]]:
        """All vertices in creation order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, vertex: Any) -> bool:
        if not isinstance(vertex, Vertex):
            return False
        vertices = self.vertices
        return 0 <= vertex.index < len(vertices) and vertices[vertex.index] == vertex

    # ── derived operations ────────────────────────────────────

    def add_undirected_edge(
        self,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Add source -> destination and destination -> source with one weight."""
        self.add_directed_edge(source, destination, weight)
        self.add_directed_edge(destination, source, weight)

    def add(
        self,
        kind: EdgeKind,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Add an edge of the given kind.

        Raises:
            ValueError: If *kind* is not an EdgeKind member.
        """
        if kind is EdgeKind.DIRECTED:
            self.add_directed_edge(source, destination, weight)
        elif kind is EdgeKind.UNDIRECTED:
            self.add_undirected_edge(source, destination, weight)
        else:
            raise ValueError(f"Unknown edge kind: {kind!r}")
