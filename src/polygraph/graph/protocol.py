"""Graph protocol -- the capability interface every backend implements.

Public API:
    Graph: Runtime-checkable protocol defining the graph contract.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from .types import Edge, EdgeKind, Vertex

T = TypeVar("T")


@runtime_checkable
class Graph(Protocol[T]):
    """Common interface for graph storage backends.

    Every concrete implementation (adjacency list, adjacency matrix,
    Kuzu, etc.) must satisfy this protocol so traversal algorithms can
    run against any backend without changes.
    """

    # ── required operations ───────────────────────────────────

    def create_vertex(self, data: T) -> Vertex[T]:
        """Create a vertex carrying *data* and return it.

        The backend assigns a fresh index; this always succeeds.
        """
        ...

    def add_directed_edge(
        self,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Add one directed connection from *source* to *destination*.

        Behaviour on a repeated (source, destination) pair is backend-defined.
        """
        ...

    def edges(self, source: Vertex[T]) -> list[Edge[T]]:
        """Return the outgoing edges of *source*, or [] if it is unknown.

        The order is backend-defined but stable between mutations.
        """
        ...

    def weight(self, source: Vertex[T], destination: Vertex[T]) -> float | None:
        """Weight of the first edge from *source* to *destination*, or None."""
        ...

    # ── derived operations ────────────────────────────────────

    def add_undirected_edge(
        self,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Add a directed edge in each direction with the same weight."""
        ...

    def add(
        self,
        kind: EdgeKind,
        source: Vertex[T],
        destination: Vertex[T],
        weight: float | None = None,
    ) -> None:
        """Add an edge of the given *kind*."""
        ...


__all__ = ["Graph"]
