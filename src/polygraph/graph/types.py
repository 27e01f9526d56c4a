"""Value types shared by every graph backend.

Public API:
    EdgeKind: Directed / undirected insertion tag.
    Vertex: Immutable graph node issued by a backend.
    Edge: Immutable directed connection between two vertices.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class EdgeKind(Enum):
    """How an edge is inserted into a graph."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(frozen=True)
class Vertex(Generic[T]):
    """An immutable vertex.

    Attributes:
        index: Position assigned by the owning backend; never reused.
        data: Arbitrary payload. Must be hashable for set-based algorithms.
    """

    index: int
    data: T

    def __str__(self) -> str:
        return f"{self.index}: {self.data}"


@dataclass(frozen=True)
class Edge(Generic[T]):
    """An immutable directed edge.

    An undirected connection is stored as two edges, one per direction,
    carrying the same weight.

    Attributes:
        source: Vertex the edge leaves.
        destination: Vertex the edge enters.
        weight: Optional real-valued weight.
    """

    source: Vertex[T]
    destination: Vertex[T]
    weight: float | None = None


__all__ = ["EdgeKind", "Vertex", "Edge"]
