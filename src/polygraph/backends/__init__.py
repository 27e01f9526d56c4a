"""Backend abstraction layer for graph storage.

Public API:
    GraphBackend: Abstract base all backends derive from.
    AdjacencyListGraph: Dict-of-lists backend for sparse graphs.
    AdjacencyMatrixGraph: Dense weight-table backend.
    KuzuGraph: Persistent backend on an embedded Kuzu database.
    BACKENDS: Canonical backend names accepted by create_graph.
    create_graph: Factory for creating graph backends by name.
"""

from __future__ import annotations

from typing import Any

from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .base import GraphBackend

BACKENDS = ("adjacency_list", "adjacency_matrix", "kuzu")

_ALIASES = {
    "list": "adjacency_list",
    "matrix": "adjacency_matrix",
}


def create_graph(backend: str = "adjacency_list", **kwargs: Any) -> GraphBackend:
    """Create a graph backend.

    Args:
        backend: One of ``"adjacency_list"`` (or ``"list"``),
            ``"adjacency_matrix"`` (or ``"matrix"``), or ``"kuzu"``.
        **kwargs: Backend-specific options:
            - kuzu: ``db_path`` (required), ``graph_id`` (optional)

    Returns:
        An empty GraphBackend implementation.

    Raises:
        ValueError: If *backend* is unrecognised.
        KeyError: If a required option is missing.
    """
    name = _ALIASES.get(backend, backend)
    if name == "adjacency_list":
        return AdjacencyListGraph()
    elif name == "adjacency_matrix":
        return AdjacencyMatrixGraph()
    elif name == "kuzu":
        from .kuzu_backend import KuzuGraph

        return KuzuGraph(
            db_path=kwargs["db_path"],
            graph_id=kwargs.get("graph_id"),
        )
    else:
        raise ValueError(
            f"Unknown backend: {backend!r}.  "
            f"Choose from: {', '.join(repr(b) for b in BACKENDS)}"
        )


def __getattr__(name: str) -> Any:
    # KuzuGraph is resolved on first access so the in-memory backends
    # work without kuzu installed.
    if name == "KuzuGraph":
        from .kuzu_backend import KuzuGraph

        return KuzuGraph
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "GraphBackend",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "KuzuGraph",
    "BACKENDS",
    "create_graph",
]
