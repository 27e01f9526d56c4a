"""polygraph: Generic graphs with interchangeable storage backends."""

__version__ = "0.1.0"

from .backends import (
    BACKENDS,
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    GraphBackend,
    create_graph,
)
from .exceptions import ForeignVertexError, GraphError, VertexPayloadError
from .graph import (
    Edge,
    EdgeKind,
    Graph,
    Vertex,
    breadth_first_search,
    depth_first_search,
    has_cycle,
)


def __getattr__(name):
    if name == "KuzuGraph":
        from .backends.kuzu_backend import KuzuGraph

        return KuzuGraph
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Value types
    "EdgeKind",
    "Vertex",
    "Edge",
    # Capability interface
    "Graph",
    "GraphBackend",
    # Backends
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "KuzuGraph",
    "BACKENDS",
    "create_graph",
    # Traversal
    "breadth_first_search",
    "depth_first_search",
    "has_cycle",
    # Exceptions
    "GraphError",
    "ForeignVertexError",
    "VertexPayloadError",
]
