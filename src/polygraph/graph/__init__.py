"""Graph abstraction layer: value types, protocol and traversal algorithms.

Public API:
    EdgeKind: Directed / undirected insertion tag.
    Vertex: Immutable graph node.
    Edge: Immutable directed edge.
    Graph: Protocol all backends implement.
    breadth_first_search: BFS visit order from a source vertex.
    depth_first_search: DFS preorder from a source vertex.
    has_cycle: Back-edge detection from a source vertex.
"""

from __future__ import annotations

from .protocol import Graph
from .traversal import breadth_first_search, depth_first_search, has_cycle
from .types import Edge, EdgeKind, Vertex

__all__ = [
    "EdgeKind",
    "Vertex",
    "Edge",
    "Graph",
    "breadth_first_search",
    "depth_first_search",
    "has_cycle",
]
