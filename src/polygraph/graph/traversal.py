"""Traversal algorithms generic over the Graph protocol.

The functions here only call ``graph.edges()``, so they work with any
backend. Vertex payloads must be hashable because visited state is kept
in sets.

Public API:
    breadth_first_search: Vertices reachable from a source, in BFS order.
    depth_first_search: Vertices reachable from a source, in DFS preorder.
    has_cycle: Whether a back-edge is reachable from a source.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Iterator
from typing import TypeVar

from .protocol import Graph
from .types import Edge, Vertex

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Hashable)


def breadth_first_search(graph: Graph[H], source: Vertex[H]) -> list[Vertex[H]]:
    """Visit every vertex reachable from *source*, layer by layer.

    A vertex is marked when it is enqueued rather than when it is
    dequeued, so no vertex is ever queued twice.

    Args:
        graph: Any backend satisfying the Graph protocol.
        source: Starting vertex; always first in the result.

    Returns:
        Vertices in visit order. Unreachable vertices are absent.
    """
    queue: deque[Vertex[H]] = deque([source])
    enqueued: set[Vertex[H]] = {source}
    visited: list[Vertex[H]] = []

    while queue:
        vertex = queue.popleft()
        visited.append(vertex)
        for edge in graph.edges(vertex):
            if edge.destination not in enqueued:
                queue.append(edge.destination)
                enqueued.add(edge.destination)

    logger.debug("BFS from %s visited %d vertices", source, len(visited))
    return visited


def depth_first_search(graph: Graph[H], source: Vertex[H]) -> list[Vertex[H]]:
    """Visit every vertex reachable from *source*, depth first.

    Vertices are recorded when pushed, so the result is a preorder of the
    depth-first spanning tree rooted at *source*.

    Args:
        graph: Any backend satisfying the Graph protocol.
        source: Starting vertex; always first in the result.

    Returns:
        Vertices in preorder. Unreachable vertices are absent.
    """
    stack: list[Vertex[H]] = [source]
    pushed: set[Vertex[H]] = {source}
    visited: list[Vertex[H]] = [source]

    while stack:
        vertex = stack[-1]
        for edge in graph.edges(vertex):
            if edge.destination not in pushed:
                stack.append(edge.destination)
                pushed.add(edge.destination)
                visited.append(edge.destination)
                break
        else:
            # Every neighbor already pushed -- backtrack.
            stack.pop()

    logger.debug("DFS from %s visited %d vertices", source, len(visited))
    return visited


def has_cycle(graph: Graph[H], source: Vertex[H]) -> bool:
    """Return True if a cycle is reachable from *source*.

    Uses three colours: vertices on the current exploration path, vertices
    whose subgraph has been fully explored, and everything else. An edge
    into an on-path vertex is a back-edge. Fully explored vertices are not
    entered again, since a cycle through them would already have been
    reported.

    Exploration keeps an explicit stack of edge iterators instead of
    recursing, so path length is not bounded by the interpreter's
    recursion limit.

    Note that an undirected edge is two directed edges, so any undirected
    edge reachable from *source* is reported as a cycle.
    """
    on_path: set[Vertex[H]] = {source}
    finished: set[Vertex[H]] = set()
    path: list[tuple[Vertex[H], Iterator[Edge[H]]]] = [
        (source, iter(graph.edges(source)))
    ]

    while path:
        vertex, pending = path[-1]
        for edge in pending:
            destination = edge.destination
            if destination in on_path:
                logger.debug("Back-edge %s -> %s closes a cycle", vertex, destination)
                return True
            if destination not in finished:
                on_path.add(destination)
                path.append((destination, iter(graph.edges(destination))))
                break
        else:
            path.pop()
            on_path.discard(vertex)
            finished.add(vertex)

    return False


__all__ = ["breadth_first_search", "depth_first_search", "has_cycle"]
