"""Tests for breadth_first_search, depth_first_search and has_cycle.

Most tests run against every backend through the ``graph`` fixture.

Test categories:
- TestBreadthFirstSearch: layer order, reachability, edge cases
- TestDepthFirstSearch: preorder validity, exact orders per backend
- TestHasCycle: back-edges, DAGs, unreachable cycles, deep paths
"""

from __future__ import annotations

import pytest

from polygraph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    EdgeKind,
    Vertex,
    breadth_first_search,
    depth_first_search,
    has_cycle,
)


UNDIRECTED_EDGES = ["AB", "AC", "AD", "BE", "CF", "CG", "EH", "EF", "FG"]
DIRECTED_EDGES = ["AB", "AC", "AD", "BE", "BA", "CG", "EF", "EH", "FG", "FC"]


def connect(graph, letters, pairs, kind):
    # Unit weights: the matrix backend treats a None weight as no edge.
    for pair in pairs:
        graph.add(kind, letters[pair[0]], letters[pair[1]], 1.0)


def names(vertices):
    return "".join(v.data for v in vertices)


def assert_dfs_preorder(graph, source, order):
    """Check *order* is a depth-first preorder of the graph from *source*.

    Replays the walk: each new vertex must be a neighbour of the deepest
    stacked vertex that still had unvisited neighbours, and a vertex is
    only abandoned once all of its neighbours have been seen.
    """
    assert order[0] == source
    seen = {source}
    stack = [source]
    for vertex in order[1:]:
        while stack and vertex not in {e.destination for e in graph.edges(stack[-1])}:
            top = stack.pop()
            assert all(e.destination in seen for e in graph.edges(top)), (
                f"{top} abandoned with unvisited neighbours"
            )
        assert stack, f"{vertex} is not reachable from the current path"
        seen.add(vertex)
        stack.append(vertex)


# ── TestBreadthFirstSearch ────────────────────────────────────


class TestBreadthFirstSearch:
    """Layer-order traversal."""

    def test_undirected_example_layer_order(self, graph, letters):
        connect(graph, letters, UNDIRECTED_EDGES, EdgeKind.UNDIRECTED)
        assert names(breadth_first_search(graph, letters["A"])) == "ABCDEFGH"

    def test_source_first(self, graph, letters):
        connect(graph, letters, UNDIRECTED_EDGES, EdgeKind.UNDIRECTED)
        assert breadth_first_search(graph, letters["E"])[0] == letters["E"]

    def test_each_vertex_once(self, graph, letters):
        connect(graph, letters, UNDIRECTED_EDGES, EdgeKind.UNDIRECTED)
        visited = breadth_first_search(graph, letters["G"])
        assert len(visited) == len(set(visited)) == 8

    def test_unreachable_vertices_absent(self, graph, letters):
        connect(graph, letters, ["AB", "BC", "DE"], EdgeKind.DIRECTED)
        assert names(breadth_first_search(graph, letters["A"])) == "ABC"

    def test_directed_edges_respected(self, graph, letters):
        connect(graph, letters, ["AB", "CA"], EdgeKind.DIRECTED)
        assert names(breadth_first_search(graph, letters["A"])) == "AB"

    def test_isolated_source(self, graph, letters):
        assert breadth_first_search(graph, letters["H"]) == [letters["H"]]

    def test_unknown_source(self, graph, letters):
        stranger = Vertex(99, "Z")
        assert breadth_first_search(graph, stranger) == [stranger]

    def test_diamond_not_enqueued_twice(self, graph, letters):
        connect(graph, letters, ["AB", "AC", "BD", "CD"], EdgeKind.DIRECTED)
        assert names(breadth_first_search(graph, letters["A"])) == "ABCD"


# ── TestDepthFirstSearch ──────────────────────────────────────


class TestDepthFirstSearch:
    """Depth-first preorder traversal."""

    def test_directed_example_is_preorder(self, graph, letters):
        connect(graph, letters, DIRECTED_EDGES, EdgeKind.DIRECTED)
        order = depth_first_search(graph, letters["A"])
        assert len(order) == len(set(order)) == 8
        assert_dfs_preorder(graph, letters["A"], order)

    def test_undirected_example_is_preorder(self, graph, letters):
        connect(graph, letters, UNDIRECTED_EDGES, EdgeKind.UNDIRECTED)
        order = depth_first_search(graph, letters["A"])
        assert set(order) == set(letters.values())
        assert_dfs_preorder(graph, letters["A"], order)

    def test_unreachable_vertices_absent(self, graph, letters):
        connect(graph, letters, ["AB", "CD"], EdgeKind.DIRECTED)
        assert names(depth_first_search(graph, letters["A"])) == "AB"

    def test_isolated_source(self, graph, letters):
        assert depth_first_search(graph, letters["D"]) == [letters["D"]]

    def test_goes_deep_before_wide(self, graph, letters):
        connect(graph, letters, ["AB", "AC", "BD", "DE"], EdgeKind.DIRECTED)
        assert names(depth_first_search(graph, letters["A"])) == "ABDEC"

    def test_exact_order_insertion_ordered_backends(self):
        graph = AdjacencyListGraph()
        letters = {n: graph.create_vertex(n) for n in "ABCDEFGH"}
        connect(graph, letters, DIRECTED_EDGES, EdgeKind.DIRECTED)
        assert names(depth_first_search(graph, letters["A"])) == "ABEFGCHD"

    def test_exact_order_matrix_follows_columns(self):
        graph = AdjacencyMatrixGraph()
        letters = {n: graph.create_vertex(n) for n in "ABCDEFGH"}
        connect(graph, letters, DIRECTED_EDGES, EdgeKind.DIRECTED)
        # F lists C before G because C has the lower column index.
        assert names(depth_first_search(graph, letters["A"])) == "ABEFCGHD"


# ── TestHasCycle ──────────────────────────────────────────────


class TestHasCycle:
    """Back-edge detection."""

    def test_directed_example_has_cycle(self, graph, letters):
        connect(graph, letters, DIRECTED_EDGES, EdgeKind.DIRECTED)
        assert has_cycle(graph, letters["A"]) is True

    def test_tree_has_no_cycle(self, graph, letters):
        connect(graph, letters, ["AB", "AC", "BD", "BE", "CF"], EdgeKind.DIRECTED)
        assert has_cycle(graph, letters["A"]) is False

    def test_diamond_is_not_a_cycle(self, graph, letters):
        connect(graph, letters, ["AB", "AC", "BD", "CD", "DE"], EdgeKind.DIRECTED)
        assert has_cycle(graph, letters["A"]) is False

    def test_cycle_behind_explored_branch(self, graph, letters):
        connect(graph, letters, ["AB", "AC", "BD", "CE", "ED", "EC"], EdgeKind.DIRECTED)
        assert has_cycle(graph, letters["A"]) is True

    def test_self_loop(self, graph, letters):
        graph.add_directed_edge(letters["A"], letters["A"], 1.0)
        assert has_cycle(graph, letters["A"]) is True

    def test_undirected_edge_counts_as_cycle(self, graph, letters):
        graph.add_undirected_edge(letters["A"], letters["B"], 1.0)
        assert has_cycle(graph, letters["A"]) is True

    def test_unreachable_cycle_ignored(self, graph, letters):
        connect(graph, letters, ["AB", "CD", "DC"], EdgeKind.DIRECTED)
        assert has_cycle(graph, letters["A"]) is False
        assert has_cycle(graph, letters["C"]) is True

    def test_isolated_source(self, graph, letters):
        assert has_cycle(graph, letters["A"]) is False


class TestDeepGraphs:
    """Long paths do not hit the interpreter recursion limit."""

    @pytest.fixture
    def chain(self):
        graph = AdjacencyListGraph()
        vertices = [graph.create_vertex(i) for i in range(5000)]
        for tail, head in zip(vertices, vertices[1:]):
            graph.add_directed_edge(tail, head, 1.0)
        return graph, vertices

    def test_long_chain_without_cycle(self, chain):
        graph, vertices = chain
        assert has_cycle(graph, vertices[0]) is False

    def test_long_chain_closed_into_cycle(self, chain):
        graph, vertices = chain
        graph.add_directed_edge(vertices[-1], vertices[0], 1.0)
        assert has_cycle(graph, vertices[0]) is True

    def test_long_chain_dfs(self, chain):
        graph, vertices = chain
        assert depth_first_search(graph, vertices[0]) == vertices
