"""Pytest configuration and fixtures for polygraph tests."""

import pytest

from polygraph import AdjacencyListGraph, AdjacencyMatrixGraph, KuzuGraph

LETTERS = "ABCDEFGH"


@pytest.fixture(params=["adjacency_list", "adjacency_matrix", "kuzu"])
def graph(request, tmp_path):
    """Fresh, empty graph for each backend.

    Kuzu graphs get a database under the test's temporary directory and
    are closed after the test.
    """
    if request.param == "adjacency_list":
        yield AdjacencyListGraph()
    elif request.param == "adjacency_matrix":
        yield AdjacencyMatrixGraph()
    else:
        g = KuzuGraph(db_path=tmp_path / "graph_db", graph_id="test-graph")
        yield g
        g.close()


@pytest.fixture
def letters(graph):
    """Vertices A..H created in order on the parametrised graph."""
    return {name: graph.create_vertex(name) for name in LETTERS}
