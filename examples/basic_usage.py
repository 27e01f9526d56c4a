"""Basic usage example for polygraph."""

import sys
from pathlib import Path
from tempfile import TemporaryDirectory

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from polygraph import (
    EdgeKind,
    breadth_first_search,
    create_graph,
    depth_first_search,
    has_cycle,
)


def build(graph, kind, pairs):
    vertices = {name: graph.create_vertex(name) for name in "ABCDEFGH"}
    for tail, head in pairs:
        graph.add(kind, vertices[tail], vertices[head], 1.0)
    return vertices


def main():
    print("=" * 60)
    print("polygraph - Basic Usage Example")
    print("=" * 60)

    # 1. Breadth-first search over an undirected graph
    print("\n1. BFS from A (adjacency list, undirected edges)...")
    graph = create_graph("adjacency_list")
    v = build(
        graph,
        EdgeKind.UNDIRECTED,
        ["AB", "AC", "AD", "BE", "CF", "CG", "EH", "EF", "FG"],
    )
    for vertex in breadth_first_search(graph, v["A"]):
        print(f"   {vertex}")

    # 2. Depth-first search and cycle detection over a directed graph
    directed = ["AB", "AC", "AD", "BE", "BA", "CG", "EF", "EH", "FG", "FC"]
    print("\n2. DFS from A (adjacency matrix, directed edges)...")
    matrix = create_graph("adjacency_matrix")
    v = build(matrix, EdgeKind.DIRECTED, directed)
    for vertex in depth_first_search(matrix, v["A"]):
        print(f"   {vertex}")
    print(f"   Has cycle from A: {has_cycle(matrix, v['A'])}")

    # 3. The same graph persisted in Kuzu
    print("\n3. Same directed graph stored in Kuzu...")
    with TemporaryDirectory() as tmp:
        kuzu_graph = create_graph("kuzu", db_path=Path(tmp) / "demo_graph")
        v = build(kuzu_graph, EdgeKind.DIRECTED, directed)
        order = depth_first_search(kuzu_graph, v["A"])
        print(f"   DFS: {' '.join(vertex.data for vertex in order)}")
        print(f"   Weight A->B: {kuzu_graph.weight(v['A'], v['B'])}")
        kuzu_graph.close()

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
