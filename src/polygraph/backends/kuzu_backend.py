"""KuzuGraph -- Kuzu-backed persistent implementation of the Graph protocol.

Vertices live in a ``GraphVertex`` node table (payload JSON-encoded) and
edges in a ``GraphEdge`` rel table. All Cypher queries use parameterised
bindings. Vertices are mirrored in memory so ``Vertex`` values can be
rebuilt without a round-trip per lookup.

Public API:
    KuzuGraph: Concrete graph backend stored in an embedded Kuzu database.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from ..exceptions import GraphError, VertexPayloadError
from ..graph.types import Edge, Vertex
from .base import GraphBackend

logger = logging.getLogger(__name__)

_VERTEX_TABLE = "GraphVertex"
_EDGE_TABLE = "GraphEdge"


class KuzuGraph(GraphBackend[Any]):
    """Kuzu graph database implementation of the graph backend contract.

    Parallel edges between the same pair accumulate, as with the
    adjacency list; ``edges`` returns them in insertion order. Payloads
    must survive a JSON round trip unchanged, so a reopened database
    reloads vertices equal to the ones originally created.

    Args:
        db_path: Filesystem path for the Kuzu database.
        graph_id: Optional human-readable identifier; auto-generated if None.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, db_path: Path | str, graph_id: str | None = None) -> None:
        self._db_path = Path(db_path)
        self._graph_id = graph_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._db = kuzu.Database(str(self._db_path))
        self._conn = kuzu.Connection(self._db)

        self._vertices: list[Vertex[Any]] = []
        self._next_seq = 0

        self._ensure_schema()
        self._load_existing()

    @property
    def graph_id(self) -> str:
        return self._graph_id

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Release Kuzu resources. Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
        if self._db is not None:
            self._db.close()
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    # ── graph operations ──────────────────────────────────────

    def create_vertex(self, data: Any) -> Vertex[Any]:
        """Create a vertex and persist its payload.

        Raises:
            VertexPayloadError: If *data* does not survive a JSON round
                trip unchanged (e.g. tuples, sets, non-string dict keys).
        """
        try:
            encoded = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise VertexPayloadError(
                f"Vertex payload is not JSON-serialisable: {data!r}"
            ) from e
        if json.loads(encoded) != data:
            raise VertexPayloadError(
                f"Vertex payload would not reload unchanged: {data!r}"
            )

        vertex = Vertex(index=len(self._vertices), data=data)
        self._conn.execute(
            f"CREATE (:{_VERTEX_TABLE} {{idx: $idx, data: $data}})",
            {"idx": vertex.index, "data": encoded},
        )
        self._vertices.append(vertex)
        return vertex

    def add_directed_edge(
        self,
        source: Vertex[Any],
        destination: Vertex[Any],
        weight: float | None = None,
    ) -> None:
        if not (self._owns(source) and self._owns(destination)):
            logger.debug(
                "Dropping edge %s -> %s: vertex unknown to graph %s",
                source, destination, self._graph_id,
            )
            return

        cypher = (
            f"MATCH (a:{_VERTEX_TABLE}), (b:{_VERTEX_TABLE}) "
            f"WHERE a.idx = $sid AND b.idx = $tid "
            f"CREATE (a)-[:{_EDGE_TABLE} "
            f"{{seq: $seq, weight: $weight, has_weight: $has_weight}}]->(b)"
        )
        self._conn.execute(
            cypher,
            {
                "sid": source.index,
                "tid": destination.index,
                "seq": self._next_seq,
                "weight": 0.0 if weight is None else float(weight),
                "has_weight": weight is not None,
            },
        )
        self._next_seq += 1

    def edges(self, source: Vertex[Any]) -> list[Edge[Any]]:
        if not self._owns(source):
            return []

        cypher = (
            f"MATCH (a:{_VERTEX_TABLE})-[r:{_EDGE_TABLE}]->(b:{_VERTEX_TABLE}) "
            f"WHERE a.idx = $sid "
            f"RETURN b.idx, r.weight, r.has_weight ORDER BY r.seq"
        )
        result = self._conn.execute(cypher, {"sid": source.index})

        edges: list[Edge[Any]] = []
        while result.has_next():
            dest_idx, weight, has_weight = result.get_next()
            edges.append(
                Edge(
                    source=source,
                    destination=self._vertices[dest_idx],
                    weight=weight if has_weight else None,
                )
            )
        return edges

    def weight(self, source: Vertex[Any], destination: Vertex[Any]) -> float | None:
        if not (self._owns(source) and self._owns(destination)):
            return None

        cypher = (
            f"MATCH (a:{_VERTEX_TABLE})-[r:{_EDGE_TABLE}]->(b:{_VERTEX_TABLE}) "
            f"WHERE a.idx = $sid AND b.idx = $tid "
            f"RETURN r.weight, r.has_weight ORDER BY r.seq LIMIT 1"
        )
        result = self._conn.execute(
            cypher, {"sid": source.index, "tid": destination.index}
        )
        if not result.has_next():
            return None
        weight, has_weight = result.get_next()
        return weight if has_weight else None

    @property
    def vertices(self) -> list[Vertex[Any]]:
        return list(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and self._owns(vertex)

    # ── private helpers ───────────────────────────────────────

    def _ensure_schema(self) -> None:
        """Create the vertex and edge tables if they do not exist yet."""
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {_VERTEX_TABLE}"
            f"(idx INT64, data STRING, PRIMARY KEY(idx))"
        )
        self._conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {_EDGE_TABLE}"
            f"(FROM {_VERTEX_TABLE} TO {_VERTEX_TABLE}, "
            f"seq INT64, weight DOUBLE, has_weight BOOLEAN)"
        )
        logger.debug("Kuzu schema ready for graph %s at %s", self._graph_id, self._db_path)

    def _load_existing(self) -> None:
        """Rebuild the in-memory vertex mirror and edge counter from disk.

        Raises:
            GraphError: If stored vertex indices are not 0..n-1.
        """
        result = self._conn.execute(
            f"MATCH (v:{_VERTEX_TABLE}) RETURN v.idx, v.data ORDER BY v.idx"
        )
        while result.has_next():
            idx, encoded = result.get_next()
            if idx != len(self._vertices):
                logger.error(
                    "Vertex table at %s has a gap at index %d (found %d)",
                    self._db_path, len(self._vertices), idx,
                )
                raise GraphError(f"Corrupt vertex table in {self._db_path}")
            self._vertices.append(Vertex(index=idx, data=json.loads(encoded)))

        result = self._conn.execute(
            f"MATCH ()-[r:{_EDGE_TABLE}]->() RETURN max(r.seq)"
        )
        if result.has_next():
            (max_seq,) = result.get_next()
            if max_seq is not None:
                self._next_seq = max_seq + 1

        if self._vertices:
            logger.debug(
                "Reopened graph %s with %d vertices", self._graph_id, len(self._vertices)
            )

    def _owns(self, vertex: Vertex[Any]) -> bool:
        index = vertex.index
        return 0 <= index < len(self._vertices) and self._vertices[index] == vertex


__all__ = ["KuzuGraph"]
