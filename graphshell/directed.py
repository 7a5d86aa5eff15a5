"""Directed weighted graph."""

from __future__ import annotations

from typing import Iterator

from .model import Edge, Graph, GraphError, GraphType, T


class DirectedGraph(Graph[T]):
    """A directed graph with integer edge weights and at most one edge per ordered pair."""

    graph_type = GraphType.DIRECTED

    def __init__(self) -> None:
        self._vertices: dict[T, T] = {}
        self._out: dict[T, dict[T, None]] = {}
        self._in: dict[T, dict[T, None]] = {}
        self._weights: dict[tuple[T, T], int] = {}

    def _require_endpoints(self, source: T, target: T) -> None:
        if not self.is_vertex(source):
            raise GraphError("from is not in the graph")
        if not self.is_vertex(target):
            raise GraphError("to is not in the graph")

    def is_vertex(self, v: T) -> bool:
        return v in self._vertices

    def is_edge(self, source: T, target: T) -> bool:
        return self.is_vertex(source) and self.is_vertex(target) and target in self._out[source]

    def add_vertex(self, v: T) -> None:
        if self.is_vertex(v):
            raise GraphError("Vertex Already added")
        self._vertices[v] = v
        self._out[v] = {}
        self._in[v] = {}

    def remove_vertex(self, v: T) -> None:
        if not self.is_vertex(v):
            raise GraphError("Vertex not in the graph")
        for target in list(self._out[v]):
            del self._weights[(v, target)]
            del self._in[target][v]
        for source in list(self._in[v]):
            del self._weights[(source, v)]
            del self._out[source][v]
        del self._out[v]
        del self._in[v]
        del self._vertices[v]

    def add_edge(self, source: T, target: T, weight: int = 1) -> None:
        self._require_endpoints(source, target)
        if self.is_edge(source, target):
            raise GraphError("The edge already exists")
        self._out[source][target] = None
        self._in[target][source] = None
        self._weights[(source, target)] = weight

    def remove_edge(self, source: T, target: T) -> None:
        self._require_endpoints(source, target)
        if not self.is_edge(source, target):
            raise GraphError("The edge does not exist")
        del self._out[source][target]
        del self._in[target][source]
        del self._weights[(source, target)]

    def get_vertex(self, v: T) -> T:
        try:
            return self._vertices[v]
        except KeyError:
            raise GraphError("Vertex not found") from None

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._weights)

    def edge_weight(self, source: T, target: T) -> int:
        self._require_endpoints(source, target)
        if not self.is_edge(source, target):
            raise GraphError("The edge does not exit exists")
        return self._weights[(source, target)]

    def edges(self) -> list[Edge[T]]:
        return [Edge(s, t, w) for (s, t), w in self._weights.items()]

    def clear(self) -> None:
        self._vertices.clear()
        self._out.clear()
        self._in.clear()
        self._weights.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._vertices.values()))

    def _require_vertex(self, v: T, message: str) -> None:
        if not self.is_vertex(v):
            raise GraphError(message)

    def in_degree(self, v: T) -> int:
        self._require_vertex(v, "Vertex is not in the graph")
        return len(self._in[v])

    def out_degree(self, v: T) -> int:
        self._require_vertex(v, "Vertex is not in the graph")
        return len(self._out[v])

    def outbound_edges(self, v: T) -> list[Edge[T]]:
        """Edges leaving ``v``, with their weights."""
        self._require_vertex(v, "Vertex not in the graph")
        return [Edge(v, t, self._weights[(v, t)]) for t in self._out[v]]

    def inbound_edges(self, v: T) -> list[Edge[T]]:
        """Edges entering ``v``, with their weights."""
        self._require_vertex(v, "Vertex not in the graph")
        return [Edge(s, v, self._weights[(s, v)]) for s in self._in[v]]

    def outbound_vertices(self, v: T) -> list[T]:
        self._require_vertex(v, "v is not in the graph")
        return list(self._out[v])

    def inbound_vertices(self, v: T) -> list[T]:
        self._require_vertex(v, "v is not in the graph")
        return list(self._in[v])

    def copy(self) -> DirectedGraph[T]:
        """Return an independent copy of the graph structure."""
        other: DirectedGraph[T] = type(self)()
        other._vertices = dict(self._vertices)
        other._out = {v: dict(n) for v, n in self._out.items()}
        other._in = {v: dict(n) for v, n in self._in.items()}
        other._weights = dict(self._weights)
        return other