"""Undirected weighted graph."""

from __future__ import annotations

from typing import Iterator

from .model import Edge, Graph, GraphError, GraphType, T


class UndirectedGraph(Graph[T]):
    """An undirected graph with integer edge weights."""

    graph_type = GraphType.UNDIRECTED

    def __init__(self) -> None:
        self._vertices: dict[T, T] = {}
        self._adjacency: dict[T, dict[T, None]] = {}
        self._edges: dict[tuple[T, T], Edge[T]] = {}

    def _find_key(self, a: T, b: T) -> tuple[T, T] | None:
        if (a, b) in self._edges:
            return (a, b)
        if (b, a) in self._edges:
            return (b, a)
        return None

    def _require_endpoints(self, source: T, target: T) -> None:
        if not self.is_vertex(source):
            raise GraphError("from is not in the graph")
        if not self.is_vertex(target):
            raise GraphError("to is not in the graph")

    def is_vertex(self, v: T) -> bool:
        return v in self._adjacency

    def is_edge(self, source: T, target: T) -> bool:
        return (
            self.is_vertex(source)
            and self.is_vertex(target)
            and target in self._adjacency[source]
            and self._find_key(source, target) is not None
        )

    def add_vertex(self, v: T) -> None:
        if self.is_vertex(v):
            raise GraphError("Vertex Already added")
        self._adjacency[v] = {}
        self._vertices[v] = v

    def remove_vertex(self, v: T) -> None:
        if not self.is_vertex(v):
            raise GraphError("Vertex not in the graph")
        for neighbour in list(self._adjacency[v]):
            self.remove_edge(v, neighbour)
        del self._adjacency[v]
        del self._vertices[v]

    def add_edge(self, source: T, target: T, weight: int = 1) -> None:
        self._require_endpoints(source, target)
        if self.is_edge(source, target):
            raise GraphError("The edge already exists")
        self._adjacency[source][target] = None
        self._adjacency[target][source] = None
        self._edges[(source, target)] = Edge(source, target, weight)

    def remove_edge(self, source: T, target: T) -> None:
        self._require_endpoints(source, target)
        if not self.is_edge(source, target):
            raise GraphError("The edge does not exist")
        self._adjacency[source].pop(target, None)
        self._adjacency[target].pop(source, None)
        key = self._find_key(source, target)
        if key is None:
            raise GraphError(f"The edge {source} -- {target} does not exists in the edges set")
        del self._edges[key]

    def get_vertex(self, v: T) -> T:
        try:
            return self._vertices[v]
        except KeyError:
            raise GraphError("Vertex not found") from None

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def edge_weight(self, source: T, target: T) -> int:
        self._require_endpoints(source, target)
        if not self.is_edge(source, target) and not self.is_edge(target, source):
            raise GraphError("The edge does not exists")
        key = self._find_key(source, target)
        if key is None:
            raise GraphError(f"The edge {source} -- {target} does not exists in the edges set")
        return self._edges[key].weight

    def edges(self) -> list[Edge[T]]:
        return list(self._edges.values())

    def clear(self) -> None:
        self._vertices.clear()
        self._adjacency.clear()
        self._edges.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._vertices.values()))

    def adjacent_edges(self, v: T) -> list[Edge[T]]:
        """Edges incident to ``v``, each oriented away from ``v``."""
        if not self.is_vertex(v):
            raise GraphError("Vertex is not in the graph")
        return [Edge(v, n, self.edge_weight(v, n)) for n in self._adjacency[v]]

    def copy(self) -> UndirectedGraph[T]:
        """Return an independent copy of the graph structure."""
        other: UndirectedGraph[T] = type(self)()
        other._vertices = dict(self._vertices)
        other._adjacency = {v: dict(n) for v, n in self._adjacency.items()}
        other._edges = dict(self._edges)
        return other