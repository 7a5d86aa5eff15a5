"""Graph service: the operations the command layer performs on the current graph."""

from __future__ import annotations

import re
from contextlib import suppress
from typing import Iterable, Iterator

from . import algorithms
from .directed import DirectedGraph
from .errors import InvalidOperationOnGraphType
from .model import Graph, GraphError, GraphType
from .undirected import UndirectedGraph

_INTEGER = re.compile(r"[+-]?[0-9]+")
_GRAPH_KINDS = {"undirected": UndirectedGraph, "directed": DirectedGraph}


def _is_unsigned(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _to_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise GraphError(f"Invalid number '{token}'")
    return int(token)


def _add_quietly(graph: Graph, source: str, target: str, cost: int) -> None:
    """Add both endpoints and the edge, skipping whatever already exists."""
    with suppress(GraphError):
        graph.add_vertex(source)
    with suppress(GraphError):
        graph.add_vertex(target)
    with suppress(GraphError):
        graph.add_edge(source, target, cost)


class GraphService:
    """Holds the current graph and renders its contents for display."""

    def __init__(self, graph: Graph | None = None) -> None:
        self._graph: Graph = graph if graph is not None else UndirectedGraph()

    @property
    def graph(self) -> Graph:
        """The graph currently being worked on."""
        return self._graph

    def _require(self, kind: GraphType, message: str) -> None:
        if self._graph.graph_type is not kind:
            raise InvalidOperationOnGraphType(message)

    def add_vertex(self, vertex_id: str) -> None:
        self._graph.add_vertex(vertex_id)

    def remove_vertex(self, vertex_id: str) -> None:
        self._graph.remove_vertex(vertex_id)

    def is_vertex(self, vertex_id: str) -> bool:
        return self._graph.is_vertex(vertex_id)

    def add_edge(self, source: str, target: str, weight: int = 1) -> None:
        self._graph.add_edge(source, target, weight)

    def remove_edge(self, source: str, target: str) -> None:
        self._graph.remove_edge(source, target)

    def is_edge(self, source: str, target: str) -> bool:
        return self._graph.is_edge(source, target)

    def vertices(self) -> str:
        """Every vertex, each followed by a space."""
        return "".join(f"{v} " for v in self._graph)

    @staticmethod
    def _describe(vertex_id: str, kind: str, neighbours: Iterable) -> str:
        names = [str(n) for n in neighbours]
        if not names:
            return f"The vertex {vertex_id} has no {kind} vertices"
        return f"The {kind} vertices of {vertex_id} are:\n" + "".join(f"{n} " for n in names)

    def adjacent_edges(self, vertex_id: str) -> str:
        self._require(
            GraphType.UNDIRECTED, "Adjacent Vertices are available only for Undirected graphs"
        )
        edges = self._graph.adjacent_edges(vertex_id)
        return self._describe(vertex_id, "adjacent", (e.target for e in edges))

    def outbound_edges(self, vertex_id: str) -> str:
        self._require(GraphType.DIRECTED, "Outbound Vertices are defined only for Directed graphs")
        edges = self._graph.outbound_edges(vertex_id)
        return self._describe(vertex_id, "outbound", (e.target for e in edges))

    def inbound_edges(self, vertex_id: str) -> str:
        self._require(GraphType.DIRECTED, "Inbound Vertices are defined only for Directed graphs")
        edges = self._graph.inbound_edges(vertex_id)
        return self._describe(vertex_id, "inbound", (e.source for e in edges))

    def edges(self) -> str:
        delimiter = "->" if self._graph.graph_type is GraphType.DIRECTED else "--"
        output = "The edges in the graph are:\n" + "".join(
            f"{e.source}{delimiter}{e.target}\n" for e in self._graph.edges()
        )
        return output[:-1]

    def load_graph(self, path: str, graph_type: str) -> str:
        """Replace the current graph with one read from ``path``."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            raise GraphError(f"Could not open file '{path}' for reading") from None

        try:
            kind = _GRAPH_KINDS[graph_type]
        except KeyError:
            raise GraphError(f"'{graph_type}' is not a valid graph type") from None
        self._graph = kind()
        self._graph.clear()

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        if not lines:
            raise GraphError("Empty file")

        first = lines[0].split()
        if len(first) == 2 and all(_is_unsigned(t) for t in first):
            self._load_counted(first, lines[1:])
        else:
            self._load_records(lines)
        return "Successfully loaded the graph"

    def _load_counted(self, header: list[str], rest: list[str]) -> None:
        vertex_count, edge_count = int(header[0]), int(header[1])
        for i in range(vertex_count):
            self._graph.add_vertex(str(i))
        remaining = iter(rest)
        for line_number in range(2, edge_count + 2):
            line = next(remaining, None)
            if line is None:
                raise GraphError("Unexpected end of file while reading edges")
            tokens = line.split()
            if len(tokens) != 3:
                raise GraphError(f"Expected format 'from to cost' on line {line_number}")
            source, target, cost = tokens
            _add_quietly(self._graph, source, target, _to_int(cost))

    def _load_records(self, lines: list[str]) -> None:
        self._load_record(lines[0])
        for line in lines[1:]:
            if not line:
                break
            self._load_record(line)

    def _load_record(self, line: str) -> None:
        tokens = line.split()
        if len(tokens) == 1:
            with suppress(GraphError):
                self._graph.add_vertex(tokens[0])
        elif len(tokens) in (2, 3):
            cost = _to_int(tokens[2]) if len(tokens) == 3 else 1
            _add_quietly(self._graph, tokens[0], tokens[1], cost)
        else:
            raise GraphError(f"Invalid line format: '{line}'")

    def _dump_lines(self) -> Iterator[str]:
        graph = self._graph
        if graph.graph_type is GraphType.DIRECTED:
            for vertex in graph:
                for edge in graph.outbound_edges(vertex):
                    yield f"{vertex} {edge.target} {edge.weight}\n"
            for vertex in graph:
                if graph.out_degree(vertex) == 0 and graph.in_degree(vertex) == 0:
                    yield f"{vertex}\n"
        elif graph.graph_type is GraphType.UNDIRECTED:
            for vertex in graph:
                adjacent = graph.adjacent_edges(vertex)
                if not adjacent:
                    yield f"{vertex}\n"
                for edge in adjacent:
                    yield f"{edge.source} {edge.target} {edge.weight}\n"

    def save_graph(self, path: str) -> None:
        """Write the current graph to ``path`` in the edge-list format."""
        lines = list(self._dump_lines())
        try:
            with open(path, "w", encoding="utf-8") as handle:
                handle.writelines(lines)
        except OSError:
            raise GraphError(f"Could not open file '{path}' for writing") from None

    def connected_components(self) -> list[UndirectedGraph]:
        self._require(
            GraphType.UNDIRECTED,
            "getConnectedComponentsOfUndirectedGraph is only available for undirected graphs",
        )
        return algorithms.connected_components(self._graph)

    def lowest_cost_walk(self, start: str, end: str) -> tuple[list, int]:
        self._require(GraphType.DIRECTED, "getLowestCostWalk is only available for directed graphs")
        return algorithms.lowest_cost_walk(self._graph, start, end)

    def topological_sort(self) -> list:
        self._require(GraphType.DIRECTED, "topologicalSort is only available for directed graphs")
        return algorithms.topological_order(self._graph)