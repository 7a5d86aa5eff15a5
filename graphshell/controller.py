"""Command controller: binds the console's commands to graph service operations."""

from __future__ import annotations

import re
from typing import Callable, Sequence

from .console import CommandResult, Console
from .errors import InvalidUsageError
from .service import GraphService

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")
DEFAULT_SAVE_PATH = "graph.txt"


def _expect(args: Sequence[str], counts: tuple[int, ...], usage: str) -> None:
    if len(args) not in counts:
        raise InvalidUsageError(usage)


def _parse_weight(token: str) -> int:
    """Read the integer at the start of ``token``; trailing characters are ignored."""
    match = _LEADING_INTEGER.match(token)
    if match is None:
        raise InvalidUsageError(f"Invalid weight '{token}'")
    return int(match.group(1))


class CommandController:
    """Registers and documents every graph command on a console."""

    def __init__(self, console: Console, service: GraphService) -> None:
        self._console = console
        self._service = service

        console.register_command("help", self._help)
        for name, description, handler in self._command_table():
            console.document_command(name, description)
            console.register_command(name, handler)

    def _command_table(self) -> list[tuple[str, str, Callable[[list[str]], CommandResult]]]:
        return [
            ("exit", "Exits the program", self._exit),
            ("add_vertex", "Adds vertex to the graph", self._add_vertex),
            ("remove_vertex", "Removes vertex from the graph", self._remove_vertex),
            ("is_vertex", "Checks if the vertex is in the graph", self._is_vertex),
            (
                "add_edge",
                "Adds an edge between two existing vertices to the graph",
                self._add_edge,
            ),
            ("remove_edge", "Removes edge from the graph", self._remove_edge),
            ("is_edge", "Checks if the edge is in the graph", self._is_edge),
            (
                "list_vertices",
                "Display all the vertices in the current graph",
                self._list_vertices,
            ),
            (
                "list_adj",
                "Display all the vertices adjacent with the given vertex",
                self._list_adj,
            ),
            ("list_edges", "Display all the edges in the graph", self._list_edges),
            ("load_graph", "Loads a graph from a file", self._load_graph),
            ("save_graph", "Saves the graph to file", self._save_graph),
            (
                "get_connected_components",
                "Returns the connected components of the undirected graph",
                self._connected_components,
            ),
            (
                "get_lowest_cost_walk",
                "Returns the lowest cost walk between two vertices",
                self._lowest_cost_walk,
            ),
            (
                "get_topological_sort",
                "Returns the vertices topologically sorted",
                self._topological_sort,
            ),
        ]

    def _help(self, args: list[str]) -> CommandResult:
        _expect(args, (1,), "`help` command does not get arguments!")
        manual = "\n".join(
            f"{command} -> {description}" for command, description in self._console.man().items()
        )
        return CommandResult(manual)

    def _exit(self, args: list[str]) -> CommandResult:
        return CommandResult("Exiting", True)

    def _add_vertex(self, args: list[str]) -> CommandResult:
        _expect(args, (2,), "Usage: add_vertex <vertex_id>")
        self._service.add_vertex(args[1])
        return CommandResult("Vertex added.")

    def _remove_vertex(self, args: list[str]) -> CommandResult:
        _expect(args, (2,), "Usage: remove_vertex <vertex_id>")
        self._service.remove_vertex(args[1])
        return CommandResult("Vertex removed.")

    def _is_vertex(self, args: list[str]) -> CommandResult:
        _expect(args, (2,), "Usage: is_vertex <vertex_id>")
        vertex = args[1]
        verdict = " is " if self._service.is_vertex(vertex) else " is NOT "
        return CommandResult(f"Vertex {vertex}{verdict}in the graph")

    def _add_edge(self, args: list[str]) -> CommandResult:
        _expect(
            args, (3, 4), "Usage: add_edge <from_vertex_id> <to_vertex_id> [weight = 1]"
        )
        weight = _parse_weight(args[3]) if len(args) == 4 else 1
        self._service.add_edge(args[1], args[2], weight)
        return CommandResult("Edge added.")

    def _remove_edge(self, args: list[str]) -> CommandResult:
        _expect(args, (3,), "Usage: remove_edge <from_vertex_id> <to_vertex_id>")
        self._service.remove_edge(args[1], args[2])
        return CommandResult("Edge removed.")

    def _is_edge(self, args: list[str]) -> CommandResult:
        _expect(args, (3,), "Usage: is_edge <from_vertex_id> <to_vertex_id>")
        source, target = args[1], args[2]
        verdict = " is " if self._service.is_edge(source, target) else " is NOT "
        return CommandResult(f"Edge {source}->{target}{verdict}in the graph")

    def _list_vertices(self, args: list[str]) -> CommandResult:
        _expect(args, (1,), "Usage: list_vertices")
        return CommandResult(self._service.vertices())

    def _list_adj(self, args: list[str]) -> CommandResult:
        _expect(args, (2,), "Usage: list_adj <vertex_id>")
        return CommandResult(self._service.adjacent_edges(args[1]))

    def _list_edges(self, args: list[str]) -> CommandResult:
        _expect(args, (1,), "Usage: list_edges")
        return CommandResult(self._service.edges())

    def _load_graph(self, args: list[str]) -> CommandResult:
        _expect(args, (3,), "Usage: load_graph <graph_type> <file_path>")
        graph_type, path = args[1], args[2]
        return CommandResult(self._service.load_graph(path, graph_type))

    def _save_graph(self, args: list[str]) -> CommandResult:
        _expect(args, (1, 2), "Usage: save_graph [file_path]")
        path = args[1] if len(args) == 2 else DEFAULT_SAVE_PATH
        self._service.save_graph(path)
        return CommandResult("Graph saved successfully")

    def _connected_components(self, args: list[str]) -> CommandResult:
        _expect(args, (1,), "Usage: get_connected_components")
        blocks = [
            f"Component {number}\n" + "".join(f"{vertex} " for vertex in component)
            for number, component in enumerate(self._service.connected_components(), start=1)
        ]
        return CommandResult("\n".join(blocks))

    def _lowest_cost_walk(self, args: list[str]) -> CommandResult:
        _expect(args, (3,), "Usage: get_shortest_path <start> <end>")
        start, end = args[1], args[2]
        path, cost = self._service.lowest_cost_walk(start, end)
        if not path:
            return CommandResult(f"There is not path between {start} and {end}")
        walk = "".join(f"{vertex} " for vertex in path)
        return CommandResult(
            f"The shortest path between {start} and {end} is:\n{walk}\nWith cost {int(cost)}"
        )

    def _topological_sort(self, args: list[str]) -> CommandResult:
        _expect(args, (1,), "Usage: get_topological_sort")
        output = "".join(f"{vertex} " for vertex in self._service.topological_sort())
        if not output:
            return CommandResult("Unable to topologically sort")
        return CommandResult(output)