import pytest

from graphshell.directed import DirectedGraph
from graphshell.errors import InvalidOperationOnGraphType
from graphshell.model import GraphError, GraphType
from graphshell.service import GraphService
from graphshell.undirected import UndirectedGraph


def _directed(*edges, vertices=()):
    service = GraphService(DirectedGraph())
    for v in vertices:
        service.add_vertex(v)
    for source, target, weight in edges:
        for v in (source, target):
            if not service.is_vertex(v):
                service.add_vertex(v)
        service.add_edge(source, target, weight)
    return service


def _write(tmp_path, text, name="g.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_default_graph_is_undirected():
    service = GraphService()
    service.add_vertex("a")
    assert service.graph.graph_type is GraphType.UNDIRECTED
    assert service.is_vertex("a")


def test_vertex_and_edge_management():
    service = GraphService()
    service.add_vertex("a")
    service.add_vertex("b")
    service.add_edge("a", "b")
    assert service.is_edge("a", "b")
    assert service.is_edge("b", "a")
    service.remove_edge("a", "b")
    assert not service.is_edge("a", "b")
    service.remove_vertex("a")
    assert not service.is_vertex("a")


def test_duplicate_vertex_raises():
    service = GraphService()
    service.add_vertex("a")
    with pytest.raises(GraphError, match="Vertex Already added"):
        service.add_vertex("a")


def test_vertices_lists_each_followed_by_space():
    service = GraphService()
    service.add_vertex("a")
    service.add_vertex("b")
    listing = service.vertices()
    assert listing.split() == ["a", "b"]
    assert listing.endswith(" ")


def test_adjacent_edges_lists_neighbours():
    service = GraphService()
    for v in "abc":
        service.add_vertex(v)
    service.add_edge("a", "b")
    service.add_edge("c", "a")
    out = service.adjacent_edges("a").split("\n")
    assert out[0] == "The adjacent vertices of a are:"
    assert set(out[1].split()) == {"b", "c"}


def test_adjacent_edges_without_neighbours():
    service = GraphService()
    service.add_vertex("a")
    assert service.adjacent_edges("a") == "The vertex a has no adjacent vertices"


def test_adjacent_edges_rejects_directed():
    service = _directed(("a", "b", 1))
    with pytest.raises(InvalidOperationOnGraphType):
        service.adjacent_edges("a")


def test_outbound_and_inbound_edges():
    service = _directed(("a", "b", 1), ("c", "b", 2))
    inbound = service.inbound_edges("b").split("\n")
    assert inbound[0] == "The inbound vertices of b are:"
    assert set(inbound[1].split()) == {"a", "c"}
    assert service.outbound_edges("b") == "The vertex b has no outbound vertices"
    assert service.outbound_edges("a").split("\n")[1].split() == ["b"]


def test_outbound_rejects_undirected():
    with pytest.raises(InvalidOperationOnGraphType):
        GraphService().outbound_edges("a")
    with pytest.raises(InvalidOperationOnGraphType):
        GraphService().inbound_edges("a")


def test_edges_uses_delimiter_by_kind():
    directed = _directed(("a", "b", 1))
    assert directed.edges().split("\n")[1:] == ["a->b"]
    undirected = GraphService()
    undirected.add_vertex("a")
    undirected.add_vertex("b")
    undirected.add_edge("a", "b")
    assert undirected.edges().split("\n")[1:] == ["a--b"]


def test_edges_of_empty_graph():
    assert GraphService().edges() == "The edges in the graph are:"


def test_load_counted_format(tmp_path):
    path = _write(tmp_path, "3 2\n0 1 5\n1 2 7\n")
    service = GraphService()
    assert service.load_graph(path, "directed") == "Successfully loaded the graph"
    assert service.graph.graph_type is GraphType.DIRECTED
    assert service.vertices().split() == ["0", "1", "2"]
    assert service.graph.edge_weight("0", "1") == 5
    assert service.graph.edge_weight("1", "2") == 7


def test_load_counted_format_adds_unlisted_vertices(tmp_path):
    path = _write(tmp_path, "2 1\n0 5 3\n")
    service = GraphService()
    service.load_graph(path, "undirected")
    assert service.is_vertex("5")
    assert service.is_edge("0", "5")


def test_load_counted_format_bad_edge_line(tmp_path):
    path = _write(tmp_path, "2 1\n0 1\n")
    with pytest.raises(GraphError, match="Expected format 'from to cost' on line 2"):
        GraphService().load_graph(path, "directed")


def test_load_counted_format_truncated(tmp_path):
    path = _write(tmp_path, "2 2\n0 1 3\n")
    with pytest.raises(GraphError, match="Unexpected end of file while reading edges"):
        GraphService().load_graph(path, "directed")


def test_load_edge_list_stops_at_empty_line(tmp_path):
    path = _write(tmp_path, "a b 4\nc\nb d\n\ne f\n")
    service = GraphService()
    service.load_graph(path, "undirected")
    assert service.graph.edge_weight("a", "b") == 4
    assert service.graph.edge_weight("b", "d") == 1
    assert service.is_vertex("c")
    assert service.adjacent_edges("c") == "The vertex c has no adjacent vertices"
    assert not service.is_vertex("e")


def test_load_rejects_long_line(tmp_path):
    path = _write(tmp_path, "a b 1 2\n")
    with pytest.raises(GraphError, match="Invalid line format: 'a b 1 2'"):
        GraphService().load_graph(path, "directed")


def test_load_rejects_bad_cost(tmp_path):
    path = _write(tmp_path, "a b x\n")
    with pytest.raises(GraphError):
        GraphService().load_graph(path, "directed")


def test_load_empty_file(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(GraphError, match="Empty file"):
        GraphService().load_graph(path, "directed")


def test_load_missing_file(tmp_path):
    with pytest.raises(GraphError, match="Could not open file"):
        GraphService().load_graph(str(tmp_path / "missing.txt"), "directed")


def test_load_invalid_graph_type(tmp_path):
    path = _write(tmp_path, "a b\n")
    with pytest.raises(GraphError, match="'weird' is not a valid graph type"):
        GraphService().load_graph(path, "weird")


def test_load_replaces_current_graph(tmp_path):
    path = _write(tmp_path, "a b\n")
    service = GraphService()
    service.add_vertex("x")
    service.load_graph(path, "directed")
    assert not service.is_vertex("x")
    assert service.is_edge("a", "b")
    assert not service.is_edge("b", "a")


def test_save_and_load_directed_round_trip(tmp_path):
    service = _directed(("a", "b", 3), ("b", "c", -2), ("c", "a", 4), vertices=("lonely",))
    path = str(tmp_path / "out.txt")
    service.save_graph(path)
    loaded = GraphService()
    loaded.load_graph(path, "directed")
    assert set(loaded.graph) == set(service.graph)
    as_tuples = lambda g: {(e.source, e.target, e.weight) for e in g.edges()}  # noqa: E731
    assert as_tuples(loaded.graph) == as_tuples(service.graph)


def test_save_and_load_undirected_round_trip(tmp_path):
    service = GraphService(UndirectedGraph())
    for v in ("a", "b", "c", "d"):
        service.add_vertex(v)
    service.add_edge("a", "b", 6)
    service.add_edge("c", "b", 2)
    path = str(tmp_path / "out.txt")
    service.save_graph(path)
    loaded = GraphService()
    loaded.load_graph(path, "undirected")
    assert set(loaded.graph) == set(service.graph)
    as_sets = lambda g: {(frozenset((e.source, e.target)), e.weight) for e in g.edges()}  # noqa: E731
    assert as_sets(loaded.graph) == as_sets(service.graph)


def test_save_to_directory_fails(tmp_path):
    with pytest.raises(GraphError, match="Could not open file"):
        GraphService().save_graph(str(tmp_path))


def test_connected_components():
    service = GraphService()
    for v in "abc":
        service.add_vertex(v)
    service.add_edge("a", "b")
    components = service.connected_components()
    assert sorted(sorted(c) for c in components) == [["a", "b"], ["c"]]


def test_connected_components_rejects_directed():
    with pytest.raises(InvalidOperationOnGraphType):
        _directed(("a", "b", 1)).connected_components()


def test_lowest_cost_walk():
    service = _directed(("a", "b", 1), ("b", "c", 2), ("a", "c", 10))
    path, cost = service.lowest_cost_walk("a", "c")
    assert path == ["a", "b", "c"]
    assert cost == 3


def test_lowest_cost_walk_without_path():
    service = _directed(("a", "b", 1), vertices=("z",))
    assert service.lowest_cost_walk("a", "z") == ([], 0)


def test_lowest_cost_walk_rejects_undirected():
    with pytest.raises(InvalidOperationOnGraphType):
        GraphService().lowest_cost_walk("a", "b")


def test_topological_sort():
    service = _directed(("a", "b", 1), ("b", "c", 1))
    assert service.topological_sort() == ["a", "b", "c"]


def test_topological_sort_of_cycle_is_empty():
    service = _directed(("a", "b", 1), ("b", "a", 1))
    assert service.topological_sort() == []


def test_topological_sort_rejects_undirected():
    with pytest.raises(InvalidOperationOnGraphType):
        GraphService().topological_sort()