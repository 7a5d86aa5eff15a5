# graphshell

A small graph toolkit with an interactive shell. It keeps directed or undirected
graphs whose vertices are named by strings and whose edges carry integer weights,
and it answers a few classic questions about them:

- connected components of an undirected graph (depth-first traversal),
- the lowest cost walk between two vertices of a directed graph
  (Floyd–Warshall, with negative cycle detection),
- a topological order of a directed graph,
- earliest and latest start times, total time and critical activities of an
  activity graph.

## Installing

```
pip install .
```

## The shell

```
graphshell
```

starts a prompt (`-> `) that reads one command per line. Arguments are separated
by whitespace; single or double quotes group words into one argument, and inside
quotes a backslash takes the next character literally. The shell starts with an
empty undirected graph and ends on `exit`, or with exit status 1 when its input
runs out.

| Command | What it does |
| --- | --- |
| `help` | lists the documented commands |
| `exit` | leaves the shell |
| `add_vertex <vertex_id>` | adds a vertex |
| `remove_vertex <vertex_id>` | removes a vertex and its edges |
| `is_vertex <vertex_id>` | tells whether the vertex is in the graph |
| `add_edge <from> <to> [weight = 1]` | adds an edge between existing vertices |
| `remove_edge <from> <to>` | removes an edge |
| `is_edge <from> <to>` | tells whether the edge is in the graph |
| `list_vertices` | shows every vertex |
| `list_adj <vertex_id>` | shows the neighbours of a vertex (undirected graphs only) |
| `list_edges` | shows every edge, as `a--b` or `a->b` |
| `load_graph <directed\|undirected> <file_path>` | replaces the graph with one read from a file |
| `save_graph [file_path]` | writes the graph to a file, `graph.txt` by default |
| `get_connected_components` | connected components (undirected graphs only) |
| `get_lowest_cost_walk <start> <end>` | cheapest walk and its cost (directed graphs only) |
| `get_topological_sort` | vertices in topological order (directed graphs only) |

An error in a command (a wrong number of arguments, a missing vertex, an
operation the current kind of graph does not support) is printed and the shell
carries on.

### Graph files

`load_graph` understands two layouts:

1. A header line `<vertex_count> <edge_count>`, which creates vertices `0` to
   `vertex_count - 1`, followed by `edge_count` lines `from to cost`.
2. One item per line: a single name is an isolated vertex, `from to` is an edge
   of weight 1 and `from to cost` an edge with the given weight. Reading stops
   at the first empty line.

Vertices and edges that already exist are skipped while loading. `save_graph`
writes the second layout; for an undirected graph each edge is written from both
of its ends.

## Using it from Python

```python
from graphshell.directed import DirectedGraph
from graphshell.algorithms import lowest_cost_walk, topological_order

g = DirectedGraph()
for name in ("a", "b", "c"):
    g.add_vertex(name)
g.add_edge("a", "b", 2)
g.add_edge("b", "c", 3)
g.add_edge("a", "c", 10)

path, cost = lowest_cost_walk(g, "a", "c")   # (["a", "b", "c"], 5)
order = topological_order(g)                 # ["a", "b", "c"]
```

- `graphshell.model` defines `Graph` (the shared interface), `Edge`,
  `GraphType` and `GraphError`.
- `graphshell.directed.DirectedGraph` adds `in_degree`, `out_degree`,
  `outbound_edges`, `inbound_edges`, `outbound_vertices`, `inbound_vertices`
  and `copy`.
- `graphshell.undirected.UndirectedGraph` adds `adjacent_edges` and `copy`.
- `graphshell.algorithms` holds `connected_components`, `lowest_cost_walk`
  (returns `([], 0)` when there is no walk), `find_lowest_cost_walk` /
  `reconstruct_walk`, `topological_order` (empty for an empty or cyclic graph)
  and the edge-count searches `lowest_length_forward_bfs` /
  `lowest_length_backward_bfs` (999 when unreachable).
- `graphshell.activity.ActivityGraph` schedules `Activity` vertices:
  call `compute_schedule()` first (it returns `False` on a cycle), then read
  `total_project_time()`, `critical_activities()`, `earliest_start(id)` and
  `latest_start(id)`.
- `graphshell.service.GraphService` wraps the current graph with the
  text-producing operations the shell uses, and `graphshell.console.Console`
  with `parse_line` is the command loop, usable with any text streams.

Graph operations that fail raise `graphshell.model.GraphError`; commands used
with the wrong arguments raise `graphshell.errors.InvalidUsageError`, and
operations on the wrong kind of graph raise
`graphshell.errors.InvalidOperationOnGraphType`.

## What it does not do

The shell works only with directed and undirected graphs. Activity graphs and
their schedules are available from Python alone, and the outbound and inbound
neighbour listings of `GraphService` have no shell command.

## Running the tests

```
pip install .[test]
pytest
```