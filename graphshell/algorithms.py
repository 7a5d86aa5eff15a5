"""Graph algorithms: breadth-first distances, lowest cost walks, topological order, components."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Hashable

from .directed import DirectedGraph
from .model import GraphError
from .undirected import UndirectedGraph

UNREACHABLE = 999
"""Length reported by the breadth-first searches when the target cannot be reached."""

INF = math.inf


def lowest_length_forward_bfs(graph: DirectedGraph, start: Hashable, end: Hashable) -> int:
    """Number of edges on a shortest walk from ``start`` to ``end``, searching forwards."""
    distance = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for edge in graph.outbound_edges(current):
            if edge.target == end:
                return distance[current] + 1
            if edge.target not in distance:
                distance[edge.target] = distance[current] + 1
                queue.append(edge.target)
    return UNREACHABLE


def lowest_length_backward_bfs(graph: DirectedGraph, start: Hashable, end: Hashable) -> int:
    """Number of edges on a shortest walk from ``start`` to ``end``, searching backwards from ``end``."""
    distance = {end: 0}
    queue = deque([end])
    while queue:
        current = queue.popleft()
        for edge in graph.inbound_edges(current):
            if edge.source == start:
                return distance[current] + 1
            if edge.source not in distance:
                distance[edge.source] = distance[current] + 1
                queue.append(edge.source)
    return UNREACHABLE


@dataclass
class WalkResult:
    """All-pairs lowest costs with the predecessor table needed to rebuild walks."""

    dist: list[list[float]]
    pred: list[list[int | None]]
    index: dict
    reverse_index: list


def find_lowest_cost_walk(graph: DirectedGraph) -> WalkResult:
    """Compute lowest walk costs between every pair of vertices.

    Raises GraphError when the graph holds a cycle of negative cost.
    """
    reverse_index = list(graph)
    index = {v: i for i, v in enumerate(reverse_index)}
    n = len(reverse_index)
    dist: list[list[float]] = [[INF] * n for _ in range(n)]
    pred: list[list[int | None]] = [[None] * n for _ in range(n)]

    for vertex, u in index.items():
        dist[u][u] = 0
        pred[u][u] = u
        for edge in graph.outbound_edges(vertex):
            w = index[edge.target]
            dist[u][w] = edge.weight
            pred[u][w] = u

    for k in range(n):
        row_k = dist[k]
        pred_k = pred[k]
        for i in range(n):
            via = dist[i][k]
            if via == INF:
                continue
            row_i = dist[i]
            pred_i = pred[i]
            for j, cost in enumerate(row_k):
                candidate = via + cost
                if candidate < row_i[j]:
                    row_i[j] = candidate
                    pred_i[j] = pred_k[j]

    if any(dist[i][i] < 0 for i in range(n)):
        raise GraphError("Negative cost cycle detected.")

    return WalkResult(dist, pred, index, reverse_index)


def reconstruct_walk(result: WalkResult, start: Hashable, end: Hashable) -> tuple[list, int]:
    """Rebuild the lowest cost walk from ``start`` to ``end``; ``([], 0)`` when there is none."""
    try:
        s = result.index[start]
        t = result.index[end]
    except KeyError:
        raise GraphError("Vertex not in the graph") from None

    if result.dist[s][t] == INF:
        return [], 0

    indices = []
    at = t
    while at != s:
        if at is None:
            return [], 0
        indices.append(at)
        at = result.pred[s][at]
    indices.append(s)
    indices.reverse()
    return [result.reverse_index[i] for i in indices], result.dist[s][t]


def lowest_cost_walk(graph: DirectedGraph, start: Hashable, end: Hashable) -> tuple[list, int]:
    """Lowest cost walk between two vertices and its cost."""
    return reconstruct_walk(find_lowest_cost_walk(graph), start, end)


def topological_order(graph: DirectedGraph) -> list:
    """Vertices in topological order, or an empty list if the graph is empty or cyclic."""
    aux = graph.copy()
    ready = [v for v in aux if aux.in_degree(v) == 0]
    if not ready:
        return []
    order = []
    while ready:
        source = ready.pop()
        order.append(source)
        for target in aux.outbound_vertices(source):
            aux.remove_edge(source, target)
            if aux.in_degree(target) == 0:
                ready.append(target)
    if aux.edge_count() != 0:
        return []
    return order


def connected_components(graph: UndirectedGraph) -> list[UndirectedGraph]:
    """Connected components found by depth-first traversal, each as a spanning tree."""
    components: list[UndirectedGraph] = []
    visited: set = set()

    for vertex in graph:
        if vertex in visited:
            continue
        component: UndirectedGraph = UndirectedGraph()
        component.add_vertex(vertex)
        components.append(component)
        visited.add(vertex)
        stack = [vertex]
        while stack:
            top = stack.pop()
            for edge in graph.adjacent_edges(top):
                neighbour = edge.target
                if neighbour in visited:
                    continue
                stack.append(neighbour)
                visited.add(neighbour)
                if not component.is_vertex(neighbour):
                    component.add_vertex(neighbour)
                component.add_edge(top, neighbour)
    return components