"""Core graph vocabulary: graph kinds, edges and the abstract graph interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class GraphError(RuntimeError):
    """Raised when an operation does not fit the current state of a graph."""


class GraphType(Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"
    ACTIVITY = "activity"


@dataclass(frozen=True)
class Edge(Generic[T]):
    """An edge between two vertices; identity ignores the weight."""

    source: T
    target: T
    weight: int = field(default=1, compare=False)


class Graph(ABC, Generic[T]):
    """Interface shared by every graph kind."""

    graph_type: ClassVar[GraphType]

    @abstractmethod
    def add_vertex(self, v: T) -> None:
        """Add a new vertex; raise GraphError if it is already present."""

    @abstractmethod
    def add_edge(self, source: T, target: T, weight: int = 1) -> None:
        """Add an edge between two existing vertices."""

    @abstractmethod
    def remove_vertex(self, v: T) -> None:
        """Remove a vertex together with its incident edges."""

    @abstractmethod
    def remove_edge(self, source: T, target: T) -> None:
        """Remove an existing edge."""

    @abstractmethod
    def is_vertex(self, v: T) -> bool:
        """Tell whether the vertex is in the graph."""

    @abstractmethod
    def is_edge(self, source: T, target: T) -> bool:
        """Tell whether the edge is in the graph."""

    @abstractmethod
    def get_vertex(self, v: T) -> T:
        """Return the stored vertex equal to ``v``."""

    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices."""

    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges."""

    @abstractmethod
    def edge_weight(self, source: T, target: T) -> int:
        """Weight of an existing edge."""

    @abstractmethod
    def edges(self) -> list[Edge[T]]:
        """All edges of the graph."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every vertex and edge."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Iterate over the vertices."""