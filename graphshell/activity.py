"""Activity-on-vertex project graphs with earliest/latest start scheduling."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .directed import DirectedGraph
from .model import GraphType


@dataclass(eq=False)
class Activity:
    """A project activity; activities are identified by ``id`` alone."""

    id: int
    name: str = ""
    duration: int = 0
    earliest_start: int = 0
    latest_start: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Activity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class ActivityGraph(DirectedGraph[Activity]):
    """A directed graph of activities where an edge means "must finish before"."""

    graph_type = GraphType.ACTIVITY

    def __init__(self) -> None:
        super().__init__()
        self._sorted_order: list[Activity] = []
        self._total_project_time = 0

    def compute_schedule(self) -> bool:
        """Compute earliest and latest starts; return False if the graph has a cycle."""
        remaining = {a.id: self.in_degree(a) for a in self}
        queue = deque(a for a in self if remaining[a.id] == 0)

        order: list[Activity] = []
        while queue:
            activity = queue.popleft()
            order.append(activity)
            for successor in self.outbound_vertices(activity):
                stored = self.get_vertex(successor)
                remaining[stored.id] -= 1
                stored.earliest_start = max(
                    stored.earliest_start, activity.earliest_start + activity.duration
                )
                if remaining[stored.id] == 0:
                    queue.append(stored)
        self._sorted_order = order

        if len(order) != self.vertex_count():
            return False

        self._total_project_time = max(
            (a.earliest_start + a.duration for a in self), default=0
        )

        for activity in reversed(order):
            successors = [self.get_vertex(s) for s in self.outbound_vertices(activity)]
            if not successors:
                activity.latest_start = activity.earliest_start
            else:
                activity.latest_start = min(s.latest_start - activity.duration for s in successors)
        return True

    def total_project_time(self) -> int:
        """Finish time of the whole project, as of the last schedule computation."""
        return self._total_project_time

    def critical_activities(self) -> list[Activity]:
        """Activities whose earliest and latest start coincide."""
        return [a for a in self if a.earliest_start == a.latest_start]

    def earliest_start(self, activity_id: int) -> int:
        return self.get_vertex(Activity(activity_id)).earliest_start

    def latest_start(self, activity_id: int) -> int:
        return self.get_vertex(Activity(activity_id)).latest_start