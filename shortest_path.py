from __future__ import annotations

import logging
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Dict, Iterator, List, Set, Tuple, Union

from graph import Edge, Graph, UnknownVertexError, Vertex


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    vertices: Tuple[Vertex, ...]
    cost: int

    @property
    def source(self) -> Vertex:
        return self.vertices[0]

    @property
    def destination(self) -> Vertex:
        return self.vertices[-1]

    def edges(self, graph: Graph) -> List[Edge]:
        """Return the graph edges walked by this path, in order."""
        walked: List[Edge] = []
        for u, v in zip(self.vertices[:-1], self.vertices[1:]):
            walked.extend(edge for edge in graph.outgoing_edges(u) if edge.destination == v)
        return walked

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __str__(self) -> str:
        return f"{' -> '.join(str(vertex) for vertex in self.vertices)} (cost {self.cost})"


@dataclass(frozen=True)
class NoPathFound:
    """Outcome of a shortest-path query whose destination is unreachable."""

    source: Vertex
    destination: Vertex

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"No path from {self.source} to {self.destination}."


def dijkstra(graph: Graph, source: Vertex) -> Tuple[Dict[Vertex, int], Dict[Vertex, Vertex]]:
    """Compute single-source shortest paths using Dijkstra.

    costs[v] stores the final distance from source to v, and parents[v]
    remembers the previous vertex along the shortest path. Vertices that
    cannot be reached from source appear in neither map.
    """
    if source not in graph:
        raise UnknownVertexError(f"Vertex {source} is not in the graph.")

    costs: Dict[Vertex, int] = {source: 0}
    parents: Dict[Vertex, Vertex] = {}
    finalised: Set[Vertex] = set()

    # Entries are ranked by (cost, label); labels keep ties deterministic.
    queue: List[Tuple[int, str, Vertex]] = [(0, source.label, source)]

    while queue:
        cost_u, _, u = heappop(queue)
        if u in finalised:
            # Stale entry left behind by a later decrease-key push.
            continue
        finalised.add(u)

        for edge in graph.outgoing_edges(u):
            v = edge.destination
            if v in finalised:
                continue
            candidate = cost_u + edge.weight
            if v not in costs or candidate < costs[v]:
                costs[v] = candidate
                parents[v] = u
                heappush(queue, (candidate, v.label, v))

    return costs, parents


def shortest_path(graph: Graph, source: Vertex, destination: Vertex) -> Union[Path, NoPathFound]:
    """Return the cheapest path from source to destination, or ``NoPathFound``."""
    if destination not in graph:
        raise UnknownVertexError(f"Vertex {destination} is not in the graph.")

    costs, parents = dijkstra(graph, source)
    if destination not in costs:
        logger.debug("No path from %s to %s", source, destination)
        return NoPathFound(source, destination)

    vertices: List[Vertex] = [destination]
    while vertices[-1] != source:
        vertices.append(parents[vertices[-1]])
    vertices.reverse()

    path = Path(tuple(vertices), costs[destination])
    logger.debug("Shortest path %s", path)
    return path
