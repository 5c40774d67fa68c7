from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Optional, Sequence, Set, Tuple


logger = logging.getLogger(__name__)


class GraphError(Exception):
    """Base class for errors raised by the graph engine."""


class InvalidEdgeError(GraphError, ValueError):
    """Raised when an edge cannot be part of the graph."""


class UnknownVertexError(GraphError, LookupError):
    """Raised when a query names a vertex that is not in the graph."""


@dataclass(frozen=True)
class Vertex:
    label: str

    def __post_init__(self) -> None:
        if self.label is None:
            raise ValueError("Vertex label must not be None.")
        if not isinstance(self.label, str):
            raise ValueError(f"Vertex label must be a string, got {self.label!r}.")

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Edge:
    source: Vertex
    destination: Vertex
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -[{self.weight}]-> {self.destination}"


def _as_label(value: object) -> Optional[str]:
    return value if value is None or isinstance(value, str) else str(value)


def edge_weight_order(edge: Edge) -> Tuple[int, str, str]:
    """Sort key for edges: weight first, then source and destination labels."""
    return edge.weight, edge.source.label, edge.destination.label


class Graph:
    """Immutable directed weighted graph stored as an adjacency list."""

    def __init__(self, vertices: Iterable[Vertex], edges: Iterable[Edge]) -> None:
        self._adjacency: Dict[Vertex, FrozenSet[Edge]] = {}

        outgoing: Dict[Vertex, Dict[Vertex, Edge]] = {vertex: {} for vertex in vertices}
        unified = 0
        for edge in edges:
            if edge.source not in outgoing or edge.destination not in outgoing:
                raise InvalidEdgeError(f"Edge {edge} references a vertex outside the graph.")
            if isinstance(edge.weight, bool) or not isinstance(edge.weight, int):
                raise InvalidEdgeError(f"Edge {edge} must have an integer weight.")
            if edge.weight < 0:
                raise InvalidEdgeError(f"Edge {edge} has a negative weight.")

            existing = outgoing[edge.source].get(edge.destination)
            if existing is not None:
                if existing.weight != edge.weight:
                    raise InvalidEdgeError(
                        f"Edge {edge} conflicts with {existing}: same endpoints, different weight."
                    )
                unified += 1
                continue
            outgoing[edge.source][edge.destination] = edge

        for vertex, targets in outgoing.items():
            self._adjacency[vertex] = frozenset(targets.values())

        logger.debug(
            "Graph built with %d vertices and %d edges (%d duplicate edges unified)",
            len(self._adjacency),
            sum(len(out) for out in self._adjacency.values()),
            unified,
        )

    @classmethod
    def from_labels(
        cls,
        nodes: Iterable[str],
        edges: Iterable[Tuple[str, str, int]],
    ) -> Graph:
        """Build a graph from vertex labels and ``(origin, target, weight)`` triples."""
        # Configuration files may spell labels as numbers; identity stays textual.
        vertices: Dict[str, Vertex] = {}
        for label in nodes:
            vertex = Vertex(_as_label(label))
            vertices[vertex.label] = vertex

        edge_objects = []
        for origin, target, weight in edges:
            # Unknown labels still become vertices so the constructor reports them.
            source = vertices.get(_as_label(origin)) or Vertex(_as_label(origin))
            destination = vertices.get(_as_label(target)) or Vertex(_as_label(target))
            edge_objects.append(Edge(source, destination, weight))
        return cls(vertices.values(), edge_objects)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return "\n".join(str(edge) for edge in sorted(self.edges(), key=edge_weight_order))

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adjacency

    def _require(self, vertex: Vertex) -> FrozenSet[Edge]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertexError(f"Vertex {vertex} is not in the graph.") from None

    def vertices(self) -> Set[Vertex]:
        return set(self._adjacency)

    def edges(self) -> Set[Edge]:
        edges: Set[Edge] = set()
        for outgoing in self._adjacency.values():
            edges.update(outgoing)
        return edges

    def outgoing_edges(self, vertex: Vertex) -> Set[Edge]:
        return set(self._require(vertex))

    def adjacent_vertices(self, vertex: Vertex) -> Set[Vertex]:
        """Return every ``w`` with an edge ``vertex -> w``; empty for a sink."""
        return {edge.destination for edge in self._require(vertex)}

    def edge_cost(self, origin: Vertex, target: Vertex) -> Optional[int]:
        """Weight of the direct edge ``origin -> target``, or ``None`` if there is none."""
        outgoing = self._require(origin)
        self._require(target)
        for edge in outgoing:
            if edge.destination == target:
                return edge.weight
        return None

    def path_cost(self, path: Sequence[Vertex]) -> int:
        """Return the total cost of walking along the given vertex sequence."""
        for vertex in path:
            self._require(vertex)
        if len(path) < 2:
            return 0

        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            edge_cost = self.edge_cost(u, v)
            if edge_cost is None:
                raise InvalidEdgeError(f"Edge {u} -> {v} not present in graph.")
            total_cost += edge_cost
        return total_cost
