from __future__ import annotations

import logging
from typing import Dict, Set

from graph import Edge, Graph, Vertex, edge_weight_order


logger = logging.getLogger(__name__)

TREE_METHODS = ("scan", "kruskal")


class UnionFind:
    """Disjoint sets of vertices with path compression and union by rank."""

    def __init__(self) -> None:
        self.parent: Dict[Vertex, Vertex] = {}
        self.rank: Dict[Vertex, int] = {}

    def add(self, x: Vertex) -> None:
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0

    def find(self, x: Vertex) -> Vertex:
        self.add(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: Vertex, b: Vertex) -> bool:
        """Merge the sets holding a and b; False if they were already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True


def scan_spanning_tree(graph: Graph) -> Set[Edge]:
    """Greedy scan over weight-sorted edges, taking each edge that first touches a vertex.

    The source and destination of every edge are checked independently, so
    the result may hold cycles and is not guaranteed to be minimal.
    """
    sorted_edges = sorted(graph.edges(), key=edge_weight_order)
    unvisited = graph.vertices()
    tree: Set[Edge] = set()

    while unvisited:
        marked = 0
        for edge in sorted_edges:
            if edge.source in unvisited:
                tree.add(edge)
                unvisited.discard(edge.source)
                marked += 1
            if edge.destination in unvisited:
                tree.add(edge)
                unvisited.discard(edge.destination)
                marked += 1
        if not marked:
            # Vertices without any edge can never be visited.
            logger.warning(
                "Spanning tree scan left %d isolated vertices unvisited: %s",
                len(unvisited),
                ", ".join(sorted(vertex.label for vertex in unvisited)),
            )
            break

    return tree


def kruskal_spanning_tree(graph: Graph) -> Set[Edge]:
    """Minimum spanning forest over the graph with edge directions ignored."""
    components = UnionFind()
    for vertex in graph.vertices():
        components.add(vertex)

    tree: Set[Edge] = set()
    for edge in sorted(graph.edges(), key=edge_weight_order):
        if components.union(edge.source, edge.destination):
            tree.add(edge)
    return tree


def minimum_spanning_tree(graph: Graph, method: str = "scan") -> Set[Edge]:
    if method == "scan":
        tree = scan_spanning_tree(graph)
    elif method == "kruskal":
        tree = kruskal_spanning_tree(graph)
    else:
        raise ValueError(f"Unknown spanning tree method {method!r}; expected one of {TREE_METHODS}.")

    logger.debug(
        "Spanning tree (%s) selected %d of %d edges, total weight %d",
        method,
        len(tree),
        len(graph.edges()),
        sum(edge.weight for edge in tree),
    )
    return tree
