from __future__ import annotations

import os

import pytest

from graph import Edge, Graph, Vertex


os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture
def labels():
    return {label: Vertex(label) for label in "ABCDEF"}


@pytest.fixture
def example_graph(labels) -> Graph:
    a, b, c, d, e, f = (labels[x] for x in "ABCDEF")
    edges = [
        Edge(a, b, 2),
        Edge(a, d, 1),
        Edge(a, d, 1),
        Edge(a, e, 3),
        Edge(b, c, 1),
        Edge(b, e, 0),
        Edge(c, d, 5),
        Edge(e, f, 10),
        Edge(c, f, 10),
    ]
    return Graph(labels.values(), edges)
