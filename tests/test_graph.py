import pytest

from graph import (
    Edge,
    Graph,
    GraphError,
    InvalidEdgeError,
    UnknownVertexError,
    Vertex,
    edge_weight_order,
)


def test_vertex_identity_is_label_based():
    assert Vertex("A") == Vertex("A")
    assert hash(Vertex("A")) == hash(Vertex("A"))
    assert len({Vertex("A"), Vertex("A"), Vertex("B")}) == 2
    assert str(Vertex("A")) == "A"


def test_vertex_rejects_missing_label():
    with pytest.raises(ValueError):
        Vertex(None)


def test_edge_weight_order_breaks_ties_by_labels():
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    edges = [Edge(b, c, 1), Edge(a, c, 1), Edge(a, b, 0), Edge(a, b, 1)]

    ordered = sorted(edges, key=edge_weight_order)

    assert ordered == [Edge(a, b, 0), Edge(a, b, 1), Edge(a, c, 1), Edge(b, c, 1)]
    assert str(Edge(a, b, 3)) == "A -[3]-> B"


def test_edge_with_unknown_endpoint_is_rejected():
    a, b = Vertex("A"), Vertex("B")

    with pytest.raises(InvalidEdgeError):
        Graph({a}, {Edge(a, b, 1)})
    with pytest.raises(InvalidEdgeError):
        Graph({b}, {Edge(a, b, 1)})


def test_negative_weight_is_rejected():
    a, b = Vertex("A"), Vertex("B")

    with pytest.raises(InvalidEdgeError):
        Graph({a, b}, {Edge(a, b, -1)})


def test_zero_weight_is_accepted():
    a, b = Vertex("A"), Vertex("B")

    graph = Graph({a, b}, {Edge(a, b, 0)})

    assert graph.edge_cost(a, b) == 0


def test_conflicting_duplicate_edge_is_rejected():
    a, b = Vertex("A"), Vertex("B")

    with pytest.raises(InvalidEdgeError):
        Graph({a, b}, [Edge(a, b, 3), Edge(a, b, 5)])


def test_identical_duplicate_edges_are_unified():
    a, b = Vertex("A"), Vertex("B")

    graph = Graph({a, b}, [Edge(a, b, 3), Edge(Vertex("A"), Vertex("B"), 3)])

    assert graph.edges() == {Edge(a, b, 3)}
    assert graph.outgoing_edges(a) == {Edge(a, b, 3)}
    assert graph.edge_cost(a, b) == 3


def test_invalid_edge_error_is_a_graph_error_and_value_error():
    assert issubclass(InvalidEdgeError, GraphError)
    assert issubclass(InvalidEdgeError, ValueError)
    assert issubclass(UnknownVertexError, GraphError)
    assert issubclass(UnknownVertexError, LookupError)


def test_edges_are_directed(labels, example_graph):
    assert example_graph.edge_cost(labels["A"], labels["B"]) == 2
    assert example_graph.edge_cost(labels["B"], labels["A"]) is None


def test_isolated_vertices_are_kept():
    a, b, lonely = Vertex("A"), Vertex("B"), Vertex("Z")

    graph = Graph({a, b, lonely}, {Edge(a, b, 1)})

    assert graph.vertices() == {a, b, lonely}
    assert lonely in graph
    assert graph.has_vertex(lonely)
    assert len(graph) == 3
    assert graph.outgoing_edges(lonely) == set()


def test_edges_is_union_of_outgoing_sets(example_graph):
    union = set()
    for vertex in example_graph.vertices():
        union |= example_graph.outgoing_edges(vertex)

    assert example_graph.edges() == union
    assert len(example_graph.edges()) == 8


def test_adjacent_vertices(labels, example_graph):
    assert example_graph.adjacent_vertices(labels["A"]) == {labels["B"], labels["D"], labels["E"]}
    assert example_graph.adjacent_vertices(labels["B"]) == {labels["C"], labels["E"]}


def test_adjacent_vertices_of_sink_is_empty(labels, example_graph):
    assert example_graph.adjacent_vertices(labels["F"]) == set()
    assert example_graph.adjacent_vertices(labels["D"]) == set()


def test_edge_cost_without_direct_edge_is_none(labels, example_graph):
    assert example_graph.edge_cost(labels["A"], labels["F"]) is None
    assert example_graph.edge_cost(labels["A"], labels["A"]) is None


@pytest.mark.parametrize(
    "query",
    [
        lambda g, x, known: g.outgoing_edges(x),
        lambda g, x, known: g.adjacent_vertices(x),
        lambda g, x, known: g.edge_cost(x, known),
        lambda g, x, known: g.edge_cost(known, x),
        lambda g, x, known: g.path_cost([known, x]),
    ],
)
def test_unknown_vertex_queries_raise(labels, example_graph, query):
    with pytest.raises(UnknownVertexError):
        query(example_graph, Vertex("Q"), labels["A"])


def test_returned_sets_do_not_alias_graph_state(labels, example_graph):
    example_graph.vertices().clear()
    example_graph.edges().clear()
    example_graph.outgoing_edges(labels["A"]).clear()

    assert len(example_graph.vertices()) == 6
    assert len(example_graph.edges()) == 8
    assert len(example_graph.outgoing_edges(labels["A"])) == 3


def test_path_cost(labels, example_graph):
    a, b, e, f = (labels[x] for x in "ABEF")

    assert example_graph.path_cost([a, b, e, f]) == 12
    assert example_graph.path_cost([a]) == 0
    assert example_graph.path_cost([]) == 0
    with pytest.raises(InvalidEdgeError):
        example_graph.path_cost([a, f])


def test_from_labels_matches_explicit_construction(example_graph):
    graph = Graph.from_labels(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 2),
            ("A", "D", 1),
            ("A", "E", 3),
            ("B", "C", 1),
            ("B", "E", 0),
            ("C", "D", 5),
            ("E", "F", 10),
            ("C", "F", 10),
        ],
    )

    assert graph.vertices() == example_graph.vertices()
    assert graph.edges() == example_graph.edges()


def test_from_labels_reports_unknown_labels():
    with pytest.raises(InvalidEdgeError):
        Graph.from_labels(["A"], [("A", "B", 1)])


def test_empty_graph():
    graph = Graph([], [])

    assert graph.vertices() == set()
    assert graph.edges() == set()
    assert str(graph) == ""


def test_str_lists_edges_by_weight():
    graph = Graph.from_labels(["A", "B", "C"], [("A", "C", 4), ("A", "B", 1)])

    assert str(graph) == "A -[1]-> B\nA -[4]-> C"


@pytest.mark.parametrize("weight", [-0.5, 2.5, 2.9, "3", True, None])
def test_non_integer_weight_is_rejected(weight):
    a, b = Vertex("A"), Vertex("B")

    with pytest.raises(InvalidEdgeError):
        Graph({a, b}, {Edge(a, b, weight)})
    with pytest.raises(InvalidEdgeError):
        Graph.from_labels(["A", "B"], [("A", "B", weight)])


def test_vertex_rejects_non_string_label():
    with pytest.raises(ValueError):
        Vertex(1)


def test_from_labels_turns_numeric_labels_into_strings():
    graph = Graph.from_labels([1, 2, "3"], [(1, 2, 4), ("2", 3, 1)])

    assert graph.vertices() == {Vertex("1"), Vertex("2"), Vertex("3")}
    assert graph.edge_cost(Vertex("1"), Vertex("2")) == 4
    assert str(graph) == "2 -[1]-> 3\n1 -[4]-> 2"


def test_from_labels_rejects_missing_label():
    with pytest.raises(ValueError):
        Graph.from_labels(["A", None], [])
