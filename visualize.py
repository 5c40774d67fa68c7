from __future__ import annotations

from pathlib import Path as FilePath
from typing import Dict, Iterable, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Edge, Graph
from shortest_path import NoPathFound, Path


def build_networkx_graph(graph: Graph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(sorted(vertex.label for vertex in graph.vertices()))
    for edge in graph.edges():
        g.add_edge(edge.source.label, edge.destination.label, weight=edge.weight)
    return g


def compute_layout(graph: nx.DiGraph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def draw_static_figure(
    graph_nx: nx.DiGraph,
    layout: Dict[str, Tuple[float, float]],
    path: Path | NoPathFound | None,
    tree: Iterable[Edge],
    output: FilePath | None,
    show: bool,
) -> None:
    """Draw the graph with the spanning tree and the shortest path highlighted."""
    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(
        graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0, arrows=True
    )

    tree = list(tree)
    tree_edges = [(edge.source.label, edge.destination.label) for edge in tree]
    if tree_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=tree_edges,
            edge_color="#2ca02c",
            width=2.0,
            style="dashed",
            ax=ax,
        )

    path_labels: List[str] = []
    if isinstance(path, Path):
        path_labels = [vertex.label for vertex in path]
        path_edges = route_edges(path_labels)
        if path_edges:
            nx.draw_networkx_edges(
                graph_nx,
                layout,
                edgelist=path_edges,
                edge_color="#d62728",
                width=2.5,
                ax=ax,
            )

    node_colors = [
        "#ff7f0e" if node in path_labels else "#9ecae1" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=10, ax=ax)

    edge_labels = {(u, v): data["weight"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    summary_lines = [
        f"Vertices: {graph_nx.number_of_nodes()}",
        f"Edges: {graph_nx.number_of_edges()}",
    ]
    if path is not None:
        summary_lines.append(f"Shortest path: {path}")
    summary_lines.append(f"Spanning tree weight: {sum(edge.weight for edge in tree)}")
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Weighted Graph – Shortest Path and Spanning Tree")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
