from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import yaml

from graph import Edge, Graph, GraphError, Vertex, edge_weight_order
from shortest_path import NoPathFound, shortest_path
from spanning_tree import TREE_METHODS, minimum_spanning_tree


logger = logging.getLogger(__name__)


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def build_graph(config: Dict) -> Graph:
    graph_config = config["graph"]
    return Graph.from_labels(graph_config["nodes"], graph_config.get("edges") or [])


def _optional_label(value: object) -> Optional[str]:
    return None if value is None else str(value)


def print_tree(tree: Iterable[Edge]) -> None:
    edges = sorted(tree, key=edge_weight_order)
    total = sum(edge.weight for edge in edges)
    print(f"Selected {len(edges)} edges (total weight {total}):")
    for edge in edges:
        print(f"  {edge}")


def run(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
        graph = build_graph(config)
    except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as exc:
        print(f"Error: unable to load instance from {args.config}: {exc}", file=sys.stderr)
        return 2

    query = config.get("query") or {}
    source_label = _optional_label(args.source or query.get("source"))
    destination_label = _optional_label(args.destination or query.get("destination"))
    method = args.tree_method or (config.get("spanning_tree") or {}).get("method", "scan")

    if (source_label is None) != (destination_label is None):
        missing = "destination" if destination_label is None else "source"
        print(f"Error: a shortest path query needs a {missing} vertex as well.", file=sys.stderr)
        return 2

    logger.info("Loaded graph with %d vertices from %s", len(graph), args.config)

    path = None
    if source_label is not None and destination_label is not None:
        print("=== Shortest Path ===")
        try:
            path = shortest_path(graph, Vertex(source_label), Vertex(destination_label))
        except GraphError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        if isinstance(path, NoPathFound):
            print(path)
        else:
            print(f"{source_label} -> {destination_label}: {path}")
        print()

    print(f"=== Spanning Tree ({method}) ===")
    try:
        tree = minimum_spanning_tree(graph, method=method)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    print_tree(tree)

    if args.visualize or args.output:
        from visualize import build_networkx_graph, compute_layout, draw_static_figure

        graph_nx = build_networkx_graph(graph)
        draw_static_figure(
            graph_nx=graph_nx,
            layout=compute_layout(graph_nx),
            path=path,
            tree=tree,
            output=args.output,
            show=args.visualize,
        )
        if args.output:
            print(f"Figure stored at: {args.output}")

    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute shortest paths and spanning trees on a weighted directed graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("sample_graph.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument("--source", help="Label of the start vertex.")
    parser.add_argument("--destination", help="Label of the end vertex.")
    parser.add_argument(
        "--tree-method",
        choices=TREE_METHODS,
        help="Spanning tree construction (default: value from the config, else scan).",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Open a matplotlib figure of the graph, path and spanning tree.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save the figure instead of only showing it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
