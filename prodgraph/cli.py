"""Command-line interface for prodgraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Hashable, List, Optional, Tuple

from prodgraph.algorithms.search import max_product_paths
from prodgraph.config import SEARCH_CONFIG
from prodgraph.graph.io import load_graph
from prodgraph.graph.strict_multidigraph import StrictMultiDiGraph
from prodgraph.logging import configure_cli_logging, get_logger
from prodgraph.model.result import SearchResult

logger = get_logger(__name__)


_TABLE_HEADERS = ("Node", "Weight", "Length", "Path")
_MAX_PATH_WIDTH = 80


def _format_weight(value: float) -> str:
    """Return a weight with up to six decimals, trailing zeros trimmed.

    Examples:
        0.5 -> "0.5"; 0.81 -> "0.81"; 1.0 -> "1".
    """
    s = f"{value:.6f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_path(nodes: Tuple[Any, ...]) -> str:
    """Join path nodes with arrows, clipping long paths with "..."."""
    s = " -> ".join(str(n) for n in nodes)
    if len(s) > _MAX_PATH_WIDTH:
        s = s[: _MAX_PATH_WIDTH - 3] + "..."
    return s


def _render_table(result: SearchResult) -> str:
    """Render one row per reached node as an aligned ASCII table.

    Returns an empty string when nothing was reached.
    """
    rows = [
        (
            str(wp.node),
            _format_weight(wp.weight),
            str(wp.path.length),
            _format_path(wp.path.nodes_seq),
        )
        for wp in result.values()
    ]
    if not rows:
        return ""

    widths = [
        max(len(row[i]) for row in (_TABLE_HEADERS, *rows))
        for i in range(len(_TABLE_HEADERS))
    ]

    def format_row(cells: Tuple[str, ...]) -> str:
        return "   " + " | ".join(f"{c:<{w}}" for c, w in zip(cells, widths))

    lines = [format_row(_TABLE_HEADERS)]
    lines.append("   " + "-+-".join("-" * w for w in widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _resolve_node(graph: StrictMultiDiGraph, token: str) -> Hashable:
    """Map a command-line token to a node id of `graph`.

    Exact matches win; otherwise a node whose ``str()`` equals the token is
    used. Graph files often carry integer ids while argv is always text.

    Raises:
        KeyError: If no node matches, or the string form is ambiguous.
    """
    if token in graph:
        return token
    matches = [node for node in graph.nodes if str(node) == token]
    if not matches:
        raise KeyError(f"Start node '{token}' is not in the graph.")
    if len(matches) > 1:
        raise KeyError(f"Start node '{token}' is ambiguous: {matches!r}")
    return matches[0]


def _search(
    path: Path,
    start: str,
    max_depth: int,
    threshold: float,
    weight_attr: Optional[str],
    as_json: bool,
) -> None:
    """Load a graph file, run the search, and print the results."""
    logger.info(f"Loading graph: {path}")
    try:
        graph = load_graph(path)
        start_node = _resolve_node(graph, start)

        _t0 = perf_counter()
        result = max_product_paths(
            graph, start_node, max_depth, threshold, weight_attr=weight_attr
        )
        _elapsed_ms = (perf_counter() - _t0) * 1000.0
        logger.info(
            f"Search from {start_node!r} reached {len(result)} node(s) in "
            f"{_elapsed_ms:.1f} ms"
        )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Search failed: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Search failed: {type(e).__name__}: {e}")
        sys.exit(1)

    if as_json:
        payload = {
            "start": start_node,
            "max_depth": max_depth,
            "threshold": threshold,
            **result.to_dict(),
        }
        print(json.dumps(payload, indent=2, default=str))
        return

    if not result:
        print("No nodes reached.")
        return
    print(_render_table(result))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``prodgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="prodgraph",
        description="Find maximum product-weight paths in a weighted directed graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{search}",
        help="Available commands",
    )

    search_parser = subparsers.add_parser(
        "search", help="Search best product-weight paths from a start node"
    )
    search_parser.add_argument(
        "graph", type=Path, help="Path to graph file (YAML or JSON)"
    )
    search_parser.add_argument(
        "--start", "-s", required=True, help="Start node id"
    )
    search_parser.add_argument(
        "--max-depth",
        "-d",
        type=int,
        default=SEARCH_CONFIG.default_max_depth,
        help=f"Maximum path length in edges (default: {SEARCH_CONFIG.default_max_depth})",
    )
    search_parser.add_argument(
        "--threshold",
        "-t",
        type=float,
        default=SEARCH_CONFIG.default_threshold,
        help=f"Minimum cumulative weight (default: {SEARCH_CONFIG.default_threshold})",
    )
    search_parser.add_argument(
        "--weight-attr",
        default=None,
        help=f"Edge attribute holding the weight (default: {SEARCH_CONFIG.weight_attr})",
    )
    search_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_cli_logging(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Debug logging enabled")

    if args.command == "search":
        _search(
            path=args.graph,
            start=args.start,
            max_depth=args.max_depth,
            threshold=args.threshold,
            weight_attr=args.weight_attr,
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
