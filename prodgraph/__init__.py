"""prodgraph: maximum product-weight path search over weighted digraphs.

From a start vertex, prodgraph finds every vertex reachable through a path
whose cumulative weight (the product of its edge weights) stays at or above a
threshold within a maximum path length, and reports the best weight and one
path achieving it for each.

Primary API:
    max_product_paths() - Run the search and return a SearchResult
    max_weighted_product_paths() - Procedure-style (max, path) record stream
    StrictMultiDiGraph - In-memory graph with unique edge ids
    NxGraphAccessor - Adapter for plain networkx directed graphs

Example:
    from prodgraph import StrictMultiDiGraph, max_product_paths

    g = StrictMultiDiGraph()
    for n in (1, 2, 3):
        g.add_node(n)
    g.add_edge(1, 2, weight=0.5)
    g.add_edge(2, 3, weight=0.8)

    result = max_product_paths(g, 1, max_depth=7, threshold=0.3)
    result[3].weight  # 0.4
"""

from __future__ import annotations

from prodgraph import cli, logging
from prodgraph._version import __version__
from prodgraph.algorithms.aggregate import ResultAggregator
from prodgraph.algorithms.evaluate import Evaluation, evaluate
from prodgraph.algorithms.search import Branch, max_product_paths
from prodgraph.algorithms.weights import edge_weight
from prodgraph.config import SEARCH_CONFIG, SearchConfig
from prodgraph.errors import InvalidWeightTypeError, PathSearchError
from prodgraph.graph.accessor import GraphAccessor, NxGraphAccessor
from prodgraph.graph.io import load_graph
from prodgraph.graph.strict_multidigraph import StrictMultiDiGraph
from prodgraph.model.path import Path
from prodgraph.model.result import SearchResult, WeightedPath
from prodgraph.procedures import (
    WeightAndPathRecord,
    call_procedure,
    max_weighted_product_paths,
)

__all__ = [
    # Version
    "__version__",
    # Search
    "max_product_paths",
    "max_weighted_product_paths",
    "call_procedure",
    "evaluate",
    "Evaluation",
    "edge_weight",
    "ResultAggregator",
    "Branch",
    # Graph
    "GraphAccessor",
    "NxGraphAccessor",
    "StrictMultiDiGraph",
    "load_graph",
    # Model
    "Path",
    "SearchResult",
    "WeightedPath",
    "WeightAndPathRecord",
    # Config and errors
    "SearchConfig",
    "SEARCH_CONFIG",
    "InvalidWeightTypeError",
    "PathSearchError",
    # Utilities
    "cli",
    "logging",
]
