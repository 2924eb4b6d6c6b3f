"""Threshold-pruned, depth-bounded maximum product path search.

From a start vertex, every path is expanded breadth-first while its
cumulative weight (the product of its edge weights) stays at or above a
threshold and its length stays within a depth bound. For each vertex reached
by at least one such path, the search reports the largest weight found and a
path achieving it.

No visited set is kept: a vertex may be reached again through a longer path
or around a cycle, and that path is still a candidate. Termination on cyclic
graphs comes from the weight decaying below the threshold (edge weights below
one) or from the depth bound. A threshold of zero or less on a cycle of
weight-one edges enumerates a number of branches exponential in ``max_depth``;
choosing bounds is the caller's responsibility.

Breadth-first order is what makes ties deterministic: shorter paths are
evaluated before longer ones, and the first path to reach a given weight for
a vertex is the one kept.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, NamedTuple, Optional

from prodgraph.algorithms.aggregate import ResultAggregator
from prodgraph.algorithms.evaluate import evaluate
from prodgraph.algorithms.weights import edge_weight
from prodgraph.config import SEARCH_CONFIG, SearchConfig
from prodgraph.graph.accessor import NodeID, as_accessor
from prodgraph.logging import get_logger
from prodgraph.model.path import Path
from prodgraph.model.result import SearchResult

logger = get_logger(__name__)


class Branch(NamedTuple):
    """A frontier entry: a path and the product of its edge weights."""

    path: Path
    weight: float


def max_product_paths(
    graph: Any,
    start: NodeID,
    max_depth: int,
    threshold: float,
    *,
    weight_attr: Optional[str] = None,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Find the best product-weight path to every vertex reachable from `start`.

    Args:
        graph: A `GraphAccessor` (e.g. `StrictMultiDiGraph`) or a directed
            networkx graph.
        start: Start vertex. It never appears in the result.
        max_depth: Maximum number of edges on a reported path. Values below
            one give an empty result.
        threshold: Minimum cumulative weight for a path to be kept.
        weight_attr: Edge attribute holding the weight. Defaults to
            ``config.weight_attr``.
        config: Search defaults. Defaults to the global `SEARCH_CONFIG`.

    Returns:
        A frozen `SearchResult` mapping each reached vertex to its best
        `WeightedPath`, in first-discovery order.

    Raises:
        KeyError: If `start` is not a vertex of `graph`.
        InvalidWeightTypeError: If an edge examined during the search has a
            missing, non-numeric or non-finite weight. No partial result is
            returned.
    """
    cfg = config or SEARCH_CONFIG
    accessor = as_accessor(graph)
    attr = cfg.resolve_weight_attr(weight_attr)
    max_depth = int(max_depth)
    threshold = float(threshold)

    if not accessor.has_vertex(start):
        raise KeyError(f"Start node '{start}' is not in the graph.")

    logger.debug(
        f"Searching from {start!r}: max_depth={max_depth}, "
        f"threshold={threshold}, weight_attr='{attr}'"
    )

    aggregator = ResultAggregator()
    frontier: Deque[Branch] = deque([Branch(Path.root(start), 1.0)])
    popped = expanded = peak = 0

    while frontier:
        peak = max(peak, len(frontier))
        path, weight = frontier.popleft()
        popped += 1

        decision = evaluate(path, weight, max_depth, threshold)
        if decision.includes:
            aggregator.offer(path, weight)
        if not decision.continues:
            continue

        expanded += 1
        for edge in accessor.out_edges_of(path.end_node):
            child_weight = weight * edge_weight(
                accessor, edge, attr, allow_non_finite=cfg.allow_non_finite
            )
            frontier.append(
                Branch(path.extend(edge, accessor.edge_target(edge)), child_weight)
            )

    result = aggregator.freeze()
    logger.debug(
        f"Search from {start!r} done: {len(result)} nodes reached, "
        f"{popped} branches evaluated, {expanded} expanded, peak frontier {peak}"
    )
    return result
