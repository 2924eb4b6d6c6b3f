"""Procedure-style entry points.

`max_weighted_product_paths` exposes the search the way a graph database
procedure does: positional ``(start_node, max_depth, threshold)`` arguments
and a stream of ``(max, path)`` records, one per reached vertex. Procedures
are registered by their dotted name in `PROCEDURES` and can be invoked with
`call_procedure`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterator, NamedTuple

from prodgraph.algorithms.search import max_product_paths
from prodgraph.logging import get_logger
from prodgraph.model.path import Path

logger = get_logger(__name__)


class WeightAndPathRecord(NamedTuple):
    """One yielded row: the best weight to a vertex and a path achieving it."""

    max: float
    path: Path


def max_weighted_product_paths(
    graph: Any, start_node: Hashable, max_depth: int, threshold: float
) -> Iterator[WeightAndPathRecord]:
    """Yield a record for every vertex reachable within the given bounds.

    The search completes before the first record is yielded, so a weight
    error surfaces on the call itself and never after partial output.
    """
    result = max_product_paths(graph, start_node, max_depth, threshold)
    return iter([WeightAndPathRecord(wp.weight, wp.path) for wp in result.values()])


PROCEDURES: Dict[str, Callable[..., Iterator[WeightAndPathRecord]]] = {
    "traversals.maxWeightedProductPaths": max_weighted_product_paths,
}


def call_procedure(name: str, graph: Any, *args: Any) -> Iterator[WeightAndPathRecord]:
    """Invoke a registered procedure by name.

    Raises:
        KeyError: If no procedure is registered under `name`.
    """
    try:
        proc = PROCEDURES[name]
    except KeyError:
        known = ", ".join(sorted(PROCEDURES))
        raise KeyError(f"Unknown procedure '{name}'. Known procedures: {known}") from None
    logger.debug(f"Calling procedure {name} with {len(args)} argument(s)")
    return proc(graph, *args)
