"""Per-vertex best-result aggregation."""

from __future__ import annotations

from typing import Dict, Hashable

from prodgraph.model.path import Path
from prodgraph.model.result import SearchResult, WeightedPath

NodeID = Hashable


class ResultAggregator:
    """Keep the highest-weight path seen for each vertex.

    An entry is replaced only by a strictly greater weight, so among equal
    weights the first offered path stays. Under breadth-first expansion that
    is the shortest, earliest-discovered one.
    """

    def __init__(self) -> None:
        self._best: Dict[NodeID, WeightedPath] = {}
        self._frozen = False

    def offer(self, path: Path, weight: float) -> bool:
        """Record `path` for its end vertex if it beats the stored weight.

        Returns:
            True if the entry was stored.

        Raises:
            RuntimeError: If called after `freeze()`.
        """
        if self._frozen:
            raise RuntimeError("ResultAggregator is frozen; no further updates allowed.")
        node = path.end_node
        current = self._best.get(node)
        if current is None or current.weight < weight:
            self._best[node] = WeightedPath(weight=weight, path=path)
            return True
        return False

    def __len__(self) -> int:
        return len(self._best)

    def freeze(self) -> SearchResult:
        """Stop accepting updates and return the finished result."""
        self._frozen = True
        return SearchResult(self._best)
