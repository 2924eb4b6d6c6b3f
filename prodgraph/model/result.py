"""Search result containers.

`SearchResult` is the frozen output of `max_product_paths`: one
`WeightedPath` per reached vertex, keyed by vertex. Iteration follows the
order in which vertices were first reached during breadth-first expansion.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, List, Mapping

from prodgraph.model.path import Path

NodeID = Hashable


@dataclass(frozen=True)
class WeightedPath:
    """Best path found to one vertex.

    Attributes:
        weight: Product of the edge weights along `path`.
        path: A path achieving `weight`.
    """

    weight: float
    path: Path

    @property
    def node(self) -> NodeID:
        """Vertex this record reports on."""
        return self.path.end_node

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a JSON-serializable dict with node and edge lists."""
        return {
            "node": self.path.end_node,
            "weight": self.weight,
            "length": self.path.length,
            "nodes": list(self.path.nodes_seq),
            "edges": list(self.path.edges_seq),
        }


class SearchResult(Mapping[NodeID, WeightedPath]):
    """Read-only mapping of reached vertex to its best `WeightedPath`."""

    def __init__(self, entries: Mapping[NodeID, WeightedPath]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, node: NodeID) -> WeightedPath:
        return self._entries[node]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{node!r}: {wp.weight:g}" for node, wp in self._entries.items())
        return f"SearchResult({{{body}}})"

    def records(self) -> List[WeightedPath]:
        """Return the records in discovery order."""
        return list(self._entries.values())

    def weights(self) -> Dict[NodeID, float]:
        """Return a plain ``{vertex: weight}`` dict."""
        return {node: wp.weight for node, wp in self._entries.items()}

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {"results": [wp.to_dict() for wp in self._entries.values()]}
