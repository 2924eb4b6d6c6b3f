"""Structurally shared path representation for breadth-first expansion.

A `Path` is a chain of immutable links: each non-empty path stores its last
edge, its end vertex, and a reference to the parent path it extends. Extending
a path is O(1) and siblings share their common prefix, which keeps frontier
growth cheap when the search enumerates many branches. Sequences of edges and
nodes are materialized lazily on first access and cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Hashable, Iterator, List, Optional, Tuple

NodeID = Hashable
EdgeID = Hashable


@dataclass(frozen=True, eq=False)
class Path:
    """A sequence of edges starting at a fixed start vertex.

    Attributes:
        start_node: Vertex where the path begins.
        end_node: Vertex where the path ends (``start_node`` for a root path).
        last_edge: Edge most recently appended, ``None`` for a root path.
        parent: Path this one extends, ``None`` for a root path.
        length: Number of edges on the path.
    """

    start_node: NodeID
    end_node: NodeID
    last_edge: Optional[EdgeID] = None
    parent: Optional["Path"] = None
    length: int = 0

    @classmethod
    def root(cls, node: NodeID) -> Path:
        """Return the zero-length path consisting of `node` alone."""
        return cls(start_node=node, end_node=node)

    def extend(self, edge: EdgeID, target: NodeID) -> Path:
        """Return a new path that follows `edge` from this path's end to `target`."""
        return Path(
            start_node=self.start_node,
            end_node=target,
            last_edge=edge,
            parent=self,
            length=self.length + 1,
        )

    def _links(self) -> List[Path]:
        """Return the chain of non-root paths from the first edge to this one."""
        chain: List[Path] = []
        node: Optional[Path] = self
        while node is not None and node.parent is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    @cached_property
    def edges_seq(self) -> Tuple[EdgeID, ...]:
        """Edges along the path, from the start vertex outward."""
        return tuple(link.last_edge for link in self._links())

    @cached_property
    def nodes_seq(self) -> Tuple[NodeID, ...]:
        """Vertices along the path, including both endpoints."""
        return (self.start_node,) + tuple(link.end_node for link in self._links())

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[EdgeID]:
        return iter(self.edges_seq)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self.start_node == other.start_node
            and self.length == other.length
            and self.edges_seq == other.edges_seq
        )

    def __hash__(self) -> int:
        return hash((self.start_node, self.edges_seq))

    def __repr__(self) -> str:
        return f"Path({' -> '.join(repr(n) for n in self.nodes_seq)}, edges={list(self.edges_seq)})"
