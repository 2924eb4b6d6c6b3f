"""Narrow graph-access capability consumed by the path search.

The search only ever asks three things of a graph: the outgoing edges of a
vertex, the endpoints of an edge, and one named property of an edge.
`GraphAccessor` captures exactly that, so the search runs against
`StrictMultiDiGraph`, any networkx graph via `NxGraphAccessor`, or a test
double.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Protocol, runtime_checkable

import networkx as nx

NodeID = Hashable
EdgeID = Hashable


@runtime_checkable
class GraphAccessor(Protocol):
    """Read-only view of a directed graph with addressable edges."""

    def has_vertex(self, node: NodeID) -> bool: ...

    def out_edges_of(self, node: NodeID) -> Iterable[EdgeID]: ...

    def edge_source(self, edge: EdgeID) -> NodeID: ...

    def edge_target(self, edge: EdgeID) -> NodeID: ...

    def edge_property(self, edge: EdgeID, name: str) -> Any: ...


class NxGraphAccessor:
    """Expose a plain networkx directed graph as a `GraphAccessor`.

    Edges are ``(u, v)`` tuples for `nx.DiGraph` and ``(u, v, key)`` tuples for
    `nx.MultiDiGraph`, matching what ``graph.out_edges(..., keys=True)`` yields.

    Args:
        graph: A directed networkx graph. It is read, never modified.

    Raises:
        TypeError: If the graph is undirected.
    """

    def __init__(self, graph: nx.Graph) -> None:
        if not graph.is_directed():
            raise TypeError("NxGraphAccessor requires a directed graph.")
        self.graph = graph
        self._multi = graph.is_multigraph()

    def has_vertex(self, node: NodeID) -> bool:
        return node in self.graph

    def out_edges_of(self, node: NodeID) -> Iterable[EdgeID]:
        if self._multi:
            return self.graph.out_edges(node, keys=True)
        return self.graph.out_edges(node)

    def edge_source(self, edge: EdgeID) -> NodeID:
        return edge[0]  # type: ignore[index]

    def edge_target(self, edge: EdgeID) -> NodeID:
        return edge[1]  # type: ignore[index]

    def edge_property(self, edge: EdgeID, name: str) -> Any:
        if self._multi:
            u, v, k = edge  # type: ignore[misc]
            return self.graph.edges[u, v, k].get(name)
        u, v = edge  # type: ignore[misc]
        return self.graph.edges[u, v].get(name)


def as_accessor(graph: Any) -> GraphAccessor:
    """Return `graph` itself if it already is an accessor, else wrap it.

    Raises:
        TypeError: If `graph` is neither a `GraphAccessor` nor a networkx graph.
    """
    if isinstance(graph, GraphAccessor):
        return graph
    if isinstance(graph, nx.Graph):
        return NxGraphAccessor(graph)
    raise TypeError(
        f"Expected a GraphAccessor or networkx graph, got {type(graph).__name__}."
    )
