"""Graph serialization helpers and file loading.

Two document shapes describe a weighted graph:

Node-link (round-trips through `graph_to_node_link`)::

    {"graph": {...},
     "nodes": [{"id": 1, "attr": {...}}, ...],
     "links": [{"source": 0, "target": 1, "key": 0, "attr": {"weight": 0.5}}, ...]}

Edge list (convenient to write by hand)::

    nodes: [1, 2, 3]
    edges:
      - {source: 1, target: 2, weight: 0.5}
      - {source: 2, target: 3, weight: 0.8}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Hashable, Union

import yaml

from prodgraph.graph.strict_multidigraph import NodeID, StrictMultiDiGraph
from prodgraph.logging import get_logger

logger = get_logger(__name__)


def graph_to_node_link(graph: StrictMultiDiGraph) -> Dict[str, Any]:
    """Convert a StrictMultiDiGraph into a node-link dict.

    Links reference nodes by their index in the ``nodes`` list.

    Args:
        graph: The StrictMultiDiGraph to convert.

    Returns:
        A dict with 'graph', 'nodes', and 'links' entries.
    """
    node_dict = graph.get_nodes()
    node_list = list(node_dict.keys())
    node_map = {node_id: i for i, node_id in enumerate(node_list)}

    return {
        "graph": dict(graph.graph),
        "nodes": [
            {"id": node_id, "attr": dict(node_dict[node_id])} for node_id in node_list
        ],
        "links": [
            {
                "source": node_map[src],
                "target": node_map[dst],
                "key": edge_id,
                "attr": dict(edge_attrs),
            }
            for edge_id, (src, dst, _, edge_attrs) in graph.get_edges().items()
        ],
    }


def _section(data: Dict[str, Any], name: str, expected: type = list) -> Any:
    """Return ``data[name]`` (empty when absent) after checking its type.

    Raises:
        ValueError: If the section is present with the wrong type.
    """
    value = data.get(name)
    if value is None:
        return expected()
    if not isinstance(value, expected):
        kind = "list" if expected is list else "mapping"
        raise ValueError(f"'{name}' must be a {kind}, got {type(value).__name__}.")
    return value


def _node_id(value: Any) -> NodeID:
    if not isinstance(value, Hashable):
        raise ValueError(f"Node id must be hashable, got {value!r}.")
    return value


def node_link_to_graph(data: Dict[str, Any]) -> StrictMultiDiGraph:
    """Rebuild a StrictMultiDiGraph from its node-link dict.

    Raises:
        ValueError: If a section has the wrong shape, a node lacks ``id``, a
            link lacks ``source``/``target``, or a link references a node
            index that does not exist.
    """
    graph = StrictMultiDiGraph(**_section(data, "graph", dict))

    node_map: Dict[int, NodeID] = {}
    for idx, node_obj in enumerate(_section(data, "nodes")):
        if not isinstance(node_obj, dict) or "id" not in node_obj:
            raise ValueError(f"Each node must be a mapping with an 'id': {node_obj!r}.")
        node_id = _node_id(node_obj["id"])
        graph.add_node(node_id, **_section(node_obj, "attr", dict))
        node_map[idx] = node_id

    for edge_obj in _section(data, "links"):
        if not isinstance(edge_obj, dict):
            raise ValueError(f"Each link must be a mapping, got {edge_obj!r}.")
        if "source" not in edge_obj or "target" not in edge_obj:
            raise ValueError(f"Each link must include 'source' and 'target': {edge_obj!r}.")
        try:
            src_id = node_map[edge_obj["source"]]
            dst_id = node_map[edge_obj["target"]]
        except (KeyError, TypeError):
            raise ValueError(f"Link {edge_obj!r} references unknown node index.") from None
        graph.add_edge(
            src_id, dst_id, key=edge_obj.get("key"), **_section(edge_obj, "attr", dict)
        )

    return graph


def edge_list_to_graph(data: Dict[str, Any]) -> StrictMultiDiGraph:
    """Build a StrictMultiDiGraph from an edge-list document.

    Nodes listed under ``nodes`` are added first, in order. Endpoints that only
    appear in ``edges`` are added on first use. Every edge key other than
    ``source``, ``target`` and ``key`` becomes an edge attribute.

    Raises:
        ValueError: If ``nodes`` or ``edges`` is not a list, a node id is not
            hashable, or an edge entry is not a mapping or lacks an endpoint.
    """
    graph = StrictMultiDiGraph()
    for node_id in _section(data, "nodes"):
        graph.add_node(_node_id(node_id))

    for entry in _section(data, "edges"):
        if not isinstance(entry, dict):
            raise ValueError(f"Edge entry must be a mapping, got {entry!r}.")
        if "source" not in entry or "target" not in entry:
            raise ValueError(f"Edge entry must include 'source' and 'target': {entry!r}.")
        attrs = dict(entry)
        src = _node_id(attrs.pop("source"))
        dst = _node_id(attrs.pop("target"))
        key = attrs.pop("key", None)
        for node_id in (src, dst):
            if node_id not in graph:
                graph.add_node(node_id)
        graph.add_edge(src, dst, key=key, **attrs)

    return graph


def graph_from_dict(data: Dict[str, Any]) -> StrictMultiDiGraph:
    """Dispatch on document shape: ``links`` means node-link, else edge list."""
    if not isinstance(data, dict):
        raise ValueError("The graph document must map to a dictionary at top-level.")
    if "links" in data:
        return node_link_to_graph(data)
    return edge_list_to_graph(data)


def load_graph(path: Union[str, Path]) -> StrictMultiDiGraph:
    """Load a graph from a YAML or JSON file.

    JSON is a subset of YAML, so both go through ``yaml.safe_load``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a valid graph description.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    graph = graph_from_dict(data)
    logger.debug(
        "Loaded graph from %s: %d nodes, %d edges",
        path,
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph
