"""
Convert graphs to and from their JSON record.

Nodes are stored as {x, y, type} objects in insertion order; edges as
{fromIndex, toIndex} pairs referencing that order:

    {"nodes": [{"x": 0, "y": 0, "type": 1}],
     "edges": [{"fromIndex": 0, "toIndex": 1}]}
"""

from __future__ import annotations

import json
import logging
import math
import numbers
from pathlib import Path
from typing import Any

from graphalgo.graph.model import Graph, Node, NodeType

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """Raised when a serialized graph is malformed."""


def to_dict(graph: Graph) -> dict[str, list[dict[str, Any]]]:
    """Build the plain-data record for graph."""
    nodes = graph.nodes
    index = {id(node): i for i, node in enumerate(nodes)}
    return {
        "nodes": [
            {"x": node.x, "y": node.y, "type": int(node.type)}
            for node in nodes
        ],
        "edges": [
            {
                "fromIndex": index[id(edge.from_node)],
                "toIndex": index[id(edge.to_node)],
            }
            for edge in graph.edges
        ],
    }


def to_json(graph: Graph) -> str:
    return json.dumps(to_dict(graph), allow_nan=False)


def _require(record: Any, key: str, where: str) -> Any:
    if not isinstance(record, dict) or key not in record:
        raise GraphFormatError(f"{where} is missing field '{key}'")
    return record[key]


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise GraphFormatError(f"{where} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise GraphFormatError(f"{where} must be finite, got {value!r}")
    return value


def _index(value: Any, count: int, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"{where} must be an integer, got {value!r}")
    if not 0 <= value < count:
        raise GraphFormatError(f"{where} {value} is out of range for {count} nodes")
    return value


def from_dict(data: Any) -> Graph:
    """
    Rebuild a graph from its plain-data record.

    The whole record is validated before the graph is assembled, so a
    malformed record never yields a partially built graph.

    Raises:
        GraphFormatError: If fields are missing, mistyped or out of range
    """
    raw_nodes = _require(data, "nodes", "Graph record")
    raw_edges = _require(data, "edges", "Graph record")
    if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
        raise GraphFormatError("'nodes' and 'edges' must be lists")

    node_specs: list[tuple[float, float, NodeType]] = []
    for i, raw in enumerate(raw_nodes):
        where = f"Node {i}"
        x = _number(_require(raw, "x", where), f"{where} x")
        y = _number(_require(raw, "y", where), f"{where} y")
        raw_type = _require(raw, "type", where)
        try:
            node_type = NodeType(raw_type)
        except ValueError as e:
            raise GraphFormatError(f"{where} has unknown type {raw_type!r}") from e
        node_specs.append((x, y, node_type))

    edge_specs: list[tuple[int, int]] = []
    for i, raw in enumerate(raw_edges):
        where = f"Edge {i}"
        from_index = _index(_require(raw, "fromIndex", where), len(node_specs), f"{where} fromIndex")
        to_index = _index(_require(raw, "toIndex", where), len(node_specs), f"{where} toIndex")
        edge_specs.append((from_index, to_index))

    graph = Graph()
    for x, y, node_type in node_specs:
        graph.add_node(Node(x, y, node_type))
    nodes = graph.nodes
    for from_index, to_index in edge_specs:
        graph.connect(nodes[from_index], nodes[to_index])
    return graph


def from_json(text: str) -> Graph:
    """
    Parse a JSON graph record.

    Raises:
        GraphFormatError: If text is not valid JSON or not a valid record
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"Invalid graph JSON: {e}") from e
    return from_dict(data)


def save_graph(graph: Graph, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_dict(graph), f, indent=2, allow_nan=False)
    logger.info(f"Saved graph ({len(graph)} nodes) to {path}")


def load_graph(path: str | Path) -> Graph:
    """
    Load a graph from a JSON file.

    Raises:
        OSError: If the file can't be read
        GraphFormatError: If its contents are malformed
    """
    with open(path, encoding="utf-8") as f:
        graph = from_json(f.read())
    logger.info(f"Loaded graph ({len(graph)} nodes, {len(graph.edges)} edges) from {path}")
    return graph


def load_graph_or_empty(text: str | None) -> Graph:
    """Parse text if given, falling back to an empty graph when it's malformed."""
    if not text:
        return Graph()
    try:
        return from_json(text)
    except GraphFormatError as e:
        logger.warning(f"Failed to load graph, starting empty: {e}")
        return Graph()
