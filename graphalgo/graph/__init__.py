"""
Graph module.

Provides the editable graph and its helpers:
- Graph, Node, Edge, NodeType: Directed graph model
- GraphListener: Change notifications for renderers
- NodeStore: Identity-keyed per-node data
- to_json / from_json: Serialized record round trip
"""

from graphalgo.graph.model import (
    Edge,
    Graph,
    GraphListener,
    Node,
    NodeNotInGraphError,
    NodeType,
)
from graphalgo.graph.node_store import NodeStore
from graphalgo.graph.serialization import (
    GraphFormatError,
    from_dict,
    from_json,
    load_graph,
    load_graph_or_empty,
    save_graph,
    to_dict,
    to_json,
)

__all__ = [
    "Edge",
    "Graph",
    "GraphListener",
    "Node",
    "NodeNotInGraphError",
    "NodeType",
    "NodeStore",
    "GraphFormatError",
    "from_dict",
    "from_json",
    "load_graph",
    "load_graph_or_empty",
    "save_graph",
    "to_dict",
    "to_json",
]
