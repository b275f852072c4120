"""
Directed graph model: nodes with positions and categories, unweighted edges.

Every query compares nodes by identity. Two nodes at the same position with
the same type are still distinct graph elements.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from graphalgo.config import DEFAULT_EDGE_COLOR, NODE_TYPE_COLORS
from graphalgo.geometry.vector import Vector2D

logger = logging.getLogger(__name__)


class NodeType(IntEnum):
    """Node category. Values are the serialized type codes."""

    DEFAULT = 0
    SOURCE = 1
    TARGET = 2


class NodeNotInGraphError(ValueError):
    """Raised when a mutation references a node the graph does not own."""


@dataclass(eq=False)
class Node:
    """
    A graph vertex.

    Attributes:
        x: Horizontal position
        y: Vertical position
        type: Category (default, source or target)
        color: Optional fill override set during visualization
    """

    x: float
    y: float
    type: NodeType = NodeType.DEFAULT
    color: int | None = None

    def __post_init__(self) -> None:
        self.type = NodeType(self.type)

    @property
    def position(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @property
    def display_color(self) -> int:
        """Fill colour to render. Sources and targets keep their category colour."""
        if self.type is NodeType.DEFAULT and self.color is not None:
            return self.color
        return NODE_TYPE_COLORS[self.type]

    def distance_to(self, other: Node) -> float:
        return self.position.distance_to(other.position)


@dataclass(eq=False)
class Edge:
    """
    A directed link between two nodes. Carries no weight.

    Attributes:
        from_node: Tail of the arrow
        to_node: Head of the arrow
        color: Optional stroke override set during visualization
    """

    from_node: Node
    to_node: Node
    color: int | None = None

    @property
    def display_color(self) -> int:
        return DEFAULT_EDGE_COLOR if self.color is None else self.color

    def includes(self, node: Node) -> bool:
        return self.from_node is node or self.to_node is node


class GraphListener:
    """
    Receives change notifications from a Graph.

    All hooks are no-ops; override the ones you need. Listeners observe the
    graph for display purposes only and must not drive search decisions.
    """

    def on_node_added(self, node: Node) -> None:
        pass

    def on_node_removed(self, node: Node) -> None:
        pass

    def on_node_moved(self, node: Node) -> None:
        pass

    def on_node_changed(self, node: Node) -> None:
        """Called after a node's type or colour changes."""
        pass

    def on_edge_added(self, edge: Edge) -> None:
        pass

    def on_edge_removed(self, edge: Edge) -> None:
        pass

    def on_edge_changed(self, edge: Edge) -> None:
        """Called after an edge's colour changes."""
        pass


class Graph:
    """
    Insertion-ordered collection of nodes and directed edges.

    The graph exclusively owns its nodes and edges. At most one edge exists
    per ordered (from, to) pair. Queries given a node that is not a member
    return empty results; mutations given one raise NodeNotInGraphError.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._listeners: list[GraphListener] = []

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def add_listener(self, listener: GraphListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, hook: str, item: Node | Edge) -> None:
        for listener in list(self._listeners):
            getattr(listener, hook)(item)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def __contains__(self, node: object) -> bool:
        return any(n is node for n in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def index_of(self, node: Node) -> int | None:
        """Position of node in insertion order, or None if not a member."""
        for i, n in enumerate(self._nodes):
            if n is node:
                return i
        return None

    def _require_member(self, *nodes: Node) -> None:
        for node in nodes:
            if node not in self:
                raise NodeNotInGraphError(f"Node {node!r} is not in this graph")

    # -------------------------------------------------------------------------
    # Node operations
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> Node:
        """
        Add a node to the graph.

        Returns:
            The node that was added, for chaining

        Raises:
            ValueError: If the node is already a member
        """
        if node in self:
            raise ValueError(f"Node {node!r} is already in this graph")
        self._nodes.append(node)
        self._notify("on_node_added", node)
        return node

    def remove_node(self, node: Node) -> None:
        """Remove a node and every edge touching it."""
        self._require_member(node)
        for edge in self.edges_including(node):
            self._remove_edge(edge)
        self._nodes = [n for n in self._nodes if n is not node]
        self._notify("on_node_removed", node)

    def set_node_type(self, node: Node, node_type: NodeType) -> None:
        self._require_member(node)
        node.type = NodeType(node_type)
        self._notify("on_node_changed", node)

    def move_node(self, node: Node, x: float, y: float) -> None:
        self._require_member(node)
        node.x = x
        node.y = y
        self._notify("on_node_moved", node)
        for edge in self.edges_including(node):
            self._notify("on_edge_changed", edge)

    def nodes_of_type(self, node_type: NodeType) -> list[Node]:
        return [n for n in self._nodes if n.type == node_type]

    # -------------------------------------------------------------------------
    # Edge operations
    # -------------------------------------------------------------------------

    def connect(self, from_node: Node, to_node: Node) -> Edge:
        """
        Create an edge from_node -> to_node unless one already exists.

        Returns:
            The new or existing edge
        """
        self._require_member(from_node, to_node)
        existing = self.edge_connecting(from_node, to_node)
        if existing is not None:
            return existing
        edge = Edge(from_node, to_node)
        self._edges.append(edge)
        self._notify("on_edge_added", edge)
        return edge

    def disconnect(self, from_node: Node, to_node: Node) -> None:
        """Remove the edge from_node -> to_node if present."""
        self._require_member(from_node, to_node)
        edge = self.edge_connecting(from_node, to_node)
        if edge is not None:
            self._remove_edge(edge)

    def toggle_connection(self, from_node: Node, to_node: Node) -> Edge | None:
        """
        Connect the nodes if unconnected, otherwise disconnect them.

        Returns:
            The created edge, or None if an edge was removed
        """
        if self.edge_connecting(from_node, to_node) is not None:
            self.disconnect(from_node, to_node)
            return None
        return self.connect(from_node, to_node)

    def _remove_edge(self, edge: Edge) -> None:
        self._edges = [e for e in self._edges if e is not edge]
        self._notify("on_edge_removed", edge)

    def edge_connecting(self, from_node: Node, to_node: Node) -> Edge | None:
        for edge in self._edges:
            if edge.from_node is from_node and edge.to_node is to_node:
                return edge
        return None

    def edges_from(self, node: Node) -> list[Edge]:
        return [e for e in self._edges if e.from_node is node]

    def edges_to(self, node: Node) -> list[Edge]:
        return [e for e in self._edges if e.to_node is node]

    def edges_including(self, node: Node) -> list[Edge]:
        return [e for e in self._edges if e.includes(node)]

    def children_of(self, node: Node) -> list[Node]:
        """Nodes this node points to, in edge insertion order."""
        return [e.to_node for e in self.edges_from(node)]

    def parents_of(self, node: Node) -> list[Node]:
        """Nodes pointing to this node, in edge insertion order."""
        return [e.from_node for e in self.edges_to(node)]

    # -------------------------------------------------------------------------
    # Visual overrides
    # -------------------------------------------------------------------------

    def color_node(self, node: Node, color: int | None) -> None:
        """Set a node's fill override. Sources and targets can't be coloured."""
        if node.type is not NodeType.DEFAULT:
            return
        node.color = color
        self._notify("on_node_changed", node)

    def color_edge(self, edge: Edge, color: int | None) -> None:
        edge.color = color
        self._notify("on_edge_changed", edge)

    def color_path(self, path: Iterable[Node], color: int) -> None:
        """Colour the edges joining consecutive nodes of path."""
        path = list(path)
        for from_node, to_node in zip(path, path[1:]):
            edge = self.edge_connecting(from_node, to_node)
            if edge is not None:
                self.color_edge(edge, color)

    def reset_visuals(self) -> None:
        """Undo every node and edge colour override."""
        for node in self._nodes:
            if node.color is not None:
                node.color = None
                self._notify("on_node_changed", node)
        for edge in self._edges:
            if edge.color is not None:
                edge.color = None
                self._notify("on_edge_changed", edge)
        logger.debug("Visual overrides cleared")

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"
