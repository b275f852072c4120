"""
Unit tests for the Graph model.
"""

import pytest

from graphalgo.graph import Graph, GraphListener, Node, NodeNotInGraphError, NodeType


class RecordingListener(GraphListener):
    """Collects (hook, item) pairs in call order."""

    def __init__(self):
        self.events = []

    def on_node_added(self, node):
        self.events.append(("node_added", node))

    def on_node_removed(self, node):
        self.events.append(("node_removed", node))

    def on_node_moved(self, node):
        self.events.append(("node_moved", node))

    def on_node_changed(self, node):
        self.events.append(("node_changed", node))

    def on_edge_added(self, edge):
        self.events.append(("edge_added", edge))

    def on_edge_removed(self, edge):
        self.events.append(("edge_removed", edge))

    def on_edge_changed(self, edge):
        self.events.append(("edge_changed", edge))


class TestNodes:
    """Test node membership and removal."""

    def test_add_node_preserves_order(self, graph):
        """Nodes should be kept in insertion order."""
        a = graph.add_node(Node(0, 0))
        b = graph.add_node(Node(5, 5))
        assert graph.nodes == [a, b]
        assert graph.index_of(b) == 1

    def test_identical_nodes_are_distinct(self, graph):
        """Nodes with equal fields are separate members."""
        a = graph.add_node(Node(1, 1))
        b = graph.add_node(Node(1, 1))
        assert a is not b
        assert a != b
        assert len(graph) == 2

    def test_add_twice_raises(self, graph):
        """Adding the same node twice should fail."""
        a = graph.add_node(Node(0, 0))
        with pytest.raises(ValueError):
            graph.add_node(a)

    def test_remove_node_cascades_edges(self, chain):
        """Removing a node should drop every incident edge."""
        g, a, b, c = chain
        g.connect(c, a)
        g.remove_node(b)
        assert b not in g
        assert g.edge_connecting(a, b) is None
        assert g.edge_connecting(b, c) is None
        assert g.edge_connecting(c, a) is not None
        assert len(g.edges) == 1

    def test_remove_non_member_raises(self, graph):
        """Removing a node the graph doesn't own is a caller error."""
        with pytest.raises(NodeNotInGraphError):
            graph.remove_node(Node(0, 0))

    def test_nodes_of_type(self, chain):
        """nodes_of_type should filter by category."""
        g, a, b, c = chain
        assert g.nodes_of_type(NodeType.SOURCE) == [a]
        assert g.nodes_of_type(NodeType.TARGET) == [c]
        assert g.nodes_of_type(NodeType.DEFAULT) == [b]

    def test_set_node_type(self, chain):
        """Retyping should update the node."""
        g, a, b, c = chain
        g.set_node_type(b, NodeType.TARGET)
        assert g.nodes_of_type(NodeType.TARGET) == [b, c]

    def test_int_node_type_coerced(self):
        """Integer type codes become NodeType members."""
        assert Node(0, 0, 2).type is NodeType.TARGET


class TestEdges:
    """Test connect, disconnect and toggle."""

    def test_connect_is_idempotent(self, graph):
        """Connecting twice should not duplicate the edge."""
        a = graph.add_node(Node(0, 0))
        b = graph.add_node(Node(1, 0))
        first = graph.connect(a, b)
        second = graph.connect(a, b)
        assert first is second
        assert len(graph.edges) == 1

    def test_edges_are_directed(self, graph):
        """a -> b does not imply b -> a."""
        a = graph.add_node(Node(0, 0))
        b = graph.add_node(Node(1, 0))
        graph.connect(a, b)
        assert graph.edge_connecting(b, a) is None
        assert graph.children_of(a) == [b]
        assert graph.parents_of(b) == [a]
        assert graph.children_of(b) == []

    def test_disconnect_absent_is_noop(self, graph):
        """Disconnecting unconnected nodes should do nothing."""
        a = graph.add_node(Node(0, 0))
        b = graph.add_node(Node(1, 0))
        graph.disconnect(a, b)
        assert graph.edges == []

    def test_toggle_once_creates_single_edge(self, graph):
        """One toggle creates a -> b and nothing else."""
        a = graph.add_node(Node(0, 0))
        b = graph.add_node(Node(1, 0))
        edge = graph.toggle_connection(a, b)
        assert edge is graph.edge_connecting(a, b)
        assert graph.edge_connecting(b, a) is None
        assert len(graph.edges) == 1

    def test_toggle_twice_restores(self, graph):
        """Two toggles return to no edge."""
        a = graph.add_node(Node(0, 0))
        b = graph.add_node(Node(1, 0))
        graph.toggle_connection(a, b)
        assert graph.toggle_connection(a, b) is None
        assert graph.edge_connecting(a, b) is None
        assert graph.edges == []

    def test_connect_non_member_raises(self, graph):
        """Connecting to a foreign node should fail without changes."""
        a = graph.add_node(Node(0, 0))
        with pytest.raises(NodeNotInGraphError):
            graph.connect(a, Node(1, 1))
        assert graph.edges == []

    def test_queries_on_non_member_are_empty(self, chain):
        """Queries with foreign nodes return empty results."""
        g, *_ = chain
        stranger = Node(0, 0)
        assert g.children_of(stranger) == []
        assert g.parents_of(stranger) == []
        assert g.edges_including(stranger) == []
        assert g.edge_connecting(stranger, stranger) is None
        assert g.index_of(stranger) is None


class TestVisuals:
    """Test colour overrides."""

    def test_source_and_target_ignore_color(self, chain):
        """Only default nodes accept colour overrides."""
        g, a, b, c = chain
        g.color_node(a, 0x123456)
        g.color_node(b, 0x123456)
        assert a.color is None
        assert b.color == 0x123456
        assert b.display_color == 0x123456
        assert c.display_color == 0xFFFF33

    def test_color_path_and_reset(self, chain):
        """color_path colours consecutive edges; reset_visuals undoes it."""
        g, a, b, c = chain
        g.color_path([a, b, c], 0xFF0000)
        assert all(e.color == 0xFF0000 for e in g.edges)
        g.color_node(b, 0x00FF00)
        g.reset_visuals()
        assert all(e.color is None for e in g.edges)
        assert b.color is None
        assert g.edges[0].display_color == 0x000000


class TestListeners:
    """Test change notifications."""

    def test_remove_node_notifies_edges_first(self, chain):
        """Edge removals should be reported before the node removal."""
        g, a, b, c = chain
        listener = RecordingListener()
        g.add_listener(listener)
        g.remove_node(b)
        hooks = [hook for hook, _ in listener.events]
        assert hooks == ["edge_removed", "edge_removed", "node_removed"]

    def test_move_node_notifies_incident_edges(self, chain):
        """Moving a node should report the move and its edges."""
        g, a, b, c = chain
        listener = RecordingListener()
        g.add_listener(listener)
        g.move_node(b, 50, 50)
        assert (b.x, b.y) == (50, 50)
        assert listener.events[0] == ("node_moved", b)
        assert [hook for hook, _ in listener.events[1:]] == ["edge_changed", "edge_changed"]

    def test_remove_listener(self, graph):
        """Detached listeners receive nothing."""
        listener = RecordingListener()
        graph.add_listener(listener)
        graph.remove_listener(listener)
        graph.add_node(Node(0, 0))
        assert listener.events == []
