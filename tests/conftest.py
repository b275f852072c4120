"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from graphalgo.graph import Graph, Node, NodeType


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_graph_path(project_root: Path) -> Path:
    """Return the sample graph shipped in data/."""
    return project_root / "data" / "sample_graph.json"


@pytest.fixture
def graph() -> Graph:
    """Return an empty graph."""
    return Graph()


@pytest.fixture
def chain() -> tuple[Graph, Node, Node, Node]:
    """
    A(0,0) source -> B(100,0) -> C(100,100) target.

    Returns:
        (graph, a, b, c)
    """
    g = Graph()
    a = g.add_node(Node(0, 0, NodeType.SOURCE))
    b = g.add_node(Node(100, 0))
    c = g.add_node(Node(100, 100, NodeType.TARGET))
    g.connect(a, b)
    g.connect(b, c)
    return g, a, b, c


@pytest.fixture
def tree() -> tuple[Graph, dict[str, Node]]:
    """
    Binary tree of depth 3 rooted at the source, plus a shortcut.

        s -> l, r
        l -> ll, lr
        r -> rl, rr
        ll -> t          (target at depth 3)
        rr -> x -> y     (a longer branch, ends elsewhere)

    Returns:
        (graph, nodes by name)
    """
    g = Graph()
    names = {
        "s": (0, 0, NodeType.SOURCE),
        "l": (-100, 100, NodeType.DEFAULT),
        "r": (100, 100, NodeType.DEFAULT),
        "ll": (-150, 200, NodeType.DEFAULT),
        "lr": (-50, 200, NodeType.DEFAULT),
        "rl": (50, 200, NodeType.DEFAULT),
        "rr": (150, 200, NodeType.DEFAULT),
        "t": (-150, 300, NodeType.TARGET),
        "x": (150, 300, NodeType.DEFAULT),
        "y": (150, 400, NodeType.DEFAULT),
    }
    nodes = {name: g.add_node(Node(x, y, t)) for name, (x, y, t) in names.items()}
    for parent, child in [
        ("s", "l"), ("s", "r"),
        ("l", "ll"), ("l", "lr"),
        ("r", "rl"), ("r", "rr"),
        ("ll", "t"),
        ("rr", "x"), ("x", "y"),
    ]:
        g.connect(nodes[parent], nodes[child])
    return g, nodes


@pytest.fixture
def grid() -> tuple[Graph, list[list[Node]]]:
    """
    4x4 grid spaced 100 apart with edges both ways between neighbours.

    Source is the top-left corner, target the bottom-right.

    Returns:
        (graph, rows of nodes)
    """
    g = Graph()
    rows = [[g.add_node(Node(col * 100, row * 100)) for col in range(4)] for row in range(4)]
    for r in range(4):
        for c in range(4):
            if c + 1 < 4:
                g.connect(rows[r][c], rows[r][c + 1])
                g.connect(rows[r][c + 1], rows[r][c])
            if r + 1 < 4:
                g.connect(rows[r][c], rows[r + 1][c])
                g.connect(rows[r + 1][c], rows[r][c])
    g.set_node_type(rows[0][0], NodeType.SOURCE)
    g.set_node_type(rows[3][3], NodeType.TARGET)
    return g, rows
