"""
Search strategies for the stepwise search engine.

Every strategy runs the same best-first loop; they differ only in the data
seeded on the source node and the heuristic that prices a newly reached
child. The engine always explores the open node with the lowest "cost".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from graphalgo.graph.model import Node

# Strategy-specific per-node record, always carrying a "cost" entry
HeuristicData = Mapping[str, float]


class Strategy(ABC):
    """
    Abstract base class for search strategies.

    Strategies are stateless: the same instance can serve any number of runs.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'bfs', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the exploration order."""
        ...

    @property
    def init_data(self) -> dict[str, float]:
        """Heuristic data assigned to the source node."""
        return {}

    @abstractmethod
    def heuristic(
        self,
        parent_data: HeuristicData,
        node: Node,
        parent: Node,
        target: Node,
    ) -> dict[str, float]:
        """
        Price reaching node from parent.

        Args:
            parent_data: Heuristic data recorded for parent
            node: Child being considered
            parent: Node currently being expanded
            target: The search target

        Returns:
            New heuristic data for node. Must contain "cost".
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class BreadthFirstStrategy(Strategy):
    """Each edge adds one step, so fewer steps are explored first."""

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first: fewest edges from the source first"

    @property
    def init_data(self) -> dict[str, float]:
        return {"cost": 0}

    def heuristic(self, parent_data, node, parent, target):
        return {"cost": parent_data["cost"] + 1}


class DepthFirstStrategy(Strategy):
    """
    Opposite of breadth-first: deeper nodes get lower costs.

    This is a priority-queue approximation of depth-first order. Nodes at
    equal depth are taken in insertion order, so it is not a strict stack.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first: deepest discovered nodes first"

    @property
    def init_data(self) -> dict[str, float]:
        return {"cost": 0}

    def heuristic(self, parent_data, node, parent, target):
        return {"cost": parent_data["cost"] - 1}


class AStarStrategy(Strategy):
    """
    A*: g is the Euclidean length travelled from the source, h the
    straight-line distance to the target. cost = g + h.
    """

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A*: travelled distance plus straight-line distance to target"

    @property
    def init_data(self) -> dict[str, float]:
        return {"g": 0}

    def heuristic(self, parent_data, node, parent, target):
        g = parent_data["g"] + parent.distance_to(node)
        h = node.distance_to(target)
        return {"g": g, "cost": g + h}


class GreedyStrategy(Strategy):
    """Always expand whichever open node is closest to the target."""

    @property
    def name(self) -> str:
        return "greedy"

    @property
    def description(self) -> str:
        return "Greedy best-first: straight-line distance to target only"

    def heuristic(self, parent_data, node, parent, target):
        return {"cost": node.distance_to(target)}


_STRATEGIES: dict[str, Strategy] = {
    s.name: s
    for s in (
        BreadthFirstStrategy(),
        DepthFirstStrategy(),
        AStarStrategy(),
        GreedyStrategy(),
    )
}


def available_strategies() -> list[str]:
    return list(_STRATEGIES)


def get_strategy(name: str) -> Strategy:
    """
    Get a strategy by name.

    Args:
        name: Strategy identifier (bfs, dfs, astar, greedy)

    Returns:
        The shared strategy instance

    Raises:
        ValueError: If strategy name is unknown
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")
    return _STRATEGIES[name]
