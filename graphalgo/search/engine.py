"""
Stepwise search engine.

Runs one strategy over one graph from the single source node to the single
target node, one exploration step per call to step(). The engine keeps no
clock: whoever drives it decides when the next step happens, which makes
runs deterministic and replayable.

Lifecycle:
    IDLE --start()--> RUNNING --step()...--> SOLVED | EXHAUSTED
    any state --cancel()--> IDLE
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import TYPE_CHECKING

from graphalgo.config import (
    COLOR_CLOSED,
    COLOR_CURRENT,
    COLOR_CURRENT_ARROW,
    COLOR_OPEN,
    COLOR_SOLUTION,
    COLOR_SOLUTION_ARROW,
    COLOR_VISITED_ARROW,
)
from graphalgo.graph.model import NodeType
from graphalgo.graph.node_store import NodeStore
from graphalgo.search.state import SearchResult, SearchStatus, SearchStep
from graphalgo.search.strategies import Strategy, get_strategy

if TYPE_CHECKING:
    from graphalgo.graph.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


class Precondition(Enum):
    """Why a run could not start."""

    NO_SOURCE = "no_source"
    MULTIPLE_SOURCES = "multiple_sources"
    NO_TARGET = "no_target"
    MULTIPLE_TARGETS = "multiple_targets"


class SearchPreconditionError(ValueError):
    """
    Raised by start() when the graph lacks exactly one source and one target.

    Attributes:
        reason: Which requirement failed
        sources: Number of source nodes in the graph
        targets: Number of target nodes in the graph
    """

    def __init__(self, reason: Precondition, sources: int, targets: int) -> None:
        self.reason = reason
        self.sources = sources
        self.targets = targets
        if reason in (Precondition.NO_SOURCE, Precondition.MULTIPLE_SOURCES):
            message = f"Exactly one source required. This graph has {sources}."
        else:
            message = f"Exactly one target required. This graph has {targets}."
        super().__init__(message)


class SearchStateError(RuntimeError):
    """Raised when step() is called while no run is in progress."""


class SearchEngine:
    """
    Best-first search engine that advances one step at a time.

    The engine is the sole owner of the run state (open list, closed list,
    best-known paths, heuristic data, current node). Its only writes to the
    graph are colour overrides for display, all undone by cancel().
    """

    def __init__(self, graph: Graph) -> None:
        """
        Initialize the engine.

        Args:
            graph: Graph to search. Must not be edited while a run is active.
        """
        self._graph = graph
        self._clear_run_state()

    def _clear_run_state(self) -> None:
        self._status = SearchStatus.IDLE
        self._strategy: Strategy | None = None
        self._source: Node | None = None
        self._target: Node | None = None
        self._current: Node | None = None
        # May hold a node more than once; every copy goes when it's closed
        self._open: list[Node] = []
        self._closed: list[Node] = []
        self._closed_lookup: NodeStore[Node, bool] = NodeStore()
        self._paths: NodeStore[Node, list[Node]] = NodeStore()
        self._data: NodeStore[Node, dict[str, float]] = NodeStore()
        self._solution: list[Node] | None = None
        self._steps: list[SearchStep] = []
        self._elapsed_ms = 0.0

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status is SearchStatus.RUNNING

    @property
    def is_finished(self) -> bool:
        return self._status.is_terminal

    @property
    def strategy(self) -> Strategy | None:
        return self._strategy

    @property
    def source(self) -> Node | None:
        return self._source

    @property
    def target(self) -> Node | None:
        return self._target

    @property
    def current(self) -> Node | None:
        return self._current

    @property
    def open_nodes(self) -> list[Node]:
        """Distinct open nodes in order of first insertion."""
        seen: NodeStore[Node, bool] = NodeStore()
        for node in self._open:
            seen.soft_put(node, True)
        return seen.keys()

    @property
    def closed_nodes(self) -> list[Node]:
        return list(self._closed)

    @property
    def solution(self) -> list[Node] | None:
        return list(self._solution) if self._solution is not None else None

    @property
    def steps_taken(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> list[SearchStep]:
        return list(self._steps)

    def path_to(self, node: Node) -> list[Node] | None:
        """Best-known path from the source to node, if node was reached."""
        path = self._paths.get(node)
        return list(path) if path is not None else None

    def data_for(self, node: Node) -> dict[str, float] | None:
        """Heuristic data recorded for node, if node was reached."""
        data = self._data.get(node)
        return dict(data) if data is not None else None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def _find_endpoints(self) -> tuple[Node, Node]:
        sources = self._graph.nodes_of_type(NodeType.SOURCE)
        targets = self._graph.nodes_of_type(NodeType.TARGET)
        reason = None
        if not sources:
            reason = Precondition.NO_SOURCE
        elif len(sources) > 1:
            reason = Precondition.MULTIPLE_SOURCES
        elif not targets:
            reason = Precondition.NO_TARGET
        elif len(targets) > 1:
            reason = Precondition.MULTIPLE_TARGETS
        if reason is not None:
            raise SearchPreconditionError(reason, len(sources), len(targets))
        return sources[0], targets[0]

    def start(self, strategy: Strategy | str) -> None:
        """
        Begin a new run, cancelling any previous one.

        Args:
            strategy: Strategy instance or registered strategy name

        Raises:
            ValueError: If the strategy name is unknown
            SearchPreconditionError: If the graph doesn't have exactly one
                source and one target. Nothing is changed in that case.
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        source, target = self._find_endpoints()

        if self._status is not SearchStatus.IDLE:
            self.cancel()

        self._strategy = strategy
        self._source = source
        self._target = target
        self._open = [source]
        self._paths.put(source, [source])
        self._data.put(source, {"cost": 0.0, **strategy.init_data})
        self._status = SearchStatus.RUNNING

        logger.info(
            f"Starting {strategy.name} search over {len(self._graph)} nodes "
            f"({len(self._graph.edges)} edges)"
        )

    def cancel(self) -> None:
        """Discard the run and undo its colouring. No-op when idle."""
        if self._status is SearchStatus.IDLE:
            return
        logger.info(f"Search cancelled after {len(self._steps)} steps")
        self._graph.reset_visuals()
        self._clear_run_state()

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def _cost(self, node: Node) -> float:
        return self._data.get(node)["cost"]

    def _incoming_edge(self, node: Node) -> Edge | None:
        """Edge from node's predecessor on its best-known path."""
        path = self._paths.get(node)
        if path is None or len(path) < 2:
            return None
        return self._graph.edge_connecting(path[-2], node)

    def _pop_cheapest(self) -> Node:
        # min() keeps the first of equal keys, so ties go to the oldest entry
        index = min(range(len(self._open)), key=lambda i: self._cost(self._open[i]))
        node = self._open[index]
        self._open = [n for n in self._open if n is not node]
        return node

    def step(self) -> SearchStep:
        """
        Advance the run by one exploration step.

        Returns:
            Record of what this step closed and opened

        Raises:
            SearchStateError: If no run is in progress
        """
        if self._status is not SearchStatus.RUNNING:
            raise SearchStateError(f"Cannot step while {self._status.value}")

        started = time.perf_counter()
        graph = self._graph

        # Last frame's current node becomes closed
        if self._current is not None:
            graph.color_node(self._current, COLOR_CLOSED)
            last_edge = self._incoming_edge(self._current)
            if last_edge is not None:
                graph.color_edge(last_edge, COLOR_VISITED_ARROW)

        current = self._pop_cheapest()
        self._closed.append(current)
        self._closed_lookup.put(current, True)
        self._current = current

        graph.color_node(current, COLOR_CURRENT)
        last_edge = self._incoming_edge(current)
        if last_edge is not None:
            graph.color_edge(last_edge, COLOR_CURRENT_ARROW)

        opened: list[Node] = []
        if current is self._target:
            self._solution = list(self._paths.get(current))
            graph.color_path(self._solution, COLOR_SOLUTION_ARROW)
            for node in self._solution:
                graph.color_node(node, COLOR_SOLUTION)
            self._status = SearchStatus.SOLVED
        else:
            current_data = self._data.get(current)
            current_path = self._paths.get(current)
            for child in graph.children_of(current):
                if self._closed_lookup.contains_key(child):
                    continue

                tentative = dict(
                    self._strategy.heuristic(current_data, child, current, self._target)
                )
                known = self._data.get(child)
                if known is not None and tentative["cost"] >= known["cost"]:
                    continue

                self._open.append(child)
                self._paths.put(child, current_path + [child])
                self._data.put(child, tentative)
                opened.append(child)

                graph.color_edge(graph.edge_connecting(current, child), COLOR_VISITED_ARROW)
                graph.color_node(child, COLOR_OPEN)

            if not self._open:
                self._status = SearchStatus.EXHAUSTED

        self._elapsed_ms += (time.perf_counter() - started) * 1000

        step = SearchStep(
            step_number=len(self._steps) + 1,
            current=current,
            opened=opened,
            open_nodes=self.open_nodes,
            closed_nodes=list(self._closed),
            status=self._status,
        )
        self._steps.append(step)

        logger.debug(
            f"Step {step.step_number}: closed node {graph.index_of(current)}, "
            f"opened {len(opened)}, open list size {len(step.open_nodes)}"
        )
        if self._status is SearchStatus.SOLVED:
            logger.info(
                f"Solved in {step.step_number} steps, path has {len(self._solution) - 1} edges"
            )
        elif self._status is SearchStatus.EXHAUSTED:
            logger.info(f"No path found after {step.step_number} steps")

        return step

    def run(self, max_steps: int | None = None) -> SearchResult | None:
        """
        Step until the run finishes or max_steps more steps have been taken.

        Returns:
            SearchResult if the run finished, else None
        """
        taken = 0
        while self.is_running and (max_steps is None or taken < max_steps):
            self.step()
            taken += 1
        return self.result()

    def result(self) -> SearchResult | None:
        """Summary of the finished run, or None while idle or running."""
        if not self.is_finished:
            return None
        return SearchResult(
            strategy_name=self._strategy.name,
            source=self._source,
            target=self._target,
            solved=self._status is SearchStatus.SOLVED,
            path=list(self._solution or []),
            steps=list(self._steps),
            elapsed_ms=self._elapsed_ms,
        )
