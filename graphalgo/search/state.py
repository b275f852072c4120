"""
Dataclasses describing search runs: status, per-step records and results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphalgo.graph.model import Node


class SearchStatus(Enum):
    """Lifecycle of a search engine run."""

    IDLE = "idle"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.SOLVED, SearchStatus.EXHAUSTED)


@dataclass
class SearchStep:
    """
    Records a single exploration step.

    Attributes:
        step_number: 1-indexed step number
        current: Node closed during this step
        opened: Children added to the open list during this step
        open_nodes: Open list after the step (distinct nodes, insertion order)
        closed_nodes: Closed list after the step
        status: Engine status after the step
    """

    step_number: int
    current: Node
    opened: list[Node]
    open_nodes: list[Node]
    closed_nodes: list[Node]
    status: SearchStatus

    @property
    def is_final(self) -> bool:
        return self.status.is_terminal


@dataclass
class SearchResult:
    """
    Complete record of a finished run.

    Attributes:
        strategy_name: Strategy that drove the run
        source: Source node
        target: Target node
        solved: Whether the target was reached
        path: Source-to-target path if solved, else empty
        steps: Every step taken, in order
        elapsed_ms: Wall time spent inside step() calls (milliseconds)
        timestamp: When the run finished
    """

    strategy_name: str
    source: Node
    target: Node
    solved: bool
    path: list[Node]
    steps: list[SearchStep]
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def closed_count(self) -> int:
        return len(self.steps[-1].closed_nodes) if self.steps else 0

    @property
    def path_length(self) -> int | None:
        """Edges on the solution path, or None if unsolved."""
        if not self.solved:
            return None
        return len(self.path) - 1
