"""
Search module.

Provides the stepwise search engine and its collaborators:
- Strategy: bfs, dfs, astar and greedy cost functions
- SearchEngine: One-step-at-a-time best-first search
- SearchStep / SearchResult: Run records
- TickDriver: Paces an engine for visualization
"""

from graphalgo.search.driver import TickDriver
from graphalgo.search.engine import (
    Precondition,
    SearchEngine,
    SearchPreconditionError,
    SearchStateError,
)
from graphalgo.search.state import SearchResult, SearchStatus, SearchStep
from graphalgo.search.strategies import (
    AStarStrategy,
    BreadthFirstStrategy,
    DepthFirstStrategy,
    GreedyStrategy,
    Strategy,
    available_strategies,
    get_strategy,
)

__all__ = [
    "TickDriver",
    "Precondition",
    "SearchEngine",
    "SearchPreconditionError",
    "SearchStateError",
    "SearchResult",
    "SearchStatus",
    "SearchStep",
    "AStarStrategy",
    "BreadthFirstStrategy",
    "DepthFirstStrategy",
    "GreedyStrategy",
    "Strategy",
    "available_strategies",
    "get_strategy",
]
