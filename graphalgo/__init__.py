"""
GraphAlgo.

Build a directed graph and watch breadth-first, depth-first, A* and
greedy best-first search explore it one step at a time.
"""

__version__ = "0.1.0"
