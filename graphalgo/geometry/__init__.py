"""
Geometry module.

Provides the 2D vector type used for node positions and
distance-based heuristics.
"""

from graphalgo.geometry.vector import Vector2D

__all__ = ["Vector2D"]
