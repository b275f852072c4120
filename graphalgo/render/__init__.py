"""
Rendering module.

Provides Scene, a graph listener that draws the graph and its search
colouring with plotly.
"""

from graphalgo.render.scene import EdgeSprite, Frame, NodeSprite, Scene

__all__ = ["EdgeSprite", "Frame", "NodeSprite", "Scene"]
