"""
Plotly rendering of a graph and its search colouring.

A Scene subscribes to graph notifications and mirrors what needs drawing
(positions, categories, colour overrides). It only reads from the graph;
nothing here feeds back into search decisions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import plotly.graph_objects as go

from graphalgo.config import (
    ARROW_SPACING,
    FIGURE_HEIGHT,
    NODE_RADIUS,
    NODE_STROKE_COLOR,
    to_hex,
)
from graphalgo.graph.model import GraphListener, NodeType
from graphalgo.graph.node_store import NodeStore

if TYPE_CHECKING:
    from graphalgo.graph.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeSprite:
    """Drawable state of one node."""

    x: float
    y: float
    node_type: NodeType
    color: str


@dataclass(frozen=True)
class EdgeSprite:
    """Drawable state of one edge, already shortened to the node rims."""

    x0: float
    y0: float
    x1: float
    y1: float
    color: str


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw the scene at one moment."""

    nodes: tuple[NodeSprite, ...]
    edges: tuple[EdgeSprite, ...]
    label: str = ""


def _node_sprite(node: Node) -> NodeSprite:
    return NodeSprite(node.x, node.y, node.type, to_hex(node.display_color))


def _edge_sprite(edge: Edge) -> EdgeSprite:
    start = edge.from_node.position
    end = edge.to_node.position
    try:
        direction = (end - start).unit()
    except ValueError:
        # Coincident endpoints: nothing sensible to shorten
        pass
    else:
        start = start + direction * NODE_RADIUS
        end = end - direction * (NODE_RADIUS + ARROW_SPACING)
    return EdgeSprite(start.x, start.y, end.x, end.y, to_hex(edge.display_color))


class Scene(GraphListener):
    """
    Listener that keeps a drawable copy of a graph up to date.

    Usage:
        scene = Scene(graph)
        ...                      # edit graph / run search
        scene.capture("step 1")  # record a frame
        scene.animation().write_html("run.html")
    """

    def __init__(self, graph: Graph, title: str = "GraphAlgo") -> None:
        self._graph = graph
        self.title = title
        self._nodes: NodeStore[Node, NodeSprite] = NodeStore()
        self._edges: NodeStore[Edge, EdgeSprite] = NodeStore()
        self._frames: list[Frame] = []
        for node in graph.nodes:
            self.on_node_added(node)
        for edge in graph.edges:
            self.on_edge_added(edge)
        graph.add_listener(self)

    def detach(self) -> None:
        self._graph.remove_listener(self)

    # -------------------------------------------------------------------------
    # Graph notifications
    # -------------------------------------------------------------------------

    def on_node_added(self, node: Node) -> None:
        self._nodes.put(node, _node_sprite(node))

    def on_node_removed(self, node: Node) -> None:
        self._nodes.remove(node)

    def on_node_moved(self, node: Node) -> None:
        sprite = self._nodes.get(node)
        if sprite is not None:
            self._nodes.put(node, replace(sprite, x=node.x, y=node.y))

    def on_node_changed(self, node: Node) -> None:
        self._nodes.put(node, _node_sprite(node))

    def on_edge_added(self, edge: Edge) -> None:
        self._edges.put(edge, _edge_sprite(edge))

    def on_edge_removed(self, edge: Edge) -> None:
        self._edges.remove(edge)

    def on_edge_changed(self, edge: Edge) -> None:
        self._edges.put(edge, _edge_sprite(edge))

    # -------------------------------------------------------------------------
    # Frames
    # -------------------------------------------------------------------------

    @property
    def frames(self) -> list[Frame]:
        return list(self._frames)

    def snapshot(self, label: str = "") -> Frame:
        return Frame(
            nodes=tuple(sprite for _, sprite in self._nodes.entries()),
            edges=tuple(sprite for _, sprite in self._edges.entries()),
            label=label,
        )

    def capture(self, label: str = "") -> Frame:
        """Record the current state as an animation frame."""
        frame = self.snapshot(label or f"frame {len(self._frames)}")
        self._frames.append(frame)
        return frame

    # -------------------------------------------------------------------------
    # Plotly output
    # -------------------------------------------------------------------------

    @staticmethod
    def _node_trace(frame: Frame) -> go.Scatter:
        return go.Scatter(
            x=[s.x for s in frame.nodes],
            y=[s.y for s in frame.nodes],
            mode="markers",
            marker=dict(
                size=NODE_RADIUS * 2,
                color=[s.color for s in frame.nodes],
                line=dict(width=2, color=to_hex(NODE_STROKE_COLOR)),
            ),
            text=[s.node_type.name.lower() for s in frame.nodes],
            hovertemplate="%{text} (%{x:.0f}, %{y:.0f})<extra></extra>",
            showlegend=False,
        )

    @staticmethod
    def _edge_annotations(frame: Frame) -> list[dict]:
        return [
            dict(
                x=s.x1,
                y=s.y1,
                ax=s.x0,
                ay=s.y0,
                xref="x",
                yref="y",
                axref="x",
                ayref="y",
                showarrow=True,
                arrowhead=2,
                arrowsize=1.2,
                arrowwidth=2,
                arrowcolor=s.color,
                text="",
            )
            for s in frame.edges
        ]

    def _layout(self, frame: Frame) -> dict:
        return dict(
            title=self.title,
            height=FIGURE_HEIGHT,
            annotations=self._edge_annotations(frame),
            xaxis=dict(visible=False),
            # Screen coordinates: y grows downwards
            yaxis=dict(visible=False, autorange="reversed", scaleanchor="x"),
            plot_bgcolor="white",
            margin=dict(t=40, b=20, l=20, r=20),
        )

    def figure(self) -> go.Figure:
        """Static figure of the current state."""
        frame = self.snapshot()
        fig = go.Figure(data=[self._node_trace(frame)])
        fig.update_layout(**self._layout(frame))
        return fig

    def animation(self) -> go.Figure:
        """Figure that plays back every captured frame."""
        if not self._frames:
            return self.figure()

        first = self._frames[0]
        fig = go.Figure(
            data=[self._node_trace(first)],
            frames=[
                go.Frame(
                    data=[self._node_trace(frame)],
                    layout=dict(annotations=self._edge_annotations(frame)),
                    name=frame.label,
                )
                for frame in self._frames
            ],
        )
        fig.update_layout(**self._layout(first))
        fig.update_layout(
            updatemenus=[
                dict(
                    type="buttons",
                    showactive=False,
                    buttons=[
                        dict(
                            label="Play",
                            method="animate",
                            args=[None, dict(frame=dict(duration=500, redraw=True), fromcurrent=True)],
                        )
                    ],
                )
            ],
            sliders=[
                dict(
                    steps=[
                        dict(
                            label=frame.label,
                            method="animate",
                            args=[[frame.label], dict(mode="immediate", frame=dict(redraw=True))],
                        )
                        for frame in self._frames
                    ]
                )
            ],
        )
        logger.debug(f"Built animation with {len(self._frames)} frames")
        return fig
