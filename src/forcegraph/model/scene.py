"""
Scene Graph
===========
Container tying nodes, curved edges and prisms together, plus the demo
diagram shown by the viewer and the headless runner.

Why is this file needed?
------------------------
1. Registration: nodes and edges are created here, and `populate` hands them
   to a physics engine with the right pinned flags.
2. Decoupling: the viewer only reads a SceneGraph; it never builds geometry
   itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Optional

from forcegraph.model.edge import CurvedEdge, DirectionHint
from forcegraph.model.node import GraphNode
from forcegraph.model.prism import TriangularPrism

if TYPE_CHECKING:
    from forcegraph.physics.engine import PhysicsEngine

logger = logging.getLogger(__name__)

PINNED_COLOR = "#ffff00"


@dataclass
class SceneGraph:
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[CurvedEdge] = field(default_factory=list)
    prisms: list[TriangularPrism] = field(default_factory=list)
    fixed: set[int] = field(default_factory=set)  # uids of pinned nodes

    def add_node(self, node: GraphNode, fixed: bool = False) -> GraphNode:
        self.nodes.append(node)
        if fixed:
            self.fixed.add(node.uid)
        return node

    def add_prism(self, prism: TriangularPrism) -> TriangularPrism:
        """Add a prism; its ports join the scene as pinned nodes."""
        self.prisms.append(prism)
        for port in prism.ports:
            self.add_node(port, fixed=True)
        return prism

    def add_edge(
        self,
        source: GraphNode,
        target: GraphNode,
        hint: Optional[DirectionHint] = None,
        **kwargs,
    ) -> CurvedEdge:
        edge = CurvedEdge(source, target, hint=hint, **kwargs)
        self.edges.append(edge)
        return edge

    def populate(self, engine: PhysicsEngine) -> None:
        """Register every node and connect every edge."""
        for node in self.nodes:
            engine.register(node, fixed=node.uid in self.fixed)
        for edge in self.edges:
            engine.connect(edge)
        logger.info(
            f"Scene loaded into engine: {len(self.nodes)} nodes "
            f"({len(self.fixed)} fixed), {len(self.edges)} edges."
        )


def build_demo_scene() -> SceneGraph:
    """
    The demo diagram: a node pair on the X axis, a pinned hub above them and
    a prism whose ports feed two more nodes.
    """
    scene = SceneGraph()

    left = scene.add_node(GraphNode(0, (-2.0, 0.0, 0.0)))
    right = scene.add_node(GraphNode(1, (2.0, 0.0, 0.0)))
    hub = scene.add_node(GraphNode(2, (0.0, 2.0, 0.0), color=PINNED_COLOR), fixed=True)
    lower = scene.add_node(GraphNode(3, (-1.0, -1.5, 1.0)))
    far = scene.add_node(GraphNode(4, (1.0, -2.5, -1.0)))

    prism = scene.add_prism(TriangularPrism((-4.0, -3.0, 0.0), port_indices=(100, 101)))

    scene.add_edge(left, right)
    scene.add_edge(hub, left)
    scene.add_edge(hub, right)
    scene.add_edge(prism.port1, lower, hint=prism.port_hint(prism.port1))
    scene.add_edge(prism.port2, far, hint=prism.port_hint(prism.port2))
    scene.add_edge(lower, far)
    return scene
