"""
Triangular Prism
================
A right-triangle block with two connection ports on its hypotenuse face.

Local geometry: the right angle sits at the origin, the legs run along +X and
+Y with unit length, and the triangle is extruded along +Z by `depth`. Ports
sit at 1/4 and 3/4 along the hypotenuse, half-way through the depth; edges
leaving a port start along the face's outward normal (1, 1, 0)/sqrt(2).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np

from forcegraph.config import PORT_RADIUS, PRISM_COLOR
from forcegraph.model.edge import Hint
from forcegraph.model.geometry import VectorLike, as_vector3, normalize
from forcegraph.model.node import GraphNode

if TYPE_CHECKING:
    import numpy.typing as npt

# Right triangle in the XY plane, counter-clockwise
_TRIANGLE = np.array([
    [0.0, 0.0, 0.0],
    [1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0],
], dtype=np.float64)

_HYPOTENUSE_NORMAL = normalize(np.array([1.0, 1.0, 0.0]))


class TriangularPrism:
    def __init__(
        self,
        position: VectorLike,
        port_indices: Tuple[int, int],
        color: str = PRISM_COLOR,
        depth: float = 0.5,
    ) -> None:
        """
        Initialize the prism and its two port nodes.

        Args:
            position: World position of the right-angle corner on the back face.
            port_indices: Node uids given to the two ports.
            color: Render colour of the body and its ports.
            depth: Extrusion length along +Z.
        """
        if depth <= 0.0:
            raise ValueError(f"Prism depth must be positive, got {depth}.")

        self.position = as_vector3(position)
        self.color = color
        self.depth = float(depth)

        mid = 0.5 * self.depth
        self.port1 = GraphNode(
            port_indices[0], self.position + np.array([0.75, 0.25, mid]), color, PORT_RADIUS
        )
        self.port2 = GraphNode(
            port_indices[1], self.position + np.array([0.25, 0.75, mid]), color, PORT_RADIUS
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self.position}, depth={self.depth})"

    @property
    def ports(self) -> tuple[GraphNode, GraphNode]:
        return self.port1, self.port2

    def port1_direction(self) -> npt.NDArray[np.float64]:
        """Outward normal of the hypotenuse face at port 1."""
        return _HYPOTENUSE_NORMAL.copy()

    def port2_direction(self) -> npt.NDArray[np.float64]:
        """Outward normal of the hypotenuse face at port 2 (same face as port 1)."""
        return _HYPOTENUSE_NORMAL.copy()

    def port_hint(self, port: GraphNode) -> Hint:
        """Direction hint for an edge leaving one of this prism's ports."""
        if port is self.port1:
            return Hint.towards(self.port1_direction())
        if port is self.port2:
            return Hint.towards(self.port2_direction())
        raise ValueError(f"{port!r} is not a port of this prism.")

    @property
    def vertices(self) -> npt.NDArray[np.float64]:
        """(6, 3) array: back triangle (z=0) then front triangle (z=depth), in world coordinates."""
        back = _TRIANGLE + self.position
        front = back + np.array([0.0, 0.0, self.depth])
        return np.vstack((back, front))

    @staticmethod
    def faces() -> npt.NDArray[np.int_]:
        """Face connectivity in VTK padding format ([n, i0, ..., i(n-1)] per face)."""
        return np.hstack([
            [3, 0, 2, 1],      # back, facing -Z
            [3, 3, 4, 5],      # front, facing +Z
            [4, 0, 1, 4, 3],   # bottom leg (y=0)
            [4, 0, 3, 5, 2],   # side leg (x=0)
            [4, 1, 2, 5, 4],   # hypotenuse
        ]).astype(np.int_)
