from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from forcegraph.config import NODE_COLOR, NODE_RADIUS
from forcegraph.model.geometry import VectorLike, as_vector3

if TYPE_CHECKING:
    import numpy.typing as npt


class GraphNode:
    """
    A point of the diagram: a sphere in the scene and a body in the layout simulation.

    The position array is owned by the node and mutated in place by the physics
    engine, so renderers holding a reference see the new coordinates directly.
    """
    def __init__(
        self,
        index: int,
        position: VectorLike,
        color: str = NODE_COLOR,
        radius: float = NODE_RADIUS,
    ) -> None:
        """
        Initialize the node.

        Args:
            index: Unique id of the node, used as its registry key.
            position: Initial coordinates [X, Y, Z].
            color: Render colour.
            radius: Render radius of the sphere.
        """
        self.uid = int(index)
        self.position: npt.NDArray[np.float64] = as_vector3(position)
        self.color = color
        self.radius = float(radius)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.uid}, position={self.position})"

    @property
    def x(self) -> float:
        """X-coordinate of the node."""
        return self.position[0]

    @property
    def y(self) -> float:
        """Y-coordinate of the node."""
        return self.position[1]

    @property
    def z(self) -> float:
        """Z-coordinate of the node."""
        return self.position[2]

    def move_to(self, position: VectorLike) -> None:
        """Overwrite the coordinates in place, keeping the array identity."""
        self.position[:] = as_vector3(position)
