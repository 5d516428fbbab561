"""
Curved Edges
============
Directed edges drawn as cubic Bezier curves between two graph nodes.

The curve leaves the source along an initial direction (a port's outward
normal, for example) and arrives at the target along the straight
source-to-target direction:

    A = source + initial_direction * (distance * extend_ratio)
    B = target - final_direction * (distance * approach_ratio)

Everything is derived from the current endpoint positions and the immutable
direction hint, so the curve carries no accumulated state.

Classes:
    NoHint: Start along the source-to-target direction.
    Hint: Start along a fixed unit vector.
    CurvedEdge: The edge itself, holding the sampled polyline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

import numpy as np

from forcegraph.config import DEFAULT_CURVE, EDGE_COLOR, CurveParameters
from forcegraph.model.geometry import VectorLike, as_vector3, cubic_bezier, normalize

if TYPE_CHECKING:
    import numpy.typing as npt

    from forcegraph.model.node import GraphNode


@dataclass(frozen=True)
class NoHint:
    """No preferred start direction: the curve leaves towards the target."""

    def resolve(self, final_direction: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return final_direction


@dataclass(frozen=True)
class Hint:
    """Fixed start direction, stored normalized."""
    direction: Tuple[float, float, float]

    def __post_init__(self) -> None:
        unit = normalize(as_vector3(self.direction))
        object.__setattr__(self, "direction", tuple(float(c) for c in unit))

    @classmethod
    def towards(cls, direction: VectorLike) -> Hint:
        return cls(tuple(as_vector3(direction)))

    def resolve(self, final_direction: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return np.array(self.direction, dtype=np.float64)


DirectionHint = Union[NoHint, Hint]


class CurvedEdge:
    """
    Directed source -> target edge rendered as a sampled cubic Bezier.
    """
    def __init__(
        self,
        source: GraphNode,
        target: GraphNode,
        color: str = EDGE_COLOR,
        hint: Optional[DirectionHint] = None,
        curve: CurveParameters = DEFAULT_CURVE,
    ) -> None:
        """
        Initialize the edge and sample its curve from the current positions.

        Args:
            source: Node the curve starts at.
            target: Node the curve ends at.
            color: Render colour, no effect on the layout.
            hint: Start direction policy; `None` means `NoHint()`.
            curve: Control point ratios and sampling resolution.
        """
        self.source = source
        self.target = target
        self.color = color
        self.hint: DirectionHint = hint if hint is not None else NoHint()
        self.curve = curve
        self.points: npt.NDArray[np.float64] = np.empty((0, 3), dtype=np.float64)
        self.recompute()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.source.uid} -> {self.target.uid})"

    def _frame(self) -> tuple[npt.NDArray[np.float64], float]:
        """Final (source to target) unit direction and endpoint distance."""
        delta = self.target.position - self.source.position
        return normalize(delta), float(np.linalg.norm(delta))

    def control_point_a(self) -> npt.NDArray[np.float64]:
        """First control point (the anchor), from the current positions."""
        final_direction, distance = self._frame()
        initial_direction = self.hint.resolve(final_direction)
        return self.source.position + initial_direction * (distance * self.curve.extend_ratio)

    def control_point_b(self) -> npt.NDArray[np.float64]:
        """Second control point, pulled back from the target along the final direction."""
        final_direction, distance = self._frame()
        return self.target.position + final_direction * (-distance * self.curve.approach_ratio)

    def control_points(self) -> npt.NDArray[np.float64]:
        """(4, 3) array [source, A, B, target]."""
        return np.vstack((
            self.source.position,
            self.control_point_a(),
            self.control_point_b(),
            self.target.position,
        ))

    def recompute(self) -> None:
        """Re-sample the polyline from the current endpoint positions."""
        self.points = cubic_bezier(self.control_points(), self.curve.segments)

    @property
    def length(self) -> float:
        """Arc length of the sampled polyline."""
        return float(np.linalg.norm(np.diff(self.points, axis=0), axis=1).sum())
