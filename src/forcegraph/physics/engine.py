"""
Force-Directed Physics Engine
=============================
Relaxes node positions of the diagram one fixed time step at a time.

Per tick:
1. Pairwise repulsion between all registered nodes (F = k / r^2).
2. Hooke springs along edges whose endpoints are both registered.
3. Attraction of every registered edge target towards the edge's first
   Bezier control point.
4. Damped explicit Euler integration of the non-fixed nodes.
5. Re-sampling of all edge curves from the new positions.

Nodes live in an arena of `NodeRecord`s; the integer handle of a node is its
slot in the arena and the force accumulator is a dense array parallel to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from forcegraph.config import DEFAULT_PHYSICS, PhysicsParameters
from forcegraph.model.geometry import VectorLike, as_vector3, normalize, normalize_rows

if TYPE_CHECKING:
    import numpy.typing as npt

    from forcegraph.model.edge import CurvedEdge
    from forcegraph.model.node import GraphNode

logger = logging.getLogger(__name__)


@dataclass
class NodeRecord:
    """Simulation state of one registered node."""
    node: GraphNode
    fixed: bool = False
    velocity: npt.NDArray[np.float64] = field(default_factory=lambda: np.zeros(3, dtype=np.float64))


class PhysicsEngine:
    """
    Class for the layout simulation.

    Not thread-safe: register, connect and tick must be called from one thread.
    """

    def __init__(self, parameters: PhysicsParameters = DEFAULT_PHYSICS) -> None:
        """
        Initialize an empty simulation.

        Args:
            parameters: Force and integration constants.
        """
        self.parameters = parameters

        self._records: list[NodeRecord] = []
        self._handles: dict[int, int] = {}  # node uid -> arena slot
        self._edges: list[CurvedEdge] = []
        self._reported_edges: set[int] = set()  # edge indices already warned about

    # ------------------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------------------

    @property
    def nodes(self) -> list[GraphNode]:
        """Registered nodes in registration order."""
        return [record.node for record in self._records]

    @property
    def edges(self) -> list[CurvedEdge]:
        return list(self._edges)

    @property
    def number_of_nodes(self) -> int:
        return len(self._records)

    def register(self, node: GraphNode, fixed: bool = False) -> int:
        """
        Add a node to the simulation with zero velocity.

        Args:
            node: Node whose position the engine will update in place.
            fixed: Pinned nodes exert and receive forces but never move.

        Returns:
            The node's handle (its slot in the arena).

        Raises:
            ValueError: If a node with the same uid is already registered.
        """
        if node.uid in self._handles:
            raise ValueError(f"Node {node.uid} is already registered.")

        handle = len(self._records)
        self._records.append(NodeRecord(node=node, fixed=bool(fixed)))
        self._handles[node.uid] = handle
        logger.debug(f"Registered node {node.uid} as handle {handle} (fixed={fixed}).")
        return handle

    def connect(self, edge: CurvedEdge) -> None:
        """Add an edge. Its endpoints do not have to be registered."""
        self._edges.append(edge)
        logger.debug(f"Connected edge {edge!r}.")

    def handle_of(self, node: GraphNode) -> Optional[int]:
        """Arena slot of a node, or None if it is not registered."""
        handle = self._handles.get(node.uid)
        # Another object sharing the uid of a registered node is not registered
        if handle is None or self._records[handle].node is not node:
            return None
        return handle

    def _record(self, node: GraphNode) -> NodeRecord:
        handle = self.handle_of(node)
        if handle is None:
            raise ValueError(f"Node {node.uid} is not registered.")
        return self._records[handle]

    def is_fixed(self, node: GraphNode) -> bool:
        return self._record(node).fixed

    def velocity_of(self, node: GraphNode) -> npt.NDArray[np.float64]:
        """Copy of the node's current velocity."""
        return self._record(node).velocity.copy()

    def set_velocity(self, node: GraphNode, velocity: VectorLike) -> None:
        self._record(node).velocity[:] = as_vector3(velocity)

    # ------------------------------------------------------------------------------
    # Forces
    # ------------------------------------------------------------------------------

    def _positions(self) -> npt.NDArray[np.float64]:
        """(n, 3) snapshot of the registered node positions."""
        if not self._records:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([record.node.position for record in self._records], dtype=np.float64)

    def _add_repulsion_forces(
        self,
        positions: npt.NDArray[np.float64],
        forces: npt.NDArray[np.float64],
    ) -> None:
        """Coulomb-like repulsion over every pair; each pair contributes equal and opposite forces."""
        if len(positions) < 2:
            return

        # delta[i, j] = p_i - p_j
        delta = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
        distance = np.maximum(np.linalg.norm(delta, axis=-1), self.parameters.min_distance)
        magnitude = self.parameters.repulsion_strength / (distance * distance)
        np.fill_diagonal(magnitude, 0.0)

        forces += (normalize_rows(delta) * magnitude[..., np.newaxis]).sum(axis=1)

    def _add_spring_forces(
        self,
        positions: npt.NDArray[np.float64],
        forces: npt.NDArray[np.float64],
    ) -> None:
        """Hooke springs towards the rest length, for edges with both endpoints registered."""
        for index, edge in enumerate(self._edges):
            i = self.handle_of(edge.source)
            j = self.handle_of(edge.target)
            if i is None or j is None:
                self._report_unregistered(index, edge)
                continue

            delta = positions[j] - positions[i]
            distance = float(np.linalg.norm(delta))
            force = normalize(delta) * (
                self.parameters.spring_strength * (distance - self.parameters.rest_length)
            )
            forces[i] += force
            forces[j] -= force

    def _add_control_point_forces(
        self,
        positions: npt.NDArray[np.float64],
        forces: npt.NDArray[np.float64],
    ) -> None:
        """Pull every registered edge target towards the edge's first control point."""
        for edge in self._edges:
            j = self.handle_of(edge.target)
            if j is None:
                continue

            anchor = edge.control_point_a()
            forces[j] += (anchor - positions[j]) * self.parameters.control_point_attraction

    def _report_unregistered(self, index: int, edge: CurvedEdge) -> None:
        if index in self._reported_edges:
            return
        self._reported_edges.add(index)
        missing = [
            node.uid for node in (edge.source, edge.target) if self.handle_of(node) is None
        ]
        logger.warning(f"Edge {edge!r} references unregistered node(s) {missing}; spring skipped.")

    def compute_forces(self) -> npt.NDArray[np.float64]:
        """
        Accumulate all forces for the current positions.

        Returns:
            (n, 3) array, row k being the net force on the node with handle k.
        """
        positions = self._positions()
        forces = np.zeros_like(positions)

        self._add_repulsion_forces(positions, forces)
        self._add_spring_forces(positions, forces)
        self._add_control_point_forces(positions, forces)
        return forces

    # ------------------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the simulation by one fixed time step and refresh every edge curve."""
        dt = self.parameters.time_step
        damping = self.parameters.damping

        forces = self.compute_forces()

        for handle, record in enumerate(self._records):
            if record.fixed:
                continue

            # v += F * dt, damped every step
            record.velocity += forces[handle] * dt
            record.velocity *= damping

            # p += v * dt, in place so renderers keep their reference
            record.node.position += record.velocity * dt

        for edge in self._edges:
            edge.recompute()

    def kinetic_energy(self) -> float:
        """Sum of 0.5 * |v|^2 over the free nodes (unit mass)."""
        return 0.5 * sum(
            float(np.dot(record.velocity, record.velocity))
            for record in self._records
            if not record.fixed
        )

    def run(
        self,
        n_ticks: int,
        callback: Optional[Callable[[int], None]] = None,
    ) -> float:
        """
        Run a number of ticks back to back.

        Args:
            n_ticks: Number of ticks to perform.
            callback: Called with the tick index after every tick.

        Returns:
            Kinetic energy after the last tick.
        """
        if n_ticks < 0:
            raise ValueError(f"n_ticks must not be negative, got {n_ticks}.")

        logger.info(
            f"Relaxing layout: {n_ticks} ticks, "
            f"{self.number_of_nodes} nodes, {len(self._edges)} edges."
        )
        for i in range(n_ticks):
            self.tick()
            if callback is not None:
                callback(i)

        energy = self.kinetic_energy()
        logger.info(f"Layout relaxed, kinetic energy {energy:.6g}.")
        return energy
