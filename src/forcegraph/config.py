"""
Configuration & Simulation Constants
====================================
This module is the central registry for the tunable constants of the layout
simulation, the edge curves and the viewer.

Why is this file needed?
------------------------
1. Single source: the physics engine, the edge model and the viewer read their
   defaults from here instead of scattering magic numbers.
2. Validation: parameter groups check their values once, at construction,
   so the tick loop never has to.

Exports:
    PhysicsParameters: Force and integration constants for the engine.
    CurveParameters: Bezier control point ratios and sampling resolution.
    FRAME_INTERVAL_MS (int): Viewer timer interval (~60 FPS).
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsParameters:
    """Constants of the force-directed layout."""
    repulsion_strength: float = 50.0
    spring_strength: float = 0.1
    rest_length: float = 2.0
    control_point_attraction: float = 5.0
    damping: float = 0.9
    time_step: float = 1.0 / 60.0  # s, fixed (not wall-clock)
    min_distance: float = 0.1  # repulsion distance clamp

    def __post_init__(self) -> None:
        if self.time_step <= 0.0:
            raise ValueError(f"time_step must be positive, got {self.time_step}.")
        if self.min_distance <= 0.0:
            raise ValueError(f"min_distance must be positive, got {self.min_distance}.")
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must lie in [0, 1], got {self.damping}.")
        if self.rest_length < 0.0:
            raise ValueError(f"rest_length must not be negative, got {self.rest_length}.")


@dataclass(frozen=True)
class CurveParameters:
    """Shape of the cubic Bezier used for every edge."""
    extend_ratio: float = 0.4  # first control point, along the initial direction
    approach_ratio: float = 0.3  # second control point, pulled back from the target
    segments: int = 50

    def __post_init__(self) -> None:
        if self.segments < 1:
            raise ValueError(f"segments must be at least 1, got {self.segments}.")

    @property
    def n_points(self) -> int:
        return self.segments + 1


DEFAULT_PHYSICS = PhysicsParameters()
DEFAULT_CURVE = CurveParameters()

# Viewer
FRAME_INTERVAL_MS: int = 16
DEFAULT_TICKS: int = 600
BACKGROUND_COLOR: str = "black"
NODE_COLOR: str = "#00ff00"
EDGE_COLOR: str = "#ffffff"
PRISM_COLOR: str = "#ff6600"
NODE_RADIUS: float = 0.3
PORT_RADIUS: float = 0.1
