"""
Vector helpers for 3D positions stored as numpy arrays.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

VectorLike = Union[Sequence[float], "npt.NDArray[np.float64]"]


def as_vector3(values: VectorLike) -> npt.NDArray[np.float64]:
    """
    Copy the input into a fresh (3,) float64 array.

    Raises:
        ValueError: If the input does not hold exactly three components.
    """
    vec = np.array(values, dtype=np.float64).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {np.shape(values)}.")
    return vec


def length(vec: npt.NDArray[np.float64]) -> float:
    return float(np.linalg.norm(vec))


def normalize(vec: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Unit vector in the direction of `vec`; the zero vector maps to itself."""
    mag = np.linalg.norm(vec)
    if mag == 0.0:
        return np.zeros(3, dtype=np.float64)
    return vec / mag


def normalize_rows(vecs: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Row-wise `normalize` for an (..., 3) array."""
    mags = np.linalg.norm(vecs, axis=-1, keepdims=True)
    return np.divide(vecs, mags, out=np.zeros_like(vecs), where=mags > 0.0)


def cubic_bezier(
    control_points: npt.NDArray[np.float64],
    segments: int,
) -> npt.NDArray[np.float64]:
    """
    Sample a cubic Bezier at `segments` uniform parameter steps.

    Args:
        control_points: (4, 3) array [P0, P1, P2, P3].
        segments: Number of parameter steps; `segments + 1` points are returned.

    Returns:
        (segments + 1, 3) array from P0 to P3 inclusive.
    """
    p0, p1, p2, p3 = control_points
    t = np.linspace(0.0, 1.0, segments + 1)[:, np.newaxis]
    s = 1.0 - t
    return (s ** 3) * p0 + 3.0 * (s ** 2) * t * p1 + 3.0 * s * (t ** 2) * p2 + (t ** 3) * p3
