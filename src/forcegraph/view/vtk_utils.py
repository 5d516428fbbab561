"""
VTK and Geometry Utilities
Helper functions converting scene objects into PyVista data sets.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv

from forcegraph.model.prism import TriangularPrism


class VtkUtils:
    @staticmethod
    def polyline_to_polydata(points: npt.NDArray[np.float64]) -> pv.PolyData:
        """Convert a (N, 3) array of points to a single PolyData polyline."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        n = pts.shape[0]
        pd = pv.PolyData(pts)
        pd.lines = np.hstack([[n], np.arange(n, dtype=np.int_)])
        return pd

    @staticmethod
    def update_polyline(pd: pv.PolyData, points: npt.NDArray[np.float64]) -> None:
        """
        Overwrite the point coordinates of a polyline in place.

        Raises:
            ValueError: If the number of points changed (connectivity would be stale).
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if pts.shape[0] != pd.n_points:
            raise ValueError(f"Expected {pd.n_points} points, got {pts.shape[0]}.")
        pd.points = pts

    @staticmethod
    def sphere(radius: float) -> pv.PolyData:
        """Sphere centred on the origin; actors are translated to the node position."""
        return pv.Sphere(radius=radius, center=(0.0, 0.0, 0.0), theta_resolution=16, phi_resolution=16)

    @staticmethod
    def prism_to_polydata(prism: TriangularPrism) -> pv.PolyData:
        """Closed surface of a triangular prism."""
        return pv.PolyData(prism.vertices, prism.faces())
