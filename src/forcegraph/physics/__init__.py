"""
Layout Simulation
=================
The force-directed engine that keeps the diagram readable.

Note: This package is pure Python/NumPy and should NOT import PySide6 or PyVista.
"""
