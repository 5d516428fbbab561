"""
The VIEW layer draws the scene with PyVista inside a PySide6 window
and drives the layout simulation from a Qt timer.
"""
