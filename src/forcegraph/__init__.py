"""3D node-link diagrams with force-directed layout and curved edges."""

__version__ = "0.1.0"
