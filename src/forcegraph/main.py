"""
Application Initialization
==========================
This module wires the scene, the physics engine and the window together.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Builds the demo SceneGraph (Model).
2. Loads it into a PhysicsEngine.
3. Either relaxes the layout headless or hands both to the MainWindow (View).
"""
import logging

from forcegraph.config import DEFAULT_PHYSICS, PhysicsParameters
from forcegraph.model.scene import SceneGraph, build_demo_scene
from forcegraph.physics.engine import PhysicsEngine

logger = logging.getLogger(__name__)


def load_engine(
    scene: SceneGraph,
    parameters: PhysicsParameters = DEFAULT_PHYSICS,
) -> PhysicsEngine:
    engine = PhysicsEngine(parameters)
    scene.populate(engine)
    return engine


def run_headless(n_ticks: int) -> float:
    """Relax the demo scene without a window and log the final layout."""
    scene = build_demo_scene()
    engine = load_engine(scene)
    energy = engine.run(n_ticks)

    for node in engine.nodes:
        x, y, z = node.position
        state = "fixed" if engine.is_fixed(node) else "free"
        logger.info(f"Node {node.uid:>4} ({state}): ({x:+.4f}, {y:+.4f}, {z:+.4f})")
    return energy


def run_viewer() -> int:
    # Qt and VTK are only imported when a window is requested
    from forcegraph.view.application import create_app
    from forcegraph.view.main_window import MainWindow

    app = create_app()

    scene = build_demo_scene()
    engine = load_engine(scene)

    window = MainWindow(scene, engine)
    window.show()
    window.view.start()

    return app.exec()

