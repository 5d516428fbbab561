"""
Main Application Window
=======================
The top-level window holding the live 3D view of the diagram.

Why is this file needed?
------------------------
1. Layout: It hosts the PyVista widget as the central widget.
2. Routing: It reports simulation errors raised inside the animation loop
   to the user instead of letting them escape into the Qt event loop.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QMessageBox
from PySide6.QtGui import QCloseEvent

from forcegraph.model.scene import SceneGraph
from forcegraph.physics.engine import PhysicsEngine
from forcegraph.view.application import VISIBLE_APP_NAME
from forcegraph.view.plot_3d import GraphViewWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, scene: SceneGraph, engine: PhysicsEngine) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 900)

        self.view = GraphViewWidget(scene, engine, self)
        self.setCentralWidget(self.view)
        self.view.error_occurred.connect(self.on_simulation_error)

        self.statusBar().showMessage(
            f"{engine.number_of_nodes} nodes, {len(engine.edges)} edges"
        )

    def on_simulation_error(self, message: str) -> None:
        QMessageBox.critical(self, VISIBLE_APP_NAME, f"Layout simulation stopped:\n{message}")

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing main window.")
        self.view.stop()
        self.view.close()
        event.accept()
