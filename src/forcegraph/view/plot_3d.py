"""
3D Visualization Widget (PyVista Wrapper) - Live Layout
"""

from __future__ import annotations

from typing import Optional

import logging

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFrame, QStyle
)
from PySide6.QtCore import QTimer, Signal
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from forcegraph.config import BACKGROUND_COLOR, FRAME_INTERVAL_MS
from forcegraph.model.edge import CurvedEdge
from forcegraph.model.node import GraphNode
from forcegraph.model.scene import SceneGraph
from forcegraph.physics.engine import PhysicsEngine
from forcegraph.view.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)


class GraphViewWidget(QWidget):
    """
    Draws a SceneGraph and steps its physics engine once per timer frame.
    """
    error_occurred = Signal(str)

    def __init__(
        self,
        scene: SceneGraph,
        engine: PhysicsEngine,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.scene = scene
        self.engine = engine

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()

        self._vtk_utils = VtkUtils()

        # --- Actors state ---
        self._node_actors: list[tuple[GraphNode, pv.Actor]] = []
        self._edge_lines: list[tuple[CurvedEdge, pv.PolyData]] = []
        self._prism_actors: list[pv.Actor] = []

        self._build_actors()
        self._setup_overlay_controls()

        # Animation loop: one physics tick per frame
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self.step)

        self.plotter.reset_camera()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def start(self) -> None:
        logger.info("Starting layout animation.")
        self._frame_timer.start()
        if not self.btn_play.isChecked():
            self.btn_play.blockSignals(True)
            self.btn_play.setChecked(True)
            self.btn_play.blockSignals(False)

    def stop(self) -> None:
        self._frame_timer.stop()
        if self.btn_play.isChecked():
            self.btn_play.blockSignals(True)
            self.btn_play.setChecked(False)
            self.btn_play.blockSignals(False)

    @property
    def is_running(self) -> bool:
        return self._frame_timer.isActive()

    def step(self) -> None:
        """Advance the engine one tick and push the new geometry to the actors."""
        try:
            self.engine.tick()
        except Exception as e:
            logger.exception(f"Layout step failed: {e}")
            self.stop()
            self.error_occurred.emit(str(e))
            return

        self.sync_actors()
        self.plotter.render()

    def sync_actors(self) -> None:
        """Copy node positions and edge polylines into the rendered data sets."""
        for node, actor in self._node_actors:
            actor.position = tuple(node.position)

        for edge, line in self._edge_lines:
            self._vtk_utils.update_polyline(line, edge.points)

    # ------------------------------------------------------------------------------
    # Scene construction
    # ------------------------------------------------------------------------------

    def _build_actors(self) -> None:
        for prism in self.scene.prisms:
            actor = self.plotter.add_mesh(
                self._vtk_utils.prism_to_polydata(prism), color=prism.color, pickable=False
            )
            self._prism_actors.append(actor)

        for node in self.scene.nodes:
            actor = self.plotter.add_mesh(
                self._vtk_utils.sphere(node.radius), color=node.color, pickable=False
            )
            actor.position = tuple(node.position)
            self._node_actors.append((node, actor))

        for edge in self.scene.edges:
            line = self._vtk_utils.polyline_to_polydata(edge.points)
            self.plotter.add_mesh(line, color=edge.color, line_width=2, pickable=False)
            self._edge_lines.append((edge, line))

        logger.debug(
            f"Built {len(self._node_actors)} node, {len(self._edge_lines)} edge "
            f"and {len(self._prism_actors)} prism actors."
        )

    def _init_plotter(self) -> None:
        self.plotter.set_background(BACKGROUND_COLOR)
        self.plotter.enable_trackball_style()

    def _setup_overlay_controls(self) -> None:
        """Floating animation buttons."""
        self.overlay_widget = QFrame(self)
        self.overlay_widget.setStyleSheet("""
            QFrame { background-color: rgba(255, 255, 255, 200); border-radius: 6px; border: 1px solid #ccc; }
            QPushButton { background-color: transparent; border: none; padding: 4px; }
            QPushButton:checked { background-color: rgba(0, 120, 215, 50); border: 1px solid #0078D7; border-radius: 3px; }
            QPushButton:hover { background-color: rgba(0, 0, 0, 10); }
        """)

        layout = QHBoxLayout(self.overlay_widget)
        layout.setContentsMargins(4, 4, 4, 4)

        def make_btn(icon, tooltip, checkable=False):
            btn = QPushButton()
            btn.setIcon(self.style().standardIcon(icon))
            btn.setCheckable(checkable)
            btn.setToolTip(tooltip)
            layout.addWidget(btn)
            return btn

        self.btn_play = make_btn(QStyle.SP_MediaPlay, "Run layout", checkable=True)
        self.btn_play.toggled.connect(self.on_toggle_play)

        self.btn_step = make_btn(QStyle.SP_MediaSeekForward, "Single step")
        self.btn_step.clicked.connect(self.step)

        self.btn_reset = make_btn(QStyle.SP_BrowserReload, "Reset camera")
        self.btn_reset.clicked.connect(self.on_reset_camera)

        self.overlay_widget.adjustSize()

    # --- Slots ---
    def on_toggle_play(self, checked: bool) -> None:
        if checked:
            self.start()
        else:
            self.stop()

    def on_reset_camera(self) -> None:
        self.plotter.reset_camera()
        self.plotter.render()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._frame_timer.stop()
        self.plotter.close()
        event.accept()
