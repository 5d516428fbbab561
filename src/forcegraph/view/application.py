from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

APP_ID = "forcegraph"
VISIBLE_APP_NAME = "Force Graph 3D"


def create_app() -> QApplication:
    """Create and configure the QApplication instance (reusing a running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    app = QApplication.instance()
    if app is not None:
        return app

    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
