from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
import sys
from typing import List, Optional

from analogclock import config

ORG_ID = "analogclock"
APP_ID = "analog-clock"


def create_app(argv: Optional[List[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(config.WINDOW_TITLE)

    return app
