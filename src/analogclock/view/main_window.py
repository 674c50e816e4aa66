"""
Main Application Window
=======================
The top-level window hosting a single AnalogClockWidget.
"""
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget

from analogclock import config
from analogclock.view.widgets.analog_clock import AnalogClockWidget


class MainWindow(QMainWindow):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(config.WINDOW_TITLE)

        self.clock = AnalogClockWidget()
        self.setCentralWidget(self.clock)

        self.resize(config.DEFAULT_SIZE_HINT, config.DEFAULT_SIZE_HINT)
