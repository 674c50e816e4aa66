import os

# Must be set before the first QGuiApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from analogclock.model.geometry import TextBounds


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def fake_metrics(text: str, font_size: float) -> TextBounds:
    """Monospaced glyphs: 0.5em wide per digit, 0.7em tall, no descent."""
    return TextBounds(width=0.5 * font_size * len(text), height=0.7 * font_size, descent=0.0)


@pytest.fixture
def metrics():
    return fake_metrics
