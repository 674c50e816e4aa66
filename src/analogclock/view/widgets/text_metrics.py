"""
Qt Text Metrics
Bridges the Qt font engine to the Qt-free layout engine.
"""
from PySide6.QtGui import QFont, QFontMetricsF

from analogclock.model.geometry import TextBounds


def numeral_font(font_size: float) -> QFont:
    """Font for the dial numerals, sized in pixels."""
    font = QFont()
    font.setPixelSize(max(1, round(font_size)))
    return font


def qt_text_metrics(text: str, font_size: float) -> TextBounds:
    """
    Tight glyph bounds of `text` at `font_size` pixels.

    Qt reports the rect relative to the baseline (top is negative), so its
    bottom edge is the descent below the baseline.
    """
    if font_size <= 0:
        return TextBounds(0.0, 0.0, 0.0)

    rect = QFontMetricsF(numeral_font(font_size)).tightBoundingRect(text)
    return TextBounds(width=rect.width(), height=rect.height(), descent=rect.bottom())
