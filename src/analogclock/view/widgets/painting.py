"""
Painting Helpers
Converts model PaintStyles into QPainter state and draws the dial and hands.
"""
from typing import Iterable

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFontMetricsF, QPainter, QPen

from analogclock.model.geometry import DialLayout, tick_marks
from analogclock.model.hands import HandKind, HandSegment
from analogclock.model.styles import FillMode, PaintStyle
from analogclock.view.widgets.text_metrics import numeral_font


def apply_style(painter: QPainter, style: PaintStyle, cap: Qt.PenCapStyle = Qt.PenCapStyle.SquareCap) -> None:
    """Outline styles get a pen and no brush, filled styles the reverse."""
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, style.antialiased)
    painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, style.antialiased)
    color = QColor(style.color)

    if style.fill_mode is FillMode.STROKE:
        pen = QPen(color)
        pen.setWidthF(style.stroke_width)
        pen.setCapStyle(cap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
    else:
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(color))


def draw_dial(painter: QPainter, layout: DialLayout) -> None:
    """Rim, centre dot, ticks, numerals; each layer is painted over the previous."""
    viewport, geometry, styles = layout.viewport, layout.geometry, layout.styles
    center = QPointF(viewport.center_x, viewport.center_y)

    # Rim
    apply_style(painter, styles.rim)
    painter.drawEllipse(center, geometry.rim_radius, geometry.rim_radius)

    # Center
    apply_style(painter, styles.center)
    painter.drawEllipse(center, geometry.center_dot_radius, geometry.center_dot_radius)

    # Ticks
    for tick in tick_marks(layout):
        if tick.major:
            apply_style(painter, styles.major_tick)
            radius = geometry.major_tick_radius
        else:
            apply_style(painter, styles.minor_tick)
            radius = geometry.minor_tick_radius
        painter.drawEllipse(QPointF(tick.x, tick.y), radius, radius)

    # Numerals: anchor_x is the horizontal centre, anchor_y the baseline
    apply_style(painter, styles.numeral)
    font = numeral_font(geometry.numeral_font_size)
    painter.setFont(font)
    painter.setPen(QColor(styles.numeral.color))
    fm = QFontMetricsF(font)
    for label in layout.numerals:
        half_advance = fm.horizontalAdvance(label.text) / 2.0
        painter.drawText(QPointF(label.anchor_x - half_advance, label.anchor_y), label.text)


def draw_hands(painter: QPainter, layout: DialLayout, segments: Iterable[HandSegment]) -> None:
    styles = {
        HandKind.HOUR: layout.styles.hour_hand,
        HandKind.MINUTE: layout.styles.minute_hand,
        HandKind.SECOND: layout.styles.second_hand,
    }
    for segment in segments:
        apply_style(painter, styles[segment.kind], cap=Qt.PenCapStyle.FlatCap)
        painter.drawLine(QPointF(segment.x0, segment.y0), QPointF(segment.x1, segment.y1))
