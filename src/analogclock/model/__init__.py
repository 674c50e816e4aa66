"""
The MODEL layer contains pure data structures and layout math.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Paint Styles, Time Sampling and Hand Angles.
"""
from analogclock.model.geometry import (
    DialGeometry,
    DialLayout,
    NumeralLabel,
    TextBounds,
    TextMetrics,
    TickMark,
    Viewport,
    compute_layout,
    square_size,
    tick_marks,
)
from analogclock.model.hands import HandKind, HandSegment, hand_angle, hand_moment, hand_segments
from analogclock.model.styles import DialStyles, FillMode, PaintStyle
from analogclock.model.time_sample import TimeSample, TimeSampler

__all__ = [
    "DialGeometry",
    "DialLayout",
    "DialStyles",
    "FillMode",
    "HandKind",
    "HandSegment",
    "NumeralLabel",
    "PaintStyle",
    "TextBounds",
    "TextMetrics",
    "TickMark",
    "TimeSample",
    "TimeSampler",
    "Viewport",
    "compute_layout",
    "hand_angle",
    "hand_moment",
    "hand_segments",
    "square_size",
    "tick_marks",
]
