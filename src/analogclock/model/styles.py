"""
Paint Styles
============
One immutable PaintStyle per drawn element, rebuilt wholesale from the
viewport on every resize.

Classes:
    FillMode: Outline vs. filled drawing.
    PaintStyle: Colour, stroke width, fill mode, anti-aliasing.
    DialStyles: The complete set of styles keyed by element kind.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from analogclock import config

if TYPE_CHECKING:
    from analogclock.model.geometry import Viewport


class FillMode(str, Enum):
    STROKE = "stroke"
    FILL = "fill"


@dataclass(frozen=True)
class PaintStyle:
    stroke_width: float
    fill_mode: FillMode
    color: str = config.INK_COLOR
    antialiased: bool = True


@dataclass(frozen=True)
class DialStyles:
    """
    Styles for every element of the clock face.

    Only the stroke widths depend on the viewport; they are always
    min(width, height) divided by a fixed constant from config.
    """
    rim: PaintStyle
    center: PaintStyle
    major_tick: PaintStyle
    minor_tick: PaintStyle
    numeral: PaintStyle
    hour_hand: PaintStyle
    minute_hand: PaintStyle
    second_hand: PaintStyle

    @classmethod
    def for_viewport(cls, viewport: Viewport) -> DialStyles:
        m = float(viewport.min_dim)
        return cls(
            rim=PaintStyle(m / config.RIM_STROKE_DIVISOR, FillMode.STROKE),
            center=PaintStyle(m / config.CENTER_DOT_DIVISOR, FillMode.FILL),
            major_tick=PaintStyle(m / config.MAJOR_TICK_DIVISOR, FillMode.FILL),
            minor_tick=PaintStyle(m / config.MINOR_TICK_DIVISOR, FillMode.FILL),
            # text is filled glyphs, the stroke width is unused
            numeral=PaintStyle(0.0, FillMode.FILL),
            hour_hand=PaintStyle(m / config.HOUR_HAND_STROKE_DIVISOR, FillMode.STROKE),
            minute_hand=PaintStyle(m / config.MINUTE_HAND_STROKE_DIVISOR, FillMode.STROKE),
            second_hand=PaintStyle(m / config.SECOND_HAND_STROKE_DIVISOR, FillMode.STROKE),
        )
