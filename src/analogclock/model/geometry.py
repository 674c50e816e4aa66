"""
Dial Geometry (Layout Engine)
=============================
This module turns a committed viewport size into everything needed to draw
the static clock face.

Why is this file needed?
------------------------
1. Proportionality: Radii, stroke widths and the numeral font size are all
   derived from min(width, height), so resizing rescales the whole face.
2. Atomicity: The result is a single frozen DialLayout. The widget swaps the
   whole object on resize, so a paint pass never sees half-updated geometry
   or a partially populated numeral list.
3. Testability: No Qt here. Text measurement is injected as a callable.

Classes:
    Viewport: The committed square drawing area.
    DialGeometry: Derived radii and font size.
    NumeralLabel: One of the 12 positioned numerals.
    DialLayout: Geometry + styles + numerals, swapped as one unit.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, NamedTuple, Tuple

import numpy as np

from analogclock import config
from analogclock.model.styles import DialStyles

logger = logging.getLogger(__name__)


class TextBounds(NamedTuple):
    """Tight bounding box of a rendered string, relative to its baseline."""
    width: float
    height: float
    descent: float


# (text, font_size) -> TextBounds
TextMetrics = Callable[[str, float], TextBounds]


def square_size(width: int, height: int) -> Tuple[int, int]:
    """Measurement rule: both axes are clamped to the smaller proposed one."""
    side = max(0, min(int(width), int(height)))
    return side, side


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    @classmethod
    def from_size(cls, width: int, height: int) -> Viewport:
        return cls(*square_size(width, height))

    @property
    def min_dim(self) -> int:
        return min(self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.height / 2.0

    @property
    def is_empty(self) -> bool:
        return self.min_dim <= 0


@dataclass(frozen=True)
class DialGeometry:
    outer_radius: float
    rim_stroke: float
    center_dot_radius: float
    major_tick_radius: float
    minor_tick_radius: float
    numeral_font_size: float
    numeral_radius: float

    @property
    def rim_radius(self) -> float:
        """Radius of the stroked rim circle (kept inside the viewport)."""
        return self.outer_radius - self.rim_stroke

    @property
    def tick_ring_radius(self) -> float:
        return self.outer_radius * config.TICK_RING_FACTOR

    @classmethod
    def for_viewport(cls, viewport: Viewport) -> DialGeometry:
        m = float(viewport.min_dim)
        font_size = m / config.NUMERAL_FONT_DIVISOR
        return cls(
            outer_radius=m / 2.0,
            rim_stroke=m / config.RIM_STROKE_DIVISOR,
            center_dot_radius=m / config.CENTER_DOT_DIVISOR,
            major_tick_radius=m / config.MAJOR_TICK_DIVISOR,
            minor_tick_radius=m / config.MINOR_TICK_DIVISOR,
            numeral_font_size=font_size,
            numeral_radius=m / 2.0 - font_size * config.NUMERAL_INSET_FACTOR,
        )


@dataclass(frozen=True)
class NumeralLabel:
    text: str
    anchor_x: float
    anchor_y: float


@dataclass(frozen=True)
class DialLayout:
    viewport: Viewport
    geometry: DialGeometry
    styles: DialStyles
    numerals: Tuple[NumeralLabel, ...]


class TickMark(NamedTuple):
    position: int
    x: float
    y: float
    major: bool


def layout_numerals(viewport: Viewport, geometry: DialGeometry, metrics: TextMetrics) -> Tuple[NumeralLabel, ...]:
    """
    Place the numerals 1..12 clockwise, starting just right of 12 o'clock.

    Angle zero points due right; (n - 3) rotates "12" to the top. The glyph is
    pulled inwards by half its own width along the angle direction and the
    baseline is lowered by half the glyph height (minus descent), which gives
    a visually centred label.
    """
    numbers = np.arange(1, config.NUMERAL_COUNT + 1)
    angles = np.pi / 6.0 * (numbers - 3)

    labels = []
    for n, angle in zip(numbers, angles):
        text = str(int(n))
        bounds = metrics(text, geometry.numeral_font_size)
        r = geometry.numeral_radius - bounds.width / 2.0
        x = viewport.center_x + np.cos(angle) * r
        y = viewport.center_y + np.sin(angle) * r + bounds.height / 2.0 - bounds.descent
        labels.append(NumeralLabel(text=text, anchor_x=float(x), anchor_y=float(y)))

    return tuple(labels)


def compute_layout(width: int, height: int, metrics: TextMetrics) -> DialLayout:
    """
    Recompute the full dial layout for a new viewport size.

    Nothing from a previous layout is reused; the caller replaces its old
    DialLayout with the returned one in a single assignment.
    """
    viewport = Viewport.from_size(width, height)
    geometry = DialGeometry.for_viewport(viewport)
    styles = DialStyles.for_viewport(viewport)
    numerals = layout_numerals(viewport, geometry, metrics)

    logger.debug(f"Layout recomputed for {viewport.width}x{viewport.height} (requested {width}x{height})")
    return DialLayout(viewport=viewport, geometry=geometry, styles=styles, numerals=numerals)


def tick_marks(layout: DialLayout) -> Iterator[TickMark]:
    """Yield the 60 tick dots; every 5th one (i = 5, 10, ..., 60) is major."""
    viewport, geometry = layout.viewport, layout.geometry
    indices = np.arange(1, config.TICK_COUNT + 1)
    angles = 2.0 * np.pi / config.TICK_COUNT * indices

    xs = viewport.center_x + np.cos(angles) * geometry.tick_ring_radius
    ys = viewport.center_y + np.sin(angles) * geometry.tick_ring_radius

    for i, x, y in zip(indices, xs, ys):
        yield TickMark(int(i), float(x), float(y), bool(i % config.MAJOR_TICK_EVERY == 0))
