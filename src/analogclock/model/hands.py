"""
Clock Hands
===========
Converts a TimeSample into the three hand segments.

All hands share one angle formula on a 0..60 "moment" scale: moment 0 points
straight up and the angle grows clockwise (screen y axis points down).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List

from analogclock import config
from analogclock.model.geometry import Viewport
from analogclock.model.time_sample import TimeSample


class HandKind(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


HAND_LENGTH_DIVISORS = {
    HandKind.HOUR: config.HOUR_HAND_LENGTH_DIVISOR,
    HandKind.MINUTE: config.MINUTE_HAND_LENGTH_DIVISOR,
    HandKind.SECOND: config.SECOND_HAND_LENGTH_DIVISOR,
}


@dataclass(frozen=True)
class HandSegment:
    kind: HandKind
    angle: float
    x0: float
    y0: float
    x1: float
    y1: float


def hand_angle(moment: float) -> float:
    """Angle in radians for a 0..60 moment; 0 -> -pi/2 (up), 15 -> 0 (right)."""
    return math.pi * moment / (config.MOMENT_SCALE / 2.0) - math.pi / 2.0


def hand_moment(kind: HandKind, sample: TimeSample) -> float:
    if kind is HandKind.HOUR:
        # 12 hours onto the 0..60 scale, creeping with the minutes
        return (sample.hour24 + sample.minute / 60.0) * 5.0
    if kind is HandKind.MINUTE:
        return float(sample.minute)
    return float(sample.second)


def hand_length(kind: HandKind, viewport: Viewport) -> float:
    return viewport.width / HAND_LENGTH_DIVISORS[kind]


def hand_segments(sample: TimeSample, viewport: Viewport) -> List[HandSegment]:
    """Segments from the viewport centre, in draw order hour, minute, second."""
    cx, cy = viewport.center_x, viewport.center_y
    segments = []
    for kind in (HandKind.HOUR, HandKind.MINUTE, HandKind.SECOND):
        angle = hand_angle(hand_moment(kind, sample))
        length = hand_length(kind, viewport)
        segments.append(HandSegment(
            kind=kind,
            angle=angle,
            x0=cx,
            y0=cy,
            x1=cx + math.cos(angle) * length,
            y1=cy + math.sin(angle) * length,
        ))
    return segments
