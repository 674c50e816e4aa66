import math

import pytest

from analogclock.model.geometry import Viewport
from analogclock.model.hands import HandKind, hand_angle, hand_moment, hand_segments
from analogclock.model.time_sample import TimeSample

REFERENCE_ANGLES = {
    0: -math.pi / 2,
    15: 0.0,
    30: math.pi / 2,
    45: math.pi,
}

# (hour24, minute, second) samples giving each hand the reference moment
SAMPLES_FOR_MOMENT = {
    HandKind.HOUR: {0: (0, 0, 0), 15: (3, 0, 0), 30: (6, 0, 0), 45: (9, 0, 0)},
    HandKind.MINUTE: {0: (7, 0, 0), 15: (7, 15, 0), 30: (7, 30, 0), 45: (7, 45, 0)},
    HandKind.SECOND: {0: (7, 1, 0), 15: (7, 1, 15), 30: (7, 1, 30), 45: (7, 1, 45)},
}


@pytest.mark.parametrize("moment, expected", REFERENCE_ANGLES.items())
def test_hand_angle_reference_moments(moment, expected):
    assert hand_angle(moment) == pytest.approx(expected)


@pytest.mark.parametrize("kind", list(HandKind))
@pytest.mark.parametrize("moment", [0, 15, 30, 45])
def test_each_hand_at_reference_moments(kind, moment):
    sample = TimeSample(*SAMPLES_FOR_MOMENT[kind][moment])
    assert hand_moment(kind, sample) == pytest.approx(moment)

    segment = {s.kind: s for s in hand_segments(sample, Viewport(200, 200))}[kind]
    assert segment.angle == pytest.approx(REFERENCE_ANGLES[moment])


def test_hour_hand_creeps_with_minutes():
    sample = TimeSample(3, 30, 0)
    assert hand_moment(HandKind.HOUR, sample) == pytest.approx(17.5)
    assert hand_moment(HandKind.MINUTE, sample) == 30
    assert hand_moment(HandKind.SECOND, sample) == 0


def test_afternoon_hour_points_like_morning():
    morning = hand_angle(hand_moment(HandKind.HOUR, TimeSample(3, 0, 0)))
    afternoon = hand_angle(hand_moment(HandKind.HOUR, TimeSample(15, 0, 0)))
    assert math.cos(afternoon) == pytest.approx(math.cos(morning))
    assert math.sin(afternoon) == pytest.approx(math.sin(morning), abs=1e-9)


def test_segments_order_and_lengths():
    viewport = Viewport(200, 200)
    segments = hand_segments(TimeSample(0, 0, 0), viewport)
    assert [s.kind for s in segments] == [HandKind.HOUR, HandKind.MINUTE, HandKind.SECOND]

    lengths = [math.hypot(s.x1 - s.x0, s.y1 - s.y0) for s in segments]
    assert lengths == pytest.approx([40.0, 50.0, 50.0])
    for s in segments:
        assert (s.x0, s.y0) == (100.0, 100.0)
        # midnight: every hand points straight up
        assert s.x1 == pytest.approx(100.0)
        assert s.y1 < 100.0


def test_quarter_past_points_right():
    (_, minute, _) = hand_segments(TimeSample(12, 15, 0), Viewport(400, 400))
    assert minute.x1 == pytest.approx(300.0)
    assert minute.y1 == pytest.approx(200.0)
