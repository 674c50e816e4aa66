import logging
from datetime import datetime

import pytest

from analogclock.model.time_sample import TimeSample, TimeSampler


@pytest.mark.parametrize("values", [(24, 0, 0), (-1, 0, 0), (0, 60, 0), (0, 0, 60)])
def test_out_of_range_sample_is_rejected(values):
    with pytest.raises(ValueError):
        TimeSample(*values)


def test_sample_reads_clock_every_time():
    times = iter([datetime(2024, 1, 1, 3, 30, 0), datetime(2024, 1, 1, 3, 30, 1)])
    sampler = TimeSampler(clock=lambda: next(times))
    assert sampler.sample() == TimeSample(3, 30, 0)
    assert sampler.sample() == TimeSample(3, 30, 1)


def test_first_failure_falls_back_to_midnight(caplog):
    def broken():
        raise OSError("clock unavailable")

    sampler = TimeSampler(clock=broken)
    with caplog.at_level(logging.WARNING, logger="analogclock"):
        assert sampler.sample() == TimeSample.midnight()
    assert "clock unavailable" in caplog.text


def test_failure_falls_back_to_last_good_sample():
    readings = [datetime(2024, 5, 6, 22, 15, 9), OverflowError("bad timestamp")]

    def clock():
        value = readings.pop(0)
        if isinstance(value, Exception):
            raise value
        return value

    sampler = TimeSampler(clock=clock)
    first = sampler.sample()
    assert sampler.sample() == first == TimeSample(22, 15, 9)


def test_default_clock_is_local_time():
    before = datetime.now()
    sample = TimeSampler().sample()
    assert 0 <= sample.hour24 <= 23
    assert sample.hour24 in (before.hour, (before.hour + 1) % 24)
