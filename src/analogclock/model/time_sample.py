"""
Time Sampling
=============
Reads the local wall-clock time once per paint pass.

Classes:
    TimeSample: Immutable hour/minute/second snapshot.
    TimeSampler: Reads the clock, falling back to the last good sample.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeSample:
    hour24: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour24 <= 23:
            raise ValueError(f"hour24 out of range: {self.hour24}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second out of range: {self.second}")

    @classmethod
    def midnight(cls) -> TimeSample:
        return cls(0, 0, 0)

    @classmethod
    def from_datetime(cls, value: datetime) -> TimeSample:
        return cls(value.hour, value.minute, value.second)


class TimeSampler:
    """
    Produces a fresh TimeSample on every call to sample().

    The last successful sample is kept only as a fallback for a failed clock
    read, so the paint pass (and with it the redraw chain) always completes.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._last_good: Optional[TimeSample] = None

    def sample(self) -> TimeSample:
        try:
            sample = TimeSample.from_datetime(self._clock())
        except (OSError, ValueError, OverflowError) as e:
            fallback = self._last_good or TimeSample.midnight()
            logger.warning(f"Could not read system clock ({e}); using {fallback}")
            return fallback

        self._last_good = sample
        return sample
