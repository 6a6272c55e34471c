"""A tick-driven timer with one-shot and repeating modes."""

from __future__ import annotations

import enum
from datetime import timedelta
from typing import Union

Seconds = Union[float, int, timedelta]

_NS_PER_SECOND = 1_000_000_000


def _to_nanos(value: Seconds, what: str) -> int:
    if isinstance(value, timedelta):
        nanos = (
            (value.days * 86_400 + value.seconds) * _NS_PER_SECOND
            + value.microseconds * 1_000
        )
    else:
        nanos = round(float(value) * _NS_PER_SECOND)
    if nanos < 0:
        raise ValueError(f"{what} must not be negative, got {value!r}")
    return nanos


class TimerMode(enum.Enum):
    """Whether a timer stops after finishing once or keeps repeating."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Counts elapsed time up to a duration.

    Durations and deltas are given in seconds (or as ``timedelta``) and kept
    as whole nanoseconds so that repeated small ticks do not drift.
    """

    def __init__(self, duration: Seconds, mode: TimerMode = TimerMode.ONCE) -> None:
        self._duration = _to_nanos(duration, "duration")
        self._mode = mode
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0

    @property
    def mode(self) -> TimerMode:
        return self._mode

    @property
    def duration(self) -> float:
        """The duration in seconds."""
        return self._duration / _NS_PER_SECOND

    @property
    def elapsed(self) -> float:
        """Time elapsed in the current cycle, in seconds."""
        return self._elapsed / _NS_PER_SECOND

    @property
    def times_finished_this_tick(self) -> int:
        """How many times the timer completed during the last tick."""
        return self._times_finished

    def tick(self, delta: Seconds) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        step = _to_nanos(delta, "delta")
        if self._finished and self._mode is TimerMode.ONCE:
            self._times_finished = 0
            self._elapsed = self._duration
            return self

        self._elapsed += step
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self._times_finished = 0
        elif self._mode is TimerMode.ONCE:
            self._times_finished = 1
            self._elapsed = self._duration
        elif self._duration == 0:
            self._times_finished = 1
            self._elapsed = 0
        else:
            self._times_finished, self._elapsed = divmod(self._elapsed, self._duration)
        return self

    def finished(self) -> bool:
        """True once a one-shot timer has run out, or on a tick a repeating timer completed."""
        return self._finished

    def just_finished(self) -> bool:
        """True only on the tick during which the timer completed."""
        return self._times_finished > 0

    def reset(self) -> None:
        """Start the timer over from zero."""
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0