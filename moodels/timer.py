"""Countdown timers measured in seconds of game time."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_MAX_TIMES = 2**32 - 1


class TimerMode(Enum):
    """Whether a timer stops when it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """A timer that counts elapsed seconds up to a fixed duration."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    times_finished_this_tick: int = field(default=0, init=False)
    _finished: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"timer duration must not be negative: {self.duration}")
        if self.elapsed < 0:
            raise ValueError(f"elapsed time must not be negative: {self.elapsed}")

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer backwards: {delta}")
        if self._finished and self.mode is TimerMode.ONCE:
            self.times_finished_this_tick = 0
            return self

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration

        if not self._finished:
            self.times_finished_this_tick = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration > 0:
                self.times_finished_this_tick = min(
                    int(self.elapsed // self.duration), _MAX_TIMES
                )
                self.elapsed %= self.duration
            else:
                self.times_finished_this_tick = _MAX_TIMES
                self.elapsed = 0.0
        else:
            self.times_finished_this_tick = 1
            self.elapsed = self.duration
        return self

    def is_finished(self) -> bool:
        """True once the timer has reached its duration (for repeating timers: on this tick)."""
        return self._finished

    def just_finished(self) -> bool:
        """True only on the tick during which the timer finished."""
        return self.times_finished_this_tick > 0

    def set_duration(self, duration: float) -> None:
        """Change the duration without touching the elapsed time."""
        if duration < 0:
            raise ValueError(f"timer duration must not be negative: {duration}")
        self.duration = duration

    def reset(self) -> None:
        """Start the timer over from zero."""
        self.elapsed = 0.0
        self._finished = False
        self.times_finished_this_tick = 0

    def fraction(self) -> float:
        """Progress through the duration, from 0.0 to 1.0."""
        if self.duration == 0:
            return 1.0
        return self.elapsed / self.duration