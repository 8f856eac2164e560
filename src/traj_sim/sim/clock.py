# sim/clock.py
from __future__ import annotations

from dataclasses import dataclass

MIN = 60.0


def minutes(x: float) -> float:
    return x * MIN


@dataclass(frozen=True)
class FrameClock:
    rate: float = 0.1  # arc-length units per second
    start_t: float = 0.0  # time at which the marker sits on the first point

    def elapsed(self, t: float) -> float:
        return t - self.start_t

    # time -> arc length
    def distance_at(self, t: float) -> float:
        return self.elapsed(t) * self.rate

    # arc length -> time
    def time_at(self, distance: float) -> float:
        return self.start_t + distance / self.rate

    def restarted(self, t: float) -> FrameClock:
        """Same rate, distance zero at time `t`."""
        return FrameClock(rate=self.rate, start_t=t)
