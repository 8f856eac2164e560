import math
from collections.abc import Sequence

import numpy as np

from traj_sim.app.protocols import PathSampler
from traj_sim.domain.entities.geography import Path, Point, Pt, to_point
from traj_sim.domain.entities.motion import Pose

HEADING_STEP = 0.02


def locate(points: Sequence[Pt], distance: float) -> tuple[int, float] | None:
    """
    Walk the polyline and find the first segment whose cumulative length range
    [prev_total_len, total_len] contains `distance`.

    Returns (segment index, t) where t is the local interpolation parameter, or
    None when the path has fewer than two points or the distance is not on it
    (negative, past the end, or NaN).

    A zero-length segment that contains the distance yields t = 0, i.e. its
    start point.
    """
    if len(points) < 2:
        return None

    prev_pos = to_point(points[0])
    prev_total_len = 0.0
    total_len = 0.0
    for i in range(1, len(points)):
        new_pos = to_point(points[i])
        total_len += math.hypot(new_pos.x - prev_pos.x, new_pos.y - prev_pos.y)
        if prev_total_len <= distance <= total_len:
            span = total_len - prev_total_len
            t = (distance - prev_total_len) / span if span > 0 else 0.0
            return i - 1, t
        prev_pos = new_pos
        prev_total_len = total_len
    return None


def interpolate(points: Sequence[Pt], index: int, t: float) -> Point:
    a, b = to_point(points[index]), to_point(points[index + 1])
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def sample(points: Sequence[Pt], distance: float) -> Point | None:
    """Position at arc-length `distance` along `points`, or None."""
    hit = locate(points, distance)
    if hit is None:
        return None
    return interpolate(points, *hit)


def heading(points: Sequence[Pt], distance: float, step: float = HEADING_STEP) -> float | None:
    return _DEFAULT.heading(points, distance, step)


def pose(points: Sequence[Pt], distance: float, step: float = HEADING_STEP) -> Pose | None:
    return _DEFAULT.pose(points, distance, step)


class ArcLengthSampler(PathSampler):
    """Shared sample/heading/pose on top of a subclass's `locate`."""

    def locate(self, points: Sequence[Pt], distance: float) -> tuple[int, float] | None:
        raise NotImplementedError

    def sample(self, points: Sequence[Pt], distance: float) -> Point | None:
        hit = self.locate(points, distance)
        if hit is None:
            return None
        return interpolate(points, *hit)

    def heading(
        self, points: Sequence[Pt], distance: float, step: float = HEADING_STEP
    ) -> float | None:
        p0 = self.sample(points, distance)
        if p0 is None:
            return None
        return self._heading_from(points, p0, distance, step)

    def pose(
        self, points: Sequence[Pt], distance: float, step: float = HEADING_STEP
    ) -> Pose | None:
        p0 = self.sample(points, distance)
        if p0 is None:
            return None
        return Pose(position=p0, heading=self._heading_from(points, p0, distance, step))

    def _heading_from(
        self, points: Sequence[Pt], p0: Point, distance: float, step: float
    ) -> float | None:
        # forward difference; no heading once distance + step runs off the end
        p1 = self.sample(points, distance + step)
        if p1 is None:
            return None
        return math.atan2(p1.y - p0.y, p1.x - p0.x)


class LinearScanSampler(ArcLengthSampler):
    def locate(self, points: Sequence[Pt], distance: float) -> tuple[int, float] | None:
        return locate(points, distance)


class CumulativeLengthSampler(ArcLengthSampler):
    """
    Same segment choice as the linear scan, found with a binary search over the
    cumulative length table instead of a walk.
    """

    def cumulative_lengths(self, points: Sequence[Pt]) -> np.ndarray:
        return Path.from_points(points).cumulative_lengths()

    def locate(self, points: Sequence[Pt], distance: float) -> tuple[int, float] | None:
        if len(points) < 2:
            return None
        cum = self.cumulative_lengths(points)
        # also rejects NaN
        if not (0.0 <= distance <= cum[-1]):
            return None
        # first vertex whose cumulative length reaches the distance ends the segment
        k = max(int(np.searchsorted(cum, distance, side="left")), 1)
        span = cum[k] - cum[k - 1]
        t = (distance - cum[k - 1]) / span if span > 0 else 0.0
        return k - 1, float(t)


_DEFAULT = LinearScanSampler()
