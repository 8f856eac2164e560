import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


# Core geometry types used by samplers and rendering
@dataclass(frozen=True)
class Point:
    x: float  # canvas units
    y: float


Pt = Point | tuple[float, float]


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    length: float


@dataclass
class Path:
    segments: list[Segment]
    total_length: float

    @classmethod
    def from_points(cls, points: Sequence[Pt]) -> "Path":
        pts = [to_point(p) for p in points]
        segments = []
        total = 0.0
        for a, b in zip(pts, pts[1:]):
            length = math.hypot(b.x - a.x, b.y - a.y)
            segments.append(Segment(start=a, end=b, length=length))
            total += length
        return cls(segments=segments, total_length=total)

    def cumulative_lengths(self) -> np.ndarray:
        """[0, l1, l1+l2, ...]; empty when the path has no segments."""
        if not self.segments:
            return np.zeros(0, dtype=np.float64)
        lengths = np.fromiter((s.length for s in self.segments), dtype=np.float64)
        return np.concatenate(([0.0], np.cumsum(lengths)))


@dataclass(frozen=True)
class Rect:
    min: Point
    max: Point

    @classmethod
    def from_min_size(cls, origin: Pt, size: tuple[float, float]) -> "Rect":
        o = to_point(origin)
        return cls(o, Point(o.x + size[0], o.y + size[1]))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height

    def square_proportions(self) -> tuple[float, float]:
        """Size scaled so the shorter side is 1."""
        w, h = self.size
        if w > h:
            return w / h, 1.0
        return 1.0, h / w
