# app/render.py
from collections.abc import Iterable
from dataclasses import dataclass

from traj_sim.app.protocols import RenderSink
from traj_sim.domain.entities.geography import Point, Pt, Rect, to_point

Color = tuple[int, int, int]

GREEN: Color = (0, 255, 0)
WHITE: Color = (255, 255, 255)


@dataclass(frozen=True)
class RectTransform:
    """Linear map taking `src` onto `dst` (canvas <-> screen)."""

    src: Rect
    dst: Rect

    @classmethod
    def from_to(cls, src: Rect, dst: Rect) -> "RectTransform":
        return cls(src, dst)

    @classmethod
    def canvas_for(cls, screen: Rect) -> "RectTransform":
        """Canvas is the square proportions of the screen rect, anchored at zero."""
        return cls(Rect.from_min_size((0.0, 0.0), screen.square_proportions()), screen)

    def scale(self) -> tuple[float, float]:
        return self.dst.width / self.src.width, self.dst.height / self.src.height

    def apply(self, p: Pt) -> Point:
        p = to_point(p)
        sx, sy = self.scale()
        return Point(
            self.dst.min.x + (p.x - self.src.min.x) * sx,
            self.dst.min.y + (p.y - self.src.min.y) * sy,
        )

    def __mul__(self, p: Pt) -> Point:
        return self.apply(p)

    def inverse(self) -> "RectTransform":
        return RectTransform(self.dst, self.src)


# ---------------- Shapes (screen space) ----------------


@dataclass(frozen=True)
class Stroke:
    width: float = 1.0
    color: Color = GREEN


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    stroke: Stroke


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    stroke: Stroke


@dataclass(frozen=True)
class CircleFilled:
    center: Point
    radius: float
    color: Color = WHITE


Shape = Polyline | Line | CircleFilled


class MemoryRenderSink(RenderSink):
    def __init__(self):
        self.batches: list[list[Shape]] = []

    def extend(self, shapes: Iterable[Shape]) -> None:
        self.batches.append(list(shapes))

    @property
    def last(self) -> list[Shape]:
        return self.batches[-1] if self.batches else []
