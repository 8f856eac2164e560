# app/follower.py
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from traj_sim.app.protocols import PathSampler, RenderSink
from traj_sim.app.render import (
    GREEN,
    WHITE,
    CircleFilled,
    Color,
    Line,
    Polyline,
    RectTransform,
    Shape,
    Stroke,
)
from traj_sim.domain.entities.geography import Point, Pt, to_point
from traj_sim.domain.entities.motion import Pose
from traj_sim.domain.sampling.samplers import HEADING_STEP
from traj_sim.io.recorder import Recorder
from traj_sim.sim.clock import FrameClock
from traj_sim.sim.hooks import FollowerHooks, NoopHooks


@dataclass
class Frame:
    t: float
    distance: float
    n_points: int
    pose: Pose | None = None
    shapes: list[Shape] = field(default_factory=list)

    @property
    def heading(self) -> float | None:
        return self.pose.heading if self.pose else None


class TrajectoryFollower:
    """
    Owns the user-drawn path and moves a marker along it.

    Points are stored in canvas space; shapes are emitted in screen space
    through `transform`. The sampler only ever sees a snapshot of the points.
    """

    def __init__(
        self,
        *,
        sampler: PathSampler,
        clock: FrameClock,
        transform: RectTransform,
        hooks: FollowerHooks | None = None,
        sink: RenderSink | None = None,
        recorder: Recorder | None = None,
        heading_step: float = HEADING_STEP,
        marker_radius: float = 10.0,
        indicator_length: float = 2.0,
        path_stroke: Stroke = Stroke(1.0, GREEN),
        indicator_stroke: Stroke = Stroke(2.0, WHITE),
        marker_color: Color = WHITE,
    ):
        self.sampler, self.clock, self.transform = sampler, clock, transform
        self.hooks = hooks or NoopHooks()
        self.sink, self.recorder = sink, recorder
        self.heading_step = heading_step
        self.marker_radius, self.indicator_length = marker_radius, indicator_length
        self.path_stroke, self.indicator_stroke = path_stroke, indicator_stroke
        self.marker_color = marker_color
        self._points: list[Point] = []
        self._last_t: float | None = None

    # ---------------- Path ownership ----------------

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def add_point(self, canvas_pos: Pt) -> Point:
        p = to_point(canvas_pos)
        self._points.append(p)
        self.hooks.point_added(p, n_points=len(self._points))
        return p

    def pointer(self, screen_pos: Pt | None) -> Point | None:
        """Feed one pointer sample; None means no drag in progress this frame."""
        if screen_pos is None:
            return None
        return self.add_point(self.transform.inverse() * screen_pos)

    def reset(self) -> None:
        self._points.clear()
        self._last_t = None

    # ---------------- Frames ----------------

    def frame(self, t: float) -> Frame:
        if self._last_t is not None and t < self._last_t:
            self.hooks.error(reason="time_backwards", prev_t=self._last_t, t=t)
        self._last_t = t

        points = self.points
        distance = self.clock.distance_at(t)
        pose = self.sampler.pose(points, distance, self.heading_step)

        out = Frame(t=t, distance=distance, n_points=len(points), pose=pose)
        out.shapes = self._shapes(points, pose)

        self.hooks.frame(out)
        if self.sink is not None:
            self.sink.extend(out.shapes)
        if self.recorder is not None:
            self.recorder.emit(out)
        return out

    def run(self, times: Iterable[float]) -> list[Frame]:
        t0 = time.perf_counter()
        self.hooks.run_start(frames=None, rate=self.clock.rate)
        frames = [self.frame(t) for t in times]
        self.hooks.run_end(
            frames=len(frames),
            sampled=sum(1 for f in frames if f.pose is not None),
            last_t=self._last_t,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return frames

    def _shapes(self, points: tuple[Point, ...], pose: Pose | None) -> list[Shape]:
        to_screen = self.transform
        shapes: list[Shape] = []
        if len(points) >= 2:
            shapes.append(Polyline(tuple(to_screen * p for p in points), self.path_stroke))
        if pose is None:
            return shapes

        shapes.append(CircleFilled(to_screen * pose.position, self.marker_radius, self.marker_color))
        tip = pose.ahead(self.indicator_length)
        if tip is not None:
            shapes.append(Line(to_screen * pose.position, to_screen * tip, self.indicator_stroke))
        return shapes
