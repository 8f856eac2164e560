from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from traj_sim.domain.entities.geography import Point, Pt
from traj_sim.domain.entities.motion import Pose


# ------------- Sampling --------------------
@runtime_checkable
class PathSampler(Protocol):
    """
    Responsibilities:
      • Map an arc-length distance onto a position along a polyline.
      • Estimate the heading there by forward differencing two samples.
    Stateless: the point sequence is only read for the duration of a call.
    Absence (None) means "path too short" or "distance not on the path".
    """

    def locate(self, points: Sequence[Pt], distance: float) -> tuple[int, float] | None:
        """Return (segment index, local parameter t in [0, 1])."""

    def sample(self, points: Sequence[Pt], distance: float) -> Point | None: ...
    def heading(
        self, points: Sequence[Pt], distance: float, step: float = 0.02
    ) -> float | None: ...
    def pose(self, points: Sequence[Pt], distance: float, step: float = 0.02) -> Pose | None: ...


# ------------- Rendering --------------------
@runtime_checkable
class RenderSink(Protocol):
    """Consumes screen-space drawable primitives, one batch per frame."""

    def extend(self, shapes: Iterable) -> None: ...
