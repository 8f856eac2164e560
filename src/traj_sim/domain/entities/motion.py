import math
from dataclasses import dataclass

from traj_sim.domain.entities.geography import Point


@dataclass(frozen=True)
class Pose:
    position: Point
    heading: float | None = None  # radians, (-pi, pi]; None past the end of the path

    def ahead(self, length: float) -> Point | None:
        """Point `length` units along the heading, or None without a heading."""
        if self.heading is None:
            return None
        return Point(
            self.position.x + length * math.cos(self.heading),
            self.position.y + length * math.sin(self.heading),
        )
