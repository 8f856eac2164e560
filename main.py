# main.py
import sys

from traj_sim.app.build import build
from traj_sim.io.config import load_scenario
from traj_sim.io.recorder import JsonlSink


def run(cfg=None, *, fps: float = 30.0, seconds: float = 60.0):
    app = build(cfg, record_to=(JsonlSink(),))
    f = app.follower

    # Stand-in for a drag: an L-shaped stroke in screen space
    screen = app.transform.dst
    x0, y0 = screen.min.x + 0.1 * screen.width, screen.min.y + 0.1 * screen.height
    x1, y1 = screen.min.x + 0.9 * screen.width, screen.min.y + 0.9 * screen.height
    n = 50
    for k in range(n + 1):
        f.pointer((x0 + (x1 - x0) * k / n, y0))
    for k in range(1, n + 1):
        f.pointer((x1, y0 + (y1 - y0) * k / n))

    frames = int(seconds * fps)
    return f.run(k / fps for k in range(frames))


if __name__ == "__main__":
    run(load_scenario(sys.argv[1]) if len(sys.argv) > 1 else None)
