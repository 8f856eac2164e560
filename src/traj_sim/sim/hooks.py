# sim/hooks.py
from typing import Protocol


class FollowerHooks(Protocol):
    def run_start(self, *, frames, rate): ...
    def run_end(self, *, frames, sampled, last_t, wall_ms): ...
    def point_added(self, point, *, n_points): ...
    def frame(self, frame): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def point_added(self, *_, **__):
        pass

    def frame(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
