# io/follower_logging.py
import json
import logging
import sys

from traj_sim.sim.hooks import NoopHooks


def _default_json_logger(name="traj_sim", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class FollowerLogging(NoopHooks):
    """
    One place to shape and emit structured logs for the follower loop.
    Per-frame and per-point records are DEBUG only and sampled.
    """

    ERRORS = {"time_backwards": "WARNING"}

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._frames = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def run_start(self, *, frames, rate):
        self._emit("INFO", "run_start", frames=frames, rate=rate)

    def run_end(self, *, frames, sampled, **extra):
        self._emit("INFO", "run_end", frames=frames, sampled=sampled, **extra)

    def point_added(self, point, *, n_points):
        if self.debug and (n_points % self.sample_every) == 0:
            self._emit("DEBUG", "point_added", x=point.x, y=point.y, n_points=n_points)

    def frame(self, frame):
        self._frames += 1
        if not self.debug or (self._frames % self.sample_every) != 0:
            return
        extra = {"t": frame.t, "distance": frame.distance, "n_points": frame.n_points}
        if frame.pose is not None:
            extra.update(x=frame.pose.position.x, y=frame.pose.position.y, theta=frame.heading)
        self._emit("DEBUG", "frame", **extra)

    def error(self, *, reason: str, **extra):
        self._emit(self.ERRORS.get(reason, "ERROR"), "follower_error", reason=reason, **extra)
