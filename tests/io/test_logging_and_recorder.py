import io
import json
import logging

from traj_sim.app.follower import Frame
from traj_sim.domain.entities.geography import Point
from traj_sim.domain.entities.motion import Pose
from traj_sim.io.follower_logging import FollowerLogging, _default_json_logger
from traj_sim.io.recorder import JsonlSink, MemorySink, Recorder


def _frame(heading=0.5):
    return Frame(t=1.0, distance=0.1, n_points=2, pose=Pose(Point(0.1, 0.0), heading))


# ---------- logging


def test_json_logger_writes_payload(capsys):
    log = _default_json_logger(name="traj_sim.test_json", level="INFO")
    FollowerLogging(run_id="r-1", logger=log).run_start(frames=None, rate=0.1)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["msg"] == "run_start"
    assert payload["run_id"] == "r-1"
    assert payload["rate"] == 0.1
    assert payload["level"] == "INFO"


def test_frame_logging_is_debug_only(caplog):
    log = logging.getLogger("traj_sim.test_frames")
    caplog.set_level(logging.DEBUG, logger="traj_sim.test_frames")

    FollowerLogging(logger=log, debug=False).frame(_frame())
    assert caplog.records == []

    FollowerLogging(logger=log, debug=True).frame(_frame())
    (rec,) = caplog.records
    assert rec.levelno == logging.DEBUG
    assert rec.getMessage() == "frame"
    assert rec.extra["theta"] == 0.5
    assert rec.extra["x"] == 0.1


def test_sampling_every_n(caplog):
    log = logging.getLogger("traj_sim.test_sampling")
    caplog.set_level(logging.DEBUG, logger="traj_sim.test_sampling")
    hooks = FollowerLogging(logger=log, debug=True, sample_every=3)
    for n in range(1, 7):
        hooks.point_added(Point(float(n), 0.0), n_points=n)
    assert [r.extra["n_points"] for r in caplog.records] == [3, 6]


def test_time_backwards_is_a_warning(caplog):
    log = logging.getLogger("traj_sim.test_errors")
    caplog.set_level(logging.DEBUG, logger="traj_sim.test_errors")
    FollowerLogging(logger=log).error(reason="time_backwards", prev_t=2.0, t=1.0)
    (rec,) = caplog.records
    assert rec.levelno == logging.WARNING
    assert rec.extra["reason"] == "time_backwards"


# ---------- recorder


def test_jsonl_sink_drops_shapes_by_default():
    buf = io.StringIO()
    JsonlSink(buf).write(_frame(heading=None))
    row = json.loads(buf.getvalue())
    assert "shapes" not in row
    assert row["pose"] == {"position": {"x": 0.1, "y": 0.0}, "heading": None}


def test_jsonl_sink_with_shapes():
    buf = io.StringIO()
    JsonlSink(buf, with_shapes=True).write(_frame())
    assert json.loads(buf.getvalue())["shapes"] == []


class _Broken:
    def write(self, ev):
        raise OSError("disk full")


def test_recorder_survives_a_failing_sink(caplog):
    caplog.set_level(logging.ERROR, logger="traj_sim")
    mem = MemorySink()
    Recorder(_Broken(), mem).emit(_frame())
    assert len(mem.events) == 1
    assert "_Broken" in caplog.text
