# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

log = logging.getLogger("traj_sim")


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout, *, with_shapes: bool = False):
        self.fp, self.with_shapes = fp, with_shapes

    def write(self, ev) -> None:
        payload = asdict(ev)
        if not self.with_shapes:
            payload.pop("shapes", None)
        self.fp.write(json.dumps(payload) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # never break the frame loop
                log.exception("recorder sink %s failed", type(s).__name__)
