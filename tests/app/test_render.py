import pytest

from traj_sim.app.protocols import RenderSink
from traj_sim.app.render import CircleFilled, MemoryRenderSink, RectTransform
from traj_sim.domain.entities.geography import Point, Rect


def test_transform_maps_corners():
    src = Rect.from_min_size((0, 0), (2, 1))
    dst = Rect.from_min_size((10, 20), (200, 100))
    tf = RectTransform.from_to(src, dst)
    assert tf * (0, 0) == Point(10.0, 20.0)
    assert tf * (2, 1) == Point(210.0, 120.0)
    assert tf * Point(1.0, 0.5) == Point(110.0, 70.0)


def test_inverse_round_trips():
    tf = RectTransform.canvas_for(Rect.from_min_size((5, 5), (300, 600)))
    assert tf.src == Rect.from_min_size((0, 0), (1.0, 2.0))
    p = tf.inverse() * (tf * (0.3, 1.7))
    assert p.x == pytest.approx(0.3) and p.y == pytest.approx(1.7)


def test_memory_sink_keeps_batches():
    sink = MemoryRenderSink()
    assert isinstance(sink, RenderSink)
    assert sink.last == []
    c = CircleFilled(Point(1.0, 1.0), 3.0)
    sink.extend(iter([c]))
    sink.extend([])
    assert sink.batches == [[c], []]
    assert sink.last == []
