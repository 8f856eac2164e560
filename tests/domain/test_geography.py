import pytest

from traj_sim.domain.entities.geography import Path, Point, Rect, to_point


def test_path_from_points_builds_segments():
    path = Path.from_points([(0, 0), (3, 0), (3, 4)])
    assert [s.length for s in path.segments] == [3.0, 4.0]
    assert path.segments[1].start == Point(3.0, 0.0)
    assert path.total_length == 7.0
    assert list(path.cumulative_lengths()) == [0.0, 3.0, 7.0]


def test_path_from_single_point_is_empty():
    path = Path.from_points([Point(1.0, 1.0)])
    assert path.segments == []
    assert path.total_length == 0.0
    assert path.cumulative_lengths().size == 0


def test_to_point_passthrough():
    p = Point(1.0, 2.0)
    assert to_point(p) is p
    assert to_point((1, 2)) == p


def test_rect_square_proportions():
    assert Rect.from_min_size((0, 0), (800, 400)).square_proportions() == (2.0, 1.0)
    assert Rect.from_min_size((10, 10), (300, 600)).square_proportions() == (1.0, 2.0)
    assert Rect.from_min_size((0, 0), (5, 5)).square_proportions() == (1.0, 1.0)


def test_rect_size():
    r = Rect.from_min_size((10, 20), (30, 40))
    assert r.max == Point(40.0, 60.0)
    assert r.size == pytest.approx((30.0, 40.0))
