import pytest

from minirt.matrix import scaling
from minirt.polygons import Square, Triangle
from minirt.ray import Ray
from minirt.tuple import point, vector


@pytest.fixture
def tri():
    return Triangle(point(0, 1, 0), point(-1, 0, 0), point(1, 0, 0))


def test_triangle_normal_is_unit_and_perpendicular(tri):
    n = tri.local_normal_at(point(0, 0.5, 0))
    assert n.length() == pytest.approx(1.0)
    assert n.dot(tri.e1) == pytest.approx(0.0)
    assert n.dot(tri.e2) == pytest.approx(0.0)
    assert n.is_vector()


def test_triangle_normal_same_everywhere(tri):
    first = tri.local_normal_at(point(0, 0.5, 0))
    assert tri.local_normal_at(point(-0.5, 0.75, 0)).approx_equals(first)
    assert tri.normal_at(point(0.5, 0.25, 0)).approx_equals(first)


def test_triangle_edges(tri):
    assert tri.e1.approx_equals(point(-1, 0, 0) - point(0, 1, 0))
    assert tri.e2.approx_equals(point(1, 0, 0) - point(0, 1, 0))


def test_triangle_parallel_ray_misses(tri):
    assert tri.local_intersect(Ray(point(0, -1, -2), vector(0, 1, 0))) == []


@pytest.mark.parametrize("origin", [
    point(1, 1, -2),
    point(-1, 1, -2),
    point(0, -1, -2),
])
def test_triangle_ray_past_edges_misses(tri, origin):
    assert tri.local_intersect(Ray(origin, vector(0, 0, 1))) == []


def test_triangle_hit(tri):
    ray = Ray(point(0, 0.5, -2), vector(0, 0, 1))
    xs = tri.intersect(ray)
    assert len(xs) == 1
    assert xs[0].shape is tri
    assert xs[0].t == pytest.approx(2.0)
    assert ray.position(xs[0].t).z == pytest.approx(0.0)


def test_square_normal():
    sq = Square()
    assert sq.local_normal_at(point(0.3, 0.2, 0)).approx_equals(vector(0, 0, 1))


@pytest.mark.parametrize("x, y", [(0.5, 0.5), (-0.5, -0.5), (0.9, -0.9),
                                  (-0.9, 0.9), (0.0, 0.0)])
def test_square_hits_both_halves(x, y):
    sq = Square()
    ray = Ray(point(x, y, -5), vector(0, 0, 1))
    xs = sq.intersect(ray)
    assert len(xs) == 1
    assert xs[0].shape is sq
    assert xs[0].t == pytest.approx(5.0)


@pytest.mark.parametrize("x, y", [(2, 0), (0, -1.5), (1.2, 1.2)])
def test_square_misses_outside(x, y):
    sq = Square()
    assert sq.intersect(Ray(point(x, y, -5), vector(0, 0, 1))) == []


def test_scaled_square_hit():
    sq = Square()
    ray = Ray(point(1.5, 1.5, -5), vector(0, 0, 1))
    assert sq.intersect(ray) == []
    sq.transform = scaling(vector(2, 2, 2))
    xs = sq.intersect(ray)
    assert len(xs) == 1
    assert ray.position(xs[0].t).z == pytest.approx(0.0)