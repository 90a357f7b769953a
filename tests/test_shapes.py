import math

import pytest

from minirt.matrix import scaling, translation
from minirt.ray import Ray
from minirt.shapes import Cube, Intersection, Plane, Shape, Sphere, hit
from minirt.tuple import point, vector


def _distance_from_origin(p):
    return (p - point(0, 0, 0)).length()


def test_hit_picks_lowest_nonnegative():
    s = Sphere()
    xs = [Intersection(5, s), Intersection(-3, s), Intersection(2, s)]
    assert hit(xs) is xs[2]


def test_hit_all_negative_is_none():
    s = Sphere()
    assert hit([Intersection(-2, s), Intersection(-1, s)]) is None


def test_hit_empty_is_none():
    assert hit([]) is None


def test_hit_zero_counts_and_ties_keep_first():
    s = Sphere()
    xs = [Intersection(0, s), Intersection(0, s), Intersection(1, s)]
    assert hit(xs) is xs[0]


def test_sphere_intersections_lie_on_surface():
    s = Sphere()
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    xs = s.intersect(ray)
    assert len(xs) == 2
    assert xs[0].t <= xs[1].t
    assert all(x.shape is s for x in xs)
    for x in xs:
        assert _distance_from_origin(ray.position(x.t)) == pytest.approx(1.0)


def test_sphere_miss():
    s = Sphere()
    assert s.intersect(Ray(point(0, 2, -5), vector(0, 0, 1))) == []


def test_scaled_sphere_surface_distance():
    s = Sphere(transform=scaling(vector(2, 2, 2)))
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    xs = s.intersect(ray)
    assert len(xs) == 2
    for x in xs:
        assert _distance_from_origin(ray.position(x.t)) == pytest.approx(2.0)


def test_translated_sphere_missed():
    s = Sphere(transform=translation(point(5, 0, 0)))
    assert s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []


def test_sphere_normal_on_axis_and_diagonal():
    s = Sphere()
    assert s.normal_at(point(1, 0, 0)).approx_equals(vector(1, 0, 0))
    k = math.sqrt(3) / 3
    n = s.normal_at(point(k, k, k))
    assert n.approx_equals(vector(k, k, k))
    assert n.is_vector()


def test_translated_sphere_normal():
    s = Sphere(transform=translation(point(0, 1, 0)))
    assert s.normal_at(point(1, 1, 0)).approx_equals(vector(1, 0, 0))


def test_scaled_sphere_normal_is_unit():
    s = Sphere(transform=scaling(vector(1, 0.5, 1)))
    n = s.normal_at(point(0, 0.5, 0.5))
    assert n.length() == pytest.approx(1.0)


def test_singular_transform_raises():
    s = Sphere(transform=scaling(vector(0, 1, 1)))
    with pytest.raises(ValueError):
        s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_plane_parallel_and_coplanar_rays_miss():
    p = Plane()
    assert p.local_intersect(Ray(point(0, 10, 0), vector(0, 0, 1))) == []
    assert p.local_intersect(Ray(point(0, 0, 0), vector(0, 0, 1))) == []


def test_plane_hit_from_above_lands_on_plane():
    p = Plane()
    ray = Ray(point(0, 1, 0), vector(0, -1, 0))
    xs = p.intersect(ray)
    assert len(xs) == 1
    assert xs[0].shape is p
    assert ray.position(xs[0].t).y == pytest.approx(0.0)


def test_plane_normal_is_constant():
    p = Plane()
    assert p.local_normal_at(point(10, 0, -10)).approx_equals(vector(0, 1, 0))
    assert p.normal_at(point(-5, 0, 150)).approx_equals(vector(0, 1, 0))


def test_cube_hits_opposite_faces():
    c = Cube()
    ray = Ray(point(5, 0.5, 0), vector(-1, 0, 0))
    xs = c.intersect(ray)
    assert len(xs) == 2
    first = ray.position(xs[0].t)
    second = ray.position(xs[1].t)
    assert first.x == pytest.approx(1.0)
    assert second.x == pytest.approx(-1.0)


def test_cube_ray_from_inside():
    c = Cube()
    xs = c.intersect(Ray(point(0, 0.5, 0), vector(0, 0, 1)))
    assert len(xs) == 2
    assert xs[0].t < 0 < xs[1].t


def test_cube_miss():
    c = Cube()
    assert c.intersect(Ray(point(2, 0, 2), vector(0, 0, -1))) == []


def test_cube_normals():
    c = Cube()
    assert c.local_normal_at(point(1, 0.5, -0.8)).approx_equals(vector(1, 0, 0))
    assert c.local_normal_at(point(-0.4, 0.3, -1)).approx_equals(vector(0, 0, -1))
    assert c.local_normal_at(point(0.3, -1, 0.2)).approx_equals(vector(0, -1, 0))