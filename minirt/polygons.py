"""Flat polygons: triangles and unit squares."""

from __future__ import annotations

from .ray import Ray
from .shapes import Intersection, Shape
from .tuple import Tuple, point, vector

_DET_EPSILON = 0.0001
_LOW_EPSILON = 0.0001
_HIGH_EPSILON = 0.00001


class Triangle(Shape):
    """A triangle through three points, intersected by Möller–Trumbore."""

    def __init__(self, a: Tuple, b: Tuple, c: Tuple) -> None:
        super().__init__()
        self.a = a
        self.b = b
        self.c = c
        self.e1 = b - a
        self.e2 = c - a
        self.normal = self.e1.cross(self.e2).normalize()

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        dir_cross = ray.direction.cross(self.e2)
        det = self.e1.dot(dir_cross)
        if abs(det) < _DET_EPSILON:
            return []
        f = 1.0 / det
        a_to_origin = ray.origin - self.a
        u = f * a_to_origin.dot(dir_cross)
        if u < -_LOW_EPSILON or u > 1 + _HIGH_EPSILON:
            return []
        origin_cross = a_to_origin.cross(self.e1)
        v = f * ray.direction.dot(origin_cross)
        if v < -_LOW_EPSILON or u + v > 1 + _HIGH_EPSILON:
            return []
        return [Intersection(f * self.e2.dot(origin_cross), self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return self.normal


class Square(Shape):
    """The square spanning -1..1 in x and y on the object-space plane z = 0."""

    def __init__(self) -> None:
        super().__init__()
        self.t1 = Triangle(point(-1, 1, 0), point(-1, -1, 0), point(1, 1, 0))
        self.t2 = Triangle(point(1, -1, 0), point(-1, -1, 0), point(1, 1, 0))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        for half in (self.t2, self.t1):
            found = half.local_intersect(ray)
            if found:
                return [Intersection(x.t, self) for x in found]
        return []

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(0, 0, 1)