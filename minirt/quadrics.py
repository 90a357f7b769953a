"""Cylinders and cones, truncated along y and optionally capped."""

from __future__ import annotations

import math

from .ray import Ray
from .shapes import Intersection, Shape
from .tuple import Tuple, vector

_CAP_EPSILON = 0.0000001
_CYLINDER_A_EPSILON = 0.000001
_CONE_A_EPSILON = 0.0000001
_NORMAL_EPSILON = 0.00001


def check_cap(ray: Ray, t: float) -> bool:
    """Tell whether the ray at ``t`` lies within the unit radius of a cylinder cap."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= 1


def check_cone_cap(ray: Ray, t: float, limit: float) -> bool:
    """Tell whether the ray at ``t`` lies within a cone cap of radius ``|limit|``."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= limit * limit


def _truncated(shape: Shape, ray: Ray, a: float, b: float, disc: float,
               low: float, high: float) -> list[Intersection]:
    root = math.sqrt(disc)
    t0 = (-b - root) / (2 * a)
    t1 = (-b + root) / (2 * a)
    found = []
    for t in (min(t0, t1), max(t0, t1)):
        y = ray.origin.y + t * ray.direction.y
        if low < y < high:
            found.append(Intersection(t, shape))
    return found


class Cylinder(Shape):
    """A unit-radius cylinder about the object-space y axis, from y = 0 to ``height``."""

    def __init__(self, height: float, closed: bool = True) -> None:
        super().__init__()
        self.minimum = 0.0
        self.maximum = float(height)
        self.closed = bool(closed)

    def _caps(self, ray: Ray) -> list[Intersection]:
        if not self.closed or abs(ray.direction.y) < _CAP_EPSILON:
            return []
        found = []
        for limit in (self.minimum, self.maximum):
            t = (limit - ray.origin.y) / ray.direction.y
            if check_cap(ray, t):
                found.append(Intersection(t, self))
        return found

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x + d.z * d.z
        b = 2 * d.x * o.x + 2 * d.z * o.z
        c = o.x * o.x + o.z * o.z - 1
        disc = b * b - 4 * a * c
        if abs(a) < _CYLINDER_A_EPSILON:
            return self._caps(ray)
        if disc < 0:
            return []
        return (_truncated(self, ray, a, b, disc, self.minimum, self.maximum)
                + self._caps(ray))

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        dist = local_point.x * local_point.x + local_point.z * local_point.z
        if dist < 1 and local_point.y >= self.maximum - _NORMAL_EPSILON:
            return vector(0, 1, 0)
        if dist < 1 and local_point.y <= self.minimum + _NORMAL_EPSILON:
            return vector(0, -1, 0)
        return vector(local_point.x, 0, local_point.z)


class Cone(Shape):
    """A double cone x² + z² = y² cut to -``height`` < y < 0, apex at the origin."""

    def __init__(self, height: float, closed: bool = True) -> None:
        super().__init__()
        self.minimum = -float(height)
        self.maximum = 0.0
        self.closed = bool(closed)

    def _cap(self, ray: Ray) -> list[Intersection]:
        if not self.closed or abs(ray.direction.y) < _CAP_EPSILON:
            return []
        t = (self.minimum - ray.origin.y) / ray.direction.y
        if check_cone_cap(ray, t, self.minimum):
            return [Intersection(t, self)]
        return []

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2 * d.x * o.x - 2 * d.y * o.y + 2 * d.z * o.z
        c = o.x * o.x - o.y * o.y + o.z * o.z
        disc = b * b - 4 * a * c
        if abs(a) < _CONE_A_EPSILON or disc < 0:
            return []
        return (_truncated(self, ray, a, b, disc, self.minimum, self.maximum)
                + self._cap(ray))

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        dist = local_point.x * local_point.x + local_point.z * local_point.z
        if (dist <= abs(self.minimum) * 2
                and local_point.y <= self.minimum + _NORMAL_EPSILON):
            return vector(0, -1, 0)
        y = math.sqrt(dist)
        if local_point.y > 0:
            y = -y
        return vector(local_point.x, y, local_point.z)