"""The shape base class, spheres, planes, cubes and the hit test."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .material import Material, material_with_color
from .matrix import Matrix, identity
from .ray import Ray
from .tuple import Tuple, color, point, vector

_NO_HIT = float(0xFFFFFFFFFFFFF)
_PLANE_EPSILON = 0.000001
_AXIS_EPSILON = 0.00001


@dataclass(frozen=True)
class Intersection:
    """A ray parameter ``t`` at which a ray meets ``shape``."""

    t: float
    shape: Shape


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Return the intersection with the smallest non-negative ``t``, if any."""
    best = None
    lowest = _NO_HIT
    for candidate in intersections:
        if 0 <= candidate.t < lowest:
            lowest = candidate.t
            best = candidate
    return best


class Shape(ABC):
    """An object in the scene, placed by a transform and drawn with a material."""

    def __init__(self, transform: Matrix | None = None,
                 material: Material | None = None) -> None:
        self.transform = transform if transform is not None else identity(4)
        self.material = (material if material is not None
                         else material_with_color(color(1, 1, 1)))

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._transform = matrix
        self._inverse: Matrix | None = None

    @property
    def inverse(self) -> Matrix:
        """Inverse of the transform; raises ``ValueError`` if it is singular."""
        if self._inverse is None:
            self._inverse = self._transform.inverse()
        return self._inverse

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersections with a ray given in object space."""

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Surface normal at a point given in object space."""

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersections with a ray given in world space."""
        return self.local_intersect(ray.transform(self.inverse))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal at a point given in world space."""
        local_point = self.inverse.apply(world_point)
        local_normal = self.local_normal_at(local_point)
        world = self.transform.transpose().apply(local_normal)
        return vector(world.x, world.y, world.z).normalize()


class Sphere(Shape):
    """A unit sphere centred on the object-space origin."""

    def __init__(self, transform: Matrix | None = None,
                 material: Material | None = None) -> None:
        super().__init__(transform, material)
        self.centre = point(0, 0, 0)

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        sphere_ray = ray.origin - self.centre
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(sphere_ray)
        discriminant = b * b - 4 * a * (sphere_ray.dot(sphere_ray) - 1)
        if discriminant < 0:
            return []
        root = math.sqrt(discriminant)
        return [Intersection((-b - root) / (2 * a), self),
                Intersection((-b + root) / (2 * a), self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - point(0, 0, 0)

    def normal_at(self, world_point: Tuple) -> Tuple:
        inverse = self.inverse
        object_normal = self.local_normal_at(inverse.apply(world_point))
        world = inverse.transpose().apply(object_normal)
        return vector(world.x, world.y, world.z).normalize()


class Plane(Shape):
    """The object-space plane y = 0."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        if abs(ray.direction.y) < _PLANE_EPSILON:
            return []
        return [Intersection(-ray.origin.y / ray.direction.y, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return vector(0, 1, 0)


def _axis(origin: float, direction: float) -> tuple[float, float]:
    t_min_numerator = -1 - origin
    t_max_numerator = 1 - origin
    if abs(direction) >= _AXIS_EPSILON:
        t_min = t_min_numerator / direction
        t_max = t_max_numerator / direction
    else:
        t_min = t_min_numerator * math.inf
        t_max = t_max_numerator * math.inf
    high = t_max if t_max >= t_min else t_min
    low = t_min if t_min <= t_max else t_max
    return low, high


def _largest(values: Iterable[float]) -> float:
    result = -math.inf
    for value in values:
        if value > result:
            result = value
    return result


def _smallest(values: Iterable[float]) -> float:
    result = math.inf
    for value in values:
        if value < result:
            result = value
    return result


class Cube(Shape):
    """An axis-aligned cube spanning -1..1 on every object-space axis."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        bounds = [
            _axis(ray.origin.x, ray.direction.x),
            _axis(ray.origin.y, ray.direction.y),
            _axis(ray.origin.z, ray.direction.z),
        ]
        t_min = _largest(low for low, _ in bounds)
        t_max = _smallest(high for _, high in bounds)
        if t_min > t_max:
            return []
        return [Intersection(t_min, self), Intersection(t_max, self)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        ax, ay, az = abs(local_point.x), abs(local_point.y), abs(local_point.z)
        largest = max(max(ax, ay), az)
        if largest == ax:
            return vector(local_point.x, 0, 0)
        if largest == ay:
            return vector(0, local_point.y, 0)
        return vector(0, 0, local_point.z)