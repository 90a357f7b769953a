"""A world of shapes and lights, and the shading of rays through it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .material import Light, lighting
from .ray import Ray
from .shapes import Intersection, Plane, Shape, Sphere, hit
from .tuple import Tuple, color, point

WHITE = color(1.0, 1.0, 1.0)
BLACK = color(0.0, 0.0, 0.0)
YELLOW = color(1.0, 0.7, 0.0)
BLUE = color(0.0, 0.0, 0.7)

_OVER_POINT_SHIFT = 0.0001
_SHADOW_EPSILON = 0.00001
_STRIPE_WIDTH = 10.0


@dataclass
class Computations:
    """Values about an intersection that shading needs."""

    t: float
    shape: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool
    over_point: Tuple


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    """Compute the hit point, eye and normal vectors for ``intersection``."""
    position = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = intersection.shape.normal_at(position)
    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv
    return Computations(
        t=intersection.t,
        shape=intersection.shape,
        point=position,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        over_point=position + normalv * _OVER_POINT_SHIFT,
    )


def stripe_pattern(comps: Computations) -> Tuple:
    """Colour of the yellow and blue stripes, ten units wide along x."""
    if int(math.floor(comps.point.x / _STRIPE_WIDTH)) % 2 == 0:
        return YELLOW
    return BLUE


def checker_pattern(comps: Computations) -> Tuple:
    """Colour of the black and white checkerboard in the x-z plane."""
    size = comps.shape.material.pattern
    x_block = int(math.floor(comps.point.x / size))
    z_block = int(math.floor(comps.point.z / size))
    return WHITE if (x_block % 2 + z_block) % 2 else BLACK


def _no_ambient() -> Light:
    return Light(point(0, 0, 0), color(0, 0, 0))


@dataclass
class World:
    """Shapes, point lights and the ambient light placed at the camera."""

    shapes: list[Shape] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    ambient: Light = field(default_factory=_no_ambient)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of ``ray`` with the shapes, in shape order."""
        return [inter for shape in self.shapes for inter in shape.intersect(ray)]

    def is_shadowed(self, point: Tuple, light: Light) -> bool:
        """Tell whether a shape lies between ``point`` and ``light``."""
        towards = light.position - point
        distance = towards.length()
        closest = hit(self.intersect(Ray(point, towards.normalize())))
        return closest is not None and distance - closest.t > _SHADOW_EPSILON

    def shade_hit(self, comps: Computations, light: Light) -> Tuple:
        """Colour contributed by ``light`` at the prepared hit."""
        material = comps.shape.material
        if isinstance(comps.shape, Sphere) and material.pattern == 1:
            material = replace(material, color=stripe_pattern(comps))
        elif isinstance(comps.shape, Plane) and material.pattern > 0:
            material = replace(material, color=checker_pattern(comps))
        return lighting(material, light, comps.point, comps.eyev,
                        comps.normalv, self.is_shadowed(comps.over_point, light))

    def color_at(self, ray: Ray) -> Tuple:
        """Colour seen along ``ray``: ambient plus every light, or black on a miss."""
        closest = hit(self.intersect(ray))
        if closest is None:
            return color(0, 0, 0)
        comps = prepare_computations(closest, ray)
        result = self.shade_hit(comps, self.ambient)
        for light in self.lights:
            result = result + self.shade_hit(comps, light)
        return result