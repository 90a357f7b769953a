"""Building a renderable scene from a scene description."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Callable, Iterable

from .camera import Camera
from .material import Light, Material, material_with_color
from .matrix import (Matrix, identity, rotate_align, rotate_axis_angle,
                     scaling, translation, view_transform)
from .polygons import Square, Triangle
from .quadrics import Cone, Cylinder
from .shapes import Cube, Plane, Shape, Sphere
from .tuple import Tuple, color, parse_tuple, point, vector
from .validation import SceneError, strip_comment, validate_file
from .world import World

COLOR_CF = 0.003921569
"""Factor converting a 0..255 colour channel to the 0..1 range."""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(\d+(\.\d*)?|\.\d+))")
_CYLINDER_UP_TOLERANCE = 0.1


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _atod(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _rgb(text: str, factor: float = 1.0) -> Tuple:
    return parse_tuple(text, "c") * (factor * COLOR_CF)


def _orient(default: Tuple, normal: Tuple) -> Matrix:
    """Rotation taking ``default`` onto ``normal``, parallel cases included."""
    if default.cross(normal).length() == 0:
        if default.dot(normal) >= 0:
            return identity(4)
        helper = vector(1, 0, 0) if abs(default.x) < 0.9 else vector(0, 1, 0)
        return rotate_axis_angle(default.cross(helper).normalize(), math.pi)
    return rotate_align(default, normal)


@dataclass
class Scene:
    """Resolution, ambient light, cameras, lights and shapes of a scene."""

    width: int = -1
    height: int = -1
    ambient_ratio: float = -1.0
    ambient_color: Tuple = field(default_factory=lambda: color(0, 0, 0))
    cameras: list[Camera] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    shapes: list[Shape] = field(default_factory=list)

    def handle_line(self, fields: list[str]) -> None:
        """Apply one instruction; unknown instructions are ignored."""
        if not fields:
            return
        handler = self._handlers().get(fields[0])
        if handler is not None:
            handler(fields)

    def world(self, camera: Camera) -> World:
        """The world seen by ``camera``, with the ambient light at its origin."""
        return World(shapes=list(self.shapes), lights=list(self.lights),
                     ambient=Light(camera.origin, self.ambient_color))

    def _handlers(self) -> dict[str, Callable[[list[str]], None]]:
        return {
            "R": self._resolution,
            "A": self._ambient,
            "c": self._camera,
            "l": self._light,
            "sp": self._sphere,
            "pl": self._plane,
            "sq": self._square,
            "cy": self._cylinder,
            "tr": self._triangle,
            "co": self._cone,
            "cu": self._cube,
        }

    def _resolution(self, fields: list[str]) -> None:
        if self.width < 0:
            self.width = _atoi(fields[1])
            self.height = _atoi(fields[2])

    def _ambient(self, fields: list[str]) -> None:
        self.ambient_ratio = _atod(fields[1])
        self.ambient_color = _rgb(fields[2], self.ambient_ratio)

    def _camera(self, fields: list[str]) -> None:
        if self.width < 0:
            raise SceneError("the resolution must be given before any camera")
        fov = _atoi(fields[4]) * (math.pi / 180)
        camera = Camera(self.height, self.width, fov)
        camera.origin = parse_tuple(fields[1], "p")
        direction = parse_tuple(fields[2], "v")
        up = parse_tuple(fields[3], "v")
        camera.transform = view_transform(camera.origin,
                                          camera.origin + direction, up)
        self.cameras.append(camera)

    def _light(self, fields: list[str]) -> None:
        position = parse_tuple(fields[1], "p")
        brightness = _atod(fields[2])
        self.lights.append(Light(position, _rgb(fields[3], brightness)))

    def _sphere(self, fields: list[str]) -> None:
        centre = parse_tuple(fields[1], "p")
        radius = _atod(fields[2]) / 2
        material = material_with_color(_rgb(fields[4]))
        material.pattern = _atoi(fields[3])
        transform = translation(centre) @ scaling(point(radius, radius, radius))
        self.shapes.append(Sphere(transform, material))

    def _plane(self, fields: list[str]) -> None:
        centre = parse_tuple(fields[1], "p")
        normal = parse_tuple(fields[2], "v").normalize()
        material = Material(color=_rgb(fields[4]), ambient=0.1, diffuse=0.5,
                            specular=0.1, shininess=50,
                            pattern=_atoi(fields[3]))
        if normal.x == 0 and abs(normal.y) == 1 and normal.z == 0:
            rotation = identity(4)
        else:
            rotation = _orient(vector(0, 1, 0), normal)
        self.shapes.append(Plane(translation(centre) @ rotation, material))

    def _square(self, fields: list[str]) -> None:
        square = Square()
        centre = parse_tuple(fields[1], "p")
        normal = parse_tuple(fields[2], "v").normalize()
        side = _atod(fields[3])
        square.material = material_with_color(_rgb(fields[4]))
        if normal.x == 0 and normal.y == 0 and abs(normal.z) == 1:
            rotation = identity(4)
        else:
            rotation = _orient(vector(0, 0, 1), normal)
        placed = translation(centre) @ rotation
        square.transform = scaling(point(side, side, side)) @ placed
        self.shapes.append(square)

    def _cylinder(self, fields: list[str]) -> None:
        cylinder = Cylinder(_atod(fields[4]))
        centre = parse_tuple(fields[1], "p")
        normal = parse_tuple(fields[2], "v").normalize()
        radius = _atod(fields[3]) / 2
        cylinder.closed = bool(_atoi(fields[5]))
        cylinder.material = material_with_color(_rgb(fields[6]))
        if (abs(normal.x) < _CYLINDER_UP_TOLERANCE
                and abs(normal.y - 1.0) < _CYLINDER_UP_TOLERANCE
                and abs(normal.z) < _CYLINDER_UP_TOLERANCE):
            rotation = identity(4)
        else:
            rotation = _orient(vector(0, 1, 0), normal)
        placed = translation(centre) @ rotation
        cylinder.transform = placed @ scaling(point(radius, 1, radius))
        self.shapes.append(cylinder)

    def _triangle(self, fields: list[str]) -> None:
        triangle = Triangle(parse_tuple(fields[1], "p"),
                            parse_tuple(fields[2], "p"),
                            parse_tuple(fields[3], "p"))
        triangle.material = material_with_color(_rgb(fields[4]))
        self.shapes.append(triangle)

    def _cone(self, fields: list[str]) -> None:
        cone = Cone(_atod(fields[4]))
        centre = parse_tuple(fields[1], "p")
        normal = parse_tuple(fields[2], "v").normalize()
        radius = _atod(fields[3]) / 2
        cone.closed = bool(_atoi(fields[5]))
        cone.material = material_with_color(_rgb(fields[6]))
        if normal.x == 0 and abs(normal.y) == 1 and normal.z == 0:
            rotation = identity(4)
        else:
            rotation = _orient(vector(0, 1, 0), normal)
        placed = translation(centre) @ rotation
        cone.transform = placed @ scaling(point(radius, 1, radius))
        self.shapes.append(cone)

    def _cube(self, fields: list[str]) -> None:
        cube = Cube()
        centre = parse_tuple(fields[1], "p")
        normal = parse_tuple(fields[2], "v").normalize()
        half = _atod(fields[3]) / 2
        cube.material = material_with_color(_rgb(fields[4]))
        if normal.approx_equals(vector(1, 1, 0).normalize()):
            rotation = identity(4)
        else:
            rotation = _orient(vector(0, 1, 0), normal)
        placed = translation(centre) @ rotation
        cube.transform = scaling(point(half, half, half)) @ placed
        self.shapes.append(cube)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a scene description."""
    scene = Scene()
    for number, line in enumerate(lines, 1):
        fields = strip_comment(line).split()
        try:
            scene.handle_line(fields)
        except (IndexError, ValueError, ZeroDivisionError) as exc:
            raise SceneError(f"line {number}: cannot build "
                             f"'{' '.join(fields)}': {exc}") from exc
    return scene


def load_scene(path: str | PathLike[str]) -> Scene:
    """Validate and parse the scene file at ``path``."""
    validate_file(path)
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise SceneError(f"can't open the file '{path}'") from exc
    return parse_scene(lines)