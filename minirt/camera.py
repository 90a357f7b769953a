"""A pinhole camera and the loop that renders a world through it."""

from __future__ import annotations

import math
from typing import Callable, Protocol

from .matrix import Matrix, identity
from .ray import Ray
from .tuple import Tuple, point

BAR_WIDTH = 50


class _Scene(Protocol):
    def color_at(self, ray: Ray) -> Tuple: ...


class Camera:
    """Maps canvas pixels to rays in world space."""

    def __init__(self, h_size: int, v_size: int, fov: float) -> None:
        self.h_size = h_size
        self.v_size = v_size
        self.origin = point(0, 0, 0)
        self.index = 0
        self.total = 1
        self.half = math.tan(fov / 2)
        self.aspect = h_size / v_size
        if self.aspect >= 1:
            self.half_width = self.half
            self.half_height = self.half / self.aspect
        else:
            self.half_width = self.half * self.aspect
            self.half_height = self.half
        self.pixel_size = self.half_width * 2 / h_size
        self._transform = identity(4)
        self._inverse: Matrix | None = None

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix) -> None:
        self._transform = matrix
        self._inverse = None

    def _inverse_transform(self) -> Matrix:
        if self._inverse is None:
            self._inverse = self._transform.inverse()
        return self._inverse

    def ray_for_pixel(self, y: int, x: int) -> Ray:
        """Return the ray through the centre of the pixel in row ``y``, column ``x``."""
        world_x = self.half_width - (y + 0.5) * self.pixel_size
        world_y = self.half_height - (x + 0.5) * self.pixel_size
        inverse = self._inverse_transform()
        pixel = inverse.apply(point(world_y, world_x, -1))
        origin = inverse.apply(point(0, 0, 0))
        return Ray(origin, (pixel - origin).normalize())


def progress_bar(progress: float, index: int, total: int) -> str:
    """Text of the progress line for camera ``index`` (zero-based) of ``total``."""
    filled = int(BAR_WIDTH * progress)
    bar = "".join("+" if i <= filled else " " for i in range(BAR_WIDTH))
    return f"RENDERING SCENE: {index + 1}/{total} [{bar}] "


def render(camera: Camera, world: _Scene,
           to_pixel: Callable[[Tuple], int]) -> list[list[int]]:
    """Render ``world`` into rows of packed pixels, printing progress."""
    canvas: list[list[int]] = []
    pixels = camera.h_size * camera.v_size
    shown = None
    for y in range(camera.h_size):
        row = []
        for x in range(camera.v_size):
            row.append(to_pixel(world.color_at(camera.ray_for_pixel(y, x))))
            line = progress_bar((y * camera.v_size + x) / pixels,
                                camera.index, camera.total)
            if line != shown:
                print(line, end="\r", flush=True)
                shown = line
        canvas.append(row)
    return canvas